# Copyright (c) Meta Platforms, Inc. and affiliates.


class SeqCursorError(Exception):
    pass


from seqcursor.iterators.abstract_iterator import (  # noqa: E402
    CursorIterator,
    IteratorState,
    StatefulIterator,
)
from seqcursor.iterators.looping_iterator import (  # noqa: E402
    LoopingIterator,
    LoopingIteratorState,
)
from seqcursor.iterators.sequence_iterator import (  # noqa: E402
    SequenceIterator,
    SequenceIteratorState,
)
from seqcursor.iterators.tree_iterator import (  # noqa: E402
    CallableTreeAdapter,
    ElementTreeAdapter,
    TreeAdapter,
    TreeIterator,
    flatten_preorder,
)

__all__ = [
    "SeqCursorError",
    "StatefulIterator",
    "IteratorState",
    "CursorIterator",
    "SequenceIterator",
    "SequenceIteratorState",
    "TreeIterator",
    "TreeAdapter",
    "CallableTreeAdapter",
    "ElementTreeAdapter",
    "flatten_preorder",
    "LoopingIterator",
    "LoopingIteratorState",
]
