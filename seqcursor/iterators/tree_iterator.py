# Copyright (c) Meta Platforms, Inc. and affiliates.
import abc
import xml.etree.ElementTree as ET
from logging import getLogger
from typing import Any, Callable, Sequence

from seqcursor.iterators.sequence_iterator import SequenceIterator

logger = getLogger(__name__)


class TreeAdapter(abc.ABC):
    """
    What the tree walk needs to know about a foreign structure: which values
    are traversable nodes, and the ordered children of such a node.
    """

    @abc.abstractmethod
    def is_node(self, value: Any) -> bool:
        pass

    @abc.abstractmethod
    def children(self, node: Any) -> Sequence[Any]:
        pass


class CallableTreeAdapter(TreeAdapter):
    def __init__(
        self,
        is_node: Callable[[Any], bool],
        children: Callable[[Any], Sequence[Any]],
    ):
        self._is_node = is_node
        self._children = children

    def is_node(self, value: Any) -> bool:
        return bool(self._is_node(value))

    def children(self, node: Any) -> Sequence[Any]:
        return self._children(node)


class ElementTreeAdapter(TreeAdapter):
    """
    Adapts xml.etree elements. Comments and processing instructions carry a
    factory function as their tag and are treated as non-element content.
    """

    def is_node(self, value: Any) -> bool:
        return isinstance(value, ET.Element) and isinstance(value.tag, str)

    def children(self, node: ET.Element) -> Sequence[ET.Element]:
        return list(node)


def flatten_preorder(root: Any, adapter: TreeAdapter) -> list[Any]:
    """
    Depth-first pre-order walk: a node is visited before its children, and
    children left to right. Values rejected by `adapter.is_node` are dropped
    along with their subtrees.
    """
    nodes = []
    stack = [root]
    while len(stack) > 0:
        value = stack.pop()
        if not adapter.is_node(value):
            continue
        nodes.append(value)
        # Reversed so the leftmost child is popped first
        stack.extend(reversed(list(adapter.children(value))))
    return nodes


class TreeIterator(SequenceIterator):
    """
    SequenceIterator over the pre-order flattening of a tree. The walk runs
    once, eagerly, in the constructor; the tree is never touched again.
    """

    def __init__(self, root: Any, adapter: TreeAdapter | None = None):
        if adapter is None:
            adapter = ElementTreeAdapter()
        nodes = flatten_preorder(root, adapter)
        if len(nodes) == 0:
            logger.debug(f"Root {root!r} is not a traversable node, nothing to visit")
        else:
            logger.debug(f"Materialized {len(nodes)} nodes in pre-order")
        super().__init__(nodes)
