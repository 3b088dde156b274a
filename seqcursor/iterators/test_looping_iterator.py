# Copyright (c) Meta Platforms, Inc. and affiliates.
import itertools

from seqcursor.iterators.abstract_iterator import CursorIterator
from seqcursor.iterators.looping_iterator import (
    LoopingIterator,
    LoopingIteratorState,
)
from seqcursor.iterators.sequence_iterator import (
    SequenceIterator,
    SequenceIteratorState,
)


def test_loops_over_items():
    looping = LoopingIterator(SequenceIterator([1, 2, 3]))
    out = list(itertools.islice(looping.create_iter(), 8))
    assert out == [1, 2, 3, 1, 2, 3, 1, 2]
    assert looping.epoch == 2


def test_empty_iterator_stops():
    looping = LoopingIterator(SequenceIterator([]))
    assert list(looping.create_iter()) == []
    assert looping.epoch == -1


def test_state_resume_mid_epoch():
    looping = LoopingIterator(SequenceIterator("abc"))
    it = looping.create_iter()
    assert [next(it) for _ in range(5)] == ["a", "b", "c", "a", "b"]
    state = looping.get_state()
    assert state.epoch == 1
    assert state.iterator_state.cursor == 2

    resumed = state.build()
    out = list(itertools.islice(resumed.create_iter(), 4))
    assert out == ["c", "a", "b", "c"]
    assert resumed.epoch == 2


def test_state_build_from_scratch():
    state = LoopingIteratorState(
        iterator_state=SequenceIteratorState(items=[5, 6]),
    )
    looping = state.build()
    assert list(itertools.islice(looping.create_iter(), 3)) == [5, 6, 5]


class CountdownIterator(CursorIterator):
    def __init__(self, start: int):
        self.start = start
        self.remaining = start

    def __len__(self):
        return self.start

    def has_next(self):
        return self.remaining > 0

    def peek(self, default=None):
        return self.remaining if self.has_next() else default

    def next(self, default=None):
        if not self.has_next():
            return default
        self.remaining -= 1
        return self.remaining + 1

    def reset(self):
        self.remaining = self.start

    def get_state(self):
        return SequenceIteratorState(
            items=list(range(self.start, 0, -1)),
            cursor=self.start - self.remaining,
        )


def test_loops_over_any_cursor_iterator():
    looping = LoopingIterator(CountdownIterator(3))
    out = list(itertools.islice(looping.create_iter(), 7))
    assert out == [3, 2, 1, 3, 2, 1, 3]
    assert looping.get_state().iterator_state.cursor == 1


def test_empty_cursor_iterator_stops():
    assert list(LoopingIterator(CountdownIterator(0)).create_iter()) == []
