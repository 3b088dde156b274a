# Copyright (c) Meta Platforms, Inc. and affiliates.
from logging import getLogger
from typing import Any, Generic, Iterable, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

from seqcursor.iterators.abstract_iterator import CursorIterator, IteratorState

logger = getLogger(__name__)

T = TypeVar("T")


class SequenceIteratorState(BaseModel, IteratorState):
    model_config = ConfigDict(extra="forbid")
    items: list[Any]
    cursor: int = 0

    @model_validator(mode="after")
    def check_cursor(self) -> "SequenceIteratorState":
        if not 0 <= self.cursor <= len(self.items):
            raise ValueError(
                f"cursor={self.cursor} is outside of [0, {len(self.items)}]"
            )
        return self

    def build(self) -> "SequenceIterator":
        sequence_iterator = SequenceIterator(self.items)
        if self.cursor != 0:
            sequence_iterator._set_cursor(self.cursor)
        return sequence_iterator


class SequenceIterator(CursorIterator[T, SequenceIteratorState], Generic[T]):
    """
    Cursor over a list materialized at construction time.

    The items are copied into the iterator, so the caller may mutate or
    discard the source afterwards.
    """

    def __init__(self, items: Iterable[T]):
        self._items: list[T] = list(items)
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._items)

    @property
    def cursor(self) -> int:
        return self._cursor

    def has_next(self) -> bool:
        return self._cursor < len(self._items)

    def peek(self, default: Any = None) -> T | Any:
        if not self.has_next():
            return default
        return self._items[self._cursor]

    def next(self, default: Any = None) -> T | Any:
        if not self.has_next():
            return default
        item = self._items[self._cursor]
        self._cursor += 1
        return item

    def reset(self) -> None:
        self._cursor = 0

    def get_state(self) -> SequenceIteratorState:
        return SequenceIteratorState(items=list(self._items), cursor=self._cursor)

    def _set_cursor(self, target_cursor: int):
        logger.info(f"Setting cursor to {target_cursor} of {len(self._items)} items")
        assert 0 <= target_cursor <= len(self._items), (
            target_cursor,
            len(self._items),
        )
        self._cursor = target_cursor
