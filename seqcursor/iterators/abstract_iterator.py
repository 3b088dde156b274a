# Copyright (c) Meta Platforms, Inc. and affiliates.
import abc
from typing import Any, Generator, Generic, TypeVar

T = TypeVar("T")
C = TypeVar("C")


class StatefulIterator(Generic[T, C], abc.ABC):

    @abc.abstractmethod
    def get_state(self) -> C:
        pass

    @abc.abstractmethod
    def create_iter(self) -> Generator[T, Any, None]:
        pass


class IteratorState(Generic[C]):
    @abc.abstractmethod
    def build(self) -> StatefulIterator[T, C]:
        pass


class CursorIterator(StatefulIterator[T, C]):
    """
    Pull-based traversal over a finite ordered source.

    Exhaustion is never an error: peek() and next() return `default`
    once has_next() is False, and reset() always reopens traversal.
    """

    @abc.abstractmethod
    def __len__(self) -> int:
        pass

    @abc.abstractmethod
    def has_next(self) -> bool:
        pass

    @abc.abstractmethod
    def peek(self, default: Any = None) -> T | Any:
        pass

    @abc.abstractmethod
    def next(self, default: Any = None) -> T | Any:
        pass

    @abc.abstractmethod
    def reset(self) -> None:
        pass

    def create_iter(self) -> Generator[T, Any, None]:
        while self.has_next():
            yield self.next()
