# Copyright (c) Meta Platforms, Inc. and affiliates.
from logging import getLogger

from pydantic import BaseModel, ConfigDict

from seqcursor.iterators.abstract_iterator import (
    CursorIterator,
    IteratorState,
    StatefulIterator,
)
from seqcursor.iterators.sequence_iterator import SequenceIteratorState

logger = getLogger(__name__)


class LoopingIteratorState(BaseModel, IteratorState):
    model_config = ConfigDict(extra="forbid")
    iterator_state: SequenceIteratorState
    epoch: int = -1

    def build(self) -> "LoopingIterator":
        return LoopingIterator(
            iterator=self.iterator_state.build(),
            epoch=self.epoch,
        )


class LoopingIterator(StatefulIterator):
    def __init__(self, iterator: CursorIterator, epoch: int = -1):
        self.iterator = iterator
        self.epoch = epoch

    def get_state(self) -> LoopingIteratorState:
        return LoopingIteratorState(
            iterator_state=self.iterator.get_state(), epoch=self.epoch
        )

    def create_iter(self):
        if len(self.iterator) == 0:
            return
        # Resuming mid-epoch finishes the current pass before rewinding
        if self.epoch >= 0 and self.iterator.has_next():
            yield from self.iterator.create_iter()
        while True:
            self.epoch += 1
            self.iterator.reset()
            logger.debug(f"Starting epoch {self.epoch}")
            yield from self.iterator.create_iter()
