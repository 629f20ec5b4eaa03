"""Interchangeable in-place sorting routines.

Each algorithm yields a :class:`SortStep` after every mutation of the list so
callers can redraw between steps, either synchronously through
:meth:`SortAlgorithm.sort` or one step at a time from :meth:`SortAlgorithm.steps`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, MutableSequence, Optional, Tuple

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SortStep:
    """A single mutation: ``swap``, ``shift`` or ``place`` at *indices*."""

    action: str
    indices: Tuple[int, ...]


StepCallback = Callable[[MutableSequence[int], SortStep], None]


class SortAlgorithm(ABC):
    """Base strategy. Subclasses implement :meth:`steps` only."""

    name = "abstract"

    def sort(self, data: MutableSequence[int], on_step: Optional[StepCallback] = None) -> int:
        """Sort *data* in place, calling *on_step* after each mutation.

        Returns the number of mutations performed.
        """

        LOGGER.info("Sorting using %s...", self.display_name)
        count = 0
        for step in self.steps(data):
            count += 1
            if on_step is not None:
                on_step(data, step)
        LOGGER.debug("%s finished after %d steps", self.display_name, count)
        return count

    @abstractmethod
    def steps(self, data: MutableSequence[int]) -> Iterator[SortStep]:
        ...

    @property
    def display_name(self) -> str:
        return type(self).__name__

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class BubbleSort(SortAlgorithm):
    name = "bubble"

    def steps(self, data: MutableSequence[int]) -> Iterator[SortStep]:
        size = len(data)
        for i in range(size):
            for j in range(size - i - 1):
                if data[j] > data[j + 1]:
                    data[j], data[j + 1] = data[j + 1], data[j]
                    yield SortStep("swap", (j, j + 1))


class InsertionSort(SortAlgorithm):
    name = "insertion"

    def steps(self, data: MutableSequence[int]) -> Iterator[SortStep]:
        for i in range(1, len(data)):
            key = data[i]
            j = i - 1
            while j >= 0 and data[j] > key:
                data[j + 1] = data[j]
                yield SortStep("shift", (j, j + 1))
                j -= 1
            if j + 1 != i:
                data[j + 1] = key
                yield SortStep("place", (j + 1,))


_ALGORITHMS: Dict[str, type[SortAlgorithm]] = {
    BubbleSort.name: BubbleSort,
    InsertionSort.name: InsertionSort,
}


def available_algorithms() -> List[str]:
    return list(_ALGORITHMS)


def get_algorithm(name: str) -> SortAlgorithm:
    """Return a fresh algorithm instance registered under *name*."""

    try:
        return _ALGORITHMS[name.lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown sort algorithm '{name}'. Available: {tuple(_ALGORITHMS)}"
        ) from None
