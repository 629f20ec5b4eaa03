"""Observable list of integers that views subscribe to."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Protocol, Sequence, Tuple

from .algorithms import SortAlgorithm, SortStep

LOGGER = logging.getLogger(__name__)


class DataObserver(Protocol):
    def data_changed(self, data: Tuple[int, ...], step: Optional[SortStep] = None) -> None:  # pragma: no cover - Protocol helper
        ...


class DataStructureModel:
    """Hold the data being visualized and notify observers of every change."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._data: List[int] = [int(value) for value in values]
        self._observers: List[DataObserver] = []

    @property
    def data(self) -> Tuple[int, ...]:
        return tuple(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def add_observer(self, observer: DataObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: DataObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    @property
    def observers(self) -> Sequence[DataObserver]:
        return tuple(self._observers)

    def notify_observers(self, step: Optional[SortStep] = None) -> None:
        snapshot = tuple(self._data)
        for observer in list(self._observers):
            observer.data_changed(snapshot, step)

    def insert(self, value: int) -> None:
        """Append *value* and notify observers."""

        self._data.append(int(value))
        LOGGER.debug("Inserted %s", value)
        self.notify_observers()

    def reset(self) -> None:
        """Clear the data and notify observers."""

        self._data.clear()
        LOGGER.debug("Model reset")
        self.notify_observers()

    def sort(self, algorithm: SortAlgorithm, *, animate: bool = False) -> int:
        """Sort with *algorithm*; ``animate`` also notifies after every step."""

        on_step = (lambda _data, step: self.notify_observers(step)) if animate else None
        count = algorithm.sort(self._data, on_step=on_step)
        self.notify_observers()
        return count

    def iter_sort(self, algorithm: SortAlgorithm) -> Iterator[SortStep]:
        """Advance *algorithm* one mutation per iteration, notifying each time.

        Mutating the model while the generator is suspended is undefined.
        """

        LOGGER.info("Sorting using %s...", algorithm.display_name)
        for step in algorithm.steps(self._data):
            self.notify_observers(step)
            yield step
        self.notify_observers()
