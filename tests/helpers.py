"""Generators shared by the test modules."""

import typing as tp

from populating import DONE, Entry


class CountingGenerator:
    """Yields the given items, then DONE, recording every call."""

    def __init__(self, items: tp.Iterable[tp.Any]) -> None:
        self._items = list(items)
        self.calls = 0

    def produce(self) -> tp.Any:
        self.calls += 1
        if self.calls <= len(self._items):
            return self._items[self.calls - 1]
        return DONE


class CountingEntryGenerator:
    """Yields an Entry per pair, then DONE, recording every call."""

    def __init__(self, pairs: tp.Iterable[tp.Tuple[tp.Any, tp.Any]]) -> None:
        self._pairs = list(pairs)
        self.calls = 0

    def build_entry(self) -> tp.Any:
        self.calls += 1
        if self.calls <= len(self._pairs):
            return Entry(*self._pairs[self.calls - 1])
        return DONE
