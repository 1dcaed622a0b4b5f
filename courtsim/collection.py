"""A simple ordered collection of shared elements."""

from __future__ import annotations

import sys
from typing import Generic, Iterator, TextIO, TypeVar

T = TypeVar("T")


class ElementList(Generic[T]):
    """Ordered list of elements with bounds-checked access."""

    def __init__(self) -> None:
        self._elements: list[T] = []

    def add(self, element: T) -> None:
        self._elements.append(element)

    def get(self, index: int) -> T:
        """Element at ``index``; negative or too large indices raise IndexError."""
        if not 0 <= index < len(self._elements):
            raise IndexError("Index invalid în ListaElemente")
        return self._elements[index]

    def show_all(self, out: TextIO | None = None) -> None:
        """Write every element on its own line."""
        stream = out or sys.stdout
        for element in self._elements:
            stream.write(f"{element}\n")

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)