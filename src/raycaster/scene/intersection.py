"""Intersection records and hit selection.

An Intersection pairs a ray parameter ``time`` with the shape that was struck.
Intersections is an immutable sequence of records kept sorted ascending by
time, so the first non-negative entry is always the visible hit.

A sphere produces either zero or two records (equal times for a tangent ray);
other shape kinds may produce any number, which the sorted sequence absorbs.

Example:
    >>> from src.raycaster.geometry.sphere import sphere
    >>> from src.raycaster.scene.intersection import Intersection, intersections
    >>> s = sphere()
    >>> xs = intersections(Intersection(2.0, s), Intersection(-1.0, s))
    >>> xs.hit().time
    2.0
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, overload

from src.raycaster.core.numeric import approx_equal

if TYPE_CHECKING:
    from src.raycaster.geometry.shape import Shape


@dataclass(frozen=True, eq=False)
class Intersection:
    """A single ray/shape intersection.

    Attributes:
        time: The ray parameter at which the intersection occurs.
        object: The shape that was intersected.
    """

    time: float
    object: Shape

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return approx_equal(self.time, other.time) and self.object == other.object

    __hash__ = None  # type: ignore[assignment]


class Intersections(Sequence[Intersection]):
    """An ordered, immutable collection of intersections.

    Records are sorted ascending by time on construction. The empty
    collection is the normal "no intersections" result, not an error.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Intersection] = ()) -> None:
        self._items: tuple[Intersection, ...] = tuple(sorted(items, key=lambda i: i.time))

    @overload
    def __getitem__(self, index: int) -> Intersection: ...

    @overload
    def __getitem__(self, index: slice) -> Intersections: ...

    def __getitem__(self, index: int | slice) -> Intersection | Intersections:
        if isinstance(index, slice):
            return Intersections(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._items)

    def __add__(self, other: Intersections) -> Intersections:
        if not isinstance(other, Intersections):
            return NotImplemented
        return Intersections(self._items + other._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersections):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    @property
    def times(self) -> list[float]:
        """Get the intersection times in ascending order."""
        return [i.time for i in self._items]

    def hit(self) -> Intersection | None:
        """Select the visible intersection.

        Returns:
            The intersection with the smallest non-negative time, or None if
            every intersection lies behind the ray origin.
        """
        for item in self._items:
            if item.time >= 0.0:
                return item
        return None

    def __repr__(self) -> str:
        return f"Intersections({list(self._items)!r})"


NO_INTERSECTIONS = Intersections()


def intersections(*items: Intersection) -> Intersections:
    """Aggregate individual intersections into a sorted collection."""
    return Intersections(items)
