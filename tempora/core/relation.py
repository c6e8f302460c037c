"""Qualitative temporal relations shared by instants and periods.

This module declares TemporalRelations, the capability set of Allen-style
relations every temporal entity evaluates against another at an explicit
comparison granularity. Instant implements it with zero-duration
semantics; a period type supplies the interval semantics.

Inverse relations and ``adjacent`` are defined here in terms of the
primitive ones, so mixed instant/period comparisons dispatch to the
right operand's implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from tempora.units.granularity import Granularity

RELATION_NAMES: tuple[str, ...] = (
    "before",
    "after",
    "equals",
    "meets",
    "met_by",
    "adjacent",
    "overlaps",
    "overlapped_by",
    "contains",
    "during",
    "starts",
    "started_by",
    "finishes",
    "finished_by",
)


class TemporalRelations(ABC):
    """Allen-style relations evaluated at a comparison granularity.

    Every relation takes the other entity and the granularity at which
    both operands are compared. Relations raise ConversionError when an
    operand cannot be expressed at that granularity.
    """

    __slots__ = ()

    @abstractmethod
    def before(self, other: TemporalRelations, granularity: Granularity | int) -> bool:
        """Whether this entity ends before ``other`` starts."""

    @abstractmethod
    def equals(self, other: TemporalRelations, granularity: Granularity | int) -> bool:
        """Whether both entities cover the same granules."""

    @abstractmethod
    def meets(self, other: TemporalRelations, granularity: Granularity | int) -> bool:
        """Whether this entity ends where ``other`` starts."""

    @abstractmethod
    def overlaps(self, other: TemporalRelations, granularity: Granularity | int) -> bool:
        """Whether this entity starts first and ends inside ``other``."""

    @abstractmethod
    def contains(self, other: TemporalRelations, granularity: Granularity | int) -> bool:
        """Whether ``other`` lies strictly inside this entity."""

    @abstractmethod
    def during(self, other: TemporalRelations, granularity: Granularity | int) -> bool:
        """Whether this entity lies strictly inside ``other``."""

    @abstractmethod
    def starts(self, other: TemporalRelations, granularity: Granularity | int) -> bool:
        """Whether both start together and this entity ends first."""

    @abstractmethod
    def finishes(self, other: TemporalRelations, granularity: Granularity | int) -> bool:
        """Whether both end together and this entity starts last."""

    def _check_operand(self, other: object) -> None:
        if not isinstance(other, TemporalRelations):
            raise TypeError(
                f"cannot relate {type(self).__name__} to {type(other).__name__}"
            )

    def after(self, other: TemporalRelations, granularity: Granularity | int) -> bool:
        self._check_operand(other)
        return other.before(self, granularity)

    def met_by(self, other: TemporalRelations, granularity: Granularity | int) -> bool:
        self._check_operand(other)
        return other.meets(self, granularity)

    def adjacent(self, other: TemporalRelations, granularity: Granularity | int) -> bool:
        return self.meets(other, granularity) or self.met_by(other, granularity)

    def overlapped_by(self, other: TemporalRelations, granularity: Granularity | int) -> bool:
        self._check_operand(other)
        return other.overlaps(self, granularity)

    def started_by(self, other: TemporalRelations, granularity: Granularity | int) -> bool:
        self._check_operand(other)
        return other.starts(self, granularity)

    def finished_by(self, other: TemporalRelations, granularity: Granularity | int) -> bool:
        self._check_operand(other)
        return other.finishes(self, granularity)


__all__ = [
    "RELATION_NAMES",
    "TemporalRelations",
]
