"""Structural counts for one version of a source file, and their deltas."""

from __future__ import annotations

from dataclasses import astuple, dataclass, fields
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class StructuralStats:
    """Declaration counts extracted from one version of a source file."""

    types: int = 0
    interfaces: int = 0
    enums: int = 0
    methods: int = 0
    fields: int = 0

    ZERO: ClassVar[StructuralStats]

    def __post_init__(self) -> None:
        if any(v < 0 for v in astuple(self)):
            raise ValueError(f"Structural counts must be non-negative: {self}")

    def __sub__(self, before: StructuralStats) -> StructuralDelta:
        pairs = zip(astuple(self), astuple(before), strict=True)
        return StructuralDelta(*(a - b for a, b in pairs))

    @property
    def type_total(self) -> int:
        return self.types + self.interfaces + self.enums


@dataclass(frozen=True, slots=True)
class StructuralDelta:
    """Signed, pointwise difference of two StructuralStats (after - before)."""

    types: int = 0
    interfaces: int = 0
    enums: int = 0
    methods: int = 0
    fields: int = 0

    ZERO: ClassVar[StructuralDelta]

    def __add__(self, other: StructuralDelta) -> StructuralDelta:
        return StructuralDelta(*(a + b for a, b in zip(astuple(self), astuple(other), strict=True)))

    def __neg__(self) -> StructuralDelta:
        return StructuralDelta(*(-v for v in astuple(self)))

    @property
    def type_total(self) -> int:
        """Combined class, interface and enum delta."""
        return self.types + self.interfaces + self.enums

    @property
    def is_zero(self) -> bool:
        return not any(astuple(self))

    def as_dict(self) -> dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


StructuralStats.ZERO = StructuralStats()
StructuralDelta.ZERO = StructuralDelta()
