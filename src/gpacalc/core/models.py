from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Subject:
    id: int
    name: str
    credit: float
    score: float
    semester: str
    selected: bool


@dataclass(frozen=True)
class ExistingGPA:
    """A previously settled average and the credits backing it."""

    score: float
    credits: float


@dataclass(frozen=True)
class Major:
    value: str
    label: str
    file: str
