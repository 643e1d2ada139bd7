"""Data models for DeskLayout."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
import math


NO_TEAM_KEY = "none"


class DogStatus(str, Enum):
    """Dog exposure preference of a person."""

    AVOID = "AVOID"
    LIKE = "LIKE"
    HAVE = "HAVE"


class UnsetPolicy(str, Enum):
    """What the layout does with people whose dog status is unset."""

    BUFFER = "buffer"
    DROP = "drop"
    RAISE = "raise"


class Category(Enum):
    """Team classification used to place team blocks along the line."""

    ONLY_AVOID = "OnlyAvoid"
    ONLY_LIKE = "OnlyLike"
    ONLY_HAVE = "OnlyHave"
    AVOID_END_LIKE = "AvoidEndLike"
    HAVE_END_LIKE = "HaveEndLike"
    HAVE_END_HAVE = "HaveEndHave"
    BOTH_END_HAVE = "BothEndHave"
    BOTH_END_LIKE = "BothEndLike"


class UnclassifiedPersonError(ValueError):
    """Raised when a person without a dog status reaches a strict layout."""

    def __init__(self, person: "Person") -> None:
        super().__init__(f"Person {person.name} ({person.id}) has no dog status")
        self.person = person


_STATUS_ALIASES = {
    "avoid": DogStatus.AVOID,
    "avoid dogs": DogStatus.AVOID,
    "no dogs": DogStatus.AVOID,
    "like": DogStatus.LIKE,
    "likes dogs": DogStatus.LIKE,
    "have": DogStatus.HAVE,
    "has dog": DogStatus.HAVE,
    "dog": DogStatus.HAVE,
}


def parse_dog_status(value: object) -> Optional[DogStatus]:
    """Parse a dog status cell.

    Matching is case insensitive. Empty values, ``None`` and the
    ``float('nan')`` pandas uses for missing cells return ``None``, as does
    any unrecognized text.
    """
    if value is None or isinstance(value, DogStatus):
        return value
    if isinstance(value, float) and math.isnan(value):
        return None
    text = str(value).strip().lower()
    return _STATUS_ALIASES.get(text)


def parse_optional_text(value: object) -> str:
    """Normalize an optional text cell, treating NaN as empty."""
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    text = str(value).strip()
    return "" if text.lower() == "nan" else text


@dataclass(frozen=True)
class TeamRef:
    """Identity of a team."""

    id: str
    name: str


@dataclass(eq=False)
class Person:
    """An employee who needs a desk.

    Equality is identity so a layout can be checked against its input
    person by person.
    """

    id: str
    name: str
    team: Optional[TeamRef] = None
    dog_status: Optional[DogStatus] = None

    def __post_init__(self) -> None:
        self.dog_status = parse_dog_status(self.dog_status)

    @property
    def team_key(self) -> str:
        return self.team.id if self.team is not None else NO_TEAM_KEY

    @property
    def team_name(self) -> str:
        return self.team.name if self.team is not None else NO_TEAM_KEY


@dataclass
class TeamBlock:
    """A team's ordered members and the category they were placed by."""

    key: str
    name: str
    members: List[Person] = field(default_factory=list)
    category: Optional[Category] = None
