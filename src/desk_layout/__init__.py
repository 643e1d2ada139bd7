"""DeskLayout package."""
from .models import Category, DogStatus, Person, TeamBlock, TeamRef, UnsetPolicy, UnclassifiedPersonError
from .csv_loader import load_people, write_layout
from .repository import InMemoryRepository, PeopleRepository
from .solver import (
    DeskLayoutModel,
    calculate_desk_layout,
    classify_team,
    compose_teams,
    describe_layout,
    group_by_team,
    order_team,
)

__all__ = [
    "Category",
    "DogStatus",
    "Person",
    "TeamBlock",
    "TeamRef",
    "UnsetPolicy",
    "UnclassifiedPersonError",
    "load_people",
    "write_layout",
    "InMemoryRepository",
    "PeopleRepository",
    "DeskLayoutModel",
    "calculate_desk_layout",
    "classify_team",
    "compose_teams",
    "describe_layout",
    "group_by_team",
    "order_team",
]
