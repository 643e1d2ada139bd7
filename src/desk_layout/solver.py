"""
Dog aware desk layout for a single line of desks.

Teams always sit together. Inside each team, people who avoid dogs sit at
the start of the block and dog owners are spread out behind buffers of people
who like dogs. Teams are then classified by the preferences they contain and
by how their block ends, and concatenated so that avoid-only teams land at
one end of the line and dog-owner-only teams at the other:

    OnlyAvoid, AvoidEndLike, BothEndLike, <middle>, HaveEndHave, OnlyHave

The middle interleaves BothEndHave teams with OnlyLike and HaveEndLike
teams used as buffers.
"""
from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional, Sequence, Tuple

from loguru import logger

from .models import (
    Category,
    DogStatus,
    Person,
    TeamBlock,
    UnclassifiedPersonError,
    UnsetPolicy,
    parse_dog_status,
)


# ----------------------------- stage helpers -----------------------------
def group_by_team(people: Sequence[Person]) -> List[Tuple[str, List[Person]]]:
    """Group people by team key in order of first appearance."""
    groups: Dict[str, List[Person]] = {}
    for person in people:
        groups.setdefault(person.team_key, []).append(person)
    return list(groups.items())


def _partition(
    members: Sequence[Person], unset_policy: UnsetPolicy
) -> Tuple[List[Person], List[Person], List[Person]]:
    """Stable split into (avoid, like, have)."""
    buckets: Dict[DogStatus, List[Person]] = {status: [] for status in DogStatus}
    for person in members:
        status = parse_dog_status(person.dog_status)
        if status is None:
            if unset_policy is UnsetPolicy.RAISE:
                raise UnclassifiedPersonError(person)
            if unset_policy is UnsetPolicy.DROP:
                logger.warning("Dropping {} ({}) from layout: no dog status", person.name, person.id)
                continue
            status = DogStatus.LIKE
        buckets[status].append(person)
    return buckets[DogStatus.AVOID], buckets[DogStatus.LIKE], buckets[DogStatus.HAVE]


def order_team(
    members: Sequence[Person], unset_policy: UnsetPolicy | str = UnsetPolicy.BUFFER
) -> List[Person]:
    """Order one team so dog avoiders sit as far as possible from dog owners.

    Avoiders come first. With several dog owners the likers are spread over
    ``len(have) + 1`` gaps, the earlier gaps taking the remainder, and any
    leftover likers close the block. With at most one dog owner all likers
    go between the avoiders and that owner.
    """
    avoid, like, have = _partition(members, UnsetPolicy(unset_policy))
    ordered = list(avoid)

    if len(have) > 1:
        likes_per_gap, extra = divmod(len(like), len(have) + 1)
        taken = likes_per_gap + (1 if extra > 0 else 0)
        ordered.extend(like[:taken])
        for i, member in enumerate(have):
            if i > 0:
                count = likes_per_gap + (1 if extra > i else 0)
                ordered.extend(like[taken:taken + count])
                taken += count
            ordered.append(member)
        ordered.extend(like[taken:])
    else:
        ordered.extend(like)
        ordered.extend(have)
    return ordered


def _effective_status(person: Person) -> DogStatus:
    # Unset people only survive ordering as buffers.
    return parse_dog_status(person.dog_status) or DogStatus.LIKE


_ONLY = {
    DogStatus.AVOID: Category.ONLY_AVOID,
    DogStatus.LIKE: Category.ONLY_LIKE,
    DogStatus.HAVE: Category.ONLY_HAVE,
}


def classify_team(members: Sequence[Person]) -> Optional[Category]:
    """Return the category of an ordered team, or ``None`` when it is empty."""
    if not members:
        return None
    statuses = [_effective_status(p) for p in members]
    has_avoid = DogStatus.AVOID in statuses
    has_have = DogStatus.HAVE in statuses
    ends_have = statuses[-1] == DogStatus.HAVE

    if has_avoid and has_have:
        return Category.BOTH_END_HAVE if ends_have else Category.BOTH_END_LIKE
    if len(set(statuses)) == 1:
        return _ONLY[statuses[0]]
    if has_avoid:
        return Category.AVOID_END_LIKE
    return Category.HAVE_END_HAVE if ends_have else Category.HAVE_END_LIKE


def compose_teams(blocks: Sequence[TeamBlock]) -> List[TeamBlock]:
    """Arrange classified team blocks along the line.

    Raises ``ValueError`` for a block that has not been classified.
    """
    buckets: Dict[Category, List[TeamBlock]] = {category: [] for category in Category}
    for block in blocks:
        if block.category is None:
            raise ValueError(f"Team {block.key} has no category")
        buckets[block.category].append(block)

    if buckets[Category.BOTH_END_HAVE]:
        both_end_have = deque(buckets[Category.BOTH_END_HAVE])
        only_like = deque(buckets[Category.ONLY_LIKE])
        have_end_like = deque(buckets[Category.HAVE_END_LIKE])
        middle = [both_end_have.popleft()]
        while both_end_have or only_like or have_end_like:
            if only_like:
                middle.append(only_like.popleft())
            elif have_end_like:
                middle.append(have_end_like.popleft())
            if both_end_have:
                middle.append(both_end_have.popleft())
    else:
        middle = buckets[Category.ONLY_LIKE] + buckets[Category.HAVE_END_LIKE]

    return (
        buckets[Category.ONLY_AVOID]
        + buckets[Category.AVOID_END_LIKE]
        + buckets[Category.BOTH_END_LIKE]
        + middle
        + buckets[Category.HAVE_END_HAVE]
        + buckets[Category.ONLY_HAVE]
    )


# ----------------------------- public API -----------------------------
def describe_layout(
    people: Sequence[Person], unset_policy: UnsetPolicy | str = UnsetPolicy.BUFFER
) -> List[TeamBlock]:
    """Return the team blocks of the layout in seating order."""
    policy = UnsetPolicy(unset_policy)
    blocks: List[TeamBlock] = []
    for key, members in group_by_team(people):
        ordered = order_team(members, policy)
        category = classify_team(ordered)
        if category is None:
            logger.debug("Team {} has nobody left to seat", key)
            continue
        blocks.append(TeamBlock(key=key, name=members[0].team_name, members=ordered, category=category))

    if blocks:
        counts: Dict[str, int] = {}
        for block in blocks:
            counts[block.category.value] = counts.get(block.category.value, 0) + 1
        logger.debug("Classified {} teams: {}", len(blocks), counts)
    return compose_teams(blocks)


def calculate_desk_layout(
    people: Sequence[Person], unset_policy: UnsetPolicy | str = UnsetPolicy.BUFFER
) -> List[Person]:
    """Compute the left to right desk order for ``people``.

    Returns a new list of the same ``Person`` objects. The input is not
    modified.
    """
    if not people:
        return []
    return [person for block in describe_layout(people, unset_policy) for person in block.members]


def adjacent_conflicts(layout: Sequence[Person]) -> List[Tuple[Person, Person]]:
    """Neighbouring desks where a dog avoider sits next to a dog owner."""
    pair = {DogStatus.AVOID, DogStatus.HAVE}
    return [
        (left, right)
        for left, right in zip(layout, layout[1:])
        if {parse_dog_status(left.dog_status), parse_dog_status(right.dog_status)} == pair
    ]


# ----------------------------- model -----------------------------
class DeskLayoutModel:
    """Build-then-solve wrapper used by the CLI and the Streamlit app."""

    def __init__(self, unset_policy: UnsetPolicy | str = UnsetPolicy.BUFFER) -> None:
        self.unset_policy = UnsetPolicy(unset_policy)
        self.people: List[Person] = []

    def build(self, people: Sequence[Person]) -> None:
        """Store the people to seat."""
        self.people = list(people)

    def blocks(self) -> List[TeamBlock]:
        """Recompute the layout as ordered team blocks with their categories."""
        return describe_layout(self.people, self.unset_policy)

    def solve(self) -> List[Person]:
        """Recompute the full layout."""
        layout = calculate_desk_layout(self.people, self.unset_policy)
        logger.info("Seated {} of {} people", len(layout), len(self.people))
        return layout
