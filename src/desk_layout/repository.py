"""People and team storage used to feed the layout."""
from __future__ import annotations

import uuid
from dataclasses import replace
from typing import Dict, List, Optional, Protocol

from loguru import logger

from .models import DogStatus, Person, TeamRef, parse_dog_status


class PeopleRepository(Protocol):
    """Storage the application reads people from. The solver never imports it."""

    def list(self) -> List[Person]: ...

    def upsert_team(self, team_id: Optional[str], name: str) -> TeamRef: ...

    def delete_team(self, team_id: str) -> bool: ...


class InMemoryRepository:
    """Dict backed repository keeping insertion order."""

    def __init__(self) -> None:
        self._teams: Dict[str, TeamRef] = {}
        self._people: Dict[str, Person] = {}

    # ----------------------------- teams -----------------------------
    def teams(self) -> List[TeamRef]:
        return list(self._teams.values())

    def get_team(self, team_id: str) -> Optional[TeamRef]:
        return self._teams.get(team_id)

    def put_team(self, team_id: Optional[str], name: str) -> TeamRef:
        """Create a team, or rename it when ``team_id`` is given.

        Renaming updates the team ref held by every member.
        """
        name = name.strip()
        if not name:
            raise ValueError("Team name must not be blank")
        if team_id is None:
            team = TeamRef(id=str(uuid.uuid4()), name=name)
            logger.debug("Created team {} ({})", team.name, team.id)
        else:
            if team_id not in self._teams:
                raise KeyError(f"Unknown team: {team_id}")
            team = TeamRef(id=team_id, name=name)
            for person in self._people.values():
                if person.team is not None and person.team.id == team_id:
                    person.team = team
        self._teams[team.id] = team
        return team

    upsert_team = put_team

    def delete_team(self, team_id: str) -> bool:
        """Remove a team. Its members stay on file without a team."""
        if self._teams.pop(team_id, None) is None:
            return False
        for person in self._people.values():
            if person.team is not None and person.team.id == team_id:
                person.team = None
        logger.debug("Deleted team {}", team_id)
        return True

    # ----------------------------- people -----------------------------
    def people(self) -> List[Person]:
        return list(self._people.values())

    def list(self) -> List[Person]:
        return self.people()

    def put_person(
        self,
        person_id: Optional[str],
        name: str,
        team_id: Optional[str] = None,
        dog_status: DogStatus | str | None = None,
    ) -> Person:
        """Create or update a person. Updates keep their place in the listing."""
        team = None
        if team_id is not None:
            team = self._teams.get(team_id)
            if team is None:
                raise KeyError(f"Unknown team: {team_id}")
        status = parse_dog_status(dog_status)

        if person_id is None:
            person = Person(id=str(uuid.uuid4()), name=name, team=team, dog_status=status)
            self._people[person.id] = person
            return person
        if person_id not in self._people:
            raise KeyError(f"Unknown person: {person_id}")
        person = replace(self._people[person_id], name=name, team=team, dog_status=status)
        self._people[person_id] = person
        return person

    def delete_person(self, person_id: str) -> bool:
        return self._people.pop(person_id, None) is not None
