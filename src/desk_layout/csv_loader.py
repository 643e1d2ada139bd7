"""CSV loading and writing utilities."""
from __future__ import annotations

from pathlib import Path
from typing import IO, Any, Dict, List, Sequence

import pandas as pd
from loguru import logger

from .models import Person, TeamRef, parse_dog_status, parse_optional_text

REQUIRED_COLUMNS = ["id", "name"]
LAYOUT_COLUMNS = ["position", "id", "name", "team", "dog_status"]


def missing_columns(df: pd.DataFrame, required: Sequence[str] = REQUIRED_COLUMNS) -> List[str]:
    return [col for col in required if col not in df.columns]


def people_from_frame(df: pd.DataFrame) -> List[Person]:
    """Build people from a ``people.csv`` shaped DataFrame.

    ``team_id`` falls back to ``team_name`` so a sheet with only team names
    still groups people. Rows without either are team-less. Team refs are
    shared between members of the same team.
    """
    missing = missing_columns(df)
    if missing:
        raise ValueError(f"people.csv is missing columns: {', '.join(missing)}")

    teams: Dict[str, TeamRef] = {}
    people: List[Person] = []
    seen_ids = set()
    for _, row in df.iterrows():
        person_id = parse_optional_text(row["id"])
        if person_id in seen_ids:
            raise ValueError(f"Duplicate person id in people.csv: {person_id}")
        seen_ids.add(person_id)

        team_name = parse_optional_text(row.get("team_name", ""))
        team_id = parse_optional_text(row.get("team_id", "")) or team_name
        team = None
        if team_id:
            team = teams.setdefault(team_id, TeamRef(id=team_id, name=team_name or team_id))

        raw_status = row.get("dog_status", "")
        status = parse_dog_status(raw_status)
        if status is None and parse_optional_text(raw_status):
            logger.warning("Unrecognized dog status {!r} for {}", raw_status, row["name"])

        people.append(
            Person(
                id=person_id,
                name=parse_optional_text(row["name"]),
                team=team,
                dog_status=status,
            )
        )
    return people


def load_people(path: Path | str | IO[Any]) -> List[Person]:
    """Load people from ``people.csv`` keeping file order."""
    # ids stay text so "007" and "7" are different people
    df = pd.read_csv(path, dtype={"id": str, "team_id": str})
    people = people_from_frame(df)
    logger.debug("Loaded {} people", len(people))
    return people


def layout_frame(layout: Sequence[Person]) -> pd.DataFrame:
    """Tabulate a layout, one row per desk from left to right."""
    rows = [
        {
            "position": position,
            "id": person.id,
            "name": person.name,
            "team": person.team_name,
            "dog_status": person.dog_status.value if person.dog_status else "",
        }
        for position, person in enumerate(layout, start=1)
    ]
    return pd.DataFrame(rows, columns=LAYOUT_COLUMNS)


def write_layout(path: Path | str, layout: Sequence[Person]) -> None:
    """Write a layout CSV, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    layout_frame(layout).to_csv(path, index=False)
