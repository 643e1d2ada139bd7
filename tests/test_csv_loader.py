"""
Tests for CSV loading and layout export.
"""

import os
import tempfile

import pandas as pd
import pytest
from loguru import logger

from desk_layout.csv_loader import layout_frame, load_people, write_layout
from desk_layout.models import DogStatus, Person
from desk_layout.solver import calculate_desk_layout


def _write_temp_csv(content):
    with tempfile.NamedTemporaryFile(mode="w", suffix=".csv", delete=False) as f:
        f.write(content)
        return f.name


class TestLoadPeople:
    """Loading ``people.csv``."""

    def test_load_people_from_csv(self):
        csv_content = """id,name,team_id,team_name,dog_status
007,Alice,t1,Platform,AVOID
2,Bob,t1,Platform,have
3,Carol,,,
4,Dan,,Sales,LIKE
"""
        temp_file = _write_temp_csv(csv_content)
        try:
            people = load_people(temp_file)

            assert [p.name for p in people] == ["Alice", "Bob", "Carol", "Dan"]

            alice = people[0]
            assert alice.id == "007"
            assert alice.team.id == "t1"
            assert alice.team.name == "Platform"
            assert alice.dog_status is DogStatus.AVOID

            bob = people[1]
            assert bob.team is alice.team
            assert bob.dog_status is DogStatus.HAVE

            carol = people[2]
            assert carol.team is None
            assert carol.dog_status is None

            # team name doubles as id when no id is given
            dan = people[3]
            assert dan.team.id == "Sales"
            assert dan.team_key == "Sales"
        finally:
            os.unlink(temp_file)

    def test_missing_columns(self):
        temp_file = _write_temp_csv("id,team_id\n1,t1\n")
        try:
            with pytest.raises(ValueError, match="name"):
                load_people(temp_file)
        finally:
            os.unlink(temp_file)

    def test_duplicate_ids(self):
        temp_file = _write_temp_csv("id,name\n1,Alice\n1,Bob\n")
        try:
            with pytest.raises(ValueError, match="Duplicate"):
                load_people(temp_file)
        finally:
            os.unlink(temp_file)

    def test_unrecognized_status_loads_unset_with_warning(self):
        messages = []
        sink_id = logger.add(messages.append, level="WARNING")
        temp_file = _write_temp_csv("id,name,dog_status\n1,Alice,cats\n")
        try:
            people = load_people(temp_file)
        finally:
            logger.remove(sink_id)
            os.unlink(temp_file)
        assert people[0].dog_status is None
        assert any("cats" in m for m in messages)


class TestWriteLayout:
    """Exporting a layout."""

    def test_layout_frame_and_file(self, tmp_path):
        people = load_people(os.path.join(os.path.dirname(__file__), "data", "people.csv"))
        frame = layout_frame(people[:3])
        assert list(frame.columns) == ["position", "id", "name", "team", "dog_status"]
        assert frame["position"].tolist() == [1, 2, 3]
        assert frame["dog_status"].tolist() == ["LIKE", "LIKE", "AVOID"]

        out = tmp_path / "nested" / "layout.csv"
        write_layout(out, people[:3])
        written = pd.read_csv(out, dtype={"id": str})
        assert written["name"].tolist() == ["Alice", "Bob", "Charlie"]
        assert written["team"].tolist() == ["Platform"] * 3

    def test_empty_layout(self):
        frame = layout_frame([])
        assert frame.empty
        assert list(frame.columns) == ["position", "id", "name", "team", "dog_status"]


def test_layout_frame_with_string_statuses():
    people = [Person(id="1", name="A", dog_status="HAVE"), Person(id="2", name="B", dog_status="avoid")]
    frame = layout_frame(calculate_desk_layout(people))
    assert frame["name"].tolist() == ["B", "A"]
    assert frame["dog_status"].tolist() == ["AVOID", "HAVE"]
