import pytest

from desk_layout import DogStatus, InMemoryRepository, calculate_desk_layout


def test_adding_team():
    repo = InMemoryRepository()
    a_team = repo.put_team(None, "A Team")
    teams = repo.teams()
    assert len(teams) == 1
    assert teams[0].name == "A Team"
    assert teams[0].id == a_team.id
    assert a_team.id


def test_update_team():
    repo = InMemoryRepository()
    original = repo.put_team(None, "OriginalTeamName")
    person = repo.put_person(None, "Alice", original.id, "AVOID")

    updated = repo.put_team(original.id, "UpdatedTeamName")
    assert updated.id == original.id
    assert updated.name == "UpdatedTeamName"
    assert [t.name for t in repo.teams()] == ["UpdatedTeamName"]
    assert person.team.name == "UpdatedTeamName"


def test_team_validation():
    repo = InMemoryRepository()
    with pytest.raises(ValueError):
        repo.put_team(None, "   ")
    with pytest.raises(KeyError):
        repo.put_team("missing", "Ghosts")


def test_delete_team_leaves_members_teamless():
    repo = InMemoryRepository()
    team = repo.upsert_team(None, "Sales")
    person = repo.put_person(None, "Bob", team.id, DogStatus.HAVE)

    assert repo.delete_team(team.id) is True
    assert repo.delete_team(team.id) is False
    assert repo.teams() == []
    assert person.team is None
    assert person.team_key == "none"


def test_people_crud():
    repo = InMemoryRepository()
    team = repo.put_team(None, "Platform")
    alice = repo.put_person(None, "Alice", team.id, "like")
    bob = repo.put_person(None, "Bob")
    assert repo.list() == [alice, bob]
    assert alice.dog_status is DogStatus.LIKE

    updated = repo.put_person(alice.id, "Alicia", team.id, DogStatus.AVOID)
    assert [p.name for p in repo.people()] == ["Alicia", "Bob"]
    assert updated.id == alice.id

    with pytest.raises(KeyError):
        repo.put_person("missing", "Nobody")
    with pytest.raises(KeyError):
        repo.put_person(None, "Nobody", "missing-team")

    assert repo.delete_person(bob.id) is True
    assert repo.delete_person(bob.id) is False
    assert [p.name for p in repo.list()] == ["Alicia"]


def test_repository_feeds_layout():
    repo = InMemoryRepository()
    dogs = repo.put_team(None, "Dogs")
    quiet = repo.put_team(None, "Quiet")
    repo.put_person(None, "Rex", dogs.id, "HAVE")
    repo.put_person(None, "Ada", quiet.id, "AVOID")
    layout = calculate_desk_layout(repo.list())
    assert [p.name for p in layout] == ["Ada", "Rex"]
