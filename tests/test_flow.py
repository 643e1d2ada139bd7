import pathlib

import pandas as pd

from desk_layout import cli, csv_loader, solver

DATA_DIR = pathlib.Path(__file__).parent / "data"

EXPECTED_ORDER = [
    "Frank", "Grace",                        # Finance, only avoiders
    "Charlie", "Alice", "David", "Bob", "Eve",  # Platform, ends with a dog owner
    "Ivan", "Mallory",                       # no team, buffers
    "Niaj",                                  # Support, buffer
    "Heidi", "Judy",                         # Sales, only dog owners
]


def test_full_flow():
    people = csv_loader.load_people(DATA_DIR / "people.csv")

    model = solver.DeskLayoutModel()
    model.build(people)
    layout = model.solve()

    # everyone seated exactly once
    assert len(layout) == len(people)
    assert {p.id for p in layout} == {p.id for p in people}

    assert [p.name for p in layout] == EXPECTED_ORDER
    assert solver.adjacent_conflicts(layout) == []


def test_cli_writes_layout(tmp_path, capsys):
    out = tmp_path / "layout.csv"
    code = cli.main(["--people", str(DATA_DIR / "people.csv"), "--out-layout", str(out), "--log-level", "ERROR"])
    assert code == 0

    stdout = capsys.readouterr().out
    assert stdout.splitlines()[0] == "1,Frank,Finance,AVOID"
    assert "9,Mallory,none,-" in stdout
    assert "[TEAMS] Platform category=BothEndHave members=Charlie|Alice|David|Bob|Eve" in stdout
    assert "[TEAMS] Sales category=OnlyHave" in stdout

    written = pd.read_csv(out)
    assert written["name"].tolist() == EXPECTED_ORDER


def test_cli_unset_policy_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("DESK_LAYOUT_UNSET_POLICY", "drop")
    code = cli.main(["--people", str(DATA_DIR / "people.csv"), "--log-level", "ERROR"])
    assert code == 0
    stdout = capsys.readouterr().out
    assert "Mallory" not in stdout


def test_cli_raise_policy_reports_error(capsys):
    code = cli.main(["--people", str(DATA_DIR / "people.csv"), "--unset-policy", "raise", "--log-level", "ERROR"])
    assert code == 2
    assert "Mallory" in capsys.readouterr().err


def test_cli_unknown_log_level_reports_error(capsys):
    code = cli.main(["--people", str(DATA_DIR / "people.csv"), "--log-level", "chatty"])
    assert code == 2
    assert "CHATTY" in capsys.readouterr().err
