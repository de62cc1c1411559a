import pytest

from conftest import make_entrant, make_kumite_group
from dojodraw.exceptions import ConfigurationError, PreconditionViolation
from dojodraw.models import AgeBand, Category, Group, Sex
from dojodraw.scoresheet import build_kata_scoresheet


@pytest.fixture
def kata_group():
    entrants = [make_entrant(n, sex="F", category="Kata") for n in ("Aiko", "Mei", "Yui")]
    return Group(
        category=Category.KATA,
        sex=Sex.FEMALE,
        entrants=tuple(entrants),
        age_band=AgeBand("Children", 8, 11),
    )


def test_one_row_per_entrant_in_group_order(kata_group):
    sheet = build_kata_scoresheet(kata_group)

    assert sheet.group_name == "Children Female Kata"
    assert sheet.judges == 5
    assert [row.order for row in sheet.rows] == [1, 2, 3]
    assert [row.entrant.name for row in sheet.rows] == ["Aiko", "Mei", "Yui"]
    assert all(row.scores == [None] * 5 for row in sheet.rows)


def test_custom_judge_panel(kata_group):
    sheet = build_kata_scoresheet(kata_group, judges=3)

    assert sheet.judge_labels == ["Judge 1", "Judge 2", "Judge 3"]
    assert len(sheet.rows[0].scores) == 3


def test_kumite_group_has_no_scoresheet():
    with pytest.raises(PreconditionViolation):
        build_kata_scoresheet(make_kumite_group(2))


def test_needs_a_judge(kata_group):
    with pytest.raises(ConfigurationError):
        build_kata_scoresheet(kata_group, judges=0)
