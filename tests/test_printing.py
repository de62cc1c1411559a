import random
from datetime import datetime

import pytest

from conftest import make_entrant, make_kumite_group
from dojodraw.bracket import create_kumite_bracket
from dojodraw.grouping import partition
from dojodraw.models import AgeBand, Category, Group, Sex, default_event_config
from dojodraw.printing import (
    document_filename,
    generate_bracket_html,
    generate_groups_html,
    generate_kata_scoresheet_html,
    round_title,
)
from dojodraw.scoresheet import build_kata_scoresheet
from dojodraw.testing import sample_entrants

PRINTED_AT = datetime(2025, 3, 1, 9, 30)


@pytest.mark.parametrize(
    "round_number,expected",
    [(4, "Final"), (3, "Semi-Finals"), (2, "Quarter-Finals"), (1, "Round 1")],
)
def test_round_titles(round_number, expected):
    assert round_title(round_number, 4) == expected


def test_document_filename():
    group = make_kumite_group(2)
    assert document_filename(group, "bracket") == "Children_Male_Kumite_U50_bracket.pdf"


def test_document_filename_collapses_whitespace():
    group = make_kumite_group(2, age_band=AgeBand("Under  12", 8, 11))

    name = document_filename(group, "scoresheet")

    assert name == "Under_12_Male_Kumite_U50_scoresheet.pdf"


def test_bracket_html_lists_rounds_and_byes():
    group = make_kumite_group(5)
    bracket = create_kumite_bracket(group, rng=random.Random(4))

    html = generate_bracket_html(bracket, "Spring Open", printed_at=PRINTED_AT)

    assert "Spring Open" in html
    assert "Children Male Kumite U50 - Bracket" in html
    for title in ("Quarter-Finals", "Semi-Finals", "Final"):
        assert title in html
    assert "Bye" in html
    assert all(e.name in html for e in group.entrants)
    assert "2025-03-01 09:30" in html


def test_walkover_html():
    bracket = create_kumite_bracket(make_kumite_group(1))

    html = generate_bracket_html(bracket)

    assert "Walkover" in html
    assert "Fighter-01" in html


def test_names_are_escaped():
    entrant = make_entrant("<b>Ken</b>", category="Kata")
    group = Group(
        category=Category.KATA,
        sex=Sex.MALE,
        entrants=(entrant,),
        age_band=AgeBand("Children", 8, 11),
    )

    html = generate_kata_scoresheet_html(build_kata_scoresheet(group))

    assert "<b>Ken</b>" not in html
    assert "&lt;b&gt;Ken&lt;/b&gt;" in html
    assert "Judge 5" in html


def test_groups_html_lists_unclassified():
    config = default_event_config()
    stray = make_entrant("Stray", age=5, category="Kata")
    result = partition(sample_entrants() + [stray], config.age_bands, config.weight_bands)

    html = generate_groups_html(result.groups, config.name, result.unclassified)

    assert "Youth Female Kata (3)" in html
    assert "Not in any group (1)" in html
    assert "Stray" in html
