# Dojo Draw
# Copyright (C) 2025  Dojo Draw developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

"""
Printable HTML for groups, Kata scoresheets and Kumite brackets.

The generated documents are clean and ink-friendly; ``dojodraw.printing.pdf``
turns them into PDF files.
"""

import re
from datetime import datetime
from html import escape
from typing import List, Optional, Sequence

from dojodraw.constants import ROUND_TITLES_FROM_FINAL
from dojodraw.models.bracket import Bracket, Match
from dojodraw.models.entrant import Entrant
from dojodraw.models.group import Group
from dojodraw.scoresheet.kata import KataScoresheet

STYLE = """
    body { font-family: Arial, sans-serif; color: #000; background: #fff; margin: 0; padding: 0; }
    h2 { text-align: center; margin: 0 0 0.5em 0; font-size: 1.35em; font-weight: normal; letter-spacing: 0.03em; }
    h3 { margin: 1.2em 0 0.4em 0; font-size: 1.1em; }
    .subtitle { text-align: center; font-size: 1.05em; margin-bottom: 1.2em; }
    table.sheet { border-collapse: collapse; width: 100%; margin: 0 auto 1.5em auto; }
    table.sheet th, table.sheet td { border: 1px solid #222; padding: 6px 10px; text-align: left; font-size: 11pt; }
    table.sheet th { font-weight: bold; background: none; }
    td.score { width: 10%; }
    .bye { font-style: italic; }
    .footer { text-align: center; font-size: 9pt; margin-top: 2em; color: #888; letter-spacing: 0.04em; }
"""


def round_title(round_number: int, round_count: int) -> str:
    """Printed title of a round: ``Final``, ``Semi-Finals``, ... or ``Round N``."""
    from_final = round_count - round_number
    if 0 <= from_final < len(ROUND_TITLES_FROM_FINAL):
        return ROUND_TITLES_FROM_FINAL[from_final]
    return f"Round {round_number}"


def document_filename(group: Group, kind: str) -> str:
    """File name for a group's document, e.g. ``Youth_Male_Kumite_Light_bracket.pdf``.

    Args:
        group: Group the document is for
        kind: Document kind, ``"bracket"`` or ``"scoresheet"``
    """
    stem = re.sub(r"\s+", "_", group.name)
    return f"{stem}_{kind}.pdf"


def _document(title: str, subtitle: str, body: str, printed_at: Optional[datetime]) -> str:
    printed_at = printed_at or datetime.now()
    return f"""
    <html>
    <head>
        <style>{STYLE}</style>
    </head>
    <body>
        <h2>{escape(title)}</h2>
        <div class="subtitle">{escape(subtitle)}</div>
        {body}
        <div class="footer">
            Printed by Dojo Draw &mdash; {printed_at.strftime('%Y-%m-%d %H:%M')}
        </div>
    </body>
    </html>
    """


def _entrant_cell(entrant: Optional[Entrant]) -> str:
    return escape(entrant.name) if entrant else "&nbsp;"


def generate_groups_html(
    groups: Sequence[Group],
    event_name: str = "",
    unclassified: Sequence[Entrant] = (),
    printed_at: Optional[datetime] = None,
) -> str:
    """HTML listing every group and its members, in group order.

    Entrants that fit no group are listed at the end so they can be
    placed by hand.
    """
    body = ""
    for group in groups:
        body += f"<h3>{escape(group.name)} ({group.size})</h3>"
        body += '<table class="sheet"><tr><th>#</th><th>Name</th><th>Age</th><th>Weight</th></tr>'
        for i, entrant in enumerate(group.entrants, start=1):
            body += (
                f"<tr><td>{i}</td><td>{escape(entrant.name)}</td>"
                f"<td>{entrant.age}</td><td>{entrant.weight:g} kg</td></tr>"
            )
        body += "</table>"

    if unclassified:
        body += f"<h3>Not in any group ({len(unclassified)})</h3>"
        body += (
            '<table class="sheet"><tr><th>Name</th><th>Category</th>'
            "<th>Age</th><th>Sex</th><th>Weight</th></tr>"
        )
        for entrant in unclassified:
            body += (
                f"<tr><td>{escape(entrant.name)}</td><td>{entrant.category.value}</td>"
                f"<td>{entrant.age}</td><td>{entrant.sex.value}</td>"
                f"<td>{entrant.weight:g} kg</td></tr>"
            )
        body += "</table>"

    return _document(event_name or "Groups", f"{len(groups)} groups", body, printed_at)


def generate_kata_scoresheet_html(
    sheet: KataScoresheet,
    event_name: str = "",
    printed_at: Optional[datetime] = None,
) -> str:
    """HTML for a Kata scoresheet: judge names, then one row per performer."""
    body = '<table class="sheet"><tr><th>Judge</th><th>Name</th></tr>'
    for label in sheet.judge_labels:
        body += f"<tr><td>{label}</td><td>&nbsp;</td></tr>"
    body += "</table>"

    header = "".join(f"<th>{label}</th>" for label in sheet.judge_labels)
    body += f'<table class="sheet"><tr><th>#</th><th>Name</th>{header}<th>Total</th></tr>'
    for row in sheet.rows:
        cells = "".join(
            f'<td class="score">{"" if s is None else f"{s:g}"}</td>' for s in row.scores
        )
        body += (
            f"<tr><td>{row.order}</td><td>{escape(row.entrant.name)}</td>"
            f'{cells}<td class="score"></td></tr>'
        )
    body += "</table>"

    return _document(
        event_name or "Kata Scoresheet",
        f"{sheet.group_name} - Kata Scoresheet",
        body,
        printed_at,
    )


def _match_rows(match: Match) -> List[str]:
    if match.is_bye:
        return [
            f"<tr><td>{match.position}</td><td>{_entrant_cell(match.winner)}</td>"
            f'<td class="bye">Bye</td></tr>'
        ]
    return [
        f"<tr><td>{match.position}</td><td>{_entrant_cell(match.participant1)}</td>"
        f"<td>{_entrant_cell(match.participant2)}</td></tr>"
    ]


def generate_bracket_html(
    bracket: Bracket,
    event_name: str = "",
    printed_at: Optional[datetime] = None,
) -> str:
    """HTML for a Kumite bracket, one table per round from the first to the final."""
    body = ""
    if bracket.round_count == 0:
        winner = bracket.final.winner
        body += f"<h3>Walkover</h3><p>{_entrant_cell(winner)} is the only entrant.</p>"
    else:
        for round_number in bracket.rounds:
            body += f"<h3>{round_title(round_number, bracket.round_count)}</h3>"
            body += '<table class="sheet"><tr><th>Match</th><th>Aka</th><th>Ao</th></tr>'
            for match in bracket.matches_in_round(round_number):
                body += "".join(_match_rows(match))
            body += "</table>"

    return _document(
        event_name or "Kumite Bracket",
        f"{bracket.group.name} - Bracket",
        body,
        printed_at,
    )
