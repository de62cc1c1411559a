"""Kata scoresheet templates.

Kata groups are not drawn into brackets; each entrant performs and is
scored by a judging panel. This module lays out the blank sheet the panel
fills in.
"""

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

from dataclasses import dataclass, field
from typing import List, Optional

from dojodraw.constants import DEFAULT_KATA_JUDGES
from dojodraw.exceptions import ConfigurationError, PreconditionViolation
from dojodraw.models.entrant import Category, Entrant
from dojodraw.models.group import Group


@dataclass
class KataScoresheetRow:
    """One performer's line: their order of appearance and a cell per judge."""

    order: int
    entrant: Entrant
    scores: List[Optional[float]] = field(default_factory=list)


@dataclass
class KataScoresheet:
    """Blank scoresheet for one Kata group."""

    group: Group
    judges: int
    rows: List[KataScoresheetRow] = field(default_factory=list)

    @property
    def group_name(self) -> str:
        return self.group.name

    @property
    def judge_labels(self) -> List[str]:
        return [f"Judge {i}" for i in range(1, self.judges + 1)]


def build_kata_scoresheet(
    group: Group, judges: int = DEFAULT_KATA_JUDGES
) -> KataScoresheet:
    """Lay out a scoresheet with one row per entrant, in group order.

    Raises:
        PreconditionViolation: If ``group`` is not a Kata group
        ConfigurationError: If ``judges`` is less than one
    """
    if group.category is not Category.KATA:
        raise PreconditionViolation(
            f"Scoresheets are only laid out for Kata groups, not '{group.name}'"
        )
    if judges < 1:
        raise ConfigurationError("A Kata scoresheet needs at least one judge")

    rows = [
        KataScoresheetRow(order=i, entrant=entrant, scores=[None] * judges)
        for i, entrant in enumerate(group.entrants, start=1)
    ]
    return KataScoresheet(group=group, judges=judges, rows=rows)
