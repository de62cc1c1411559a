"""Match and Bracket data classes for single-elimination draws."""

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
from typing import Any, Dict, List, Optional

from dojodraw.exceptions import PreconditionViolation
from dojodraw.models.entrant import Entrant
from dojodraw.models.group import Group
from dojodraw.type_hints import MatchAddress
from dojodraw.utils import generate_id


@dataclass
class Match:
    """One node of a bracket.

    Attributes
    ----------
    round_number : int
        Round the match belongs to, 1 being the earliest.
    position : int
        Position within the round, 1-indexed from the top.
    participant1, participant2 : Entrant or None
        Competitors; ``None`` is an open slot (a bye or not yet decided).
    winner : Entrant or None
        Only set when a bye is advanced at build time.
    next_match : tuple of int or None
        ``(round, position)`` of the match the winner feeds; ``None`` for the final.
    id : str
        Unique identifier.
    """

    round_number: int
    position: int
    participant1: Optional[Entrant] = None
    participant2: Optional[Entrant] = None
    winner: Optional[Entrant] = None
    next_match: Optional[MatchAddress] = None
    id: str = field(default_factory=lambda: generate_id("Match"))

    @property
    def address(self) -> MatchAddress:
        return (self.round_number, self.position)

    @property
    def occupants(self) -> List[Entrant]:
        """Entrants currently placed in the match, in slot order."""
        return [p for p in (self.participant1, self.participant2) if p is not None]

    @property
    def is_bye(self) -> bool:
        """True if the match holds a single entrant who advanced without a bout."""
        return len(self.occupants) == 1 and self.winner is not None

    def place(self, entrant: Entrant) -> None:
        """Put ``entrant`` into the first open slot.

        Raises:
            PreconditionViolation: If both slots are already filled
        """
        if self.participant1 is None:
            self.participant1 = entrant
        elif self.participant2 is None:
            self.participant2 = entrant
        else:
            raise PreconditionViolation(
                f"Match {self.round_number}-{self.position} is already full"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary for renderers."""

        def entrant_id(entrant: Optional[Entrant]) -> Optional[str]:
            return entrant.id if entrant else None

        return {
            "id": self.id,
            "round": self.round_number,
            "position": self.position,
            "participant1_id": entrant_id(self.participant1),
            "participant2_id": entrant_id(self.participant2),
            "winner_id": entrant_id(self.winner),
            "next_match": list(self.next_match) if self.next_match else None,
        }


@dataclass
class Bracket:
    """A complete single-elimination tree for one Kumite group.

    The tree is always perfect: round ``r`` holds ``2 ** (round_count - r)``
    matches, open slots being byes. A group of one is represented by a
    single already-decided match and ``round_count == 0``.
    """

    group: Group
    round_count: int
    matches: List[Match] = field(default_factory=list)
    id: str = field(default_factory=lambda: generate_id("Bracket"))

    @property
    def group_id(self) -> str:
        return self.group.id

    @property
    def rounds(self) -> List[int]:
        """Round numbers present in the bracket, earliest first."""
        return sorted({m.round_number for m in self.matches})

    def matches_in_round(self, round_number: int) -> List[Match]:
        """Matches of one round, ordered by position."""
        return sorted(
            (m for m in self.matches if m.round_number == round_number),
            key=lambda m: m.position,
        )

    def get_match(self, round_number: int, position: int) -> Optional[Match]:
        """Look up a match by its ``(round, position)`` address.

        Returns:
            The match, or None if the address is outside the bracket
        """
        for match in self.matches:
            if match.round_number == round_number and match.position == position:
                return match
        return None

    @property
    def final(self) -> Match:
        """The match with no onward link."""
        return next(m for m in self.matches if m.next_match is None)

    @property
    def byes(self) -> List[Match]:
        """Matches decided without a bout, in bracket order."""
        return [m for m in self.matches if m.is_bye]

    def first_round_entrants(self) -> List[Entrant]:
        """Entrants as seeded into the first round, in slot order."""
        seeded = []
        for match in self.matches_in_round(1):
            seeded.extend(match.occupants)
        return seeded

    def to_dict(self) -> Dict[str, Any]:
        """Serialize bracket to dictionary for renderers."""
        return {
            "id": self.id,
            "group_id": self.group_id,
            "round_count": self.round_count,
            "matches": [m.to_dict() for m in self.matches],
        }
