"""Single-elimination bracket construction for Kumite groups.

Entrants are seeded by lottery: a Fisher-Yates shuffle drawn from an
injected ``random.Random``, so a fixed seed reproduces a draw exactly.
The tree is always perfect; when the group size is not a power of two the
trailing first-round slots stay open and the lone entrant of a half-filled
match advances on a bye.
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

import math
import random
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Union

from dojodraw.constants import BYE_POLICY_CASCADE, BYE_POLICY_SHALLOW
from dojodraw.exceptions import ConfigurationError, PreconditionViolation
from dojodraw.models.bracket import Bracket, Match
from dojodraw.models.entrant import Entrant
from dojodraw.models.group import Group
from dojodraw.type_hints import MatchAddress
from dojodraw.utils import setup_logger

logger = setup_logger(__name__)


class ByePolicy(Enum):
    """How far byes are advanced when the bracket is built."""

    # Round 1 byes advance into round 2 and stop there
    SHALLOW = BYE_POLICY_SHALLOW
    # Byes keep advancing while the opposing side of the tree is empty
    CASCADE = BYE_POLICY_CASCADE


def round_count_for(entrant_count: int) -> int:
    """Number of rounds needed for ``entrant_count`` entrants.

    ``ceil(log2(n))``, so a single entrant needs no rounds at all.
    """
    if entrant_count < 1:
        raise PreconditionViolation("A bracket needs at least one entrant")
    return math.ceil(math.log2(entrant_count))


class KumiteBracketBuilder:
    """Builds seeded single-elimination brackets.

    Parameters
    ----------
    rng : random.Random, optional
        Source of the seeding lottery. A fresh unseeded generator is used
        when omitted, so each build draws a different seeding.
    bye_policy : ByePolicy or str
        See ``ByePolicy``. Defaults to shallow advancement.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        bye_policy: Union[ByePolicy, str] = ByePolicy.SHALLOW,
    ):
        self.random = rng if rng is not None else random.Random()
        try:
            self.bye_policy = ByePolicy(bye_policy)
        except ValueError:
            raise ConfigurationError(f"Unknown bye policy: {bye_policy}") from None

    def seed_order(self, entrants: Sequence[Entrant]) -> List[Entrant]:
        """Return a shuffled copy of ``entrants``; the input is left untouched."""
        order = list(entrants)
        for i in range(len(order) - 1, 0, -1):
            j = self.random.randint(0, i)
            order[i], order[j] = order[j], order[i]
        return order

    def build(self, group: Group) -> Bracket:
        """Build a freshly seeded bracket for one Kumite group.

        Raises:
            PreconditionViolation: If the group is empty or not a Kumite group
        """
        if not group.is_kumite:
            raise PreconditionViolation(
                f"Brackets are only drawn for Kumite groups, not '{group.name}'"
            )
        if not group.entrants:
            raise PreconditionViolation(f"Group '{group.name}' has no entrants")

        seeded = self.seed_order(group.entrants)

        if len(seeded) == 1:
            return self._walkover(group, seeded[0])

        rounds = round_count_for(len(seeded))
        matches = self._empty_tree(rounds)
        by_address: Dict[MatchAddress, Match] = {m.address: m for m in matches}

        first_round = [m for m in matches if m.round_number == 1]
        for match in first_round:
            index = (match.position - 1) * 2
            match.participant1 = seeded[index] if index < len(seeded) else None
            match.participant2 = seeded[index + 1] if index + 1 < len(seeded) else None

        self._advance_first_round_byes(first_round, by_address)
        if self.bye_policy is ByePolicy.CASCADE:
            self._cascade_byes(rounds, by_address)

        logger.debug(
            "Built %s-round bracket for %s (%s entrants)",
            rounds,
            group.name,
            len(seeded),
        )
        return Bracket(group=group, round_count=rounds, matches=matches)

    def _walkover(self, group: Group, entrant: Entrant) -> Bracket:
        # A lone entrant wins outright: one decided match, zero rounds to play
        match = Match(round_number=1, position=1, participant1=entrant, winner=entrant)
        logger.info("%s has a single entrant; %s wins by walkover", group.name, entrant)
        return Bracket(group=group, round_count=0, matches=[match])

    @staticmethod
    def _empty_tree(rounds: int) -> List[Match]:
        matches = []
        for round_number in range(1, rounds + 1):
            for position in range(1, 2 ** (rounds - round_number) + 1):
                next_match = None
                if round_number < rounds:
                    next_match = (round_number + 1, math.ceil(position / 2))
                matches.append(
                    Match(
                        round_number=round_number,
                        position=position,
                        next_match=next_match,
                    )
                )
        return matches

    @staticmethod
    def _advance(match: Match, by_address: Dict[MatchAddress, Match]) -> None:
        winner = match.occupants[0]
        match.winner = winner
        if match.next_match is not None:
            by_address[match.next_match].place(winner)
        logger.info(
            "Bye: %s advances from match %s-%s",
            winner,
            match.round_number,
            match.position,
        )

    def _advance_first_round_byes(
        self, first_round: Iterable[Match], by_address: Dict[MatchAddress, Match]
    ) -> None:
        for match in first_round:
            if match.participant1 is not None and match.participant2 is None:
                self._advance(match, by_address)

    def _cascade_byes(
        self, rounds: int, by_address: Dict[MatchAddress, Match]
    ) -> None:
        # Entrants reachable from each match's subtree, filled bottom-up
        reachable: Dict[MatchAddress, int] = {}
        for (round_number, position), match in sorted(by_address.items()):
            if round_number == 1:
                reachable[(1, position)] = len(match.occupants)
                continue
            upper = reachable[(round_number - 1, 2 * position - 1)]
            lower = reachable[(round_number - 1, 2 * position)]
            reachable[(round_number, position)] = upper + lower

            # One side can never produce an opponent, and the other side's
            # entrant is already decided and sitting in this match
            one_sided = (upper == 0) != (lower == 0)
            if one_sided and len(match.occupants) == 1 and match.winner is None:
                self._advance(match, by_address)


def create_kumite_bracket(
    group: Group,
    rng: Optional[random.Random] = None,
    bye_policy: Union[ByePolicy, str] = ByePolicy.SHALLOW,
) -> Bracket:
    """Build one bracket for ``group``; see ``KumiteBracketBuilder.build``."""
    return KumiteBracketBuilder(rng=rng, bye_policy=bye_policy).build(group)


def build_brackets(
    groups: Iterable[Group],
    rng: Optional[random.Random] = None,
    bye_policy: Union[ByePolicy, str] = ByePolicy.SHALLOW,
) -> List[Bracket]:
    """Build a bracket for every Kumite group, in group order.

    Kata groups are skipped; they are judged from scoresheets instead.
    """
    builder = KumiteBracketBuilder(rng=rng, bye_policy=bye_policy)
    brackets = [builder.build(g) for g in groups if g.is_kumite]
    logger.info("Built %s Kumite brackets", len(brackets))
    return brackets
