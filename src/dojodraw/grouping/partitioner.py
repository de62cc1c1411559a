"""Partition entrants into competition groups.

Kata entrants are grouped by age band and sex; Kumite entrants by age band
and weight band, the weight band fixing the sex. All Kata groups come first,
in band-then-sex order, followed by all Kumite groups in
age-band-then-weight-band order. Sections of printed output rely on this
order being stable.
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
from typing import Iterable, List, Sequence

from dojodraw.constants import SEX_ORDER
from dojodraw.models.bands import AgeBand, WeightBand
from dojodraw.models.entrant import Category, Entrant, Sex
from dojodraw.models.group import Group
from dojodraw.utils import setup_logger
from dojodraw.utils.validation import validate_interval_strict

logger = setup_logger(__name__)


@dataclass
class PartitionResult:
    """Outcome of a partition run.

    Attributes
    ----------
    groups : list of Group
        Non-empty groups in display order.
    unclassified : list of Entrant
        Entrants that matched no band combination and so appear in no group.
    """

    groups: List[Group] = field(default_factory=list)
    unclassified: List[Entrant] = field(default_factory=list)

    @property
    def dropped_count(self) -> int:
        return len(self.unclassified)

    @property
    def kata_groups(self) -> List[Group]:
        return [g for g in self.groups if g.category is Category.KATA]

    @property
    def kumite_groups(self) -> List[Group]:
        return [g for g in self.groups if g.category is Category.KUMITE]

    def groups_for(self, entrant: Entrant) -> List[Group]:
        """All groups ``entrant`` was placed in."""
        return [g for g in self.groups if entrant in g.entrants]


def validate_bands(
    age_bands: Iterable[AgeBand], weight_bands: Iterable[WeightBand]
) -> None:
    """Reject band configurations that cannot describe any entrant.

    Raises:
        ConfigurationError: If any band interval is inverted or negative
    """
    for band in age_bands:
        validate_interval_strict(f"Age band '{band.name}'", band.min_age, band.max_age)
    for band in weight_bands:
        validate_interval_strict(
            f"Weight band '{band.name}' ({band.sex.value})",
            band.min_weight,
            band.max_weight,
        )


def kata_groups(
    entrants: Sequence[Entrant], age_bands: Sequence[AgeBand]
) -> List[Group]:
    """Group Kata entrants by age band, then by sex (male first)."""
    kata = [e for e in entrants if e.category is Category.KATA]
    groups = []

    for age_band in age_bands:
        for sex in (Sex(code) for code in SEX_ORDER):
            members = [e for e in kata if e.sex is sex and age_band.contains(e.age)]
            if members:
                groups.append(
                    Group(
                        category=Category.KATA,
                        sex=sex,
                        entrants=tuple(members),
                        age_band=age_band,
                    )
                )
    return groups


def kumite_groups(
    entrants: Sequence[Entrant],
    age_bands: Sequence[AgeBand],
    weight_bands: Sequence[WeightBand],
) -> List[Group]:
    """Group Kumite entrants by age band, then by weight band."""
    kumite = [e for e in entrants if e.category is Category.KUMITE]
    groups = []

    for age_band in age_bands:
        for weight_band in weight_bands:
            members = [
                e
                for e in kumite
                if e.sex is weight_band.sex
                and age_band.contains(e.age)
                and weight_band.contains(e.weight)
            ]
            if members:
                groups.append(
                    Group(
                        category=Category.KUMITE,
                        sex=weight_band.sex,
                        entrants=tuple(members),
                        age_band=age_band,
                        weight_band=weight_band,
                    )
                )
    return groups


def partition(
    entrants: Sequence[Entrant],
    age_bands: Sequence[AgeBand],
    weight_bands: Sequence[WeightBand],
) -> PartitionResult:
    """Partition ``entrants`` into Kata and Kumite groups.

    An entrant inside several overlapping bands is placed in a group under
    each of them. Entrants matching no band are returned in
    ``PartitionResult.unclassified`` rather than discarded.

    Args:
        entrants: Validated entrants, in registration order
        age_bands: Age bands in display order
        weight_bands: Weight bands in display order

    Returns:
        PartitionResult with the groups and any unclassified entrants

    Raises:
        ConfigurationError: If any band interval is inverted or negative
    """
    validate_bands(age_bands, weight_bands)

    groups = kata_groups(entrants, age_bands) + kumite_groups(
        entrants, age_bands, weight_bands
    )

    placed = {e.id for g in groups for e in g.entrants}
    unclassified = [e for e in entrants if e.id not in placed]

    logger.info(
        "Partitioned %s entrants into %s groups", len(entrants), len(groups)
    )
    if unclassified:
        logger.warning(
            "%s entrant(s) match no band and are in no group: %s",
            len(unclassified),
            ", ".join(e.name for e in unclassified),
        )

    return PartitionResult(groups=groups, unclassified=unclassified)
