"""Group data class: one partition of the entrant list."""

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
from typing import Any, Dict, Optional, Tuple

from dojodraw.exceptions import PreconditionViolation
from dojodraw.models.bands import AgeBand, WeightBand
from dojodraw.models.entrant import Category, Entrant, Sex
from dojodraw.utils import generate_id


def group_display_name(
    category: Category,
    age_band: AgeBand,
    sex: Sex,
    weight_band: Optional[WeightBand] = None,
) -> str:
    """Compose a group's display name from the bands it was derived from.

    Examples: ``"Children Male Kata"``, ``"Youth Female Kumite Light"``.
    """
    name = f"{age_band.name} {sex.label} {category.value}"
    if weight_band is not None:
        name += f" {weight_band.name}"
    return name


@dataclass(frozen=True)
class Group:
    """Entrants sharing a category, age band, sex and (for Kumite) weight band.

    Attributes
    ----------
    category : Category
        Category of every member.
    sex : Sex
        Sex of every member. For Kumite it equals ``weight_band.sex``.
    entrants : tuple of Entrant
        Members in the order they were supplied to the partitioner.
    age_band : AgeBand
        Band the group was derived from.
    weight_band : WeightBand or None
        Present if and only if the category is Kumite.
    id : str
        Unique identifier.
    """

    category: Category
    sex: Sex
    entrants: Tuple[Entrant, ...]
    age_band: AgeBand
    weight_band: Optional[WeightBand] = None
    id: str = field(default_factory=lambda: generate_id("Group"))

    def __post_init__(self) -> None:
        object.__setattr__(self, "entrants", tuple(self.entrants))
        if (self.category is Category.KUMITE) != (self.weight_band is not None):
            raise PreconditionViolation(
                "A group has a weight band if and only if it is a Kumite group"
            )
        if self.weight_band is not None and self.weight_band.sex is not self.sex:
            raise PreconditionViolation(
                f"Group sex {self.sex.value} does not match weight band "
                f"'{self.weight_band.name}' ({self.weight_band.sex.value})"
            )

    @property
    def name(self) -> str:
        """Display name, derived on every access so it tracks band renames."""
        return group_display_name(
            self.category, self.age_band, self.sex, self.weight_band
        )

    @property
    def size(self) -> int:
        return len(self.entrants)

    @property
    def is_kumite(self) -> bool:
        return self.category is Category.KUMITE

    def to_dict(self) -> Dict[str, Any]:
        """Serialize group to dictionary for renderers."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "sex": self.sex.value,
            "age_band": self.age_band.to_dict(),
            "weight_band": self.weight_band.to_dict() if self.weight_band else None,
            "entrants": [e.to_dict() for e in self.entrants],
        }

    def __str__(self) -> str:
        return self.name
