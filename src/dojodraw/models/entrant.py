"""Entrant data class and its enumerations."""

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
from enum import Enum
from typing import Any, Dict

from dojodraw.constants import (
    CATEGORY_KATA,
    CATEGORY_KUMITE,
    SEX_FEMALE,
    SEX_LABELS,
    SEX_MALE,
)
from dojodraw.utils import generate_id


class Sex(Enum):
    """Sex of an entrant, as used for grouping."""

    MALE = SEX_MALE
    FEMALE = SEX_FEMALE

    @property
    def label(self) -> str:
        """Display label, e.g. ``"Male"``."""
        return SEX_LABELS[self.value]


class Category(Enum):
    """Competition category."""

    # Solo performance, scored by judges
    KATA = CATEGORY_KATA
    # Elimination sparring
    KUMITE = CATEGORY_KUMITE


@dataclass(frozen=True)
class Entrant:
    """A single competitor.

    Attributes
    ----------
    name : str
        Display name.
    age : int
        Age in whole years, non-negative.
    sex : Sex
        Sex used for grouping.
    weight : float
        Body weight in kilograms, positive.
    category : Category
        Category the entrant is registered for.
    id : str
        Unique identifier, generated when not supplied.
    """

    name: str
    age: int
    sex: Sex
    weight: float
    category: Category
    id: str = field(default_factory=lambda: generate_id("Entrant"))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize entrant to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "age": self.age,
            "sex": self.sex.value,
            "weight": self.weight,
            "category": self.category.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Entrant":
        """Deserialize entrant from dictionary."""
        kwargs = {}
        if data.get("id"):
            kwargs["id"] = data["id"]
        return cls(
            name=data["name"],
            age=int(data["age"]),
            sex=Sex(data["sex"]),
            weight=float(data["weight"]),
            category=Category(data["category"]),
            **kwargs,
        )

    def __str__(self) -> str:
        return self.name
