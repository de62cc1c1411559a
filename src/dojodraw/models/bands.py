"""AgeBand and WeightBand data classes."""

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
from typing import Any, Dict

from dojodraw.models.entrant import Sex
from dojodraw.utils import generate_id


@dataclass(frozen=True)
class AgeBand:
    """A named, closed age interval ``[min_age, max_age]``.

    Bands may overlap or leave gaps; an entrant is placed under every band
    whose interval contains their age.
    """

    name: str
    min_age: int
    max_age: int
    id: str = field(default_factory=lambda: generate_id("AgeBand"))

    def contains(self, age: int) -> bool:
        """Return True if ``age`` lies in the band, both ends inclusive."""
        return self.min_age <= age <= self.max_age

    def to_dict(self) -> Dict[str, Any]:
        """Serialize age band to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "min_age": self.min_age,
            "max_age": self.max_age,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AgeBand":
        """Deserialize age band from dictionary."""
        kwargs = {"id": data["id"]} if data.get("id") else {}
        return cls(
            name=data["name"],
            min_age=int(data["min_age"]),
            max_age=int(data["max_age"]),
            **kwargs,
        )


@dataclass(frozen=True)
class WeightBand:
    """A named, closed weight interval in kilograms for one sex.

    Only Kumite entrants are grouped by weight.
    """

    name: str
    min_weight: float
    max_weight: float
    sex: Sex
    id: str = field(default_factory=lambda: generate_id("WeightBand"))

    def contains(self, weight: float) -> bool:
        """Return True if ``weight`` lies in the band, both ends inclusive."""
        return self.min_weight <= weight <= self.max_weight

    def to_dict(self) -> Dict[str, Any]:
        """Serialize weight band to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "min_weight": self.min_weight,
            "max_weight": self.max_weight,
            "sex": self.sex.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WeightBand":
        """Deserialize weight band from dictionary."""
        kwargs = {"id": data["id"]} if data.get("id") else {}
        return cls(
            name=data["name"],
            min_weight=float(data["min_weight"]),
            max_weight=float(data["max_weight"]),
            sex=Sex(data["sex"]),
            **kwargs,
        )
