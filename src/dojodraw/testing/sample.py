"""Sample entrant generation for demos and tests.

``sample_entrants`` returns a small fixed roster; ``SampleEntrantFactory``
generates larger seeded rosters with plausible ages and weights.
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

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from dojodraw.models.entrant import Category, Entrant, Sex
from dojodraw.utils import setup_logger

logger = setup_logger(__name__)

# (name, age, sex, weight, category)
SAMPLE_ROSTER = [
    ("John Smith", 12, "M", 45.0, "Kumite"),
    ("Sarah Johnson", 13, "F", 48.0, "Kata"),
    ("Michael Chen", 11, "M", 42.0, "Kumite"),
    ("Emily Davis", 12, "F", 46.0, "Kumite"),
    ("David Lee", 14, "M", 52.0, "Kata"),
    ("Jessica Wu", 13, "F", 49.0, "Kata"),
    ("Daniel Martin", 15, "M", 58.0, "Kumite"),
    ("Michelle Wang", 14, "F", 54.0, "Kumite"),
    ("James Wilson", 11, "M", 40.0, "Kata"),
    ("Lisa Garcia", 12, "F", 44.0, "Kata"),
    ("Robert Taylor", 16, "M", 65.0, "Kumite"),
    ("Sophia Martinez", 15, "F", 60.0, "Kumite"),
    ("Kevin Brown", 17, "M", 70.0, "Kata"),
    ("Amanda Lopez", 16, "F", 62.0, "Kata"),
    ("Thomas Anderson", 18, "M", 75.0, "Kumite"),
    ("Olivia Thompson", 17, "F", 65.0, "Kumite"),
]


def sample_entrants() -> List[Entrant]:
    """The fixed demo roster, as fresh Entrant objects."""
    return [
        Entrant(name, age, Sex(sex), weight, Category(category))
        for name, age, sex, weight, category in SAMPLE_ROSTER
    ]


@dataclass
class SampleConfig:
    """Configuration for SampleEntrantFactory."""

    num_entrants: int
    age_range: Tuple[int, int] = (8, 40)
    kumite_share: float = 0.5
    seed: Optional[int] = None


class SampleEntrantFactory:
    """Factory for creating realistic entrant rosters."""

    def __init__(self, config: SampleConfig):
        self.config = config
        self.random = (
            random.Random(config.seed) if config.seed is not None else random.Random()
        )

    def create_entrants(self) -> List[Entrant]:
        """Create entrants based on configuration."""
        entrants = []
        for i in range(self.config.num_entrants):
            sex = self.random.choice([Sex.MALE, Sex.FEMALE])
            age = self.random.randint(*self.config.age_range)
            category = (
                Category.KUMITE
                if self.random.random() < self.config.kumite_share
                else Category.KATA
            )
            entrants.append(
                Entrant(
                    name=f"{sex.label}-{i + 1:03d}",
                    age=age,
                    sex=sex,
                    weight=self._generate_weight(age, sex),
                    category=category,
                )
            )

        logger.info("Created %s sample entrants", len(entrants))
        return entrants

    def _generate_weight(self, age: int, sex: Sex) -> float:
        # Rough growth curve: children gain ~4 kg a year, adults level off
        if age < 18:
            mean = 25.0 + (age - 7) * 4.0
        else:
            mean = 75.0 if sex is Sex.MALE else 62.0
        weight = self.random.gauss(mean, mean * 0.12)
        return round(max(18.0, min(140.0, weight)), 1)
