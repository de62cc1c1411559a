"""EventConfig data class and its JSON persistence."""

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

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

from dojodraw.constants import (
    BYE_POLICY_CASCADE,
    BYE_POLICY_SHALLOW,
    DEFAULT_AGE_BANDS,
    DEFAULT_BYE_POLICY,
    DEFAULT_EVENT_NAME,
    DEFAULT_KATA_JUDGES,
    DEFAULT_WEIGHT_BANDS,
)
from dojodraw.exceptions import ConfigurationError
from dojodraw.models.bands import AgeBand, WeightBand
from dojodraw.models.entrant import Sex
from dojodraw.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class EventConfig:
    """Event configuration settings.

    Attributes
    ----------
    name : str
        Event name, printed on documents.
    age_bands : list of AgeBand
        Age bands in display order.
    weight_bands : list of WeightBand
        Kumite weight bands in display order.
    kata_judges : int
        Number of judge columns on Kata scoresheets.
    bye_policy : str
        ``"shallow"`` advances byes one round only; ``"cascade"`` resolves
        them all the way to the final.
    """

    name: str = DEFAULT_EVENT_NAME
    age_bands: List[AgeBand] = field(default_factory=list)
    weight_bands: List[WeightBand] = field(default_factory=list)
    kata_judges: int = DEFAULT_KATA_JUDGES
    bye_policy: str = DEFAULT_BYE_POLICY

    def __post_init__(self) -> None:
        if self.bye_policy not in (BYE_POLICY_SHALLOW, BYE_POLICY_CASCADE):
            raise ConfigurationError(f"Unknown bye policy: {self.bye_policy}")
        if self.kata_judges < 1:
            raise ConfigurationError("Kata scoresheets need at least one judge")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "age_bands": [b.to_dict() for b in self.age_bands],
            "weight_bands": [b.to_dict() for b in self.weight_bands],
            "kata_judges": self.kata_judges,
            "bye_policy": self.bye_policy,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EventConfig":
        """Deserialize configuration from dictionary."""
        try:
            return cls(
                name=data.get("name", DEFAULT_EVENT_NAME),
                age_bands=[AgeBand.from_dict(b) for b in data.get("age_bands", [])],
                weight_bands=[
                    WeightBand.from_dict(b) for b in data.get("weight_bands", [])
                ],
                kata_judges=int(data.get("kata_judges", DEFAULT_KATA_JUDGES)),
                bye_policy=data.get("bye_policy", DEFAULT_BYE_POLICY),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid event configuration: {e}") from e


def default_event_config() -> EventConfig:
    """Build a configuration with the stock age and weight bands."""
    return EventConfig(
        age_bands=[AgeBand(name, lo, hi) for name, lo, hi in DEFAULT_AGE_BANDS],
        weight_bands=[
            WeightBand(name, lo, hi, Sex(sex))
            for name, lo, hi, sex in DEFAULT_WEIGHT_BANDS
        ],
    )


def load_event_config(path: Union[str, Path]) -> EventConfig:
    """Read an event configuration from a JSON file.

    Raises:
        ConfigurationError: If the file is missing, not JSON, or malformed
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read event configuration {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Event configuration {path} must be a JSON object")

    config = EventConfig.from_dict(data)
    logger.info(
        "Loaded %s age bands and %s weight bands from %s",
        len(config.age_bands),
        len(config.weight_bands),
        path,
    )
    return config


def save_event_config(config: EventConfig, path: Union[str, Path]) -> Path:
    """Write ``config`` as indented JSON and return the path written.

    Raises:
        ConfigurationError: If the file cannot be written
    """
    path = Path(path)
    try:
        with path.open("w", encoding="utf-8") as f:
            json.dump(config.to_dict(), f, indent=2)
    except OSError as e:
        raise ConfigurationError(f"Cannot write event configuration {path}: {e}") from e
    logger.info("Wrote event configuration to %s", path)
    return path
