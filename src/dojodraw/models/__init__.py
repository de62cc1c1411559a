from dojodraw.models.bands import AgeBand, WeightBand
from dojodraw.models.bracket import Bracket, Match
from dojodraw.models.entrant import Category, Entrant, Sex
from dojodraw.models.event_config import (
    EventConfig,
    default_event_config,
    load_event_config,
    save_event_config,
)
from dojodraw.models.group import Group, group_display_name

__all__ = [
    "AgeBand",
    "WeightBand",
    "Bracket",
    "Match",
    "Category",
    "Entrant",
    "Sex",
    "EventConfig",
    "default_event_config",
    "load_event_config",
    "save_event_config",
    "Group",
    "group_display_name",
]
