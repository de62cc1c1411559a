"""Type hints used in Dojo Draw."""

from typing import Tuple

# (round, position) address of a match within a bracket
MatchAddress = Tuple[int, int]

# (row number, reason) for an entrant record the importer refused
RejectedRow = Tuple[int, str]

#  LocalWords:  MatchAddress
