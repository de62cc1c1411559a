from dojodraw.importers.entrants import (
    EntrantImport,
    age_on,
    entrant_from_record,
    entrants_from_records,
    parse_entrants_from_csv,
    read_entrants_file,
)

__all__ = [
    "EntrantImport",
    "age_on",
    "entrant_from_record",
    "entrants_from_records",
    "parse_entrants_from_csv",
    "read_entrants_file",
]
