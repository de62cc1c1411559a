from dojodraw.bracket.builder import (
    ByePolicy,
    KumiteBracketBuilder,
    build_brackets,
    create_kumite_bracket,
    round_count_for,
)

__all__ = [
    "ByePolicy",
    "KumiteBracketBuilder",
    "build_brackets",
    "create_kumite_bracket",
    "round_count_for",
]
