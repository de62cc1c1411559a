from dojodraw.scoresheet.kata import (
    KataScoresheet,
    KataScoresheetRow,
    build_kata_scoresheet,
)

__all__ = ["KataScoresheet", "KataScoresheetRow", "build_kata_scoresheet"]
