from dojodraw.testing.sample import (
    SAMPLE_ROSTER,
    SampleConfig,
    SampleEntrantFactory,
    sample_entrants,
)

__all__ = ["SAMPLE_ROSTER", "SampleConfig", "SampleEntrantFactory", "sample_entrants"]
