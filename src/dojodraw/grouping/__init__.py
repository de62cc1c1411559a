from dojodraw.grouping.partitioner import (
    PartitionResult,
    kata_groups,
    kumite_groups,
    partition,
    validate_bands,
)

__all__ = [
    "PartitionResult",
    "kata_groups",
    "kumite_groups",
    "partition",
    "validate_bands",
]
