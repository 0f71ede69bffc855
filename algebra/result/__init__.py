from .aggregate import map_and_aggregate
from .chain import bind, chain
from .sequence import sequence_results
from .traverse import traverse_results

__all__ = (
    "bind",
    "chain",
    "map_and_aggregate",
    "sequence_results",
    "traverse_results",
)
