"""Package MST library initialization."""

from .builder import MstBuilder, MstBuilderConfig, MstResult, MstStats
from .lookup import LookupResult, LookupService, LookupStatus
from .normalization import normalize_code
from .runner import GraphFormatError, format_mst, load_graph, run_file, save_mst
from .sorting import comb_sort
from .structures import DisjointSet, Edge, Graph
from .treap import PackageIndex

__all__ = [
    "MstBuilder",
    "MstBuilderConfig",
    "MstResult",
    "MstStats",
    "LookupResult",
    "LookupService",
    "LookupStatus",
    "normalize_code",
    "GraphFormatError",
    "format_mst",
    "load_graph",
    "run_file",
    "save_mst",
    "comb_sort",
    "DisjointSet",
    "Edge",
    "Graph",
    "PackageIndex",
]
