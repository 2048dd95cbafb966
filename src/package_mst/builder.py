"""Kruskal construction of the MST and its package index."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Iterable, List, Set

from tqdm import tqdm

from .sorting import comb_sort
from .structures import DisjointSet, Edge, Graph
from .treap import PackageIndex


@dataclass
class MstStats:
    """Summary metrics for an MST build."""

    vertex_count: int
    candidate_edges: int
    accepted_edges: int
    rejected_cycles: int
    edges_scanned: int
    component_count: int
    is_spanning: bool
    runtime_seconds: float


@dataclass
class MstResult:
    """Result bundle returned by :class:MstBuilder."""

    edges: List[Edge]
    total_weight: int
    index: PackageIndex
    known_codes: Set[str]
    used_codes: Set[str]
    stats: MstStats


@dataclass
class MstBuilderConfig:
    """Configuration parameters for :class:MstBuilder."""

    seed: int | None = None
    verbose: bool = True
    use_tqdm: bool | None = None
    progress_threshold: int = 1000


class MstBuilder:
    """Build a minimum spanning tree (or forest) and index it by package code."""

    def __init__(self, config: MstBuilderConfig | None = None, rng: random.Random | None = None) -> None:
        self.config = config or MstBuilderConfig()
        self.rng = rng or random.Random(self.config.seed)

    def build(self, graph: Graph, known_codes: Iterable[str] | None = None) -> MstResult:
        """Run Kruskal over `graph` and return the accepted edges with their index.

        `graph.edges` is left untouched; a sorted copy is scanned. A
        disconnected graph yields fewer than V-1 edges without raising.
        """

        verbose = self.config.verbose
        overall_start_time = time.time()
        vertex_count = graph.vertex_count
        codes = set(known_codes) if known_codes is not None else graph.package_codes()
        if verbose:
            print("--- MST Build Started ---")
            print(f"\n1. Sorting {graph.edge_count} candidate edges by weight...")

        t0 = time.time()
        candidates = list(graph.edges)
        swaps = comb_sort(candidates)
        if verbose:
            print(f"   {swaps} swaps. Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("2. Selecting edges with union-find...")
        subsets = DisjointSet(vertex_count)
        index = PackageIndex(self.rng)
        accepted: List[Edge] = []
        used_codes: Set[str] = set()
        total_weight = 0
        rejected = 0
        scanned = 0
        target = max(vertex_count - 1, 0)

        iterator: Iterable[Edge] = candidates
        if self._use_tqdm(len(candidates)):
            iterator = tqdm(candidates, desc="   Scanning Edges", unit="edge")

        for edge in iterator:
            if len(accepted) >= target:
                break
            scanned += 1
            root_source = subsets.find(edge.source)
            root_destination = subsets.find(edge.destination)
            if root_source == root_destination:
                rejected += 1
                continue
            accepted.append(edge)
            subsets.union(root_source, root_destination)
            index.insert(edge)
            total_weight += edge.weight
            used_codes.add(edge.package_code)

        if verbose:
            print(f"   Accepted {len(accepted)} edges, rejected {rejected} that would close a cycle.")
            print(f"   Done in {time.time() - t0:.2f}s")

        components = subsets.component_count()
        elapsed = time.time() - overall_start_time
        stats = MstStats(
            vertex_count=vertex_count,
            candidate_edges=len(candidates),
            accepted_edges=len(accepted),
            rejected_cycles=rejected,
            edges_scanned=scanned,
            component_count=components,
            is_spanning=components <= 1,
            runtime_seconds=elapsed,
        )

        if verbose:
            if not stats.is_spanning:
                print(f"   Graph is disconnected: built a forest with {components} components.")
            print(f"   Index holds {len(index)} edges, height {index.height()}.")
            print(f"\n--- MST Build Finished in {elapsed:.2f} seconds ---")

        return MstResult(
            edges=accepted,
            total_weight=total_weight,
            index=index,
            known_codes=codes,
            used_codes=used_codes,
            stats=stats,
        )

    def _use_tqdm(self, count: int) -> bool:
        if self.config.use_tqdm is not None:
            return self.config.use_tqdm
        return self.config.verbose and count >= self.config.progress_threshold


__all__ = [
    "MstBuilder",
    "MstBuilderConfig",
    "MstResult",
    "MstStats",
]
