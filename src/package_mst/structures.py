"""Basic data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Set


@dataclass(frozen=True)
class Edge:
    """Weighted undirected edge tagged with a package code."""

    source: int
    destination: int
    weight: int
    package_code: str


@dataclass
class Graph:
    """Vertex count plus the ordered list of candidate edges."""

    vertex_count: int
    edges: List[Edge] = field(default_factory=list)
    # Codes of input records past the declared edge count: known, never candidates.
    extra_codes: Set[str] = field(default_factory=set)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def add_edge(self, source: int, destination: int, weight: int, package_code: str) -> Edge:
        edge = Edge(source, destination, weight, package_code)
        self.edges.append(edge)
        return edge

    def package_codes(self) -> Set[str]:
        """Return every package code seen in the graph, in or out of the MST."""

        return {edge.package_code for edge in self.edges} | self.extra_codes


@dataclass
class DisjointSet:
    """Union-find forest with path compression and union by rank."""

    size: int

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("size must be non-negative")
        self.parent = list(range(self.size))
        self.rank = [0] * self.size

    def find(self, index: int) -> int:
        parent = self.parent[index]
        if parent != index:
            parent = self.find(parent)
            self.parent[index] = parent
        return parent

    def union(self, left: int, right: int) -> None:
        root_left = self.find(left)
        root_right = self.find(right)
        if root_left == root_right:
            return
        if self.rank[root_left] < self.rank[root_right]:
            self.parent[root_left] = root_right
        elif self.rank[root_left] > self.rank[root_right]:
            self.parent[root_right] = root_left
        else:
            self.parent[root_right] = root_left
            self.rank[root_left] += 1

    def connected(self, left: int, right: int) -> bool:
        return self.find(left) == self.find(right)

    def component_count(self) -> int:
        return sum(1 for index in range(self.size) if self.find(index) == index)
