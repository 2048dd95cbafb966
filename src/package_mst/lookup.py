"""Package code lookups against a built MST."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable

from .structures import Edge
from .treap import PackageIndex


class LookupStatus(enum.Enum):
    IN_MST = "in_mst"
    NOT_IN_MST = "not_in_mst"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class LookupResult:
    """Outcome of a single package code query."""

    code: str
    status: LookupStatus
    edge: Edge | None = None

    def message(self) -> str:
        if self.status is LookupStatus.IN_MST and self.edge is not None:
            edge = self.edge
            return (
                f"Package {edge.package_code} found: connects {edge.source} to {edge.destination} "
                f"with weight {edge.weight} (located in the MST)"
            )
        if self.status is LookupStatus.NOT_IN_MST:
            return f"Package code {self.code} found but not located in the MST."
        return "Package code not found."


class LookupService:
    """Classify package codes as in the MST, known but outside it, or unknown."""

    def __init__(self, index: PackageIndex, known_codes: Iterable[str]) -> None:
        self.index = index
        self.known_codes = frozenset(known_codes)

    def lookup(self, code: str) -> LookupResult:
        edge = self.index.search(code)
        if edge is not None:
            return LookupResult(code=code, status=LookupStatus.IN_MST, edge=edge)
        if code in self.known_codes:
            return LookupResult(code=code, status=LookupStatus.NOT_IN_MST)
        return LookupResult(code=code, status=LookupStatus.UNKNOWN)


__all__ = ["LookupResult", "LookupService", "LookupStatus"]
