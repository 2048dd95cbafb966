"""Comb sort for candidate edges."""

from __future__ import annotations

from typing import Callable, List

from .structures import Edge

_SHRINK_NUMERATOR = 10
_SHRINK_DENOMINATOR = 13


def _edge_weight(edge: Edge) -> int:
    return edge.weight


def comb_sort(edges: List[Edge], key: Callable[[Edge], int] = _edge_weight) -> int:
    """Sort `edges` in place by ascending `key` and return the number of swaps.

    The gap starts at the sequence length and shrinks by 10/13 (floored,
    never below 1) before every pass. Sorting stops once a pass with gap 1
    makes no swaps. Equal keys may change relative order.
    """

    size = len(edges)
    gap = size
    swaps = 0
    swapped = True
    while gap != 1 or swapped:
        gap = max(1, (gap * _SHRINK_NUMERATOR) // _SHRINK_DENOMINATOR)
        swapped = False
        for i in range(size - gap):
            if key(edges[i]) > key(edges[i + gap]):
                edges[i], edges[i + gap] = edges[i + gap], edges[i]
                swapped = True
                swaps += 1
    return swaps


__all__ = ["comb_sort"]
