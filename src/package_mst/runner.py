"""Convenience helpers for running the MST lookup end-to-end."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

import pandas as pd

from .builder import MstBuilder, MstBuilderConfig, MstResult
from .lookup import LookupResult, LookupService
from .normalization import normalize_code
from .structures import Graph

_COLUMNS = ["source", "destination", "weight", "package_code"]
_INTEGER_COLUMNS = ["source", "destination", "weight"]


class GraphFormatError(ValueError):
    """Raised when a graph file cannot be parsed into edges."""


def load_graph(path: str | Path, vertex_count: int | None = None) -> Graph:
    """Read a graph from `path`.

    ``.csv`` files hold one edge per row with a
    ``source,destination,weight,package_code`` header; the vertex count is
    `vertex_count` or one past the largest vertex index. Any other file is a
    whitespace-separated token stream: ``V E`` followed by records of
    ``source destination weight code`` until the tokens run out. Only the
    first ``E`` records become candidate edges; codes of later records are
    kept in :attr:`Graph.extra_codes`.
    """

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)
    if path.suffix.lower() == ".csv":
        return _load_csv(path, vertex_count)
    return _load_text(path)


def _load_csv(path: Path, vertex_count: int | None) -> Graph:
    try:
        frame = pd.read_csv(
            path,
            dtype=str,
            skipinitialspace=True,
            keep_default_na=False,
            na_filter=False,
        )
    except pd.errors.EmptyDataError as exc:
        raise GraphFormatError(f"'{path}' is empty") from exc
    edges = _edge_frame(frame)
    if vertex_count is None:
        vertex_count = int(edges[["source", "destination"]].to_numpy().max()) + 1 if len(edges) else 0
    return _frame_to_graph(edges, vertex_count)


def _load_text(path: Path) -> Graph:
    tokens = path.read_text(encoding="utf-8").split()
    if len(tokens) < 2:
        raise GraphFormatError(f"'{path}' must start with the vertex and edge counts")
    try:
        vertex_count, edge_count = int(tokens[0]), int(tokens[1])
    except ValueError as exc:
        raise GraphFormatError(f"invalid header {tokens[:2]!r} in '{path}'") from exc
    if vertex_count < 0 or edge_count < 0:
        raise GraphFormatError(f"negative counts in header of '{path}'")

    fields = tokens[2:]
    width = len(_COLUMNS)
    if len(fields) % width:
        raise GraphFormatError(f"'{path}' ends with a truncated edge record")
    records = [fields[i : i + width] for i in range(0, len(fields), width)]
    if len(records) < edge_count:
        raise GraphFormatError(f"'{path}' declares {edge_count} edges but holds {len(records)}")

    frame = _edge_frame(pd.DataFrame(records, columns=_COLUMNS, dtype=str))
    graph = _frame_to_graph(frame.head(edge_count), vertex_count)
    graph.extra_codes = {normalize_code(code) for code in frame["package_code"].iloc[edge_count:]}
    return graph


def _edge_frame(frame: pd.DataFrame) -> pd.DataFrame:
    missing = [column for column in _COLUMNS if column not in frame.columns]
    if missing:
        raise GraphFormatError(f"missing columns: {', '.join(missing)}")
    frame = frame[_COLUMNS].copy()
    for column in _COLUMNS:
        values = frame[column]
        if (values.isna() | (values.astype(str).str.strip() == "")).any():
            raise GraphFormatError("incomplete edge record")
    for column in _INTEGER_COLUMNS:
        try:
            values = pd.to_numeric(frame[column], errors="raise")
        except (TypeError, ValueError) as exc:
            raise GraphFormatError(f"column '{column}' must hold integers") from exc
        if not (values % 1 == 0).all():
            raise GraphFormatError(f"column '{column}' must hold integers")
        frame[column] = values.astype("int64")
    return frame


def _frame_to_graph(frame: pd.DataFrame, vertex_count: int) -> Graph:
    graph = Graph(vertex_count)
    for source, destination, weight, code in frame.itertuples(index=False, name=None):
        if not (0 <= source < vertex_count and 0 <= destination < vertex_count):
            raise GraphFormatError(f"edge {source}-{destination} is outside [0, {vertex_count})")
        graph.add_edge(int(source), int(destination), int(weight), normalize_code(code))
    return graph


def format_mst(result: MstResult) -> str:
    lines: List[str] = ["The edges in the constructed MST are:"]
    for edge in result.edges:
        lines.append(
            f"{edge.source} - {edge.destination} (Weight: {edge.weight}, Package: {edge.package_code})"
        )
    lines.append(f"Total weight of MST: {result.total_weight}")
    return "\n".join(lines)


def save_mst(result: MstResult, output_path: str | Path) -> None:
    path = Path(output_path)
    dataframe = pd.DataFrame(
        [(e.source, e.destination, e.weight, e.package_code) for e in result.edges],
        columns=_COLUMNS,
    )
    suffix = path.suffix.lower()
    if suffix == ".csv":
        dataframe.to_csv(path, index=False)
        return
    if suffix in {".xls", ".xlsx"}:
        dataframe.to_excel(path, index=False)
        return
    raise ValueError(f"Unsupported output file format: '{suffix}'")


def run_file(
    input_path: str | Path,
    query: str | None = None,
    config: Optional[MstBuilderConfig] = None,
    output_path: str | Path | None = None,
    vertex_count: int | None = None,
) -> Tuple[MstResult, LookupResult | None] | None:
    """Load `input_path`, print its MST, optionally save it, and answer `query`.

    The query is normalized like the codes read from the file.
    """

    input_path = Path(input_path)
    try:
        graph = load_graph(input_path, vertex_count=vertex_count)
    except FileNotFoundError:
        print(f"ERROR: Input file not found at '{input_path}'.")
        return None
    except ValueError as exc:
        print(f"ERROR: Could not read graph from '{input_path}': {exc}")
        return None

    builder = MstBuilder(config)
    result = builder.build(graph, known_codes=graph.package_codes())
    print(format_mst(result))

    if output_path is not None:
        try:
            save_mst(result, output_path)
        except ValueError as exc:
            print(f"ERROR: {exc}")
            return None
        if builder.config.verbose:
            print(f"MST saved to '{output_path}'")

    lookup_result = None
    if query is not None:
        lookup_result = LookupService(result.index, result.known_codes).lookup(normalize_code(query))
        print(lookup_result.message())
    return result, lookup_result
