"""
Read and write graphs as edge-list files.

Two encodings share one schema:

    {
        "directed": false,
        "vertices": ["A", "B", "C", "Z"],
        "edges": [["A", "B", 4], ["B", "C", 1]]
    }

- ``.msgpack`` / ``.mpk``: MessagePack (compact, the default)
- ``.json``: JSON (hand-editable)

"vertices" is optional and only needed for isolated vertices. The weight in
an edge entry may be omitted. Since neither format has tuples, list-valued
vertex labels (such as grid coordinates) are read back as tuples.

Usage:
    from graphsearch.data import dump_graph, load_graph

    dump_graph(graph, "data/roads.msgpack")
    graph = load_graph("data/roads.msgpack")
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Hashable

import msgpack

from graphsearch.config import JSON_SUFFIXES, MSGPACK_SUFFIXES
from graphsearch.graph.core import Graph
from graphsearch.graph.errors import GraphError, GraphFormatError

logger = logging.getLogger(__name__)


def _to_vertex(value: Any) -> Hashable:
    """Turn decoded lists back into hashable tuples, recursively."""
    if isinstance(value, list):
        return tuple(_to_vertex(item) for item in value)
    return value


def _to_plain(vertex: Hashable) -> Any:
    if isinstance(vertex, tuple):
        return [_to_plain(item) for item in vertex]
    return vertex


def _format_for(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in MSGPACK_SUFFIXES:
        return "msgpack"
    if suffix in JSON_SUFFIXES:
        return "json"
    raise GraphFormatError(
        f"Unsupported graph file extension '{path.suffix}' "
        f"(expected one of {', '.join(MSGPACK_SUFFIXES + JSON_SUFFIXES)})"
    )


def graph_to_dict(graph: Graph) -> dict[str, Any]:
    """
    Convert a graph to the file schema.

    Undirected graphs store each edge once.
    """
    edges = []
    seen: set[tuple[Hashable, Hashable]] = set()
    for source, target, weight in graph.edges():
        if not graph.directed:
            if (target, source) in seen:
                continue
            seen.add((source, target))
        edges.append([_to_plain(source), _to_plain(target), weight])

    return {
        "directed": graph.directed,
        "vertices": [_to_plain(v) for v in graph.vertices()],
        "edges": edges,
    }


def graph_from_dict(data: Any) -> Graph:
    """
    Build a graph from the file schema.

    Raises:
        GraphFormatError: If the structure does not match the schema
    """
    if not isinstance(data, dict):
        raise GraphFormatError(f"Expected a mapping at top level, got {type(data).__name__}")

    directed = data.get("directed", False)
    if not isinstance(directed, bool):
        raise GraphFormatError(f"'directed' must be a boolean, got {directed!r}")

    for key in ("vertices", "edges"):
        if not isinstance(data.get(key, []), list):
            raise GraphFormatError(
                f"'{key}' must be a list, got {type(data[key]).__name__}"
            )

    graph = Graph(directed=directed)
    try:
        for vertex in data.get("vertices", []):
            graph.add_vertex(_to_vertex(vertex))
        for i, edge in enumerate(data.get("edges", [])):
            if not isinstance(edge, list) or len(edge) not in (2, 3):
                raise GraphFormatError(
                    f"Edge #{i} must be [source, target] or [source, target, weight], "
                    f"got {edge!r}"
                )
            source, target = _to_vertex(edge[0]), _to_vertex(edge[1])
            if len(edge) == 3:
                graph.add_edge(source, target, edge[2])
            else:
                graph.add_edge(source, target)
    except GraphFormatError:
        raise
    except (GraphError, TypeError, ValueError) as e:
        raise GraphFormatError(f"Invalid graph data: {e}") from e

    return graph


def load_graph(path: str | Path) -> Graph:
    """
    Load a graph from a .msgpack or .json edge-list file.

    Raises:
        FileNotFoundError: If the file does not exist
        GraphFormatError: If the file cannot be decoded or is malformed
    """
    path = Path(path)
    fmt = _format_for(path)

    logger.info(f"Loading graph from {path}...")
    try:
        if fmt == "msgpack":
            with open(path, "rb") as f:
                data = msgpack.unpack(f, raw=False, strict_map_key=False)
        else:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
    except (msgpack.UnpackException, ValueError) as e:
        raise GraphFormatError(f"Could not decode {path}: {e}") from e

    graph = graph_from_dict(data)
    logger.info(f"Loaded {graph!r}")
    return graph


def dump_graph(graph: Graph, path: str | Path) -> None:
    """
    Write a graph to a .msgpack or .json edge-list file.

    Raises:
        GraphFormatError: If the extension is not supported
        TypeError: If a vertex label cannot be encoded
    """
    path = Path(path)
    fmt = _format_for(path)
    data = graph_to_dict(graph)

    logger.info(f"Writing {graph!r} to {path}...")
    if fmt == "msgpack":
        with open(path, "wb") as f:
            msgpack.pack(data, f, use_bin_type=True)
    else:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
