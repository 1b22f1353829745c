"""
Data loading module.

Reads and writes graphs as edge-list files (MessagePack or JSON).

Usage:
    from graphsearch.data import load_graph

    graph = load_graph("data/roads.msgpack")
"""

from graphsearch.data.loader import dump_graph, graph_from_dict, graph_to_dict, load_graph

__all__ = ["dump_graph", "graph_from_dict", "graph_to_dict", "load_graph"]
