"""
Text serialization of graph representations.
"""

from .text_format import format_graph, parse_graph, read_graph, write_graph

__all__ = ['format_graph', 'parse_graph', 'read_graph', 'write_graph']
