"""
Search graph construction and path search.
"""

from .path_graph import build_path_graph, safety_penalty, sample_path, node_key
from .path_search import PathSearchEngine, SearchResult

__all__ = [
    'build_path_graph',
    'safety_penalty',
    'sample_path',
    'node_key',
    'PathSearchEngine',
    'SearchResult',
]
