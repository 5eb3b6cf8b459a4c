"""
Data models for prom-result-core.
"""

from .parse_warning import ParseWarning
from .vector import Vector
from .query_result import QueryResult
from .query_results import QueryResults

__all__ = [
    "ParseWarning",
    "Vector",
    "QueryResult",
    "QueryResults",
]
