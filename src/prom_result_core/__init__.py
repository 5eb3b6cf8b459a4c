"""
Python library for decoding Prometheus query responses into typed results
"""

from .decoder import decode_query_results, parse_data_point
from .exceptions import (
    ChannelClosedError,
    DataFieldFormatError,
    DataPointFormatError,
    FieldFormatError,
    FieldMissingError,
    MalformedEnvelopeError,
    MetricFieldFormatError,
    MetricFieldMissingError,
    NilResponseError,
    NoDataError,
    PromDecodeError,
    PromError,
    PromFieldError,
    PromUpstreamError,
    ResultEntryFormatError,
    ResultFieldFormatError,
    ResultFieldMissingError,
    ResultFormatError,
    UnexpectedResponseError,
    ValueFieldMissingError,
    ValuesFieldFormatError,
)
from .handoff import QueryResultsChannel
from .models import ParseWarning, QueryResult, QueryResults, Vector

__version__ = "0.1.0"

__all__ = [
    "decode_query_results",
    "parse_data_point",
    "QueryResultsChannel",
    "ParseWarning",
    "Vector",
    "QueryResult",
    "QueryResults",
    "PromError",
    "PromDecodeError",
    "NilResponseError",
    "PromUpstreamError",
    "UnexpectedResponseError",
    "MalformedEnvelopeError",
    "DataFieldFormatError",
    "ResultFieldMissingError",
    "ResultFieldFormatError",
    "ResultEntryFormatError",
    "MetricFieldMissingError",
    "MetricFieldFormatError",
    "ValueFieldMissingError",
    "ValuesFieldFormatError",
    "DataPointFormatError",
    "NoDataError",
    "ResultFormatError",
    "PromFieldError",
    "FieldMissingError",
    "FieldFormatError",
    "ChannelClosedError",
]
