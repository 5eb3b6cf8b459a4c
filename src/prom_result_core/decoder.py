"""
Decoding of raw Prometheus query responses into QueryResults.
"""

import logging
import math
from typing import Any, Optional

from .exceptions import (
    DataFieldFormatError,
    DataPointFormatError,
    MetricFieldFormatError,
    MetricFieldMissingError,
    NilResponseError,
    PromUpstreamError,
    ResultEntryFormatError,
    ResultFieldFormatError,
    ResultFieldMissingError,
    UnexpectedResponseError,
    ValueFieldMissingError,
    ValuesFieldFormatError,
)
from .models import ParseWarning, QueryResult, QueryResults, Vector
from .utils import TIMESTAMP_RESOLUTION, labels_for_metric, snap_timestamp

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _upstream_error(response: dict) -> PromUpstreamError | UnexpectedResponseError:
    """Build the error for a response that carries no data field."""
    message = response.get("error")
    if not isinstance(message, str):
        return UnexpectedResponseError()
    return PromUpstreamError(message)


def parse_data_point(
    data_point: Any,
    resolution: int = TIMESTAMP_RESOLUTION
) -> tuple[Vector, Optional[ParseWarning]]:
    """
    Parse a [timestamp, "value"] pair into a Vector.

    Infinite and NaN values are replaced with 0.0 and reported through the
    returned warning. At most one warning is returned.

    Args:
        data_point: Raw data point, e.g. [1704067203.5, "0.25"].
        resolution: Timestamps are snapped to multiples of this value.

    Returns:
        Tuple of (Vector, ParseWarning or None).

    Raises:
        DataPointFormatError: If data_point is not a two element list of a
            finite numeric timestamp and a string value.
        ValueError: If the value string is not a valid float. Surrounding
            whitespace and digit separators are rejected as well.
    """
    if not isinstance(data_point, (list, tuple)) or len(data_point) != 2:
        raise DataPointFormatError()

    raw_timestamp, raw_value = data_point
    if not _is_number(raw_timestamp) or not isinstance(raw_value, str):
        raise DataPointFormatError()
    try:
        timestamp = float(raw_timestamp)
    except OverflowError:
        raise DataPointFormatError() from None
    if not math.isfinite(timestamp):
        raise DataPointFormatError()

    if raw_value != raw_value.strip() or "_" in raw_value:
        raise ValueError(f"could not convert string to float: {raw_value!r}")
    value = float(raw_value)

    warning = None
    if math.isinf(value):
        warning = ParseWarning.INF
        value = 0.0
    elif math.isnan(value):
        warning = ParseWarning.NAN
        value = 0.0

    vector = Vector(
        timestamp=snap_timestamp(timestamp, resolution),
        value=value
    )
    return vector, warning


def _decode_result(entry: Any, query: str, resolution: int) -> QueryResult:
    """Decode a single entry of the result list."""
    if not isinstance(entry, dict):
        raise ResultEntryFormatError()

    if "metric" not in entry:
        raise MetricFieldMissingError()
    metric = entry["metric"]
    if not isinstance(metric, dict):
        raise MetricFieldFormatError()

    if "values" in entry:
        data_points = entry["values"]
        if not isinstance(data_points, list):
            raise ValuesFieldFormatError()
    elif "value" in entry:
        data_points = [entry["value"]]
    else:
        raise ValueFieldMissingError()

    # Rendered at most once per entry, only when a sample warns
    label_string = None
    vectors: list[Vector] = []

    for data_point in data_points:
        vector, warning = parse_data_point(data_point, resolution)
        if warning is not None:
            if label_string is None:
                label_string = labels_for_metric(metric)
            logger.warning(
                "%s\nQuery: %s\nLabels: %s", warning.message, query, label_string
            )
        vectors.append(vector)

    return QueryResult(metric=dict(metric), values=vectors)


def decode_query_results(
    query: str,
    response: Any,
    resolution: int = TIMESTAMP_RESOLUTION
) -> QueryResults:
    """
    Decode a deserialized Prometheus query response.

    Handles both instant query results ({"metric": {...}, "value": [ts, "v"]})
    and range query results ({"metric": {...}, "values": [[ts, "v"], ...]}).
    Decoding is all-or-nothing: any structural problem raises and no partial
    result is returned.

    Args:
        query: The query text, used in diagnostics and kept on the result.
        response: JSON-decoded response body.
        resolution: Timestamps are snapped to multiples of this value.

    Returns:
        QueryResults with one QueryResult per result entry, in order.

    Raises:
        NilResponseError: If response is None.
        PromUpstreamError: If Prometheus returned an error message.
        UnexpectedResponseError: If the response has no data and no error message.
        MalformedEnvelopeError: If the data or result fields are missing or malformed.
        PromDecodeError: If a result entry or one of its data points is malformed.
        ValueError: If a sample value is not a valid float.
    """
    if response is None:
        raise NilResponseError()
    if not isinstance(response, dict):
        raise UnexpectedResponseError()

    if "data" not in response:
        raise _upstream_error(response)

    data = response["data"]
    if not isinstance(data, dict):
        raise DataFieldFormatError()
    if "result" not in data:
        raise ResultFieldMissingError()
    result_list = data["result"]
    if not isinstance(result_list, list):
        raise ResultFieldFormatError()

    results = [_decode_result(entry, query, resolution) for entry in result_list]

    return QueryResults(query=query, results=results)
