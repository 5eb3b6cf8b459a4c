"""
ParseWarning sentinels for recoverable anomalies found while parsing data points.
"""

from enum import Enum


class ParseWarning(Enum):
    """
    Non-fatal condition found while parsing a data point.

    Warnings are returned next to the parsed Vector and logged by the decoder.
    They are never raised.
    """

    INF = "Found Inf value parsing vector data point for metric"
    NAN = "Found NaN value parsing vector data point for metric"

    @property
    def message(self) -> str:
        """Human-readable description of the warning."""
        return self.value
