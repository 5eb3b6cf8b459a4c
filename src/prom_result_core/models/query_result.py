"""
QueryResult model representing one labeled series of a Prometheus query.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from ..exceptions import FieldFormatError, FieldMissingError
from ..utils import LABEL_PREFIX
from .vector import Vector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryResult:
    """
    A single series from a query response.

    Attributes:
        metric: Label name to value mapping as decoded from the response.
            Values are usually strings but are not guaranteed to be.
        values: Samples in response order. Instant queries yield exactly one.
    """

    metric: dict[str, Any] = field(default_factory=dict)
    values: list[Vector] = field(default_factory=list)

    def get_string(self, field: str) -> str:
        """
        Get a string label from the metric.

        Args:
            field: Label name (e.g., "namespace", "pod").

        Returns:
            The label value.

        Raises:
            FieldMissingError: If the label does not exist.
            FieldFormatError: If the label value is not a string.
        """
        if field not in self.metric:
            raise FieldMissingError(field)

        value = self.metric[field]
        if not isinstance(value, str):
            raise FieldFormatError(field)

        return value

    def get_labels(self, prefix: str = LABEL_PREFIX) -> dict[str, str]:
        """
        Get all prefixed labels with the prefix removed.

        kube-state-metrics exports Kubernetes labels as "label_<name>", so
        {"label_app": "api", "instance": "x"} yields {"app": "api"}.
        Labels with non-string values are skipped.

        Args:
            prefix: Label name prefix to match and strip.

        Returns:
            Dictionary of label names to values. Empty if nothing matches.
        """
        labels: dict[str, str] = {}

        for key, value in self.metric.items():
            if not key.startswith(prefix):
                continue

            label = key[len(prefix):]
            if not isinstance(value, str):
                logger.warning("Failed to parse label value for label: '%s'", label)
                continue

            labels[label] = value

        return labels

    def to_dict(self) -> dict:
        """
        Convert to dictionary for serialization.

        Returns:
            Dictionary with metric and values.
        """
        return {
            "metric": dict(self.metric),
            "values": [vector.to_dict() for vector in self.values]
        }

    @classmethod
    def from_dict(cls, data: dict) -> "QueryResult":
        """
        Create QueryResult from dictionary.

        Args:
            data: Dictionary with metric and values keys.

        Returns:
            QueryResult instance.
        """
        values = [Vector.from_dict(v) for v in data.get("values", [])]
        return cls(
            metric=dict(data.get("metric") or {}),
            values=values
        )
