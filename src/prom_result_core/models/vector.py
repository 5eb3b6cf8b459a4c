"""
Vector model representing a single timestamped sample from a Prometheus query.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """
    A single (timestamp, value) sample.

    Attributes:
        timestamp: Unix timestamp in seconds, snapped to the decoder resolution.
        value: Sample value. Always finite once decoded.
    """

    timestamp: float
    value: float

    def to_dict(self) -> dict:
        """
        Convert to dictionary for serialization.

        Returns:
            Dictionary with timestamp and value.
        """
        return {
            "timestamp": self.timestamp,
            "value": self.value
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Vector":
        """
        Create Vector from dictionary.

        Args:
            data: Dictionary with timestamp and value keys.

        Returns:
            Vector instance.
        """
        return cls(
            timestamp=float(data["timestamp"]),
            value=float(data["value"])
        )
