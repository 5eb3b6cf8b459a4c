"""
QueryResults model representing the decoded response of a Prometheus query.
"""

from dataclasses import dataclass, field

from ..exceptions import NoDataError, ResultFormatError
from .query_result import QueryResult


@dataclass(frozen=True)
class QueryResults:
    """
    All series returned for one query.

    Attributes:
        query: The PromQL query text, kept for diagnostics.
        results: QueryResult objects in response order.
    """

    query: str
    results: list[QueryResult] = field(default_factory=list)

    def get_first_value(self) -> float:
        """
        Get the value of the first sample of the first series.

        Meant for queries known to produce a single scalar, such as
        normalization queries.

        Returns:
            The first sample value.

        Raises:
            NoDataError: If there are no results.
            ResultFormatError: If the first result has no samples.
        """
        if not self.results:
            raise NoDataError()

        first = self.results[0]
        if not first.values:
            raise ResultFormatError()

        return first.values[0].value

    @property
    def total_samples(self) -> int:
        """
        Get total number of samples across all series.

        Returns:
            Total sample count.
        """
        return sum(len(result.values) for result in self.results)

    def to_dict(self) -> dict:
        """
        Convert to dictionary for serialization.

        Returns:
            Dictionary with query and results.
        """
        return {
            "query": self.query,
            "results": [result.to_dict() for result in self.results]
        }

    @classmethod
    def from_dict(cls, data: dict) -> "QueryResults":
        """
        Create QueryResults from dictionary.

        Args:
            data: Dictionary with query and results keys.

        Returns:
            QueryResults instance.
        """
        results = [QueryResult.from_dict(r) for r in data.get("results", [])]
        return cls(
            query=data["query"],
            results=results
        )
