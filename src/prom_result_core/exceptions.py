"""
Custom exceptions for prom-result-core.
"""


class PromError(Exception):
    """Base exception for all prom-result-core errors."""
    pass


class PromDecodeError(PromError):
    """Raised when a query response cannot be decoded into QueryResults."""
    pass


class NilResponseError(PromDecodeError):
    """Raised when the query response is None."""

    def __init__(self, message: str = "nil queryResult"):
        super().__init__(message)


class PromUpstreamError(PromDecodeError):
    """Raised when Prometheus itself reported an error for the query."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnexpectedResponseError(PromDecodeError):
    """Raised when the response has neither a data field nor an error message."""

    def __init__(self, message: str = "Unexpected response from Prometheus"):
        super().__init__(message)


class MalformedEnvelopeError(PromDecodeError):
    """Raised when the data/result envelope of a response is malformed."""
    pass


class DataFieldFormatError(MalformedEnvelopeError):
    """Raised when the data field is not a mapping."""

    def __init__(self, message: str = "Data field improperly formatted in prometheus response"):
        super().__init__(message)


class ResultFieldMissingError(MalformedEnvelopeError):
    """Raised when the result field does not exist in the data field."""

    def __init__(self, message: str = "Result field does not exist in prometheus response"):
        super().__init__(message)


class ResultFieldFormatError(MalformedEnvelopeError):
    """Raised when the result field is not a list."""

    def __init__(self, message: str = "Result field improperly formatted in prometheus response"):
        super().__init__(message)


class ResultEntryFormatError(PromDecodeError):
    """Raised when an entry of the result list is not a mapping."""

    def __init__(self, message: str = "Result entry is improperly formatted"):
        super().__init__(message)


class MetricFieldMissingError(PromDecodeError):
    """Raised when a result entry has no metric field."""

    def __init__(self, message: str = "Metric field does not exist in data result vector"):
        super().__init__(message)


class MetricFieldFormatError(PromDecodeError):
    """Raised when the metric field of a result entry is not a mapping."""

    def __init__(self, message: str = "Metric field is improperly formatted"):
        super().__init__(message)


class ValueFieldMissingError(PromDecodeError):
    """Raised when a result entry has neither a value nor a values field."""

    def __init__(self, message: str = "Value field does not exist in data result vector"):
        super().__init__(message)


class ValuesFieldFormatError(PromDecodeError):
    """Raised when the values field of a ranged result is not a list."""

    def __init__(self, message: str = "Values field is improperly formatted"):
        super().__init__(message)


class DataPointFormatError(PromDecodeError):
    """Raised when a data point is not a [timestamp, "value"] pair."""

    def __init__(self, message: str = "Improperly formatted datapoint from Prometheus"):
        super().__init__(message)


class NoDataError(PromDecodeError):
    """Raised when a scalar is requested from an empty result set."""

    def __init__(self, message: str = "No data"):
        super().__init__(message)


class ResultFormatError(PromDecodeError):
    """Raised when the first result of a set carries no samples."""

    def __init__(self, message: str = "Result is improperly formatted"):
        super().__init__(message)


class PromFieldError(PromError):
    """Base exception for label field lookups on a QueryResult."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class FieldMissingError(PromFieldError):
    """Raised when a requested field does not exist in the metric labels."""

    def __init__(self, field: str):
        super().__init__(field, f"'{field}' field does not exist in data result vector")


class FieldFormatError(PromFieldError):
    """Raised when a requested field exists but is not a string."""

    def __init__(self, field: str):
        super().__init__(field, f"'{field}' field is improperly formatted")


class ChannelClosedError(PromError):
    """Raised when a QueryResultsChannel is used after it was consumed or closed."""
    pass
