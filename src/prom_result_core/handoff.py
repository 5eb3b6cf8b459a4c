"""
One-shot handoff of QueryResults from a producer thread to a consumer.
"""

import threading
from typing import Optional

from .exceptions import ChannelClosedError
from .models import QueryResults


class QueryResultsChannel:
    """
    Single-use channel carrying one QueryResults from a producer to a consumer.

    The producer calls publish() once. The consumer calls await_results(),
    which blocks until the value is available and closes the channel on
    return or on error. The channel cannot be read twice.

    Example:
        channel = QueryResultsChannel()
        threading.Thread(target=lambda: channel.publish(run_query())).start()
        results = channel.await_results()
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._ready = threading.Event()
        self._results: Optional[QueryResults] = None
        self._published = False
        self._consuming = False
        self._closed = False

    @property
    def closed(self) -> bool:
        """Whether the channel has been consumed or closed."""
        return self._closed

    def publish(self, results: Optional[QueryResults]) -> None:
        """
        Publish the query results.

        Args:
            results: Decoded results, or None if the producer has nothing to send.

        Raises:
            ChannelClosedError: If results were already published or the
                channel is closed.
        """
        with self._lock:
            if self._closed:
                raise ChannelClosedError("Cannot publish to a closed channel")
            if self._published:
                raise ChannelClosedError("Query results were already published")
            self._results = results
            self._published = True
        self._ready.set()

    def await_results(self) -> Optional[QueryResults]:
        """
        Block until results are published, then close the channel.

        Returns:
            The published QueryResults (None if the producer published None).

        Raises:
            ChannelClosedError: If the channel was already consumed or closed.
        """
        with self._lock:
            if self._closed or self._consuming:
                raise ChannelClosedError("Query results channel was already consumed")
            self._consuming = True

        try:
            self._ready.wait()
            with self._lock:
                if not self._published:
                    raise ChannelClosedError("Channel closed before results were published")
                return self._results
        finally:
            self.close()

    def close(self) -> None:
        """Close the channel and release the held results."""
        with self._lock:
            self._closed = True
            self._results = None
        # Wake a consumer blocked in await_results()
        self._ready.set()

    def __enter__(self) -> "QueryResultsChannel":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit - closes the channel."""
        self.close()
