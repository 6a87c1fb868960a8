"""Unbuffered handoff channel between the reader and writer stages.

A send completes only once a receiver has taken the item, so the reader
can never run ahead of the writer. Closing the channel is the only normal
end-of-stream signal; aborting it unblocks both sides after a fatal error.
"""

from __future__ import annotations

import threading
from typing import Generic, Iterator, TypeVar

from core.errors import ChannelAbortedError, ChannelClosedError

T = TypeVar("T")

_EMPTY = object()


class HandoffChannel(Generic[T]):
    """Rendezvous channel with close and abort semantics."""

    def __init__(self) -> None:
        self._condition = threading.Condition()
        self._slot: object = _EMPTY
        self._sent_count = 0
        self._received_count = 0
        self._closed = False
        self._abort_cause: BaseException | None = None

    def send(self, item: T) -> None:
        """Hand one item to a receiver, blocking until it is taken.

        Raises:
            ChannelClosedError: If the channel was already closed.
            ChannelAbortedError: If the channel is aborted while waiting.
        """
        with self._condition:
            self._condition.wait_for(
                lambda: self._slot is _EMPTY or self._closed or self._abort_cause is not None
            )
            self._raise_if_aborted()
            if self._closed:
                raise ChannelClosedError("Cannot send on a closed handoff channel.")
            self._slot = item
            self._sent_count += 1
            ticket = self._sent_count
            self._condition.notify_all()
            self._condition.wait_for(
                lambda: self._received_count >= ticket or self._abort_cause is not None
            )
            if self._received_count < ticket:
                self._raise_if_aborted()

    def receive(self) -> T:
        """Take the next item, blocking until one is sent or the channel closes.

        Raises:
            ChannelClosedError: If the channel is closed and drained.
            ChannelAbortedError: If the channel is aborted.
        """
        with self._condition:
            self._condition.wait_for(
                lambda: self._slot is not _EMPTY
                or self._closed
                or self._abort_cause is not None
            )
            self._raise_if_aborted()
            if self._slot is _EMPTY:
                raise ChannelClosedError("Handoff channel is closed and drained.")
            item = self._slot
            self._slot = _EMPTY
            self._received_count += 1
            self._condition.notify_all()
            return item  # type: ignore[return-value]

    def close(self) -> None:
        """Signal that no further items will be sent."""
        with self._condition:
            self._closed = True
            self._condition.notify_all()

    def abort(self, cause: BaseException) -> None:
        """Fail every pending and future send or receive.

        Args:
            cause: Error that stopped the peer stage.
        """
        with self._condition:
            if self._abort_cause is None:
                self._abort_cause = cause
            self._condition.notify_all()

    @property
    def closed(self) -> bool:
        with self._condition:
            return self._closed

    def __iter__(self) -> Iterator[T]:
        """Yield received items until the channel is closed and drained."""
        while True:
            try:
                yield self.receive()
            except ChannelClosedError:
                return

    def _raise_if_aborted(self) -> None:
        if self._abort_cause is not None:
            raise ChannelAbortedError(
                f"Handoff channel aborted: {self._abort_cause}"
            ) from self._abort_cause
