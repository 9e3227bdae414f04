"""Plain text reporter: the lineup's own muster."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from statist.domain.lineup import Lineup


class PlainTextReporter:
    """Plain text reporter delegating to Lineup.muster().

    With a greeting (e.g. the time the muster was called) the report
    starts with that line.
    """

    def __init__(self, greeting: str | None = None) -> None:
        """Initialize reporter.

        Args:
            greeting: Header line. None = no header line at all.
        """
        self._greeting = greeting

    def report(self, lineup: Lineup) -> str:
        """Format lineup as newline-separated state strings."""
        if self._greeting is None:
            return lineup.muster()
        return lineup.muster_with_greeting(self._greeting)
