"""Reporter protocol: contract for all reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from statist.domain.lineup import Lineup


class ReporterProtocol(Protocol):
    """Protocol for lineup reporters.

    Output is str, not print(). Caller decides destination.
    """

    def report(self, lineup: Lineup) -> str:
        """Format lineup as string.

        Args:
            lineup: Lineup to format.

        Returns:
            Formatted string representation.
        """
        ...
