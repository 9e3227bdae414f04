"""Exceptions for statist.

Lineup operations raise nothing of their own. Errors raised by a Statist
propagate to the caller unchanged.
"""


class StatistError(Exception):
    """Root exception for all statist errors.

    Allows catching all statist-specific errors.
    """


class InvalidStatistError(StatistError):
    """Statist constructed with invalid arguments.

    Attributes:
        reason: Why the statist is invalid (must not be empty)
    """

    def __init__(self, reason: str) -> None:
        if not reason:
            raise ValueError("reason must not be empty")

        self.reason = reason
        super().__init__(f"Invalid statist: {reason}")
