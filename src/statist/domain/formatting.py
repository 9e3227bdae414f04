"""Helpers for formatting within a muster.

Fixed characters a Statist can use to decorate its state_string()
without hardcoding escapes.
"""

NEW_LINE = "\n"
TAB = "\t"
BTC = "₿"
CHECK_MARK = "✓"
X_MARK = "✕"


def new_line() -> str:
    """Line feed (ASCII 10)."""
    return NEW_LINE


def tab() -> str:
    """Horizontal tab (ASCII 9)."""
    return TAB


def btc() -> str:
    """Bitcoin sign."""
    return BTC


def check_mark() -> str:
    """Check mark (U+2713)."""
    return CHECK_MARK


def x_mark() -> str:
    """Multiplication x (U+2715)."""
    return X_MARK
