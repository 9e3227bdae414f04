"""statist - named entities reporting their state, mustered into one report."""

__version__ = "0.1.0"

from statist.application.reporters import ConsoleConfig, ConsoleReporter, PlainTextReporter
from statist.domain.exceptions import InvalidStatistError, StatistError
from statist.domain.formatting import (
    BTC,
    CHECK_MARK,
    NEW_LINE,
    TAB,
    X_MARK,
    btc,
    check_mark,
    new_line,
    tab,
    x_mark,
)
from statist.domain.lineup import Lineup, desert, enlist, new_lineup
from statist.domain.state import StateRecord, TimedStatist
from statist.domain.statist import Musterer, Statist

__all__ = [
    "BTC",
    "CHECK_MARK",
    "NEW_LINE",
    "TAB",
    "X_MARK",
    "ConsoleConfig",
    "ConsoleReporter",
    "InvalidStatistError",
    "Lineup",
    "Musterer",
    "PlainTextReporter",
    "StateRecord",
    "Statist",
    "StatistError",
    "TimedStatist",
    "__version__",
    "btc",
    "check_mark",
    "desert",
    "enlist",
    "new_line",
    "new_lineup",
    "tab",
    "x_mark",
]
