"""Reporters for Lineups.

Output is str, not print(). Caller decides destination
(terminal, log, MQTT payload...).
"""

from statist.application.reporters.console import ConsoleConfig, ConsoleReporter
from statist.application.reporters.plain_text import PlainTextReporter
from statist.application.reporters.protocol import ReporterProtocol

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "PlainTextReporter",
    "ReporterProtocol",
]
