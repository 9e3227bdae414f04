"""Tests for reporters/plain_text.py."""

from statist.application.reporters.plain_text import PlainTextReporter
from statist.domain.lineup import new_lineup
from tests.factories import FakeStatist, make_lineup


class TestPlainTextReporter:
    """Tests for PlainTextReporter."""

    def test_without_greeting_matches_muster(self) -> None:
        lineup = make_lineup(FakeStatist("a", "A"), FakeStatist("b", "B"))
        assert PlainTextReporter().report(lineup) == "A\nB\n"

    def test_with_greeting(self) -> None:
        lineup = make_lineup(FakeStatist("a", "A"))
        assert PlainTextReporter("hello").report(lineup) == "hello\nA\n"

    def test_empty_lineup(self) -> None:
        assert PlainTextReporter().report(new_lineup()) == ""

    def test_empty_greeting_is_not_none(self) -> None:
        """Empty string greeting still emits the header line feed."""
        assert PlainTextReporter("").report(new_lineup()) == "\n"
