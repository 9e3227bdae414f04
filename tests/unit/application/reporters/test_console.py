"""Tests for reporters/console.py."""

import pytest

from statist.application.reporters.console import ConsoleConfig, ConsoleReporter
from statist.domain.lineup import new_lineup
from tests.factories import BrokenStatist, FakeStatist, make_lineup


class TestConsoleConfig:
    """Tests for ConsoleConfig."""

    def test_defaults(self) -> None:
        config = ConsoleConfig()
        assert config.title == "MUSTER"
        assert config.show_index is True
        assert config.width == 100

    def test_non_positive_width_rejected(self) -> None:
        with pytest.raises(ValueError, match="width must be > 0"):
            ConsoleConfig(width=0)


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_renders_names_and_states(self) -> None:
        lineup = make_lineup(FakeStatist("pump", "running"), FakeStatist("fan", "stopped"))

        text = ConsoleReporter().report(lineup)

        assert "MUSTER" in text
        assert "pump" in text
        assert "running" in text
        assert "fan" in text
        assert "stopped" in text

    def test_preserves_order(self) -> None:
        lineup = make_lineup(FakeStatist("zeta"), FakeStatist("alpha"))

        text = ConsoleReporter().report(lineup)

        assert text.index("zeta") < text.index("alpha")

    def test_empty_lineup_notice(self) -> None:
        text = ConsoleReporter().report(new_lineup())
        assert "no statists enlisted" in text

    def test_custom_title(self) -> None:
        text = ConsoleReporter(ConsoleConfig(title="Sensors")).report(make_lineup(FakeStatist("a")))
        assert "Sensors" in text

    def test_markup_in_state_rendered_literally(self) -> None:
        lineup = make_lineup(FakeStatist("a", "[bold]raw[/bold]"))
        text = ConsoleReporter().report(lineup)
        assert "[bold]raw[/bold]" in text

    def test_no_ansi_by_default(self) -> None:
        text = ConsoleReporter().report(make_lineup(FakeStatist("a", "A")))
        assert "\x1b[" not in text

    def test_failing_member_aborts_report(self) -> None:
        lineup = new_lineup().enlist(BrokenStatist())
        with pytest.raises(RuntimeError, match="sensor offline"):
            ConsoleReporter().report(lineup)

    def test_title_with_brackets_rendered_literally(self) -> None:
        config = ConsoleConfig(title="[red]sensors")
        text = ConsoleReporter(config).report(make_lineup(FakeStatist("a")))
        assert "[red]sensors" in text

    def test_title_with_unmatched_closing_tag(self) -> None:
        """Same title renders on both the empty and the populated path."""
        reporter = ConsoleReporter(ConsoleConfig(title="rack[/x]"))
        assert "rack[/x]" in reporter.report(make_lineup(FakeStatist("a")))
        assert "rack[/x]" in reporter.report(new_lineup())
