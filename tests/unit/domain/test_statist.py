"""Tests for domain/statist.py."""

from statist.domain.state import TimedStatist
from statist.domain.statist import Statist
from tests.factories import FakeStatist


class TestStatistProtocol:
    """Structural typing: no base class required."""

    def test_fake_is_statist(self) -> None:
        assert isinstance(FakeStatist("a"), Statist)

    def test_timed_statist_is_statist(self) -> None:
        assert isinstance(TimedStatist("a"), Statist)

    def test_object_without_methods_is_not_statist(self) -> None:
        assert not isinstance(object(), Statist)

    def test_partial_implementation_is_not_statist(self) -> None:
        class NameOnly:
            def name(self) -> str:
                return "x"

        assert not isinstance(NameOnly(), Statist)
