"""Tests for metrics sinks."""

from netrequest._internal.metrics import ConsoleMetricsSink, NullMetricsSink


class TestConsoleMetricsSink:
    def test_prints_url_and_status(self, capsys):
        """Should print URL and status to stderr."""
        ConsoleMetricsSink().record("https://api.test/items", 201)
        err = capsys.readouterr().err
        assert "Request URL: https://api.test/items" in err
        assert "Request Status: 201" in err

    def test_disabled_prints_nothing(self, capsys):
        """Should stay silent when disabled."""
        sink = ConsoleMetricsSink(enabled=False)
        assert sink.enabled is False
        sink.record("https://api.test/items", 200)
        assert capsys.readouterr().err == ""


class TestNullMetricsSink:
    def test_record_is_noop(self, capsys):
        """Should print nothing and return None."""
        assert NullMetricsSink().record("https://api.test", 500) is None
        assert capsys.readouterr() == ("", "")
