import pytest
from pydantic import ValidationError

from holdem.__main__ import DemoConfig, main, parse_args


class TestRangeDemo:
    """Test suite for the range percentage command line demo."""

    def test_prints_percentage(self, capsys):
        """Test the printed percentage."""
        assert main(["KK+"]) == 0
        assert capsys.readouterr().out.strip() == "Range percent: 0.90%"

    def test_default_range(self, capsys):
        """Test the default range."""
        assert main([]) == 0
        # 88+, 22+ collapses to every pocket pair
        assert capsys.readouterr().out.strip() == "Range percent: 5.88%"

    def test_decimals(self, capsys):
        """Test the decimals option."""
        assert main(["88+, AJo+, ATs+", "--decimals", "4"]) == 0
        assert capsys.readouterr().out.strip() == "Range percent: 7.0890%"

    def test_parse_error(self, capsys):
        """Test the error message for a bad range."""
        assert main(["AKx"]) == 1
        assert capsys.readouterr().out.strip() == "Error: Unable to parse hand range"

    def test_config_validation(self):
        """Test config defaults and validation."""
        assert DemoConfig().range_text == "88+, 22+"
        with pytest.raises(ValidationError):
            DemoConfig(decimals=-1)

    def test_debug_logging(self, capsys, caplog):
        """Test debug logging of range expansion."""
        caplog.set_level("DEBUG", logger="holdem")
        assert main(["AK", "--log-level", "debug"]) == 0
        assert capsys.readouterr().out.strip() == "Range percent: 1.21%"
        assert any("Expanded 'AK'" in record.getMessage() for record in caplog.records)

    def test_decimals_out_of_range(self, capsys):
        """Test that an out-of-range --decimals prints an error instead of raising."""
        assert main(["KK+", "--decimals", "11"]) == 1
        out = capsys.readouterr().out
        assert out.startswith("Error: decimals:")
        assert "Range percent" not in out

    def test_unknown_log_level(self, capsys):
        """Test that an unknown --log-level is rejected before logging is configured."""
        assert main(["KK+", "--log-level", "verbose"]) == 1
        assert capsys.readouterr().out.startswith("Error: log_level:")

    def test_log_level_case(self):
        """Test that log levels are accepted in any case."""
        assert DemoConfig(log_level="info").log_level == "INFO"
        with pytest.raises(ValidationError):
            DemoConfig(log_level="VERBOSE")

    def test_argument_defaults_follow_config(self):
        """Test that the command line defaults come from the config model."""
        args = parse_args([])
        defaults = DemoConfig()
        assert args.range_text == defaults.range_text
        assert args.decimals == defaults.decimals
        assert args.log_level == defaults.log_level
