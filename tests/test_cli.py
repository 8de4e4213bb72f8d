"""
Tests for the command line interface.

Only the offline ``convert`` subcommand is exercised; ``serve``
would block on uvicorn.
"""

import json

import pytest

from numeral_api.cli import main


class TestConvertCommand:
    """Tests for ``numeral-api convert``."""

    def test_all_values_convert(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Every value converts and the exit code is 0."""
        exit_code = main(["convert", "XIV", "14"])
        output = json.loads(capsys.readouterr().out)

        assert exit_code == 0
        assert output["total"] == 2
        assert output["results"][0]["conversion"] == "roman_to_arabic"
        assert output["results"][0]["arabic"] == 14
        assert output["results"][1]["conversion"] == "arabic_to_roman"
        assert output["results"][1]["roman"] == "XIV"

    def test_failures_set_exit_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A failed value is reported and the exit code is 1."""
        exit_code = main(["convert", "IIII", "MMXXIV"])
        output = json.loads(capsys.readouterr().out)

        assert exit_code == 1
        assert output["results"][0]["status"] == "error"
        assert output["results"][0]["input"] == "IIII"
        assert output["results"][1]["arabic"] == 2024

    def test_requires_a_subcommand(self) -> None:
        """Running without a subcommand is a usage error."""
        with pytest.raises(SystemExit):
            main([])
