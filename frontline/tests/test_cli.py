"""
Tests for the command-line interface.
"""

import json

import pytest

from ..cli import main


class TestCLI:
    """Tests for frontline CLI commands."""

    def test_cards(self, capsys):
        """The cards command lists the faction."""
        main(["cards"])

        out = capsys.readouterr().out
        assert "Ashen Legion (28 cards)" in out
        assert "Ignis, the Eternal Flame" in out
        assert "Phoenix Resurrection" in out

    def test_cards_unknown_faction(self, capsys):
        """An unknown faction exits with an error."""
        with pytest.raises(SystemExit):
            main(["cards", "--faction", "nowhere"])

        assert "Unknown faction" in capsys.readouterr().out

    def test_new_prints_snapshot(self, capsys):
        """The new command prints the match as JSON."""
        main(["new", "--p1", "Ada", "--p2", "Brock", "--seed", "5"])

        snapshot = json.loads(capsys.readouterr().out)
        assert [p["name"] for p in snapshot["players"]] == ["Ada", "Brock"]
        assert snapshot["random_seed"] == 5
        assert snapshot["turn"] == 1

    def test_no_command(self, capsys):
        """Without a command the help is shown."""
        with pytest.raises(SystemExit):
            main([])
