"""Tests for the namesuggest CLI."""

from __future__ import annotations

from typer.testing import CliRunner

from namesuggest import __version__
from namesuggest.cli.app import app

runner = CliRunner()


class TestVersion:
    """Tests for the --version flag."""

    def test_prints_version(self) -> None:
        """Should print the package version and exit 0."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestDistanceCommand:
    """Tests for the distance command."""

    def test_prints_distance(self) -> None:
        """Should print the edit distance."""
        result = runner.invoke(app, ["distance", "kitten", "sitting"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "3"

    def test_non_ascii_arguments(self) -> None:
        """Non-ASCII characters count as one edit."""
        result = runner.invoke(app, ["distance", "naïve", "naive"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "1"


class TestSuggestCommand:
    """Tests for the suggest command."""

    def test_suggests_closest_name(self) -> None:
        """Should print the best match after 'Did you mean?'."""
        result = runner.invoke(app, ["suggest", "aaaa", "aaab", "aaabc"])

        assert result.exit_code == 0
        assert "Did you mean?" in result.stdout
        assert "aaab" in result.stdout
        assert "aaabc" not in result.stdout

    def test_no_match_exits_one(self) -> None:
        """Should exit 1 when nothing is close enough."""
        result = runner.invoke(app, ["suggest", "1111111111", "aaab", "aaabc"])

        assert result.exit_code == 1
        assert "No close match" in result.stdout

    def test_explicit_threshold(self) -> None:
        """--threshold overrides the default."""
        result = runner.invoke(app, ["suggest", "aaaa", "aaab", "--threshold", "0"])

        assert result.exit_code == 1

    def test_case_insensitive_match(self) -> None:
        """Case-insensitive duplicates are suggested."""
        result = runner.invoke(app, ["suggest", "aaaa", "AAAA"])

        assert result.exit_code == 0
        assert "AAAA" in result.stdout

    def test_known_name(self) -> None:
        """An exact match is reported as known."""
        result = runner.invoke(app, ["suggest", "count", "counter", "count"])

        assert result.exit_code == 0
        assert "is a known name" in result.stdout
        assert "Did you mean?" not in result.stdout

    def test_reordered_words(self) -> None:
        """Reordered words are suggested."""
        result = runner.invoke(
            app, ["suggest", "a_variable_longer_name", "a_longer_variable_name"]
        )

        assert result.exit_code == 0
        assert "a_longer_variable_name" in result.stdout

    def test_custom_separator(self) -> None:
        """--separator changes how names are split into words."""
        result = runner.invoke(
            app,
            [
                "suggest",
                "turing-eager",
                "eager-turing",
                "--separator",
                "-",
                "--threshold",
                "0",
            ],
        )

        assert result.exit_code == 0
        assert "eager-turing" in result.stdout

    def test_empty_separator_is_an_error(self) -> None:
        """An unusable separator exits 2 with a message."""
        result = runner.invoke(app, ["suggest", "foo", "bar", "--separator", ""])

        assert result.exit_code == 2
        assert "word_separator" in result.output

    def test_all_falls_back_to_reordered_words(self) -> None:
        """--all still suggests a reordered-word match using --separator."""
        result = runner.invoke(
            app,
            [
                "suggest",
                "turing-eager",
                "eager-turing",
                "--separator",
                "-",
                "--threshold",
                "0",
                "--all",
            ],
        )

        assert result.exit_code == 0
        assert "eager-turing" in result.stdout

    def test_all_without_any_match_exits_one(self) -> None:
        """--all exits 1 when neither distance nor words match."""
        result = runner.invoke(app, ["suggest", "1111111111", "aaab", "--all"])

        assert result.exit_code == 1
        assert "No close match" in result.stdout

    def test_all_lists_every_close_name(self) -> None:
        """--all lists close names, closest first."""
        result = runner.invoke(
            app, ["suggest", "countr", "max_value", "counter", "count", "--all"]
        )

        assert result.exit_code == 0
        lines = [line.strip() for line in result.stdout.splitlines()]
        assert lines[1:] == ["counter", "count"]
