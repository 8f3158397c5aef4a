"""Tests that verify parsing of the generated quality catalogue."""

import pytest

from chord_quality import format_quality, parse_quality, try_parse_quality
from chord_quality.catalogue import generate_quality_suffixes


@pytest.fixture(scope="module")
def catalogue_suffixes() -> list[str]:
    """Default quality catalogue."""
    return generate_quality_suffixes()


class TestGenerator:
    """Catalogue generation."""

    def test_sorted_and_unique(self, catalogue_suffixes: list[str]) -> None:
        """Suffixes are sorted without duplicates."""
        assert catalogue_suffixes == sorted(set(catalogue_suffixes))

    def test_contains_common_suffixes(self, catalogue_suffixes: list[str]) -> None:
        """Well-known suffixes are generated."""
        for suffix in ["", "m", "m7", "maj7", "m7b5", "7sus4", "madd9", "13#11", "dim7"]:
            assert suffix in catalogue_suffixes

    def test_alterations_need_extension(self) -> None:
        """Alterations are not generated on a bare triad."""
        suffixes = generate_quality_suffixes(
            modifiers=[""], extensions=["", "7"], alterations=["b5"], adds=[""], omits=[""], sus=[""]
        )
        assert suffixes == ["", "7", "7b5"]

    def test_alterations_stay_below_top_extension(self) -> None:
        """Alterations at or above the top extension degree are skipped."""
        suffixes = generate_quality_suffixes(
            modifiers=[""], extensions=["9"], alterations=["b9", "#11"], adds=[""], omits=[""], sus=[""]
        )
        assert suffixes == ["9"]

    def test_max_alterations(self) -> None:
        """Alteration combinations are bounded."""
        kwargs = {
            "modifiers": [""],
            "extensions": ["13"],
            "alterations": ["b5", "b9", "#11"],
            "adds": [""],
            "omits": [""],
            "sus": [""],
        }
        assert len(generate_quality_suffixes(max_alterations=1, **kwargs)) == 4
        assert len(generate_quality_suffixes(max_alterations=2, **kwargs)) == 7


class TestCatalogueParsing:
    """Every catalogue suffix parses."""

    def test_all_parse(self, catalogue_suffixes: list[str]) -> None:
        """No generated suffix is rejected."""
        unparseable = [s for s in catalogue_suffixes if try_parse_quality(s) is None]
        if unparseable:
            details = "\n".join(f"  {s!r}" for s in unparseable[:20])
            pytest.fail(f"Could not parse {len(unparseable)} suffixes:\n{details}")

    def test_canonical_round_trip(self, catalogue_suffixes: list[str]) -> None:
        """Canonical spelling of every suffix parses back to the same members."""
        mismatched = []
        for suffix in catalogue_suffixes:
            members = parse_quality(suffix)
            if parse_quality(format_quality(members)) != members:
                mismatched.append(suffix)
        assert mismatched == []
