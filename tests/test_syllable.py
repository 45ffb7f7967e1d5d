"""
Tests for Syllable Parsing
==========================
Tests for dialect line parsing, roles and adjacency compatibility.
"""

import dataclasses

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namekit.errors import ParseError
from namekit.syllable import Requirement, Role, Syllable


def s(line):
    return Syllable.parse(line)


class TestParse:
    """Tests for Syllable.parse."""

    def test_prefix_marker(self):
        """A leading marker makes a prefix and is stripped."""
        syl = s("-mor")
        assert syl.role is Role.PREFIX
        assert syl.text == "mor"

    def test_suffix_marker(self):
        """A trailing marker makes a suffix and is stripped."""
        syl = s("dor+")
        assert syl.role is Role.SUFFIX
        assert syl.text == "dor"

    def test_no_marker_is_middle(self):
        """A bare token is a middle syllable."""
        syl = s("tar")
        assert syl.role is Role.MIDDLE
        assert syl.text == "tar"

    def test_both_markers_is_prefix(self):
        """The prefix check wins when a token carries both markers."""
        syl = s("-ka+")
        assert syl.role is Role.PREFIX
        assert syl.text == "ka"

    def test_line_ending_stripped(self):
        """Trailing newline and whitespace are removed."""
        syl = s("-ab  \r\n")
        assert syl.text == "ab"
        assert syl.raw == "-ab"

    def test_text_lowercased(self):
        """Syllable text is stored in lower case."""
        assert s("-Mor").text == "mor"
        assert s("ДОР+").text == "дор"

    def test_flags(self):
        """Flags set the neighbour requirements."""
        syl = s("a -c +v")
        assert syl.previous_requirement is Requirement.CONSONANT
        assert syl.next_requirement is Requirement.VOWEL

    def test_no_flags_means_any_letter(self):
        """Without flags neighbours are unconstrained."""
        syl = s("an")
        assert syl.previous_requirement is Requirement.LETTER
        assert syl.next_requirement is Requirement.LETTER

    def test_repeated_flag_allowed(self):
        """Repeating the same flag is harmless."""
        assert s("ka +v +v").next_requirement is Requirement.VOWEL

    def test_custom_markers(self):
        """Markers can be replaced."""
        syl = Syllable.parse("^mor", prefix_marker="^", suffix_marker="$")
        assert syl.is_prefix()
        assert Syllable.parse("dor$", prefix_marker="^", suffix_marker="$").is_suffix()

    def test_apostrophe_allowed(self):
        """Apostrophes may appear inside syllable text."""
        assert s("-t'ka").text == "t'ka"

    @pytest.mark.parametrize("line", ["", "   ", "\n", "-", "+", "-+"])
    def test_empty_text_rejected(self, line):
        """Blank lines and bare markers are malformed."""
        with pytest.raises(ParseError):
            s(line)

    def test_unknown_flag_rejected(self):
        """Unknown flags are malformed."""
        with pytest.raises(ParseError, match="unknown flag"):
            s("ka +x")

    def test_contradictory_flags_rejected(self):
        """A syllable cannot demand both a vowel and a consonant."""
        with pytest.raises(ParseError, match="contradictory"):
            s("ka +v +c")
        with pytest.raises(ParseError, match="contradictory"):
            s("ka -v -c")

    def test_non_letters_rejected(self):
        """Digits and punctuation are malformed."""
        with pytest.raises(ParseError):
            s("k4")
        with pytest.raises(ParseError):
            s("ka-ra")

    def test_parse_error_is_value_error(self):
        """ParseError can be caught as ValueError."""
        with pytest.raises(ValueError):
            s("")


class TestRoles:
    """Tests for role predicates."""

    @pytest.mark.parametrize("line,role", [
        ("-mor", "prefix"),
        ("an", "middle"),
        ("dor+", "suffix"),
        ("-ka+", "prefix"),
    ])
    def test_exactly_one_role(self, line, role):
        """Each syllable has exactly one role."""
        syl = s(line)
        flags = {
            "prefix": syl.is_prefix(),
            "middle": syl.is_middle(),
            "suffix": syl.is_suffix(),
        }
        assert sum(flags.values()) == 1
        assert flags[role]

    def test_immutable(self):
        """Syllables cannot be changed after parsing."""
        syl = s("-mor")
        with pytest.raises(dataclasses.FrozenInstanceError):
            syl.role = Role.SUFFIX

    def test_str(self):
        """str() renders the syllable text."""
        assert str(s("dor+")) == "dor"

    def test_hashable(self):
        """Equal syllables hash alike."""
        assert len({s("an"), s("an"), s("tar")}) == 2


class TestBoundaryLetters:
    """Tests for vowel/consonant boundary classification."""

    def test_latin(self):
        syl = s("ark")
        assert syl.vowel_first()
        assert not syl.consonant_first()
        assert syl.consonant_last()
        assert not syl.vowel_last()

    def test_cyrillic(self):
        syl = s("ка")
        assert syl.consonant_first()
        assert syl.vowel_last()

    def test_soft_sign_is_neither(self):
        """Letters outside both classes satisfy neither check."""
        syl = s("эль+")
        assert not syl.vowel_last()
        assert not syl.consonant_last()


class TestCompatibility:
    """Tests for the adjacency rule."""

    def test_unconstrained_pair(self):
        """Syllables without flags and distinct boundary letters fit."""
        assert s("-mor").compatible(s("an"))

    def test_next_must_be_consonant(self):
        """+c rejects a vowel-initial successor."""
        pre = s("-a +c")
        assert pre.incompatible(s("an"))
        assert pre.compatible(s("ra"))

    def test_next_must_be_vowel(self):
        """+v rejects a consonant-initial successor."""
        pre = s("-th +v")
        assert pre.incompatible(s("ka"))
        assert pre.compatible(s("an"))

    def test_previous_must_be_vowel(self):
        """-v rejects a consonant-final predecessor."""
        suf = s("dor+ -v")
        assert s("-mor").incompatible(suf)
        assert s("-ka").compatible(suf)

    def test_previous_must_be_consonant(self):
        """-c rejects a vowel-final predecessor."""
        suf = s("ea+ -c")
        assert s("-ka").incompatible(suf)
        assert s("-mor").compatible(suf)

    def test_repeated_boundary_letter(self):
        """The same letter on both sides of the boundary is rejected."""
        assert s("-mor").incompatible(s("ra"))
        assert s("-el").incompatible(s("la"))

    def test_cyrillic_flags(self):
        """Flags apply to Cyrillic letters too."""
        pre = s("-б +v")
        assert pre.compatible(s("ан"))
        assert pre.incompatible(s("ка"))

    def test_verdict_is_stable(self):
        """The same pair always gets the same verdict."""
        a, b = s("-a +c"), s("tar")
        assert all(a.compatible(b) for _ in range(10))
        c = s("an")
        assert not any(a.compatible(c) for _ in range(10))

    def test_compatible_is_negation(self):
        """compatible() and incompatible() never agree."""
        pool = [s(x) for x in ("-a +c", "an", "tar", "dor+ -v", "ea+ -c", "th +v")]
        for a in pool:
            for b in pool:
                assert a.compatible(b) != a.incompatible(b)
