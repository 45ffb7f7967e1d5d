#!/usr/bin/env python3
"""
Syllables
=========
A syllable is one line of a dialect file: the syllable text, its positional
role and its adjacency requirements.

Line format::

    <token> [flag ...]

The token starts with the prefix marker (``-ka``) for name-initial
syllables, ends with the suffix marker (``dor+``) for name-final ones, and
carries neither for interior syllables. A token with both markers is a
prefix. Flags constrain the neighbours of the syllable:

    +v  next syllable must start with a vowel
    +c  next syllable must start with a consonant
    -v  previous syllable must end with a vowel
    -c  previous syllable must end with a consonant
"""

from dataclasses import dataclass
from enum import Enum

from .errors import ParseError


# =============================================================================
# Letter Classes
# =============================================================================

VOWELS = frozenset(
    "aeiouy"
    "áàâäãåæéèêëíìîïóòôöõøúùûüý"
    "аеёиоуыэюя"
)

CONSONANTS = frozenset(
    "bcdfghjklmnpqrstvwxz"
    "çñß"
    "бвгджзйклмнпрстфхцчшщ"
)

DEFAULT_PREFIX_MARKER = "-"
DEFAULT_SUFFIX_MARKER = "+"


class Role(Enum):
    """Positional role of a syllable within a name."""
    PREFIX = "prefix"
    MIDDLE = "middle"
    SUFFIX = "suffix"


class Requirement(Enum):
    """What a neighbouring syllable must have at the shared boundary."""
    LETTER = "letter"
    VOWEL = "vowel"
    CONSONANT = "consonant"


# flag -> (side, requirement)
FLAGS = {
    "+v": ("next", Requirement.VOWEL),
    "+c": ("next", Requirement.CONSONANT),
    "-v": ("previous", Requirement.VOWEL),
    "-c": ("previous", Requirement.CONSONANT),
}


# =============================================================================
# Syllable
# =============================================================================

@dataclass(frozen=True)
class Syllable:
    """An immutable syllable parsed from a dialect line."""
    text: str
    role: Role = Role.MIDDLE
    next_requirement: Requirement = Requirement.LETTER
    previous_requirement: Requirement = Requirement.LETTER
    raw: str = ""

    def __post_init__(self):
        if not self.text:
            raise ParseError("syllable text is empty", line=self.raw)

    @classmethod
    def parse(cls, line: str,
              prefix_marker: str = DEFAULT_PREFIX_MARKER,
              suffix_marker: str = DEFAULT_SUFFIX_MARKER) -> "Syllable":
        """
        Parse one dialect line.

        Raises
        ------
        ParseError
            If the line is blank, the token holds no letters after the
            markers are removed, or a flag is unknown or contradictory.
        """
        raw = line.strip()
        fields = raw.split()
        if not fields:
            raise ParseError("blank line", line=line)

        token, flags = fields[0], fields[1:]

        # Prefix is checked first: a token carrying both markers is a prefix.
        if token.startswith(prefix_marker):
            role = Role.PREFIX
            token = token[len(prefix_marker):]
            if token.endswith(suffix_marker):
                token = token[:-len(suffix_marker)]
        elif token.endswith(suffix_marker):
            role = Role.SUFFIX
            token = token[:-len(suffix_marker)]
        else:
            role = Role.MIDDLE

        text = token.lower()
        if not text:
            raise ParseError("no syllable text after markers", line=raw)
        if not text.replace("'", "").isalpha():
            raise ParseError(f"syllable '{text}' contains non-letter characters", line=raw)

        requirements = {"next": Requirement.LETTER, "previous": Requirement.LETTER}
        for flag in flags:
            if flag not in FLAGS:
                raise ParseError(f"unknown flag '{flag}'", line=raw)
            side, requirement = FLAGS[flag]
            if requirements[side] not in (Requirement.LETTER, requirement):
                raise ParseError(f"contradictory {side}-syllable flags", line=raw)
            requirements[side] = requirement

        return cls(
            text=text,
            role=role,
            next_requirement=requirements["next"],
            previous_requirement=requirements["previous"],
            raw=raw,
        )

    # -------------------------------------------------------------------------
    # Roles
    # -------------------------------------------------------------------------

    def is_prefix(self) -> bool:
        return self.role is Role.PREFIX

    def is_suffix(self) -> bool:
        return self.role is Role.SUFFIX

    def is_middle(self) -> bool:
        return self.role is Role.MIDDLE

    # -------------------------------------------------------------------------
    # Boundary letters
    # -------------------------------------------------------------------------

    @property
    def first_letter(self) -> str:
        return self.text[0]

    @property
    def last_letter(self) -> str:
        return self.text[-1]

    def vowel_first(self) -> bool:
        return self.first_letter in VOWELS

    def consonant_first(self) -> bool:
        return self.first_letter in CONSONANTS

    def vowel_last(self) -> bool:
        return self.last_letter in VOWELS

    def consonant_last(self) -> bool:
        return self.last_letter in CONSONANTS

    # -------------------------------------------------------------------------
    # Compatibility
    # -------------------------------------------------------------------------

    def incompatible(self, other: "Syllable") -> bool:
        """True if ``other`` may not directly follow this syllable."""
        return (
            self._next_incompatible(other)
            or self._previous_incompatible(other)
            or self.last_letter == other.first_letter
        )

    def compatible(self, other: "Syllable") -> bool:
        """True if ``other`` may directly follow this syllable."""
        return not self.incompatible(other)

    def _next_incompatible(self, other: "Syllable") -> bool:
        # This syllable's demands on what comes after it
        if self.next_requirement is Requirement.VOWEL:
            return other.consonant_first()
        if self.next_requirement is Requirement.CONSONANT:
            return other.vowel_first()
        return False

    def _previous_incompatible(self, other: "Syllable") -> bool:
        # The other syllable's demands on what comes before it
        if other.previous_requirement is Requirement.VOWEL:
            return self.consonant_last()
        if other.previous_requirement is Requirement.CONSONANT:
            return self.vowel_last()
        return False

    def __str__(self) -> str:
        return self.text
