#!/usr/bin/env python3
"""
namekit - Syllable-Based Fantasy Name Generator
===============================================

Composes pronounceable fictional names from dialect syllable files.

Quick Start
-----------
    import random
    import namekit

    gen = namekit.new(namekit.ELVEN, random=random.Random(42))
    gen.compose()        # name with 2-5 syllables
    gen.compose(3)       # three syllables

    # Random Latin or Cyrillic dialect
    namekit.flip_mode().compose()
    namekit.flip_mode_cyrillic().compose()

Modules
-------
    namekit.syllable  - Dialect line parsing and adjacency rules
    namekit.generator - Syllable pools and name composition
    namekit.dialects  - Bundled dialects and dialect pickers
    namekit.settings  - YAML settings

CLI Usage
---------
    python -m namekit generate -n 10 --dialect goblin
    python -m namekit generate --flip --cyrillic -s 3
    python -m namekit dialects
"""

__version__ = "0.1.0"
__author__ = "namekit"

from .errors import (
    NameKitError,
    LoadError,
    ParseError,
    EmptyPoolError,
    CompositionError,
    ConfigError,
)
from .syllable import Syllable, Role, Requirement
from .generator import Generator, pick_syllable_count, SYLLABLE_COUNTS
from .dialects import (
    FANTASY,
    ELVEN,
    GOBLIN,
    ROMAN,
    FANTASY_RU,
    ELVEN_RU,
    GOBLIN_RU,
    ROMAN_RU,
    CURSE,
    DIALECTS,
    LATIN_DIALECTS,
    CYRILLIC_DIALECTS,
    dialect_path,
    list_dialects,
    pick_dialect_source,
    flip_mode,
    flip_mode_cyrillic,
)


def new(dialect=FANTASY, random=None) -> Generator:
    """
    Create a Generator.

    Args:
        dialect: Path, text stream, or bundled dialect name (e.g. 'goblin')
        random: Random source with ``choice(seq)``; a fresh one if omitted
    """
    if isinstance(dialect, str) and dialect.lower() in DIALECTS:
        dialect = dialect_path(dialect)
    return Generator(dialect, random=random)


__all__ = [
    '__version__',
    'new',
    # Core
    'Generator',
    'Syllable',
    'Role',
    'Requirement',
    'pick_syllable_count',
    'SYLLABLE_COUNTS',
    # Dialects
    'FANTASY',
    'ELVEN',
    'GOBLIN',
    'ROMAN',
    'FANTASY_RU',
    'ELVEN_RU',
    'GOBLIN_RU',
    'ROMAN_RU',
    'CURSE',
    'DIALECTS',
    'LATIN_DIALECTS',
    'CYRILLIC_DIALECTS',
    'dialect_path',
    'list_dialects',
    'pick_dialect_source',
    'flip_mode',
    'flip_mode_cyrillic',
    # Errors
    'NameKitError',
    'LoadError',
    'ParseError',
    'EmptyPoolError',
    'CompositionError',
    'ConfigError',
]
