#!/usr/bin/env python3
"""
Dialects
========
Bundled dialect files and helpers for choosing one.

Each dialect comes in a Latin and a Cyrillic variant:

    fantasy, elven, goblin, roman
    fantasy-ru, elven-ru, goblin-ru, roman-ru

plus the experimental ``curse`` dialect.
"""

import random as _random
from pathlib import Path
from typing import Dict, Sequence, Union

from .generator import Generator
from .settings import get_setting, resolve_path

DIALECTS_DIR = resolve_path(get_setting('dialect.directory', 'languages'))

FANTASY = DIALECTS_DIR / 'fantasy.txt'
ELVEN = DIALECTS_DIR / 'elven.txt'
GOBLIN = DIALECTS_DIR / 'goblin.txt'
ROMAN = DIALECTS_DIR / 'roman.txt'

FANTASY_RU = DIALECTS_DIR / 'fantasy-ru.txt'
ELVEN_RU = DIALECTS_DIR / 'elven-ru.txt'
GOBLIN_RU = DIALECTS_DIR / 'goblin-ru.txt'
ROMAN_RU = DIALECTS_DIR / 'roman-ru.txt'

# Experimental
CURSE = DIALECTS_DIR / 'experimental' / 'curse.txt'

LATIN_DIALECTS = (FANTASY, ELVEN, GOBLIN, ROMAN)
CYRILLIC_DIALECTS = (FANTASY_RU, ELVEN_RU, GOBLIN_RU, ROMAN_RU)

DIALECTS: Dict[str, Path] = {
    'fantasy': FANTASY,
    'elven': ELVEN,
    'goblin': GOBLIN,
    'roman': ROMAN,
    'fantasy-ru': FANTASY_RU,
    'elven-ru': ELVEN_RU,
    'goblin-ru': GOBLIN_RU,
    'roman-ru': ROMAN_RU,
    'curse': CURSE,
}


def dialect_path(name: str) -> Path:
    """
    Resolve a bundled dialect name to its file.

    Raises:
        ValueError: If the name is not a bundled dialect
    """
    path = DIALECTS.get(name.lower())
    if path is None:
        available = ', '.join(sorted(DIALECTS))
        raise ValueError(f"Unknown dialect '{name}'. Available dialects: {available}")
    return path


def list_dialects() -> Dict[str, Dict[str, str]]:
    """List bundled dialects with their script and file."""
    return {
        name: {
            'script': 'cyrillic' if path in CYRILLIC_DIALECTS else 'latin',
            'path': str(path),
        }
        for name, path in DIALECTS.items()
    }


def pick_dialect_source(sources: Sequence[Union[str, Path]], random) -> Union[str, Path]:
    """Pick one dialect source uniformly at random."""
    if not sources:
        raise ValueError("No dialect sources to choose from")
    return random.choice(list(sources))


def flip_mode(random=None):
    """Generator over one of the Latin-script dialects, chosen at random."""
    return _flip(LATIN_DIALECTS, random)


def flip_mode_cyrillic(random=None):
    """Generator over one of the Cyrillic-script dialects, chosen at random."""
    return _flip(CYRILLIC_DIALECTS, random)


def _flip(sources, random):
    rng = random if random is not None else _random.Random()
    return Generator(pick_dialect_source(sources, rng), random=rng)
