#!/usr/bin/env python3
"""
Syllable Name Generator
=======================
Assembles names from the syllables of a dialect file.

A name is one prefix, zero or more middles and one suffix, where every
syllable must be compatible with the one before it. The number of
syllables is drawn from a fixed weighted table unless given.

Usage:
    import random
    from namekit import Generator, GOBLIN

    gen = Generator(GOBLIN, random=random.Random(7))
    print(gen.compose(3))
"""

import logging
import random as _random
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from .errors import (
    CompositionError,
    ConfigError,
    EmptyPoolError,
    LoadError,
    ParseError,
)
from .settings import get_setting
from .syllable import (
    DEFAULT_PREFIX_MARKER,
    DEFAULT_SUFFIX_MARKER,
    Role,
    Syllable,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Syllable Count
# =============================================================================

# 2: 4/18, 3: 10/18, 4: 3/18, 5: 1/18
SYLLABLE_COUNTS = (2,) * 4 + (3,) * 10 + (4,) * 3 + (5,)
MIN_SYLLABLES, MAX_SYLLABLES = 2, 5


@lru_cache(maxsize=1)
def syllable_count_table() -> Tuple[int, ...]:
    """
    Load and validate the configured syllable count table.

    Raises:
        ConfigError: If the table is empty or holds a value outside 2-5
    """
    table = get_setting('composition.syllable_counts', SYLLABLE_COUNTS)
    if not isinstance(table, (list, tuple)) or not table:
        raise ConfigError("composition.syllable_counts must be a non-empty list")
    for n in table:
        if isinstance(n, bool) or not isinstance(n, int) or not MIN_SYLLABLES <= n <= MAX_SYLLABLES:
            raise ConfigError(
                f"composition.syllable_counts entries must be integers from "
                f"{MIN_SYLLABLES} to {MAX_SYLLABLES}, got {n!r}"
            )
    return tuple(table)


def pick_syllable_count(random) -> int:
    """Draw a syllable count uniformly from the weighted count table."""
    return random.choice(syllable_count_table())


# =============================================================================
# Generator
# =============================================================================

DialectSource = Union[str, Path, Any]


class Generator:
    """
    Composes names from one dialect.

    Parameters
    ----------
    dialect : str, Path or stream
        Dialect file to load. Streams are rewound on refresh when seekable;
        binary streams are decoded with the configured encoding.
    random : random.Random, optional
        Source of randomness; anything with ``choice(seq)``. A private
        ``random.Random()`` is created when omitted.

    Raises
    ------
    ConfigError
        The configured syllable count table is invalid.
    LoadError
        The dialect cannot be read.
    ParseError
        A dialect line is malformed.
    EmptyPoolError
        The dialect has no prefix, middle or suffix syllables.
    """

    def __init__(self, dialect: DialectSource, random=None):
        self.dialect = dialect
        self.random = random if random is not None else _random.Random()
        self.prefix_pool: Tuple[Syllable, ...] = ()
        self.middle_pool: Tuple[Syllable, ...] = ()
        self.suffix_pool: Tuple[Syllable, ...] = ()
        self._candidates: Dict[Tuple[Syllable, int], Tuple[Syllable, ...]] = {}

        syllable_count_table()
        self.refresh()

    @property
    def name(self) -> str:
        """Short label for the dialect source."""
        if isinstance(self.dialect, (str, Path)):
            return Path(self.dialect).name
        return getattr(self.dialect, 'name', None) or type(self.dialect).__name__

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def refresh(self):
        """
        (Re)load the dialect and replace all three pools.

        Pools are only swapped in after the whole source has parsed and
        every pool is non-empty, so a failed reload keeps the old pools.
        """
        prefix_marker = get_setting('dialect.prefix_marker', DEFAULT_PREFIX_MARKER)
        suffix_marker = get_setting('dialect.suffix_marker', DEFAULT_SUFFIX_MARKER)

        pools: Dict[Role, List[Syllable]] = {role: [] for role in Role}
        for lineno, line in enumerate(self._read_lines(), 1):
            if not line.strip():
                continue
            try:
                syllable = Syllable.parse(line, prefix_marker, suffix_marker)
            except ParseError as e:
                raise ParseError(str(e), line=e.line, source=self.name, lineno=lineno) from e
            pools[syllable.role].append(syllable)

        for role in (Role.PREFIX, Role.MIDDLE, Role.SUFFIX):
            if not pools[role]:
                raise EmptyPoolError(role.value, source=self.name)

        self.prefix_pool = tuple(pools[Role.PREFIX])
        self.middle_pool = tuple(pools[Role.MIDDLE])
        self.suffix_pool = tuple(pools[Role.SUFFIX])
        self._candidates = {}

        logger.debug(
            f"Loaded {self.name}: {len(self.prefix_pool)} prefixes, "
            f"{len(self.middle_pool)} middles, {len(self.suffix_pool)} suffixes"
        )

    def _read_lines(self) -> List[str]:
        if isinstance(self.dialect, (str, Path)):
            encoding = get_setting('dialect.encoding', 'utf-8')
            try:
                with open(self.dialect, 'r', encoding=encoding) as f:
                    return f.readlines()
            except (OSError, UnicodeDecodeError) as e:
                raise LoadError(f"Cannot read dialect {self.dialect}: {e}") from e

        try:
            if hasattr(self.dialect, 'seekable') and self.dialect.seekable():
                self.dialect.seek(0)
            lines = self.dialect.readlines()
        except AttributeError as e:
            raise LoadError(f"Not a readable dialect source: {self.dialect!r}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(f"Cannot read dialect {self.name}: {e}") from e

        # Binary handles yield bytes
        encoding = get_setting('dialect.encoding', 'utf-8')
        try:
            return [line.decode(encoding) if isinstance(line, bytes) else line
                    for line in lines]
        except UnicodeDecodeError as e:
            raise LoadError(f"Cannot decode dialect {self.name} as {encoding}: {e}") from e

    # -------------------------------------------------------------------------
    # Composition
    # -------------------------------------------------------------------------

    def compose_syllables(self, count: Optional[int] = None) -> List[Syllable]:
        """
        Compose a name as a list of syllables.

        Returns exactly ``count`` syllables (prefix, middles, suffix) when
        ``count >= 2``, otherwise a single prefix.
        """
        if count is None:
            count = pick_syllable_count(self.random)
        elif isinstance(count, bool) or not isinstance(count, int):
            raise TypeError(f"count must be an int, not {type(count).__name__}")

        pre = self.random.choice(self.prefix_pool)
        if count < 2:
            return [pre]

        name = [pre]
        for _ in range(count - 2):
            name.append(self.next_compatible(name[-1], self.middle_pool))
        name.append(self.next_compatible(name[-1], self.suffix_pool))
        return name

    def compose(self, count: Optional[int] = None) -> str:
        """Compose a name and capitalize its first letter."""
        return self.render(self.compose_syllables(count))

    @staticmethod
    def render(syllables: Sequence[Syllable]) -> str:
        """Join syllables and upper-case the first letter of the result."""
        text = ''.join(s.text for s in syllables)
        return text[:1].upper() + text[1:]

    def compose_many(self, n: int, count: Optional[int] = None) -> List[str]:
        """Compose ``n`` independent names."""
        return [self.compose(count) for _ in range(n)]

    def next_compatible(self, previous: Syllable, pool: Sequence[Syllable]) -> Syllable:
        """
        Pick uniformly among the syllables of ``pool`` that may follow
        ``previous``.

        Raises
        ------
        CompositionError
            If no syllable in the pool is compatible.
        """
        candidates = self._compatible_candidates(previous, pool)
        if not candidates:
            logger.warning(f"No syllable in {self.name} may follow '{previous.text}'")
            raise CompositionError(
                f"No compatible syllable may follow '{previous.text}' in {self.name}"
            )
        return self.random.choice(candidates)

    def _compatible_candidates(self, previous: Syllable,
                               pool: Sequence[Syllable]) -> Tuple[Syllable, ...]:
        # Only the generator's own pools are cached; refresh() clears the cache.
        owned = any(pool is p for p in (self.prefix_pool, self.middle_pool, self.suffix_pool))
        if not owned:
            return tuple(s for s in pool if previous.compatible(s))

        key = (previous, id(pool))
        cached = self._candidates.get(key)
        if cached is None:
            cached = tuple(s for s in pool if previous.compatible(s))
            self._candidates[key] = cached
        return cached

    def __str__(self) -> str:
        return f"Generator ({self.name})"

    def __repr__(self) -> str:
        return f"Generator(dialect={self.dialect!r})"
