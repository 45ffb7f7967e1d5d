#!/usr/bin/env python3
"""
namekit CLI
===========
Command-line interface for syllable-based name generation.

Usage:
    namekit generate -n 10 --dialect elven
    namekit generate --flip --cyrillic -s 3
    namekit generate --file my_dialect.txt --seed 7 -v
    namekit dialects
    namekit inspect goblin
"""

import argparse
import logging
import random
import sys
from pathlib import Path

from namekit import __version__
from namekit.dialects import (
    DIALECTS,
    dialect_path,
    flip_mode,
    flip_mode_cyrillic,
    list_dialects,
)
from namekit.errors import NameKitError
from namekit.generator import Generator
from namekit.settings import get_setting


# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet

    def print(self, *args, **kwargs):
        if not self.quiet:
            print(*args, **kwargs)

    def result(self, *args, **kwargs):
        """Print command results, even in quiet mode."""
        print(*args, **kwargs)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)

    def table(self, headers: list, rows: list, col_widths: list = None):
        """Print a formatted table."""
        if self.quiet:
            return

        if not col_widths:
            col_widths = [max(len(str(h)), max((len(str(r[i])) for r in rows), default=0)) + 2
                          for i, h in enumerate(headers)]

        header_line = ''.join(str(h).ljust(w) for h, w in zip(headers, col_widths))
        print(header_line)
        print('-' * len(header_line))

        for row in rows:
            print(''.join(str(c).ljust(w) for c, w in zip(row, col_widths)))


def build_generator(args, rng: random.Random) -> Generator:
    """Create the generator selected by the command-line options."""
    if args.file:
        return Generator(Path(args.file), random=rng)
    if args.flip:
        return flip_mode_cyrillic(rng) if args.cyrillic else flip_mode(rng)

    name = args.dialect or get_setting('dialect.default', 'fantasy')
    if args.cyrillic and not name.endswith('-ru'):
        name = f"{name}-ru"
    return Generator(dialect_path(name), random=rng)


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate names."""
    if args.count < 1:
        out.error("--count must be at least 1")
        return 1

    if args.file and args.cyrillic:
        out.error("--cyrillic cannot be combined with --file")
        return 1

    rng = random.Random(args.seed)
    try:
        gen = build_generator(args, rng)
    except ValueError as e:
        out.error(str(e))
        return 1

    out.print(f"# {gen}")
    for _ in range(args.count):
        syllables = gen.compose_syllables(args.syllables)
        name = gen.render(syllables)
        if args.verbose:
            split = '-'.join(s.text for s in syllables)
            out.result(f"{name:<20} {split}")
        else:
            out.result(name)
    return 0


def cmd_dialects(args, out: Output):
    """List bundled dialects."""
    rows = [[name, info['script'], Path(info['path']).name]
            for name, info in list_dialects().items()]
    out.table(['Dialect', 'Script', 'File'], rows)
    return 0


def cmd_inspect(args, out: Output):
    """Show the syllable pools of a dialect."""
    try:
        path = dialect_path(args.dialect)
    except ValueError:
        path = Path(args.dialect)

    gen = Generator(path, random=random.Random(0))
    rows = [
        ['prefix', len(gen.prefix_pool), ' '.join(s.text for s in gen.prefix_pool[:8])],
        ['middle', len(gen.middle_pool), ' '.join(s.text for s in gen.middle_pool[:8])],
        ['suffix', len(gen.suffix_pool), ' '.join(s.text for s in gen.suffix_pool[:8])],
    ]
    out.print(f"# {gen}")
    out.table(['Role', 'Count', 'Sample'], rows, [8, 7, 50])
    return 0


# =============================================================================
# Main
# =============================================================================

def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='namekit',
        description='namekit - Syllable-Based Fantasy Name Generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate -n 10 --dialect elven
  %(prog)s generate --flip --cyrillic -s 3
  %(prog)s generate --file my_dialect.txt --seed 7 -v
  %(prog)s dialects
  %(prog)s inspect goblin
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate names')
    p.add_argument('-n', '--count', type=int, default=10, help='Number of names (default: 10)')
    source = p.add_mutually_exclusive_group()
    source.add_argument('--dialect', '-d', choices=sorted(DIALECTS), help='Bundled dialect')
    source.add_argument('--file', '-f', help='Path to a dialect file')
    source.add_argument('--flip', action='store_true', help='Pick a bundled dialect at random')
    p.add_argument('--cyrillic', action='store_true', help='Use the Cyrillic variant of --dialect or --flip')
    p.add_argument('--syllables', '-s', type=int, help='Syllables per name (default: random 2-5)')
    p.add_argument('--seed', type=int, help='Seed for reproducible output')
    p.add_argument('--verbose', '-v', action='store_true', help='Show syllable split')

    # --- dialects ---
    subparsers.add_parser('dialects', aliases=['ls'], help='List bundled dialects')

    # --- inspect ---
    p = subparsers.add_parser('inspect', aliases=['i'], help='Show syllable pools of a dialect')
    p.add_argument('dialect', help='Bundled dialect name or dialect file path')
    p.add_argument('--verbose', '-v', action='store_true', help='Show debug logging')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    level = 'DEBUG' if getattr(args, 'verbose', False) else get_setting('logging.level', 'WARNING')
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')

    cmd_map = {
        'gen': 'generate', 'g': 'generate',
        'ls': 'dialects',
        'i': 'inspect',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=getattr(args, 'quiet', False))

    commands = {
        'generate': cmd_generate,
        'dialects': cmd_dialects,
        'inspect': cmd_inspect,
    }

    handler = commands.get(command)
    if handler:
        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except NameKitError as e:
            out.error(str(e))
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
