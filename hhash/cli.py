#!/usr/bin/env python3
"""
HHash CLI
=========
Command-line interface for human-readable hashing.

Usage:
    hhash                              random hash
    hhash -s "hello world"             hash a string
    hhash -p "%A%V{G}%N" -s hello      hash with a custom pattern
    cat file.txt | hhash -v            hash piped lines, log collision odds
"""

import argparse
import itertools
import logging
import os
import select
import stat
import sys
import time
from typing import Iterable, List, Optional, TextIO

from hhash import __version__
from hhash.config import get_config
from hhash.engine import HHash
from hhash.exceptions import ConflictingInputError, HHashError
from hhash.settings import get_setting

logger = logging.getLogger('hhash.cli')

DEFAULT_CLI_PATTERN = '%j_%n'

# Seconds to wait for a pipe to produce its first byte
PIPE_WAIT = 0.1


# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output: the hash on stdout, errors on stderr."""

    def __init__(self, stdout: TextIO = None, stderr: TextIO = None):
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr

    def print(self, *args, **kwargs):
        print(*args, file=self.stdout, **kwargs)

    def error(self, msg: str):
        print(f"Error: {msg}", file=self.stderr)


def setup_logging(verbose: bool = False):
    """Log to stderr; INFO with --verbose, warnings only otherwise."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
        force=True,
    )


def stdin_has_data(stdin: TextIO, timeout: float = PIPE_WAIT) -> bool:
    """
    Whether reading stdin would return data or EOF without blocking.

    Pipes and sockets are polled for up to ``timeout`` seconds; an open
    pipe that stays silent counts as no input.
    Regular files and in-memory streams never block.
    """
    try:
        fd = stdin.fileno()
    except (AttributeError, OSError, ValueError):
        # io.StringIO and friends
        return True

    if stat.S_ISREG(os.fstat(fd).st_mode):
        return True
    try:
        ready, _, _ = select.select([fd], [], [], timeout)
    except OSError:
        # select() on Windows only accepts sockets
        return True
    return bool(ready)


def piped_lines(stdin: Optional[TextIO], timeout: float = PIPE_WAIT) -> Optional[Iterable[str]]:
    """
    Lines piped into stdin, or None when nothing is piped.

    Reads the first line to detect input; the returned iterable yields it
    followed by the rest of the stream.
    """
    if stdin is None or stdin.isatty():
        return None
    if not stdin_has_data(stdin, timeout):
        logger.debug("stdin is open but silent, ignoring it")
        return None

    first = stdin.readline()
    if not first:
        return None
    return itertools.chain([first], stdin)


# =============================================================================
# Commands
# =============================================================================

def cmd_hash(args, out: Output, stdin: Optional[TextIO] = None) -> int:
    """Hash a string, piped lines, or a random value."""
    start = time.perf_counter()

    config = get_config(
        pattern=args.pattern,
        allow_repeats=True if args.repetition else None,
        report_collision_rate=True if args.verbose else None,
        strict=True if args.strict else None,
        words_path=args.words,
        pattern_setting='hash.cli_pattern',
    )
    hasher = HHash.from_config(config)

    lines = piped_lines(stdin)
    if lines is not None:
        if args.to_hash is not None:
            raise ConflictingInputError()
        hashed = hasher.hash_lines(lines)
    elif args.to_hash is not None:
        hashed = hasher.hash_string(args.to_hash)
    else:
        # no input: hash a random UUID
        hashed = hasher.random()

    logger.info("elapsed time %.3fms", (time.perf_counter() - start) * 1000)
    out.print(hashed)
    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    default_pattern = get_setting('hash.cli_pattern', DEFAULT_CLI_PATTERN)
    default_help = default_pattern.replace("%", "%%")

    parser = argparse.ArgumentParser(
        prog='hhash',
        description='Human-readable hashing with customizable word patterns',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Pattern tokens:
  %a / %A        adverb (lowercase / Title case)
  %j / %J        adjective
  %n / %N        noun
  %v / %V        verb, present tense
  %v{p} / %V{P}  verb, past tense
  %v{g} / %V{G}  verb, gerund
Any other text is copied to the output unchanged.

Examples:
  hhash -s "hello world"
  hhash -p "%A%V{G}%N" -s hello
  git log | hhash -p "%j-%n"
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-p', '--pattern',
                        help='hash pattern of static characters and word tokens '
                             f'(default: $HHASH_PATTERN or "{default_help}")')
    parser.add_argument('-s', '--toHash', dest='to_hash',
                        help='string to hash according to the pattern (default: random)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='enable verbose logging, including collision odds')
    parser.add_argument('-r', '--repetition', action='store_true',
                        help='allow consecutive tokens of the same kind to produce the same word (e.g., "%%N%%N")')
    parser.add_argument('--strict', action='store_true',
                        help='fail on unknown pattern tokens instead of printing them as-is')
    parser.add_argument('--words', help='word list YAML to use instead of the bundled one')

    return parser


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None) -> int:
    out = Output()

    try:
        # the parser reads its default pattern from the app config
        args = build_parser().parse_args(argv)
        setup_logging(args.verbose)
        return cmd_hash(args, out, stdin if stdin is not None else sys.stdin)
    except KeyboardInterrupt:
        out.error("Cancelled.")
        return 130
    except HHashError as e:
        out.error(str(e))
        return 1
    except FileNotFoundError as e:
        out.error(str(e))
        return 1


if __name__ == '__main__':
    sys.exit(main())
