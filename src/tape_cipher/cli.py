# file: src/tape_cipher/cli.py

"""
Command line front end for the tape cipher.

Usage:
    tape-cipher encrypt --text "Hello" --tape "1,2,3"
    tape-cipher decrypt --input secret.txt --tape "1,2,3" --output
    tape-cipher generate --length 16 --max-value 255 --seed 7
"""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from . import __version__
from .cipher import ENCRYPT, DECRYPT, is_usable_tape, transform
from .config import load_config
from .errors import TapeCipherError
from .generator import clamp_tape_length, generate_random_tape
from .text_io import default_output_name, read_text, write_text

logger = logging.getLogger(__name__)


EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

def setup_logging(verbose: bool = False):
    """Configure logging for the command line tool."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


# =============================================================================
# ARGUMENTS
# =============================================================================

def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='tape-cipher',
        description='Shift cipher over 16-bit code units with a cyclic integer tape'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to configuration YAML file (default: packaged default_config.yaml)'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    for mode in (ENCRYPT, DECRYPT):
        sub = subparsers.add_parser(mode, help=f'{mode.capitalize()} text with a tape')

        source = sub.add_mutually_exclusive_group(required=True)
        source.add_argument('--text', type=str, help='Text to process')
        source.add_argument('--input', type=str, help='UTF-8 text file to process')

        sub.add_argument(
            '--tape',
            type=str,
            default=None,
            help='Tape values separated by commas, semicolons or spaces '
                 '(default: tape.default from config)'
        )
        sub.add_argument(
            '--output',
            type=str,
            nargs='?',
            const='',
            default=None,
            help=f'Write the result to a file instead of stdout '
                 f'(no value: {default_output_name(mode)})'
        )

    gen = subparsers.add_parser('generate', help='Generate a random tape')
    gen.add_argument(
        '--length',
        type=str,
        default=None,
        help='Number of values, clamped to [1, 1000] (default: generator.default_length)'
    )
    gen.add_argument(
        '--max-value',
        type=int,
        default=None,
        help='Inclusive upper bound of each value (default: generator.max_value)'
    )
    gen.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Random seed for a reproducible tape (default: generator.random_seed)'
    )

    return parser.parse_args(argv)


# =============================================================================
# COMMANDS
# =============================================================================

def _printable(text: str, encoding: Optional[str] = None) -> str:
    """
    Make text safe for a stream in the given encoding.

    Unpaired surrogates become U+FFFD and characters the encoding cannot
    represent become its replacement character.
    """
    text = text.encode('utf-16', 'surrogatepass').decode('utf-16', 'replace')
    encoding = encoding or 'utf-8'
    return text.encode(encoding, 'replace').decode(encoding)


def run_cipher(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    """Run the encrypt or decrypt command."""
    encoding = config['io']['encoding']
    tape_raw = args.tape if args.tape is not None else config['tape']['default']

    if not is_usable_tape(tape_raw):
        print(
            'error: the tape is empty; give values separated by commas or spaces',
            file=sys.stderr
        )
        return EXIT_USAGE

    if args.input is not None:
        text = read_text(args.input, encoding=encoding)
    else:
        text = args.text

    result = transform(text, tape_raw, args.command)

    if args.output is None:
        printable = _printable(result, getattr(sys.stdout, 'encoding', None))
        if printable != result:
            logger.warning(
                'Result holds characters stdout cannot show; use --output to keep them'
            )
        print(printable)
    else:
        path = write_text(args.output or default_output_name(args.command), result, encoding=encoding)
        print(f'Saved result to {path}', file=sys.stderr)

    return EXIT_OK


def run_generate(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    """Run the generate command."""
    gen_config = config['generator']

    raw_length = args.length if args.length is not None else gen_config['default_length']
    length = clamp_tape_length(raw_length)
    max_value = args.max_value if args.max_value is not None else gen_config['max_value']
    seed = args.seed if args.seed is not None else gen_config['random_seed']

    print(generate_random_tape(length, max_value, rng=seed))
    return EXIT_OK


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit code."""
    args = parse_arguments(argv)

    setup_logging(verbose=args.verbose)

    try:
        config = load_config(args.config)
        if args.command == 'generate':
            return run_generate(args, config)
        return run_cipher(args, config)
    except TapeCipherError as e:
        logger.debug('Command failed', exc_info=True)
        print(f'error: {e}', file=sys.stderr)
        return EXIT_ERROR


def run():
    sys.exit(main())


if __name__ == '__main__':
    run()
