"""
# JSDev: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import sys
from typing import Optional

from jsdev._version import __version__
from jsdev.constants import COMMAND_LINE_ERROR_EXIT_CODE, GENERIC_ERROR_EXIT_CODE, JSDEV_USAGE_HELP
from jsdev.core import convert
from jsdev.exceptions import ConversionException

DESCRIPTION = '''
    Activate tagged comments in JavaScript source, turning them into executable blocks.
'''
TAG_DECLARATIONS_HELP = '''
    active tag, optionally followed by a colon and the name of the method to be called
    (no spaces around the colon)
'''
COMMENT_HELP = '''
    comment to be inserted at the top of the output (may be repeated)
'''
INPUT_FILE_NAME_HELP = '''
    name of source file (defaults to standard input)
'''
OUTPUT_FILE_NAME_HELP = '''
    name of output file (defaults to standard output)
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints every expansion applied to standard error)
'''


def parse_command_line_arguments(arguments: Optional[list[str]] = None) -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(
        description=DESCRIPTION,
        epilog=JSDEV_USAGE_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-c', '--comment',
        dest='header_comments',
        action='append',
        default=[],
        help=COMMENT_HELP,
    )
    argument_parser.add_argument(
        '-i', '--input',
        dest='input_file_name',
        default=None,
        help=INPUT_FILE_NAME_HELP,
        metavar='file.js',
    )
    argument_parser.add_argument(
        '-o', '--output',
        dest='output_file_name',
        default=None,
        help=OUTPUT_FILE_NAME_HELP,
        metavar='file.js',
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        'tag_declarations',
        help=TAG_DECLARATIONS_HELP,
        metavar='tag[:method]',
        nargs='+',
    )

    return argument_parser.parse_args(arguments)


def read_source(input_file_name: Optional[str]) -> str:
    if input_file_name is None:
        return sys.stdin.read()

    try:
        with open(input_file_name, 'r', encoding='utf-8', newline='') as input_file:
            return input_file.read()
    except FileNotFoundError:
        print(f'error: file `{input_file_name}` not found', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)


def write_output(output: str, output_file_name: Optional[str]):
    if output_file_name is None:
        sys.stdout.write(output)
        return

    try:
        with open(output_file_name, 'w', encoding='utf-8', newline='') as output_file:
            output_file.write(output)
    except IOError:
        print(f'error: cannot write to `{output_file_name}`', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


def main(arguments: Optional[list[str]] = None):
    parsed_arguments = parse_command_line_arguments(arguments)

    source = read_source(parsed_arguments.input_file_name)
    try:
        output = convert(
            source,
            parsed_arguments.tag_declarations,
            parsed_arguments.header_comments,
            parsed_arguments.verbose_mode_enabled,
        )
    except ConversionException as conversion_exception:
        print(f'error: {conversion_exception}', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)

    write_output(output, parsed_arguments.output_file_name)


if __name__ == '__main__':
    main()
