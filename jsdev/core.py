"""
# JSDev: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core conversion logic.

Source is scanned once, character by character, and copied to the output unchanged,
except for tagged comments
````
/*«tag» «stuff»*/
/*«tag»(«condition») «stuff»*/
````
whose «tag» has been declared active. These are replaced by executable blocks (see `expanders.py`).

Strings, regular expression literals, line comments, and untagged block comments are copied verbatim.
Whether a slash begins a regular expression literal or is a division operator
is decided by the significant character to its left (see `PRE_REGEXP_CHARACTERS` in `constants.py`).
"""

import sys
from typing import Any, NamedTuple, Optional, Sequence, Union

from jsdev.constants import QUOTE_CHARACTERS, VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from jsdev.declarations import TagDeclaration, find_declaration, parse_tag_declarations
from jsdev.exceptions import ConversionException, UnexpectedCommentException, UnterminatedCommentException
from jsdev.expanders import expand
from jsdev.skippers import skip_regexp, skip_string
from jsdev.streams import CharacterStream, OutputBuffer
from jsdev.utilities import is_significant, is_tag_character, precedes_regexp, split_source_lines


class ConversionResult(NamedTuple):
    output: Optional[str]
    error: Optional[ConversionException]


def print_expansion_report(tag: str, line_number: int, replacement: str):
    print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' /*{tag} (line {line_number})', file=sys.stderr)
    print(replacement, file=sys.stderr)
    print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT, file=sys.stderr)
    print('\n', file=sys.stderr)


def emit_header_comments(output_buffer: OutputBuffer, header_comments: Any):
    """
    Emit each header comment as a line comment.

    A string is a single comment, a list or tuple is several. Anything else is ignored.
    """
    if isinstance(header_comments, str):
        header_comments = [header_comments]
    elif not isinstance(header_comments, (list, tuple)):
        return

    for header_comment in header_comments:
        output_buffer.append(f'// {header_comment}\n')


def skip_line_comment(stream: CharacterStream):
    while True:
        character = stream.get(echo=True)
        if character is None or character == '\n':
            return


def read_candidate_tag(stream: CharacterStream) -> str:
    """
    Read the run of tag characters following `/*`, pushing back the character that ends it.
    """
    tag_characters = []
    while True:
        character = stream.get()
        if not is_tag_character(character):
            break
        tag_characters.append(character)

    stream.unget(character)

    return ''.join(tag_characters)


def copy_block_comment(stream: CharacterStream, start_line_number: int):
    """
    Copy the rest of an untagged block comment, through its closing `*/`.
    """
    previous_character = None
    while True:
        character = stream.get(echo=True)
        if character is None:
            raise UnterminatedCommentException('unterminated comment.', start_line_number)

        if previous_character == '/' and character == '*':
            raise UnexpectedCommentException('nested comment.', stream.line_number)

        if previous_character == '*' and character == '/':
            return

        previous_character = character


def process_block_comment(stream: CharacterStream, output_buffer: OutputBuffer,
                          declarations: Sequence[TagDeclaration], verbose_mode_enabled: bool):
    """
    Process a block comment whose `/*` has already been consumed.
    """
    start_line_number = stream.line_number
    tag = read_candidate_tag(stream)
    declaration = find_declaration(declarations, tag)

    if declaration is None:
        stream.emit('/*')
        stream.emit(tag)
        copy_block_comment(stream, start_line_number)
        return

    mark = output_buffer.mark()
    expand(stream, declaration)

    if verbose_mode_enabled:
        print_expansion_report(tag, start_line_number, output_buffer.since(mark))


def process(stream: CharacterStream, output_buffer: OutputBuffer,
            declarations: Sequence[TagDeclaration], verbose_mode_enabled: bool = False):
    """
    Scan the whole of the stream, expanding tagged comments.
    """
    left = None

    while True:
        character = stream.get()
        if character is None:
            return

        if character in QUOTE_CHARACTERS:
            stream.emit(character)
            skip_string(stream, character, in_comment=False)
            left = character

        elif character == '/':
            if stream.peek() == '/':
                stream.emit('/')
                skip_line_comment(stream)
            elif stream.peek() == '*':
                stream.get()
                process_block_comment(stream, output_buffer, declarations, verbose_mode_enabled)
            else:
                stream.emit('/')
                if precedes_regexp(left):
                    skip_regexp(stream, in_comment=False)
                left = '/'

        else:
            stream.emit(character)
            if is_significant(character):
                left = character


def convert(source: Union[str, Sequence[str]], tag_declarations: Sequence[str],
            header_comments: Any = None, verbose_mode_enabled: bool = False) -> str:
    """
    Convert source, expanding the tagged comments whose tags are declared.

    Raises a `ConversionException` on any error, in which case there is no output at all.
    """
    declarations = parse_tag_declarations(tag_declarations)

    output_buffer = OutputBuffer()
    emit_header_comments(output_buffer, header_comments)

    stream = CharacterStream(split_source_lines(source), output_buffer)
    process(stream, output_buffer, declarations, verbose_mode_enabled)

    return output_buffer.join()


def attempt_conversion(source: Union[str, Sequence[str]], tag_declarations: Sequence[str],
                       header_comments: Any = None, verbose_mode_enabled: bool = False) -> ConversionResult:
    """
    Convert source as `convert(...)` does, but report an error in the result instead of raising it.
    """
    try:
        output = convert(source, tag_declarations, header_comments, verbose_mode_enabled)
    except ConversionException as conversion_exception:
        return ConversionResult(output=None, error=conversion_exception)

    return ConversionResult(output=output, error=None)
