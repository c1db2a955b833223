"""
# JSDev: extractors.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Extraction of the condition and the stuff (body) of a tagged comment.

Both are echoed to the output as they are scanned.
Parentheses, braces, and brackets share a single depth counter,
so that object and array literals may appear anywhere inside.
"""

from jsdev.constants import CLOSING_BRACKETS, OPENING_BRACKETS, QUOTE_CHARACTERS
from jsdev.exceptions import (
    UnbalancedStuffException,
    UnexpectedCommentException,
    UnterminatedConditionException,
)
from jsdev.skippers import closes_comment, skip_regexp, skip_string
from jsdev.streams import CharacterStream
from jsdev.utilities import is_significant, precedes_regexp


def handle_slash(stream: CharacterStream, left: str):
    """
    Deal with a `/` inside a tagged comment, which may begin a regular expression literal.
    """
    if stream.peek() in ('/', '*'):
        raise UnexpectedCommentException('unexpected comment.', stream.line_number)

    if precedes_regexp(left):
        skip_regexp(stream, in_comment=True)


def extract_condition(stream: CharacterStream):
    """
    Extract a condition, starting at its opening parenthesis and ending after the matching closer.
    """
    left = '{'
    depth = 0

    while True:
        character = stream.get(echo=True)
        if character is None:
            raise UnterminatedConditionException('unterminated condition.', stream.line_number)

        if character in OPENING_BRACKETS:
            depth += 1
        elif character in CLOSING_BRACKETS:
            depth -= 1
            if depth == 0:
                return
        elif character in QUOTE_CHARACTERS:
            skip_string(stream, character, in_comment=True)
        elif character == '/':
            handle_slash(stream, left)
        elif closes_comment(stream, character):
            raise UnterminatedConditionException('unclosed condition.', stream.line_number)

        if is_significant(character):
            left = character


def extract_stuff(stream: CharacterStream):
    """
    Extract stuff, up to and including the `*/` that closes the comment.

    Leading spaces are dropped. The closing `*/` is consumed but not echoed.
    """
    left = '{'
    depth = 0

    while stream.peek() == ' ':
        stream.get()

    while True:
        while stream.peek() == '*':
            stream.get()
            if stream.peek() == '/':
                stream.get()
                if depth > 0:
                    raise UnbalancedStuffException('unbalanced stuff.', stream.line_number)
                return
            stream.emit('*')

        character = stream.get(echo=True)
        if character is None:
            raise UnbalancedStuffException('unterminated stuff.', stream.line_number)

        if character in QUOTE_CHARACTERS:
            skip_string(stream, character, in_comment=True)
        elif character in OPENING_BRACKETS:
            depth += 1
        elif character in CLOSING_BRACKETS:
            depth -= 1
            if depth < 0:
                raise UnbalancedStuffException('unbalanced stuff.', stream.line_number)
        elif character == '/':
            handle_slash(stream, left)

        if is_significant(character):
            left = character
