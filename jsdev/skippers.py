"""
# JSDev: skippers.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Skipping of string and regular expression literals.

Literals are copied to the output verbatim and never interpreted as code or comments.
When `in_comment` is set, the literal sits inside a tagged comment,
so it must not contain the `*/` that would close that comment.
Errors for unterminated literals cite the line on which the literal began.
"""

from jsdev.exceptions import UnexpectedCommentException, UnterminatedLiteralException
from jsdev.streams import CharacterStream


def closes_comment(stream: CharacterStream, character: str) -> bool:
    return character == '*' and stream.peek() == '/'


def skip_string(stream: CharacterStream, quote: str, in_comment: bool):
    """
    Skip the rest of a string literal whose opening `quote` has already been consumed.
    """
    start_line_number = stream.line_number

    while True:
        character = stream.get(echo=True)
        if character == quote:
            return

        if character == '\\':
            character = stream.get(echo=True)

        if character is None:
            raise UnterminatedLiteralException('unterminated string literal.', start_line_number)

        if in_comment and closes_comment(stream, character):
            raise UnexpectedCommentException('unexpected close comment in string.', stream.line_number)


def skip_regexp_class(stream: CharacterStream, in_comment: bool, start_line_number: int):
    """
    Skip a character class, in which an unescaped `/` does not end the literal.
    """
    while True:
        character = stream.get(echo=True)
        if character == ']':
            return

        if character == '\\':
            character = stream.get(echo=True)

        if character is None:
            raise UnterminatedLiteralException('unterminated set in regular expression literal.', start_line_number)

        if in_comment and closes_comment(stream, character):
            raise UnexpectedCommentException('unexpected close comment in regexp.', stream.line_number)


def skip_regexp(stream: CharacterStream, in_comment: bool):
    """
    Skip the rest of a regular expression literal whose opening `/` has already been consumed.
    """
    start_line_number = stream.line_number

    while True:
        character = stream.get(echo=True)
        if character == '[':
            skip_regexp_class(stream, in_comment, start_line_number)
            continue

        if character == '\\':
            character = stream.get(echo=True)
        elif character == '/':
            if in_comment and stream.peek() in ('/', '*'):
                raise UnexpectedCommentException('unexpected comment.', stream.line_number)
            return

        if character is None:
            raise UnterminatedLiteralException('unterminated regexp literal.', start_line_number)

        if in_comment and closes_comment(stream, character):
            raise UnexpectedCommentException('unexpected comment.', stream.line_number)
