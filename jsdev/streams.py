"""
# JSDev: streams.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Character stream with one character of lookahead, and the output buffer it echoes into.
"""

from typing import Optional


class OutputBuffer:
    """
    Append-only sequence of output fragments, joined once at the end of a run.
    """
    _fragments: list[str]

    def __init__(self):
        self._fragments = []

    def append(self, string: Optional[str]):
        if string:
            self._fragments.append(string)

    def mark(self) -> int:
        return len(self._fragments)

    def since(self, mark: int) -> str:
        """
        Return the text appended since `mark()` was called.
        """
        return ''.join(self._fragments[mark:])

    def join(self) -> str:
        return ''.join(self._fragments)


class CharacterStream:
    """
    Reader over `\\n`-terminated lines, yielding one character at a time.

    End of input is signalled by `None`, and keeps being signalled on every further read.

    ## `get`

    Consumes the next character, echoing it to the output buffer if asked.

    ## `peek`

    Returns the next character without consuming it.
    The character is held in the lookahead slot, and the following `get` returns it from there.

    ## `unget`

    Puts an arbitrary character into the lookahead slot.
    At most one character is ever held.
    """
    _lines: list[str]
    _line_index: int
    _column: int
    _lookahead: Optional[str]
    _output_buffer: 'OutputBuffer'

    def __init__(self, lines: list[str], output_buffer: 'OutputBuffer'):
        self._lines = lines
        self._line_index = -1
        self._column = 0
        self._lookahead = None
        self._output_buffer = output_buffer

    @property
    def line_number(self) -> int:
        """
        The 1-based number of the line most recently read from.
        """
        return max(self._line_index, 0) + 1

    def _read(self) -> Optional[str]:
        while self._line_index < 0 or self._column >= len(self._lines[self._line_index]):
            if self._line_index + 1 >= len(self._lines):
                return None
            self._line_index += 1
            self._column = 0

        character = self._lines[self._line_index][self._column]
        self._column += 1

        return character

    def get(self, echo: bool = False) -> Optional[str]:
        if self._lookahead is not None:
            character = self._lookahead
            self._lookahead = None
        else:
            character = self._read()

        if echo:
            self._output_buffer.append(character)

        return character

    def peek(self) -> Optional[str]:
        if self._lookahead is None:
            self._lookahead = self._read()

        return self._lookahead

    def unget(self, character: Optional[str]):
        self._lookahead = character

    def emit(self, string: Optional[str]):
        self._output_buffer.append(string)
