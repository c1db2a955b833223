"""
# JSDev: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

import re
from typing import Optional, Sequence, Union

from jsdev.constants import PRE_REGEXP_CHARACTERS, TAG_CHARACTERS


def normalise_line_endings(string: str) -> str:
    return re.sub(pattern=r'\r\n?', repl='\n', string=string)


def split_source_lines(source: Union[str, Sequence[str]]) -> list[str]:
    """
    Split source into lines, each terminated by `\\n` (except perhaps the last).

    A string source keeps its own line structure, so that a final line without a line break stays without one.
    A sequence source is taken to be lines without their line breaks (as from `str.splitlines()`),
    so every element is terminated.
    """
    if isinstance(source, str):
        text = normalise_line_endings(source)
    else:
        text = ''.join(
            f'{normalise_line_endings(line)}\n'
            for line in source
        )

    return re.findall(pattern=r'[^\n]*\n | [^\n]+', string=text, flags=re.VERBOSE)


def is_tag_character(character: Optional[str]) -> bool:
    return character is not None and character in TAG_CHARACTERS


def is_significant(character: Optional[str]) -> bool:
    """
    Whether a character counts as the left neighbour of whatever follows it.

    Spaces and control characters (including line breaks) do not count.
    """
    return character is not None and character > ' '


def precedes_regexp(left: Optional[str]) -> bool:
    return left in PRE_REGEXP_CHARACTERS
