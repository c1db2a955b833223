"""
# JSDev: declarations.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Tag declarations.
"""

import re
import warnings
from typing import NamedTuple, Optional, Sequence

from jsdev.constants import TAG_DECLARATION_PATTERN
from jsdev.exceptions import BadTagException, MissingTagsException


class TagDeclaration(NamedTuple):
    """
    An active tag, parsed from a declaration string `«tag»` or `«tag»:«method»`.

    When «method» is present, the comment body becomes the argument list of a call to «method».
    """
    tag: str
    method: Optional[str] = None


def parse_tag_declaration(tag_declaration: str) -> TagDeclaration:
    if not isinstance(tag_declaration, str):
        raise BadTagException(repr(tag_declaration))

    match = re.fullmatch(pattern=TAG_DECLARATION_PATTERN, string=tag_declaration, flags=re.ASCII | re.VERBOSE)
    if match is None:
        raise BadTagException(tag_declaration)

    return TagDeclaration(tag=match.group('tag'), method=match.group('method'))


def parse_tag_declarations(tag_declarations: Sequence[str]) -> list[TagDeclaration]:
    """
    Parse and validate every tag declaration before any scanning takes place.

    The caller's sequence is left untouched.
    Should a tag be declared twice, the first declaration wins and the later one is unreachable.
    """
    if not isinstance(tag_declarations, (list, tuple)):
        raise MissingTagsException('no tags')

    declarations = [
        parse_tag_declaration(tag_declaration)
        for tag_declaration in tag_declarations
    ]

    seen_tags = set()
    for declaration in declarations:
        if declaration.tag in seen_tags:
            warnings.warn(f'warning: tag `{declaration.tag}` declared more than once; later declaration ignored')
        seen_tags.add(declaration.tag)

    return declarations


def find_declaration(declarations: Sequence[TagDeclaration], tag: str) -> Optional[TagDeclaration]:
    if tag == '':
        return None

    for declaration in declarations:
        if declaration.tag == tag:
            return declaration

    return None
