"""
# JSDev: expanders.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Expansion of a tagged comment into a statement block.
"""

from jsdev.declarations import TagDeclaration
from jsdev.extractors import extract_condition, extract_stuff
from jsdev.streams import CharacterStream


def expand(stream: CharacterStream, declaration: TagDeclaration):
    """
    Expand a tagged comment whose `/*«tag»` has already been consumed.

    There are exactly four shapes:
    ````
    {«stuff»}
    if («condition») {«stuff»}
    {«method»(«stuff»);}
    if («condition») {«method»(«stuff»);}
    ````
    """
    if stream.peek() == '(':
        stream.emit('if ')
        extract_condition(stream)
        stream.emit(' ')

    stream.emit('{')
    if declaration.method is not None:
        stream.emit(f'{declaration.method}(')
        extract_stuff(stream)
        stream.emit(');}')
    else:
        extract_stuff(stream)
        stream.emit('}')
