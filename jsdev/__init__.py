"""
# JSDev: __init__.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.
"""

from jsdev._version import __version__
from jsdev.core import ConversionResult, attempt_conversion, convert
from jsdev.declarations import TagDeclaration, parse_tag_declarations
from jsdev.exceptions import ConversionException

__all__ = [
    '__version__',
    'ConversionException',
    'ConversionResult',
    'TagDeclaration',
    'attempt_conversion',
    'convert',
    'parse_tag_declarations',
]
