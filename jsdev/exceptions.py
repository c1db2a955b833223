"""
# JSDev: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.
"""

from typing import Optional

from jsdev.constants import BAD_TAG_MARKER, ERROR_PREFIX


class ConversionException(Exception):
    """
    Base class for every fatal conversion error.

    A line number of `None` means the error arose while validating the tag configuration,
    before any source was scanned.
    """
    _message: str
    _line_number: Optional[int]

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message, line_number)
        self._message = message
        self._line_number = line_number

    @property
    def message(self) -> str:
        return self._message

    @property
    def line_number(self) -> Optional[int]:
        return self._line_number

    def __str__(self) -> str:
        if self._line_number is None:
            location = BAD_TAG_MARKER
        else:
            location = str(self._line_number)

        return f'{ERROR_PREFIX} {location} {self._message}'


class BadTagException(ConversionException):
    pass


class MissingTagsException(ConversionException):
    pass


class UnbalancedStuffException(ConversionException):
    pass


class UnexpectedCommentException(ConversionException):
    pass


class UnterminatedCommentException(ConversionException):
    pass


class UnterminatedConditionException(ConversionException):
    pass


class UnterminatedLiteralException(ConversionException):
    pass
