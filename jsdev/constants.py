"""
# JSDev: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

import string

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

ERROR_PREFIX = 'jsdev:'
BAD_TAG_MARKER = 'bad tag'

TAG_CHARACTERS = frozenset(string.ascii_letters + string.digits + '_$.')
QUOTE_CHARACTERS = frozenset('\'"`')
OPENING_BRACKETS = frozenset('({[')
CLOSING_BRACKETS = frozenset(')}]')

# A slash preceded by one of these begins a regular expression literal rather than a division.
PRE_REGEXP_CHARACTERS = frozenset('(,=:[!&|?{};')

TAG_DECLARATION_PATTERN = r'''
    (?P<tag> [0-9A-Za-z_$.]+ )
    (?:
        [:]
        (?P<method> [0-9A-Za-z_$.]+ )
    ) ?
'''

JSDEV_USAGE_HELP = '''\
A tagged comment is a block comment whose first characters are a declared tag:
(1) `/*«tag» «stuff»*/` expands to `{«stuff»}`;
(2) `/*«tag»(«condition») «stuff»*/` expands to `if («condition») {«stuff»}`;
(3) with `«tag»:«method»` declared, `/*«tag» «stuff»*/` expands to `{«method»(«stuff»);}`;
(4) with `«tag»:«method»` declared, `/*«tag»(«condition») «stuff»*/`
    expands to `if («condition») {«method»(«stuff»);}`.
- Note for (2) and (4): there must be no space between «tag» and the opening parenthesis.
- Note: «condition» and «stuff» must not contain a comment,
  nor a string or regular expression containing `*/`.
'''
