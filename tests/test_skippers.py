"""
# JSDev: test_skippers.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `skippers.py`.
"""

import unittest

from jsdev.exceptions import UnexpectedCommentException, UnterminatedLiteralException
from jsdev.skippers import skip_regexp, skip_string
from jsdev.streams import CharacterStream, OutputBuffer
from jsdev.utilities import split_source_lines


def make_stream(source: str) -> tuple[CharacterStream, OutputBuffer]:
    output_buffer = OutputBuffer()
    return CharacterStream(split_source_lines(source), output_buffer), output_buffer


class TestSkippers(unittest.TestCase):
    def test_skip_string(self):
        stream, output_buffer = make_stream('abc" rest')
        skip_string(stream, '"', in_comment=False)
        self.assertEqual(output_buffer.join(), 'abc"')
        self.assertEqual(stream.get(), ' ')

        stream, output_buffer = make_stream(r'a\"b" x')
        skip_string(stream, '"', in_comment=False)
        self.assertEqual(output_buffer.join(), r'a\"b"')

        stream, output_buffer = make_stream('it"s\' x')
        skip_string(stream, "'", in_comment=False)
        self.assertEqual(output_buffer.join(), 'it"s\'')

        stream, output_buffer = make_stream('a*/b"')
        skip_string(stream, '"', in_comment=False)
        self.assertEqual(output_buffer.join(), 'a*/b"')

        stream, output_buffer = make_stream(r'a*\/b"')
        skip_string(stream, '"', in_comment=True)
        self.assertEqual(output_buffer.join(), r'a*\/b"')

    def test_skip_string_errors(self):
        stream, _ = make_stream('a*/b"')
        self.assertRaises(UnexpectedCommentException, skip_string, stream, '"', True)

        stream, _ = make_stream('x\n"abc\ndef\n')
        stream.get()
        stream.get()
        stream.get()
        with self.assertRaises(UnterminatedLiteralException) as context:
            skip_string(stream, '"', in_comment=False)
        self.assertEqual(context.exception.line_number, 2)

        stream, _ = make_stream('abc\\')
        self.assertRaises(UnterminatedLiteralException, skip_string, stream, "'", False)

    def test_skip_regexp(self):
        stream, output_buffer = make_stream('ab+/g;')
        skip_regexp(stream, in_comment=False)
        self.assertEqual(output_buffer.join(), 'ab+/')
        self.assertEqual(stream.get(), 'g')

        stream, output_buffer = make_stream('[/]x/;')
        skip_regexp(stream, in_comment=False)
        self.assertEqual(output_buffer.join(), '[/]x/')

        stream, output_buffer = make_stream(r'[\]/]/;')
        skip_regexp(stream, in_comment=False)
        self.assertEqual(output_buffer.join(), r'[\]/]/')

        stream, output_buffer = make_stream(r'a\/b/;')
        skip_regexp(stream, in_comment=False)
        self.assertEqual(output_buffer.join(), r'a\/b/')

        stream, output_buffer = make_stream('a*/')
        skip_regexp(stream, in_comment=False)
        self.assertEqual(output_buffer.join(), 'a*/')

    def test_skip_regexp_errors(self):
        stream, _ = make_stream('abc/*')
        self.assertRaises(UnexpectedCommentException, skip_regexp, stream, True)

        stream, _ = make_stream('abc//')
        self.assertRaises(UnexpectedCommentException, skip_regexp, stream, True)

        stream, _ = make_stream('a*/')
        self.assertRaises(UnexpectedCommentException, skip_regexp, stream, True)

        stream, _ = make_stream('[a*/]/')
        self.assertRaises(UnexpectedCommentException, skip_regexp, stream, True)

        stream, _ = make_stream('abc\n')
        with self.assertRaises(UnterminatedLiteralException) as context:
            skip_regexp(stream, in_comment=False)
        self.assertEqual(context.exception.message, 'unterminated regexp literal.')
        self.assertEqual(context.exception.line_number, 1)

        stream, _ = make_stream('[abc\n\n')
        with self.assertRaises(UnterminatedLiteralException) as context:
            skip_regexp(stream, in_comment=False)
        self.assertEqual(context.exception.line_number, 1)


if __name__ == '__main__':
    unittest.main()
