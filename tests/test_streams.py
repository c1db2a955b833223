"""
# JSDev: test_streams.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `streams.py`.
"""

import unittest

from jsdev.streams import CharacterStream, OutputBuffer


class TestStreams(unittest.TestCase):
    def test_output_buffer(self):
        output_buffer = OutputBuffer()
        output_buffer.append('ab')
        output_buffer.append('')
        output_buffer.append(None)
        mark = output_buffer.mark()
        output_buffer.append('c')
        output_buffer.append('de')

        self.assertEqual(output_buffer.since(mark), 'cde')
        self.assertEqual(output_buffer.join(), 'abcde')

    def test_character_stream_get(self):
        output_buffer = OutputBuffer()
        stream = CharacterStream(['ab\n', 'c'], output_buffer)

        self.assertEqual(stream.get(), 'a')
        self.assertEqual(stream.line_number, 1)
        self.assertEqual(stream.get(echo=True), 'b')
        self.assertEqual(stream.get(echo=True), '\n')
        self.assertEqual(stream.line_number, 1)
        self.assertEqual(stream.get(), 'c')
        self.assertEqual(stream.line_number, 2)
        self.assertIsNone(stream.get())
        self.assertIsNone(stream.get(echo=True))
        self.assertEqual(output_buffer.join(), 'b\n')

    def test_character_stream_peek(self):
        output_buffer = OutputBuffer()
        stream = CharacterStream(['xy'], output_buffer)

        self.assertEqual(stream.peek(), 'x')
        self.assertEqual(stream.peek(), 'x')
        self.assertEqual(stream.get(echo=True), 'x')
        self.assertEqual(stream.get(), 'y')
        self.assertIsNone(stream.peek())
        self.assertIsNone(stream.get())
        self.assertEqual(output_buffer.join(), 'x')

    def test_character_stream_unget(self):
        stream = CharacterStream(['ab'], OutputBuffer())

        self.assertEqual(stream.get(), 'a')
        stream.unget('z')
        self.assertEqual(stream.peek(), 'z')
        self.assertEqual(stream.get(), 'z')
        self.assertEqual(stream.get(), 'b')
        stream.unget('q')
        self.assertEqual(stream.get(), 'q')
        self.assertIsNone(stream.get())

    def test_character_stream_empty(self):
        stream = CharacterStream([], OutputBuffer())

        self.assertIsNone(stream.peek())
        self.assertIsNone(stream.get())
        self.assertEqual(stream.line_number, 1)

    def test_character_stream_emit(self):
        output_buffer = OutputBuffer()
        stream = CharacterStream(['a'], output_buffer)
        stream.emit('if ')
        stream.get(echo=True)
        stream.emit('')

        self.assertEqual(output_buffer.join(), 'if a')


if __name__ == '__main__':
    unittest.main()
