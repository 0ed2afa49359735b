import io
import unittest

from shortscale import MAX_NUMBER, shortscale, shortscale_writer


class _RecordingBuffer:
    def __init__(self):
        self.writes = []

    def write(self, text):
        self.writes.append(text)
        return len(text)


class TestShortscaleWriter(unittest.TestCase):
    def test_appends_after_existing_content(self):
        for value in (0, 7, 1_001, 1_200_000, 420_000_999_015, MAX_NUMBER):
            with self.subTest(value=value):
                buffer = io.StringIO()
                buffer.write("Hello ")
                shortscale_writer(buffer, value)
                self.assertEqual(buffer.getvalue(), "Hello " + shortscale(value))

    def test_appends_to_buffer_created_with_content(self):
        for prefix, value in (("Hello ", 1), ("Hello world, the answer is: ", 7)):
            with self.subTest(prefix=prefix, value=value):
                buffer = io.StringIO(prefix)
                shortscale_writer(buffer, value)
                self.assertEqual(buffer.getvalue(), prefix + shortscale(value))

    def test_appends_at_end_after_seek(self):
        buffer = io.StringIO()
        buffer.write("one two three ")
        buffer.seek(0)
        shortscale_writer(buffer, 4)
        self.assertEqual(buffer.getvalue(), "one two three four")

    def test_repeated_writes_accumulate(self):
        buffer = io.StringIO()
        shortscale_writer(buffer, 1)
        buffer.write(", ")
        shortscale_writer(buffer, 2_004)
        self.assertEqual(buffer.getvalue(), "one, two thousand and four")

    def test_only_writes_to_buffer(self):
        buffer = _RecordingBuffer()
        shortscale_writer(buffer, 1_000_015)
        self.assertEqual("".join(buffer.writes), "one million and fifteen")

    def test_returns_none(self):
        self.assertIsNone(shortscale_writer(io.StringIO(), 42))

    def test_rejected_number_leaves_buffer_untouched(self):
        buffer = io.StringIO()
        buffer.write("prefix")
        with self.assertRaises(ValueError):
            shortscale_writer(buffer, MAX_NUMBER + 1)
        with self.assertRaises(TypeError):
            shortscale_writer(buffer, 3.5)
        self.assertEqual(buffer.getvalue(), "prefix")


if __name__ == "__main__":
    unittest.main()
