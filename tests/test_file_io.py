import io
import unittest
from xoshiro.file_io import *
from xoshiro.prngs import Xoshiro128PP, Xoshiro256PP


class TestStateCodec(unittest.TestCase):
    def test_record_sizes(self):
        self.assertEqual(record_size(64), 35)
        self.assertEqual(record_size(32), 19)
        self.assertEqual(len(Xoshiro256PP().serialize()), 35)
        self.assertEqual(len(Xoshiro128PP().serialize()), 19)

    def test_layout_big_endian(self):
        """Words in the requested byte order, one space between them."""
        data = Xoshiro128PP().serialize(byteorder='big')
        self.assertEqual(data, b'\x1c\x58\x8f\x8c \x3d\x23\xdc\xe4 \x8d\xa0\x27\xb0 \x10\xc7\x70\xbb')

    def test_layout_little_endian(self):
        data = serialize_state([1, 2, 3, 4], 32, 'little')
        self.assertEqual(data, b'\x01\x00\x00\x00 \x02\x00\x00\x00 \x03\x00\x00\x00 \x04\x00\x00\x00')

    def test_round_trip(self):
        """A restored generator continues the original sequence."""
        for cls in (Xoshiro256PP, Xoshiro128PP):
            for byteorder in (None, 'little', 'big'):
                rng = cls(1234)
                rng.discard(10)
                snapshot = rng.serialize(byteorder)

                restored = cls.from_bytes(snapshot, byteorder)
                self.assertEqual(restored, rng)
                self.assertEqual([restored.next() for _ in range(20)],
                                 [rng.next() for _ in range(20)])

    def test_round_trip_words(self):
        words = [0, 1, 2**64 - 1, 0x0123456789ABCDEF]
        self.assertEqual(deserialize_state(serialize_state(words, 64), 64), words)

    def test_deserialize_in_place(self):
        source = Xoshiro256PP(77)
        target = Xoshiro256PP()
        self.assertIs(target.deserialize(source.serialize()), target)
        self.assertEqual(target, source)

    def test_bad_separator(self):
        data = bytearray(Xoshiro256PP().serialize())
        data[8] = ord('x')
        with self.assertRaises(InvalidStateFormat):
            Xoshiro256PP.from_bytes(bytes(data))

    def test_bad_length(self):
        data = Xoshiro128PP().serialize()
        with self.assertRaises(InvalidStateFormat):
            Xoshiro128PP.from_bytes(data[:-1])
        with self.assertRaises(InvalidStateFormat):
            Xoshiro128PP.from_bytes(data + b' ')
        # A 128-bit record is not a 256-bit record
        with self.assertRaises(InvalidStateFormat):
            Xoshiro256PP.from_bytes(data)

    def test_invalid_format_is_value_error(self):
        with self.assertRaises(ValueError):
            deserialize_state(b'', 64)

    def test_bad_arguments(self):
        with self.assertRaises(ValueError):
            serialize_state([1, 2, 3, 4], 16)
        with self.assertRaises(ValueError):
            serialize_state([1, 2, 3, 4], 64, 'middle')
        with self.assertRaises(ValueError):
            serialize_state([1, 2, 3], 64)
        with self.assertRaises(ValueError):
            serialize_state([1, 2, 3, 2**32], 32)

    def test_zero_record_warns(self):
        data = serialize_state([0, 0, 0, 0], 64)
        with self.assertLogs('xoshiro.prngs', level='WARNING'):
            Xoshiro256PP.from_bytes(data)


class TestStateStreams(unittest.TestCase):
    def test_stream_round_trip(self):
        a = Xoshiro256PP(1)
        b = Xoshiro128PP(2)
        stream = io.BytesIO()
        write_state(stream, a)
        write_state(stream, b)

        stream.seek(0)
        restored_a = read_state(stream, Xoshiro256PP())
        restored_b = read_state(stream, Xoshiro128PP())
        self.assertEqual(restored_a, a)
        self.assertEqual(restored_b, b)
        self.assertEqual(stream.read(), b'', "Reader must consume exactly one record each")

    def test_short_stream(self):
        stream = io.BytesIO(Xoshiro256PP().serialize()[:20])
        with self.assertRaises(InvalidStateFormat):
            read_state(stream, Xoshiro256PP())

    def test_failed_read_leaves_generator_untouched(self):
        rng = Xoshiro128PP(9)
        with self.assertRaises(InvalidStateFormat):
            read_state(io.BytesIO(b'\x00' * 19), rng)
        self.assertEqual(rng, Xoshiro128PP(9))


if __name__ == '__main__':
    unittest.main()
