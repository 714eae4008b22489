import logging
import struct

from xoshiro.config import DEFAULT_BYTE_ORDER, STATE_SEPARATOR, STATE_WORDS

logger = logging.getLogger(__name__)

_WORD_FORMATS = {32: 'I', 64: 'Q'}
_BYTE_ORDER_PREFIX = {'little': '<', 'big': '>'}


class InvalidStateFormat(ValueError):
    """A serialized state record that cannot be decoded."""
    pass


def _word_struct(word_bits, byteorder):
    if byteorder is None:
        byteorder = DEFAULT_BYTE_ORDER
    try:
        prefix = _BYTE_ORDER_PREFIX[byteorder]
    except KeyError:
        raise ValueError(f"Unknown byte order {byteorder!r}, expected 'little' or 'big'")
    try:
        code = _WORD_FORMATS[word_bits]
    except KeyError:
        raise ValueError(f"Unsupported word width: {word_bits} bits")
    return struct.Struct(prefix + code)


def record_size(word_bits):
    """Length in bytes of one serialized state vector."""
    return STATE_WORDS * (word_bits // 8) + (STATE_WORDS - 1) * len(STATE_SEPARATOR)


def serialize_state(words, word_bits, byteorder=None):
    """
    Encodes a state vector.
    Structure:
        [WORD_0] [SEP] [WORD_1] [SEP] [WORD_2] [SEP] [WORD_3]
    Each WORD is word_bits // 8 bytes in `byteorder` (host order by default),
    SEP is a single space byte. No header, no trailer.
    """
    packer = _word_struct(word_bits, byteorder)
    if len(words) != STATE_WORDS:
        raise ValueError(f"Expected {STATE_WORDS} state words, got {len(words)}")
    try:
        blocks = [packer.pack(w) for w in words]
    except struct.error as exc:
        raise ValueError(f"State word does not fit {word_bits} bits: {exc}")
    return STATE_SEPARATOR.join(blocks)


def deserialize_state(data, word_bits, byteorder=None):
    """
    Decodes a record written by serialize_state.
    Unlike the raw stream format it replaces, every separator is checked:
    a wrong length or a wrong separator byte raises InvalidStateFormat
    instead of yielding a corrupted state.
    """
    packer = _word_struct(word_bits, byteorder)
    data = bytes(data)
    expected = record_size(word_bits)
    if len(data) != expected:
        raise InvalidStateFormat(
            f"State record must be {expected} bytes for {word_bits}-bit words, got {len(data)}"
        )

    words = []
    ptr = 0
    for i in range(STATE_WORDS):
        if i > 0:
            sep = data[ptr:ptr + len(STATE_SEPARATOR)]
            if sep != STATE_SEPARATOR:
                raise InvalidStateFormat(
                    f"Bad separator {sep!r} at offset {ptr}, expected {STATE_SEPARATOR!r}"
                )
            ptr += len(STATE_SEPARATOR)
        (word,) = packer.unpack_from(data, ptr)
        words.append(word)
        ptr += packer.size

    return words


def write_state(stream, prng, byteorder=None):
    """Writes the generator's state to a binary stream."""
    data = serialize_state(prng.state, prng.WORD_BITS, byteorder)
    stream.write(data)
    logger.debug("Wrote %s state (%d bytes)", prng.NAME, len(data))


def read_state(stream, prng, byteorder=None):
    """
    Reads one state record from a binary stream into an existing generator.
    Consumes exactly one record; a short read raises InvalidStateFormat.
    """
    expected = record_size(prng.WORD_BITS)
    data = stream.read(expected)
    if len(data) < expected:
        raise InvalidStateFormat(
            f"Unexpected end of stream: needed {expected} bytes, got {len(data)}"
        )
    prng.seed(deserialize_state(data, prng.WORD_BITS, byteorder))
    logger.debug("Read %s state (%d bytes)", prng.NAME, expected)
    return prng
