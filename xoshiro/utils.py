from xoshiro.config import MASK32, MASK64

# Python has no fixed-width integers: every helper clips its result to the
# word width explicitly instead of relying on overflow.


def to_uint64(x):
    """Clip an integer so that it occupies 64 bits"""
    return x & MASK64


def to_uint32(x):
    """Clip an integer so that it occupies 32 bits"""
    return x & MASK32


def rotl64(x, k):
    """
    Circular left rotation of a 64-bit word.
    k is reduced modulo 64, so rotl64(x, 0) == rotl64(x, 64) == x.
    """
    x &= MASK64
    k &= 63
    if k == 0:
        return x
    return ((x << k) | (x >> (64 - k))) & MASK64


def rotl32(x, k):
    """Circular left rotation of a 32-bit word (k modulo 32)."""
    x &= MASK32
    k &= 31
    if k == 0:
        return x
    return ((x << k) | (x >> (32 - k))) & MASK32


def high_half(x):
    return (x >> 32) & MASK32


def low_half(x):
    return x & MASK32


def join_halves(high, low):
    """Pack two 32-bit values into one 64-bit word."""
    return ((high & MASK32) << 32) | (low & MASK32)


def set_high_half(word, value):
    """
    Returns `word` with its upper 32 bits replaced by `value`.
    Integers are immutable, so the caller rebinds:
        word = set_high_half(word, value)
    """
    return join_halves(value, low_half(word))


def set_low_half(word, value):
    """Returns `word` with its lower 32 bits replaced by `value`."""
    return join_halves(high_half(word), value)


def is_zero_state(words):
    return not any(words)
