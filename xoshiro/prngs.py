import logging

import numpy as np

from xoshiro.config import *
from xoshiro.file_io import deserialize_state, serialize_state
from xoshiro.splitmix import splitmix64
from xoshiro.utils import high_half, is_zero_state, join_halves, low_half, rotl32, rotl64

logger = logging.getLogger(__name__)


class PRNG:
    """
    Common surface of the xoshiro engines.

    Subclasses provide the state layout (WORD_BITS, DEFAULT_STATE), scalar
    seeding and the next() step. Everything else (seeding dispatch,
    discard, bulk draws, equality, copies, serialization) lives here.
    """
    NAME = None
    WORD_BITS = None
    OUTPUT_BITS = None
    DTYPE = None
    DEFAULT_STATE = ()

    MIN = 0
    MAX = None

    def __init__(self, seed_val=None):
        self._state = list(self.DEFAULT_STATE)
        if seed_val is not None:
            self.seed(seed_val)

    @property
    def state(self):
        """Read-only snapshot of the state vector."""
        return tuple(self._state)

    def seed(self, seed_val):
        """
        Reseeds in place. Accepts:
          - an integer (Python int or numpy integer scalar): SplitMix64 expansion
          - a sequence or numpy array of raw state words: copied verbatim
          - an entropy source with generate_state(n, dtype), such as
            numpy.random.SeedSequence: filled with 32-bit chunks
        """
        if isinstance(seed_val, (int, np.integer)):
            self._seed_scalar(seed_val)
        elif hasattr(seed_val, 'generate_state'):
            self._seed_entropy(seed_val)
        elif isinstance(seed_val, (str, bytes, bytearray, float)) or not hasattr(seed_val, '__iter__'):
            raise TypeError(f"Cannot seed {self.NAME} from {type(seed_val).__name__}")
        else:
            self._seed_words(seed_val)
        return self

    def _seed_scalar(self, seed_val):
        raise NotImplementedError

    def _seed_entropy(self, source):
        raise NotImplementedError

    def _seed_words(self, words):
        values = self._coerce_words(words, STATE_WORDS, self.WORD_BITS)
        if is_zero_state(values):
            # Degenerate fixed point: every later output is a constant.
            logger.warning("%s seeded with an all-zero state", self.NAME)
        self._state = values
        logger.debug("Seeded %s from raw words", self.NAME)

    @staticmethod
    def _coerce_words(words, count, bits):
        if isinstance(words, np.ndarray):
            if words.dtype.kind not in 'iu':
                raise TypeError(f"State words must be integers, got dtype {words.dtype}")
            words = words.ravel()
        values = [int(w) for w in words]
        if len(values) != count:
            raise ValueError(f"Expected {count} words of {bits} bits, got {len(values)}")
        limit = 1 << bits
        for w in values:
            if not 0 <= w < limit:
                raise ValueError(f"State word {w:#x} does not fit {bits} bits")
        return values

    def next(self):
        raise NotImplementedError

    def __call__(self):
        return self.next()

    def __iter__(self):
        return self

    def __next__(self):
        return self.next()

    def discard(self, n):
        """Advances the state n times, dropping the outputs. Linear in n."""
        if n < 0:
            raise ValueError(f"Cannot discard a negative number of outputs ({n})")
        step = self.next
        for _ in range(n):
            step()

    def random_raw(self, size=None):
        """
        Raw outputs, numpy style.
        size=None returns a single int, otherwise an array of the given
        shape with the engine's unsigned dtype.
        """
        if size is None:
            return self.next()
        out = np.empty(size, dtype=self.DTYPE)
        flat = out.reshape(-1)
        for i in range(flat.size):
            flat[i] = self.next()
        return out

    def randbytes(self, n):
        """n bytes from successive outputs, each output little-endian."""
        if n < 0:
            raise ValueError("Number of bytes must be non-negative")
        width = self.OUTPUT_BITS // 8
        output = bytearray()
        for _ in range(-(-n // width)):
            output += self.next().to_bytes(width, 'little')
        return bytes(output[:n])

    def serialize(self, byteorder=None):
        return serialize_state(self._state, self.WORD_BITS, byteorder)

    def deserialize(self, data, byteorder=None):
        """Restores the state from serialize() output, in place."""
        self._seed_words(deserialize_state(data, self.WORD_BITS, byteorder))
        return self

    @classmethod
    def from_bytes(cls, data, byteorder=None):
        return cls().deserialize(data, byteorder)

    def copy(self):
        clone = self.__class__.__new__(self.__class__)
        clone._state = list(self._state)
        return clone

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def __eq__(self, other):
        if not isinstance(other, PRNG):
            return NotImplemented
        return type(self) is type(other) and self._state == other._state

    # Mutable and compared by value
    __hash__ = None

    def __repr__(self):
        digits = self.WORD_BITS // 4
        words = ", ".join(f"0x{w:0{digits}x}" for w in self._state)
        return f"{self.__class__.__name__}(state=[{words}])"


class Xoshiro256PP(PRNG):
    """
    xoshiro256++ 1.0 (Blackman & Vigna).
    256 bits of state in four 64-bit words, 64-bit outputs.
    The state must not be everywhere zero.
    """
    NAME = 'xoshiro256++'
    WORD_BITS = 64
    OUTPUT_BITS = 64
    DTYPE = np.uint64
    DEFAULT_STATE = DEFAULT_STATE_256
    MAX = MASK64

    def _seed_scalar(self, seed_val):
        s0 = splitmix64(splitmix64(int(seed_val)))
        s1 = splitmix64(s0)
        s2 = splitmix64(s1)
        s3 = splitmix64(s2)
        self._state = [s0, s1, s2, s3]
        logger.debug("Seeded %s from scalar %d", self.NAME, seed_val)

    def _seed_entropy(self, source):
        # Eight 32-bit slots; slot 2i is the low half of word i
        chunks = [int(c) for c in source.generate_state(2 * STATE_WORDS, np.uint32)]
        self._seed_words([join_halves(chunks[2 * i + 1], chunks[2 * i]) for i in range(STATE_WORDS)])

    def next(self):
        s0, s1, s2, s3 = self._state
        result = (rotl64(s0 + s3, XOSHIRO256_ROT_RESULT) + s0) & MASK64

        t = (s1 << XOSHIRO256_SHIFT) & MASK64
        s2 ^= s0
        s3 ^= s1
        s1 ^= s2
        s0 ^= s3
        s2 ^= t
        s3 = rotl64(s3, XOSHIRO256_ROT_STATE)

        self._state = [s0, s1, s2, s3]
        return result


class Xoshiro128PP(PRNG):
    """
    xoshiro128++ 1.0, the 32-bit sibling: 128 bits of state in four
    32-bit words, 32-bit outputs.

    Raw words may be given as four 32-bit words or two 64-bit words
    (low half first). numpy arrays choose by dtype, plain sequences by length.
    """
    NAME = 'xoshiro128++'
    WORD_BITS = 32
    OUTPUT_BITS = 32
    DTYPE = np.uint32
    DEFAULT_STATE = DEFAULT_STATE_128
    MAX = MASK32

    def _seed_scalar(self, seed_val):
        if isinstance(seed_val, np.uint32):
            self.seed_u32(seed_val)
            return
        t1 = splitmix64(int(seed_val))
        t2 = splitmix64(t1)
        self._state = [
            splitmix64(high_half(t1)) & MASK32,
            splitmix64(low_half(t1)) & MASK32,
            splitmix64(high_half(t2)) & MASK32,
            splitmix64(low_half(t2)) & MASK32,
        ]
        logger.debug("Seeded %s from scalar %d", self.NAME, seed_val)

    def seed_u32(self, seed_val):
        """Seeds from a 32-bit value by repeating it in both halves of a 64-bit seed."""
        value = int(seed_val)
        if not 0 <= value <= MASK32:
            raise ValueError(f"{value:#x} is not a 32-bit seed")
        self._seed_scalar(join_halves(value, value))
        return self

    def _seed_words(self, words):
        if isinstance(words, np.ndarray):
            as_pairs = words.dtype.itemsize == 8
        else:
            words = list(words)
            as_pairs = len(words) == STATE_WORDS // 2
        if as_pairs:
            pairs = self._coerce_words(words, STATE_WORDS // 2, 64)
            words = [half for w in pairs for half in (low_half(w), high_half(w))]
        super()._seed_words(words)

    def _seed_entropy(self, source):
        self._seed_words([int(c) for c in source.generate_state(STATE_WORDS, np.uint32)])

    def next(self):
        s0, s1, s2, s3 = self._state
        result = (rotl32(s0 + s3, XOSHIRO128_ROT_RESULT) + s0) & MASK32

        t = (s1 << XOSHIRO128_SHIFT) & MASK32
        s2 ^= s0
        s3 ^= s1
        s1 ^= s2
        s0 ^= s3
        s2 ^= t
        s3 = rotl32(s3, XOSHIRO128_ROT_STATE)

        self._state = [s0, s1, s2, s3]
        return result


# Registry: engine name -> class
PRNG_REGISTRY = {
    Xoshiro256PP.NAME: Xoshiro256PP,
    Xoshiro128PP.NAME: Xoshiro128PP,
}
