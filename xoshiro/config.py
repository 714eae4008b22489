# Configuration for the xoshiro engines

import sys

# Word masks (Python integers are unbounded, so every result is clipped)
MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

# SplitMix64 fixed increment (odd, golden ratio) and the two mixing multipliers
SPLITMIX_INCREMENT = 0x9E3779B97F4A7C15
SPLITMIX_MUL_1 = 0xBF58476D1CE4E5B9
SPLITMIX_MUL_2 = 0x94D049BB133111EB

# Default states. Non-zero, so a generator built without a seed is usable.
# Each instance copies these into its own list.
DEFAULT_STATE_256 = (
    0x3D23DCE41C588F8C,
    0x10C770BB8DA027B0,
    0xC7A4C5E87C63BA25,
    0xA830F83239465A2E,
)
DEFAULT_STATE_128 = (0x1C588F8C, 0x3D23DCE4, 0x8DA027B0, 0x10C770BB)

# xoshiro256++: result rotation, transition shift, state rotation
XOSHIRO256_ROT_RESULT = 23
XOSHIRO256_SHIFT = 17
XOSHIRO256_ROT_STATE = 45

# xoshiro128++: same roles, calibrated for 32-bit words
XOSHIRO128_ROT_RESULT = 7
XOSHIRO128_SHIFT = 9
XOSHIRO128_ROT_STATE = 11

# Number of words in every state vector
STATE_WORDS = 4

# Serialized state: word blocks joined by this single byte
STATE_SEPARATOR = b' '

# Byte order used by the codec when the caller does not force one.
# The host order matches the original raw-memory layout.
DEFAULT_BYTE_ORDER = sys.byteorder
