from xoshiro.config import MASK64, SPLITMIX_INCREMENT, SPLITMIX_MUL_1, SPLITMIX_MUL_2


def splitmix64(seed):
    """
    Fixed-increment SplitMix64 step (Java 8's SplittableRandom mixer).
    Pure: the same seed always gives the same value. Chain it,
    splitmix64(splitmix64(x)), to derive several decorrelated words.
    """
    z = (seed + SPLITMIX_INCREMENT) & MASK64
    z = ((z ^ (z >> 30)) * SPLITMIX_MUL_1) & MASK64
    z = ((z ^ (z >> 27)) * SPLITMIX_MUL_2) & MASK64
    return z ^ (z >> 31)


def splitmix64_stream(seed, n):
    out = []
    z = seed
    for _ in range(n):
        z = splitmix64(z)
        out.append(z)
    return out
