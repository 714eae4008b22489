import time
import numpy as np
from xoshiro.prngs import PRNG_REGISTRY

# Outputs drawn per engine. Pure Python, so keep it modest.
DRAWS = 200_000
SEED = 42


def bit_balance(values, output_bits):
    """Fraction of one bits in the outputs (ideal: 0.5)."""
    raw = values.astype(f'<u{output_bits // 8}').view(np.uint8)
    bits = np.unpackbits(raw)
    return bits.mean()


def main():
    print(f"--- XOSHIRO BENCHMARK ---")
    print(f"Seed: {SEED}")
    print(f"Draws per engine: {DRAWS}")
    print("-" * 60)
    print(f"{'ENGINE':<14} | {'TIME':<8} | {'M/S':<8} | {'ONES':<8} | {'LAST'}")
    print("-" * 60)

    for name, cls in PRNG_REGISTRY.items():
        rng = cls(SEED)

        start_time = time.time()
        values = rng.random_raw(DRAWS)
        duration = time.time() - start_time

        rate = DRAWS / duration / 1e6 if duration > 0 else float('inf')
        ones = bit_balance(values, cls.OUTPUT_BITS)
        digits = cls.OUTPUT_BITS // 4
        print(f"{name:<14} | {duration:<8.2f} | {rate:<8.3f} | {ones:<8.4f} | 0x{int(values[-1]):0{digits}x}")

    print("-" * 60)


if __name__ == "__main__":
    main()
