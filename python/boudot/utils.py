import os
import random
import time


def get_secure_random():
    return random.SystemRandom()


def random_int_below(bound: int, rng=None) -> int:
    """Get random integer in [0, bound) range"""
    if bound <= 0:
        raise ValueError("Upper bound must be positive")
    if rng is None:
        rng = get_secure_random()
    return rng.randrange(bound)


def random_signed_int(max_magnitude: int, rng=None) -> int:
    """
    Get random signed integer whose magnitude is uniform in
    [0, max_magnitude] and whose sign is drawn independently
    """
    if max_magnitude < 0:
        raise ValueError("Maximum magnitude must be non-negative")
    if rng is None:
        rng = get_secure_random()
    magnitude = rng.randint(0, max_magnitude)
    negative = rng.getrandbits(1)
    return -magnitude if negative else magnitude


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """
    Compute `base^exponent mod modulus`, negative exponents are
    computed by inverting `base` first
    """
    if exponent < 0:
        base = pow(base, -1, modulus)
        exponent = -exponent
    return pow(base, exponent, modulus)


def byte_length(n: int) -> int:
    """Number of bytes needed to hold non-negative `n`"""
    return max(1, (n.bit_length() + 7) // 8)


def get_n_jobs():
    """Get number of supported cores for multiprocessing if enabled"""
    check_env = os.environ.get("BOUDOT_PARALLEL_CPU")
    if check_env:
        return int(check_env)
    else:
        return -1


class Timer:
    def __init__(self, name):
        self.start_time = 0
        self.end_time = 0
        self.name = name

    def __enter__(self):
        self.start_time = time.time()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.end_time = time.time()
        elapsed_time = self.end_time - self.start_time
        print(f"{self.name}: {elapsed_time:.2f} seconds")
