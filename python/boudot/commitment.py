from .parameters import DEFAULT_PARAMETERS, SecurityParameters
from .utils import mod_pow, random_signed_int


def commit(N: int, g: int, h: int, x: int, r: int) -> int:
    """Commitment E = g^x h^r mod N"""
    return mod_pow(g, x, N) * mod_pow(h, r, N) % N


def random_blinding(
    N: int, params: SecurityParameters = DEFAULT_PARAMETERS, rng=None
) -> int:
    """Random r in [-2^s N, 2^s N]"""
    return random_signed_int((1 << params.s) * N, rng)
