"""
Proof that a commitment E = g^x h^r mod N contains an integer x in
[-2^(t+l) b, 2^(t+l) b] given x <= b

Non-interactive version of the protocol from section 1.2.3 of
Fabrice Boudot, "Efficient Proofs that a Committed Number Lies in an Interval"
"""

import logging
from typing import NamedTuple, Sequence, Tuple

from joblib import Parallel, delayed

from .errors import (
    InvalidCommitment,
    ProofGenerationFailed,
    ProofVerificationFailed,
    WitnessOutOfRange,
)
from .parameters import DEFAULT_PARAMETERS, SecurityParameters
from .transcript import hash_group_element
from .utils import get_n_jobs, get_secure_random, mod_pow, random_int_below, random_signed_int

logger = logging.getLogger(__name__)


class Proof(NamedTuple):
    C: int
    D1: int
    D2: int

    def __str__(self):
        return f"C = {self.C}\nD1 = {self.D1}\nD2 = {self.D2}"


def _check_public_inputs(b: int, N: int):
    if b <= 0:
        raise ValueError("Maximum b must be positive")
    if N <= 1:
        raise ValueError("Modulus N must be greater than 1")


def is_valid_response(
    D1: int, c: int, b: int, params: SecurityParameters = DEFAULT_PARAMETERS
) -> bool:
    """
    Check that D1 is in range [cb, 2^(t+l) b]

    w + cx < cb would reveal x is smaller than b,
    w + cx > 2^(t+l) b would allow x larger than 2^(t+l) b
    """
    return c * b <= D1 <= params.response_bound(b)


def prove(
    b: int,
    N: int,
    g: int,
    h: int,
    x: int,
    r: int,
    params: SecurityParameters = DEFAULT_PARAMETERS,
    rng=None,
) -> Proof:
    """
    Prove that the number `x` committed in g^x h^r mod N is at most `b`

    Args:
        b: maximum number to hide
        N: composite modulus whose factorization is unknown
        g: element of large order in Zn*
        h: element of <g> with unknown discrete logarithm
        x: secretly committed number
        r: blinding used in the commitment
        params: `SecurityParameters` shared with the verifier
        rng: `random.Random`-like source, defaults to `random.SystemRandom`
    """
    if x > b:
        raise WitnessOutOfRange("Committed number is larger than maximum")

    _check_public_inputs(b, N)

    if rng is None:
        rng = get_secure_random()

    w_bound = params.response_bound(b)
    n_bound = params.mask_bound(N)

    for attempt in range(1, params.max_retries + 1):
        w = random_int_below(w_bound, rng)
        n = random_signed_int(n_bound, rng)

        W = pow(g, w, N) * mod_pow(h, n, N) % N  # g^w h^n

        C = hash_group_element(W, N, params.hash_alg)
        c = C % params.challenge_modulus

        D1 = w + c * x
        D2 = n + c * r

        if is_valid_response(D1, c, b, params):
            logger.debug("Proof accepted after %d attempt(s)", attempt)
            return Proof(C, D1, D2)

    raise ProofGenerationFailed(
        f"No valid response found after {params.max_retries} attempts"
    )


def verify(
    b: int,
    N: int,
    g: int,
    h: int,
    E: int,
    proof: Proof,
    params: SecurityParameters = DEFAULT_PARAMETERS,
) -> bool:
    """
    Verify that commitment `E` hides a number in range given `proof`.
    Returns True, or raises `ProofVerificationFailed` on rejection.
    """
    _check_public_inputs(b, N)

    if E % N == 0:
        # 0^-c is undefined
        raise InvalidCommitment("Commitment must not be zero")

    C, D1, D2 = proof
    c = C % params.challenge_modulus

    try:
        E_inv = mod_pow(pow(E, c, N), -1, N)
        W = mod_pow(g, D1, N) * mod_pow(h, D2, N) * E_inv % N  # g^D1 h^D2 E^-c
    except ValueError as exc:
        raise ProofVerificationFailed("Zero-knowledge proof validation failed") from exc

    range_ok = is_valid_response(D1, c, b, params)
    hash_ok = hash_group_element(W, N, params.hash_alg) == C

    if not (range_ok and hash_ok):
        logger.debug("Proof rejected")
        raise ProofVerificationFailed("Zero-knowledge proof validation failed")

    return True


def _verify_or_false(b, N, g, h, E, proof, params) -> bool:
    try:
        return verify(b, N, g, h, E, proof, params)
    except (ProofVerificationFailed, InvalidCommitment):
        return False


def batch_verify(
    b: int,
    N: int,
    g: int,
    h: int,
    statements: Sequence[Tuple[int, Proof]],
    params: SecurityParameters = DEFAULT_PARAMETERS,
) -> list:
    """
    Verify many `(E, proof)` pairs against the same bound and group,
    returning one boolean per pair in input order
    """
    _check_public_inputs(b, N)

    return Parallel(n_jobs=get_n_jobs())(
        delayed(_verify_or_false)(b, N, g, h, E, proof, params)
        for E, proof in statements
    )
