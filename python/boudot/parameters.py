import hashlib
from dataclasses import dataclass

from .constant import (
    DEFAULT_HASH_ALG,
    DEFAULT_L,
    DEFAULT_MAX_RETRIES,
    DEFAULT_S,
    DEFAULT_T,
)
from .transcript import digest_bits


@dataclass(frozen=True)
class SecurityParameters:
    """
    Public parameters shared by prover and verifier

    Args:
        t: challenge bit-length (half of the soundness level)
        l: zero-knowledge slack
        s: headroom for the size of r in the commitment
        hash_alg: `hashlib` algorithm used for the Fiat-Shamir challenge
        max_retries: upper bound on rejection sampling rounds
    """

    t: int = DEFAULT_T
    l: int = DEFAULT_L
    s: int = DEFAULT_S
    hash_alg: str = DEFAULT_HASH_ALG
    max_retries: int = DEFAULT_MAX_RETRIES

    def __post_init__(self):
        for name in ("t", "l", "s"):
            value = getattr(self, name)
            if not isinstance(value, int) or value <= 0:
                raise ValueError(f"Parameter {name} must be a positive integer")

        if not isinstance(self.max_retries, int) or self.max_retries < 1:
            raise ValueError("max_retries must be at least 1")

        if self.hash_alg not in hashlib.algorithms_available:
            raise ValueError(f"Hash algorithm {self.hash_alg} is not available")

        if digest_bits(self.hash_alg) < self.t:
            raise ValueError(
                f"Digest of {self.hash_alg} is shorter than the challenge size t={self.t}"
            )

    @property
    def challenge_modulus(self) -> int:
        return 1 << self.t

    def response_bound(self, b: int) -> int:
        """2^(t+l) * b"""
        return (1 << (self.t + self.l)) * b

    def mask_bound(self, N: int) -> int:
        """2^(t+l+s) * N - 1"""
        return (1 << (self.t + self.l + self.s)) * N - 1


DEFAULT_PARAMETERS = SecurityParameters()
