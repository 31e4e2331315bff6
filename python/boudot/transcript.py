import hashlib

from .utils import byte_length


def digest_bits(alg: str) -> int:
    """Digest size of hash `alg` in bits"""
    return hashlib.new(alg).digest_size * 8


class FiatShamirTranscript:

    def __init__(self, label: bytes = b"", alg="sha256"):
        self.alg = alg
        self.label = label
        self.hasher = hashlib.new(alg, label)

    def reset(self):
        self.hasher = hashlib.new(self.alg, self.label)

    def append(self, data, size: int = None):
        """
        Absorb `data` into the transcript. Integers are encoded big-endian
        in `size` bytes, or in their minimal length if `size` is omitted.
        """
        if isinstance(data, bytes):
            self.hasher.update(data)
        elif isinstance(data, str):
            self.hasher.update(data.encode())
        elif isinstance(data, int):
            self.hasher.update(self._int_to_bytes(data, size))
        elif data and isinstance(data, list) and isinstance(data[0], int):
            for d in data:
                self.hasher.update(self._int_to_bytes(d, size))
        else:
            raise TypeError(f"Type of {type(data)} is not supported as transcript")

    @staticmethod
    def _int_to_bytes(data: int, size: int = None) -> bytes:
        if data < 0:
            raise ValueError("Negative integer cannot be appended to transcript")
        return int.to_bytes(data, size or byte_length(data), "big")

    def get_challenge(self) -> bytes:
        digest = self.hasher.digest()
        return digest

    def get_challenge_scalar(self) -> int:
        return int.from_bytes(self.get_challenge(), "big")


def hash_group_element(W: int, N: int, alg: str = "sha256") -> int:
    """
    Hash residue `W` mod `N` into a non-negative integer.

    `W` is serialized as unsigned big-endian of exactly `byte_length(N)`
    bytes and the digest is read back big-endian. Prover and verifier
    must both go through this function.
    """
    if not 0 <= W < N:
        raise ValueError("Group element must be reduced modulo N")

    transcript = FiatShamirTranscript(alg=alg)
    transcript.append(W, byte_length(N))
    return transcript.get_challenge_scalar()
