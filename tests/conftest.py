import pytest

from boudot import SecurityParameters


# N = p * q with safe primes p = 2*509 + 1 and q = 2*593 + 1
TOY_P = 1019
TOY_Q = 1187


class RecordingRandom:
    """`random.Random`-like source replaying fixed values and counting draws"""

    def __init__(self, w_values=(), n_magnitudes=(), signs=()):
        self.w_values = list(w_values)
        self.n_magnitudes = list(n_magnitudes)
        self.signs = list(signs)
        self.draws = 0

    def randrange(self, bound):
        self.draws += 1
        value = self.w_values.pop(0)
        assert 0 <= value < bound
        return value

    def randint(self, a, b):
        self.draws += 1
        value = self.n_magnitudes.pop(0)
        assert a <= value <= b
        return value

    def getrandbits(self, k):
        self.draws += 1
        return self.signs.pop(0)


@pytest.fixture
def toy_group():
    N = TOY_P * TOY_Q
    g = 4  # generates the quadratic residues, order 509 * 593
    h = pow(g, 1337, N)
    return N, g, h


@pytest.fixture
def small_params():
    return SecurityParameters(t=8, l=4, s=4)
