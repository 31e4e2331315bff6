import dataclasses
import random

import pytest

from boudot import DEFAULT_PARAMETERS, SecurityParameters
from boudot.commitment import commit, random_blinding


def test_default_parameters():

    assert DEFAULT_PARAMETERS.t == 128
    assert DEFAULT_PARAMETERS.l == 40
    assert DEFAULT_PARAMETERS.hash_alg == "sha256"
    assert DEFAULT_PARAMETERS.challenge_modulus == 2**128
    assert DEFAULT_PARAMETERS.response_bound(3) == 3 * 2**168


def test_parameter_bounds():

    params = SecurityParameters(t=8, l=4, s=4)

    assert params.challenge_modulus == 256
    assert params.response_bound(10) == 40960
    assert params.mask_bound(100) == 2**16 * 100 - 1


@pytest.mark.parametrize(
    "kwargs",
    [
        {"t": 0},
        {"l": -1},
        {"s": 0},
        {"max_retries": 0},
        {"hash_alg": "not-a-hash"},
        {"t": 257},
        {"t": 300, "hash_alg": "sha256"},
    ],
)
def test_invalid_parameters(kwargs):

    with pytest.raises(ValueError):
        SecurityParameters(**kwargs)


def test_parameters_are_frozen():

    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_PARAMETERS.t = 64


def test_commit(toy_group):
    N, g, h = toy_group

    assert commit(N, g, h, 5, 7) == pow(g, 5, N) * pow(h, 7, N) % N
    assert commit(N, g, h, 5, -7) * pow(h, 7, N) % N == pow(g, 5, N)


def test_random_blinding(toy_group):
    N, _, _ = toy_group
    params = SecurityParameters(t=8, l=4, s=4)
    rng = random.Random(8)

    values = [random_blinding(N, params, rng) for _ in range(200)]

    assert all(abs(r) <= 2**4 * N for r in values)
    assert any(r < 0 for r in values) and any(r > 0 for r in values)
