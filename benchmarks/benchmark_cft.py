import random

from boudot import SecurityParameters, batch_verify, commit, prove, random_blinding, verify
from boudot.utils import Timer

# 1536-bit MODP prime of RFC 3526, only the cost of the arithmetic is measured
MODP_1536 = int(
    """
FFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD1
29024E088A67CC74020BBEA63B139B22514A08798E3404DD
EF9519B3CD3A431B302B0A6DF25F14374FE1356D6D51C245
E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7ED
EE386BFB5A899FA5AE9F24117C4B1FE649286651ECE65381
FFFFFFFFFFFFFFFF
""".replace("\n", ""),
    16,
)


def run(n_proofs, params):
    N = MODP_1536
    g = 4
    h = pow(g, random.SystemRandom().getrandbits(256), N)
    b = 2**64

    statements = []
    with Timer(f"prove x{n_proofs} (t={params.t}, l={params.l}, s={params.s})"):
        for _ in range(n_proofs):
            x = random.SystemRandom().randrange(b + 1)
            r = random_blinding(N, params)
            statements.append((commit(N, g, h, x, r), prove(b, N, g, h, x, r, params)))

    with Timer(f"verify x{n_proofs}"):
        for E, proof in statements:
            verify(b, N, g, h, E, proof, params)

    with Timer(f"batch_verify x{n_proofs}"):
        assert all(batch_verify(b, N, g, h, statements, params))


if __name__ == "__main__":
    for n in [10, 100]:
        run(n, SecurityParameters())
        run(n, SecurityParameters(t=256, l=80, s=80, hash_alg="sha512"))
