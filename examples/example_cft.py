"""
Prove that a committed value x is at most b without revealing x
using Boudot's interval proof (Fiat-Shamir variant)
"""

from boudot import ProofVerificationFailed, commit, prove, random_blinding, verify

# toy modulus from safe primes 2*509+1 and 2*593+1, never use it in practice
N = 1019 * 1187
g = 4
h = pow(g, 1337, N)

# public maximum
b = 1000

# secret value x and its blinding r
x = 742
r = random_blinding(N)

E = commit(N, g, h, x, r)

proof = prove(b, N, g, h, x, r)
assert verify(b, N, g, h, E, proof)
print(f"Proof is valid: committed value is in range of maximum {b}")

# commitment to another value does not match the proof
try:
    verify(b, N, g, h, commit(N, g, h, x + 1, r), proof)
except ProofVerificationFailed:
    print("Proof is invalid for a different commitment")
