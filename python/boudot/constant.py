# Security parameters of the interval proof

# challenge bit-length, half of the soundness level
DEFAULT_T = 128

# zero-knowledge slack
DEFAULT_L = 40

# headroom for the size of r in the commitment
DEFAULT_S = 40

DEFAULT_HASH_ALG = "sha256"

# upper bound on rejection sampling rounds in prove()
DEFAULT_MAX_RETRIES = 100
