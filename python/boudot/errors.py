"""Error types raised by the interval proof"""


class ZeroKnowledgeError(Exception):
    """Base class of every proof failure"""


class WitnessOutOfRange(ZeroKnowledgeError, ValueError):
    """Committed number is larger than the maximum `b`"""


class InvalidCommitment(ZeroKnowledgeError, ValueError):
    """Commitment is the zero residue mod N"""


class ProofVerificationFailed(ZeroKnowledgeError):
    """Proof was rejected by the verifier"""


class ProofGenerationFailed(ZeroKnowledgeError, RuntimeError):
    """No acceptable response was found within the retry budget"""
