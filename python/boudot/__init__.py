"""
Non-interactive proofs that a committed number lies in an interval
"""

from .cft import Proof, batch_verify, is_valid_response, prove, verify
from .commitment import commit, random_blinding
from .errors import (
    InvalidCommitment,
    ProofGenerationFailed,
    ProofVerificationFailed,
    WitnessOutOfRange,
    ZeroKnowledgeError,
)
from .parameters import DEFAULT_PARAMETERS, SecurityParameters
