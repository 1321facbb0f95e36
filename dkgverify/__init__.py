"""
dkgverify: verification of distributed key-generation job results.

A rotating committee produces two kinds of results that a replicated
ledger must check before acting on them:

- **Phase one** — a shared public key, attested by a quorum of
  per-member signatures over the key claim.
- **Phase two** — a signature over arbitrary data under an
  established key.

Two secp256k1 schemes are supported: recoverable ECDSA and Schnorr.
Verification is pure and deterministic; malformed cryptographic input
is reported as an error kind, never raised.

Quick start
-----------
::

    from dkgverify import KeyGenResult, KeyType, verify

    outcome = verify(KeyGenResult(
        key_type=KeyType.ECDSA,
        key=shared_key,
        participants=[pk_1, pk_2],
        signatures=[sig_2, sig_1],
        threshold=1,
    ))
    if not outcome:
        print(outcome.error)
"""

__version__ = "0.1.0"

# ── results & outcome ───────────────────────────────────────────────────
from .results import (
    KeyType,
    KeyGenResult,
    SigningResult,
    JobResult,
    DKGError,
    VerificationError,
    VerificationOutcome,
)

# ── configuration ───────────────────────────────────────────────────────
from .config import VerifierConfig, DEFAULT_CONFIG, ATTESTATION_TAG

# ── verification ────────────────────────────────────────────────────────
from .verifier import verify
from .keygen import verify_keygen, check_keygen
from .signing import verify_signing, check_signing

# ── signature schemes ───────────────────────────────────────────────────
from .schemes import (
    RecoverableScheme,
    DirectScheme,
    SchnorrSignature,
    SchemeError,
    scheme_for,
)

# ── hashing ─────────────────────────────────────────────────────────────
from .hash import canonical_encode, digest, hash_challenge

# ── fees ────────────────────────────────────────────────────────────────
from .fees import FeeInfo, FeeSchedule, BadOrigin

__all__ = [
    # version
    "__version__",
    # results
    "KeyType", "KeyGenResult", "SigningResult", "JobResult",
    "DKGError", "VerificationError", "VerificationOutcome",
    # config
    "VerifierConfig", "DEFAULT_CONFIG", "ATTESTATION_TAG",
    # verification
    "verify", "verify_keygen", "check_keygen",
    "verify_signing", "check_signing",
    # schemes
    "RecoverableScheme", "DirectScheme", "SchnorrSignature",
    "SchemeError", "scheme_for",
    # hashing
    "canonical_encode", "digest", "hash_challenge",
    # fees
    "FeeInfo", "FeeSchedule", "BadOrigin",
]
