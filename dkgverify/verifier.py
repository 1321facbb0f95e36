"""
Single entry point for job results.

The hosting state-transition logic calls :func:`verify` before any side
effect tied to the result (fee settlement, key activation).  Any failure
rejects the whole submission; there is no partial acceptance.
"""

from __future__ import annotations

from .config import VerifierConfig, DEFAULT_CONFIG
from .keygen import verify_keygen
from .results import JobResult, KeyGenResult, SigningResult, VerificationOutcome
from .signing import verify_signing


def verify(
    result: JobResult,
    config: VerifierConfig = DEFAULT_CONFIG,
) -> VerificationOutcome:
    """
    Route *result* to the phase-one or phase-two verifier.

    Pure and deterministic: no I/O, no randomness, no retained state.

    Raises
    ------
    TypeError
        *result* is not one of the ``JobResult`` variants.
    """
    if isinstance(result, KeyGenResult):
        return verify_keygen(result, config)
    if isinstance(result, SigningResult):
        return verify_signing(result, config)
    raise TypeError(f"not a job result: {type(result).__name__}")
