"""
Phase-two verification: one signature under an established key.

The signature must be over  H(encode(data))  and attribute to exactly
``signing_key``.  The two schemes report a signature over the wrong
message differently:

* ECDSA recovers a concrete (wrong) key  →  ``SigningKeyMismatch``.
* Schnorr can only say "does not verify"  →  ``InvalidSignature``.

Both outcomes are kept distinct.
"""

from __future__ import annotations

import logging

from .config import VerifierConfig, DEFAULT_CONFIG
from .hash import digest
from .results import (
    DKGError,
    SigningResult,
    VerificationError,
    VerificationOutcome,
)
from .schemes import DirectScheme, RecoverableScheme, SchemeError, scheme_for

logger = logging.getLogger(__name__)


def verify_signing(
    result: SigningResult,
    config: VerifierConfig = DEFAULT_CONFIG,
) -> VerificationOutcome:
    """Check a phase-two result; never raises for bad cryptographic input."""
    try:
        check_signing(result, config)
    except VerificationError as exc:
        logger.debug("signing result rejected: %s", exc)
        return VerificationOutcome.failure(exc.kind)
    return VerificationOutcome.success()


def check_signing(
    result: SigningResult,
    config: VerifierConfig = DEFAULT_CONFIG,
) -> None:
    """Raising form of :func:`verify_signing`."""
    message = digest(result.data, config.attestation_tag)
    scheme = scheme_for(result.key_type, config)

    if isinstance(scheme, RecoverableScheme):
        try:
            recovered = scheme.recover_signer(message, result.signature)
        except SchemeError as exc:
            raise VerificationError(DKGError.INVALID_SIGNATURE, str(exc)) from exc
        if recovered != result.signing_key:
            raise VerificationError(
                DKGError.SIGNING_KEY_MISMATCH,
                f"recovered {recovered.hex()[:16]}, "
                f"claimed {result.signing_key.hex()[:16]}",
            )
        return

    if isinstance(scheme, DirectScheme):
        if not scheme.verify(message, result.signature, result.signing_key):
            raise VerificationError(DKGError.INVALID_SIGNATURE)
        return

    raise TypeError(f"unsupported scheme {type(scheme).__name__}")
