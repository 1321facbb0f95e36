"""
Phase-one verification: a committee's attestation of a shared key.

Every participating member signs the digest of the claimed key,

    m = H(encode(key)),

and the result is accepted only if strictly more than ``threshold``
signatures are present and each one resolves to a *distinct* member of
the committee.  Which member's raw key happens to equal ``key`` plays no
role; every member attests to the same claim.

Signer resolution depends on the scheme:

* ECDSA recovers the signer directly from the signature.
* Schnorr has no recovery, so each committee key is tried in order until
  one verifies.

Resolution and duplicate tracking use ordered lists and linear scans so
every node walks the same sequence for the same input.  Cost is bounded
by  |participants| × |signatures|  signature checks.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .config import VerifierConfig, DEFAULT_CONFIG
from .hash import digest
from .results import (
    DKGError,
    KeyGenResult,
    VerificationError,
    VerificationOutcome,
)
from .schemes import (
    DirectScheme,
    RecoverableScheme,
    Scheme,
    SchemeError,
    scheme_for,
)

logger = logging.getLogger(__name__)


def verify_keygen(
    result: KeyGenResult,
    config: VerifierConfig = DEFAULT_CONFIG,
) -> VerificationOutcome:
    """Check a phase-one result; never raises for bad cryptographic input."""
    try:
        check_keygen(result, config)
    except VerificationError as exc:
        logger.debug("keygen result rejected: %s", exc)
        return VerificationOutcome.failure(exc.kind)
    return VerificationOutcome.success()


def check_keygen(
    result: KeyGenResult,
    config: VerifierConfig = DEFAULT_CONFIG,
) -> None:
    """
    Raising form of :func:`verify_keygen`.

    Raises
    ------
    VerificationError
        With the first failing condition, checked in this order:
        participants, signatures, quorum, then each signature in turn.
    """
    if not result.participants:
        raise VerificationError(DKGError.NO_PARTICIPANTS_FOUND)
    if not result.signatures:
        raise VerificationError(DKGError.NO_SIGNATURES_FOUND)
    if len(result.signatures) <= result.threshold:
        raise VerificationError(
            DKGError.NOT_ENOUGH_SIGNERS,
            f"{len(result.signatures)} signatures, threshold {result.threshold}",
        )

    message = digest(result.key, config.attestation_tag)
    scheme = scheme_for(result.key_type, config)
    counted: List[bytes] = []

    for idx, signature in enumerate(result.signatures):
        signer = _resolve_signer(scheme, message, signature, result.participants)
        if signer is None or signer not in result.participants:
            raise VerificationError(
                DKGError.INVALID_SIGNATURE,
                f"signature {idx} does not resolve to a participant",
            )
        if signer in counted:
            raise VerificationError(
                DKGError.DUPLICATE_SIGNATURE,
                f"signature {idx} repeats signer {signer.hex()[:16]}",
            )
        counted.append(signer)


def _resolve_signer(
    scheme: Scheme,
    message: bytes,
    signature: bytes,
    participants: Sequence[bytes],
) -> Optional[bytes]:
    """Identity behind *signature*, or ``None`` if it cannot be resolved."""
    if isinstance(scheme, RecoverableScheme):
        try:
            return scheme.recover_signer(message, signature)
        except SchemeError as exc:
            logger.debug("signer recovery failed: %s", exc)
            return None
    if isinstance(scheme, DirectScheme):
        for candidate in participants:
            if scheme.verify(message, signature, candidate):
                return candidate
        return None
    raise TypeError(f"unsupported scheme {type(scheme).__name__}")
