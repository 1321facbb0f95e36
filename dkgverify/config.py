"""Verifier configuration."""

from __future__ import annotations

from dataclasses import dataclass

ATTESTATION_TAG = b"DKGVERIFY/v1/attestation"


@dataclass(frozen=True)
class VerifierConfig:
    """
    Deployment constants shared by every validating node.

    Two nodes with different configs can disagree on the same input, so
    the config is part of consensus and must be identical network-wide.

    Attributes
    ----------
    attestation_tag : bytes
        Domain tag of the canonical digest every signature is bound to.
    legacy_recovery_id : bool
        Accept ECDSA recovery ids in the ``27..30`` range (normalised by
        subtracting 27) alongside the raw ``0..3`` form.
    """

    attestation_tag: bytes = ATTESTATION_TAG
    legacy_recovery_id: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.attestation_tag, bytes):
            raise TypeError("attestation_tag must be bytes")
        if not self.attestation_tag:
            raise ValueError("attestation_tag must be non-empty")


DEFAULT_CONFIG = VerifierConfig()
