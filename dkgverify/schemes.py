"""
Signature schemes accepted for committee attestations.

Each scheme exposes only the operation it can honestly perform:

* **Recoverable ECDSA** derives the signer's public key from
  ``(digest, signature)``; it has no use for a claimed key.
* **Schnorr** cannot recover anything and instead checks a signature
  against a claimed key:

      z·G  ==  R + c·Y     where  c = H(R, Y, m)

There is deliberately no shared base class: forcing Schnorr through a
"recover" contract would mean fabricating a key.

Wire formats (both 65 bytes, public keys 33-byte compressed SEC 1):

    ECDSA    r(32) ‖ s(32) ‖ v(1)        v ∈ {0..3}  (or 27..30)
    Schnorr  R(33, compressed) ‖ z(32)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from coincurve import PublicKey as _PK

from .config import VerifierConfig, DEFAULT_CONFIG
from .curve import Scalar, Point, G, COMPRESSED_BYTES, SCALAR_BYTES
from .hash import hash_challenge, DIGEST_BYTES
from .results import KeyType


SIGNATURE_BYTES = 65
_LEGACY_V_OFFSET = 27


class SchemeError(ValueError):
    """Cryptographic material could not be processed at all."""


# ── recoverable ECDSA ───────────────────────────────────────────────────

class RecoverableScheme:
    """secp256k1 ECDSA with public-key recovery."""

    key_type = KeyType.ECDSA

    def __init__(self, legacy_recovery_id: bool = True) -> None:
        self.legacy_recovery_id = legacy_recovery_id

    def _normalise(self, signature: bytes) -> bytes:
        if len(signature) != SIGNATURE_BYTES:
            raise SchemeError(
                f"ECDSA signature must be {SIGNATURE_BYTES} bytes, "
                f"got {len(signature)}"
            )
        v = signature[64]
        if self.legacy_recovery_id and v >= _LEGACY_V_OFFSET:
            v -= _LEGACY_V_OFFSET
        if v > 3:
            raise SchemeError(f"invalid recovery id {signature[64]}")
        return signature[:64] + bytes([v])

    def recover_signer(self, message_digest: bytes, signature: bytes) -> bytes:
        """
        Recover the compressed public key that produced *signature*.

        A well-formed signature over a different message recovers a
        concrete but different key; it is not an error here.

        Raises
        ------
        SchemeError
            Wrong length, bad recovery id, or no point recoverable.
        """
        if len(message_digest) != DIGEST_BYTES:
            raise SchemeError(f"digest must be {DIGEST_BYTES} bytes")
        compact = self._normalise(bytes(signature))
        try:
            pk = _PK.from_signature_and_message(
                compact, message_digest, hasher=None,
            )
        except (ValueError, TypeError) as exc:
            raise SchemeError(f"ECDSA recovery failed: {exc}") from exc
        return pk.format(compressed=True)


# ── Schnorr ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class SchnorrSignature:
    """Schnorr signature  (R, z)."""

    R: Point
    z: Scalar

    def to_bytes(self) -> bytes:
        return self.R.to_bytes() + self.z.to_bytes()

    @classmethod
    def from_bytes(cls, data: bytes) -> SchnorrSignature:
        if len(data) != SIGNATURE_BYTES:
            raise ValueError(f"expected {SIGNATURE_BYTES} bytes, got {len(data)}")
        R = Point.from_bytes(data[:COMPRESSED_BYTES])
        z = Scalar.from_bytes(data[COMPRESSED_BYTES:COMPRESSED_BYTES + SCALAR_BYTES])
        return cls(R=R, z=z)


class DirectScheme:
    """secp256k1 Schnorr, verified against a claimed key."""

    key_type = KeyType.SCHNORR

    def verify(
        self,
        message_digest: bytes,
        signature: bytes,
        claimed_key: bytes,
    ) -> bool:
        """
        ``True`` iff *signature* is valid for *claimed_key* over the digest.

        Malformed signatures and malformed keys are simply invalid.
        """
        try:
            sig = SchnorrSignature.from_bytes(bytes(signature))
            Y = Point.from_bytes(bytes(claimed_key))
        except ValueError:
            return False
        c = hash_challenge(sig.R, Y, message_digest)
        lhs = sig.z * G
        rhs = sig.R + (c * Y)
        return lhs == rhs


Scheme = Union[RecoverableScheme, DirectScheme]


def scheme_for(key_type: KeyType, config: VerifierConfig = DEFAULT_CONFIG) -> Scheme:
    """Pick the scheme implementation for *key_type*."""
    if key_type is KeyType.ECDSA:
        return RecoverableScheme(legacy_recovery_id=config.legacy_recovery_id)
    if key_type is KeyType.SCHNORR:
        return DirectScheme()
    raise TypeError(f"unsupported key type {key_type!r}")
