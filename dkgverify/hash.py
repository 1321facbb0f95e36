"""
Canonical hashing for committee attestations.

Every signature checked by the verifier is bound to a 32-byte digest of
the canonical encoding of the attested value (the shared key claim in
phase one, the caller-supplied data in phase two).  The digest is a
BIP-340 style tagged hash:

    H_tag(x) = SHA-256( SHA-256(tag) ‖ SHA-256(tag) ‖ encode(x) )

SHA-256 and big-endian length prefixes keep the output identical on
every node regardless of platform or locale.
"""

from __future__ import annotations

import hashlib
from typing import Any

from .config import ATTESTATION_TAG
from .curve import Scalar, Point, SCALAR_BYTES

DIGEST_BYTES = 32

# ── domain tags ─────────────────────────────────────────────────────────
_TAG_CHALLENGE = b"DKGVERIFY/v1/schnorr_challenge"


# ── internal helpers ────────────────────────────────────────────────────
def _tagged_hasher(tag: bytes) -> "hashlib._Hash":
    """Return a SHA-256 context pre-loaded with the BIP-340 tag prefix."""
    tag_hash = hashlib.sha256(tag).digest()
    h = hashlib.sha256()
    h.update(tag_hash)
    h.update(tag_hash)
    return h


def _encode_item(item: Any) -> bytes:
    """Canonical encoding of one hash input."""
    if isinstance(item, (bytes, bytearray, memoryview)):
        return canonical_encode(bytes(item))
    if isinstance(item, Scalar):
        return item.to_bytes()
    if isinstance(item, Point):
        return item.to_bytes()
    if isinstance(item, int):
        return item.to_bytes(SCALAR_BYTES, "big")
    raise TypeError(f"cannot encode {type(item).__name__} for hashing")


def _tagged_hash(tag: bytes, *args: Any) -> bytes:
    h = _tagged_hasher(tag)
    for a in args:
        h.update(_encode_item(a))
    return h.digest()


# ── public hash functions ───────────────────────────────────────────────

def canonical_encode(payload: bytes) -> bytes:
    """
    Length-prefixed byte string:  len(payload) as u32 big-endian ‖ payload.

    An empty payload (a key claim still pending derivation) encodes to
    four zero bytes and therefore still has a well-defined digest.
    """
    if not isinstance(payload, (bytes, bytearray, memoryview)):
        raise TypeError("payload must be bytes")
    payload = bytes(payload)
    return len(payload).to_bytes(4, "big") + payload


def digest(payload: bytes, tag: bytes = ATTESTATION_TAG) -> bytes:
    """Attestation digest  H_tag(canonical_encode(payload)), 32 bytes."""
    return _tagged_hash(tag, payload)


def hash_challenge(R: Point, pk: Point, message: bytes) -> Scalar:
    r"""
    Schnorr challenge  c = H(R, Y, m)  reduced into  Z_q.

    *message* is already an attestation digest; it is length-prefixed
    again here like any other byte input.
    """
    return Scalar.from_bytes_reduce(_tagged_hash(_TAG_CHALLENGE, R, pk, message))
