"""
Job results submitted by the committee, and the verification outcome.

All types are immutable values built fresh for a single verification
call.  Sequence fields are coerced to tuples of ``bytes`` so a caller
mutating its own lists afterwards cannot change a result in flight.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple, Union


# ── key types ───────────────────────────────────────────────────────────

class KeyType(Enum):
    """Signature scheme a result was produced under."""

    ECDSA = 0       # recoverable: signer derived from (signature, message)
    SCHNORR = 1     # direct-verify: needs the claimed key

    @classmethod
    def from_tag(cls, tag: Union[KeyType, int, str]) -> KeyType:
        """Resolve an enum member, its integer tag, or its name."""
        if isinstance(tag, cls):
            return tag
        if isinstance(tag, bool):
            raise ValueError(f"unknown key type tag {tag!r}")
        if isinstance(tag, int):
            return cls(tag)
        if isinstance(tag, str):
            try:
                return cls[tag.upper()]
            except KeyError:
                raise ValueError(f"unknown key type {tag!r}") from None
        raise ValueError(f"unknown key type tag {tag!r}")


# ── errors ──────────────────────────────────────────────────────────────

class DKGError(Enum):
    """Reasons a submitted result is rejected."""

    NO_PARTICIPANTS_FOUND = "NoParticipantsFound"
    NO_SIGNATURES_FOUND = "NoSignaturesFound"
    NOT_ENOUGH_SIGNERS = "NotEnoughSigners"
    DUPLICATE_SIGNATURE = "DuplicateSignature"
    INVALID_SIGNATURE = "InvalidSignature"
    SIGNING_KEY_MISMATCH = "SigningKeyMismatch"


class VerificationError(Exception):
    """A result failed verification; ``kind`` says why."""

    def __init__(self, kind: DKGError, detail: str = "") -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(f"{kind.value}: {detail}" if detail else kind.value)


@dataclass(frozen=True)
class VerificationOutcome:
    """Success, or exactly one ``DKGError``."""

    error: Optional[DKGError] = None

    @classmethod
    def success(cls) -> VerificationOutcome:
        return cls()

    @classmethod
    def failure(cls, kind: DKGError) -> VerificationOutcome:
        return cls(error=kind)

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise VerificationError(self.error)


# ── results ─────────────────────────────────────────────────────────────

def _as_bytes(value, name: str) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes, got {type(value).__name__}")
    return bytes(value)


def _as_bytes_tuple(values: Iterable, name: str) -> Tuple[bytes, ...]:
    if isinstance(values, (bytes, bytearray, str)):
        raise TypeError(f"{name} must be a sequence of byte strings")
    return tuple(_as_bytes(v, f"{name}[{i}]") for i, v in enumerate(values))


@dataclass(frozen=True)
class KeyGenResult:
    """
    Phase one: the committee's claim to a shared public key.

    Attributes
    ----------
    key_type : KeyType
    key : bytes
        Claimed shared public key; may be empty while pending derivation.
    participants : tuple[bytes, ...]
        Committee public keys eligible to attest.  Duplicates allowed.
    signatures : tuple[bytes, ...]
        One attestation per signing member, each over  H(key).
    threshold : int
        Maximum tolerated number of absent or faulty members.
    """

    key_type: KeyType
    key: bytes
    participants: Tuple[bytes, ...]
    signatures: Tuple[bytes, ...]
    threshold: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "key_type", KeyType.from_tag(self.key_type))
        object.__setattr__(self, "key", _as_bytes(self.key, "key"))
        object.__setattr__(
            self, "participants",
            _as_bytes_tuple(self.participants, "participants"),
        )
        object.__setattr__(
            self, "signatures",
            _as_bytes_tuple(self.signatures, "signatures"),
        )
        if isinstance(self.threshold, bool) or not isinstance(self.threshold, int):
            raise TypeError("threshold must be an int")
        if self.threshold < 0:
            raise ValueError("threshold must be ≥ 0")


@dataclass(frozen=True)
class SigningResult:
    """Phase two: one signature produced under an established key."""

    key_type: KeyType
    signature: bytes
    data: bytes             # raw message, hashed by the verifier
    signing_key: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "key_type", KeyType.from_tag(self.key_type))
        object.__setattr__(self, "signature", _as_bytes(self.signature, "signature"))
        object.__setattr__(self, "data", _as_bytes(self.data, "data"))
        object.__setattr__(
            self, "signing_key", _as_bytes(self.signing_key, "signing_key"),
        )


JobResult = Union[KeyGenResult, SigningResult]
