from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import coincurve
import pytest

from dkgverify import KeyType, digest, hash_challenge
from dkgverify.config import ATTESTATION_TAG
from dkgverify.curve import G, Point, Scalar


@dataclass(frozen=True)
class Keypair:
    key_type: KeyType
    secret: Union[coincurve.PrivateKey, Scalar]
    public: bytes


class Keystore:
    """Test-only key material; the verifier never holds private keys."""

    def generate(self, key_type: KeyType) -> Keypair:
        if key_type is KeyType.ECDSA:
            sk = coincurve.PrivateKey()
            return Keypair(key_type, sk, sk.public_key.format(compressed=True))
        x = Scalar.random()
        return Keypair(key_type, x, Point.from_scalar(x).to_bytes())

    def sign(self, kp: Keypair, payload: bytes, tag: bytes = ATTESTATION_TAG) -> bytes:
        """Sign the attestation digest of *payload*."""
        return self.sign_digest(kp, digest(payload, tag))

    def sign_digest(self, kp: Keypair, message: bytes) -> bytes:
        if kp.key_type is KeyType.ECDSA:
            return kp.secret.sign_recoverable(message, hasher=None)
        k = Scalar.random()
        R = k * G
        Y = Point.from_bytes(kp.public)
        c = hash_challenge(R, Y, message)
        z = k + c * kp.secret
        return R.to_bytes() + z.to_bytes()


@pytest.fixture
def keystore() -> Keystore:
    return Keystore()


@pytest.fixture(params=[KeyType.ECDSA, KeyType.SCHNORR], ids=lambda kt: kt.name.lower())
def key_type(request) -> KeyType:
    return request.param
