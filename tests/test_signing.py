from __future__ import annotations

import coincurve
import pytest

from dkgverify import (
    DKGError,
    KeyType,
    SigningResult,
    VerificationError,
    check_signing,
    verify,
    verify_signing,
)


def _result(key_type, signature, data, signing_key):
    return SigningResult(
        key_type=key_type,
        signature=signature,
        data=data,
        signing_key=signing_key,
    )


def test_valid_signature(key_type, keystore):
    kp = keystore.generate(key_type)
    data = b"transfer 10 units"
    outcome = verify(_result(key_type, keystore.sign(kp, data), data, kp.public))
    assert outcome.ok


def test_ecdsa_wrong_message_is_key_mismatch(keystore):
    kp = keystore.generate(KeyType.ECDSA)
    sig = keystore.sign(kp, b"something else")

    outcome = verify(_result(KeyType.ECDSA, sig, b"payload", kp.public))
    assert outcome.error is DKGError.SIGNING_KEY_MISMATCH


def test_schnorr_wrong_message_is_invalid(keystore):
    kp = keystore.generate(KeyType.SCHNORR)
    sig = keystore.sign(kp, b"something else")

    outcome = verify(_result(KeyType.SCHNORR, sig, b"payload", kp.public))
    assert outcome.error is DKGError.INVALID_SIGNATURE


def test_wrong_signer(keystore):
    signer = keystore.generate(KeyType.ECDSA)
    claimed = keystore.generate(KeyType.ECDSA)
    sig = keystore.sign(signer, b"payload")
    outcome = verify(_result(KeyType.ECDSA, sig, b"payload", claimed.public))
    assert outcome.error is DKGError.SIGNING_KEY_MISMATCH

    signer = keystore.generate(KeyType.SCHNORR)
    claimed = keystore.generate(KeyType.SCHNORR)
    sig = keystore.sign(signer, b"payload")
    outcome = verify(_result(KeyType.SCHNORR, sig, b"payload", claimed.public))
    assert outcome.error is DKGError.INVALID_SIGNATURE


def test_data_is_hashed_not_signed_raw(key_type, keystore):
    from dkgverify import digest

    kp = keystore.generate(key_type)
    data = b"payload"
    # a signature over the digest used as raw data does not verify
    sig = keystore.sign_digest(kp, digest(data))
    outcome = verify(_result(key_type, sig, digest(data), kp.public))
    assert not outcome.ok


@pytest.mark.parametrize("bad", [b"", b"\x01" * 64, b"\x01" * 66, b"\x00" * 65])
def test_malformed_signature(key_type, keystore, bad):
    kp = keystore.generate(key_type)
    outcome = verify(_result(key_type, bad, b"payload", kp.public))
    assert outcome.error is DKGError.INVALID_SIGNATURE


def test_schnorr_malformed_key(keystore):
    kp = keystore.generate(KeyType.SCHNORR)
    sig = keystore.sign(kp, b"payload")
    for key in (b"", kp.public[1:], b"\x04" + kp.public[1:], b"\x00" * 33):
        outcome = verify(_result(KeyType.SCHNORR, sig, b"payload", key))
        assert outcome.error is DKGError.INVALID_SIGNATURE


def test_schnorr_response_out_of_range(keystore):
    from dkgverify.curve import ORDER

    kp = keystore.generate(KeyType.SCHNORR)
    sig = keystore.sign(kp, b"payload")
    bad = sig[:33] + ORDER.to_bytes(32, "big")
    outcome = verify(_result(KeyType.SCHNORR, bad, b"payload", kp.public))
    assert outcome.error is DKGError.INVALID_SIGNATURE


def test_ecdsa_uncompressed_signing_key_mismatches(keystore):
    kp = keystore.generate(KeyType.ECDSA)
    sig = keystore.sign(kp, b"payload")
    uncompressed = coincurve.PublicKey(kp.public).format(compressed=False)

    outcome = verify(_result(KeyType.ECDSA, sig, b"payload", uncompressed))
    assert outcome.error is DKGError.SIGNING_KEY_MISMATCH


def test_empty_data(key_type, keystore):
    kp = keystore.generate(key_type)
    outcome = verify_signing(_result(key_type, keystore.sign(kp, b""), b"", kp.public))
    assert outcome.ok


def test_repeatable(key_type, keystore):
    kp = keystore.generate(key_type)
    result = _result(key_type, keystore.sign(kp, b"x"), b"y", kp.public)
    assert verify(result) == verify(result)
    assert not verify(result).ok


def test_raise_for_error(keystore):
    kp = keystore.generate(KeyType.ECDSA)
    result = _result(KeyType.ECDSA, keystore.sign(kp, b"x"), b"y", kp.public)

    with pytest.raises(VerificationError) as excinfo:
        verify(result).raise_for_error()
    assert excinfo.value.kind is DKGError.SIGNING_KEY_MISMATCH

    with pytest.raises(VerificationError):
        check_signing(result)
