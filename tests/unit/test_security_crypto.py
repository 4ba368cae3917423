from concurrent.futures import ThreadPoolExecutor
import os

import pytest

from vaultcrypt.core.exceptions import (
    InvalidCiphertext,
    InvalidKeyLength,
    InvalidParameters,
    RandomUnavailable,
)
from vaultcrypt.security import rng
from vaultcrypt.security.crypto import BLOCK_SIZE, decrypt, encrypt
from vaultcrypt.security.kdf import derive_key
from vaultcrypt.security.passwords import generate_salt


@pytest.fixture
def key():
    return os.urandom(32)


def test_encrypt_decrypt_roundtrip_derived_key():
    data = os.urandom(250_000)
    master = derive_key(b"correct horse battery staple", generate_salt())

    assert decrypt(master, encrypt(master, data)) == data


@pytest.mark.parametrize("key_size", [16, 24, 32])
@pytest.mark.parametrize("length", [0, 1, 15, 16, 17, 1000])
def test_roundtrip_key_sizes_and_lengths(key_size, length):
    k = os.urandom(key_size)
    data = os.urandom(length)
    assert decrypt(k, encrypt(k, data)) == data


def test_hello_world_zero_key():
    """32 zero bytes + 'hello world' -> 16 + 11 bytes, and back."""
    k = bytes(32)
    ct = encrypt(k, b"hello world")
    assert len(ct) == 27
    assert decrypt(k, ct) == b"hello world"


def test_output_length_has_no_padding(key):
    for n in (0, 5, 16, 33):
        assert len(encrypt(key, b"x" * n)) == BLOCK_SIZE + n


def test_empty_plaintext(key):
    ct = encrypt(key, b"")
    assert len(ct) == BLOCK_SIZE
    assert decrypt(key, ct) == b""


def test_encrypt_uses_fresh_iv(key):
    """Same key and plaintext must never produce the same ciphertext."""
    ct1 = encrypt(key, b"same message")
    ct2 = encrypt(key, b"same message")
    assert ct1 != ct2
    assert ct1[:BLOCK_SIZE] != ct2[:BLOCK_SIZE]


def test_ciphertext_layout_iv_prefix(key, monkeypatch):
    """The IV drawn from the random source travels as the first 16 bytes."""
    iv = bytes(range(16))
    monkeypatch.setattr(rng, "random_bytes", lambda n: iv[:n])
    ct = encrypt(key, b"payload")
    assert ct[:BLOCK_SIZE] == iv


def test_tamper_changes_plaintext_without_error(key):
    data = b"hello world" * 10
    ct = encrypt(key, data)

    for pos in (BLOCK_SIZE, BLOCK_SIZE + 17, len(ct) - 1):
        for bit in (0, 7):
            tampered = bytearray(ct)
            tampered[pos] ^= 1 << bit
            assert decrypt(key, bytes(tampered)) != data


def test_tamper_iv_changes_plaintext(key):
    data = b"first block of text..."
    ct = bytearray(encrypt(key, data))
    ct[0] ^= 0x01
    assert decrypt(key, bytes(ct)) != data


def test_wrong_key_garbles(key):
    ct = encrypt(key, b"secret data here")
    assert decrypt(os.urandom(32), ct) != b"secret data here"


def test_decrypt_too_short(key):
    with pytest.raises(InvalidCiphertext):
        decrypt(key, b"\x00" * (BLOCK_SIZE - 1))
    with pytest.raises(InvalidCiphertext):
        decrypt(key, b"")


@pytest.mark.parametrize("bad_key", [b"", b"\x00" * 15, b"\x00" * 31, b"\x00" * 33, b"\x00" * 64])
def test_invalid_key_length(bad_key):
    with pytest.raises(InvalidKeyLength):
        encrypt(bad_key, b"data")
    with pytest.raises(InvalidKeyLength):
        decrypt(bad_key, b"\x00" * 32)


def test_invalid_key_type():
    with pytest.raises(InvalidKeyLength):
        encrypt("0" * 32, b"data")


def test_encrypt_propagates_entropy_failure(key, monkeypatch):
    def no_entropy(n):
        raise OSError("no entropy")

    monkeypatch.setattr(os, "urandom", no_entropy)
    with pytest.raises(RandomUnavailable):
        encrypt(key, b"data")


def test_concurrent_roundtrips(key):
    """Calls share no state, so parallel use must not interfere."""
    messages = [os.urandom(i * 37) for i in range(64)]

    def roundtrip(msg):
        return decrypt(key, encrypt(key, msg))

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(roundtrip, messages))

    assert results == messages


@pytest.mark.parametrize("bad", [10, None, "hello", [1, 2, 3]])
def test_encrypt_rejects_non_bytes_plaintext(key, bad):
    """An int must not be encrypted as a run of zero bytes."""
    with pytest.raises(InvalidParameters, match="plaintext"):
        encrypt(key, bad)


@pytest.mark.parametrize("bad", [32, None, "x" * 32])
def test_decrypt_rejects_non_bytes_data(key, bad):
    with pytest.raises(InvalidParameters, match="ciphertext"):
        decrypt(key, bad)


def test_roundtrip_bytes_like_inputs(key):
    ct = encrypt(key, memoryview(b"view data"))
    assert decrypt(key, bytearray(ct)) == b"view data"
    assert decrypt(key, memoryview(ct)) == b"view data"
