import hashlib
import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from cryptoprims.sha256 import Sha256, Sha256CRH, Sha256TwoToOneCRH

TEST_LENGTHS = [0, 1, 2, 8, 20, 40, 55, 56, 57, 63, 64, 65, 90, 100, 127, 128, 129]


def _random_bytes(rng: random.Random, length: int) -> bytes:
    return bytes(rng.getrandbits(8) for _ in range(length))


def test_known_vector_empty():
    assert Sha256.digest(b"").hex() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_known_vector_abc():
    assert Sha256.digest(b"abc").hex() == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


@pytest.mark.parametrize("length", TEST_LENGTHS)
def test_varied_lengths(length):
    rng = random.Random(length)
    data = _random_bytes(rng, length)
    hasher = Sha256()
    hasher.update(data)
    assert hasher.finalize() == hashlib.sha256(data).digest()


def test_many_updates():
    rng = random.Random(7)
    hasher = Sha256()
    reference = hashlib.sha256()
    for _ in range(20):
        piece = _random_bytes(rng, 7)
        hasher.update(piece)
        reference.update(piece)
    assert hasher.finalize() == reference.digest()


def test_finalize_does_not_consume_state():
    hasher = Sha256(b"hello ")
    first = hasher.finalize()
    assert first == hashlib.sha256(b"hello ").digest()
    hasher.update(b"world")
    assert hasher.finalize() == hashlib.sha256(b"hello world").digest()


def test_copy_is_independent():
    hasher = Sha256(b"prefix")
    clone = hasher.copy()
    clone.update(b"-more")
    assert hasher.finalize() == hashlib.sha256(b"prefix").digest()
    assert clone.finalize() == hashlib.sha256(b"prefix-more").digest()


@pytest.mark.parametrize("length", TEST_LENGTHS)
def test_two_to_one_crh(length):
    rng = random.Random(2000 + length)
    left = _random_bytes(rng, length)
    right = _random_bytes(rng, length)
    crh = Sha256TwoToOneCRH()
    params = crh.setup(rng)
    assert crh.evaluate(params, left, right) == hashlib.sha256(left + right).digest()


def test_two_to_one_compress_hashes_outputs():
    crh = Sha256TwoToOneCRH()
    leaf = Sha256CRH()
    a = leaf.evaluate(None, b"left leaf")
    b = leaf.evaluate(None, b"right leaf")
    assert crh.compress(None, a, b) == hashlib.sha256(a + b).digest()


def test_digest_equality():
    rng = random.Random(99)
    first = _random_bytes(rng, 32)
    second = _random_bytes(rng, 32)
    assert Sha256.digest(first) != Sha256.digest(second)
    assert Sha256.digest(first) == Sha256.digest(first)


@settings(max_examples=50)
@given(st.binary(max_size=300), st.integers(min_value=1, max_value=80))
def test_chunked_updates_match_one_shot(data, chunk):
    hasher = Sha256()
    for start in range(0, len(data), chunk):
        hasher.update(data[start : start + chunk])
    assert hasher.finalize() == Sha256.digest(data) == hashlib.sha256(data).digest()