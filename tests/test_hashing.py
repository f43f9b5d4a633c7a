import hashlib

import pytest
from cryptography.hazmat.primitives import hashes

from kdf_mod import (
    InvalidAlgorithm,
    InvalidArgument,
    assert_valid_algorithm,
    digest,
    hash_length,
    hmac_digest,
    supported_algorithms,
)


def test_supported_algorithms_are_sorted_and_include_common_names() -> None:
    names = supported_algorithms()
    assert names == sorted(names)
    for name in ("sha1", "sha256", "sha512", "sha3-256"):
        assert name in names


@pytest.mark.parametrize("name", supported_algorithms())
def test_hash_length_matches_empty_digest(name: str) -> None:
    assert hash_length(name) == len(digest(name, b""))


@pytest.mark.parametrize(
    "name, expected",
    [("md5", 16), ("sha1", 20), ("sha224", 28), ("sha256", 32), ("sha384", 48),
     ("sha512", 64), ("sha512-224", 28), ("sha3-512", 64)],
)
def test_hash_length_known_sizes(name: str, expected: int) -> None:
    assert hash_length(name) == expected


@pytest.mark.parametrize("name", ["sha257", "SHA256", "", "shake128", "whirlpool"])
def test_unknown_algorithm_rejected(name: str) -> None:
    with pytest.raises(InvalidAlgorithm, match="is not a supported hashing algorithm"):
        assert_valid_algorithm(name)
    with pytest.raises(InvalidAlgorithm):
        hash_length(name)


@pytest.mark.parametrize("name", [None, 256, b"sha256", hashes.SHA256()])
def test_non_string_algorithm_rejected(name: object) -> None:
    with pytest.raises(InvalidAlgorithm, match="algorithm is not a string"):
        assert_valid_algorithm(name)


def test_invalid_algorithm_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        hash_length("nope")
    assert issubclass(InvalidAlgorithm, InvalidArgument)


def test_digest_matches_hashlib() -> None:
    assert digest("sha256", b"abc") == hashlib.sha256(b"abc").digest()


def test_hmac_digest_rfc4231_case_2() -> None:
    mac = hmac_digest("sha256", b"what do ya want for nothing?", b"Jefe")
    assert mac.hex() == (
        "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"
    )


def test_provider_functions_reject_unknown_algorithm() -> None:
    with pytest.raises(InvalidAlgorithm, match='"nope" is not a supported hashing algorithm'):
        digest("nope", b"")
    with pytest.raises(InvalidAlgorithm, match='"nope" is not a supported hashing algorithm'):
        hmac_digest("nope", b"", b"k")
    with pytest.raises(InvalidAlgorithm, match="algorithm is not a string"):
        digest(None, b"")
