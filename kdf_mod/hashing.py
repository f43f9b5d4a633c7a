from __future__ import annotations

from cryptography.hazmat.primitives import hashes, hmac

from .exceptions import InvalidAlgorithm


# Fixed-size digests only: HMAC is undefined for XOFs (SHAKE) and BLAKE2
# needs an explicit digest size.
_ALGORITHMS: dict[str, type[hashes.HashAlgorithm]] = {
    cls.name: cls
    for cls in (
        hashes.MD5,
        hashes.SHA1,
        hashes.SHA224,
        hashes.SHA256,
        hashes.SHA384,
        hashes.SHA512,
        hashes.SHA512_224,
        hashes.SHA512_256,
        hashes.SHA3_224,
        hashes.SHA3_256,
        hashes.SHA3_384,
        hashes.SHA3_512,
    )
}


def supported_algorithms() -> list[str]:
    return sorted(_ALGORITHMS)


def assert_valid_algorithm(algorithm: object) -> None:
    """
    Check that the algorithm is supported by the hash provider.

    Must run before the name reaches `cryptography`, which would otherwise
    fail with a less specific error.
    """
    if not isinstance(algorithm, str):
        raise InvalidAlgorithm("algorithm is not a string")
    if algorithm not in _ALGORITHMS:
        raise InvalidAlgorithm(f'"{algorithm}" is not a supported hashing algorithm')


def hash_length(algorithm: str) -> int:
    """Digest length in octets, measured by hashing an empty message."""
    assert_valid_algorithm(algorithm)
    return len(digest(algorithm, b""))


def _hash_class(algorithm: str) -> type[hashes.HashAlgorithm]:
    assert_valid_algorithm(algorithm)
    return _ALGORITHMS[algorithm]


def digest(algorithm: str, message: bytes) -> bytes:
    h = hashes.Hash(_hash_class(algorithm)())
    h.update(bytes(message))
    return h.finalize()


def new_hmac(algorithm: str, key: bytes) -> hmac.HMAC:
    # Keyed context; callers copy() it to avoid re-keying per message.
    return hmac.HMAC(bytes(key), _hash_class(algorithm)())


def hmac_digest(algorithm: str, message: bytes, key: bytes) -> bytes:
    h = new_hmac(algorithm, key)
    h.update(bytes(message))
    return h.finalize()
