from .exceptions import InvalidAlgorithm, InvalidArgument, InvalidSalt
from .hashing import (
    assert_valid_algorithm,
    digest,
    hash_length,
    hmac_digest,
    supported_algorithms,
)
from .kdf import (
    MIN_SALT_LENGTH,
    KDFParams,
    assert_valid_salt,
    binary_length,
    derive_key,
    pbkdf2,
    pbkdf2_hmac,
)

__all__ = [
    "InvalidAlgorithm",
    "InvalidArgument",
    "InvalidSalt",
    "KDFParams",
    "MIN_SALT_LENGTH",
    "assert_valid_algorithm",
    "assert_valid_salt",
    "binary_length",
    "derive_key",
    "digest",
    "hash_length",
    "hmac_digest",
    "pbkdf2",
    "pbkdf2_hmac",
    "supported_algorithms",
]
