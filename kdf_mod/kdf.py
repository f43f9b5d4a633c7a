from __future__ import annotations
import logging
from dataclasses import dataclass

from .exceptions import InvalidArgument, InvalidSalt
from .hashing import assert_valid_algorithm, hash_length, new_hmac


logger = logging.getLogger(__name__)

MIN_SALT_LENGTH = 8   # octets, 64 bits as recommended by RFC 2898
MAX_BLOCK_COUNT = 2**32 - 1  # block index is encoded as a 32-bit integer


@dataclass(frozen=True)
class KDFParams:
    # Production use wants well above 1000 iterations; 10^4 - 10^6 is common.
    iterations: int = 310_000
    key_len: int = 32  # 32 bytes = 256-bit key
    algorithm: str = "sha256"


def binary_length(value: bytes) -> int:
    """Length in octets. Text is rejected since its length counts characters."""
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise InvalidArgument("The given value is not a bytes object.")
    return memoryview(value).nbytes


def assert_valid_salt(salt: bytes) -> None:
    if not isinstance(salt, (bytes, bytearray)):
        raise InvalidSalt("The given salt is not a bytes object.")
    if binary_length(salt) < MIN_SALT_LENGTH:
        raise InvalidSalt(
            f"The given salt is not at least {MIN_SALT_LENGTH} octets "
            f"({MIN_SALT_LENGTH * 8} bits) long."
        )


def pbkdf2_hmac(
    password: bytes,
    salt: bytes,
    iteration_count: int,
    key_length: int,
    algorithm: str = "sha256",
) -> bytes:
    """
    RFC 2898 block construction with HMAC as the PRF, without the salt policy.

    Needed to reproduce published vectors that use salts shorter than
    MIN_SALT_LENGTH; everything else should go through pbkdf2().
    """
    h_len = hash_length(algorithm)
    block_count = -(-key_length // h_len) if key_length > 0 else 0
    if block_count > MAX_BLOCK_COUNT:
        raise InvalidArgument("derived key too long")

    logger.debug(
        "PBKDF2-HMAC-%s: iterations=%d key_length=%d blocks=%d",
        algorithm, iteration_count, key_length, block_count,
    )

    prf = new_hmac(algorithm, password)
    salt = bytes(salt)
    derived = bytearray()

    for block_number in range(1, block_count + 1):
        mac = prf.copy()
        mac.update(salt + block_number.to_bytes(4, "big"))
        u = mac.finalize()

        # XOR of U_1..U_c, accumulated as an int.
        t = int.from_bytes(u, "big")
        for _ in range(2, iteration_count + 1):
            mac = prf.copy()
            mac.update(u)
            u = mac.finalize()
            t ^= int.from_bytes(u, "big")

        derived += t.to_bytes(h_len, "big")

    return bytes(derived[:key_length])


def pbkdf2(
    password: bytes,
    salt: bytes,
    iteration_count: int,
    key_length: int,
    algorithm: str = "sha256",
) -> bytes:
    """
    Password based key derivation function PBKDF2 (RFC 2898).

    `salt` must hold at least 8 octets of random data, even if it is
    namespaced. An `iteration_count` of 0 or 1 yields a single HMAC per
    block. Returns exactly `key_length` octets.

    Raises InvalidAlgorithm or InvalidSalt for bad input.
    """
    # Algorithm before salt: a bad name is reported even when the salt is bad too.
    assert_valid_algorithm(algorithm)
    assert_valid_salt(salt)
    return pbkdf2_hmac(password, salt, iteration_count, key_length, algorithm)


def derive_key(password: str, salt: bytes, params: KDFParams = KDFParams()) -> bytes:
    if not isinstance(password, str) or len(password) == 0:
        raise ValueError("Password must be a non-empty string.")

    return pbkdf2(
        password.encode("utf-8"),
        salt,
        iteration_count=params.iterations,
        key_length=params.key_len,
        algorithm=params.algorithm,
    )
