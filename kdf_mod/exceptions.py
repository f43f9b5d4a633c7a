from __future__ import annotations


class InvalidArgument(ValueError):
    """Bad caller input, detected before any hashing is done."""


class InvalidAlgorithm(InvalidArgument):
    pass


class InvalidSalt(InvalidArgument):
    pass
