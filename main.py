from __future__ import annotations
import argparse
import logging
import sys
from getpass import getpass

from kdf_mod import InvalidArgument, KDFParams, hash_length, pbkdf2, supported_algorithms


def parse_salt(value: str) -> bytes:
    try:
        return bytes.fromhex(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"salt is not valid hex: {value!r}") from None


def read_password(from_stdin: bool) -> str:
    if from_stdin:
        return sys.stdin.readline().rstrip("\r\n")
    return getpass("Password: ")


def cmd_derive(args: argparse.Namespace) -> int:
    password = read_password(args.password_stdin)
    if not password:
        print("Error: empty password.", file=sys.stderr)
        return 2

    try:
        key = pbkdf2(
            password.encode("utf-8"),
            args.salt,
            iteration_count=args.iterations,
            key_length=args.length,
            algorithm=args.algorithm,
        )
    except InvalidArgument as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(key.hex())
    return 0


def cmd_algorithms(args: argparse.Namespace) -> int:
    for name in supported_algorithms():
        print(f"{name:<12} {hash_length(name)}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    defaults = KDFParams()
    parser = argparse.ArgumentParser(
        prog="pbkdf2",
        description="PBKDF2-HMAC key derivation (RFC 2898) over any supported hash algorithm.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    der = sub.add_parser("derive", help="Derive a key from a password and print it as hex")
    der.add_argument("--salt", required=True, type=parse_salt, help="Salt as hex (at least 8 octets)")
    der.add_argument("-i", "--iterations", type=int, default=defaults.iterations,
                     help=f"Iteration count (default: {defaults.iterations})")
    der.add_argument("-l", "--length", type=int, default=defaults.key_len,
                     help=f"Derived key length in octets (default: {defaults.key_len})")
    der.add_argument("-a", "--algorithm", default=defaults.algorithm,
                     help=f"Hash algorithm (default: {defaults.algorithm})")
    der.add_argument("--password-stdin", action="store_true",
                     help="Read the password from the first line of stdin")
    der.set_defaults(func=cmd_derive)

    alg = sub.add_parser("algorithms", help="List supported hash algorithms and their lengths")
    alg.set_defaults(func=cmd_algorithms)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "derive" and args.length < 0:
        print("Error: key length must not be negative.", file=sys.stderr)
        return 2

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
