# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0
"""
credhash CLI - create and check PBKDF2 credential hashes

Usage:
    # Hash a secret (prompts when --secret is omitted)
    credhash hash
    credhash hash --iterations 20000

    # Verify a secret against a stored record
    credhash verify '1000:<salt-hex>:<key-hex>'

    # Report whether a stored record should be rehashed
    credhash check '1000:<salt-hex>:<key-hex>'

Exit codes:
    0 - success / valid / current
    1 - invalid secret / rehash due
    2 - malformed record or bad arguments
    3 - algorithm unavailable

Environment Variables:
    CREDHASH_ITERATIONS, CREDHASH_SALT_LENGTH, CREDHASH_HASH_LENGTH,
    CREDHASH_LOG_LEVEL, CREDHASH_LOG_JSON
"""

import argparse
import getpass
import sys
from typing import List, Optional

from credhash.auth.errors import AlgorithmUnavailableError, MalformedRecordError
from credhash.auth.password import create_hash, needs_rehash, parse_record, verify_password
from credhash.auth.record import MAX_ITERATIONS
from credhash.config import settings
from credhash.logging_config import configure_logging

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_MALFORMED = 2
EXIT_UNAVAILABLE = 3


def read_secret(secret: Optional[str], confirm: bool = False) -> str:
    """Return the given secret or prompt for it without echo."""
    if secret is not None:
        return secret
    value = getpass.getpass("Secret: ")
    if confirm and getpass.getpass("Confirm secret: ") != value:
        print("Error: Secrets do not match", file=sys.stderr)
        sys.exit(EXIT_MALFORMED)
    return value


def cmd_hash(args: argparse.Namespace) -> int:
    secret = read_secret(args.secret, confirm=True)
    print(create_hash(secret, iterations=args.iterations))
    return EXIT_OK


def cmd_verify(args: argparse.Namespace) -> int:
    secret = read_secret(args.secret)
    if verify_password(secret, args.record):
        print("valid")
        return EXIT_OK
    print("invalid")
    return EXIT_FAILED


def cmd_check(args: argparse.Namespace) -> int:
    record = parse_record(args.record)
    if needs_rehash(record):
        print(
            f"rehash: record uses {record.iterations} iterations, "
            f"{len(record.salt)}-byte salt, {len(record.derived_key)}-byte key "
            f"(configured: {settings.iterations}, {settings.salt_length}, "
            f"{settings.hash_length})"
        )
        return EXIT_FAILED
    print("current")
    return EXIT_OK


def positive_int(value: str) -> int:
    number = int(value)
    if not 0 < number <= MAX_ITERATIONS:
        raise argparse.ArgumentTypeError(f"must be between 1 and {MAX_ITERATIONS}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="credhash",
        description="Create and verify PBKDF2 credential hashes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Examples:
  credhash hash
  credhash hash --iterations 20000
  credhash verify '1000:<salt-hex>:<key-hex>'
  credhash check '1000:<salt-hex>:<key-hex>'
"""
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging with console output"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # === hash ===
    hash_parser = subparsers.add_parser("hash", help="Hash a secret")
    hash_parser.add_argument(
        "--secret", "-s",
        help="Secret to hash (will be prompted if not provided)"
    )
    hash_parser.add_argument(
        "--iterations", "-i",
        type=positive_int,
        help=f"Iteration count (default: {settings.iterations})"
    )
    hash_parser.set_defaults(func=cmd_hash)

    # === verify ===
    verify_parser = subparsers.add_parser("verify", help="Verify a secret against a record")
    verify_parser.add_argument("record", help="Encoded hash record")
    verify_parser.add_argument(
        "--secret", "-s",
        help="Secret to verify (will be prompted if not provided)"
    )
    verify_parser.set_defaults(func=cmd_verify)

    # === check ===
    check_parser = subparsers.add_parser(
        "check",
        help="Report whether a record needs rehashing",
        description="Compare a record's parameters with the configured ones."
    )
    check_parser.add_argument("record", help="Encoded hash record")
    check_parser.set_defaults(func=cmd_check)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        configure_logging(log_level="DEBUG", json_output=False)

    try:
        return args.func(args)
    except MalformedRecordError as e:
        print(f"Error: Malformed record: {e}", file=sys.stderr)
        return EXIT_MALFORMED
    except AlgorithmUnavailableError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_UNAVAILABLE


if __name__ == "__main__":
    sys.exit(main())
