# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Password hashing and verification using PBKDF2-HMAC-SHA1.

Assumptions:
- Each hash gets a fresh random salt from the system CSPRNG
- Hashes are encoded as ``<iterations>:<salt-hex>:<derived-key-hex>``
- Verification uses the iteration count stored in the record, so raising
  the configured count never breaks existing hashes
- Functions are stateless and safe to call from any thread
"""
import hashlib
import hmac
import secrets
from typing import Optional, Union

from credhash.auth.errors import AlgorithmUnavailableError, MalformedRecordError
from credhash.auth.record import MAX_ITERATIONS, HashRecord
from credhash.config import settings
from credhash.logging_utils import log_application_event, log_security_event

DIGEST = "sha1"


def create_hash(secret: str, *, iterations: Optional[int] = None) -> str:
    """Hash a secret for storage.

    Args:
        secret: Plain text secret (any string, including empty)
        iterations: Override for the configured iteration count

    Returns:
        str: Encoded hash record

    Raises:
        TypeError: If secret is not a string
        ValueError: If iterations is outside 1..MAX_ITERATIONS
        AlgorithmUnavailableError: If the KDF or random source is unusable

    Assumptions:
    - Each call generates a unique hash (random salt)
    - Salt and key lengths come from settings (24 bytes each by default)
    """
    if not isinstance(secret, str):
        raise TypeError("Secret must be a string")

    rounds = settings.iterations if iterations is None else iterations
    if not 0 < rounds <= MAX_ITERATIONS:
        raise ValueError(f"iterations must be between 1 and {MAX_ITERATIONS}")

    salt = _random_salt(settings.salt_length)
    derived_key = derive_key(secret, salt, rounds, settings.hash_length)

    log_application_event(
        "credential_hash_created",
        iterations=rounds,
        salt_length=len(salt),
        key_length=len(derived_key),
    )
    return HashRecord(iterations=rounds, salt=salt, derived_key=derived_key).encode()


def verify_password(secret: str, encoded: str) -> bool:
    """Verify a secret against an encoded hash record.

    Args:
        secret: Plain text secret to verify
        encoded: Record previously returned by create_hash

    Returns:
        bool: True if the secret matches, False otherwise

    Raises:
        TypeError: If secret is not a string
        MalformedRecordError: If encoded is not a valid record
        AlgorithmUnavailableError: If the KDF is unusable

    Assumptions:
    - A malformed record is an error, never a plain False
    - Uses constant-time comparison
    """
    if not isinstance(secret, str):
        raise TypeError("Secret must be a string")

    record = parse_record(encoded)
    candidate = derive_key(
        secret, record.salt, record.iterations, len(record.derived_key)
    )

    if hmac.compare_digest(candidate, record.derived_key):
        return True

    log_security_event(
        "credential_verification_failed",
        reason="mismatch",
        iterations=record.iterations,
    )
    return False


def needs_rehash(encoded: Union[str, HashRecord]) -> bool:
    """Check whether a record was made with weaker parameters than configured.

    Args:
        encoded: Encoded hash record, or one already parsed

    Returns:
        bool: True if iterations, salt length or key length is below settings

    Raises:
        MalformedRecordError: If encoded is not a valid record
    """
    record = encoded if isinstance(encoded, HashRecord) else parse_record(encoded)
    return (
        record.iterations < settings.iterations
        or len(record.salt) < settings.salt_length
        or len(record.derived_key) < settings.hash_length
    )


def derive_key(secret: str, salt: bytes, iterations: int, length: int) -> bytes:
    """Run PBKDF2-HMAC-SHA1 over the UTF-8 encoded secret.

    Args:
        secret: Plain text secret
        salt: Salt bytes
        iterations: Number of rounds
        length: Output length in bytes

    Returns:
        bytes: Derived key of exactly ``length`` bytes

    Raises:
        AlgorithmUnavailableError: If the digest is not supported here
    """
    try:
        return hashlib.pbkdf2_hmac(
            DIGEST, secret.encode("utf-8"), salt, iterations, dklen=length
        )
    except ValueError as e:
        # hashlib signals an unsupported digest (e.g. FIPS builds) this way
        log_security_event("credential_algorithm_unavailable", reason=str(e))
        raise AlgorithmUnavailableError(
            f"PBKDF2 with HMAC-{DIGEST.upper()} is unavailable: {e}"
        ) from e


def _random_salt(length: int) -> bytes:
    try:
        return secrets.token_bytes(length)
    except NotImplementedError as e:
        log_security_event("credential_algorithm_unavailable", reason=str(e))
        raise AlgorithmUnavailableError("secure random source is unavailable") from e


def parse_record(encoded: str) -> HashRecord:
    """Parse an encoded record, logging a security event when it is malformed."""
    try:
        return HashRecord.parse(encoded)
    except MalformedRecordError as e:
        log_security_event("credential_record_malformed", reason=str(e))
        raise
