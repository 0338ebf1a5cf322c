# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
credhash - salted, iterated PBKDF2 credential hashing.

Encoded records look like ``<iterations>:<salt-hex>:<derived-key-hex>`` and
carry their own iteration count, so raising the configured cost never
invalidates hashes that are already stored.
"""
from credhash.auth.errors import (
    AlgorithmUnavailableError,
    CredentialHashError,
    MalformedRecordError,
)
from credhash.auth.password import create_hash, needs_rehash, verify_password
from credhash.auth.record import HashRecord

__version__ = "1.0.0"

__all__ = [
    "AlgorithmUnavailableError",
    "CredentialHashError",
    "HashRecord",
    "MalformedRecordError",
    "create_hash",
    "needs_rehash",
    "verify_password",
]
