# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Exceptions raised by credential hashing and verification.

Assumptions:
- A malformed record is never reported as a wrong password
- Algorithm failures are fatal and not worth retrying
"""


class CredentialHashError(Exception):
    """Base class for credhash errors."""
    pass


class AlgorithmUnavailableError(CredentialHashError):
    """Raised when the key derivation primitive or random source is unusable."""
    pass


class MalformedRecordError(CredentialHashError, ValueError):
    """Raised when an encoded hash record does not follow the expected format."""
    pass
