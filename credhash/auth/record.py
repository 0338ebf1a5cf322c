# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Encoded hash record handling.

A record serializes to ``<iterations>:<salt-hex>:<derived-key-hex>``.

Assumptions:
- Records are immutable once created
- Hex is encoded per byte, so leading zero bytes are never dropped
- Parsing is strict: anything but three well-formed fields is rejected
"""
import re
from dataclasses import dataclass

from credhash.auth.errors import MalformedRecordError

SEPARATOR = ":"

# Largest count PBKDF2 accepts (signed 32-bit)
MAX_ITERATIONS = 2**31 - 1

_DECIMAL = re.compile(r"[0-9]+")
_HEX = re.compile(r"[0-9a-fA-F]+")


@dataclass(frozen=True)
class HashRecord:
    """Iteration count, salt and derived key of one stored hash."""

    iterations: int
    salt: bytes
    derived_key: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.iterations, int) or isinstance(self.iterations, bool):
            raise TypeError("iterations must be an int")
        if not 0 < self.iterations <= MAX_ITERATIONS:
            raise ValueError(f"iterations must be between 1 and {MAX_ITERATIONS}")
        if not self.salt or not self.derived_key:
            raise ValueError("salt and derived_key must be non-empty")

    def __repr__(self) -> str:
        return (
            f"HashRecord(iterations={self.iterations}, "
            f"salt_length={len(self.salt)}, key_length={len(self.derived_key)})"
        )

    def __str__(self) -> str:
        return self.encode()

    def encode(self) -> str:
        """Serialize to the colon separated wire form.

        Returns:
            str: ``<iterations>:<salt-hex>:<derived-key-hex>``, lowercase hex

        Assumptions:
        - Each hex field is exactly twice the byte length
        """
        return SEPARATOR.join(
            (str(self.iterations), self.salt.hex(), self.derived_key.hex())
        )

    @classmethod
    def parse(cls, encoded: str) -> "HashRecord":
        """Parse an encoded record.

        Args:
            encoded: String produced by ``encode``

        Returns:
            HashRecord: Decoded record

        Raises:
            MalformedRecordError: If the string is not a valid record

        Assumptions:
        - Upper-case hex digits are tolerated
        - Iterations must be plain ASCII digits and positive
        """
        if not isinstance(encoded, str):
            raise MalformedRecordError(
                f"encoded record must be a string, got {type(encoded).__name__}"
            )

        fields = encoded.split(SEPARATOR)
        if len(fields) != 3:
            raise MalformedRecordError(
                f"expected 3 fields separated by '{SEPARATOR}', got {len(fields)}"
            )

        iterations_field, salt_field, key_field = fields

        if not _DECIMAL.fullmatch(iterations_field):
            raise MalformedRecordError("iteration count is not a decimal integer")
        iterations = int(iterations_field)
        if iterations <= 0:
            raise MalformedRecordError("iteration count must be positive")
        if iterations > MAX_ITERATIONS:
            raise MalformedRecordError("iteration count out of range")

        salt = _decode_hex(salt_field, "salt")
        derived_key = _decode_hex(key_field, "derived key")

        return cls(iterations=iterations, salt=salt, derived_key=derived_key)


def _decode_hex(field: str, name: str) -> bytes:
    if not field:
        raise MalformedRecordError(f"{name} field is empty")
    if len(field) % 2:
        raise MalformedRecordError(f"{name} field has odd length")
    if not _HEX.fullmatch(field):
        raise MalformedRecordError(f"{name} field is not hexadecimal")
    return bytes.fromhex(field)
