# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Unit tests for the encoded hash record format.

Assumptions:
- Format is <iterations>:<salt-hex>:<derived-key-hex>
- Hex fields are lowercase and exactly twice the byte length
- Anything else is rejected with MalformedRecordError
"""
import pytest


@pytest.mark.unit
def test_encode_format():
    """Test encoding of a simple record.
    
    Assumptions:
    - Iterations are decimal
    - Hex is lowercase without prefix
    """
    from credhash.auth.record import HashRecord
    
    record = HashRecord(iterations=1000, salt=b"\xab\xcd", derived_key=b"\x01\xef")
    
    assert record.encode() == "1000:abcd:01ef"
    assert str(record) == "1000:abcd:01ef"


@pytest.mark.unit
def test_encode_preserves_leading_zero_bytes():
    """Test that leading zero bytes keep their hex digits.
    
    Assumptions:
    - 24-byte fields always encode to 48 characters
    """
    from credhash.auth.record import HashRecord
    
    salt = b"\x00\x00\x00" + bytes(range(1, 22))
    derived_key = bytes(24)
    record = HashRecord(iterations=1000, salt=salt, derived_key=derived_key)
    
    iterations, salt_hex, key_hex = record.encode().split(":")
    
    assert iterations == "1000"
    assert len(salt_hex) == 48
    assert salt_hex.startswith("000000")
    assert key_hex == "0" * 48


@pytest.mark.unit
def test_parse_encoded_record():
    """Test parsing restores every field."""
    from credhash.auth.record import HashRecord
    
    record = HashRecord.parse("1000:00ff10:0a0b")
    
    assert record.iterations == 1000
    assert record.salt == b"\x00\xff\x10"
    assert record.derived_key == b"\x0a\x0b"


@pytest.mark.unit
def test_parse_accepts_uppercase_hex():
    """Test that upper-case hex parses and re-encodes as lower case."""
    from credhash.auth.record import HashRecord
    
    record = HashRecord.parse("5:ABCD:EF01")
    
    assert record.encode() == "5:abcd:ef01"


@pytest.mark.unit
@pytest.mark.parametrize(
    "encoded",
    [
        "abc:zz:11",
        "",
        "1000",
        "1000:abcd",
        "1000:ab:cd:ef",
        "0:ab:cd",
        "-5:ab:cd",
        "+5:ab:cd",
        " 5:ab:cd",
        "1_000:ab:cd",
        "1000:abc:cd",
        "1000:ab:cde",
        "1000:zz:cd",
        "1000:ab:0x",
        "1000::cd",
        "1000:ab:",
        "2147483648:ab:cd",
        "99999999999999999999:abcd:abcd",
    ],
)
def test_parse_rejects_malformed(encoded):
    """Test that malformed records raise instead of parsing.
    
    Assumptions:
    - Wrong field count, bad iterations, odd or non-hex fields all fail
    """
    from credhash.auth.errors import MalformedRecordError
    from credhash.auth.record import HashRecord
    
    with pytest.raises(MalformedRecordError):
        HashRecord.parse(encoded)


@pytest.mark.unit
def test_parse_rejects_non_string():
    """Test that bytes or None are not accepted as records."""
    from credhash.auth.errors import MalformedRecordError
    from credhash.auth.record import HashRecord
    
    with pytest.raises(MalformedRecordError):
        HashRecord.parse(b"1000:ab:cd")
    with pytest.raises(MalformedRecordError):
        HashRecord.parse(None)


@pytest.mark.unit
def test_malformed_record_is_value_error():
    """Test that callers catching ValueError also catch malformed records."""
    from credhash.auth.errors import CredentialHashError, MalformedRecordError
    
    assert issubclass(MalformedRecordError, ValueError)
    assert issubclass(MalformedRecordError, CredentialHashError)


@pytest.mark.unit
def test_record_is_immutable():
    """Test that records cannot be modified after creation."""
    from dataclasses import FrozenInstanceError
    from credhash.auth.record import HashRecord
    
    record = HashRecord(iterations=1, salt=b"\x01", derived_key=b"\x02")
    
    with pytest.raises(FrozenInstanceError):
        record.iterations = 2


@pytest.mark.unit
def test_record_validates_fields():
    """Test constructor validation."""
    from credhash.auth.record import HashRecord
    
    with pytest.raises(ValueError):
        HashRecord(iterations=0, salt=b"\x01", derived_key=b"\x02")
    with pytest.raises(ValueError):
        HashRecord(iterations=1, salt=b"", derived_key=b"\x02")
    with pytest.raises(TypeError):
        HashRecord(iterations="1", salt=b"\x01", derived_key=b"\x02")


@pytest.mark.unit
def test_repr_hides_key_material():
    """Test that repr shows lengths only."""
    from credhash.auth.record import HashRecord
    
    record = HashRecord(iterations=7, salt=b"\xaa" * 4, derived_key=b"\xbb" * 4)
    
    text = repr(record)
    assert "aaaaaaaa" not in text
    assert "bbbbbbbb" not in text
    assert "iterations=7" in text


@pytest.mark.unit
def test_parse_accepts_largest_iteration_count():
    """Test the upper bound of the iteration field.
    
    Assumptions:
    - 2**31 - 1 is the largest count PBKDF2 accepts
    """
    from credhash.auth.record import MAX_ITERATIONS, HashRecord
    
    record = HashRecord.parse(f"{MAX_ITERATIONS}:ab:cd")
    
    assert record.iterations == 2147483647
    with pytest.raises(ValueError):
        HashRecord(iterations=MAX_ITERATIONS + 1, salt=b"\x01", derived_key=b"\x02")
