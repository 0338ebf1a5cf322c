# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Pytest configuration and shared fixtures.

Assumptions:
- Tests use low iteration counts unless they check the defaults
- Settings changes are undone after each test
"""
import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast isolated unit tests")
    config.addinivalue_line("markers", "hypothesis: property-based tests")


@pytest.fixture
def hash_settings(monkeypatch):
    """Settings object with a cheap iteration count.
    
    Returns:
        Settings: Shared settings instance, restored after the test
        
    Assumptions:
    - Salt and key lengths stay at their 24-byte defaults
    """
    from credhash.config import settings
    
    monkeypatch.setattr(settings, "iterations", 10)
    return settings


@pytest.fixture
def stored_hash(hash_settings):
    """Encoded record for the secret 'hunter2'."""
    from credhash.auth.password import create_hash
    
    return create_hash("hunter2")


@pytest.fixture
def rfc6070_record():
    """Record for RFC 6070 vector: P='password', S='salt', c=2, dkLen=20."""
    return "2:73616c74:ea6c014dc72d6f8ccd1ed92ace1d41f0d8de8957"
