# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Configuration management for credhash.

This module handles hashing parameters and logging options loaded from
environment variables.
"""
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from credhash.auth.record import MAX_ITERATIONS

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables.
    
    Assumptions:
    - Environment variables (CREDHASH_*) override defaults
    - Parameters only apply to newly created hashes; every stored record
      carries its own iteration count
    - Raising iterations over time is expected and safe
    """
    
    # Key derivation
    iterations: int = Field(default=1000, gt=0, le=MAX_ITERATIONS)
    salt_length: int = Field(default=24, gt=0)
    hash_length: int = Field(default=24, gt=0)
    
    # Logging
    log_level: LogLevel = "INFO"
    log_json: bool = True
    
    model_config = SettingsConfigDict(
        env_prefix="CREDHASH_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )
    
    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        """Accept level names in any case."""
        if isinstance(value, str):
            return value.strip().upper()
        return value


settings = Settings()
