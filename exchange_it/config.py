"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

import hashlib

from pydantic import field_validator
from pydantic_settings import BaseSettings


class ExchangeItConfig(BaseSettings):
    """Exchange It configuration"""
    
    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    
    # Identifier derivation; read once per run, see exchange_it.uid
    uid_hash_algorithm: str = "sha256"
    
    @field_validator("uid_hash_algorithm")
    @classmethod
    def check_uid_hash_algorithm(cls, value: str) -> str:
        """Only fixed-length hashlib algorithms can produce a uid"""
        value = value.strip().lower()
        if value not in hashlib.algorithms_available:
            raise ValueError(f"Unknown hash algorithm: {value}")
        if hashlib.new(value).digest_size == 0:
            raise ValueError(f"Variable-length hash algorithm not supported: {value}")
        return value
    
    class Config:
        env_prefix = "EXCHANGE_IT_"
        env_file = ".env"
        case_sensitive = False


# Global configuration instance
config = ExchangeItConfig()


def get_config() -> ExchangeItConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> ExchangeItConfig:
    """Reload configuration from environment"""
    global config
    config = ExchangeItConfig()
    return config
