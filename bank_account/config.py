"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class BankAccountConfig(BaseSettings):
    """Bank account configuration"""

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    log_file: Optional[str] = None  # If None, logs to stderr

    # Feature flags
    enable_domain_events: bool = True

    class Config:
        env_prefix = "BANK_ACCOUNT_"
        env_file = ".env"
        case_sensitive = False


# Global configuration instance
config = BankAccountConfig()


def get_config() -> BankAccountConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> BankAccountConfig:
    """Reload configuration from environment"""
    global config
    config = BankAccountConfig()
    return config
