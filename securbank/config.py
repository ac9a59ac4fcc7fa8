"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class SecurBankConfig(BaseSettings):
    """SecurBank services configuration"""
    
    # API configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8090
    api_workers: int = 1
    
    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    log_file: Optional[str] = None  # If None, logs to stdout
    
    # Forms output service (external PDF renderer)
    forms_output_url: str = ""  # Empty = not configured, PDF requests fail with 500
    forms_output_timeout: float = 30.0
    forms_output_api_key: str = ""
    
    # Document generation
    forms_template_root: str = "/content/dam/securbank/forms"
    pdf_default_filename: str = "generated-document.pdf"
    pdf_max_transactions: int = 50  # Rows the transaction history template can hold
    issuing_authority: str = "SecurBank Financial Services"
    statement_currency: str = "USD"
    
    class Config:
        env_prefix = "SECURBANK_"
        env_file = ".env"
        case_sensitive = False


# Global configuration instance
config = SecurBankConfig()


def get_config() -> SecurBankConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> SecurBankConfig:
    """Reload configuration from environment"""
    global config
    config = SecurBankConfig()
    return config
