"""
Application configuration and environment settings.
"""
from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List, Union


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "CreatorFlow"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./creatorflow.db"
    DB_ECHO: bool = False
    SEED_DEMO_DATA: bool = True  # Seed the demo roster, transactions and deliveries on first init

    # JWT
    SECRET_KEY: str = "your-secret-key-change-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7

    # CORS
    CORS_ORIGINS: Union[List[str], str] = ["http://localhost:3000", "http://localhost:5173"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS_ORIGINS from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    # Expense categories
    DEFAULT_CATEGORIES: List[str] = ["Other", "Production", "Commission", "Ad Spend", "Gift", "Software"]
    PROTECTED_CATEGORY: str = "Other"  # Never removable, default for new line items

    # Invoices
    CURRENCY_SYMBOL: str = "$"
    INVOICE_DUE_DAYS: int = 30
    INVOICE_LOGO_URL: str = "https://cdn-icons-png.flaticon.com/512/1177/1177568.png"
    INVOICE_PAYMENT_TERMS: str = (
        "Please pay within 30 days. Payment can be made via wire transfer to Account #123456789."
    )

    # Deliveries
    ENFORCE_DELIVERY_TRANSITIONS: bool = False  # Forward-only Pending -> Sent -> Delivered when enabled

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
