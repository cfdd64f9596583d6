"""
Configuration module for loading environment variables.
All configuration values have defaults suitable for local use.
"""
import os


class Config:
    """Application configuration loaded from environment variables."""

    # Pricing Configuration
    DEFAULT_REGION: str = os.getenv("DEFAULT_REGION", "eu-central-1")
    CURRENCY: str = os.getenv("CURRENCY", "EUR")
    CURRENCY_SYMBOL: str = os.getenv("CURRENCY_SYMBOL", "€")

    # Logging Configuration
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Request Limits
    MAX_REQUEST_BODY_SIZE: int = int(os.getenv("MAX_REQUEST_BODY_SIZE", "65536"))  # 64 KB

    @classmethod
    def validate(cls) -> None:
        """
        Validates that configuration values are usable.

        Raises:
            ValueError: If any configuration value is missing or invalid.
        """
        # Imported here so config stays importable without the pricing package
        from costcalc.pricing.region_map import get_all_regions

        if cls.DEFAULT_REGION not in get_all_regions():
            raise ValueError(
                f"DEFAULT_REGION must be one of {get_all_regions()} (got: {cls.DEFAULT_REGION})"
            )
        if not cls.CURRENCY:
            raise ValueError("CURRENCY is required")
        if cls.MAX_REQUEST_BODY_SIZE <= 0:
            raise ValueError("MAX_REQUEST_BODY_SIZE must be positive")


config = Config()
