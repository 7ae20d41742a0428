from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Store credentials
    BIGCOMMERCE_STORE_HASH: str = ""
    BIGCOMMERCE_ACCESS_TOKEN: str = ""
    BIGCOMMERCE_CLIENT_ID: Optional[str] = None

    # API connection
    BIGCOMMERCE_API_BASE_URL: str = "https://api.bigcommerce.com/stores/{store_hash}/v2/"
    BIGCOMMERCE_TIMEOUT: float = 30.0

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
