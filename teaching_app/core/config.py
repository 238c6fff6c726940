# teaching_app/core/config.py

"""Application configuration from environment variables"""

from pydantic_settings import BaseSettings
from typing import List
from urllib.parse import quote_plus

class Settings(BaseSettings):
    """Application settings from environment variables"""

    # Database
    MONGO_URI: str = ''
    DB_USER: str = ''
    DB_PASS: str = ''
    DB_CLUSTER: str = 'cluster0.et32bhj.mongodb.net'
    DATABASE_NAME: str = 'teachingDB'

    # API
    API_TITLE: str = 'Teaching Server'
    API_VERSION: str = '1.0.0'
    HOST: str = '0.0.0.0'
    PORT: int = 5000

    # Security - signing secret for bearer tokens
    ACCESS_TOKEN: str = 'change-me-in-production'
    ALGORITHM: str = 'HS256'
    ACCESS_TOKEN_EXPIRE_HOURS: int = 1

    # CORS
    CORS_ORIGINS: List[str] = ['*']

    # Stripe
    PAYMENT_METHOD_SECRET: str = ''
    STRIPE_API_URL: str = 'https://api.stripe.com/v1'
    PAYMENT_CURRENCY: str = 'usd'
    PAYMENT_TIMEOUT_SECONDS: float = 10.0

    # Logging
    LOG_LEVEL: str = 'INFO'

    class Config:
        env_file = '.env'
        case_sensitive = True

    @property
    def mongo_uri(self) -> str:
        """Explicit MONGO_URI wins, then Atlas credentials, then a local server"""
        if self.MONGO_URI:
            return self.MONGO_URI
        if self.DB_USER and self.DB_PASS:
            return (
                f"mongodb+srv://{quote_plus(self.DB_USER)}:{quote_plus(self.DB_PASS)}@{self.DB_CLUSTER}"
                "/?retryWrites=true&w=majority"
            )
        return 'mongodb://localhost:27017'

settings = Settings()
