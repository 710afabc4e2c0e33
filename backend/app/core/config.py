from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./properties.db"

    # CORS
    FRONTEND_URL: str = "http://localhost:3000"

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Rate limiting (slowapi limit string)
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_DEFAULT: str = "120/minute"

    # Pagination, shared by request validation and the property service
    PAGINATION_SKIP_DEFAULT: int = 0
    PAGINATION_SKIP_MIN: int = 0
    PAGINATION_TAKE_DEFAULT: int = 10
    PAGINATION_TAKE_MIN: int = 1
    PAGINATION_TAKE_MAX: int = 100

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore any extra env vars not defined here


settings = Settings()
