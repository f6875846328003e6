"""
Configuration management for the blogql backend
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = "postgresql://postgres@127.0.0.1:5432/blog"
    database_pool_size: int = 10
    database_max_overflow: int = 20
    sql_echo: bool = False

    # Auth
    jwt_secret: str = "change-me"
    jwt_algorithm: str = "HS256"
    token_expires_in: int = 3600  # seconds
    bcrypt_rounds: int = 10

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 5000
    api_reload: bool = False
    cors_origins: list[str] = ["*"]
    graphiql: bool = True

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "BLOGQL_"
        case_sensitive = False


# Global settings instance
settings = Settings()
