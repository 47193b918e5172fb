"""
Configuration module for the application.
All configuration values are read from environment variables,
typically loaded from a .env file by python-dotenv.
"""
import os
import secrets
import warnings


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name, "")
    return raw.strip().lower() == "true" if raw else default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    return int(raw) if raw else default


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self):
        """Initialize configuration from environment variables."""
        # Flask Configuration
        self.SECRET_KEY: str = os.getenv("SECRET_KEY", "")
        self.FLASK_ENV: str = os.getenv("FLASK_ENV", "")

        # Generate a development SECRET_KEY if not set and in development mode
        if not self.SECRET_KEY and self.FLASK_ENV != "production":
            self.SECRET_KEY = secrets.token_urlsafe(32)
            warnings.warn(
                "SECRET_KEY not set. Generated a temporary key for development. "
                "Set SECRET_KEY in your .env file for production!",
                UserWarning
            )

        # Database Configuration
        # DATABASE_URL wins over the individual MySQL settings when present
        self.DATABASE_URL: str = os.getenv("DATABASE_URL", "")
        self.DB_USER: str = os.getenv("DB_USER", "")
        self.DB_PASSWORD: str = os.getenv("DB_PASSWORD", "")
        self.DB_HOST: str = os.getenv("DB_HOST", "")
        self.DB_PORT: str = os.getenv("DB_PORT", "")
        self.DB_NAME: str = os.getenv("DB_NAME", "")

        # SQLAlchemy Configuration
        self.SQLALCHEMY_TRACK_MODIFICATIONS: bool = False
        self.SQLALCHEMY_ECHO: bool = _env_bool("SQLALCHEMY_ECHO")

        # Cross-origin requests
        self.CORS_ALLOWED_ORIGINS: str = os.getenv("CORS_ALLOWED_ORIGINS", "*")

        # Student accounts
        self.MIN_PASSWORD_LENGTH: int = _env_int("MIN_PASSWORD_LENGTH", 6)
        self.PASSWORD_HASH_ROUNDS: int = _env_int("PASSWORD_HASH_ROUNDS", 12)

        # Startup behaviour
        self.SEED_SAMPLE_DATA: bool = _env_bool("SEED_SAMPLE_DATA")
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

        # Session Configuration
        self.SESSION_COOKIE_SECURE: bool = _env_bool("SESSION_COOKIE_SECURE")
        self.SESSION_COOKIE_HTTPONLY: bool = _env_bool("SESSION_COOKIE_HTTPONLY", True)
        self.SESSION_COOKIE_SAMESITE: str = os.getenv("SESSION_COOKIE_SAMESITE", "Lax")

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """Construct database URI from environment variables."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    @property
    def uses_mysql(self) -> bool:
        return self.SQLALCHEMY_DATABASE_URI.startswith("mysql")

    def validate(self) -> None:
        """
        Validate required configuration values.
        Only enforces SECRET_KEY in production environment.
        """
        if not self.SECRET_KEY:
            if self.FLASK_ENV == "production":
                raise ValueError(
                    "SECRET_KEY environment variable is required in production. "
                    "Set it in your .env file or environment variables."
                )
        if self.MIN_PASSWORD_LENGTH < 1:
            raise ValueError("MIN_PASSWORD_LENGTH must be a positive number")
        if not 4 <= self.PASSWORD_HASH_ROUNDS <= 31:
            raise ValueError("PASSWORD_HASH_ROUNDS must be between 4 and 31")


# Global config instance - will be re-initialized after load_dotenv()
config = Config()
