from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from newsletter.domain.subscriber_email import SubscriberEmail


class Settings(BaseSettings):
    database_url: str = Field(alias="DATABASE_URL")

    # Application server
    app_host: str = Field(default="127.0.0.1", alias="APP_HOST")
    app_port: int = Field(default=8000, alias="APP_PORT")

    # Email provider
    email_base_url: str = Field(alias="EMAIL_BASE_URL")
    email_sender: str = Field(alias="EMAIL_SENDER")
    email_authorization_token: SecretStr = Field(alias="EMAIL_AUTHORIZATION_TOKEN")
    email_timeout_milliseconds: int = Field(
        default=10_000, gt=0, alias="EMAIL_TIMEOUT_MILLISECONDS"
    )

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=True, alias="LOG_JSON")

    @field_validator("database_url", mode="after")
    @classmethod
    def normalize_database_url(cls, v: str) -> str:
        """Use the psycopg3 driver for plain postgresql:// URLs."""
        if v.startswith("postgresql://") and "+psycopg" not in v:
            return v.replace("postgresql://", "postgresql+psycopg://", 1)
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.upper()

    def sender(self) -> SubscriberEmail:
        """Parse the configured sender address."""
        return SubscriberEmail.parse(self.email_sender)

    def email_timeout(self) -> float:
        """Send timeout in seconds."""
        return self.email_timeout_milliseconds / 1000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
