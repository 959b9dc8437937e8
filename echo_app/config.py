"""
Configuration Management
Environment-based configuration for the echo service identity and listener
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_NAME = "unknown"


class EchoSettings(BaseSettings):
    """Echo Service Configuration"""

    # Identity reported on every request, read from APP
    name: str = Field(default=DEFAULT_NAME, validation_alias="APP")

    # Listener
    host: str = "0.0.0.0"
    port: int = 5000

    model_config = SettingsConfigDict(
        env_prefix="ECHO_",
        case_sensitive=False,
        populate_by_name=True
    )

    @field_validator("name", mode="before")
    @classmethod
    def default_blank_name(cls, v):
        if v is None or not str(v).strip():
            return DEFAULT_NAME
        return str(v).strip()

    @field_validator("port")
    @classmethod
    def validate_port(cls, v):
        if not 1 <= v <= 65535:
            raise ValueError("Port must be between 1 and 65535")
        return v

    @property
    def greeting(self) -> str:
        return f"This is the {self.name} application"


def get_echo_settings() -> EchoSettings:
    """Read echo configuration from the environment"""
    return EchoSettings()
