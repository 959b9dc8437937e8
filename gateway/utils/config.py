"""
Configuration Management
Environment-based configuration for the gateway listener and route table
"""

from typing import Dict, Optional
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
import structlog

from gateway.utils.route_table import DEFAULT_ROUTES, RouteTable

logger = structlog.get_logger(__name__)


class GatewaySettings(BaseSettings):
    """Gateway Configuration"""

    # Service info
    service_name: str = "vhost-gateway"
    service_version: str = "1.0.0"

    # Listener
    host: str = "0.0.0.0"
    port: int = 8080
    keep_alive_timeout: int = 5

    # Host routing, GATEWAY_ROUTES='{"mango.com": "site-mango"}'
    routes: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_ROUTES))

    class Config:
        env_prefix = "GATEWAY_"
        case_sensitive = False

    @field_validator('port')
    @classmethod
    def validate_port(cls, v):
        if not 1 <= v <= 65535:
            raise ValueError('Port must be between 1 and 65535')
        return v

    @field_validator('keep_alive_timeout')
    @classmethod
    def validate_keep_alive_timeout(cls, v):
        if v < 1:
            raise ValueError('Keep-alive timeout must be at least 1 second')
        return v

    def build_route_table(self) -> RouteTable:
        return RouteTable(self.routes)

    def log_config(self):
        """Log configuration"""
        logger.info(
            "Gateway configuration",
            service=self.service_name,
            listen=f"{self.host}:{self.port}",
            keep_alive_timeout=self.keep_alive_timeout,
            hosts=sorted(self.routes),
        )


_gateway_settings: Optional[GatewaySettings] = None


def get_gateway_settings() -> GatewaySettings:
    """Get gateway configuration instance"""
    global _gateway_settings
    if _gateway_settings is None:
        _gateway_settings = GatewaySettings()
    return _gateway_settings


def reset_gateway_settings() -> None:
    """Drop the cached settings so the environment is read again"""
    global _gateway_settings
    _gateway_settings = None
