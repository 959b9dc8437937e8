"""
Logging utilities for the vhost gateway services

Provides centralized logging configuration shared by the gateway and the
echo service. stdlib handlers are configured through dictConfig, structlog
sits on top and renders the events.
"""

import os
import logging
import logging.config
from copy import deepcopy
from typing import Optional, Dict, Any

import structlog
import yaml

# Default logging configuration
DEFAULT_LOGGING_CONFIG: Dict[str, Any] = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'plain': {
            'format': '%(message)s'
        }
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'level': 'INFO',
            'formatter': 'plain',
            'stream': 'ext://sys.stdout'
        }
    },
    'root': {
        'level': 'INFO',
        'handlers': ['console']
    },
    'loggers': {
        'uvicorn.access': {
            'level': 'WARNING',
            'propagate': True
        }
    }
}

LOG_FORMATS = ('json', 'console')


def load_logging_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load a dictConfig mapping

    Args:
        config_path: Path to a YAML logging configuration file

    Returns:
        The configuration from the file, or a copy of the default one when
        no path is given or the file does not exist
    """
    if config_path and os.path.exists(config_path):
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
        if not isinstance(config, dict):
            raise ValueError(f"Logging config {config_path} must be a mapping")
        return config

    return deepcopy(DEFAULT_LOGGING_CONFIG)


def _renderer(log_format: str):
    if log_format == 'console':
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.JSONRenderer()


def setup_logging(
    config_path: Optional[str] = None,
    log_level: Optional[str] = None,
    log_format: Optional[str] = None
) -> None:
    """
    Setup logging configuration

    Args:
        config_path: Path to logging configuration file
        log_level: Override log level
        log_format: Render format ('json' or 'console')
    """
    config = load_logging_config(config_path)

    # Override log level if specified
    if log_level:
        log_level = log_level.upper()
        config.setdefault('root', {})['level'] = log_level
        for handler_config in config.get('handlers', {}).values():
            handler_config['level'] = log_level

    log_format = (log_format or 'json').lower()
    if log_format not in LOG_FORMATS:
        raise ValueError(f"Unsupported log format: {log_format}")

    logging.config.dictConfig(config)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            _renderer(log_format)
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str):
    """
    Get logger instance

    Args:
        name: Logger name (usually __name__)

    Returns:
        structlog bound logger
    """
    return structlog.get_logger(name)


def init_logging():
    """Initialize logging with environment variables"""
    config_path = os.getenv('LOGGING_CONFIG_PATH')
    log_level = os.getenv('LOG_LEVEL', 'INFO')
    log_format = os.getenv('LOG_FORMAT', 'json')

    setup_logging(config_path, log_level, log_format)
