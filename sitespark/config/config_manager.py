"""
Configuration management for SiteSpark
Centralised configuration loading and validation
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Tuple

from ..html_generator.models import (
    DEFAULT_INCLUDE_BRANDING,
    DEFAULT_PRIMARY_COLOR,
    DEFAULT_SECONDARY_COLOR,
    DEFAULT_TEMPLATE,
    TemplateName
)
from ..utils.colours import is_valid_hex_color, normalise_hex_color
from ..utils.exceptions import ConfigurationError
from ..utils.logging_config import get_logger, log_validation_result

logger = get_logger('config')


class ConfigManager:
    """
    Manages configuration loading and validation
    Single responsibility: Configuration management only
    """

    REQUIRED_SECTIONS = ['defaults', 'output', 'logging']

    def __init__(self, config_path: str):
        """
        Initialise with path to YAML config file

        Args:
            config_path: Path to YAML configuration file
        """
        self.config_path = Path(config_path)
        self.config = self._load_config()
        self._validate_config()
        logger.info(f"Configuration loaded successfully from {self.config_path}")

    def _load_config(self) -> Dict[str, Any]:
        """Load YAML configuration file"""
        if not self.config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in config file {self.config_path}: {e}")
        except OSError as e:
            raise ConfigurationError(f"Failed to load config from {self.config_path}: {e}")

        if not config:
            raise ConfigurationError(f"Configuration file is empty: {self.config_path}")

        if not isinstance(config, dict):
            raise ConfigurationError(f"Configuration root must be a mapping: {self.config_path}")

        logger.debug(f"Loaded configuration from {self.config_path}")
        return config

    def _validate_config(self) -> None:
        """Validate required configuration sections exist"""
        for section in self.REQUIRED_SECTIONS:
            if section not in self.config:
                raise ConfigurationError(f"Missing required config section: {section}")
            if not isinstance(self.config[section], dict):
                raise ConfigurationError(f"Config section '{section}' must be a mapping")

        self._validate_defaults()
        self._validate_output_config()

        log_validation_result(logger, "configuration", True, str(self.config_path))

    def _validate_defaults(self) -> None:
        """Validate default site settings"""
        defaults = self.config['defaults']

        for field in ['primary_color', 'secondary_color']:
            value = defaults.get(field)
            if value is not None and not is_valid_hex_color(value):
                raise ConfigurationError(f"Invalid {field} in defaults: {value!r} (expected #rrggbb)")

        template = defaults.get('template')
        if template is not None and template not in TemplateName.values():
            raise ConfigurationError(
                f"Unknown default template: {template}. Available templates: {TemplateName.values()}"
            )

        include_branding = defaults.get('include_branding')
        if include_branding is not None and not isinstance(include_branding, bool):
            raise ConfigurationError(f"include_branding must be true or false, got {include_branding!r}")

    def _validate_output_config(self) -> None:
        """Validate output configuration"""
        output = self.config['output']

        output_directory = output.get('output_directory')
        if output_directory is not None and (not output_directory or not isinstance(output_directory, str)):
            raise ConfigurationError(f"Invalid output_directory: {output_directory}")

        file_naming = output.get('file_naming')
        if file_naming is not None and not str(file_naming).endswith('.html'):
            raise ConfigurationError(f"file_naming must produce an .html file: {file_naming}")

    def get_defaults(self) -> Dict[str, Any]:
        """
        Get default site settings with built-in fallbacks applied

        Returns:
            Dictionary with template, primary_color, secondary_color, include_branding
        """
        defaults = self.config['defaults']
        return {
            'template': defaults.get('template', DEFAULT_TEMPLATE),
            'primary_color': normalise_hex_color(defaults.get('primary_color', DEFAULT_PRIMARY_COLOR)),
            'secondary_color': normalise_hex_color(defaults.get('secondary_color', DEFAULT_SECONDARY_COLOR)),
            'include_branding': defaults.get('include_branding', DEFAULT_INCLUDE_BRANDING)
        }

    def get_default_template(self) -> str:
        """Get default template name"""
        return self.get_defaults()['template']

    def get_default_colors(self) -> Tuple[str, str]:
        """Get default (primary, secondary) colours"""
        defaults = self.get_defaults()
        return defaults['primary_color'], defaults['secondary_color']

    def get_output_config(self) -> Dict[str, Any]:
        """Get output configuration"""
        return self.config['output']

    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging configuration"""
        return self.config['logging']

    def get_config_summary(self) -> Dict[str, Any]:
        """Summarise the loaded configuration for logging"""
        output = self.get_output_config()
        return {
            'config_path': str(self.config_path),
            'defaults': self.get_defaults(),
            'output_directory': output.get('output_directory', 'generated_sites'),
            'log_level': self.get_logging_config().get('level', 'INFO')
        }
