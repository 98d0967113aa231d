"""
Site content extraction
Loads a site description from JSON or YAML and normalises it into SiteContent
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..config.config_manager import ConfigManager
from ..html_generator.models import (
    DEFAULT_INCLUDE_BRANDING,
    DEFAULT_PRIMARY_COLOR,
    DEFAULT_SECONDARY_COLOR,
    DEFAULT_TEMPLATE,
    SiteContent,
    normalise_products
)
from ..utils.common import parse_flag
from ..utils.exceptions import ExtractionError, ValidationError
from ..utils.logging_config import get_logger, log_validation_result

SUPPORTED_SUFFIXES = ('.json', '.yaml', '.yml')


class SiteContentExtractor:
    """
    Site content file extraction
    Single responsibility: turn a content file into a normalised SiteContent
    """

    REQUIRED_FIELDS = ['nicheTitle', 'products']

    def __init__(self, config_manager: Optional[ConfigManager] = None):
        """
        Initialise with an optional configuration manager

        Args:
            config_manager: Supplies defaults for colours, template and branding
        """
        self.config = config_manager
        self.logger = get_logger(f'extract.{self.__class__.__name__}')

    def extract(self, content_path: str) -> SiteContent:
        """
        Load and normalise a site content file

        Args:
            content_path: Path to a .json, .yaml or .yml file

        Returns:
            SiteContent ready for generation
        """
        content_path = Path(content_path)
        self.logger.info(f"Loading site content from: {content_path}")

        raw_content = self._load_file(content_path)
        self._validate_content(raw_content, content_path)

        try:
            site_content = self._build_site_content(raw_content)
        except ValidationError as e:
            raise ExtractionError(f"Invalid site content in {content_path.name}: {e}", str(content_path))

        self.logger.info(
            f"Loaded '{site_content.niche_title}' with {len(site_content.products)} products "
            f"(template: {site_content.template})"
        )
        return site_content

    def _load_file(self, content_path: Path) -> Dict[str, Any]:
        """Read the raw mapping from disk"""
        if not content_path.exists():
            raise ExtractionError(f"Site content file not found: {content_path}", str(content_path))

        suffix = content_path.suffix.lower()
        if suffix not in SUPPORTED_SUFFIXES:
            raise ExtractionError(
                f"Unsupported content file type '{suffix}'. Supported: {list(SUPPORTED_SUFFIXES)}",
                str(content_path)
            )

        try:
            with open(content_path, 'r', encoding='utf-8') as f:
                if suffix == '.json':
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except json.JSONDecodeError as e:
            raise ExtractionError(f"Invalid JSON format in {content_path.name}: {e}", str(content_path))
        except yaml.YAMLError as e:
            raise ExtractionError(f"Invalid YAML in {content_path.name}: {e}", str(content_path))
        except OSError as e:
            raise ExtractionError(f"Failed to read {content_path.name}: {e}", str(content_path))

        if not isinstance(data, dict):
            raise ExtractionError(f"Site content must be a mapping: {content_path.name}", str(content_path))

        return data

    def _validate_content(self, raw_content: Dict[str, Any], content_path: Path) -> None:
        """Check required fields and product structure"""
        missing_fields = [field for field in self.REQUIRED_FIELDS if field not in raw_content]
        if missing_fields:
            raise ExtractionError(
                f"Site content missing required fields: {missing_fields}",
                str(content_path)
            )

        products = raw_content['products'] or []
        if not isinstance(products, list):
            raise ExtractionError("'products' must be a list", str(content_path))

        for index, product in enumerate(products):
            if not isinstance(product, dict):
                raise ExtractionError(f"Product {index} must be a mapping", str(content_path))

        log_validation_result(self.logger, "site content", True, f"{len(products)} products in {content_path.name}")

    def _build_site_content(self, raw_content: Dict[str, Any]) -> SiteContent:
        """Apply configured defaults and normalise products"""
        defaults = self._get_defaults()

        def pick(camel_key: str, snake_key: str) -> Any:
            for key in (camel_key, snake_key):
                if raw_content.get(key) is not None:
                    return raw_content[key]
            return defaults[snake_key]

        return SiteContent(
            niche_title=str(raw_content['nicheTitle'] or ""),
            products=normalise_products(raw_content['products']),
            primary_color=pick('primaryColor', 'primary_color'),
            secondary_color=pick('secondaryColor', 'secondary_color'),
            include_branding=parse_flag(pick('includeBranding', 'include_branding'), 'includeBranding'),
            template=pick('template', 'template')
        )

    def _get_defaults(self) -> Dict[str, Any]:
        if self.config is not None:
            return self.config.get_defaults()

        return {
            'template': DEFAULT_TEMPLATE,
            'primary_color': DEFAULT_PRIMARY_COLOR,
            'secondary_color': DEFAULT_SECONDARY_COLOR,
            'include_branding': DEFAULT_INCLUDE_BRANDING
        }
