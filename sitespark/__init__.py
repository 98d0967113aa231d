"""
SiteSpark niche site generator
Renders self-contained affiliate review pages from a title, products and brand colours
"""

# Package metadata
__version__ = "1.0.0"
__description__ = "Template-driven HTML generator for niche affiliate sites"

from .html_generator.generator import generate_html, generate_site
from .html_generator.models import Product, Specification, SiteContent, TemplateName
from .html_generator.templates.template_factory import TemplateFactory
from .utils.colours import derive_shade
from .utils.exceptions import (
    SiteSparkError,
    ConfigurationError,
    ValidationError,
    ColorFormatError,
    ExtractionError,
    HtmlGenerationError,
    TemplateNotFoundError,
    PipelineError
)
from .utils.logging_config import setup_logging, get_logger

__all__ = [
    'generate_html',
    'generate_site',
    'derive_shade',
    'Product',
    'Specification',
    'SiteContent',
    'TemplateName',
    'TemplateFactory',
    'setup_logging',
    'get_logger',
    'SiteSparkError',
    'ConfigurationError',
    'ValidationError',
    'ColorFormatError',
    'ExtractionError',
    'HtmlGenerationError',
    'TemplateNotFoundError',
    'PipelineError'
]
