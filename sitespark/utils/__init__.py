"""
Shared utilities: exceptions, logging, colour derivation and text helpers
"""

from .colours import derive_shade, derive_hover_color, derive_light_color, is_valid_hex_color
from .exceptions import SiteSparkError, ColorFormatError, HtmlGenerationError
from .logging_config import setup_logging, get_logger

__all__ = [
    'derive_shade',
    'derive_hover_color',
    'derive_light_color',
    'is_valid_hex_color',
    'SiteSparkError',
    'ColorFormatError',
    'HtmlGenerationError',
    'setup_logging',
    'get_logger'
]
