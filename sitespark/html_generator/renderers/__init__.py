"""
HTML Renderers Module
Handles shared page assets and HTML file output
"""

from .html_renderer import HtmlRenderer
from .asset_manager import AssetManager

__all__ = [
    'HtmlRenderer',
    'AssetManager'
]
