"""
HTML Generator Module
Generates self-contained niche affiliate pages from site content
"""

from .generator import generate_html, generate_site
from .models import Product, Specification, SiteContent, TemplateName
from .templates import TemplateFactory, BaseTemplate
from .renderers import HtmlRenderer, AssetManager

__all__ = [
    'generate_html',
    'generate_site',
    'Product',
    'Specification',
    'SiteContent',
    'TemplateName',
    'TemplateFactory',
    'BaseTemplate',
    'HtmlRenderer',
    'AssetManager'
]
