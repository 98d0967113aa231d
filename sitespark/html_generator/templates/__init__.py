"""
HTML Templates Module
Provides the page layouts available to the generator
"""

from .base_template import BaseTemplate
from .classic import ClassicTemplate
from .table import TableTemplate
from .grid import GridTemplate
from .analyst import AnalystTemplate
from .template_factory import TemplateFactory

__all__ = [
    'BaseTemplate',
    'ClassicTemplate',
    'TableTemplate',
    'GridTemplate',
    'AnalystTemplate',
    'TemplateFactory'
]
