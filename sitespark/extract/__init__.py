"""
Site content extraction
"""

from .content_extractor import SiteContentExtractor

__all__ = ['SiteContentExtractor']
