"""
Abstract base template for HTML generation
Provides the page skeleton shared by all layouts
"""

from abc import ABC, abstractmethod
from typing import Iterable, List

from ..fragments import (
    generate_html_head,
    generate_hero_section,
    generate_branding_footer,
    generate_closing_body_tag
)
from ..models import Product, ProductInput, SiteContent, normalise_products
from ...utils.common import escape_html
from ...utils.logging_config import get_logger


class BaseTemplate(ABC):
    """
    Abstract base class for all page templates
    Subclasses provide their CSS and body markup; the skeleton is fixed here
    """

    #: Registry name used by TemplateFactory
    name: str = None

    def __init__(self):
        self.logger = get_logger(f'html_generator.templates.{self.__class__.__name__}')

    @abstractmethod
    def get_template_styles(self) -> str:
        """
        Return CSS specific to this layout

        Returns:
            CSS text appended after the shared base styles
        """
        pass

    @abstractmethod
    def generate_body_content(self, products: List[Product]) -> str:
        """
        Generate the layout markup placed between the hero and the container end

        Args:
            products: Normalised products in display order

        Returns:
            HTML fragment
        """
        pass

    def render(self, niche_title: str, products: Iterable[ProductInput],
               primary_color: str, secondary_color: str,
               include_branding: bool = True) -> str:
        """
        Render a complete HTML document

        Args:
            niche_title: Page title and hero heading
            products: Products (dataclasses or mappings) in display order
            primary_color: Primary brand colour (#rrggbb)
            secondary_color: Secondary brand colour (#rrggbb)
            include_branding: Whether to append the SiteSpark footer

        Returns:
            Complete HTML document as string
        """
        products = normalise_products(products)
        self.logger.debug(f"Rendering {len(products)} products with {self.__class__.__name__}")

        head = generate_html_head(niche_title, primary_color, secondary_color,
                                  self.get_template_styles(), products)
        hero = generate_hero_section(niche_title)
        body_content = self.generate_body_content(products)
        branding_footer = generate_branding_footer(include_branding)
        closing_body_tag = generate_closing_body_tag()

        return f"""{head}
<body>
  <div class="container">
    {hero}
    {body_content}
  </div>
  {branding_footer}
  {closing_body_tag}
</html>"""

    def generate_html(self, content: SiteContent) -> str:
        """Render from a SiteContent bundle"""
        return self.render(
            content.niche_title,
            content.products,
            content.primary_color,
            content.secondary_color,
            content.include_branding
        )

    def _product_image(self, product: Product, css_class: str) -> str:
        return (
            f'<img src="{escape_html(product.image_url)}" '
            f'alt="{escape_html(product.name)}" class="{css_class}">'
        )

    def _buy_link(self, product: Product, css_class: str, label: str = "Check Price") -> str:
        return (
            f'<a href="{escape_html(product.affiliate_link)}" class="{css_class}" '
            f'target="_blank" rel="noopener noreferrer">{label}</a>'
        )
