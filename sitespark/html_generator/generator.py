"""
Site generator entry point
Resolves a template, renders the page and recovers from template failures
"""

from typing import Iterable, Optional

from .fragments import (
    generate_html_head,
    generate_hero_section,
    generate_branding_footer,
    generate_closing_body_tag
)
from .models import (
    DEFAULT_PRIMARY_COLOR,
    DEFAULT_SECONDARY_COLOR,
    DEFAULT_TEMPLATE,
    ProductInput,
    SiteContent
)
from .templates.classic import ClassicTemplate
from .templates.template_factory import TemplateFactory
from ..utils.colours import normalise_hex_color
from ..utils.logging_config import get_logger

logger = get_logger('html_generator.generator')


def generate_html(niche_title: str,
                  products: Iterable[ProductInput],
                  template: Optional[str] = DEFAULT_TEMPLATE,
                  primary_color: Optional[str] = DEFAULT_PRIMARY_COLOR,
                  secondary_color: Optional[str] = DEFAULT_SECONDARY_COLOR,
                  include_branding: bool = True) -> str:
    """
    Generate a complete, self-contained HTML document

    Args:
        niche_title: Page title and hero heading
        products: Products (dataclasses or mappings) in display order
        template: One of classic, table, grid, analyst; anything else renders classic
        primary_color: Primary brand colour; None or '' uses the default
        secondary_color: Secondary brand colour; None or '' uses the default
        include_branding: Whether to append the SiteSpark footer

    Returns:
        Complete HTML document as string

    Raises:
        ColorFormatError: If a colour is not a 6-digit hex string
    """
    primary_color = normalise_hex_color(primary_color or DEFAULT_PRIMARY_COLOR)
    secondary_color = normalise_hex_color(secondary_color or DEFAULT_SECONDARY_COLOR)
    template_name = TemplateFactory.resolve_template_name(template)

    # Materialised once so the fallback sees the same products
    try:
        products = list(products or [])
    except TypeError:
        logger.error(f"Products must be a sequence, got {type(products).__name__}; rendering none")
        products = []

    try:
        renderer = TemplateFactory.create_template(template_name)
        html_content = renderer.render(niche_title, products, primary_color,
                                       secondary_color, include_branding)
    except Exception:
        logger.exception(f"Template '{template_name}' failed, falling back to classic")
        return _render_fallback(niche_title, products, primary_color,
                                secondary_color, include_branding)

    logger.info(f"Generated '{template_name}' page with {len(html_content):,} characters")
    return html_content


def generate_site(content: SiteContent) -> str:
    """Generate the document for a SiteContent bundle"""
    return generate_html(
        content.niche_title,
        content.products,
        content.template,
        content.primary_color,
        content.secondary_color,
        content.include_branding
    )


def _render_fallback(niche_title: str, products: Iterable[ProductInput],
                     primary_color: str, secondary_color: str,
                     include_branding: bool) -> str:
    """Render through the classic layout, or an empty page if that fails too"""
    try:
        return ClassicTemplate().render(niche_title, products, primary_color,
                                        secondary_color, include_branding)
    except Exception:
        logger.exception("Classic fallback failed, rendering page without products")

    return f"""{generate_html_head(niche_title, primary_color, secondary_color, "", [])}
<body>
  <div class="container">
    {generate_hero_section(niche_title)}
  </div>
  {generate_branding_footer(include_branding)}
  {generate_closing_body_tag()}
</html>"""
