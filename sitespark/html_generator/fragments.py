"""
Shared page fragments
Head, hero banner, branding footer and closing body tag used by every template
"""

from typing import Sequence

from .models import Product
from .renderers.asset_manager import AssetManager
from ..utils.common import escape_html

_assets = AssetManager()


def build_meta_description(niche_title: str) -> str:
    """Generated description used for the meta, Open Graph and Twitter tags"""
    return (
        f"Discover the best {(niche_title or '').lower()} with our expert reviews "
        f"and comparisons. Find the perfect product for your needs."
    )


def resolve_share_image(products: Sequence[Product]) -> str:
    """First product image, or the stock fallback image when there is none"""
    if products and products[0].image_url:
        return products[0].image_url
    return _assets.get_fallback_image_url()


def generate_html_head(niche_title: str, primary_color: str, secondary_color: str,
                       template_styles: str, products: Sequence[Product]) -> str:
    """
    Generate the document preamble through the closing </head>

    Args:
        niche_title: Page title
        primary_color: Primary brand colour (#rrggbb)
        secondary_color: Secondary brand colour (#rrggbb)
        template_styles: Template-specific CSS appended after the base styles
        products: Products on the page (first image feeds the share tags)

    Returns:
        HTML from <!DOCTYPE html> to </head>
    """
    title = escape_html(niche_title)
    description = escape_html(build_meta_description(niche_title))
    share_image = escape_html(resolve_share_image(products))

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  <meta name="description" content="{description}">
  <meta property="og:type" content="website">
  <meta property="og:title" content="{title}">
  <meta property="og:description" content="{description}">
  <meta property="og:image" content="{share_image}">
  <meta name="twitter:card" content="summary_large_image">
  <meta name="twitter:title" content="{title}">
  <meta name="twitter:description" content="{description}">
  <meta name="twitter:image" content="{share_image}">
  {_assets.get_head_includes()}
  <style>{_assets.get_theme_css(primary_color, secondary_color)}
    {_assets.get_base_styles()}
    {template_styles}
  </style>
</head>"""


def generate_hero_section(niche_title: str) -> str:
    return f"""<div class="hero" data-aos="fade-down">
      <h1>{escape_html(niche_title)}</h1>
    </div>"""


def generate_branding_footer(include_branding: bool) -> str:
    """Footer crediting SiteSpark, or an empty string when branding is off"""
    if not include_branding:
        return ""

    return f"""<footer class="branding-footer">
    <p><a href="{_assets.get_branding_url()}" target="_blank" rel="noopener noreferrer">Powered by SiteSpark</a></p>
  </footer>"""


def generate_closing_body_tag() -> str:
    """Animation library initialisation followed by </body>"""
    return f"""{_assets.get_init_script()}
</body>"""
