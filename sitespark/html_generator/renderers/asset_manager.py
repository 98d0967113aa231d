"""
Asset Manager
Fixed third-party includes, base stylesheet and theme variables shared by every template
"""

from typing import Dict

from ...utils.colours import derive_hover_color, derive_light_color, normalise_hex_color
from ...utils.logging_config import get_logger

logger = get_logger('html_generator.asset_manager')

AOS_STYLESHEET_URL = "https://unpkg.com/aos@2.3.1/dist/aos.css"
AOS_SCRIPT_URL = "https://unpkg.com/aos@2.3.1/dist/aos.js"
LENIS_SCRIPT_URL = "https://unpkg.com/lenis@1.1.13/dist/lenis.min.js"

FALLBACK_OG_IMAGE_URL = (
    "https://images.unsplash.com/photo-1460925895917-afdab827c52f"
    "?auto=format&fit=crop&w=1200&q=80"
)

BRANDING_URL = "https://sitespark.app"

BASE_STYLES = """
    * {
      box-sizing: border-box;
    }
    body {
      font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Helvetica, Arial, sans-serif;
      margin: 0;
      background-color: #f9fafb;
      color: #111827;
      line-height: 1.6;
    }
    .container {
      max-width: 1100px;
      margin: 0 auto;
      padding: 20px;
    }
    .hero {
      text-align: center;
      padding: 48px 20px;
      background: linear-gradient(135deg, var(--primary-color) 0%, var(--primary-color-hover) 100%);
      color: #ffffff;
      border-radius: 12px;
      margin-bottom: 30px;
    }
    .hero h1 {
      margin: 0;
      font-size: 36px;
      color: #ffffff;
    }
    h2, h3 {
      margin-top: 0;
      color: #1f2937;
    }
    h4 {
      margin-bottom: 5px;
      color: #4b5563;
    }
    img {
      max-width: 100%;
    }
    .buy-button {
      display: inline-block;
      background-color: var(--primary-color);
      color: #ffffff;
      padding: 12px 24px;
      text-decoration: none;
      border-radius: 6px;
      font-weight: bold;
      text-align: center;
      margin-top: 15px;
      transition: background-color 0.2s ease;
    }
    .buy-button:hover {
      background-color: var(--primary-color-hover);
    }
    ul {
      padding-left: 20px;
      margin-top: 5px;
    }
    li {
      margin-bottom: 5px;
    }
    .branding-footer {
      text-align: center;
      padding: 20px;
      font-size: 13px;
      color: #6b7280;
    }
    .branding-footer a {
      color: var(--secondary-color);
      text-decoration: none;
      font-weight: 600;
    }
"""

INIT_SCRIPT = """<script>
    AOS.init({
      duration: 800,
      easing: 'ease-out-cubic',
      once: true,
      offset: 60
    });

    const lenis = new Lenis({
      duration: 1.2,
      easing: (t) => Math.min(1, 1.001 - Math.pow(2, -10 * t)),
      smoothWheel: true,
      smoothTouch: false
    });

    function raf(time) {
      lenis.raf(time);
      requestAnimationFrame(raf);
    }
    requestAnimationFrame(raf);
  </script>"""


class AssetManager:
    """
    Provides the CSS, JavaScript and CDN references every generated page shares
    All values are module-level constants; instances hold no mutable state
    """

    def get_head_includes(self) -> str:
        """Stylesheet and script tags for the animation libraries"""
        return (
            f'<link rel="stylesheet" href="{AOS_STYLESHEET_URL}">\n'
            f'  <script src="{AOS_SCRIPT_URL}"></script>\n'
            f'  <script src="{LENIS_SCRIPT_URL}"></script>'
        )

    def get_base_styles(self) -> str:
        return BASE_STYLES

    def get_init_script(self) -> str:
        return INIT_SCRIPT

    def get_fallback_image_url(self) -> str:
        return FALLBACK_OG_IMAGE_URL

    def get_branding_url(self) -> str:
        return BRANDING_URL

    def get_theme_variables(self, primary_color: str, secondary_color: str) -> Dict[str, str]:
        """
        Get CSS custom properties for the brand colours

        Args:
            primary_color: Primary brand colour (#rrggbb)
            secondary_color: Secondary brand colour (#rrggbb)

        Returns:
            Mapping of CSS variable name to colour value
        """
        primary = normalise_hex_color(primary_color)
        secondary = normalise_hex_color(secondary_color)

        theme = {
            '--primary-color': primary,
            '--primary-color-hover': derive_hover_color(primary),
            '--secondary-color': secondary,
            '--secondary-color-light': derive_light_color(secondary)
        }
        logger.debug(f"Derived theme variables: {theme}")
        return theme

    def get_theme_css(self, primary_color: str, secondary_color: str) -> str:
        """Render the theme variables as a :root rule"""
        variables = self.get_theme_variables(primary_color, secondary_color)
        declarations = "\n".join(f"      {name}: {value};" for name, value in variables.items())
        return f"""
    :root {{
{declarations}
    }}"""
