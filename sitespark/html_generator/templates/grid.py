"""
Grid Template
Responsive card grid with compact pros/cons and key specifications
"""

from typing import List

from .base_template import BaseTemplate
from ..models import Product
from ...utils.common import escape_html, render_list_items

MAX_LIST_ITEMS = 3
MAX_SPECIFICATIONS = 4

GRID_STYLES = """
    .products-grid {
      display: grid;
      grid-template-columns: 1fr;
      gap: 20px;
      margin: 20px 0;
    }
    @media (min-width: 768px) {
      .products-grid {
        grid-template-columns: repeat(2, 1fr);
      }
    }
    @media (min-width: 1024px) {
      .products-grid {
        grid-template-columns: repeat(3, 1fr);
      }
    }
    .grid-card {
      background-color: #ffffff;
      border-radius: 12px;
      overflow: hidden;
      box-shadow: 0 4px 12px rgba(0, 0, 0, 0.1);
      transition: transform 0.2s ease, box-shadow 0.2s ease;
    }
    .grid-card:hover {
      transform: translateY(-4px);
      box-shadow: 0 8px 24px rgba(0, 0, 0, 0.15);
    }
    .grid-card-image {
      width: 100%;
      height: 200px;
      object-fit: cover;
    }
    .grid-card-content {
      padding: 20px;
    }
    .grid-card-title {
      font-size: 18px;
      font-weight: 700;
      margin: 0 0 8px 0;
      color: #1f2937;
    }
    .grid-card-tagline {
      font-size: 14px;
      color: #6b7280;
      margin: 0 0 15px 0;
      font-style: italic;
    }
    .grid-pros-cons {
      display: grid;
      grid-template-columns: 1fr 1fr;
      gap: 15px;
      margin: 15px 0;
    }
    .grid-pros-cons h5 {
      margin: 0 0 8px 0;
      font-size: 14px;
      font-weight: 600;
    }
    .grid-pros-cons ul {
      margin: 0;
      padding-left: 15px;
      font-size: 13px;
    }
    .grid-pros-cons li {
      margin-bottom: 4px;
    }
    .grid-specs {
      margin: 15px 0;
      padding: 12px;
      background-color: #f9fafb;
      border-radius: 6px;
    }
    .grid-specs h5 {
      margin: 0 0 8px 0;
      font-size: 14px;
      font-weight: 600;
      color: #374151;
    }
    .grid-spec-item {
      display: flex;
      justify-content: space-between;
      font-size: 12px;
      margin-bottom: 4px;
      padding: 2px 0;
    }
    .grid-spec-key {
      font-weight: 500;
      color: #4b5563;
    }
    .grid-spec-value {
      color: #6b7280;
    }
    .grid-buy-button {
      display: block;
      width: 100%;
      background-color: var(--primary-color);
      color: #ffffff;
      padding: 12px;
      text-decoration: none;
      border-radius: 6px;
      font-weight: 600;
      text-align: center;
      margin-top: 15px;
      transition: background-color 0.2s ease;
    }
    .grid-buy-button:hover {
      background-color: var(--primary-color-hover);
    }
"""


class GridTemplate(BaseTemplate):
    """Compact cards; column count is driven purely by media queries"""

    name = "grid"

    def get_template_styles(self) -> str:
        return GRID_STYLES

    def generate_body_content(self, products: List[Product]) -> str:
        cards = "".join(self._generate_card(product) for product in products)
        return f"""<div class="products-grid">{cards}
    </div>"""

    def _generate_card(self, product: Product) -> str:
        return f"""
      <div class="grid-card" data-aos="fade-up">
        {self._product_image(product, "grid-card-image")}
        <div class="grid-card-content">
          <h3 class="grid-card-title">{escape_html(product.name)}</h3>
          <p class="grid-card-tagline">{escape_html(product.tagline)}</p>
          <div class="grid-pros-cons">
            <div>
              <h5>Pros</h5>
              <ul>{render_list_items(product.pros, MAX_LIST_ITEMS)}</ul>
            </div>
            <div>
              <h5>Cons</h5>
              <ul>{render_list_items(product.cons, MAX_LIST_ITEMS)}</ul>
            </div>
          </div>
          {self._generate_key_specs(product)}
          {self._buy_link(product, "grid-buy-button")}
        </div>
      </div>"""

    def _generate_key_specs(self, product: Product) -> str:
        # Filter before capping so hidden rows never use up a slot
        specifications = product.included_specifications()[:MAX_SPECIFICATIONS]
        if not specifications:
            return ""

        items = "".join(
            f"""
            <div class="grid-spec-item">
              <span class="grid-spec-key">{escape_html(spec.key)}</span>
              <span class="grid-spec-value">{escape_html(spec.value)}</span>
            </div>"""
            for spec in specifications
        )
        return f"""<div class="grid-specs">
            <h5>Key Specs</h5>{items}
          </div>"""
