"""
Classic Template
Stacked product cards with pros/cons and an optional specifications block
"""

from typing import List

from .base_template import BaseTemplate
from ..models import Product
from ...utils.common import escape_html, render_list_items

CLASSIC_STYLES = """
    .product-card {
      background-color: #ffffff;
      border: 1px solid #e5e7eb;
      border-radius: 8px;
      padding: 20px;
      margin-bottom: 20px;
      display: flex;
      flex-direction: column;
    }
    @media (min-width: 768px) {
      .product-card {
        flex-direction: row;
        gap: 20px;
      }
    }
    .product-image {
      max-width: 200px;
      max-height: 200px;
      object-fit: cover;
      border-radius: 4px;
      margin-bottom: 15px;
    }
    @media (min-width: 768px) {
      .product-image {
        margin-bottom: 0;
      }
    }
    .product-details {
      flex: 1;
    }
    .pros-cons {
      display: grid;
      grid-template-columns: 1fr;
      gap: 10px;
      margin-top: 15px;
    }
    @media (min-width: 640px) {
      .pros-cons {
        grid-template-columns: 1fr 1fr;
      }
    }
    .specifications {
      margin-top: 15px;
      background-color: #f9fafb;
      padding: 15px;
      border-radius: 6px;
    }
    .spec-row {
      display: flex;
      justify-content: space-between;
      padding: 5px 0;
      border-bottom: 1px solid #e5e7eb;
    }
    .spec-row:last-child {
      border-bottom: none;
    }
    .spec-key {
      font-weight: 600;
      color: #374151;
    }
    .spec-value {
      color: #6b7280;
    }
"""


class ClassicTemplate(BaseTemplate):
    """One full-width card per product, every product and every pro/con shown"""

    name = "classic"

    def get_template_styles(self) -> str:
        return CLASSIC_STYLES

    def generate_body_content(self, products: List[Product]) -> str:
        return "".join(self._generate_product_card(product) for product in products)

    def _generate_product_card(self, product: Product) -> str:
        return f"""
    <div class="product-card" data-aos="fade-up">
      {self._product_image(product, "product-image")}
      <div class="product-details">
        <h2>{escape_html(product.name)}</h2>
        <p><em>{escape_html(product.tagline)}</em></p>
        <div class="pros-cons">
          <div>
            <h4>Pros</h4>
            <ul>{render_list_items(product.pros)}</ul>
          </div>
          <div>
            <h4>Cons</h4>
            <ul>{render_list_items(product.cons)}</ul>
          </div>
        </div>
        {self._generate_specifications(product)}
        {self._buy_link(product, "buy-button")}
      </div>
    </div>"""

    def _generate_specifications(self, product: Product) -> str:
        specifications = product.included_specifications()
        if not specifications:
            return ""

        rows = "".join(
            f"""
          <div class="spec-row">
            <span class="spec-key">{escape_html(spec.key)}</span>
            <span class="spec-value">{escape_html(spec.value)}</span>
          </div>"""
            for spec in specifications
        )
        return f"""<div class="specifications">
          <h4>Specifications</h4>{rows}
        </div>"""
