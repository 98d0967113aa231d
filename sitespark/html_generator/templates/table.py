"""
Table Template
Single comparison table with one row per product
"""

from typing import List

from .base_template import BaseTemplate
from ..models import Product
from ...utils.common import escape_html, render_list_items

MAX_LIST_ITEMS = 3

TABLE_STYLES = """
    .comparison-table {
      width: 100%;
      border-collapse: collapse;
      margin: 20px 0;
      background-color: #ffffff;
      border-radius: 8px;
      overflow: hidden;
      box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
    }
    .comparison-table th,
    .comparison-table td {
      padding: 15px;
      text-align: left;
      border-bottom: 1px solid #e5e7eb;
    }
    .comparison-table th {
      background-color: var(--primary-color);
      color: #ffffff;
      font-weight: 600;
    }
    .comparison-table tr:hover {
      background-color: #f9fafb;
    }
    .product-name {
      font-weight: 600;
      color: var(--primary-color);
    }
    .product-tagline {
      font-size: 14px;
      color: #6b7280;
      margin-top: 5px;
    }
    .product-image-small {
      width: 80px;
      height: 80px;
      object-fit: cover;
      border-radius: 4px;
    }
    .pros-cons-cell {
      max-width: 200px;
    }
    .pros-cons-cell ul {
      margin: 0;
      padding-left: 15px;
      font-size: 14px;
    }
    .pros-cons-cell li {
      margin-bottom: 3px;
    }
    .buy-button-small {
      display: inline-block;
      background-color: var(--primary-color);
      color: #ffffff;
      padding: 8px 16px;
      text-decoration: none;
      border-radius: 4px;
      font-weight: 500;
      font-size: 14px;
      transition: background-color 0.2s ease;
    }
    .buy-button-small:hover {
      background-color: var(--primary-color-hover);
    }
    @media (max-width: 768px) {
      .comparison-table {
        font-size: 14px;
      }
      .comparison-table th,
      .comparison-table td {
        padding: 10px 8px;
      }
      .product-image-small {
        width: 60px;
        height: 60px;
      }
      .pros-cons-cell {
        max-width: 150px;
      }
    }
"""


class TableTemplate(BaseTemplate):
    """Side-by-side comparison; pros and cons are trimmed to keep rows short"""

    name = "table"

    def get_template_styles(self) -> str:
        return TABLE_STYLES

    def generate_body_content(self, products: List[Product]) -> str:
        rows = "".join(self._generate_row(product) for product in products)

        return f"""<table class="comparison-table" data-aos="fade-up">
      <thead>
        <tr>
          <th>Image</th>
          <th>Product</th>
          <th>Pros</th>
          <th>Cons</th>
          <th>Action</th>
        </tr>
      </thead>
      <tbody>{rows}
      </tbody>
    </table>"""

    def _generate_row(self, product: Product) -> str:
        return f"""
        <tr data-aos="fade-up">
          <td>{self._product_image(product, "product-image-small")}</td>
          <td>
            <div class="product-name">{escape_html(product.name)}</div>
            <div class="product-tagline">{escape_html(product.tagline)}</div>
          </td>
          <td class="pros-cons-cell">
            <ul>{render_list_items(product.pros, MAX_LIST_ITEMS)}</ul>
          </td>
          <td class="pros-cons-cell">
            <ul>{render_list_items(product.cons, MAX_LIST_ITEMS)}</ul>
          </td>
          <td>{self._buy_link(product, "buy-button-small")}</td>
        </tr>"""
