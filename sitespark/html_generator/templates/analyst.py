"""
Analyst Template
Report-style layout with strengths, limitations, specifications and a verdict per product
"""

from typing import List

from .base_template import BaseTemplate
from ..models import Product
from ...utils.common import escape_html, render_list_items

# Indexed by list position, not derived from product content
VERDICTS = (
    "Our top recommendation for most users. Offers the best balance of performance, features, and value.",
    "An excellent alternative with unique strengths. Perfect for users with specific requirements.",
    "A solid choice with distinct advantages. Great for budget-conscious buyers or niche use cases."
)
DEFAULT_VERDICT = "A quality option worth considering for the right user."

NO_SPECIFICATIONS_MESSAGE = "No specifications available for this product."

ANALYST_INTRO = """<div class="analyst-intro" data-aos="fade-up">
      <h2>Expert Analysis &amp; Recommendations</h2>
      <p>Our team has thoroughly tested and analyzed each product in this category. Below you'll find detailed breakdowns of the top contenders, including comprehensive pros and cons analysis, technical specifications, and our expert verdict on each option.</p>
    </div>"""

ANALYST_STYLES = """
    .analyst-intro {
      background-color: #ffffff;
      padding: 30px;
      border-radius: 8px;
      margin-bottom: 30px;
      border-left: 4px solid var(--primary-color);
      box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
    }
    .analyst-intro h2 {
      color: var(--primary-color);
      margin-top: 0;
    }
    .product-analysis {
      background-color: #ffffff;
      border-radius: 8px;
      padding: 30px;
      margin-bottom: 30px;
      box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
    }
    .product-header {
      display: flex;
      flex-direction: column;
      gap: 20px;
      margin-bottom: 25px;
    }
    @media (min-width: 768px) {
      .product-header {
        flex-direction: row;
        align-items: flex-start;
      }
    }
    .product-image-analyst {
      max-width: 250px;
      max-height: 200px;
      object-fit: cover;
      border-radius: 8px;
      box-shadow: 0 4px 12px rgba(0, 0, 0, 0.1);
    }
    .product-header-content {
      flex: 1;
    }
    .product-title-analyst {
      font-size: 24px;
      font-weight: 700;
      margin: 0 0 10px 0;
      color: #1f2937;
    }
    .product-tagline-analyst {
      font-size: 16px;
      color: #6b7280;
      margin: 0 0 20px 0;
      font-style: italic;
    }
    .analysis-sections {
      display: grid;
      grid-template-columns: 1fr;
      gap: 20px;
    }
    @media (min-width: 768px) {
      .analysis-sections {
        grid-template-columns: 1fr 1fr;
      }
    }
    .analysis-section {
      background-color: #f9fafb;
      padding: 20px;
      border-radius: 6px;
    }
    .analysis-section h4 {
      margin: 0 0 12px 0;
      color: #374151;
      font-size: 16px;
      font-weight: 600;
    }
    .analysis-section ul {
      margin: 0;
      padding-left: 18px;
    }
    .analysis-section li {
      margin-bottom: 6px;
      line-height: 1.5;
    }
    .specifications-analyst {
      background-color: #f3f4f6;
      padding: 20px;
      border-radius: 6px;
    }
    .specifications-analyst h4 {
      margin: 0 0 15px 0;
      color: #374151;
      font-size: 16px;
      font-weight: 600;
    }
    .specs-table {
      width: 100%;
      border-collapse: collapse;
    }
    .specs-table th,
    .specs-table td {
      padding: 8px 12px;
      text-align: left;
      border-bottom: 1px solid #e5e7eb;
      background-color: #ffffff;
    }
    .specs-table th {
      font-weight: 600;
      color: #374151;
      width: 40%;
    }
    .specs-table td {
      color: #6b7280;
    }
    .no-specifications {
      color: #6b7280;
      font-style: italic;
      margin: 0;
    }
    .verdict-section {
      margin-top: 25px;
      padding: 20px;
      background-color: var(--secondary-color-light);
      border-radius: 6px;
      border: 1px solid var(--secondary-color);
    }
    .verdict-section h4 {
      margin: 0 0 10px 0;
      color: var(--secondary-color);
      font-size: 16px;
      font-weight: 600;
    }
    .analyst-buy-button {
      display: inline-block;
      background-color: var(--primary-color);
      color: #ffffff;
      padding: 14px 28px;
      text-decoration: none;
      border-radius: 6px;
      font-weight: 600;
      margin-top: 20px;
      transition: background-color 0.2s ease;
      font-size: 16px;
    }
    .analyst-buy-button:hover {
      background-color: var(--primary-color-hover);
    }
"""


def get_verdict(position: int) -> str:
    """
    Verdict sentence for a product at a zero-based list position

    The first three positions get fixed framings; every later product
    shares the generic sentence.
    """
    if 0 <= position < len(VERDICTS):
        return VERDICTS[position]
    return DEFAULT_VERDICT


class AnalystTemplate(BaseTemplate):
    """Single-column report with a specifications pane beside strengths and limitations"""

    name = "analyst"

    def get_template_styles(self) -> str:
        return ANALYST_STYLES

    def generate_body_content(self, products: List[Product]) -> str:
        analyses = "".join(
            self._generate_product_analysis(product, position)
            for position, product in enumerate(products)
        )
        return f"""{ANALYST_INTRO}{analyses}"""

    def _generate_product_analysis(self, product: Product, position: int) -> str:
        return f"""
    <div class="product-analysis" data-aos="fade-up">
      <div class="product-header">
        {self._product_image(product, "product-image-analyst")}
        <div class="product-header-content">
          <h3 class="product-title-analyst">{escape_html(product.name)}</h3>
          <p class="product-tagline-analyst">{escape_html(product.tagline)}</p>
        </div>
      </div>
      <div class="analysis-sections">
        {self._generate_specifications(product)}
        <div class="analysis-section">
          <h4>Strengths</h4>
          <ul>{render_list_items(product.pros)}</ul>
          <h4>Limitations</h4>
          <ul>{render_list_items(product.cons)}</ul>
        </div>
      </div>
      <div class="verdict-section">
        <h4>Expert Verdict</h4>
        <p>{get_verdict(position)}</p>
      </div>
      {self._buy_link(product, "analyst-buy-button", "Check Current Price")}
    </div>"""

    def _generate_specifications(self, product: Product) -> str:
        specifications = product.included_specifications()
        if not specifications:
            body = f'<p class="no-specifications">{NO_SPECIFICATIONS_MESSAGE}</p>'
        else:
            rows = "".join(
                f"""
            <tr>
              <th>{escape_html(spec.key)}</th>
              <td>{escape_html(spec.value)}</td>
            </tr>"""
                for spec in specifications
            )
            body = f"""<table class="specs-table">
            <tbody>{rows}
            </tbody>
          </table>"""

        return f"""<div class="specifications-analyst">
          <h4>Technical Specifications</h4>
          {body}
        </div>"""
