"""
Unit tests for the generator entry point
Tests template dispatch, colour defaults and fallback rendering
"""
import pytest
from unittest.mock import patch

from sitespark.html_generator.generator import generate_html, generate_site
from sitespark.html_generator.models import SiteContent
from sitespark.html_generator.templates import ClassicTemplate, TemplateFactory
from sitespark.utils.exceptions import ColorFormatError

from tests.fixtures.content_fixtures import ALL_TEMPLATES


class TestGenerateHtml:
    """Test suite for generate_html"""

    def test_widget_scenario_end_to_end(self, widget_x_product):
        # Act
        html = generate_html("Best Widgets", [widget_x_product], "classic",
                             "#112233", "#445566", False)

        # Assert
        assert "<title>Best Widgets</title>" in html
        assert "Widget X" in html
        assert 'href="https://x/buy"' in html
        assert "--primary-color: #112233;" in html
        assert "Powered by SiteSpark" not in html

    @pytest.mark.parametrize("template", ALL_TEMPLATES)
    def test_output_is_deterministic(self, template, sample_products):
        # Act
        first = generate_html("Best Widgets", sample_products, template)
        second = generate_html("Best Widgets", sample_products, template)

        # Assert
        assert first == second

    @pytest.mark.parametrize("template", ALL_TEMPLATES)
    def test_every_template_yields_complete_document(self, template, sample_products):
        # Act
        html = generate_html("Best Widgets", sample_products, template)

        # Assert
        assert html.startswith("<!DOCTYPE html>")
        assert html.rstrip().endswith("</html>")
        assert "Powered by SiteSpark" in html

    @pytest.mark.parametrize("template", ["fancy", None, "", "  TABLE  "])
    def test_template_names_resolve(self, template, sample_products):
        # Arrange
        expected_name = "table" if template == "  TABLE  " else "classic"
        expected = TemplateFactory.create_template(expected_name).render(
            "Best Widgets", sample_products, "#4f46e5", "#10b981", True
        )

        # Act
        html = generate_html("Best Widgets", sample_products, template)

        # Assert
        assert html == expected

    def test_unset_colours_use_defaults(self, sample_products):
        # Act
        html = generate_html("Best Widgets", sample_products, "classic", None, "")

        # Assert
        assert "--primary-color: #4f46e5;" in html
        assert "--secondary-color: #10b981;" in html

    def test_colours_are_normalised(self, sample_products):
        # Act
        html = generate_html("Best Widgets", sample_products, "classic", "AABBCC", "#DDEEFF")

        # Assert
        assert "--primary-color: #aabbcc;" in html
        assert "--secondary-color: #ddeeff;" in html

    @pytest.mark.parametrize("color", ["red", "#12345", "#gggggg", "#1234567"])
    def test_malformed_colour_raises(self, color, sample_products):
        with pytest.raises(ColorFormatError):
            generate_html("Best Widgets", sample_products, "classic", color)

    @pytest.mark.parametrize("include_branding", [True, False])
    def test_branding_toggle(self, include_branding, sample_products):
        html = generate_html("Best Widgets", sample_products, include_branding=include_branding)
        assert ("Powered by SiteSpark" in html) is include_branding

    def test_empty_products(self):
        # Act
        html = generate_html("Best Widgets", [], "grid")

        # Assert
        assert '<div class="products-grid">' in html
        assert '<div class="grid-card"' not in html

    def test_products_generator_is_materialised(self, sample_products):
        # Act
        html = generate_html("Best Widgets", (product for product in sample_products), "table")

        # Assert
        assert "Widget 3" in html

    def test_non_iterable_products_render_empty_page(self):
        # Act
        html = generate_html("Best Widgets", 42, "classic")

        # Assert
        assert "<h1>Best Widgets</h1>" in html
        assert '<div class="product-card"' not in html


class TestFallbackRendering:
    """Test suite for recovery when a template fails"""

    def test_template_failure_falls_back_to_classic(self, sample_products):
        # Arrange
        expected = ClassicTemplate().render("Best Widgets", sample_products, "#4f46e5", "#10b981", True)

        # Act
        with patch.object(TemplateFactory, 'create_template', side_effect=RuntimeError("boom")):
            html = generate_html("Best Widgets", sample_products, "analyst")

        # Assert
        assert html == expected

    def test_render_failure_falls_back_to_classic(self, sample_products):
        # Act
        with patch('sitespark.html_generator.templates.grid.GridTemplate.generate_body_content',
                   side_effect=ValueError("bad markup")):
            html = generate_html("Best Widgets", sample_products, "grid")

        # Assert
        assert '<div class="product-card"' in html
        assert '<div class="products-grid">' not in html

    def test_classic_failure_renders_page_without_products(self, sample_products):
        # Act
        with patch.object(ClassicTemplate, 'render', side_effect=RuntimeError("boom")):
            html = generate_html("Best Widgets", sample_products, "classic", include_branding=False)

        # Assert
        assert html.startswith("<!DOCTYPE html>")
        assert html.rstrip().endswith("</html>")
        assert "<h1>Best Widgets</h1>" in html
        assert "Widget 1" not in html
        assert "Powered by SiteSpark" not in html

    def test_unusable_product_entries_still_yield_document(self):
        # Act
        html = generate_html("Best Widgets", [42, "not a product"], "analyst")

        # Assert
        assert html.startswith("<!DOCTYPE html>")
        assert "<h1>Best Widgets</h1>" in html

    def test_unreadable_include_flag_never_shows_the_row(self, product_factory):
        # Arrange
        product = product_factory.create_product_dict(1, specifications=[
            {'id': 1, 'key': "Secretkey", 'value': "Secretvalue", 'include': "maybe"}
        ])

        # Act
        html = generate_html("Best Widgets", [product], "grid")

        # Assert
        assert html.rstrip().endswith("</html>")
        assert "Secretvalue" not in html

    def test_failure_is_logged(self, sample_products):
        # Act
        with patch.object(TemplateFactory, 'create_template', side_effect=RuntimeError("boom")), \
                patch('sitespark.html_generator.generator.logger') as mock_logger:
            generate_html("Best Widgets", sample_products, "table")

        # Assert
        mock_logger.exception.assert_called_once()


class TestGenerateSite:
    """Test suite for generate_site"""

    def test_generates_from_site_content(self, sample_products):
        # Arrange
        content = SiteContent(
            niche_title="Best Widgets",
            products=sample_products,
            primary_color="#112233",
            secondary_color="#445566",
            include_branding=False,
            template="table"
        )

        # Act
        html = generate_site(content)

        # Assert
        assert '<table class="comparison-table"' in html
        assert "--primary-color: #112233;" in html
        assert "Powered by SiteSpark" not in html
