"""
Unit tests for TemplateFactory
Tests name resolution, template creation and registration
"""
import pytest
from unittest.mock import patch

from sitespark.html_generator.models import TemplateName
from sitespark.html_generator.templates import (
    AnalystTemplate,
    BaseTemplate,
    ClassicTemplate,
    GridTemplate,
    TableTemplate,
    TemplateFactory
)
from sitespark.utils.exceptions import HtmlGenerationError, TemplateNotFoundError


class MinimalTemplate(BaseTemplate):
    name = "minimal"

    def get_template_styles(self):
        return ""

    def generate_body_content(self, products):
        return "".join(f"<p>{product.id}</p>" for product in products)


@pytest.fixture
def restore_registry():
    """Restore the factory registry after a test mutates it"""
    original = dict(TemplateFactory._templates)
    yield
    TemplateFactory._templates.clear()
    TemplateFactory._templates.update(original)


class TestResolveTemplateName:
    """Test suite for resolve_template_name"""

    @pytest.mark.parametrize("requested,expected", [
        ("classic", "classic"),
        ("table", "table"),
        ("grid", "grid"),
        ("analyst", "analyst"),
        ("  Grid ", "grid"),
        ("ANALYST", "analyst"),
        (TemplateName.TABLE, "table"),
    ])
    def test_known_names(self, requested, expected):
        assert TemplateFactory.resolve_template_name(requested) == expected

    @pytest.mark.parametrize("requested", [None, "", "fancy", "classic-2"])
    def test_unset_or_unknown_names_resolve_to_classic(self, requested):
        assert TemplateFactory.resolve_template_name(requested) == "classic"

    def test_unknown_name_logs_warning(self):
        # Act
        with patch('sitespark.html_generator.templates.template_factory.logger') as mock_logger:
            TemplateFactory.resolve_template_name("fancy")

        # Assert
        mock_logger.warning.assert_called_once()
        assert "Unknown template 'fancy'" in mock_logger.warning.call_args[0][0]


class TestCreateTemplate:
    """Test suite for create_template"""

    @pytest.mark.parametrize("name,template_class", [
        ("classic", ClassicTemplate),
        ("table", TableTemplate),
        ("grid", GridTemplate),
        ("analyst", AnalystTemplate),
    ])
    def test_creates_registered_templates(self, name, template_class):
        # Act
        template = TemplateFactory.create_template(name)

        # Assert
        assert isinstance(template, template_class)
        assert template.name == name

    def test_unknown_template_raises(self):
        # Act & Assert
        with pytest.raises(TemplateNotFoundError, match="Unknown template: fancy") as exc_info:
            TemplateFactory.create_template("fancy")

        assert exc_info.value.template_name == "fancy"

    def test_available_templates(self):
        assert TemplateFactory.get_available_templates() == TemplateName.values()


class TestTemplateRegistration:
    """Test suite for register_template and unregister_template"""

    def test_register_and_create_custom_template(self, restore_registry, sample_products):
        # Arrange
        TemplateFactory.register_template("minimal", MinimalTemplate)

        # Act
        template = TemplateFactory.create_template("minimal")
        html = template.render("Best Widgets", sample_products, "#4f46e5", "#10b981")

        # Assert
        assert "minimal" in TemplateFactory.get_available_templates()
        assert "<p>1</p><p>2</p><p>3</p>" in html
        assert html.rstrip().endswith("</html>")

    def test_register_rejects_non_template_class(self, restore_registry):
        with pytest.raises(HtmlGenerationError, match="must inherit from BaseTemplate"):
            TemplateFactory.register_template("bad", dict)

    def test_unregister_removes_template(self, restore_registry):
        # Arrange
        TemplateFactory.register_template("minimal", MinimalTemplate)

        # Act
        TemplateFactory.unregister_template("minimal")

        # Assert
        assert "minimal" not in TemplateFactory.get_available_templates()
        assert TemplateFactory.resolve_template_name("minimal") == "classic"

    def test_classic_cannot_be_unregistered(self):
        with pytest.raises(HtmlGenerationError):
            TemplateFactory.unregister_template("classic")

        assert "classic" in TemplateFactory.get_available_templates()
