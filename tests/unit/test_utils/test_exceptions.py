"""
Unit tests for custom exception classes
Tests exception hierarchy and custom attributes
"""
import pytest

from sitespark.utils.exceptions import (
    SiteSparkError,
    ConfigurationError,
    ValidationError,
    ColorFormatError,
    ExtractionError,
    HtmlGenerationError,
    TemplateNotFoundError,
    PipelineError
)


class TestSiteSparkError:
    """Test suite for base exception class"""

    def test_sitespark_error_is_base_exception(self):
        """Test that SiteSparkError is the base exception"""
        # Act
        error = SiteSparkError("Test message")

        # Assert
        assert isinstance(error, Exception)
        assert str(error) == "Test message"

    def test_all_custom_exceptions_inherit_from_base(self):
        """Test that all custom exceptions inherit from SiteSparkError"""
        # Arrange
        exception_classes = [
            ConfigurationError,
            ValidationError,
            ColorFormatError,
            ExtractionError,
            HtmlGenerationError,
            TemplateNotFoundError,
            PipelineError
        ]

        # Act & Assert
        for exception_class in exception_classes:
            error = exception_class("Test message")
            assert isinstance(error, SiteSparkError)
            assert str(error) == "Test message"


class TestValidationErrors:
    """Test suite for ValidationError and ColorFormatError"""

    def test_validation_error_defaults(self):
        # Act
        error = ValidationError("Invalid field")

        # Assert
        assert error.field is None
        assert error.value is None

    def test_color_format_error_records_color(self):
        # Act
        error = ColorFormatError("Bad colour", color="#zzz")

        # Assert
        assert isinstance(error, ValidationError)
        assert error.color == "#zzz"
        assert error.field == "color"
        assert error.value == "#zzz"


class TestContextualErrors:
    """Test suite for exceptions carrying context attributes"""

    def test_extraction_error_with_file_path(self):
        error = ExtractionError("Failed", file_path="/tmp/site.yaml")
        assert error.file_path == "/tmp/site.yaml"

    def test_template_not_found_is_html_generation_error(self):
        # Act
        error = TemplateNotFoundError("Unknown template", template_name="fancy")

        # Assert
        assert isinstance(error, HtmlGenerationError)
        assert error.template_name == "fancy"

    def test_pipeline_error_with_original_error(self):
        # Arrange
        original = ValueError("boom")

        # Act
        error = PipelineError("Flow failed", step="load", original_error=original)

        # Assert
        assert error.step == "load"
        assert error.original_error is original

    def test_pipeline_error_in_exception_handling(self):
        with pytest.raises(SiteSparkError, match="Flow failed"):
            raise PipelineError("Flow failed")
