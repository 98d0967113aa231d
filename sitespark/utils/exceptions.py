"""
Custom exceptions for the SiteSpark site generator
Centralised exception handling for better error management
"""


class SiteSparkError(Exception):
    """Base exception for all SiteSpark errors"""
    pass


class ConfigurationError(SiteSparkError):
    """Raised when configuration is invalid or missing"""
    pass


class ValidationError(SiteSparkError):
    """Raised when site content validation fails"""
    def __init__(self, message: str, field: str = None, value=None):
        super().__init__(message)
        self.field = field
        self.value = value


class ColorFormatError(ValidationError):
    """Raised when a colour string is not three hex byte pairs"""
    def __init__(self, message: str, color: str = None):
        super().__init__(message, field='color', value=color)
        self.color = color


class ExtractionError(SiteSparkError):
    """Raised when site content cannot be loaded from a file"""
    def __init__(self, message: str, file_path: str = None):
        super().__init__(message)
        self.file_path = file_path


class HtmlGenerationError(SiteSparkError):
    """Raised when HTML generation or output fails"""
    def __init__(self, message: str, template_name: str = None):
        super().__init__(message)
        self.template_name = template_name


class TemplateNotFoundError(HtmlGenerationError):
    """Raised when a template name is not registered with the factory"""
    pass


class PipelineError(SiteSparkError):
    """Raised when flow orchestration fails"""
    def __init__(self, message: str, step: str = None, original_error: Exception = None):
        super().__init__(message)
        self.step = step
        self.original_error = original_error
