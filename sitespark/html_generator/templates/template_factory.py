"""
Template factory for creating template instances
"""

from typing import Dict, List, Optional, Type

from .base_template import BaseTemplate
from .classic import ClassicTemplate
from .table import TableTemplate
from .grid import GridTemplate
from .analyst import AnalystTemplate
from ..models import DEFAULT_TEMPLATE, TemplateName
from ...utils.exceptions import HtmlGenerationError, TemplateNotFoundError
from ...utils.logging_config import get_logger

logger = get_logger('html_generator.template_factory')


class TemplateFactory:
    """Factory for creating template instances by name"""

    _templates: Dict[str, Type[BaseTemplate]] = {
        TemplateName.CLASSIC.value: ClassicTemplate,
        TemplateName.TABLE.value: TableTemplate,
        TemplateName.GRID.value: GridTemplate,
        TemplateName.ANALYST.value: AnalystTemplate,
    }

    @classmethod
    def resolve_template_name(cls, template_name: Optional[str]) -> str:
        """
        Map a requested template name onto a registered one

        Matching ignores case and surrounding whitespace. Unset or unknown
        names resolve to the classic layout.

        Args:
            template_name: Requested template name (may be None)

        Returns:
            Registered template name
        """
        if isinstance(template_name, TemplateName):
            template_name = template_name.value

        if not template_name:
            return DEFAULT_TEMPLATE

        candidate = str(template_name).strip().lower()
        if candidate in cls._templates:
            return candidate

        logger.warning(f"Unknown template '{template_name}', using '{DEFAULT_TEMPLATE}'")
        return DEFAULT_TEMPLATE

    @classmethod
    def create_template(cls, template_name: str) -> BaseTemplate:
        """
        Create template instance

        Args:
            template_name: Name of template to create

        Returns:
            Template instance

        Raises:
            TemplateNotFoundError: If no template is registered under the name
        """
        if template_name not in cls._templates:
            available_templates = list(cls._templates.keys())
            raise TemplateNotFoundError(
                f"Unknown template: {template_name}. Available templates: {available_templates}",
                template_name=template_name
            )

        template_class = cls._templates[template_name]
        logger.debug(f"Creating template: {template_name}")

        return template_class()

    @classmethod
    def get_available_templates(cls) -> List[str]:
        """Get list of available template names"""
        return list(cls._templates.keys())

    @classmethod
    def register_template(cls, name: str, template_class: type) -> None:
        """
        Register a new template class

        Args:
            name: Template name
            template_class: Template class (must inherit from BaseTemplate)
        """
        if not isinstance(template_class, type) or not issubclass(template_class, BaseTemplate):
            raise HtmlGenerationError("Template class must inherit from BaseTemplate", template_name=name)

        cls._templates[name] = template_class
        logger.info(f"Registered new template: {name}")

    @classmethod
    def unregister_template(cls, name: str) -> None:
        """Remove a registered template; the classic layout cannot be removed"""
        if name == DEFAULT_TEMPLATE:
            raise HtmlGenerationError("The classic template cannot be unregistered", template_name=name)

        cls._templates.pop(name, None)
        logger.info(f"Unregistered template: {name}")
