"""
Data model for site generation
Products, specifications and the site content passed to templates
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Union

from ..utils.common import ensure_list, parse_flag, text_or_empty

DEFAULT_PRIMARY_COLOR = "#4f46e5"
DEFAULT_SECONDARY_COLOR = "#10b981"
DEFAULT_INCLUDE_BRANDING = True


class TemplateName(str, Enum):
    """Available page layouts"""
    CLASSIC = "classic"
    TABLE = "table"
    GRID = "grid"
    ANALYST = "analyst"

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]


DEFAULT_TEMPLATE = TemplateName.CLASSIC.value


@dataclass(frozen=True)
class Specification:
    """One key/value attribute row of a product"""
    id: Any
    key: str
    value: str
    include: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Specification':
        """
        Build from a mapping

        A missing 'include' flag defaults to True. Only None key or value
        becomes an empty string, so numeric zeros are kept.
        """
        return cls(
            id=data.get('id'),
            key=text_or_empty(data.get('key')),
            value=text_or_empty(data.get('value')),
            include=parse_flag(data.get('include'), 'include')
        )


@dataclass(frozen=True)
class Product:
    """One reviewed item on the page"""
    id: Any
    name: str = ""
    image_url: str = ""
    tagline: str = ""
    pros: List[str] = field(default_factory=list)
    cons: List[str] = field(default_factory=list)
    affiliate_link: str = ""
    specifications: List[Specification] = field(default_factory=list)

    def included_specifications(self) -> List[Specification]:
        """Specifications marked for output, in their original order"""
        return [spec for spec in self.specifications if spec.include]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Product':
        """
        Build a product from a mapping

        Accepts camelCase keys (imageUrl, affiliateLink) as produced by the
        form layer, or snake_case keys. Missing collections become empty lists.
        """
        specifications = [
            spec if isinstance(spec, Specification) else Specification.from_dict(spec)
            for spec in ensure_list(data.get('specifications'))
        ]

        return cls(
            id=data.get('id'),
            name=text_or_empty(data.get('name')),
            image_url=_first_present(data, 'imageUrl', 'image_url'),
            tagline=text_or_empty(data.get('tagline')),
            pros=[str(pro) for pro in ensure_list(data.get('pros'))],
            cons=[str(con) for con in ensure_list(data.get('cons'))],
            affiliate_link=_first_present(data, 'affiliateLink', 'affiliate_link'),
            specifications=specifications
        )


ProductInput = Union[Product, Dict[str, Any]]


@dataclass(frozen=True)
class SiteContent:
    """Everything needed to render one page"""
    niche_title: str
    products: List[Product] = field(default_factory=list)
    primary_color: str = DEFAULT_PRIMARY_COLOR
    secondary_color: str = DEFAULT_SECONDARY_COLOR
    include_branding: bool = DEFAULT_INCLUDE_BRANDING
    template: str = DEFAULT_TEMPLATE


def _first_present(data: Dict[str, Any], *keys: str) -> str:
    for key in keys:
        if data.get(key):
            return str(data[key])
    return ""


def normalise_product(product: ProductInput) -> Product:
    """Return a Product, converting mappings and leaving Product instances untouched"""
    if isinstance(product, Product):
        return product
    return Product.from_dict(product)


def normalise_products(products: Optional[Iterable[ProductInput]]) -> List[Product]:
    """Normalise a product sequence; None becomes an empty list"""
    return [normalise_product(product) for product in ensure_list(products)]
