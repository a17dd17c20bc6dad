"""Player attribute system."""

from draftroom.core.attributes.base import (
    ALL_ATTRIBUTES,
    ATTRIBUTE_NAMES,
    AttributeCategory,
    AttributeDefinition,
    get_attribute,
    get_by_category,
)
from draftroom.core.attributes.snapshot import AttributeSnapshot

__all__ = [
    "ALL_ATTRIBUTES",
    "ATTRIBUTE_NAMES",
    "AttributeCategory",
    "AttributeDefinition",
    "AttributeSnapshot",
    "get_attribute",
    "get_by_category",
]
