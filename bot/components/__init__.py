"""
Component handler discovery: categories, handler records, loading and registry.
"""
from .category import ComponentCategory
from .exceptions import ComponentError, ComponentLoadError
from .loader import fetch_components
from .models import Component
from .registry import ComponentRegistry

__all__ = [
    "Component",
    "ComponentCategory",
    "ComponentError",
    "ComponentLoadError",
    "ComponentRegistry",
    "fetch_components",
]
