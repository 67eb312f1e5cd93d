"""
Component categories and the canonical category inference.

A component handler lives in one of three categories. The same enum is used
to classify a handler by the directory it was found in and to classify an
incoming interaction by its component type, so a handler registered as a
button is only ever reachable by button interactions.
"""
from enum import Enum

import discord

_SELECT_TYPES = frozenset({
    discord.ComponentType.string_select,
    discord.ComponentType.user_select,
    discord.ComponentType.role_select,
    discord.ComponentType.mentionable_select,
    discord.ComponentType.channel_select,
})


class ComponentCategory(str, Enum):
    """Closed set of handler categories, valued by their directory names."""

    BUTTONS = "buttons"
    MODALS = "modals"
    SELECTS = "selects"

    @property
    def singular(self) -> str:
        """Human-readable singular label, e.g. 'Button'."""
        return self.value[:-1].capitalize()

    @classmethod
    def from_directory(cls, name: str) -> "ComponentCategory | None":
        """
        Resolve a category from a directory name.

        Args:
            name (str): Name of the directory a handler was found in.

        Returns:
            ComponentCategory | None: The category, or None if the name is not one of the three.
        """
        try:
            return cls(name)
        except ValueError:
            return None

    @classmethod
    def from_component_type(cls, component_type) -> "ComponentCategory":
        """
        Resolve a category from an interaction's component type.

        Buttons map to BUTTONS, every select menu variant maps to SELECTS and
        anything else (including a missing type, as sent with modal
        submissions) falls back to MODALS.

        Args:
            component_type (discord.ComponentType | int | None): Raw or typed component kind.

        Returns:
            ComponentCategory: Never None.
        """
        if not isinstance(component_type, discord.ComponentType):
            try:
                component_type = discord.ComponentType(component_type)
            except (ValueError, TypeError):
                return cls.MODALS

        if component_type == discord.ComponentType.button:
            return cls.BUTTONS
        if component_type in _SELECT_TYPES:
            return cls.SELECTS
        return cls.MODALS
