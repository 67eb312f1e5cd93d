"""
Data model for discovered component handlers.
"""
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Union

from bot.components.category import ComponentCategory

# A handler takes the interaction and may return a plain value or an awaitable.
ComponentCallback = Callable[[Any], Union[Any, Awaitable[Any]]]


@dataclass(frozen=True)
class Component:
    """
    A single component handler.

    Attributes:
        name (str): Handler name, matched against the interaction's custom id.
        category (ComponentCategory): Category the handler answers to.
        callback (ComponentCallback): Function invoked with the interaction.
        config (Any): Optional `config` object exported by the handler module.
    """

    name: str
    category: ComponentCategory
    callback: ComponentCallback = field(compare=False)
    config: Any = field(default=None, compare=False)

    @property
    def key(self) -> tuple[str, ComponentCategory]:
        return self.name, self.category
