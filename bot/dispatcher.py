"""
Component dispatcher initialization module.

Scans the components directory once, builds the handler registry and hands
back a callable that routes each incoming interaction to its handler.
"""
import enum
import inspect
import logging
import pathlib
from collections.abc import Mapping
from typing import Any, Iterable

from app.config import settings
from bot.components.category import ComponentCategory
from bot.components.exceptions import ComponentError
from bot.components.loader import fetch_components
from bot.components.models import Component
from bot.components.registry import ComponentRegistry

log = logging.getLogger(__name__)


class DispatchOutcome(enum.Enum):
    """Result of a single dispatch."""

    HANDLED = "handled"
    NOT_FOUND = "not_found"
    FAILED = "failed"


class ComponentDispatcher:
    """
    Routes interactions to component handlers.

    Holds a frozen registry and no other state, so any number of dispatches
    may run concurrently. Calling the dispatcher always completes normally;
    a failing handler is logged and never propagates.

    Attributes:
        registry (ComponentRegistry): Read-only handler registry.
    """

    def __init__(self, registry: ComponentRegistry):
        self.registry = registry.freeze()

    async def __call__(self, interaction: Any) -> None:
        await self.dispatch(interaction)

    async def dispatch(self, interaction: Any) -> DispatchOutcome:
        """
        Find and run the handler for an interaction.

        Args:
            interaction: Raw interaction payload mapping or an object with a `data` mapping
                (e.g. `discord.Interaction`).

        Returns:
            DispatchOutcome: What happened to the interaction.
        """
        data = _interaction_data(interaction)
        category = ComponentCategory.from_component_type(data.get("component_type"))
        custom_id = data.get("custom_id")

        component = self.registry.find(custom_id, category) if isinstance(custom_id, str) else None
        if component is None:
            log.warning(f"⚠️ Component \"{custom_id}\" not found")
            return DispatchOutcome.NOT_FOUND

        return await self._invoke(component, interaction)

    @staticmethod
    async def _invoke(component: Component, interaction: Any) -> DispatchOutcome:
        """Run a handler, settling awaitable results, and absorb its failure."""
        try:
            result = component.callback(interaction)
            if inspect.isawaitable(result):
                await result
        except Exception:
            log.exception(f"❌ Component \"{component.name}\" ({component.category.value}) failed")
            return DispatchOutcome.FAILED

        log.debug(f"✅ Component \"{component.name}\" ({component.category.value}) handled")
        return DispatchOutcome.HANDLED


def _interaction_data(interaction: Any) -> Mapping:
    """Extract the `data` mapping from a raw payload or an interaction object."""
    if isinstance(interaction, Mapping):
        data = interaction.get("data")
    else:
        data = getattr(interaction, "data", None)
    return data if isinstance(data, Mapping) else {}


def build_registry(root: str | pathlib.Path, extensions: Iterable[str] = (".py",)) -> ComponentRegistry:
    """
    Scan a components directory into a registry.

    Args:
        root (str | pathlib.Path): Components directory.
        extensions (Iterable[str]): Accepted handler file extensions.

    Raises:
        ComponentLoadError: If any handler module fails to load.

    Returns:
        ComponentRegistry: Registry holding the first handler found for each name and category.
    """
    registry = ComponentRegistry()
    for component in fetch_components(root, extensions):
        registry.add(component)
    return registry


async def setup_components(
        root: str | pathlib.Path | None = None,
        extensions: Iterable[str] | None = None,
) -> ComponentDispatcher:
    """
    Load all component handlers and return the dispatcher for them.

    Nothing is dispatched before the whole scan has finished; a load failure
    aborts the setup and no dispatcher is returned.

    Args:
        root (str | pathlib.Path, optional): Components directory, defaults to `settings.components_dir`.
        extensions (Iterable[str], optional): Handler file extensions,
            defaults to `settings.component_extensions`.

    Raises:
        ComponentLoadError: If any handler module fails to load.

    Returns:
        ComponentDispatcher: Awaitable callable taking a single interaction.
    """
    root = settings.components_dir if root is None else root
    extensions = settings.component_extensions if extensions is None else extensions

    try:
        registry = build_registry(root, extensions)
    except ComponentError as exc:
        log.error(f"❌ Generating components failed: {exc}")
        raise

    log.info(registry.describe())
    return ComponentDispatcher(registry)
