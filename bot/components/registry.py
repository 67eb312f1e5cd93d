"""
Registry of component handlers.

Collects handlers keyed by (name, category), keeps the first registration of
a key and drops later duplicates, and renders a listing of everything that
was registered.
"""
import logging
from typing import Any, Iterable, Iterator

from bot.components.category import ComponentCategory
from bot.components.exceptions import ComponentError
from bot.components.models import Component, ComponentCallback

log = logging.getLogger(__name__)


class ComponentRegistry:
    """
    Ordered collection of component handlers.

    Insertion order is kept for the listing; lookups go through a
    (name, category) index. Once frozen the registry is read-only and may be
    shared between concurrent dispatches.
    """

    def __init__(self, components: Iterable[Component] = ()):
        self._components: list[Component] = []
        self._index: dict[tuple[str, ComponentCategory], Component] = {}
        self._frozen = False

        for component in components:
            self.add(component)

    def register(
            self,
            name: str,
            category: ComponentCategory | str,
            callback: ComponentCallback,
            config: Any = None,
    ) -> Component | None:
        """
        Register a handler explicitly.

        Args:
            name (str): Handler name, matched against the interaction's custom id.
            category (ComponentCategory | str): Category or its directory name.
            callback (ComponentCallback): Function invoked with the interaction.
            config (Any, optional): Handler configuration.

        Returns:
            Component | None: The stored handler, or None if it was skipped.
        """
        resolved = category if isinstance(category, ComponentCategory) else ComponentCategory.from_directory(category)
        if resolved is None:
            log.warning(f"⚠️ Category for \"{name}\" could not be determined, skipping")
            return None

        return self.add(Component(name=name, category=resolved, callback=callback, config=config))

    def add(self, component: Component) -> Component | None:
        """
        Store a handler unless one with the same name and category exists.

        Returns:
            Component | None: The stored handler, or None for a duplicate.

        Raises:
            ComponentError: If the registry is frozen.
        """
        if self._frozen:
            raise ComponentError("Component registry is frozen")

        if component.key in self._index:
            log.warning(
                f"⚠️ {component.category.singular} component \"{component.name}\" "
                f"already exists, skipping the duplicate"
            )
            return None

        self._components.append(component)
        self._index[component.key] = component
        return component

    def freeze(self) -> "ComponentRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def find(self, name: str, category: ComponentCategory) -> Component | None:
        return self._index.get((name, category))

    def describe(self) -> str:
        """
        Render the registered handlers as a tree-like listing.

        The first row is marked with '┌', middle rows with '├' and the last
        row with '└'; a single handler is marked with '-'.
        """
        rows = ["Component"]
        total = len(self._components)

        for position, component in enumerate(self._components, start=1):
            if total == 1:
                connector = "-"
            elif position == 1:
                connector = "┌"
            elif position == total:
                connector = "└"
            else:
                connector = "├"
            rows.append(f"{connector} {component.name} ({component.category.value})")

        return "\n".join(rows)

    def __iter__(self) -> Iterator[Component]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def __contains__(self, key) -> bool:
        return key in self._index
