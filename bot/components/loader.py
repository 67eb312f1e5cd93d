"""
Discovery of component handlers on disk.

Handlers live under a root directory split into `buttons`, `modals` and
`selects` subdirectories, nested arbitrarily. Every source file exports a
callable `default` and, optionally, a `config` object.
"""
import logging
import pathlib
from typing import Iterable, Iterator

from app.utils.module_loader import import_module_from_path, iter_source_files
from bot.components.category import ComponentCategory
from bot.components.exceptions import ComponentLoadError
from bot.components.models import Component

log = logging.getLogger(__name__)


def fetch_components(root: str | pathlib.Path, extensions: Iterable[str] = (".py",)) -> Iterator[Component]:
    """
    Import every handler module under `root` and yield its component.

    A missing root yields nothing. Files that are not inside one of the
    category directories are skipped with a warning. Any module that fails
    to import aborts the scan.

    Args:
        root (str | pathlib.Path): Directory holding the category subdirectories.
        extensions (Iterable[str]): Accepted handler file extensions.

    Raises:
        ComponentLoadError: If a module raises on import or has no callable `default`.

    Yields:
        Component: One per eligible handler file, in scan order.
    """
    root = pathlib.Path(root)
    if not root.is_dir():
        log.warning(f"⚠️ {root} directory not found")
        return

    present = [category.value for category in ComponentCategory if (root / category.value).is_dir()]
    log.debug(f"Category directories present: {', '.join(present) or 'none'}")

    for path in iter_source_files(root, extensions):
        yield from _load_component(root, path)


def _load_component(root: pathlib.Path, path: pathlib.Path) -> Iterator[Component]:
    name = path.name.split(".")[0]

    try:
        module = import_module_from_path(path, root)
    except (Exception, SystemExit) as exc:
        raise ComponentLoadError(path, f"{type(exc).__name__}: {exc}") from exc

    parts = path.relative_to(root).parts
    category = ComponentCategory.from_directory(parts[0]) if len(parts) > 1 else None
    if category is None:
        log.warning(f"⚠️ Category for \"{name}\" could not be determined, skipping")
        return

    callback = getattr(module, "default", None)
    if not callable(callback):
        raise ComponentLoadError(path, "module does not export a callable 'default'")

    yield Component(
        name=name,
        category=category,
        callback=callback,
        config=getattr(module, "config", None),
    )
