"""
Dynamic loader for modules stored in a plain directory tree.

This module provides utilities to walk a directory for source files and to
import each of them by path, without requiring the directory to be an
importable package. Useful for automatic registration patterns such as
loading component handlers, plugins, or route definitions.
"""
import hashlib
import importlib.machinery
import importlib.util
import logging
import os
import pathlib
import sys
from types import ModuleType
from typing import Iterable, Iterator

log = logging.getLogger(__name__)

_MODULE_NAMESPACE = "_dynamic_modules"


def iter_source_files(
        root: pathlib.Path,
        extensions: Iterable[str] = (".py",),
        skip_prefixes: tuple[str, ...] = ("_",),
        skip_dirs: set[str] = None,
) -> Iterator[pathlib.Path]:
    """
    Recursively yield source files under a directory.

    The walk is top-down and deterministic: the files of a directory are
    yielded in sorted order before any of its subdirectories are entered,
    and subdirectories are visited in sorted order. Directories themselves
    are never yielded.

    Args:
        root (pathlib.Path): Directory to walk.
        extensions (Iterable[str]): Accepted file extensions, including the dot.
        skip_prefixes (tuple[str, ...]): File names starting with one of these are ignored.
        skip_dirs (set[str], optional): Directory names that are not entered.
            Defaults to {"__pycache__"}.

    Yields:
        pathlib.Path: Path of each eligible file, relative paths kept relative to `root`.
    """
    if skip_dirs is None:
        skip_dirs = {"__pycache__"}

    extensions = tuple(extensions)

    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in skip_dirs)

        for filename in sorted(filenames):
            if filename.startswith(skip_prefixes):
                continue
            if not filename.endswith(extensions):
                continue
            yield pathlib.Path(dirpath) / filename


def import_module_from_path(path: pathlib.Path, root: pathlib.Path | None = None) -> ModuleType:
    """
    Import a Python source file as a module.

    The module is registered in `sys.modules` under a name derived from its
    location relative to `root` (the file's own directory when omitted).
    `root` and every directory between it and the file become packages, so
    a module can import its neighbours, e.g. `from . import _shared`. The
    file is always read as Python source, whatever its extension. On failure
    the registration is rolled back and the original exception propagates.

    Args:
        path (pathlib.Path): Source file to import.
        root (pathlib.Path, optional): Directory the module name is derived from.

    Raises:
        ImportError: If no import spec can be built for the file.
        Exception: Whatever the module raises while executing.

    Returns:
        ModuleType: The executed module.
    """
    path = pathlib.Path(path).resolve()
    root = path.parent if root is None else pathlib.Path(root).resolve()
    if not path.is_relative_to(root):
        root = path.parent
    module_name = _module_name_for(path, root)

    _ensure_packages(module_name, root, path.parent)

    loader = importlib.machinery.SourceFileLoader(module_name, str(path))
    spec = importlib.util.spec_from_file_location(module_name, path, loader=loader)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot build an import spec for {path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(module_name, None)
        raise

    log.debug(f"📦 Module loaded: '{module_name}' from {path}")
    return module


def _module_name_for(path: pathlib.Path, root: pathlib.Path) -> str:
    """Build a dotted module name that is unique per file location."""
    parts = [_identifier(part) for part in path.with_suffix("").relative_to(root).parts]
    return ".".join([_namespace_for(root), *parts])


def _namespace_for(root: pathlib.Path) -> str:
    digest = hashlib.sha1(str(root).encode("utf-8")).hexdigest()[:10]
    return f"{_MODULE_NAMESPACE}_{digest}"


def _identifier(part: str) -> str:
    return part.replace(".", "_").replace("-", "_").replace(" ", "_")


def _ensure_packages(module_name: str, root: pathlib.Path, directory: pathlib.Path) -> None:
    """Register `root` and the directories below it down to `directory` as packages."""
    package_names = module_name.split(".")[:-1]
    relative = directory.relative_to(root).parts

    location = root
    for depth, _ in enumerate(package_names):
        if depth:
            location = location / relative[depth - 1]
        name = ".".join(package_names[:depth + 1])

        package = sys.modules.get(name)
        if package is not None and list(getattr(package, "__path__", [])) == [str(location)]:
            continue

        spec = importlib.machinery.ModuleSpec(name, None, is_package=True)
        spec.submodule_search_locations.append(str(location))
        sys.modules[name] = importlib.util.module_from_spec(spec)
