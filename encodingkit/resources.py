"""
Path resolution.

A path is either a direct filesystem reference or the name of a bundled
resource. Absolute paths are used as-is; other names are looked up in the
locator's roots first and then relative to the working directory.
"""

from __future__ import annotations

import logging
import os
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .config import Settings, get_settings
from .errors import ResourceNotFoundError

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class ResourceLocator:
    """Ordered set of directories holding bundled resources"""

    def __init__(self, roots: Iterable[PathLike] = ()):
        self.roots: List[Path] = [Path(root) for root in roots]

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ResourceLocator":
        settings = settings or get_settings()
        return cls(settings.resource_dirs)

    @classmethod
    def for_package(cls, package: str, subdir: str = "") -> "ResourceLocator":
        """Locator over data shipped inside an installed package directory."""
        root = importlib_resources.files(package)
        if subdir:
            root = root.joinpath(subdir)
        return cls([Path(str(root))])

    def find(self, name: PathLike) -> Optional[Path]:
        for root in self.roots:
            candidate = root / name
            if candidate.is_file():
                logger.debug("Resolved %s in resource root %s", name, root)
                return candidate
        return None

    def __repr__(self) -> str:
        return f"ResourceLocator({[str(r) for r in self.roots]!r})"


def resolve_path(path: PathLike, locator: Optional[ResourceLocator] = None) -> Path:
    """
    Resolve a path or resource name to an existing regular file.

    Raises ResourceNotFoundError when neither the resource roots nor the
    filesystem hold a regular file under that name.
    """
    candidate = Path(path)

    if candidate.is_absolute():
        if candidate.is_file():
            return candidate
        raise ResourceNotFoundError(path)

    if locator is None:
        locator = ResourceLocator.from_settings()

    found = locator.find(candidate)
    if found is not None:
        return found

    if candidate.is_file():
        logger.debug("Resolved %s relative to %s", path, os.getcwd())
        return candidate

    raise ResourceNotFoundError(path)
