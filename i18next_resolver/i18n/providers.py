"""Resource providers.

A resource provider enumerates resource identifiers matching a glob pattern
and returns the raw text of a resource. The loader never touches the
filesystem directly.
"""

import fnmatch
import glob
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Protocol, runtime_checkable

from i18next_resolver.logging import get_module_logger

logger = get_module_logger()


@runtime_checkable
class ResourceProvider(Protocol):
    """Protocol for resource providers used by the loader."""

    def list_files(self, pattern: str) -> List[str]:
        """Return identifiers matching a glob pattern, in a stable order."""
        ...

    def read_file(self, identifier: str) -> str:
        """Return the raw text of a resource.

        Raises:
            FileNotFoundError: If the resource does not exist.
        """
        ...


class FileSystemResourceProvider:
    """Provider reading resources from disk.

    Patterns are passed to ``glob.glob``; relative patterns are resolved
    against ``base_dir`` when one is given. Identifiers are returned in the
    same form as the pattern (relative stays relative) and sorted.

    Attributes:
        base_dir: Optional directory relative patterns are resolved against.
        encoding: Text encoding of resource files.
    """

    def __init__(self, base_dir: Optional[Path] = None, encoding: str = "utf-8"):
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self.encoding = encoding

    def list_files(self, pattern: str) -> List[str]:
        root_dir = str(self.base_dir) if self.base_dir is not None else None
        matches = sorted(glob.glob(pattern, root_dir=root_dir))
        logger.debug("listed_resources", pattern=pattern, match_count=len(matches))
        return matches

    def read_file(self, identifier: str) -> str:
        path = Path(identifier)
        if self.base_dir is not None and not path.is_absolute():
            path = self.base_dir / path
        with open(path, "r", encoding=self.encoding) as f:
            return f.read()


class InMemoryResourceProvider:
    """Provider serving resources from a dict of identifier -> text.

    Useful for embedding resources and for tests. Patterns are matched with
    ``fnmatch``, where ``*`` does not cross ``/`` boundaries the way
    ``glob`` does.
    """

    def __init__(self, resources: Optional[Mapping[str, str]] = None):
        self.resources: Dict[str, str] = dict(resources or {})

    def add(self, identifier: str, text: str) -> None:
        self.resources[identifier] = text

    def list_files(self, pattern: str) -> List[str]:
        segments = pattern.split("/")
        return sorted(
            identifier
            for identifier in self.resources
            if _segments_match(identifier.split("/"), segments)
        )

    def read_file(self, identifier: str) -> str:
        try:
            return self.resources[identifier]
        except KeyError as e:
            raise FileNotFoundError(f"Resource not found: {identifier}") from e


def _segments_match(parts: List[str], patterns: List[str]) -> bool:
    if len(parts) != len(patterns):
        return False
    return all(
        fnmatch.fnmatchcase(part, pattern) for part, pattern in zip(parts, patterns)
    )
