"""Immutable translation catalogs.

A catalog is a tree of :class:`Node` mappings whose leaves are :class:`Leaf`
strings. Dotted keys such as ``"nav.settings"`` address a path through the
tree. Trees are built once from a JSON-like mapping and never mutated; a
reload produces a new :class:`Catalog`.
"""

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from yogaswiss.i18n.registry import Locale

_log = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base class for catalog loading problems."""


class CatalogFormatError(CatalogError):
    """Raised when fetched catalog data is not a nested mapping."""


class CatalogFetchError(CatalogError):
    """Raised by catalog sources when a catalog cannot be retrieved."""


@dataclass(frozen=True, slots=True)
class Leaf:
    value: str


@dataclass(frozen=True, slots=True)
class Node:
    children: Mapping[str, "Leaf | Node"] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def get(self, segment: str) -> "Leaf | Node | None":
        return self.children.get(segment)


CatalogTree = Leaf | Node


def build_tree(data: Mapping, _path: str = "") -> Node:
    """Convert a JSON-like nested mapping into an immutable :class:`Node`."""
    if not isinstance(data, Mapping):
        raise CatalogFormatError(
            f"Expected a mapping at '{_path or '<root>'}', got {type(data).__name__}"
        )
    children: dict[str, CatalogTree] = {}
    for key, value in data.items():
        path = f"{_path}.{key}" if _path else str(key)
        if isinstance(value, str):
            children[str(key)] = Leaf(value)
        elif isinstance(value, Mapping):
            children[str(key)] = build_tree(value, path)
        elif isinstance(value, bool | int | float):
            children[str(key)] = Leaf(str(value))
        else:
            _log.warning("Dropping catalog entry '%s' of type %s", path, type(value).__name__)
    return Node(MappingProxyType(children))


@dataclass(frozen=True)
class Catalog:
    locale: Locale
    root: Node
    embedded: bool = False

    @classmethod
    def from_mapping(cls, locale: Locale, data: Mapping, embedded: bool = False) -> "Catalog":
        return cls(locale=locale, root=build_tree(data), embedded=embedded)

    def find(self, key: str) -> CatalogTree | None:
        """Walk ``key``'s dotted path; return the subtree or leaf it reaches."""
        current: CatalogTree = self.root
        for segment in key.split("."):
            if not isinstance(current, Node):
                return None
            nxt = current.get(segment)
            if nxt is None:
                return None
            current = nxt
        return current

    def lookup(self, key: str) -> str | None:
        """Return the string at ``key``, or None when missing or not a leaf."""
        found = self.find(key)
        if isinstance(found, Leaf):
            return found.value
        return None

    def keys(self) -> Iterator[str]:
        """Yield the dotted path of every leaf, depth first."""
        yield from _iter_leaves(self.root, "")

    def flatten(self) -> dict[str, str]:
        return {key: self.lookup(key) for key in self.keys()}

    def __len__(self) -> int:
        return sum(1 for _ in self.keys())


def _iter_leaves(node: Node, prefix: str) -> Iterator[str]:
    for name, child in node.children.items():
        path = f"{prefix}.{name}" if prefix else name
        if isinstance(child, Leaf):
            yield path
        else:
            yield from _iter_leaves(child, path)


@dataclass(frozen=True)
class CatalogPair:
    """The (primary, fallback) catalogs a translator resolves against."""

    primary: Catalog
    fallback: Catalog | None = None

    @property
    def locale(self) -> Locale:
        return self.primary.locale

    @property
    def degraded(self) -> bool:
        """True when an embedded minimal catalog stands in for a failed fetch."""
        if self.primary.embedded:
            return True
        return self.fallback is not None and self.fallback.embedded

    def merged(self) -> dict[str, str]:
        """Flat key → string dict: fallback values overridden by primary ones."""
        result = self.fallback.flatten() if self.fallback is not None else {}
        result.update(self.primary.flatten())
        return result
