"""Named property accessors.

A PropertyAccessor pairs a display name with a pure getter. The name is
what ends up in check results, so callers choose how a property is shown
independently of how it is read.

Examples:
    attr("Name", "name")            -> subject.name
    attr("City", "address.city")    -> subject.address.city
    key("Age")                      -> subject["Age"]
    prop("Age")                     -> subject["Age"] or subject.Age
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from operator import attrgetter
from typing import Any

__all__ = [
    "PropertyAccessor",
    "attr",
    "key",
    "prop",
]


@dataclass(frozen=True)
class PropertyAccessor:
    """Display name plus getter for one property of a subject.

    The getter must be deterministic and free of side effects; the
    validation chain calls it at most once per check.
    """

    name: str
    getter: Callable[[Any], Any]

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise TypeError("accessor name must be a non-empty string")
        if not callable(self.getter):
            raise TypeError(f"getter for '{self.name}' is not callable")

    def __call__(self, subject: Any) -> Any:
        return self.getter(subject)


def _split(path: str) -> list[str]:
    parts = path.split(".")
    if not all(parts):
        raise ValueError(f"invalid property path: {path!r}")
    return parts


def attr(name: str, path: str | None = None) -> PropertyAccessor:
    """Accessor reading an attribute, following dotted paths.

    Args:
        name: Display name recorded in results
        path: Attribute path, defaults to ``name``
    """
    target = path or name
    _split(target)
    return PropertyAccessor(name, attrgetter(target))


def key(name: str, path: str | None = None) -> PropertyAccessor:
    """Accessor reading a mapping key, following dotted paths through nested mappings."""
    parts = _split(path or name)

    def getter(subject):
        value = subject
        for part in parts:
            value = value[part]
        return value

    return PropertyAccessor(name, getter)


def prop(name: str) -> PropertyAccessor:
    """Accessor that reads a key from mappings and an attribute from anything else."""

    def getter(subject):
        if isinstance(subject, Mapping):
            return subject[name]
        return getattr(subject, name)

    return PropertyAccessor(name, getter)
