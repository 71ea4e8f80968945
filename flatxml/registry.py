"""Registry mapping element names to union variants."""

from typing import Iterable, Iterator

from flatxml.exceptions import RegistryError
from flatxml.types import Variant


class VariantRegistry:
    """An ordered, immutable table of (tag, variant class) pairs for one union.

    Tags are matched case-sensitively. Duplicate tags, and a variant class
    registered under more than one tag, are rejected when the registry is
    built.

    Args:
        name: Name of the union, used in error messages
        entries: (tag, variant class) pairs in declaration order

    Example:
        >>> class Voltage(Variant): ...
        >>> class Power(Variant): ...
        >>> tags = VariantRegistry("ControlKind", [("Voltage", Voltage), ("Power", Power)])
        >>> tags.resolve("Power") is Power
        True
        >>> tags.resolve("power") is None
        True
    """

    def __init__(self, name: str, entries: Iterable[tuple[str, type[Variant]]]):
        self.name = name
        self._entries = tuple(entries)

        if not self._entries:
            raise RegistryError(f"{name} registry has no variants")

        self._by_tag: dict[str, type[Variant]] = {}
        self._by_class: dict[type[Variant], str] = {}
        for tag, variant_class in self._entries:
            if not isinstance(tag, str) or not tag:
                raise RegistryError(f"{name} registry has an empty or non-string tag: {tag!r}")
            if not (isinstance(variant_class, type) and issubclass(variant_class, Variant)):
                raise RegistryError(f"{name} registry entry <{tag}> is not a Variant subclass")
            if tag in self._by_tag:
                raise RegistryError(f"{name} registry has duplicate tag <{tag}>")
            if variant_class in self._by_class:
                raise RegistryError(
                    f"{name} registry maps {variant_class.__name__} to both "
                    f"<{self._by_class[variant_class]}> and <{tag}>"
                )
            self._by_tag[tag] = variant_class
            self._by_class[variant_class] = tag

    @property
    def tags(self) -> tuple[str, ...]:
        """Registered tags in declaration order."""
        return tuple(tag for tag, _ in self._entries)

    def resolve(self, tag: str) -> type[Variant] | None:
        """Return the variant class registered for tag, or None."""
        return self._by_tag.get(tag)

    def tag_of(self, variant: Variant) -> str:
        """Return the tag a variant instance is written under.

        Raises:
            TypeError: If the variant's class is not registered
        """
        try:
            return self._by_class[type(variant)]
        except KeyError:
            raise TypeError(
                f"{type(variant).__name__} is not a variant of {self.name} "
                f"(expected one of {', '.join(c.__name__ for c in self._by_class)})"
            ) from None

    def __contains__(self, tag: object) -> bool:
        return tag in self._by_tag

    def __iter__(self) -> Iterator[tuple[str, type[Variant]]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"VariantRegistry({self.name!r}, tags={list(self.tags)!r})"
