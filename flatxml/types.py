"""Core data types for flatxml."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from pydantic import ConfigDict, RootModel
from pydantic.fields import FieldInfo

from flatxml.values import F32

if TYPE_CHECKING:
    from flatxml.registry import VariantRegistry


# Key under which an element's direct text content appears in a structural view.
TEXT_KEY = "$text"

Node = Union[str, dict[str, "Node"]]
"""A child element's value in a structural view: its text, or a mapping of its children."""


class Variant(RootModel[F32]):
    """One arm of a tagged union whose tag is the element name.

    Subclasses are the variants; the payload is a single 32-bit float.
    Two variants are equal only if they are the same class with the
    same payload.

    Example:
        >>> class Voltage(Variant):
        ...     pass
        >>> Voltage(2.5).value
        2.5
    """

    model_config = ConfigDict(frozen=True)

    @property
    def value(self) -> float:
        """The variant's payload."""
        return self.root

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.root!r})"


@dataclass(frozen=True)
class PlainText:
    """Leaf value written as bare text: ``<Voltage>2.5</Voltage>``."""
    text: str


@dataclass(frozen=True)
class WrappedText:
    """Leaf value written inside a text-content element: ``<Voltage><Text>2.5</Text></Voltage>``."""
    text: str


LeafText = Union[PlainText, WrappedText]


@dataclass(frozen=True)
class Flattened:
    """Field marker: the union is written as one sibling element named after the variant.

    Use as ``Annotated[ControlKind, Flattened(CONTROL_TAGS)]``.

    Attributes:
        registry: Maps element names to variant classes
    """
    registry: "VariantRegistry"


@dataclass(frozen=True)
class EmptyIsAbsent:
    """Field marker: an optional number whose empty element means "no value"."""


def hook_marker(field_info: FieldInfo) -> Flattened | EmptyIsAbsent | None:
    """Return the Flattened or EmptyIsAbsent marker attached to a field, if any."""
    for item in field_info.metadata:
        if isinstance(item, (Flattened, EmptyIsAbsent)):
            return item
    return None
