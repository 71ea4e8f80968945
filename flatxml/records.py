"""Record types and their unions."""

from typing import Annotated, ClassVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_pascal

from flatxml.registry import VariantRegistry
from flatxml.types import EmptyIsAbsent, Flattened, Variant
from flatxml.values import F32


class Voltage(Variant):
    """Device controlled by supply voltage."""


class Power(Variant):
    """Device controlled by power draw."""


class Dollars(Variant):
    """Price in US dollars."""


class Euros(Variant):
    """Price in euros."""


ControlKind = Voltage | Power
PriceKind = Dollars | Euros

CONTROL_TAGS = VariantRegistry("ControlKind", [("Voltage", Voltage), ("Power", Power)])
PRICE_TAGS = VariantRegistry("PriceKind", [("Dollars", Dollars), ("Euros", Euros)])


class _Record(BaseModel):
    """Common configuration: PascalCase element names, immutable values."""

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True, frozen=True)

    xml_root: ClassVar[str] = "Record"


class DeviceRecord(_Record):
    """A named device and how it is controlled.

    Example:
        >>> DeviceRecord(name="MyDevice", control=Power(3.5))
        DeviceRecord(name='MyDevice', control=Power(3.5))

    Written as::

        <DeviceTag>
          <Name>MyDevice</Name>
          <Power>3.5</Power>
        </DeviceTag>
    """

    xml_root: ClassVar[str] = "DeviceTag"

    name: str
    control: Annotated[ControlKind, Flattened(CONTROL_TAGS)]


class ProductRecord(_Record):
    """A named product with a price and an optional discount.

    Written as::

        <ProductTag>
          <Name>Scrub Daddy</Name>
          <Dollars>6.0</Dollars>
          <Discount>25.5</Discount>
        </ProductTag>

    An absent discount is written as ``<Discount />``.
    """

    xml_root: ClassVar[str] = "ProductTag"

    name: str
    price: Annotated[PriceKind, Flattened(PRICE_TAGS)]
    discount: Annotated[F32 | None, EmptyIsAbsent()] = None
