"""
Domain entities for purchase tracking.
"""

from dataclasses import dataclass, field
from datetime import datetime as DateTime, timezone
from enum import Enum
from typing import Optional, Dict, Any, Tuple
import math

from frosty_pine.domain.interfaces.base import ValueObject
from frosty_pine.domain.exceptions import ValidationError
from frosty_pine.domain.models.identifier import new_identifier

PRICE_DECIMAL_PLACES = 2


def round_half_away_from_zero(value: float, decimal_places: int = PRICE_DECIMAL_PLACES) -> float:
    """Round at the given decimal place, ties going away from zero."""
    factor = 10 ** decimal_places
    scaled = value * factor
    if scaled >= 0:
        return math.floor(scaled + 0.5) / factor
    return math.ceil(scaled - 0.5) / factor


@dataclass(frozen=True)
class Brand(ValueObject):
    """A brand products are sold under."""

    name: str
    id: str = field(default_factory=new_identifier)

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'name': self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Brand':
        return cls(id=data['id'], name=data['name'])


@dataclass(frozen=True)
class Category(ValueObject):
    """A product category."""

    name: str
    id: str = field(default_factory=new_identifier)

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'name': self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Category':
        return cls(id=data['id'], name=data['name'])


@dataclass(frozen=True)
class Store(ValueObject):
    """A place where transactions happen."""

    name: str
    id: str = field(default_factory=new_identifier)

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'name': self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Store':
        return cls(id=data['id'], name=data['name'])


@dataclass(frozen=True)
class Product(ValueObject):
    """A product, holding snapshots of its brand and category."""

    name: str
    brand: Brand
    category: Category
    id: str = field(default_factory=new_identifier)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'brand': self.brand.to_dict(),
            'category': self.category.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Product':
        return cls(
            id=data['id'],
            name=data['name'],
            brand=Brand.from_dict(data['brand']),
            category=Category.from_dict(data['category'])
        )


class UnitKind(Enum):
    """Pricing basis of an item."""
    NONE = "none"
    QUANTITY = "quantity"
    KILOGRAMS = "kilograms"
    LITERS = "liters"


@dataclass(frozen=True)
class Unit(ValueObject):
    """How much of a product an item covers.

    ``NONE`` means the unitary price is the full price and carries no amount.
    Every other kind carries the magnitude the unitary price is multiplied by.
    """

    kind: UnitKind = UnitKind.NONE
    amount: Optional[float] = None

    def __post_init__(self):
        """Validate unit after initialization."""
        if not isinstance(self.kind, UnitKind):
            raise ValidationError(
                f"Unit kind must be a UnitKind enum, got {type(self.kind)}",
                field='kind', value=self.kind
            )

        if self.kind == UnitKind.NONE:
            if self.amount is not None:
                raise ValidationError("Unit NONE carries no amount", field='amount', value=self.amount)
            return

        if self.amount is None or isinstance(self.amount, bool) \
                or not isinstance(self.amount, (int, float)):
            raise ValidationError(
                f"Unit {self.kind.name} requires a numeric amount",
                field='amount', value=self.amount
            )
        # ints are accepted but stored as floats
        object.__setattr__(self, 'amount', float(self.amount))

    @classmethod
    def none(cls) -> 'Unit':
        return cls()

    @classmethod
    def quantity(cls, amount: float) -> 'Unit':
        return cls(UnitKind.QUANTITY, amount)

    @classmethod
    def kilograms(cls, weight: float) -> 'Unit':
        return cls(UnitKind.KILOGRAMS, weight)

    @classmethod
    def liters(cls, volume: float) -> 'Unit':
        return cls(UnitKind.LITERS, volume)

    @property
    def multiplier(self) -> float:
        """Factor applied to the unitary price."""
        if self.kind == UnitKind.NONE:
            return 1.0
        return self.amount

    def to_dict(self) -> Dict[str, Any]:
        return {'kind': self.kind.value, 'amount': self.amount}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Unit':
        return cls(UnitKind(data['kind']), data.get('amount'))


@dataclass(frozen=True)
class Item(ValueObject):
    """A priced line: a product, how much of it, and the price per unit."""

    product: Product
    unitary_price: float
    unit: Unit = field(default_factory=Unit.none)
    id: str = field(default_factory=new_identifier)

    def calculate_full_price(self) -> float:
        """Full price of the line, unrounded."""
        if self.unit.kind == UnitKind.NONE:
            return self.unitary_price
        return self.unit.multiplier * self.unitary_price

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'product': self.product.to_dict(),
            'unit': self.unit.to_dict(),
            'unitary_price': self.unitary_price,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Item':
        return cls(
            id=data['id'],
            product=Product.from_dict(data['product']),
            unit=Unit.from_dict(data['unit']),
            unitary_price=data['unitary_price']
        )


@dataclass(frozen=True)
class Transaction(ValueObject):
    """Items bought together at a store at a point in time."""

    store: Store
    items: Tuple[Item, ...] = ()
    datetime: DateTime = field(default_factory=lambda: DateTime.now(timezone.utc))
    id: str = field(default_factory=new_identifier)

    def __post_init__(self):
        """Normalize items and datetime."""
        object.__setattr__(self, 'items', tuple(self.items))

        if not isinstance(self.datetime, DateTime):
            raise ValidationError(
                "Transaction datetime must be a datetime",
                field='datetime', value=self.datetime
            )

        # Naive datetimes are taken to be UTC
        if self.datetime.tzinfo is None:
            object.__setattr__(self, 'datetime', self.datetime.replace(tzinfo=timezone.utc))

    def calculate_total(self) -> float:
        """Sum of item full prices, rounded to cents."""
        total = sum(item.calculate_full_price() for item in self.items)
        return round_half_away_from_zero(total)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'store': self.store.to_dict(),
            'items': [item.to_dict() for item in self.items],
            'datetime': self.datetime.isoformat(),
            'total': self.calculate_total(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Transaction':
        return cls(
            id=data['id'],
            store=Store.from_dict(data['store']),
            items=tuple(Item.from_dict(item) for item in data.get('items', [])),
            datetime=DateTime.fromisoformat(data['datetime'])
        )
