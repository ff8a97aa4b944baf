"""Store API port (abstract interface).

Defines the contract for the two boundary calls the storefront depends on
(fetch the catalogue, submit an order) plus the admin product creation call.
Adapters never raise for transport or server problems: every outcome comes
back as a result object.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class CatalogResult:
    """Outcome of a catalogue fetch."""

    success: bool
    products: tuple = field(default_factory=tuple)
    failure_reason: str | None = None


@dataclass(frozen=True)
class OrderResult:
    """Outcome of an order submission."""

    success: bool
    order_id: str | None = None
    failure_reason: str | None = None


@dataclass(frozen=True)
class ProductResult:
    """Outcome of an admin product creation."""

    success: bool
    product: object | None = None
    failure_reason: str | None = None


class StoreApi(ABC):
    """Abstract store API interface."""

    @abstractmethod
    def fetch_products(self) -> CatalogResult:
        """Fetch the full product catalogue."""
        ...

    @abstractmethod
    def submit_order(self, draft) -> OrderResult:
        """Submit an ``OrderDraft``.

        Returns:
            OrderResult carrying the server-assigned order id on success.
        """
        ...

    @abstractmethod
    def create_product(self, new_product) -> ProductResult:
        """Create a catalogue product from a ``NewProductRequest``."""
        ...
