"""Abstract repository for the session Cart.

The cart belongs to a single shopping session; the repository is how the
surrounding application hands that session's cart to the use cases.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def load(self) -> Cart:
        """Return the session cart (empty if none has been saved yet)."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist the session cart."""
