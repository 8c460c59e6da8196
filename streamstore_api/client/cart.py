"""Shopping cart and WhatsApp checkout.

The cart lives only in memory on the client: it holds copies of the
product records plus a quantity and disappears with the process.  There
is no stock, so adding never fails.  Checkout turns the cart into a
plain-text order summary and a ``wa.me`` deep link carrying it; the
order is never stored anywhere.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Iterator, List, Optional
from urllib.parse import quote

CENT = Decimal("0.01")

# Characters left unescaped by JavaScript's encodeURIComponent.
_URI_SAFE = "-_.!~*'()"


def _to_decimal(value: Any) -> Decimal:
    # str() first so 24.9 becomes Decimal("24.9"), not its binary expansion.
    return Decimal(str(value))


@dataclass
class CartItem:
    """A product in the cart together with its quantity."""

    id: int
    service_id: int
    name: str
    price: Decimal
    description: Optional[str] = None
    observations: Optional[str] = None
    image: Optional[str] = None
    quantity: int = 1

    @classmethod
    def from_product(cls, product: Dict[str, Any]) -> "CartItem":
        return cls(
            id=product["id"],
            service_id=product["service_id"],
            name=product["name"],
            price=_to_decimal(product["price"]),
            description=product.get("description"),
            observations=product.get("observations"),
            image=product.get("image"),
        )

    @property
    def subtotal(self) -> Decimal:
        return (self.price * self.quantity).quantize(CENT, rounding=ROUND_HALF_UP)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class Cart:
    """Ordered collection of cart items, unique by product id."""

    def __init__(self) -> None:
        self.items: List[CartItem] = []

    def __iter__(self) -> Iterator[CartItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def get(self, product_id: int) -> Optional[CartItem]:
        for item in self.items:
            if item.id == product_id:
                return item
        return None

    def add(self, product: Dict[str, Any]) -> CartItem:
        """Add one unit of ``product``.

        A product already in the cart gets its quantity incremented;
        otherwise it is appended with quantity 1.
        """
        item = self.get(product["id"])
        if item is not None:
            item.quantity += 1
            return item
        item = CartItem.from_product(product)
        self.items.append(item)
        return item

    def update_quantity(self, product_id: int, delta: int) -> Optional[CartItem]:
        """Change the quantity by ``delta``, never going below 1.

        Unknown product ids are ignored and return ``None``.
        """
        item = self.get(product_id)
        if item is None:
            return None
        item.quantity = max(1, item.quantity + delta)
        return item

    def remove(self, product_id: int) -> bool:
        before = len(self.items)
        self.items = [item for item in self.items if item.id != product_id]
        return len(self.items) != before

    def clear(self) -> None:
        self.items = []

    def total(self) -> Decimal:
        """Sum of price × quantity over all items, recomputed on each call."""
        total = sum((item.price * item.quantity for item in self.items), Decimal("0"))
        return total.quantize(CENT, rounding=ROUND_HALF_UP)

    def count(self) -> int:
        """Number of units in the cart (the badge on the cart button)."""
        return sum(item.quantity for item in self.items)


def format_money(amount: Decimal, currency_symbol: str = "R$") -> str:
    return f"{currency_symbol} {amount.quantize(CENT, rounding=ROUND_HALF_UP)}"


def build_order_message(cart: Cart, *, store_name: str = "StreamStore", currency_symbol: str = "R$") -> str:
    """Render the cart as the order text sent to the shop.

    The text uses WhatsApp markup (``*bold*``, ``_italic_``)::

        *Novo Pedido - StreamStore*

        - Canva Pro (2x): R$ 31.80

        *Total: R$ 31.80*

        _Aguardando instruções para pagamento._
    """
    if not len(cart):
        raise ValueError("Cannot build an order from an empty cart")
    lines = [
        f"- {item.name} ({item.quantity}x): {format_money(item.subtotal, currency_symbol)}"
        for item in cart
    ]
    return (
        f"*Novo Pedido - {store_name}*\n\n"
        + "\n".join(lines)
        + f"\n\n*Total: {format_money(cart.total(), currency_symbol)}*"
        + "\n\n_Aguardando instruções para pagamento._"
    )


def build_checkout_url(
    cart: Cart,
    phone_number: str,
    *,
    store_name: str = "StreamStore",
    currency_symbol: str = "R$",
) -> str:
    """Return the ``https://wa.me`` deep link carrying the order message."""
    digits = "".join(ch for ch in phone_number if ch.isdigit())
    if not digits:
        raise ValueError("A WhatsApp number is required for checkout")
    message = build_order_message(cart, store_name=store_name, currency_symbol=currency_symbol)
    return f"https://wa.me/{digits}?text={quote(message, safe=_URI_SAFE)}"
