"""
Order assembly — extends the pricing graph with customer validation.

    CustomerDetails ─► CustomerDetailsNode ─┐
    CheckoutInput ──► ... ─► QuoteNode ─────┴─► OrderDraftNode

Assembly is all-or-nothing: any field error aborts it before a payment
backend is contacted.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from kungfu import Error, Ok, Result

from rigcart import graph as G
from rigcart.address import FieldErrors, ShippingAddress, validate_address
from rigcart.order._types import (
    AccountRequest,
    CustomerContact,
    OrderDraft,
    OrderLineItem,
)
from rigcart.pricing import CheckoutInput, QuoteNode

EMPTY_CART = "Your cart is empty"
INVALID_CART = "Some items in your cart are invalid. Please refresh and try again."
FIX_FIELDS = "Please fill in all required fields correctly"


@dataclass(frozen=True, slots=True)
class CustomerDetails:
    address: ShippingAddress
    create_account: bool = False


class OrderAssemblyError(Exception):
    """Field-level validation failure. Nothing was submitted."""

    def __init__(self, field_errors: Mapping[str, str]) -> None:
        self.field_errors: FieldErrors = dict(field_errors)
        self.message = field_errors.get("cart", FIX_FIELDS)
        super().__init__(f"{self.message}: {self.field_errors}")


@G.node
class CustomerDetailsNode:
    def __init__(self, data: Result[ShippingAddress, FieldErrors], create_account: bool) -> None:
        self.data = data
        self.create_account = create_account

    @classmethod
    def __compose__(cls, details: CustomerDetails) -> "CustomerDetailsNode":
        return cls(
            validate_address(details.address, create_account=details.create_account),
            details.create_account,
        )


@G.node
class OrderDraftNode:
    def __init__(self, data: OrderDraft) -> None:
        self.data = data

    @classmethod
    def __compose__(
        cls,
        customer: CustomerDetailsNode,
        quote: QuoteNode,
    ) -> "OrderDraftNode":
        errors: FieldErrors = {}
        if quote.data.cart.is_empty:
            errors["cart"] = EMPTY_CART
        elif quote.data.cart.rejected:
            errors["cart"] = INVALID_CART

        match customer.data:
            case Error(field_errors):
                raise OrderAssemblyError({**field_errors, **errors})
            case Ok(address) if not errors:
                pass
            case _:
                raise OrderAssemblyError(errors)

        q = quote.data
        service = q.build_service.selected
        items = tuple(OrderLineItem.from_cart_item(item) for item in q.cart.items)
        if service is not None:
            items = (*items, OrderLineItem.for_build_service(service))

        return cls(OrderDraft(
            total=q.totals.total,
            currency=q.currency,
            items=items,
            shipping_address=address,
            customer=CustomerContact(name=address.full_name, email=address.email, phone=address.phone),
            shipping=q.shipping,
            coupon=q.coupon,
            build_service=service,
            account=AccountRequest.for_address(address) if customer.create_account else AccountRequest.declined(),
            totals=q.totals,
        ))

    @classmethod
    async def assemble(
        cls,
        checkout: CheckoutInput,
        details: CustomerDetails,
    ) -> Result[OrderDraft, OrderAssemblyError]:
        try:
            node = await G.compose(cls, checkout, details)
        except OrderAssemblyError as e:
            return Error(e)
        return Ok(node.data)


async def assemble_order(
    checkout: CheckoutInput,
    details: CustomerDetails,
) -> Result[OrderDraft, OrderAssemblyError]:
    """Validate the customer, price the cart and build the OrderDraft."""
    return await OrderDraftNode.assemble(checkout, details)


__all__ = (
    "EMPTY_CART",
    "INVALID_CART",
    "FIX_FIELDS",
    "CustomerDetails",
    "OrderAssemblyError",
    "CustomerDetailsNode",
    "OrderDraftNode",
    "assemble_order",
)
