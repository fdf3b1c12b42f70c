"""
Checkout — quote, coupon, then each payment method end to end.

Run: uv run python examples/checkout_example.py
"""

from kungfu import Ok, Error

from rigcart import format_money
from rigcart.address import AddressBook, ShippingAddress
from rigcart.build_service import BuildServiceChoice
from rigcart.coupon import CouponResolver
from rigcart.order import CustomerDetails
from rigcart.payment import (
    AwaitingCardConfirmation,
    CheckoutSession,
    Completed,
    PaymentMethod,
    PostSuccessEffects,
    Redirected,
    SubmissionGuard,
    default_strategies,
)
from rigcart.pricing import CheckoutInput, quote
from rigcart.storage import ClientState, MemoryKeyValueStore, StorageKey
from examples._infra import (
    FULL_BUILD,
    ConsoleAccounts,
    ConsoleBackend,
    ConsoleConfirmer,
    ConsoleNavigator,
    StaticCoupons,
    banner,
    run,
)

ADDRESS = ShippingAddress(
    full_name="Priya Shah",
    email="priya@example.co.uk",
    phone="07700 900456",
    line1="4 Canal Street",
    city="Manchester",
    postcode="m1 3hw",
    password="s3cure-pass",
)


def session_for(state: ClientState, backend: ConsoleBackend) -> CheckoutSession:
    return CheckoutSession(
        strategies=default_strategies(backend, ConsoleConfirmer()),
        effects=PostSuccessEffects(state, ConsoleAccounts(), ConsoleNavigator()),
        guard=SubmissionGuard(),
        address_book=AddressBook(state),
    )


async def priced_checkout(state: ClientState, shipping: str = "standard") -> CheckoutInput:
    cart = tuple(await state.cart())
    choice = BuildServiceChoice("standard-assembly")
    base = await quote(CheckoutInput(cart=cart, build_service=choice, shipping_method=shipping))

    resolver = CouponResolver(StaticCoupons())
    await resolver.apply("bogus", base.totals.subtotal)
    print(f"  coupon 'bogus': {resolver.error}")
    coupon = await resolver.apply(" save10 ", base.totals.subtotal)
    print(f"  coupon 'save10': -{format_money(coupon.discount_amount)}")

    checkout = CheckoutInput(cart=cart, build_service=choice, shipping_method=shipping, coupon=coupon.applied)
    totals = (await quote(checkout)).totals
    print(f"  components {format_money(totals.components_subtotal)}"
          f" + build {format_money(totals.build_service_fee)}"
          f" - discount {format_money(totals.discount_amount)}"
          f" + shipping {format_money(totals.shipping_cost)}"
          f" = {format_money(totals.total)}")
    return checkout


async def main() -> None:
    # 1. Bank transfer, with one declined attempt first
    banner("Bank transfer")
    state = ClientState(MemoryKeyValueStore({StorageKey.CART: FULL_BUILD}))
    backend = ConsoleBackend(decline_bank=True)
    session = session_for(state, backend)
    checkout = await priced_checkout(state)

    first = await session.checkout(checkout, CustomerDetails(ADDRESS), PaymentMethod.BANK_TRANSFER)
    match first:
        case Error(failure):
            print(f"  ✗ {failure.message} (cart still has {len(await state.cart())} items)")
        case Ok(_):
            print("  unexpected success")

    backend.decline_bank = False
    match await session.checkout(checkout, CustomerDetails(ADDRESS), PaymentMethod.BANK_TRANSFER):
        case Ok(Completed(order=order)):
            print(f"  ✓ {order.order_number} is {order.status.value}")
            print(f"  cart now: {await state.cart()}, saved refs: {await state.latest_order()}")
        case other:
            print(f"  unexpected: {other}")

    # 2. Card: submit, then confirm
    banner("Card")
    state = ClientState(MemoryKeyValueStore({StorageKey.CART: FULL_BUILD}))
    session = session_for(state, ConsoleBackend())
    checkout = await priced_checkout(state, shipping="express")

    match await session.checkout(checkout, CustomerDetails(ADDRESS, create_account=True), PaymentMethod.CARD):
        case Ok(AwaitingCardConfirmation(order_number=number)):
            print(f"  awaiting card details for {number} ({session.state.value})")
        case other:
            print(f"  unexpected: {other}")

    match await session.confirm_card():
        case Ok(Completed(order=order, effects=report)):
            print(f"  ✓ paid: {order.payment_reference}, effects: {', '.join(report.completed)}")
        case Error(failure):
            print(f"  ✗ {failure.message}")

    # 3. Wallet redirect
    banner("Wallet")
    state = ClientState(MemoryKeyValueStore({StorageKey.CART: FULL_BUILD}))
    session = session_for(state, ConsoleBackend())
    checkout = await priced_checkout(state, shipping="free")

    match await session.checkout(checkout, CustomerDetails(ADDRESS), PaymentMethod.WALLET):
        case Ok(Redirected(url=url)):
            print(f"  redirected ({session.state.value}); approval happens at {url}")
        case other:
            print(f"  unexpected: {other}")

    saved = await AddressBook(state).load()
    print(f"  prefill for next time: {saved.full_name}, {saved.postcode}")


if __name__ == "__main__":
    run(main)
