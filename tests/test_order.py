"""Tests for order assembly and wire payloads."""

from dataclasses import replace
from decimal import Decimal

import pytest
from kungfu import Error, Ok

from rigcart.address import ShippingAddress
from rigcart.build_service import BuildServiceChoice
from rigcart.coupon import AppliedCoupon
from rigcart.order import (
    EMPTY_CART,
    FIX_FIELDS,
    INVALID_CART,
    CouponPayload,
    CustomerDetails,
    InconsistentDraft,
    OrderPayload,
    WalletOrderPayload,
    assemble_order,
    fingerprint,
)
from rigcart.pricing import CheckoutInput

from tests.fakes import line

D = Decimal


@pytest.fixture
def checkout(full_build_cart):
    return CheckoutInput(
        cart=tuple(full_build_cart),
        build_service=BuildServiceChoice("performance-build"),
        shipping_method="standard",
        coupon=AppliedCoupon("SAVE10", D("10"), D("88.00")),
    )


class TestAssembleOrder:
    async def test_draft_adds_up(self, draft):
        assert draft.items_total == D("880.00")
        assert draft.discount_amount == D("88.00")
        assert draft.total == D("801.99")
        assert draft.total == draft.totals.total

    async def test_build_service_is_a_line_item(self, draft):
        service = draft.items[-1]
        assert service.id == "build-service-performance-build"
        assert service.category == "build-service"
        assert service.price == D("130.00")
        assert service.quantity == 1
        assert draft.build_service.name == "Performance Build"

    async def test_no_build_service_line_when_assembling_myself(self, checkout, address):
        checkout = replace(checkout, build_service=BuildServiceChoice(assemble_myself=True))
        draft = (await assemble_order(checkout, CustomerDetails(address))).unwrap()
        assert all(item.category != "build-service" for item in draft.items)
        assert draft.build_service is None

    async def test_customer_contact_from_address(self, draft):
        assert draft.customer.name == "Sam Carter"
        assert draft.customer.email == "sam@example.co.uk"
        assert draft.customer.phone == "+44 7700 900123"

    async def test_account_declined_by_default(self, draft):
        assert not draft.account.create
        assert draft.account.password == ""

    async def test_account_request_carries_credentials(self, checkout, address):
        details = CustomerDetails(address, create_account=True)
        draft = (await assemble_order(checkout, details)).unwrap()
        assert draft.account.create
        assert draft.account.password == "hunter22"
        assert draft.account.address.postcode == "LS1 4AP"

    async def test_field_errors_abort_assembly(self, checkout, address):
        details = CustomerDetails(replace(address, email="nope"))
        match await assemble_order(checkout, details):
            case Error(error):
                assert error.message == FIX_FIELDS
                assert error.field_errors == {"email": "Invalid email address"}
            case Ok(_):
                pytest.fail("assembly should have failed")

    async def test_empty_cart(self, address):
        error = (await assemble_order(CheckoutInput(cart=()), CustomerDetails(address))).unwrap_err()
        assert error.message == EMPTY_CART

    async def test_empty_cart_and_bad_fields_reported_together(self):
        error = (await assemble_order(CheckoutInput(cart=()), CustomerDetails(ShippingAddress()))).unwrap_err()
        assert error.message == EMPTY_CART
        assert error.field_errors["cart"] == EMPTY_CART
        assert "full_name" in error.field_errors

    async def test_partially_invalid_cart_blocks_submission(self, full_build_cart, address):
        dirty = CheckoutInput(cart=(*full_build_cart, line("bad", "gpu", -1)))
        error = (await assemble_order(dirty, CustomerDetails(address))).unwrap_err()
        assert error.message == INVALID_CART

    async def test_unbalanced_draft_is_rejected(self, draft):
        with pytest.raises(InconsistentDraft):
            replace(draft, total=draft.total + D("0.01"))


class TestPayloads:
    async def test_order_payload_is_camel_case(self, draft):
        wire = OrderPayload.from_draft(draft).to_wire()

        assert wire["amount"] == 801.99
        assert wire["currency"] == "gbp"
        assert wire["shippingMethod"] == "standard"
        assert wire["shippingCost"] == 9.99
        assert wire["customerEmail"] == "sam@example.co.uk"
        assert wire["shippingAddress"]["postcode"] == "LS1 4AP"
        assert wire["coupon"] == {"code": "SAVE10", "discountPercent": 10.0, "discountAmount": 88.0}
        assert wire["buildService"] == {"id": "performance-build", "name": "Performance Build", "price": 130.0}
        assert wire["accountRequest"]["create"] is False
        assert len(wire["cartItems"]) == 7
        assert wire["cartItems"][0]["price"] == 300.0

    async def test_account_request_carries_contact_details_only(self, checkout, address):
        details = CustomerDetails(address, create_account=True)
        draft = (await assemble_order(checkout, details)).unwrap()
        account = OrderPayload.from_draft(draft).to_wire()["accountRequest"]
        assert account["create"] is True
        assert account["fullName"] == "Sam Carter"
        assert "password" not in account

    async def test_password_does_not_reach_payload_or_fingerprint(self, checkout, address):
        first = (await assemble_order(checkout, CustomerDetails(address, create_account=True))).unwrap()
        other = replace(address, password="hunter23")
        second = (await assemble_order(checkout, CustomerDetails(other, create_account=True))).unwrap()

        assert first.account.password != second.account.password
        assert OrderPayload.from_draft(first).to_wire() == OrderPayload.from_draft(second).to_wire()
        assert fingerprint(first) == fingerprint(second)

    def test_coupon_percent_serializes_as_number(self):
        coupon = CouponPayload(code="HALFTERM", discount_percent=D("12.5"), discount_amount=D("31.25"))
        assert coupon.to_wire() == {"code": "HALFTERM", "discountPercent": 12.5, "discountAmount": 31.25}

    async def test_wallet_payload_describes_build_service(self, draft):
        wire = WalletOrderPayload.from_draft(draft).to_wire()
        assert wire["customerEmail"] == "sam@example.co.uk"
        assert wire["metadata"]["buildService"] == "Performance Build (£130.00)"
        assert wire["metadata"]["customerName"] == "Sam Carter"
        assert len(wire["items"]) == 7

    async def test_fingerprint_is_stable(self, checkout, address, draft):
        again = (await assemble_order(checkout, CustomerDetails(address))).unwrap()
        assert fingerprint(again) == fingerprint(draft)
        assert len(fingerprint(draft)) == 64

    async def test_fingerprint_changes_with_order(self, checkout, address, draft):
        express = replace(checkout, shipping_method="express")
        other = (await assemble_order(express, CustomerDetails(address))).unwrap()
        assert fingerprint(other) != fingerprint(draft)
