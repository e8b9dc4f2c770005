"""
Tests for order intake.

Test Coverage:
- Sheet orders: images decoded in order, slots kept verbatim
- Legacy orders: one design repeated quantity times
- Schema and data URL rejection with error paths
"""

import pytest

from sticker_studio.orders import (
    OrderKind,
    OrderValidationError,
    parse_order,
    validate_order,
)


@pytest.fixture
def sheet_payload(png_data_url, jpeg_data_url):
    return {
        "type": "sheet",
        "customerEmail": "ana@example.com",
        "size": "Medium (7×7cm)",
        "total": 9500,
        "images": [png_data_url, jpeg_data_url],
        "slots": [0, 1, 0, 1, 1],
        "descriptions": ["red square", "green square"],
        "totalSlots": 5,
    }


@pytest.fixture
def legacy_payload(png_data_url):
    return {
        "customerEmail": "ana@example.com",
        "size": "Large (10×10cm)",
        "total": "4500",
        "image": png_data_url,
        "quantity": 3,
        "prompt": "a sleepy fox",
        "style": "kawaii",
    }


class TestParseSheetOrder:
    """Tests for the multi-design payload."""

    def test_parse_when_valid_then_images_and_slots_kept(
        self, sheet_payload, png_bytes, jpeg_bytes
    ):
        # Act
        order = parse_order(sheet_payload)

        # Assert
        assert order.kind is OrderKind.SHEET
        assert order.is_sheet
        assert order.image_buffers == [png_bytes, jpeg_bytes]
        assert [img.ext for img in order.images] == ["png", "jpg"]
        assert order.slots == (0, 1, 0, 1, 1)
        assert order.slot_count == 5
        assert order.quantity == 5
        assert order.descriptions == ("red square", "green square")
        assert order.total == 9500

    def test_parse_when_total_slots_missing_then_slot_count_used(self, sheet_payload):
        del sheet_payload["totalSlots"]

        assert parse_order(sheet_payload).quantity == 5

    def test_parse_when_slots_reference_missing_image_then_accepted(self, sheet_payload):
        """Range checks belong to the sheet engine, not intake."""
        sheet_payload["slots"] = [0, 7]

        assert parse_order(sheet_payload).slots == (0, 7)

    def test_parse_when_image_not_data_url_then_rejected(self, sheet_payload):
        """One bad image rejects the order rather than shifting indices."""
        sheet_payload["images"][1] = "https://example.com/cat.png"

        with pytest.raises(OrderValidationError) as exc_info:
            parse_order(sheet_payload)

        assert exc_info.value.path == "images.1"

    def test_parse_when_slots_missing_then_rejected(self, sheet_payload):
        del sheet_payload["slots"]

        with pytest.raises(OrderValidationError, match="slots"):
            parse_order(sheet_payload)

    @pytest.mark.parametrize("bad_slot", [-1, 1.5, "0", True])
    def test_parse_when_slot_not_a_natural_number_then_rejected(self, sheet_payload, bad_slot):
        sheet_payload["slots"] = [0, bad_slot]

        with pytest.raises(OrderValidationError) as exc_info:
            parse_order(sheet_payload)

        assert exc_info.value.path == "slots.1"

    def test_parse_when_whole_float_slots_then_normalised_to_int(self, sheet_payload):
        """JSON 0.0 / 1.0 are whole numbers and index images like 0 / 1."""
        # Arrange
        sheet_payload["slots"] = [0.0, 1.0, 0]
        sheet_payload["totalSlots"] = 3.0

        # Act
        order = parse_order(sheet_payload)

        # Assert
        assert order.slots == (0, 1, 0)
        assert all(type(s) is int for s in order.slots)
        assert type(order.quantity) is int
        assert order.quantity == 3


class TestParseLegacyOrder:
    """Tests for the single-design payload."""

    def test_parse_when_valid_then_one_image_repeated(self, legacy_payload, png_bytes):
        order = parse_order(legacy_payload)

        assert order.kind is OrderKind.LEGACY
        assert not order.is_sheet
        assert order.image_buffers == [png_bytes]
        assert order.slots == (0, 0, 0)
        assert order.quantity == 3
        assert order.descriptions == ("a sleepy fox",)
        assert order.prompt == "a sleepy fox"
        assert order.style == "kawaii"

    def test_parse_when_quantity_missing_then_one(self, legacy_payload):
        del legacy_payload["quantity"]

        order = parse_order(legacy_payload)

        assert order.quantity == 1
        assert order.slots == (0,)

    def test_parse_when_quantity_is_whole_float_then_int(self, legacy_payload):
        legacy_payload["quantity"] = 2.0

        order = parse_order(legacy_payload)

        assert order.quantity == 2
        assert type(order.quantity) is int
        assert order.slots == (0, 0)

    def test_parse_when_no_image_then_no_designs(self, legacy_payload):
        legacy_payload["image"] = None
        legacy_payload["prompt"] = None

        order = parse_order(legacy_payload)

        assert order.images == ()
        assert order.descriptions == ("Custom upload",)

    def test_parse_when_unknown_type_then_legacy(self, legacy_payload):
        legacy_payload["type"] = "single"

        assert parse_order(legacy_payload).kind is OrderKind.LEGACY


class TestValidateOrder:
    """Tests for schema validation."""

    def test_validate_when_email_missing_then_error_lists_messages(self, legacy_payload):
        del legacy_payload["customerEmail"]

        with pytest.raises(OrderValidationError) as exc_info:
            validate_order(legacy_payload)

        assert any("customerEmail" in msg for msg in exc_info.value.errors)

    def test_validate_when_not_an_object_then_error(self):
        with pytest.raises(OrderValidationError):
            validate_order(["not", "an", "order"])

    def test_validate_when_quantity_zero_then_error(self, legacy_payload):
        legacy_payload["quantity"] = 0

        with pytest.raises(OrderValidationError) as exc_info:
            validate_order(legacy_payload)

        assert exc_info.value.path == "quantity"

    def test_validate_when_valid_then_no_error(self, sheet_payload):
        validate_order(sheet_payload)
