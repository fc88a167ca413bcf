"""Unit tests for product request and barcode validation.

Covers:
- validate_product_request: check order, messages, first failure wins.
- validate_barcode: distinct error kind for path parameters.
"""

from __future__ import annotations

import pytest

from modules.products.dtos import ProductRequestDTO
from modules.products.exceptions import InvalidBarcode, InvalidProductRequest
from modules.products.validators import validate_barcode, validate_product_request

pytestmark = pytest.mark.unit


def _request(**overrides) -> ProductRequestDTO:
    defaults = {
        "barcode": "123456",
        "name": "Widget",
        "image": None,
        "rating": None,
        "price": None,
        "tags": ["a", "b"],
    }
    defaults.update(overrides)
    return ProductRequestDTO(**defaults)


# ===========================================================================
# validate_product_request
# ===========================================================================


class TestValidateProductRequestValid:
    def test_minimal_request_passes(self):
        validate_product_request(_request())

    def test_valid_image_url_passes(self):
        validate_product_request(_request(image="https://cdn.example.com/w.png"))

    def test_blank_image_is_allowed(self):
        validate_product_request(_request(image="   "))

    def test_empty_tag_list_passes(self):
        validate_product_request(_request(tags=[]))

    def test_missing_tag_list_passes(self):
        validate_product_request(_request(tags=None))


class TestValidateProductRequestBarcode:
    @pytest.mark.parametrize("barcode", [None, "", "   "])
    def test_missing_barcode_raises(self, barcode):
        with pytest.raises(InvalidProductRequest, match="Barcode is mandatory"):
            validate_product_request(_request(barcode=barcode))

    @pytest.mark.parametrize("barcode", ["abc", "12a34", "12 34", "-123", "12.5", " 123 "])
    def test_non_digit_barcode_raises_barcode_message(self, barcode):
        with pytest.raises(InvalidProductRequest) as exc_info:
            validate_product_request(_request(barcode=barcode))
        assert str(exc_info.value) == "Barcode can only contain digits"


class TestValidateProductRequestName:
    @pytest.mark.parametrize("name", [None, "", "  \t "])
    def test_blank_name_raises(self, name):
        with pytest.raises(InvalidProductRequest, match="Name is mandatory"):
            validate_product_request(
                _request(
                    name=name,
                    image="https://example.com/x.png",
                    rating=4.5,
                    price=9.99,
                )
            )


class TestValidateProductRequestImage:
    @pytest.mark.parametrize(
        "image",
        [
            "not a url",
            "example.com/x.png",
            "localhost:8080/a.png",
            "gopher://example.com/a.png",
            "http:",
        ],
    )
    def test_invalid_url_raises(self, image):
        with pytest.raises(InvalidProductRequest, match="Image must be a valid URL"):
            validate_product_request(_request(image=image))

    @pytest.mark.parametrize(
        "image",
        [
            "https://cdn.example.com/w.png",
            "http://intranet/img.png",
            "http://cdn:8080/a.png",
            "file:///var/images/a.png",
            "https://example.com/a b.png",
            "HTTP://EXAMPLE.COM/A.PNG",
            "ftp://10.0.0.5/pics/a.png",
            "http://",
        ],
    )
    def test_accepted_url_forms(self, image):
        validate_product_request(_request(image=image))


class TestValidateProductRequestTags:
    @pytest.mark.parametrize("tags", [["a", ""], ["  "], ["a", None, "b"]])
    def test_blank_tag_raises(self, tags):
        with pytest.raises(InvalidProductRequest, match="Tag cannot be blank"):
            validate_product_request(_request(tags=tags))


class TestValidateProductRequestOrder:
    def test_barcode_checked_before_name(self):
        with pytest.raises(InvalidProductRequest, match="Barcode is mandatory"):
            validate_product_request(_request(barcode="", name=""))

    def test_name_checked_before_image(self):
        with pytest.raises(InvalidProductRequest, match="Name is mandatory"):
            validate_product_request(_request(name="", image="bad url"))

    def test_image_checked_before_tags(self):
        with pytest.raises(InvalidProductRequest, match="Image must be a valid URL"):
            validate_product_request(_request(image="bad url", tags=[""]))


# ===========================================================================
# validate_barcode
# ===========================================================================


class TestValidateBarcode:
    def test_digits_pass(self):
        validate_barcode("0001234567890")

    @pytest.mark.parametrize("barcode", [None, "", "   "])
    def test_missing_raises(self, barcode):
        with pytest.raises(InvalidBarcode, match="Barcode is mandatory"):
            validate_barcode(barcode)

    @pytest.mark.parametrize("barcode", ["abc", "123abc", "１２３", "12-34"])
    def test_non_digits_raise(self, barcode):
        with pytest.raises(InvalidBarcode, match="Barcode can only contain digits"):
            validate_barcode(barcode)

    def test_error_kind_differs_from_request_error(self):
        with pytest.raises(InvalidBarcode) as exc_info:
            validate_barcode("abc")
        assert not isinstance(exc_info.value, InvalidProductRequest)
