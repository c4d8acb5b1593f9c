"""Unit tests for the Address value object."""

import dataclasses

import pytest

from hospitality.domain.errors import InvalidAddressError
from hospitality.domain.models import Address
from tests.fakes.factories import make_address


def _fields(**override):
    fields = {
        "street": "Rua das Flores",
        "number": "123",
        "complement": "Apto 45",
        "neighborhood": "Centro",
        "city": "São Paulo",
        "state": "SP",
        "zip_code": "01234-567",
        "country": "Brasil",
    }
    fields.update(override)
    return fields


class TestAddressCreation:
    def test_create_valid_address(self):
        address = Address.create(**_fields())

        assert address.street == "Rua das Flores"
        assert address.number == "123"
        assert address.complement == "Apto 45"
        assert address.neighborhood == "Centro"
        assert address.city == "São Paulo"
        assert address.state == "SP"
        assert address.zip_code == "01234567"
        assert address.country == "Brasil"

    def test_create_without_complement(self):
        fields = _fields()
        del fields["complement"]

        address = Address.create(**fields)

        assert address.complement is None

    def test_trims_whitespace_from_all_fields(self):
        address = Address.create(
            **_fields(
                street="  Rua das Flores  ",
                number=" 123 ",
                complement="  Apto 45 ",
                neighborhood=" Centro ",
                city=" São Paulo ",
                state=" SP ",
                country=" Brasil ",
            )
        )

        assert address.street == "Rua das Flores"
        assert address.number == "123"
        assert address.complement == "Apto 45"
        assert address.neighborhood == "Centro"
        assert address.city == "São Paulo"
        assert address.state == "SP"
        assert address.country == "Brasil"

    @pytest.mark.parametrize("complement", ["", "   ", None])
    def test_blank_complement_is_absent(self, complement):
        address = Address.create(**_fields(complement=complement))

        assert address.complement is None

    def test_strips_non_digits_from_zip_code(self):
        address = Address.create(**_fields(zip_code=" 01.234-567 "))

        assert address.zip_code == "01234567"

    def test_is_immutable(self):
        address = make_address()

        with pytest.raises(dataclasses.FrozenInstanceError):
            address.street = "Other"  # type: ignore[misc]


class TestAddressRendering:
    def test_formatted_zip_code(self):
        address = Address.create(**_fields(zip_code="01234567"))

        assert address.formatted_zip_code == "01234-567"

    def test_full_address_with_complement(self):
        address = Address.create(**_fields())

        assert address.full_address == (
            "Rua das Flores, 123, Apto 45, Centro, São Paulo - SP, 01234-567, Brasil"
        )
        assert str(address) == address.full_address

    def test_full_address_without_complement(self):
        address = Address.create(**_fields(complement=None))

        assert address.full_address == (
            "Rua das Flores, 123, Centro, São Paulo - SP, 01234-567, Brasil"
        )

    def test_dict_round_trip_keeps_normalized_values(self):
        address = Address.create(**_fields(street="  Rua das Flores "))

        data = address.to_dict()

        assert data["street"] == "Rua das Flores"
        assert data["zip_code"] == "01234567"
        assert Address.from_dict(data) == address


class TestAddressValidation:
    @pytest.mark.parametrize(
        ("field", "message"),
        [
            ("street", "Street is required"),
            ("number", "Number is required"),
            ("neighborhood", "Neighborhood is required"),
            ("city", "City is required"),
            ("state", "State is required"),
            ("zip_code", "Zip code is required"),
            ("country", "Country is required"),
        ],
    )
    @pytest.mark.parametrize("blank", ["", "   ", None])
    def test_required_field(self, field, message, blank):
        with pytest.raises(InvalidAddressError) as exc_info:
            Address.create(**_fields(**{field: blank}))

        assert exc_info.value.message == message

    @pytest.mark.parametrize(
        ("field", "message"),
        [("number", "Number is required"), ("zip_code", "Zip code is required")],
    )
    def test_non_text_field_is_invalid(self, field, message):
        with pytest.raises(InvalidAddressError, match=message):
            Address.create(**_fields(**{field: 12}))

    def test_first_failure_wins(self):
        with pytest.raises(InvalidAddressError, match="Street is required"):
            Address.create(**_fields(street="", city="", zip_code="123"))

    @pytest.mark.parametrize("zip_code", ["0123456", "012345678", "01234-56", "abc"])
    def test_zip_code_must_have_eight_digits(self, zip_code):
        with pytest.raises(InvalidAddressError, match="Zip code must have 8 digits"):
            Address.create(**_fields(zip_code=zip_code))

    def test_from_dict_with_missing_field(self):
        data = _fields()
        del data["country"]

        with pytest.raises(InvalidAddressError, match="Country is required"):
            Address.from_dict(data)


class TestAddressEquality:
    def test_identical_addresses_are_equal(self):
        first = Address.create(**_fields())
        second = Address.create(**_fields(street=" Rua das Flores", zip_code="01234567"))

        assert first.equals(second)
        assert second.equals(first)
        assert first == second
        assert hash(first) == hash(second)

    def test_reflexive(self):
        address = make_address()

        assert address.equals(address)

    @pytest.mark.parametrize(
        "override",
        [
            {"street": "Rua dos Lírios"},
            {"number": "124"},
            {"complement": "Apto 46"},
            {"complement": None},
        ],
    )
    def test_different_fields_are_not_equal(self, override):
        first = Address.create(**_fields())
        second = Address.create(**_fields(**override))

        assert not first.equals(second)
        assert first != second

    @pytest.mark.parametrize("other", [None, "Rua das Flores", {"street": "Rua das Flores"}, object()])
    def test_non_address_is_never_equal(self, other):
        address = Address.create(**_fields())

        assert address.equals(other) is False
        assert (address == other) is False
