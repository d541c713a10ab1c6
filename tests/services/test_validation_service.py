# -*- coding: utf-8 -*-
"""
Tests for ValidationService, ValidationFactory and StepValidator.
"""

from datetime import date, datetime

import pytest

from services.validation.field_rules import RequiredRule
from services.validation.validation_factory import ValidationFactory
from services.validation_service import ValidationService
from services.wizard.step_validator import StepValidator


@pytest.fixture
def service():
    return ValidationService()


@pytest.fixture
def shop_basic_info():
    return {
        "vehicle_id": "veh-1",
        "date": date.today(),
        "mileage": "45,210",
        "total_cost": "129.99",
        "shop_name": "Main Street Garage",
        "shop_address": "12 Main St",
        "shop_phone": "555-123-4567",
        "shop_email": "service@mainstreet.example",
    }


class TestValidationFactory:
    """Schema registry."""

    def test_default_schemas_registered(self):
        factory = ValidationFactory()
        names = factory.get_registered_types()

        for name in ("diy.basic_info", "diy.services", "diy.photos",
                     "shop.basic_info", "shop.services", "shop.photos", "shop.notes"):
            assert name in names

    def test_names_case_insensitive(self):
        factory = ValidationFactory()
        assert factory.get_schema("DIY.Basic_Info") is factory.get_schema("diy.basic_info")

    def test_unknown_schema(self):
        result = ValidationFactory().validate({}, "nope")

        assert result.is_valid is False
        assert result.errors == ["No schema registered for: nope"]

    def test_register_custom_schema(self):
        factory = ValidationFactory()
        factory.register_schema("custom.step", {"name": RequiredRule(message="Name please")})

        assert factory.is_valid({"name": "x"}, "custom.step")
        assert factory.validate({}, "custom.step").errors == ["Name please"]


class TestValidationService:
    """Per-step validation entry points."""

    def test_diy_basic_info_decimal_mileage(self, service):
        result = service.validate_diy_basic_info(
            {"vehicle_id": "veh-1", "date": date.today(), "mileage": "12.5"}
        )

        assert result.is_valid is False
        assert result.errors == ["Odometer reading must be a whole number (no decimals)"]

    def test_diy_basic_info_empty_collects_all(self, service):
        result = service.validate_diy_basic_info({})

        assert result.errors == [
            "Vehicle ID is required",
            "Service date is required",
            "Enter the odometer reading at the time of service before continuing",
        ]

    def test_diy_basic_info_future_date(self, service):
        now = datetime(2024, 1, 1, 9, 0)
        result = service.validate_diy_basic_info(
            {"vehicle_id": "veh-1", "date": "2024-01-02", "mileage": "100"}, now
        )

        assert result.errors == ["Service date cannot be in the future"]

    def test_shop_basic_info_valid(self, service, shop_basic_info):
        assert service.validate_shop_basic_info(shop_basic_info).is_valid

    @pytest.mark.parametrize("cost, expected", [
        ("12.345", ["Cost must be a valid amount (e.g., 25.99)"]),
        ("12.34", []),
        ("-5", ["Cost cannot be negative"]),
    ])
    def test_shop_cost(self, service, shop_basic_info, cost, expected):
        shop_basic_info["total_cost"] = cost
        assert service.validate_shop_basic_info(shop_basic_info).errors == expected

    def test_shop_contact_fields_optional(self, service, shop_basic_info):
        shop_basic_info.update(shop_address="", shop_phone="", shop_email="")
        assert service.validate_shop_basic_info(shop_basic_info).is_valid

    def test_shop_contact_fields_checked(self, service, shop_basic_info):
        shop_basic_info.update(shop_phone="call me", shop_email="nobody")
        result = service.validate_shop_basic_info(shop_basic_info)

        assert result.errors == ["Must be a valid phone number", "Must be a valid email address"]

    def test_services_selection(self, service):
        assert service.validate_services({"selected_services": []}).errors == [
            "Select at least one service that was performed"
        ]
        assert service.validate_services(
            {"selected_services": ["Oil Change"]}, service_type="shop"
        ).is_valid

    def test_photos_limit(self, service):
        result = service.validate_photos({"photos": [f"p{i}.jpg" for i in range(11)]})
        assert result.errors == ["Maximum 10 photos allowed"]

    def test_notes(self, service):
        assert service.validate_notes({"additional_notes": "", "warranty": ""}).is_valid
        assert not service.validate_notes({"additional_notes": "x" * 1001}).is_valid

    def test_unknown_service_type(self, service):
        with pytest.raises(ValueError):
            service.validate_services({}, service_type="dealer")

    def test_merge_validation_results(self, service):
        merged = ValidationService.merge_validation_results(
            service.validate_services({"selected_services": []}),
            service.validate_notes({}),
        )

        assert merged.is_valid is False
        assert len(merged.errors) == 1

    def test_field_helpers(self, service):
        result = service.validate_step_fields("diy.basic_info", {"vehicle_id": "veh-1"})

        assert ValidationService.get_first_error(result) == "Service date is required"
        assert len(ValidationService.get_all_errors(result)) == 2


class TestStepValidator:
    """Schema-backed wizard step validators."""

    def test_for_schema(self, service):
        validate = StepValidator.for_schema("diy.services", service)

        assert validate({"selected_services": []}, {}) == [
            "Select at least one service that was performed"
        ]
        assert validate({"selected_services": ["Brakes"]}, {}) == []
        assert validate.__name__ == "validate_diy_services"

    def test_default_service(self):
        validate = StepValidator.for_schema("diy.photos")
        assert validate({"photos": []}, {}) == []

    def test_combine(self):
        first = lambda step, all_data: ["first"]
        second = lambda step, all_data: None
        third = lambda step, all_data: ["third"]

        combined = StepValidator.combine(first, second, third)

        assert combined({}, {}) == ["first", "third"]
