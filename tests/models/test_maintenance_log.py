# -*- coding: utf-8 -*-
"""
Tests for MaintenanceLog construction from completed wizard data.
"""

from datetime import date, datetime

import pytest

from models.maintenance_log import MaintenanceLog
from services.exceptions import ValidationException

OIL = {"service_name": "Oil & Oil Filter Change", "category": "Engine & Powertrain"}
PADS = {"service_name": "Brake Pads & Rotors", "category": "Brake System"}


@pytest.fixture
def diy_data():
    return {
        "basic_info": {"vehicle_id": "veh-1", "date": date(2024, 3, 1), "mileage": "75,000",
                       "add_photos": True},
        "services": {"selected_services": [OIL, PADS], "notes": "Used 5W-30"},
        "photos": {"photos": ["/tmp/a.jpg"]},
        "review": {"total_cost": "54.20"},
    }


@pytest.fixture
def shop_data():
    return {
        "basic_info": {
            "vehicle_id": "veh-2", "date": "2024-02-10", "mileage": "12000",
            "total_cost": "320.00", "shop_name": "  Main   Street Garage ",
            "shop_address": "", "shop_phone": "555-123-4567", "shop_email": "",
        },
        "services": {"selected_services": [PADS], "notes": "Squeaking fixed"},
        "photos": {"photos": ["/tmp/work.jpg"], "receipt_photos": ["/tmp/receipt.jpg"]},
        "notes": {"additional_notes": "Check again in 6 months", "warranty": "12 months"},
    }


class TestFromDiyWizard:
    """DIY entries."""

    def test_fields(self, diy_data):
        log = MaintenanceLog.from_diy_wizard(diy_data)

        assert log.vehicle_id == "veh-1"
        assert log.date == datetime(2024, 3, 1)
        assert log.mileage == 75000
        assert log.title == "DIY Service - Oil & Oil Filter Change, Brake Pads & Rotors"
        assert log.category == "Engine & Powertrain"
        assert log.service_type == "diy"
        assert log.cost == pytest.approx(54.20)
        assert log.notes == "Used 5W-30"
        assert log.tags == []
        assert log.photos == ["/tmp/a.jpg"]
        assert log.service_names == ["Oil & Oil Filter Change", "Brake Pads & Rotors"]

    def test_no_services_title(self, diy_data):
        diy_data["services"]["selected_services"] = []
        assert MaintenanceLog.from_diy_wizard(diy_data).title == "DIY Service - Unknown Services"

    def test_missing_cost(self, diy_data):
        del diy_data["review"]
        assert MaintenanceLog.from_diy_wizard(diy_data).cost is None

    def test_missing_vehicle(self, diy_data):
        diy_data["basic_info"]["vehicle_id"] = ""
        with pytest.raises(ValidationException) as excinfo:
            MaintenanceLog.from_diy_wizard(diy_data)
        assert excinfo.value.field == "vehicle_id"

    def test_bad_mileage(self, diy_data):
        diy_data["basic_info"]["mileage"] = "12.5"
        with pytest.raises(ValidationException) as excinfo:
            MaintenanceLog.from_diy_wizard(diy_data)
        assert excinfo.value.field == "mileage"

    def test_bad_date(self, diy_data):
        diy_data["basic_info"]["date"] = "someday"
        with pytest.raises(ValidationException):
            MaintenanceLog.from_diy_wizard(diy_data)


class TestFromShopWizard:
    """Shop entries."""

    def test_fields(self, shop_data):
        log = MaintenanceLog.from_shop_wizard(shop_data)

        assert log.service_type == "shop"
        assert log.title == "Shop Service - Brake Pads & Rotors"
        assert log.cost == pytest.approx(320.0)
        assert log.shop_name == "Main Street Garage"
        assert log.shop_address is None
        assert log.shop_phone == "555-123-4567"
        assert log.service_description == "Services performed at Main Street Garage"
        assert log.photos == ["/tmp/work.jpg", "/tmp/receipt.jpg"]

    def test_notes_and_tags(self, shop_data):
        log = MaintenanceLog.from_shop_wizard(shop_data)

        assert log.notes == "Squeaking fixed\n\nCheck again in 6 months\n\nWarranty: 12 months"
        assert log.tags == ["shop-service", "warranty"]

    def test_no_warranty(self, shop_data):
        shop_data["notes"] = {"additional_notes": "", "warranty": "  "}
        log = MaintenanceLog.from_shop_wizard(shop_data)

        assert log.notes == "Squeaking fixed"
        assert log.tags == ["shop-service"]

    def test_bad_cost(self, shop_data):
        shop_data["basic_info"]["total_cost"] = "lots"
        with pytest.raises(ValidationException) as excinfo:
            MaintenanceLog.from_shop_wizard(shop_data)
        assert excinfo.value.field == "total_cost"


class TestSerialization:
    """to_dict output."""

    def test_to_dict(self, diy_data):
        result = MaintenanceLog.from_diy_wizard(diy_data).to_dict()

        assert result["date"] == "2024-03-01T00:00:00"
        assert result["mileage"] == 75000
        assert result["services"] == [OIL, PADS]
        assert result["shop_name"] is None
        assert "created_at" in result
