# -*- coding: utf-8 -*-
"""
Maintenance Schemas - Field rules for the DIY and Shop service wizards.

Schemas are composed from the shared rule instances below so the
odometer/cost/date semantics are defined once.
"""

from typing import Dict

from app.config import Config
from .field_rules import (
    AmountRule, DateRule, ListLengthRule, NameRule, PatternRule,
    RequiredRule, SelectionRule, TextRule, WholeNumberRule
)
from .schema_validator import Schema

# Shared field rules
VEHICLE_ID = RequiredRule(message="Vehicle ID is required")
SERVICE_DATE = DateRule(label="Service date")
ODOMETER = WholeNumberRule(max_value=Config.MAX_ODOMETER)
COST = AmountRule(max_value=Config.MAX_SERVICE_COST, label="Cost")
SHOP_NAME = NameRule(
    label="Shop name",
    min_length=Config.SHOP_NAME_MIN_LENGTH,
    max_length=Config.SHOP_NAME_MAX_LENGTH
)
SERVICE_SELECTION = SelectionRule()
NOTES = TextRule(
    max_length=Config.NOTES_MAX_LENGTH,
    message="Notes are too long (maximum {max} characters)"
)
SHORT_TEXT = TextRule(max_length=100)
SHOP_ADDRESS = TextRule(max_length=Config.SHOP_ADDRESS_MAX_LENGTH)
SHOP_PHONE = PatternRule(
    pattern=r"[+]?[1-9]?[0-9\s\-()]{7,15}",
    message="Must be a valid phone number"
)
SHOP_EMAIL = PatternRule(
    pattern=r"[^@\s]+@[^@\s]+\.[A-Za-z]{2,}",
    message="Must be a valid email address"
)
PHOTOS = ListLengthRule(max_items=Config.MAX_PHOTOS)

# Step schemas
DIY_BASIC_INFO: Schema = {
    "vehicle_id": VEHICLE_ID,
    "date": SERVICE_DATE,
    "mileage": ODOMETER,
}

SHOP_BASIC_INFO: Schema = {
    "vehicle_id": VEHICLE_ID,
    "date": SERVICE_DATE,
    "mileage": ODOMETER,
    "total_cost": COST,
    "shop_name": SHOP_NAME,
    "shop_address": SHOP_ADDRESS,
    "shop_phone": SHOP_PHONE,
    "shop_email": SHOP_EMAIL,
}

SERVICES: Schema = {
    "selected_services": SERVICE_SELECTION,
    "notes": NOTES,
}

DIY_PHOTOS: Schema = {
    "photos": PHOTOS,
}

SHOP_PHOTOS: Schema = {
    "photos": PHOTOS,
    "receipt_photos": PHOTOS,
}

SHOP_NOTES: Schema = {
    "additional_notes": NOTES,
    "warranty": SHORT_TEXT,
}

MAINTENANCE_SCHEMAS: Dict[str, Schema] = {
    "diy.basic_info": DIY_BASIC_INFO,
    "diy.services": SERVICES,
    "diy.photos": DIY_PHOTOS,
    "shop.basic_info": SHOP_BASIC_INFO,
    "shop.services": SERVICES,
    "shop.photos": SHOP_PHOTOS,
    "shop.notes": SHOP_NOTES,
}
