# -*- coding: utf-8 -*-
"""
Service Catalog - Maintenance categories and the services offered under each.

Usage:
    from ui.constants.service_catalog import ServiceCatalog
    for category, services in ServiceCatalog.CATEGORIES.items():
        ...
"""

from typing import Dict, List


class ServiceCatalog:
    """Maintenance categories shown in the services step."""

    CUSTOM_CATEGORY = "Custom"

    CATEGORIES: Dict[str, List[str]] = {
        "Engine & Powertrain": [
            "Oil & Oil Filter Change",
            "Engine Air Filter",
            "Spark Plugs",
            "Drive Belts & Pulleys",
            "Throttle Body & MAF Sensor Cleaning",
        ],
        "Brake System": [
            "Brake Pads & Rotors",
            "Caliper",
            "Brake Lines",
            "Brake Fluid",
        ],
        "Tires & Wheels": [
            "Tire Rotation",
            "Balancing",
        ],
        "Cooling System": [
            "Thermostat",
            "Water Pump",
            "Radiator",
            "Antifreeze & Coolant",
        ],
        "Transmission & Drivetrain": [
            "Transmission Fluid",
            "Front Differential",
            "Rear Differential",
            "Transfer Case",
            "CV Joints & Axles",
        ],
        "Electrical": [
            "Battery",
            "Alternator",
            "Starter",
        ],
        "HVAC & Climate Control": [
            "Cabin Air Filter",
            "A/C Refrigerant Recharge",
        ],
        "Body & Lighting": [
            "Windshield Wipers",
            "Headlight Bulbs",
            "Taillight Bulbs",
        ],
    }

    @classmethod
    def all_services(cls) -> List[Dict[str, str]]:
        """Every catalog entry as a selected-service dictionary."""
        return [
            {"service_name": name, "category": category}
            for category, names in cls.CATEGORIES.items()
            for name in names
        ]
