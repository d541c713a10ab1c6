# -*- coding: utf-8 -*-
"""
Maintenance log entity model.

Built from the data a completed DIY or Shop service wizard hands over,
keyed by step id.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional
import uuid

from services.exceptions import ValidationException
from utils.datetime_utils import from_isoformat


@dataclass
class MaintenanceLog:
    """
    Maintenance log entry for one vehicle.

    ``services`` holds the selected services as
    ``{"service_name": ..., "category": ...}`` dictionaries.
    """

    # Primary identifiers
    log_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    vehicle_id: str = ""

    # Service details
    date: Optional[datetime] = None
    mileage: int = 0
    title: str = ""
    category: str = ""
    service_type: str = "diy"  # diy, shop
    services: List[Dict[str, Any]] = field(default_factory=list)
    cost: Optional[float] = None
    notes: str = ""
    tags: List[str] = field(default_factory=list)
    photos: List[str] = field(default_factory=list)

    # Shop details (shop service only)
    shop_name: Optional[str] = None
    shop_address: Optional[str] = None
    shop_phone: Optional[str] = None
    shop_email: Optional[str] = None
    service_description: str = ""

    # Metadata
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def service_names(self) -> List[str]:
        return [service.get("service_name", "") for service in self.services]

    # =========================================================================
    # Construction from wizard data
    # =========================================================================

    @classmethod
    def from_diy_wizard(cls, data: Dict[str, Dict[str, Any]]) -> "MaintenanceLog":
        """
        Create a log from the DIY service wizard data.

        Args:
            data: Completed wizard data keyed by step id

        Raises:
            ValidationException: if required basic information is unusable
        """
        basic_info = data.get("basic_info") or {}
        services = data.get("services") or {}
        photos = data.get("photos") or {}
        review = data.get("review") or {}

        selected = list(services.get("selected_services") or [])
        names = ", ".join(s.get("service_name", "") for s in selected) or "Unknown Services"

        return cls(
            vehicle_id=cls._require_vehicle(basic_info),
            date=cls._parse_date(basic_info.get("date")),
            mileage=cls._parse_mileage(basic_info.get("mileage")),
            title=f"DIY Service - {names}",
            category=cls._first_category(selected),
            service_type="diy",
            services=selected,
            cost=cls._parse_cost(review.get("total_cost")),
            notes=services.get("notes") or "",
            tags=[],
            photos=list(photos.get("photos") or []),
        )

    @classmethod
    def from_shop_wizard(cls, data: Dict[str, Dict[str, Any]]) -> "MaintenanceLog":
        """
        Create a log from the Shop service wizard data.

        Notes from the services step and the notes step are joined.

        Raises:
            ValidationException: if required basic information is unusable
        """
        basic_info = data.get("basic_info") or {}
        services = data.get("services") or {}
        photos = data.get("photos") or {}
        notes_step = data.get("notes") or {}

        selected = list(services.get("selected_services") or [])
        names = ", ".join(s.get("service_name", "") for s in selected)
        shop_name = " ".join(str(basic_info.get("shop_name") or "").split())

        notes = [
            text.strip() for text in (services.get("notes"), notes_step.get("additional_notes"))
            if text and text.strip()
        ]
        tags = ["shop-service"]
        warranty = str(notes_step.get("warranty") or "").strip()
        if warranty:
            notes.append(f"Warranty: {warranty}")
            tags.append("warranty")

        return cls(
            vehicle_id=cls._require_vehicle(basic_info),
            date=cls._parse_date(basic_info.get("date")),
            mileage=cls._parse_mileage(basic_info.get("mileage")),
            title=f"Shop Service - {names}",
            category=cls._first_category(selected),
            service_type="shop",
            services=selected,
            cost=cls._parse_cost(basic_info.get("total_cost")),
            notes="\n\n".join(notes),
            tags=tags,
            photos=list(photos.get("photos") or []) + list(photos.get("receipt_photos") or []),
            shop_name=shop_name or None,
            shop_address=basic_info.get("shop_address") or None,
            shop_phone=basic_info.get("shop_phone") or None,
            shop_email=basic_info.get("shop_email") or None,
            service_description=f"Services performed at {shop_name}" if shop_name else "",
        )

    # =========================================================================
    # Field conversion
    # =========================================================================

    @staticmethod
    def _require_vehicle(basic_info: Dict[str, Any]) -> str:
        vehicle_id = basic_info.get("vehicle_id")
        if not vehicle_id:
            raise ValidationException("Vehicle is required", field="vehicle_id")
        return str(vehicle_id)

    @staticmethod
    def _parse_date(value: Any) -> datetime:
        parsed = from_isoformat(value)
        if parsed is None:
            raise ValidationException("Service date is invalid", field="date")
        return parsed

    @staticmethod
    def _parse_mileage(value: Any) -> int:
        text = str(value or "").replace(",", "").strip()
        if not text.isdigit():
            raise ValidationException(
                "Odometer reading must be a whole number (no decimals)", field="mileage"
            )
        return int(text)

    @staticmethod
    def _parse_cost(value: Any) -> Optional[float]:
        if value in (None, ""):
            return None
        try:
            return float(str(value).replace(",", ""))
        except ValueError as e:
            raise ValidationException(
                "Cost must be a valid amount (e.g., 25.99)", field="total_cost"
            ) from e

    @staticmethod
    def _first_category(selected: List[Dict[str, Any]]) -> str:
        for service in selected:
            if service.get("category"):
                return service["category"]
        return ""

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "log_id": self.log_id,
            "vehicle_id": self.vehicle_id,
            "date": self.date.isoformat() if self.date else None,
            "mileage": self.mileage,
            "title": self.title,
            "category": self.category,
            "service_type": self.service_type,
            "services": [dict(service) for service in self.services],
            "cost": self.cost,
            "notes": self.notes,
            "tags": list(self.tags),
            "photos": list(self.photos),
            "shop_name": self.shop_name,
            "shop_address": self.shop_address,
            "shop_phone": self.shop_phone,
            "shop_email": self.shop_email,
            "service_description": self.service_description,
            "created_at": self.created_at.isoformat(),
        }
