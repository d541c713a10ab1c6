# -*- coding: utf-8 -*-
"""
Basic Info Step - Step 1 of the DIY and Shop service wizards.

Service date and odometer reading for both wizards; the DIY variant adds
the "add photos" toggle that reveals the photos step, the shop variant
adds cost and shop details.
"""

from datetime import date
from typing import Any, Dict

from PyQt5.QtCore import QDate
from PyQt5.QtWidgets import QCheckBox, QDateEdit, QFormLayout, QLabel, QLineEdit

from ui.wizards.framework.base_step import BaseStep
from utils.datetime_utils import from_isoformat


def _to_qdate(value: Any) -> QDate:
    parsed = from_isoformat(value)
    day = parsed.date() if parsed else date.today()
    return QDate(day.year, day.month, day.day)


class BasicInfoStep(BaseStep):
    """Step 1 (DIY): when and at what mileage."""

    SHOW_PHOTOS_TOGGLE = True

    def setup_ui(self):
        self.form_layout = QFormLayout()
        self.form_layout.setSpacing(12)

        self.vehicle_label = QLabel("")
        self.form_layout.addRow("Vehicle:", self.vehicle_label)

        self.date_edit = QDateEdit()
        self.date_edit.setCalendarPopup(True)
        self.date_edit.setDisplayFormat("yyyy-MM-dd")
        self.date_edit.setMaximumDate(QDate.currentDate())
        self.form_layout.addRow("Service date:", self.date_edit)

        self.mileage_input = QLineEdit()
        self.mileage_input.setPlaceholderText("e.g. 75,000")
        self.form_layout.addRow("Odometer (miles):", self.mileage_input)

        self.add_extra_fields(self.form_layout)
        self.main_layout.addLayout(self.form_layout)

        self.photos_checkbox = QCheckBox("I want to add photos of this service")
        self.photos_checkbox.setVisible(self.SHOW_PHOTOS_TOGGLE)
        self.main_layout.addWidget(self.photos_checkbox)
        self.main_layout.addStretch()

    def add_extra_fields(self, form_layout: QFormLayout):
        """Hook for variants with more fields."""
        pass

    def populate_data(self, data: Dict[str, Any]):
        self.vehicle_label.setText(str(data.get("vehicle_id") or ""))
        self.date_edit.setDate(_to_qdate(data.get("date")))
        self.mileage_input.setText(str(data.get("mileage") or ""))
        self.photos_checkbox.setChecked(data.get("add_photos") is True)

    def connect_signals(self):
        self.date_edit.dateChanged.connect(self._on_date_changed)
        self.mileage_input.textChanged.connect(
            lambda text: self.save_to_context("mileage", text)
        )
        self.mileage_input.returnPressed.connect(self.request_next)
        if self.SHOW_PHOTOS_TOGGLE:
            self.photos_checkbox.toggled.connect(
                lambda checked: self.save_to_context("add_photos", checked)
            )

    def _on_date_changed(self, value: QDate):
        self.save_to_context("date", value.toPyDate())


class ShopBasicInfoStep(BasicInfoStep):
    """Step 1 (Shop): adds total cost and shop contact details."""

    SHOW_PHOTOS_TOGGLE = False

    def add_extra_fields(self, form_layout: QFormLayout):
        self.cost_input = QLineEdit()
        self.cost_input.setPlaceholderText("e.g. 125.50")
        form_layout.addRow("Total cost ($):", self.cost_input)

        self.shop_name_input = QLineEdit()
        form_layout.addRow("Shop name:", self.shop_name_input)

        self.shop_address_input = QLineEdit()
        self.shop_address_input.setPlaceholderText("Optional")
        form_layout.addRow("Address:", self.shop_address_input)

        self.shop_phone_input = QLineEdit()
        self.shop_phone_input.setPlaceholderText("Optional")
        form_layout.addRow("Phone:", self.shop_phone_input)

        self.shop_email_input = QLineEdit()
        self.shop_email_input.setPlaceholderText("Optional")
        form_layout.addRow("Email:", self.shop_email_input)

    def _text_fields(self) -> Dict[str, QLineEdit]:
        return {
            "total_cost": self.cost_input,
            "shop_name": self.shop_name_input,
            "shop_address": self.shop_address_input,
            "shop_phone": self.shop_phone_input,
            "shop_email": self.shop_email_input,
        }

    def populate_data(self, data: Dict[str, Any]):
        super().populate_data(data)
        for key, field_input in self._text_fields().items():
            field_input.setText(str(data.get(key) or ""))

    def connect_signals(self):
        super().connect_signals()
        for key, field_input in self._text_fields().items():
            field_input.textChanged.connect(
                lambda text, field_key=key: self.save_to_context(field_key, text)
            )
            field_input.returnPressed.connect(self.request_next)
