# -*- coding: utf-8 -*-
"""
Review Step - Last step of the DIY service wizard.

Read-only summary of the earlier steps plus an optional total cost for
parts and fluids.
"""

from typing import Any, Dict, List, Mapping, Tuple

from PyQt5.QtWidgets import QDoubleSpinBox, QFormLayout, QFrame, QGridLayout, QLabel

from app.config import Config
from ui.wizards.framework.base_step import BaseStep
from utils.datetime_utils import from_isoformat


def build_summary(all_data: Mapping[str, Dict[str, Any]]) -> List[Tuple[str, str]]:
    """(label, value) rows describing a DIY service entry."""
    basic_info = all_data.get("basic_info") or {}
    services = all_data.get("services") or {}
    photos = all_data.get("photos") or {}

    service_date = from_isoformat(basic_info.get("date"))
    names = [s.get("service_name", "") for s in services.get("selected_services") or []]
    rows = [
        ("Vehicle", str(basic_info.get("vehicle_id") or "-")),
        ("Date", service_date.strftime("%Y-%m-%d") if service_date else "-"),
        ("Odometer", f"{basic_info.get('mileage') or '-'} miles"),
        ("Services", ", ".join(names) if names else "-"),
    ]
    if basic_info.get("add_photos"):
        rows.append(("Photos", str(len(photos.get("photos") or []))))
    if services.get("notes"):
        rows.append(("Notes", services["notes"]))
    return rows


class ReviewStep(BaseStep):
    """Final review before saving."""

    def setup_ui(self):
        self.main_layout.addWidget(self.create_section_label("Summary"))

        card = QFrame()
        card.setObjectName("summaryCard")
        card.setStyleSheet(f"""
            QFrame#summaryCard {{
                background-color: white;
                border: 1px solid {Config.BORDER_COLOR};
                border-radius: 8px;
            }}
        """)
        self.summary_layout = QGridLayout(card)
        self.summary_layout.setContentsMargins(16, 16, 16, 16)
        self.summary_layout.setHorizontalSpacing(16)
        self.main_layout.addWidget(card)

        cost_form = QFormLayout()
        self.cost_input = QDoubleSpinBox()
        self.cost_input.setPrefix("$ ")
        self.cost_input.setDecimals(2)
        self.cost_input.setMaximum(Config.MAX_SERVICE_COST)
        cost_form.addRow("Total cost (parts & fluids):", self.cost_input)
        self.main_layout.addLayout(cost_form)
        self.main_layout.addStretch()

    def populate_data(self, data: Dict[str, Any]):
        for row, (label, value) in enumerate(build_summary(self.props.all_wizard_data)):
            label_widget = QLabel(f"{label}:")
            label_widget.setStyleSheet(f"color: {Config.SECONDARY_COLOR};")
            value_widget = QLabel(value)
            value_widget.setWordWrap(True)
            self.summary_layout.addWidget(label_widget, row, 0)
            self.summary_layout.addWidget(value_widget, row, 1)

        try:
            self.cost_input.setValue(float(data.get("total_cost") or 0))
        except (TypeError, ValueError):
            self.cost_input.setValue(0)

    def connect_signals(self):
        self.cost_input.valueChanged.connect(
            lambda value: self.save_to_context("total_cost", f"{value:.2f}")
        )
