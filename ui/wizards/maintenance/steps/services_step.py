# -*- coding: utf-8 -*-
"""
Services Step - Step 2 of the DIY and Shop service wizards.

Catalog of services grouped by category, a field for services that are not
in the catalog, and free-form notes.
"""

from typing import Any, Dict, List

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import (
    QHBoxLayout, QLabel, QLineEdit, QPushButton, QTextEdit, QTreeWidget, QTreeWidgetItem
)

from ui.constants.service_catalog import ServiceCatalog
from ui.wizards.framework.base_step import BaseStep
from ui.wizards.framework.wizard_step import StepProps

_SERVICE_ROLE = Qt.UserRole


class ServicesStep(BaseStep):
    """Step 2: which services were performed."""

    def setup_ui(self):
        self.main_layout.addWidget(self.create_section_label("Services performed"))

        self.services_tree = QTreeWidget()
        self.services_tree.setHeaderHidden(True)
        self.services_tree.setMinimumHeight(260)
        self._category_items: Dict[str, QTreeWidgetItem] = {}
        for category, names in ServiceCatalog.CATEGORIES.items():
            for name in names:
                self._add_service_item({"service_name": name, "category": category})
        self.main_layout.addWidget(self.services_tree)

        custom_row = QHBoxLayout()
        self.custom_input = QLineEdit()
        self.custom_input.setPlaceholderText("Service not listed? Type it here")
        custom_row.addWidget(self.custom_input, 1)
        self.add_custom_button = QPushButton("Add")
        custom_row.addWidget(self.add_custom_button)
        self.main_layout.addLayout(custom_row)

        self.selection_label = QLabel("")
        self.main_layout.addWidget(self.selection_label)

        self.main_layout.addWidget(self.create_section_label("Notes"))
        self.notes_edit = QTextEdit()
        self.notes_edit.setPlaceholderText("Parts used, observations, anything worth remembering")
        self.notes_edit.setFixedHeight(100)
        self.main_layout.addWidget(self.notes_edit)

    def _category_item(self, category: str) -> QTreeWidgetItem:
        item = self._category_items.get(category)
        if item is None:
            item = QTreeWidgetItem(self.services_tree, [category])
            item.setFlags(item.flags() & ~Qt.ItemIsUserCheckable)
            item.setExpanded(True)
            self._category_items[category] = item
        return item

    def _add_service_item(self, service: Dict[str, str], checked: bool = False) -> QTreeWidgetItem:
        parent = self._category_item(service["category"])
        item = QTreeWidgetItem(parent, [service["service_name"]])
        item.setFlags(item.flags() | Qt.ItemIsUserCheckable)
        item.setCheckState(0, Qt.Checked if checked else Qt.Unchecked)
        item.setData(0, _SERVICE_ROLE, dict(service))
        return item

    def _service_items(self) -> List[QTreeWidgetItem]:
        items = []
        for category_item in self._category_items.values():
            for index in range(category_item.childCount()):
                items.append(category_item.child(index))
        return items

    def populate_data(self, data: Dict[str, Any]):
        selected = data.get("selected_services") or []
        wanted = {(s.get("category"), s.get("service_name")) for s in selected}
        known = set()
        for item in self._service_items():
            service = item.data(0, _SERVICE_ROLE)
            key = (service["category"], service["service_name"])
            known.add(key)
            item.setCheckState(0, Qt.Checked if key in wanted else Qt.Unchecked)

        # Restored selections that are not in the catalog
        for service in selected:
            if (service.get("category"), service.get("service_name")) not in known:
                self._add_service_item(
                    {"service_name": service.get("service_name", ""),
                     "category": service.get("category") or ServiceCatalog.CUSTOM_CATEGORY},
                    checked=True,
                )

        self.notes_edit.setPlainText(data.get("notes") or "")

    def connect_signals(self):
        self.services_tree.itemChanged.connect(self._on_item_changed)
        self.add_custom_button.clicked.connect(self.add_custom_service)
        self.custom_input.returnPressed.connect(self.add_custom_service)
        self.notes_edit.textChanged.connect(
            lambda: self.save_to_context("notes", self.notes_edit.toPlainText())
        )

    def selected_services(self) -> List[Dict[str, str]]:
        """Checked services in display order."""
        return [
            dict(item.data(0, _SERVICE_ROLE))
            for item in self._service_items()
            if item.checkState(0) == Qt.Checked
        ]

    def set_service_checked(self, service_name: str, checked: bool = True) -> bool:
        """Check or uncheck a service by name. Returns False if it is not listed."""
        for item in self._service_items():
            if item.data(0, _SERVICE_ROLE)["service_name"] == service_name:
                item.setCheckState(0, Qt.Checked if checked else Qt.Unchecked)
                return True
        return False

    def add_custom_service(self):
        name = " ".join(self.custom_input.text().split())
        if not name:
            return
        if not self.set_service_checked(name, True):
            self._add_service_item(
                {"service_name": name, "category": ServiceCatalog.CUSTOM_CATEGORY}, checked=True
            )
            self._save_selection()
        self.custom_input.clear()

    def _on_item_changed(self, item: QTreeWidgetItem, column: int):
        if item.data(0, _SERVICE_ROLE) is not None:
            self._save_selection()

    def _save_selection(self):
        self.save_to_context("selected_services", self.selected_services())

    def on_props_updated(self, props: StepProps):
        count = len(props.data.get("selected_services") or [])
        self.selection_label.setText(
            f"{count} service{'s' if count != 1 else ''} selected"
        )
