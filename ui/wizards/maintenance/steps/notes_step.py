# -*- coding: utf-8 -*-
"""
Notes Step - Last step of the Shop service wizard.
"""

from typing import Any, Dict

from PyQt5.QtWidgets import QLineEdit, QTextEdit

from ui.wizards.framework.base_step import BaseStep


class NotesStep(BaseStep):
    """Additional notes and warranty information for a shop visit."""

    def setup_ui(self):
        self.main_layout.addWidget(self.create_section_label("Additional notes"))
        self.notes_edit = QTextEdit()
        self.notes_edit.setPlaceholderText("Recommendations from the shop, follow-up work, ...")
        self.main_layout.addWidget(self.notes_edit)

        self.main_layout.addWidget(self.create_section_label("Warranty"))
        self.warranty_input = QLineEdit()
        self.warranty_input.setPlaceholderText("e.g. 12 months / 12,000 miles")
        self.main_layout.addWidget(self.warranty_input)
        self.main_layout.addStretch()

    def populate_data(self, data: Dict[str, Any]):
        self.notes_edit.setPlainText(data.get("additional_notes") or "")
        self.warranty_input.setText(data.get("warranty") or "")

    def connect_signals(self):
        self.notes_edit.textChanged.connect(
            lambda: self.save_to_context("additional_notes", self.notes_edit.toPlainText())
        )
        self.warranty_input.textChanged.connect(
            lambda text: self.save_to_context("warranty", text)
        )
