# -*- coding: utf-8 -*-
"""
Photos Step - Optional photo attachments.

Photos are stored as file paths. The shop variant keeps receipt photos in
a separate list.
"""

from typing import Any, Dict, List

from PyQt5.QtWidgets import QFileDialog, QHBoxLayout, QListWidget, QPushButton

from app.config import Config
from ui.wizards.framework.base_step import BaseStep

IMAGE_FILTER = "Images (*.png *.jpg *.jpeg *.heic)"


class PhotoList:
    """List widget with Add/Remove buttons bound to one data key."""

    def __init__(self, step: BaseStep, key: str, title: str):
        self.step = step
        self.key = key

        step.main_layout.addWidget(step.create_section_label(title))
        self.list_widget = QListWidget()
        self.list_widget.setMinimumHeight(120)
        step.main_layout.addWidget(self.list_widget)

        buttons = QHBoxLayout()
        self.add_button = QPushButton("Add photos...")
        self.remove_button = QPushButton("Remove selected")
        buttons.addWidget(self.add_button)
        buttons.addWidget(self.remove_button)
        buttons.addStretch()
        step.main_layout.addLayout(buttons)

    def paths(self) -> List[str]:
        return [self.list_widget.item(i).text() for i in range(self.list_widget.count())]

    def set_paths(self, paths: List[str]):
        self.list_widget.clear()
        self.list_widget.addItems([str(path) for path in paths])

    def connect(self):
        self.add_button.clicked.connect(self._choose_files)
        self.remove_button.clicked.connect(self.remove_selected)

    def add(self, paths: List[str]):
        current = self.paths()
        new_paths = [path for path in paths if path and path not in current]
        if not new_paths:
            return
        self.list_widget.addItems(new_paths)
        self.step.save_to_context(self.key, self.paths())

    def remove_selected(self):
        rows = sorted((self.list_widget.row(item) for item in self.list_widget.selectedItems()),
                      reverse=True)
        if not rows:
            return
        for row in rows:
            self.list_widget.takeItem(row)
        self.step.save_to_context(self.key, self.paths())

    def _choose_files(self):
        paths, _ = QFileDialog.getOpenFileNames(self.step, "Select photos", "", IMAGE_FILTER)
        self.add(paths)


class PhotosStep(BaseStep):
    """Photos of the work (and, for shop services, receipts)."""

    def __init__(self, props, include_receipts: bool = False, parent=None):
        self.include_receipts = include_receipts
        super().__init__(props, parent)

    def setup_ui(self):
        self.photos = PhotoList(self, "photos", f"Service photos (up to {Config.MAX_PHOTOS})")
        self.receipts = None
        if self.include_receipts:
            self.receipts = PhotoList(self, "receipt_photos", "Receipt photos")
        self.main_layout.addStretch()

    def populate_data(self, data: Dict[str, Any]):
        self.photos.set_paths(data.get("photos") or [])
        if self.receipts:
            self.receipts.set_paths(data.get("receipt_photos") or [])

    def connect_signals(self):
        self.photos.connect()
        if self.receipts:
            self.receipts.connect()
