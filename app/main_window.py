# -*- coding: utf-8 -*-
"""
Main application window hosting one maintenance wizard run.
"""

from typing import Callable, List, Optional

from PyQt5.QtCore import pyqtSignal
from PyQt5.QtWidgets import QMainWindow

from .config import Config, Pages
from models.maintenance_log import MaintenanceLog
from repositories.draft_repository import DraftRepository
from services.exceptions import DraftStorageError, ValidationException, WizardConfigurationError
from ui.error_handler import ErrorHandler
from ui.wizards.framework import WizardConfig, WizardContainer, WizardState
from ui.wizards.maintenance import build_diy_service_config, build_shop_service_config
from utils.logger import get_logger

logger = get_logger(__name__)

RESUME_DRAFT_MESSAGE = "You have an unfinished entry for this vehicle. Continue where you left off?"


class MainWindow(QMainWindow):
    """Window that runs a DIY or Shop service wizard for one vehicle."""

    log_saved = pyqtSignal(object)  # MaintenanceLog

    def __init__(self, page: str, vehicle_id: str,
                 draft_repository: Optional[DraftRepository] = None,
                 confirm_resume: Optional[Callable[[], bool]] = None,
                 parent=None):
        """
        Args:
            page: Pages.DIY_SERVICE or Pages.SHOP_SERVICE
            vehicle_id: Vehicle the entry belongs to
            draft_repository: Draft store (defaults to Config.DRAFTS_DIR)
            confirm_resume: Yes/no prompt for resuming a draft

        Raises:
            ValueError: for an unknown page
        """
        super().__init__(parent)
        if page not in (Pages.DIY_SERVICE, Pages.SHOP_SERVICE):
            raise ValueError(f"Unknown wizard page: {page}")

        self.page = page
        self.vehicle_id = vehicle_id
        self.draft_repository = draft_repository or DraftRepository()
        self.confirm_resume = confirm_resume or self._confirm_resume
        self.saved_logs: List[MaintenanceLog] = []

        self._setup_window()

        config = self._build_config()
        self.wizard = WizardContainer(
            config,
            on_complete=self._on_wizard_complete,
            on_cancel=self._on_wizard_cancel,
            draft_repository=self.draft_repository,
            initial_state=self._restore_draft(config),
            parent=self,
        )
        self.setCentralWidget(self.wizard)

    def _setup_window(self):
        """Configure window properties."""
        self.setWindowTitle(Config.APP_TITLE)
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)

    def _build_config(self) -> WizardConfig:
        if self.page == Pages.SHOP_SERVICE:
            return build_shop_service_config(self.vehicle_id)
        return build_diy_service_config(self.vehicle_id)

    def _confirm_resume(self) -> bool:
        return ErrorHandler.confirm(self, RESUME_DRAFT_MESSAGE, "Resume entry")

    def _restore_draft(self, config: WizardConfig) -> Optional[WizardState]:
        """Previously autosaved state, if one exists and the user wants it."""
        key = config.persist_key
        if not key or not Config.AUTOSAVE_ENABLED:
            return None

        try:
            snapshot = self.draft_repository.load(key)
            if snapshot is None or not self.confirm_resume():
                return None
            state = WizardState.from_dict(snapshot)
            state.check_against(config)
        except DraftStorageError as e:
            ErrorHandler.handle(e, context="draft restore", show_dialog=False)
            return None
        except WizardConfigurationError as e:
            # The snapshot is readable but can never be resumed
            ErrorHandler.handle(e, context="draft restore", show_dialog=False)
            self._discard_unusable_draft(key)
            return None

        logger.info(f"Restored draft '{key}'")
        return state

    def _discard_unusable_draft(self, key: str):
        try:
            self.draft_repository.delete(key)
        except DraftStorageError as e:
            ErrorHandler.handle(e, context="draft discard", show_dialog=False)
            return
        logger.warning(f"Discarded unusable draft '{key}'")

    def _on_wizard_complete(self, data: dict):
        try:
            if self.page == Pages.SHOP_SERVICE:
                log = MaintenanceLog.from_shop_wizard(data)
            else:
                log = MaintenanceLog.from_diy_wizard(data)
        except ValidationException as e:
            logger.error(f"Completed wizard produced an unusable entry: {e.message} ({e.field})")
            ErrorHandler.show_error(self, e.message, "Could not save")
            return

        logger.info(f"Maintenance log created: {log.title} ({log.log_id})")
        self.saved_logs.append(log)
        self.log_saved.emit(log)
        ErrorHandler.show_success(self, "Your service has been saved to the maintenance history.",
                                  "Service Saved")
        self.close()

    def _on_wizard_cancel(self):
        logger.info("Wizard cancelled by user")
        self.close()
