#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Vehicle Maintenance Log - Service entry wizard
Main entry point for the application

Usage:
    python main.py diy VEHICLE_ID
    python main.py shop VEHICLE_ID
"""

import argparse
import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from app.config import Config, Pages
from app.main_window import MainWindow
from utils.logger import setup_logger
from ui.font_utils import FontManager


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=Config.APP_TITLE)
    parser.add_argument(
        "wizard", choices=[Pages.DIY_SERVICE, Pages.SHOP_SERVICE],
        help="which service wizard to open"
    )
    parser.add_argument("vehicle_id", help="vehicle the entry belongs to")
    return parser.parse_args(argv)


def main():
    """Main application entry point."""
    args = parse_args()

    # Set Qt attributes BEFORE creating QApplication
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    # Initialize logging
    logger = setup_logger()

    try:
        app = QApplication(sys.argv)
        app.setApplicationName(Config.APP_NAME)
        app.setOrganizationName(Config.ORGANIZATION)
        FontManager.set_application_default()

        logger.info("=" * 80)
        logger.info(f"Starting {Config.APP_NAME} {Config.VERSION}")
        logger.info("=" * 80)
        logger.info(f"Drafts directory: {Config.DRAFTS_DIR}")

        window = MainWindow(args.wizard, args.vehicle_id)
        window.log_saved.connect(lambda log: logger.info(f"Saved entry: {log.to_dict()}"))
        window.show()
        logger.info(f">> Opened {args.wizard} service wizard for vehicle {args.vehicle_id}")

        exit_code = app.exec_()
        logger.info(f"Application closed with exit code: {exit_code}")
        sys.exit(exit_code)

    except Exception as e:
        error_msg = f"Fatal error during application startup: {e}"
        print(f"\n[ERROR] {error_msg}")
        print(f"\nPlease check {Config.LOG_PATH} for details")
        logger.exception(error_msg)
        sys.exit(1)


if __name__ == "__main__":
    main()
