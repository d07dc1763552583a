#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Customer Desk - customer and address management
Main entry point for the application
"""

import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from app.config import Config
from app import MainWindow, get_stylesheet
from utils.logger import setup_logger


def main():
    """Main application entry point."""

    # Set Qt attributes BEFORE creating QApplication
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    logger = setup_logger()

    try:
        app = QApplication(sys.argv)
        app.setApplicationName(Config.APP_NAME)
        app.setOrganizationName(Config.ORGANIZATION)
        app.setStyleSheet(get_stylesheet())

        logger.info("=" * 80)
        logger.info(f"Starting {Config.APP_NAME} v{Config.VERSION}")
        logger.info(f"API: {Config.API_BASE_URL}")
        logger.info("=" * 80)

        window = MainWindow()
        window.show()
        logger.info(">> Main window created and displayed")
        window.check_backend()

        exit_code = app.exec_()
        logger.info(f"Application closed with exit code: {exit_code}")
        sys.exit(exit_code)

    except Exception as e:
        logger.exception(f"Fatal error during application startup: {e}")
        print(f"\n[ERROR] Fatal error during application startup: {e}")
        print(f"\nPlease check {Config.LOG_PATH} for details")
        sys.exit(1)


if __name__ == "__main__":
    main()
