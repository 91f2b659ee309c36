#!/usr/bin/env python3
"""
Keyboard Friendly Graphics View - Demo Entry Point

Opens a dialog with a graphics view whose items can be navigated,
selected and moved with the keyboard.

Usage:
    python main.py
    python main.py --debug              # Enable debug logging
    python main.py --virtual-bastard    # Start sending random key presses
    python main.py --config PATH        # Use a specific settings file
"""

import sys
import logging
import argparse
from PyQt6.QtWidgets import QApplication
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont

from services.settings_manager import get_settings
from services.version_info import get_version
from views import DemoDialog


def setup_logging(debug: bool = False):
    """Configure logging for the application."""
    level = logging.DEBUG if debug else logging.INFO

    # Create formatter
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    # Log startup message
    logger = logging.getLogger(__name__)
    logger.info(f"Logging initialized at {'DEBUG' if debug else 'INFO'} level")


def setup_application() -> QApplication:
    """Configure the Qt application."""
    # High DPI support
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Keyboard Friendly Graphics View")
    app.setApplicationVersion(get_version())
    app.setOrganizationName("keyboard-friendly-view")

    # Set default font
    font = QFont("SF Pro Display", 10)
    if not font.exactMatch():
        font = QFont("Segoe UI", 10)
    if not font.exactMatch():
        font = QFont("Helvetica Neue", 10)
    app.setFont(font)

    return app


def main():
    """Main entry point."""
    # Parse command line arguments
    parser = argparse.ArgumentParser(description='Keyboard friendly graphics view demo')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--virtual-bastard', action='store_true',
                        help='Send random key presses to the view on start')
    parser.add_argument('--config', default=None, help='Path to settings file')
    args = parser.parse_args()

    # Setup logging
    setup_logging(debug=args.debug)

    settings = get_settings(args.config)
    if args.virtual_bastard:
        settings.demo.virtual_bastard_on_start = True

    app = setup_application()

    # Create and show demo dialog
    dialog = DemoDialog(settings)
    dialog.show()

    # Run event loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
