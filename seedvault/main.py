"""
Main entry point for SeedVault.
"""

import sys
import os
import signal
import logging

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from seedvault.ui import MainWindow
from seedvault.storage import JsonFileStore
from seedvault.vault import SecretVault
from seedvault.balance import BalanceClient
from seedvault import config


class SeedVaultApp:
    """Main application class for SeedVault."""

    def __init__(self):
        """Initialize the application."""
        self.app = QApplication(sys.argv)
        self.app.setApplicationName(config.APP_NAME)
        self.app.setOrganizationName(config.APP_NAME)
        self.app.setStyle(config.APP_STYLE)

        self.storage_path = self._get_default_storage_path()
        self.store = JsonFileStore(self.storage_path)
        self.vault = SecretVault(self.store)

        # Remaining command line arguments are addresses for the balance table
        addresses = self.app.arguments()[1:]
        self.main_window = MainWindow(self.vault, BalanceClient(), addresses)

        # Handle Ctrl+C gracefully
        signal.signal(signal.SIGINT, signal.SIG_DFL)

    def _get_default_storage_path(self) -> str:
        """Get the default path for the record store file."""
        home = os.path.expanduser("~")
        app_dir = os.path.join(home, config.CONFIG_DIR_NAME)
        os.makedirs(app_dir, exist_ok=True)
        return os.path.join(app_dir, config.DEFAULT_STORE_FILE)

    def run(self) -> int:
        """Run the application."""
        logging.getLogger(__name__).info(f"Using record store {self.storage_path}")
        self.main_window.show()
        return self.app.exec_()


def main():
    """Main entry point."""
    logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(levelname)s - %(name)s - %(message)s')
    # Enable high DPI scaling
    if hasattr(Qt, 'AA_EnableHighDpiScaling'):
        QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    if hasattr(Qt, 'AA_UseHighDpiPixmaps'):
        QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    app = SeedVaultApp()
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
