"""
User interface for SeedVault.

The window only collects input and shows results. Vault calls and balance
requests run in worker threads so the window stays responsive during key
derivation and network I/O.
"""

import asyncio
import logging
from typing import Awaitable, Callable, List, Optional

from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QFormLayout, QGroupBox,
    QLabel, QLineEdit, QPushButton, QTableWidget, QTableWidgetItem,
    QHeaderView, QInputDialog
)
from PyQt5.QtCore import Qt, QThread, pyqtSignal

from .balance import BalanceClient
from .vault import SecretVault
from . import config

logger = logging.getLogger(__name__)

ADDRESS_COLUMN = 0
BALANCE_COLUMN = 1


class VaultWorker(QThread):
    """Worker thread running one vault coroutine on its own event loop."""

    done = pyqtSignal(str)
    error = pyqtSignal(str)

    def __init__(self, operation: Callable[[], Awaitable[str]]):
        super().__init__()
        self.operation = operation

    def run(self):
        """Run the vault operation."""
        try:
            self.done.emit(asyncio.run(self.operation()))
        except Exception as e:
            logger.info(f"Vault operation failed: {type(e).__name__}")
            self.error.emit(str(e))


class BalanceWorker(QThread):
    """Worker thread for balance lookups."""

    balance_ready = pyqtSignal(str, str)

    def __init__(self, client: BalanceClient, addresses: List[str]):
        super().__init__()
        self.client = client
        self.addresses = addresses

    def run(self):
        """Look up each address and report it as soon as it is known."""
        for address in self.addresses:
            for found, text in self.client.fetch_balances([address]).items():
                self.balance_ready.emit(found, text)


class MainWindow(QMainWindow):
    """Phrase storage form plus the address balance table."""

    def __init__(self, vault: SecretVault, balance_client: BalanceClient,
                 addresses: Optional[List[str]] = None):
        super().__init__()
        self.vault = vault
        self.balance_client = balance_client
        self.vault_worker: Optional[VaultWorker] = None
        self.balance_worker: Optional[BalanceWorker] = None
        self.init_ui()
        for address in addresses or []:
            self.add_address_row(address)

    def init_ui(self):
        """Initialize the user interface."""
        self.setWindowTitle(config.APP_TITLE_PREFIX)
        self.setMinimumWidth(config.WINDOW_MIN_WIDTH)

        central = QWidget()
        layout = QVBoxLayout()

        # Phrase storage
        phrase_group = QGroupBox("Recovery Phrase")
        form = QFormLayout()
        self.phrase_input = QLineEdit()
        self.phrase_input.setPlaceholderText("Enter your recovery phrase")
        form.addRow("Phrase:", self.phrase_input)

        self.password_input = QLineEdit()
        self.password_input.setEchoMode(QLineEdit.Password)
        form.addRow("Password:", self.password_input)

        buttons = QHBoxLayout()
        self.save_button = QPushButton("Save")
        self.save_button.clicked.connect(self.save_phrase)
        buttons.addWidget(self.save_button)
        self.load_button = QPushButton("Load")
        self.load_button.clicked.connect(self.load_phrase)
        buttons.addWidget(self.load_button)
        form.addRow(buttons)

        self.status_label = QLabel("")
        self.status_label.setWordWrap(True)
        form.addRow(self.status_label)
        phrase_group.setLayout(form)
        layout.addWidget(phrase_group)

        # Address balances
        balance_group = QGroupBox("Addresses")
        balance_layout = QVBoxLayout()
        self.address_table = QTableWidget(0, 2)
        self.address_table.setHorizontalHeaderLabels(["Address", "Balance"])
        self.address_table.horizontalHeader().setSectionResizeMode(ADDRESS_COLUMN, QHeaderView.Stretch)
        self.address_table.horizontalHeader().setSectionResizeMode(BALANCE_COLUMN, QHeaderView.ResizeToContents)
        self.address_table.setEditTriggers(QTableWidget.NoEditTriggers)
        balance_layout.addWidget(self.address_table)

        table_buttons = QHBoxLayout()
        self.add_address_button = QPushButton("Add Address")
        self.add_address_button.clicked.connect(self.prompt_address)
        table_buttons.addWidget(self.add_address_button)
        self.load_balances_button = QPushButton("Load Balances")
        self.load_balances_button.clicked.connect(self.load_balances)
        table_buttons.addWidget(self.load_balances_button)
        balance_layout.addLayout(table_buttons)
        balance_group.setLayout(balance_layout)
        layout.addWidget(balance_group)

        central.setLayout(layout)
        self.setCentralWidget(central)

    # Phrase storage

    def save_phrase(self):
        phrase = self.phrase_input.text().strip()
        password = self.password_input.text()
        self._run_vault_operation(lambda: self.vault.save_secret(phrase, password), self.status_label.setText)

    def load_phrase(self):
        password = self.password_input.text()
        self._run_vault_operation(lambda: self.vault.load_secret(password), self._handle_phrase_loaded)

    def _handle_phrase_loaded(self, phrase: str):
        self.phrase_input.setText(phrase)
        self.status_label.setText(config.MSG_LOADED)

    def _run_vault_operation(self, operation: Callable[[], Awaitable[str]], on_done: Callable[[str], None]):
        """Start one vault call; the buttons stay disabled until it finishes."""
        self._set_vault_buttons_enabled(False)
        self.vault_worker = VaultWorker(operation)
        self.vault_worker.done.connect(on_done)
        self.vault_worker.error.connect(self.status_label.setText)
        self.vault_worker.finished.connect(lambda: self._set_vault_buttons_enabled(True))
        self.vault_worker.start()

    def _set_vault_buttons_enabled(self, enabled: bool):
        self.save_button.setEnabled(enabled)
        self.load_button.setEnabled(enabled)

    # Address balances

    def prompt_address(self):
        address, ok = QInputDialog.getText(self, "Add Address", "Bitcoin address:")
        if ok and address.strip():
            self.add_address_row(address.strip())

    def add_address_row(self, address: str):
        row = self.address_table.rowCount()
        self.address_table.insertRow(row)
        self.address_table.setItem(row, ADDRESS_COLUMN, QTableWidgetItem(address))
        self.address_table.setItem(row, BALANCE_COLUMN, QTableWidgetItem(""))

    def load_balances(self):
        addresses = []
        for row in range(self.address_table.rowCount()):
            item = self.address_table.item(row, ADDRESS_COLUMN)
            if item is None or not item.text().strip():
                continue
            addresses.append(item.text().strip())
            self.address_table.setItem(row, BALANCE_COLUMN, QTableWidgetItem(config.BALANCE_LOADING_TEXT))
        if not addresses:
            return

        self.load_balances_button.setEnabled(False)
        self.balance_worker = BalanceWorker(self.balance_client, addresses)
        self.balance_worker.balance_ready.connect(self._handle_balance_ready)
        self.balance_worker.finished.connect(lambda: self.load_balances_button.setEnabled(True))
        self.balance_worker.start()

    def _handle_balance_ready(self, address: str, text: str):
        for row in range(self.address_table.rowCount()):
            item = self.address_table.item(row, ADDRESS_COLUMN)
            if item is not None and item.text().strip() == address:
                balance_item = QTableWidgetItem(text)
                balance_item.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
                self.address_table.setItem(row, BALANCE_COLUMN, balance_item)
