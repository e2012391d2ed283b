"""
Public balance lookups for Bitcoin addresses.

Only addresses are sent to the balance API; nothing here touches the vault.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Dict, Iterable, Optional

import requests

from . import config
from .errors import BalanceLookupError, InvalidInputError

logger = logging.getLogger(__name__)


def format_balance(balance: Decimal) -> str:
    """Render a BTC amount the way the address table shows it, e.g. '0.00012000 BTC'."""
    return f"{balance:.{config.BALANCE_DECIMALS}f} BTC"


class BalanceClient:
    """Fetches confirmed address balances from the BlockCypher API."""

    def __init__(self, session: Optional[requests.Session] = None,
                 base_url: str = config.BALANCE_API_URL,
                 timeout: float = config.BALANCE_REQUEST_TIMEOUT_SECONDS):
        self.session = session or requests.Session()
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    def balance_url(self, address: str) -> str:
        return f"{self.base_url}/addrs/{address}/balance"

    def fetch_balance(self, address: str) -> Decimal:
        """
        Fetch the balance of one address.

        Args:
            address: Bitcoin address

        Returns:
            Balance in BTC

        Raises:
            InvalidInputError: If the address is empty
            BalanceLookupError: On network errors, HTTP errors or an unexpected payload
        """
        address = (address or "").strip()
        if not address:
            raise InvalidInputError("Address is required.")

        try:
            response = self.session.get(self.balance_url(address), timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise BalanceLookupError(f"Balance request for {address} failed: {e}") from e
        except ValueError as e:
            raise BalanceLookupError(f"Balance response for {address} is not JSON") from e

        satoshis = data.get('balance') if isinstance(data, dict) else None
        if isinstance(satoshis, bool) or not isinstance(satoshis, (int, str)):
            raise BalanceLookupError(f"Balance response for {address} has no balance field")
        try:
            satoshis = Decimal(satoshis)
        except InvalidOperation as e:
            raise BalanceLookupError(f"Balance response for {address} has an invalid balance") from e
        if not satoshis.is_finite():
            raise BalanceLookupError(f"Balance response for {address} has an invalid balance")
        return satoshis / Decimal(config.SATOSHIS_PER_BTC)

    def fetch_balances(self, addresses: Iterable[str]) -> Dict[str, str]:
        """
        Fetch display text for several addresses.

        A failed address maps to config.BALANCE_ERROR_TEXT and does not stop
        the others. Blank addresses are skipped.
        """
        results: Dict[str, str] = {}
        for address in addresses:
            address = (address or "").strip()
            if not address or address in results:
                continue
            try:
                results[address] = format_balance(self.fetch_balance(address))
            except BalanceLookupError as e:
                logger.error(f"Error fetching balance: {e}")
                results[address] = config.BALANCE_ERROR_TEXT
        return results
