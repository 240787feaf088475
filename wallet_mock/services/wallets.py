"""Wallet data provider serving the static list of wallet balances."""
from datetime import datetime, timezone
from typing import Callable, Optional

from wallet_mock import metrics
from wallet_mock.errors import DataFetchError
from wallet_mock.logging import get_logger, TimedOperation
from wallet_mock.schemas import WalletAmount, WalletRecord

logger = get_logger(__name__)

FETCH_ERROR_MESSAGE = "Error fetching wallets data"

# (account_id, company_name, amount, currency, credit_debit_indicator)
WALLET_BALANCES: tuple[tuple[str, str, str, str, str], ...] = (
    ("3230bd7e-cb4c-553c-bcd3-607f3a3f8e20", "Business Example LTD", "50000.5000", "USD", "Credit"),
    ("5259846c-1d53-d9e0-1865-9d3815c42c16", "Business Example LTD", "2700000.5000", "EUR", "Credit"),
    ("a70e04fd-cc2e-4c93-9079-2e41ec6eb7a1", "Business Example LTD", "500730.0000", "GBP", "Credit"),
    ("f70e04fd-cc2e-4c93-9079-2e41ec6eb7a2", "Business Example LTD", "1725000.0000", "RSD", "Credit"),
    # Not a valid UUID; account ids are opaque
    ("t70e04fd-cc2e-4c93-9079-2e41ec6eb7a9", "Business Example LTD", "930000.0000", "JPY", "Credit"),
)


def current_timestamp() -> str:
    """Return the current UTC time as ISO 8601 with milliseconds, e.g. 2024-07-24T12:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class WalletService:
    """
    Provider of wallet balance records.

    Records are built from WALLET_BALANCES on every call, so nothing is
    shared between requests and only the datetime field changes.
    """

    def __init__(self, clock: Optional[Callable[[], str]] = None):
        """
        Initialize the wallet service.

        Args:
            clock: Callable returning the timestamp stamped on each record.
                Defaults to current_timestamp.
        """
        self.clock = clock or current_timestamp

    def get_wallets(self) -> list[WalletRecord]:
        """
        Build the ordered list of wallet balances.

        Returns:
            The five wallet records, each stamped with the current time

        Raises:
            DataFetchError: If any record cannot be built
        """
        with TimedOperation("wallets_fetch", logger=logger):
            try:
                wallets = [
                    WalletRecord(
                        account_id=account_id,
                        company_name=company_name,
                        amount=WalletAmount(amount=amount, currency=currency),
                        credit_debit_indicator=indicator,
                        datetime=self.clock(),
                    )
                    for account_id, company_name, amount, currency, indicator in WALLET_BALANCES
                ]
            except Exception as e:
                metrics.record_wallet_fetch(success=False)
                raise DataFetchError(FETCH_ERROR_MESSAGE) from e

        metrics.record_wallet_fetch(success=True)
        return wallets
