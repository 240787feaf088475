"""Service layer for the Wallet Balances Mock API."""
from wallet_mock.services.wallets import WalletService, current_timestamp

__all__ = ["WalletService", "current_timestamp"]
