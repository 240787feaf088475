"""HTTP API for the Wallet Balances Mock API."""
from wallet_mock.api.routes import router

__all__ = ["router"]
