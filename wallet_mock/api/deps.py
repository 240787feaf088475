"""Dependencies shared by the API routes."""
import asyncio
import time

from wallet_mock import metrics
from wallet_mock.config import settings
from wallet_mock.logging import get_logger
from wallet_mock.services.wallets import WalletService

logger = get_logger(__name__)


async def response_delay() -> None:
    """
    Hold the request for settings.response_delay_ms before the handler runs.

    The wait is an await on the event loop, so other requests keep being
    accepted and served while this one is suspended.
    """
    start_time = time.perf_counter()

    await asyncio.sleep(settings.response_delay_ms / 1000)

    duration_seconds = time.perf_counter() - start_time
    metrics.record_response_delay(duration_seconds)

    logger.info(
        "response_delay_completed",
        delay_ms=settings.response_delay_ms,
        duration_ms=round(duration_seconds * 1000, 2),
    )


def get_wallet_service() -> WalletService:
    """Dependency that provides the wallet data provider."""
    return WalletService()
