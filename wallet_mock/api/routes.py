"""API route handlers for the Wallet Balances Mock API."""
from fastapi import APIRouter, Depends

from wallet_mock.api.deps import get_wallet_service, response_delay
from wallet_mock.errors import InternalError
from wallet_mock.logging import get_logger
from wallet_mock.schemas import ErrorEnvelope, WalletRecord
from wallet_mock.services.wallets import WalletService

logger = get_logger(__name__)

router = APIRouter(tags=["wallets"])


@router.get(
    "/wallets",
    response_model=list[WalletRecord],
    dependencies=[Depends(response_delay)],
    responses={500: {"model": ErrorEnvelope, "description": "Wallet data could not be built"}},
)
async def list_wallets(
    wallet_service: WalletService = Depends(get_wallet_service),
):
    """
    Retrieve the list of wallet balances.

    Every request is delayed (3 seconds by default) before the records are
    built. Each record carries the time it was read in its datetime field.
    Failures are returned as {"error": {"message": ...}} with status 500.
    """
    try:
        wallets = wallet_service.get_wallets()
    except InternalError:
        raise
    except Exception as e:
        # Everything leaving the route is an InternalError
        raise InternalError(str(e)) from e

    logger.info("wallets_listed", wallet_count=len(wallets))

    return wallets
