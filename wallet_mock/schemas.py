"""Pydantic schemas for response serialization."""
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class WalletAmount(BaseModel):
    """Balance of a wallet. The amount stays a string to keep fixed-point precision."""
    model_config = ConfigDict(frozen=True)

    amount: str = Field(..., pattern=r"^\d+\.\d+$", description="Fixed-point decimal amount")
    currency: str = Field(..., description="Three-letter currency code")


class WalletRecord(BaseModel):
    """Single wallet balance returned by GET /wallets."""
    model_config = ConfigDict(frozen=True)

    account_id: str = Field(..., description="Opaque account identifier")
    company_name: str
    amount: WalletAmount
    credit_debit_indicator: Literal["Credit", "Debit"]
    datetime: str = Field(..., description="ISO 8601 timestamp of when the record was read")


class ErrorDetail(BaseModel):
    message: str


class ErrorEnvelope(BaseModel):
    """Body of every 500 response."""
    error: ErrorDetail
