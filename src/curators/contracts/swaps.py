"""Swap transaction request and response contracts."""

from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from curators.contracts.wallet import validate_public_key
from curators.jupiter import SOL_DECIMALS


class SwapTransactionRequest(BaseModel):
    """Request for an unsigned swap transaction."""

    input_mint: str = Field(..., min_length=32, max_length=44, description="Source token mint")
    output_mint: str = Field(..., min_length=32, max_length=44, description="Destination token mint")
    amount: Decimal = Field(..., gt=0, description="Amount in whole units of the source token")
    user_public_key: str = Field(..., description="Wallet that will sign the transaction")
    decimals: int = Field(
        default=SOL_DECIMALS, ge=0, le=18, description="Source token decimals"
    )

    @field_validator("user_public_key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        return validate_public_key(v)


class SwapTransactionResponse(BaseModel):
    """Unsigned swap transaction for client-side signing."""

    success: bool = Field(..., description="Whether the transaction was built")
    swap_obj: dict[str, Any] = Field(..., description="Raw Jupiter swap payload")
    out_amount: str = Field(..., description="Quoted output amount in smallest units")
    swap_transaction: Optional[str] = Field(
        None, description="Base64 serialized unsigned transaction"
    )
    last_valid_block_height: Optional[int] = Field(
        None, description="Block height after which the transaction expires"
    )
