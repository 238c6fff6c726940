# teaching_app/schemas/payments.py
"""Payment-related schemas"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import Any, Optional

from teaching_app.schemas.common import DeleteWriteResult, InsertResult


# ==================== REQUEST SCHEMAS ====================

class PaymentIntentRequest(BaseModel):
    """Create a Stripe payment intent"""
    price: float = Field(..., description="Price in dollars")

class PaymentCreate(BaseModel):
    """Completed payment reported by the checkout client"""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    email: Optional[str] = Field(None, description="Payer email")
    selectedItemId: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("selectedItemId", "selecteItemId"),
        description="Id of the paid selection",
    )
    transactionId: Optional[str] = Field(None, description="Stripe transaction id")
    price: Optional[Any] = Field(None, description="Amount paid in dollars")


# ==================== RESPONSE SCHEMAS ====================

class PaymentIntentResponse(BaseModel):
    """Client secret for client-side confirmation"""
    clientSecret: str = Field(..., description="Stripe payment intent client secret")

class PaymentRecordResponse(BaseModel):
    """Result of storing a payment and clearing its selection"""
    insertResult: InsertResult
    removeClass: DeleteWriteResult
