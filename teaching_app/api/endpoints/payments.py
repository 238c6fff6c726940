# ============================================================================
# FILE: teaching_app/api/endpoints/payments.py
# ============================================================================
"""Payment endpoints - Stripe intents and payment history"""

from fastapi import APIRouter, Depends, Query
from pymongo import DESCENDING
from pymongo.errors import PyMongoError
from datetime import datetime, timezone
from typing import Any, Dict, List
import logging

from teaching_app.core.config import Settings
from teaching_app.core.dependencies import get_gateway, get_settings, get_store, get_token_claims
from teaching_app.core.payment_gateway import PaymentGateway, to_minor_units
from teaching_app.core.store import Store
from teaching_app.schemas.common import DeleteWriteResult, InsertResult
from teaching_app.schemas.payments import (
    PaymentCreate,
    PaymentIntentRequest,
    PaymentIntentResponse,
    PaymentRecordResponse,
)
from teaching_app.utils.serializers import parse_object_id, serialize_documents

logger = logging.getLogger(__name__)
router = APIRouter()

# ==================== PAYMENT INTENT ====================

@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    request: PaymentIntentRequest,
    gateway: PaymentGateway = Depends(get_gateway),
    settings: Settings = Depends(get_settings),
) -> PaymentIntentResponse:
    """Start a card payment with Stripe; the client confirms it with the secret"""
    amount = to_minor_units(request.price)
    logger.info(f"Creating payment intent for {amount} {settings.PAYMENT_CURRENCY}")
    client_secret = await gateway.create_payment_intent(amount, currency=settings.PAYMENT_CURRENCY)
    return PaymentIntentResponse(clientSecret=client_secret)

# ==================== RECORD PAYMENT ====================

@router.post("/payment", response_model=PaymentRecordResponse)
async def record_payment(
    payment: PaymentCreate,
    claims: Dict[str, Any] = Depends(get_token_claims),
    store: Store = Depends(get_store),
) -> PaymentRecordResponse:
    """
    Store a completed payment and drop the paid selection from the cart
    Steps:
    1. Parse the selection id (bad id -> 400, nothing written)
    2. Insert the payment record, stamped with the server time
    3. Delete the selection; if that fails, remove the payment from step 2
    """
    selection_id = parse_object_id(payment.selectedItemId)

    document = payment.model_dump(exclude_unset=True)
    document["date"] = datetime.now(timezone.utc)
    insert_result = await store.payments.insert_one(document)
    logger.info(f"✓ Payment {insert_result.inserted_id} saved for {claims.get('email')}")

    try:
        delete_result = await store.selected.delete_one({"_id": selection_id})
    except PyMongoError as e:
        logger.error(f"❌ Could not clear selection {selection_id}, rolling back payment: {e}")
        try:
            await store.payments.delete_one({"_id": insert_result.inserted_id})
        except PyMongoError as rollback_error:
            logger.error(
                f"❌ Rollback failed, payment {insert_result.inserted_id} kept "
                f"while selection {selection_id} remains: {rollback_error}"
            )
        raise

    return PaymentRecordResponse(
        insertResult=InsertResult.from_result(insert_result),
        removeClass=DeleteWriteResult.from_result(delete_result),
    )

# ==================== PAYMENT HISTORY ====================

@router.get("/payment", dependencies=[Depends(get_token_claims)])
async def list_payments(
    email: str = Query(..., description="Payer email"),
    store: Store = Depends(get_store),
) -> List[Dict[str, Any]]:
    """Payments for one email, newest first"""
    payments = await store.payments.find({"email": email}).sort("date", DESCENDING).to_list(None)
    return serialize_documents(payments)
