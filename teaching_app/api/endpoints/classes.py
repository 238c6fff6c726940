# ============================================================================
# FILE: teaching_app/api/endpoints/classes.py
# ============================================================================
"""Class offering endpoints - listing, review and seat counters"""

from fastapi import APIRouter, Depends
from pymongo import DESCENDING
from typing import Any, Dict, List
import logging

from teaching_app.core.dependencies import get_store, get_token_claims, require_role
from teaching_app.core.store import Store
from teaching_app.schemas.classes import CapacityUpdate, ClassCreate, ClassStatus, FeedbackRequest
from teaching_app.schemas.common import InsertResult, UpdateWriteResult
from teaching_app.schemas.users import Role
from teaching_app.utils.serializers import parse_object_id, serialize_documents

logger = logging.getLogger(__name__)
router = APIRouter()

POPULAR_CLASS_LIMIT = 6

# ==================== LISTINGS ====================

@router.get("/classes", dependencies=[Depends(require_role(Role.ADMIN))])
async def list_classes(store: Store = Depends(get_store)) -> List[Dict[str, Any]]:
    """All classes regardless of status (admin only)"""
    classes = await store.classes.find().to_list(None)
    return serialize_documents(classes)


@router.get("/classes/{email}", dependencies=[Depends(get_token_claims)])
async def list_classes_by_instructor(email: str, store: Store = Depends(get_store)) -> List[Dict[str, Any]]:
    classes = await store.classes.find({"instructorEmail": email}).to_list(None)
    return serialize_documents(classes)


@router.get("/approvedclass")
async def list_approved_classes(store: Store = Depends(get_store)) -> List[Dict[str, Any]]:
    """Approved classes, most enrolled first"""
    classes = await (
        store.classes.find({"status": ClassStatus.APPROVED.value})
        .sort("enrolled", DESCENDING)
        .to_list(None)
    )
    return serialize_documents(classes)


@router.get("/popularclass")
async def list_popular_classes(store: Store = Depends(get_store)) -> List[Dict[str, Any]]:
    """Top six approved classes by enrollment"""
    classes = await (
        store.classes.find({"status": ClassStatus.APPROVED.value})
        .sort("enrolled", DESCENDING)
        .limit(POPULAR_CLASS_LIMIT)
        .to_list(None)
    )
    return serialize_documents(classes)

# ==================== INSTRUCTOR / ADMIN WRITES ====================

@router.post("/classes", response_model=InsertResult)
async def create_class(
    new_class: ClassCreate,
    claims: Dict[str, Any] = Depends(require_role(Role.INSTRUCTOR)),
    store: Store = Depends(get_store),
) -> InsertResult:
    """Submit a class for review; it starts out pending"""
    document = new_class.model_dump(exclude_unset=True)
    document["status"] = ClassStatus.PENDING.value
    document.setdefault("enrolled", 0)

    result = await store.classes.insert_one(document)
    logger.info(f"✓ Class {result.inserted_id} submitted by {claims.get('email')}")
    return InsertResult.from_result(result)


async def _set_status(store: Store, id: str, class_status: ClassStatus) -> UpdateWriteResult:
    result = await store.classes.update_one(
        {"_id": parse_object_id(id)},
        {"$set": {"status": class_status.value}},
    )
    logger.info(f"Class {id} marked {class_status.value}")
    return UpdateWriteResult.from_result(result)


@router.patch("/classe/approved/{id}", response_model=UpdateWriteResult)
async def approve_class(id: str, store: Store = Depends(get_store)) -> UpdateWriteResult:
    return await _set_status(store, id, ClassStatus.APPROVED)


@router.patch("/classe/denied/{id}", response_model=UpdateWriteResult)
async def deny_class(id: str, store: Store = Depends(get_store)) -> UpdateWriteResult:
    return await _set_status(store, id, ClassStatus.DENIED)


@router.put("/feedback/{id}", response_model=UpdateWriteResult)
async def set_feedback(id: str, body: FeedbackRequest, store: Store = Depends(get_store)) -> UpdateWriteResult:
    result = await store.classes.update_one(
        {"_id": parse_object_id(id)},
        {"$set": {"feedback": body.feedback}},
        upsert=True,
    )
    return UpdateWriteResult.from_result(result)


@router.put("/updateClass/{id}", response_model=UpdateWriteResult)
async def update_class_capacity(id: str, body: CapacityUpdate, store: Store = Depends(get_store)) -> UpdateWriteResult:
    """Overwrite the seat counters after an enrollment"""
    result = await store.classes.update_one(
        {"_id": parse_object_id(id)},
        {"$set": {"availableSeats": body.availableSeats, "enrolled": body.enrolled}},
    )
    return UpdateWriteResult.from_result(result)
