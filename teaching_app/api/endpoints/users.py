# ============================================================================
# FILE: teaching_app/api/endpoints/users.py
# ============================================================================
"""User endpoints - sign-up, role checks and role changes"""

from fastapi import APIRouter, Depends
from typing import Any, Dict, List, Union
import logging

from teaching_app.core.dependencies import get_store, get_token_claims, require_role
from teaching_app.core.store import Store
from teaching_app.schemas.common import DeleteWriteResult, InsertResult, MessageResponse, UpdateWriteResult
from teaching_app.schemas.users import Role, UserCreate
from teaching_app.utils.serializers import parse_object_id, serialize_documents

logger = logging.getLogger(__name__)
router = APIRouter()

MEMBER_EXISTS_MESSAGE = "member already exist"

# ==================== SIGN-UP ====================

@router.post("/users", response_model=Union[InsertResult, MessageResponse])
async def create_user(user: UserCreate, store: Store = Depends(get_store)) -> Union[InsertResult, MessageResponse]:
    """Save a user on first sign-in; later sign-ins are a no-op"""
    existing_user = await store.users.find_one({"email": user.email})
    if existing_user:
        return MessageResponse(message=MEMBER_EXISTS_MESSAGE)

    result = await store.users.insert_one(user.model_dump(exclude_unset=True))
    logger.info(f"✓ New member: {user.email}")
    return InsertResult.from_result(result)

# ==================== LISTINGS ====================

@router.get("/users", dependencies=[Depends(require_role(Role.ADMIN))])
async def list_users(store: Store = Depends(get_store)) -> List[Dict[str, Any]]:
    users = await store.users.find().to_list(None)
    return serialize_documents(users)


@router.get("/instructors")
async def list_instructors(store: Store = Depends(get_store)) -> List[Dict[str, Any]]:
    instructors = await store.users.find({"role": Role.INSTRUCTOR.value}).to_list(None)
    return serialize_documents(instructors)

# ==================== ROLES ====================

@router.get("/users/{role}/{email}")
async def check_role(
    role: Role,
    email: str,
    claims: Dict[str, Any] = Depends(get_token_claims),
    store: Store = Depends(get_store),
) -> Dict[str, bool]:
    """Tell the caller whether they hold ``role``

    Asking about anyone other than the token holder answers false
    without touching the store.
    """
    if email != claims.get("email"):
        return {role.value: False}

    user = await store.users.find_one({"email": email})
    return {role.value: Role.of(user) is role}


@router.patch("/users/{role}/{id}", response_model=UpdateWriteResult)
async def set_role(role: Role, id: str, store: Store = Depends(get_store)) -> UpdateWriteResult:
    result = await store.users.update_one(
        {"_id": parse_object_id(id)},
        {"$set": {"role": role.value}},
    )
    logger.info(f"User {id} promoted to {role.value}")
    return UpdateWriteResult.from_result(result)


@router.delete("/users/{id}", response_model=DeleteWriteResult)
async def delete_user(id: str, store: Store = Depends(get_store)) -> DeleteWriteResult:
    result = await store.users.delete_one({"_id": parse_object_id(id)})
    return DeleteWriteResult.from_result(result)
