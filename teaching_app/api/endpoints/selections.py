"""Selected class (cart) endpoints"""

from fastapi import APIRouter, Depends
from typing import Any, Dict, List, Optional
import logging

from teaching_app.core.dependencies import get_store, get_token_claims
from teaching_app.core.store import Store
from teaching_app.schemas.common import DeleteWriteResult, InsertResult
from teaching_app.schemas.selections import SelectionCreate
from teaching_app.utils.serializers import parse_object_id, serialize_document, serialize_documents

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/selected", response_model=InsertResult)
async def create_selection(selection: SelectionCreate, store: Store = Depends(get_store)) -> InsertResult:
    result = await store.selected.insert_one(selection.model_dump(exclude_unset=True))
    logger.info(f"✓ {selection.email} selected class {selection.classRef}")
    return InsertResult.from_result(result)


@router.get("/selected")
async def list_selections(store: Store = Depends(get_store)) -> List[Dict[str, Any]]:
    """Every cart entry for every user"""
    selections = await store.selected.find().to_list(None)
    return serialize_documents(selections)


@router.get("/select/{id}")
async def get_selection(id: str, store: Store = Depends(get_store)) -> Optional[Dict[str, Any]]:
    """One cart entry, or null when it does not exist"""
    selection = await store.selected.find_one({"_id": parse_object_id(id)})
    return serialize_document(selection)


@router.get("/selected/{email}", dependencies=[Depends(get_token_claims)])
async def list_selections_by_email(email: str, store: Store = Depends(get_store)) -> List[Dict[str, Any]]:
    selections = await store.selected.find({"email": email}).to_list(None)
    return serialize_documents(selections)


@router.delete("/selected/{id}", response_model=DeleteWriteResult)
async def delete_selection(id: str, store: Store = Depends(get_store)) -> DeleteWriteResult:
    result = await store.selected.delete_one({"_id": parse_object_id(id)})
    return DeleteWriteResult.from_result(result)
