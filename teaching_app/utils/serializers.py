# ============================================================================
# FILE: teaching_app/utils/serializers.py
# ============================================================================
"""Conversion between Mongo documents and JSON bodies"""

from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from fastapi.encoders import jsonable_encoder


def parse_object_id(value: Optional[str]) -> ObjectId:
    """Parse a path or body identifier

    Raises:
        bson.errors.InvalidId: if the value is missing or not a 24-char hex string
    """
    # ObjectId(None) would mint a fresh id instead of failing
    if value is None:
        raise InvalidId("identifier is required")
    return ObjectId(value)


def serialize_document(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Make a Mongo document JSON safe (ObjectId -> str, datetime -> ISO 8601)"""
    if document is None:
        return None
    return jsonable_encoder(document, custom_encoder={ObjectId: str})


def serialize_documents(documents: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [serialize_document(d) for d in documents]
