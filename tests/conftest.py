import copy
import json
from typing import Any, Dict, List, Optional
from urllib.parse import parse_qs

import httpx
import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo import ASCENDING, DESCENDING
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from teaching_app import create_app
from teaching_app.core.payment_gateway import PaymentGateway
from teaching_app.core.security import create_access_token
from teaching_app.core.store import Store


def _matches(document: Dict[str, Any], query: Optional[Dict[str, Any]]) -> bool:
    return all(document.get(key) == value for key, value in (query or {}).items())


class FakeCursor:
    """Subset of AsyncIOMotorCursor used by the routes"""

    def __init__(self, documents: List[Dict[str, Any]]):
        self._documents = documents

    def sort(self, key: str, direction: int = ASCENDING) -> 'FakeCursor':
        # Missing values sort lowest, as in Mongo
        self._documents = sorted(
            self._documents,
            key=lambda d: (d.get(key) is not None, d.get(key) if d.get(key) is not None else 0),
            reverse=direction == DESCENDING,
        )
        return self

    def limit(self, count: int) -> 'FakeCursor':
        if count:
            self._documents = self._documents[:count]
        return self

    async def to_list(self, length: Optional[int]) -> List[Dict[str, Any]]:
        return self._documents if length is None else self._documents[:length]


class FakeCollection:
    """In-memory stand-in for AsyncIOMotorCollection

    Records every call in ``calls`` and raises the exception stored in
    ``fail_on[method]`` when set.
    """

    def __init__(self, name: str):
        self.name = name
        self.documents: List[Dict[str, Any]] = []
        self.calls: List[tuple] = []
        self.fail_on: Dict[str, Exception] = {}

    def _record(self, method: str, *args) -> None:
        self.calls.append((method,) + args)
        if method in self.fail_on:
            raise self.fail_on[method]

    def calls_to(self, method: str) -> List[tuple]:
        return [call for call in self.calls if call[0] == method]

    def find(self, query: Optional[Dict[str, Any]] = None) -> FakeCursor:
        self._record('find', query)
        return FakeCursor([copy.deepcopy(d) for d in self.documents if _matches(d, query)])

    async def find_one(self, query: Optional[Dict[str, Any]] = None) -> Optional[Dict[str, Any]]:
        self._record('find_one', query)
        for document in self.documents:
            if _matches(document, query):
                return copy.deepcopy(document)
        return None

    async def insert_one(self, document: Dict[str, Any]) -> InsertOneResult:
        self._record('insert_one', document)
        document.setdefault('_id', ObjectId())
        self.documents.append(copy.deepcopy(document))
        return InsertOneResult(document['_id'], True)

    async def update_one(self, query: Dict[str, Any], update: Dict[str, Any], upsert: bool = False) -> UpdateResult:
        self._record('update_one', query, update)
        changes = update.get('$set', {})
        for document in self.documents:
            if _matches(document, query):
                modified = any(document.get(k) != v for k, v in changes.items())
                document.update(changes)
                return UpdateResult({'n': 1, 'nModified': int(modified)}, True)

        if upsert:
            document = {**query, **changes}
            document.setdefault('_id', ObjectId())
            self.documents.append(document)
            return UpdateResult({'n': 1, 'nModified': 0, 'upserted': document['_id']}, True)
        return UpdateResult({'n': 0, 'nModified': 0}, True)

    async def delete_one(self, query: Dict[str, Any]) -> DeleteResult:
        self._record('delete_one', query)
        for index, document in enumerate(self.documents):
            if _matches(document, query):
                del self.documents[index]
                return DeleteResult({'n': 1}, True)
        return DeleteResult({'n': 0}, True)


class FakeDatabase:
    def __init__(self):
        self.collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection(name))

    async def command(self, name: str) -> Dict[str, Any]:
        return {'ok': 1}


class FakeMongoClient:
    def __init__(self):
        self.databases: Dict[str, FakeDatabase] = {}
        self.admin = FakeDatabase()
        self.closed = False

    def __getitem__(self, name: str) -> FakeDatabase:
        return self.databases.setdefault(name, FakeDatabase())

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def store() -> Store:
    return Store(FakeMongoClient(), 'teachingDB')


@pytest.fixture
def stripe_requests() -> List[Dict[str, Any]]:
    return []


@pytest.fixture
def stripe_response() -> Dict[str, Any]:
    """Status and JSON body the fake Stripe answers with; tests may mutate it"""
    return {'status': 200, 'json': {'id': 'pi_123', 'client_secret': 'pi_123_secret_abc'}}


@pytest.fixture
def gateway(stripe_requests, stripe_response) -> PaymentGateway:
    def handler(request: httpx.Request) -> httpx.Response:
        form = {key: values[0] for key, values in parse_qs(request.content.decode()).items()}
        stripe_requests.append({
            'url': str(request.url),
            'authorization': request.headers.get('authorization'),
            'form': form,
        })
        return httpx.Response(stripe_response['status'], content=json.dumps(stripe_response['json']))

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return PaymentGateway(http_client, secret_key='sk_test_123', api_url='https://api.stripe.com/v1/')


@pytest.fixture
def app(store, gateway):
    application = create_app()
    application.state.store = store
    application.state.gateway = gateway
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


def auth_header(email: str) -> Dict[str, str]:
    return {'Authorization': f"Bearer {create_access_token({'email': email})}"}


def seed(collection: FakeCollection, **fields) -> ObjectId:
    document = dict(fields)
    document.setdefault('_id', ObjectId())
    collection.documents.append(document)
    return document['_id']
