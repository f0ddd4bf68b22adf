"""
Async persistence gateway for the "animals" Firestore collection.

Provides a typed interface for:
- Enumerating every record (`list_all`)
- Appending a new document (`create`)
- Replacing a document's fields by id (`update`)
- Removing a document by id (`delete`)

Each call is one REST round trip (listing follows page tokens until the
collection is exhausted). Every failure, transport or HTTP status or
malformed body, surfaces as PersistenceError.
"""
from __future__ import annotations
import sys
from typing import Any, Dict, List, Mapping, Protocol

import httpx

from http_client import HttpClient

from .config import FirebaseConfig
from .errors import PersistenceError
from .models import AnimalFields, AnimalRecord, FirestoreDocument, FirestoreListPage
from .utils import doc_id_from_name, document_to_record, encode_fields

LIST_PAGE_SIZE = 300

class AnimalsGateway(Protocol):
    async def list_all(self) -> List[AnimalRecord]: ...

    async def create(self, fields: AnimalFields) -> str: ...

    async def update(self, doc_id: str, fields: AnimalFields) -> None: ...

    async def delete(self, doc_id: str) -> None: ...

class AnimalsAPI:

    def __init__(self, http: HttpClient, project_id: str, collection: str = "animals"):
        self.http = http
        self.collection = collection
        self.collection_path = f"/projects/{project_id}/databases/(default)/documents/{collection}"

    @classmethod
    def client_for(cls, config: FirebaseConfig, **kwargs: Any) -> HttpClient:
        """HttpClient wired with the API key; kwargs pass through (e.g. transport)."""
        params = {"key": config.api_key} if config.api_key else {}
        return HttpClient(
            base_url=config.base_url,
            connect_timeout=config.connect_timeout,
            read_timeout=config.read_timeout,
            default_params=params,
            **kwargs,
        )

    async def _call(self, operation: str, method: str, path: str, **kwargs: Any) -> Dict[str, Any]:
        try:
            resp = await self.http.request(method, path, **kwargs)
        except httpx.HTTPStatusError as e:
            raise PersistenceError(operation, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise PersistenceError(operation, f"network: {e!r}") from e
        if not resp.content:
            return {}
        try:
            body = resp.json()
        except ValueError as e:
            print(f"[warn] non-JSON response for {operation}: {resp.text[:200]}", file=sys.stderr)
            raise PersistenceError(operation, "non-JSON response") from e
        if not isinstance(body, dict):
            raise PersistenceError(operation, "unexpected response shape")
        return body

    async def list_all(self) -> List[AnimalRecord]:
        records: List[AnimalRecord] = []
        params: Dict[str, Any] = {"pageSize": LIST_PAGE_SIZE}
        while True:
            page: FirestoreListPage = await self._call("list", "GET", self.collection_path, params=dict(params))  # type: ignore[assignment]
            for doc in page.get("documents", []):
                try:
                    records.append(document_to_record(doc))
                except KeyError as e:
                    raise PersistenceError("list", "document without a name") from e
            token = page.get("nextPageToken")
            if not token:
                return records
            params["pageToken"] = token

    async def create(self, fields: Mapping[str, Any]) -> str:
        doc: FirestoreDocument = await self._call(  # type: ignore[assignment]
            "create", "POST", self.collection_path, json={"fields": encode_fields(fields)}
        )
        if "name" not in doc:
            raise PersistenceError("create", "response carried no document name")
        return doc_id_from_name(doc["name"])

    async def update(self, doc_id: str, fields: Mapping[str, Any]) -> None:
        # no updateMask: the stored field set is replaced wholesale
        await self._call(
            "update",
            "PATCH",
            f"{self.collection_path}/{doc_id}",
            params={"currentDocument.exists": "true"},
            json={"fields": encode_fields(fields)},
        )

    async def delete(self, doc_id: str) -> None:
        await self._call("delete", "DELETE", f"{self.collection_path}/{doc_id}")
