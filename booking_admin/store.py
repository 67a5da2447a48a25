"""
Document store access.

A single DocumentStore is built during application startup and kept on
``app.state``; request handlers receive it through ``get_store``. Reads never
cache: a write is not atomic with any read that follows it.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Callable, Optional

import firebase_admin
from fastapi import Request
from firebase_admin import credentials, firestore
from google.api_core import exceptions as google_exceptions

from .config import FIREBASE_PROJECT_ID, GOOGLE_APPLICATION_CREDENTIALS

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """A read or write against the document store failed"""

    def __init__(self, operation: str, collection: str, doc_id: Optional[str] = None):
        self.operation = operation
        self.collection = collection
        self.doc_id = doc_id
        path = f"{collection}/{doc_id}" if doc_id else collection
        super().__init__(f"{operation} failed on {path}")


class DocumentNotFound(StoreError):
    """The addressed document does not exist"""


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def initialize_firebase_app():
    """Initialize the Firebase Admin SDK (only once)"""
    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    options = {"projectId": FIREBASE_PROJECT_ID} if FIREBASE_PROJECT_ID else None
    if GOOGLE_APPLICATION_CREDENTIALS:
        cred = credentials.Certificate(GOOGLE_APPLICATION_CREDENTIALS)
        logger.info("Firebase Admin initialized with service account file")
    else:
        cred = credentials.ApplicationDefault()
        logger.info("Firebase Admin initialized with default credentials")
    return firebase_admin.initialize_app(cred, options)


def _with_id(snapshot) -> dict:
    data = snapshot.to_dict() or {}
    return {**data, "id": snapshot.id}


class DocumentStore:
    """Collection/document operations over a Firestore client"""

    def __init__(self, client):
        self.client = client

    @classmethod
    def from_firebase(cls) -> "DocumentStore":
        app = initialize_firebase_app()
        store = cls(firestore.client(app))
        logger.info(f"✅ Document store ready (project: {FIREBASE_PROJECT_ID or 'default'})")
        return store

    @contextmanager
    def _call(self, operation: str, collection: str, doc_id: Optional[str] = None):
        try:
            yield
        except google_exceptions.NotFound as e:
            logger.warning(f"⚠️ {operation} on missing document {collection}/{doc_id}")
            raise DocumentNotFound(operation, collection, doc_id) from e
        except google_exceptions.GoogleAPIError as e:
            logger.error(f"❌ Store {operation} failed on {collection}/{doc_id or '*'}: {e}")
            raise StoreError(operation, collection, doc_id) from e

    def list(self, collection: str) -> list[dict]:
        with self._call("list", collection):
            return [_with_id(snapshot) for snapshot in self.client.collection(collection).stream()]

    def get(self, collection: str, doc_id: str) -> Optional[dict]:
        with self._call("get", collection, doc_id):
            snapshot = self.client.collection(collection).document(doc_id).get()
        if not snapshot.exists:
            return None
        return _with_id(snapshot)

    def has_documents(self, collection: str) -> bool:
        with self._call("probe", collection):
            return len(self.client.collection(collection).limit(1).get()) > 0

    def add(self, collection: str, data: dict[str, Any]) -> str:
        with self._call("add", collection):
            _, ref = self.client.collection(collection).add(data)
        logger.info(f"Created {collection}/{ref.id}")
        return ref.id

    def update(self, collection: str, doc_id: str, data: dict[str, Any]) -> None:
        with self._call("update", collection, doc_id):
            self.client.collection(collection).document(doc_id).update(data)

    def set(self, collection: str, doc_id: str, data: dict[str, Any], merge: bool = False) -> None:
        with self._call("set", collection, doc_id):
            self.client.collection(collection).document(doc_id).set(data, merge=merge)

    def delete(self, collection: str, doc_id: str) -> None:
        with self._call("delete", collection, doc_id):
            self.client.collection(collection).document(doc_id).delete()
        logger.info(f"Deleted {collection}/{doc_id}")

    def watch(self, collection: str, callback: Callable[[list[dict]], None]) -> Callable[[], None]:
        """
        Subscribe to every change of a collection.

        ``callback`` receives the full list of documents on each change and runs
        on the SDK's listener thread. Returns the unsubscribe function.
        """

        def on_snapshot(col_snapshot, _changes, _read_time):
            callback([_with_id(snapshot) for snapshot in col_snapshot])

        with self._call("watch", collection):
            watch = self.client.collection(collection).on_snapshot(on_snapshot)
        return watch.unsubscribe

    def close(self) -> None:
        self.client.close()


def get_store(request: Request) -> DocumentStore:
    return request.app.state.store
