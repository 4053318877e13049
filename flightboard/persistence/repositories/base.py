"""Generic async Firestore repository for user-scoped collections."""

from __future__ import annotations

from typing import Generic, TypeVar, Type

from flightboard.contracts.common import FirestoreModel
from flightboard.persistence.errors import InvalidReferenceError, NotAuthenticatedError
from flightboard.persistence.firestore_client import get_firestore_client

T = TypeVar("T", bound=FirestoreModel)


class BaseRepository(Generic[T]):
    """CRUD for a Firestore subcollection under ``/users/{user_id}/``.

    Serialization relies entirely on the contract's ``to_firestore()``
    and ``from_firestore()`` methods, with no extra mapping layer.

    Every operation requires a non-empty ``user_id``; operations on a single
    document also require a non-blank ``doc_id``.
    """

    def __init__(self, model_class: Type[T], collection_name: str):
        self._model_class = model_class
        self._collection_name = collection_name

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _collection_ref(self, user_id: str | None, operation: str):
        if not user_id:
            raise NotAuthenticatedError(f"{self._collection_name}.{operation}")
        db = get_firestore_client()
        return (
            db.collection("users")
            .document(user_id)
            .collection(self._collection_name)
        )

    def _document_ref(self, user_id: str | None, doc_id: str | None, operation: str):
        collection = self._collection_ref(user_id, operation)
        if doc_id is None or not doc_id.strip():
            raise InvalidReferenceError(self._collection_name, doc_id)
        return collection.document(doc_id)

    def _hydrate(self, doc) -> T:
        data = doc.to_dict()
        data["id"] = doc.id
        return self._model_class.from_firestore(data)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def list_all(self, user_id: str | None) -> list[T]:
        """Stream every document in the collection."""
        results: list[T] = []
        async for doc in self._collection_ref(user_id, "list").stream():
            results.append(self._hydrate(doc))
        return results

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, user_id: str | None, entity: T) -> str:
        """Create a document with a Firestore-generated ID.

        Returns the document ID.
        """
        collection = self._collection_ref(user_id, "create")
        data = entity.to_firestore()
        data.pop("id", None)
        ref = await collection.add(data)
        return ref[1].id  # (write_result, doc_ref) tuple

    async def delete(self, user_id: str | None, doc_id: str | None) -> None:
        """Delete a document. Deleting a missing document is not an error."""
        await self._document_ref(user_id, doc_id, "delete").delete()
