"""Persistence-specific exceptions."""


class PersistenceError(Exception):
    """Base exception for all persistence errors."""


class NotAuthenticatedError(PersistenceError):
    """Raised when a user-scoped operation is attempted without a user ID."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation} requires a signed-in user")


class InvalidReferenceError(PersistenceError):
    """Raised when a document ID is empty or blank."""

    def __init__(self, collection: str, doc_id: str | None):
        self.collection = collection
        self.doc_id = doc_id
        super().__init__(f"{collection}: missing document ID")


class DocumentNotFoundError(PersistenceError):
    """Raised when a Firestore document does not exist."""

    def __init__(self, collection: str, doc_id: str):
        self.collection = collection
        self.doc_id = doc_id
        super().__init__(f"{collection}/{doc_id} not found")
