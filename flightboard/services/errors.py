"""Service-level exceptions."""


class ProviderError(Exception):
    """Raised when the remote flight provider cannot answer a query.

    Covers transport failures, non-2xx responses, provider-reported errors
    and malformed payloads. An empty result is never a ProviderError.
    """

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"{operation} failed: {reason}")
