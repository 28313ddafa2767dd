"""Error taxonomy for the matching service.

Each error carries a stable ``code`` and the HTTP status the API layer
renders it with. Request-level errors fail the whole call; per-candidate
problems are logged and skipped by the matching engine instead.
"""


class MatchingError(Exception):
    code: str = "internal"
    status_code: int = 500

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message or self.code


class InvalidArgumentError(MatchingError):
    code = "invalid-argument"
    status_code = 400


class NotFoundError(MatchingError):
    code = "not-found"
    status_code = 404


class UnauthenticatedError(MatchingError):
    code = "unauthenticated"
    status_code = 401


class InternalError(MatchingError):
    code = "internal"
    status_code = 500


class DimensionMismatchError(InternalError):
    """Two embeddings of different length were compared."""

    def __init__(self, len_a: int, len_b: int) -> None:
        super().__init__(f"Vectors must be of the same length (got {len_a} and {len_b})")
        self.len_a = len_a
        self.len_b = len_b


class UnavailableError(MatchingError):
    code = "unavailable"
    status_code = 503


class EmbeddingStoreUnavailableError(UnavailableError):
    pass


class EncoderUnavailableError(UnavailableError):
    pass
