"""
Error taxonomy for the aggregator.

Every error carries the HTTP status the transport layer should answer with;
the core raises these and never builds responses itself.
"""


class AggregatorError(Exception):
    """Base error: a message plus the status to report it with."""

    default_message = "Internal Server Error"
    default_status = 500

    def __init__(self, message: str | None = None, status: int | None = None):
        self.message = message or self.default_message
        self.status = status or self.default_status
        super().__init__(self.message)

    def to_envelope(self) -> dict:
        return {"error": {"message": self.message, "status": self.status}}


class MissingTagsError(AggregatorError):
    default_message = "Tags parameter is required"
    default_status = 400


class InvalidSortFieldError(AggregatorError):
    default_message = "sortBy parameter is invalid"
    default_status = 400


class InvalidDirectionError(AggregatorError):
    default_message = "direction parameter is invalid"
    default_status = 400


class UpstreamError(AggregatorError):
    """A per-tag fetch failed; status is the upstream's when it answered."""

    default_message = "Upstream request failed"
    default_status = 500
