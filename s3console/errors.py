"""Exception hierarchy for s3console operations."""

from typing import Optional

from botocore.exceptions import BotoCoreError, ClientError

# Failures raised by the boto3 client for any remote call
STORE_EXCEPTIONS = (ClientError, BotoCoreError)


class S3ConsoleError(Exception):
    """Base exception for every failure an operation reports to the shell."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class PreconditionError(S3ConsoleError):
    """Raised locally, before any remote call, when an operation cannot run."""
    pass


class StoreError(S3ConsoleError):
    """Raised when the object store rejects or fails a call."""
    pass


class LocalIOError(S3ConsoleError):
    """Raised when reading or writing a local file fails."""
    pass


NO_BUCKET_SELECTED = "No bucket selected. Use the 'use-bucket' command to select a bucket."
BUCKET_NOT_EMPTY = "The bucket is not empty. Empty it before deleting."


def store_error(prefix: str, error: Exception, **context) -> StoreError:
    """Build a StoreError that keeps the store's own text after a short prefix."""
    details = {k: v for k, v in context.items() if v is not None}
    response = getattr(error, 'response', None)
    if isinstance(response, dict):
        details['code'] = response.get('Error', {}).get('Code', 'Unknown')
    return StoreError(f"{prefix}: {error}", details)
