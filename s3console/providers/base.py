import enum
from abc import ABC, abstractmethod
from typing import List


class BucketProbe(enum.Enum):
    """Outcome of a head-bucket probe that did not fail unexpectedly."""
    FOUND = 'found'
    MISSING = 'missing'


class ObjectStore(ABC):
    """Abstract base class for S3-compatible object stores."""

    @abstractmethod
    def list_buckets(self) -> List[dict]:
        """Return every bucket as {'name', 'created_at'}, in store order."""
        pass

    @abstractmethod
    def head_bucket(self, bucket_name: str) -> BucketProbe:
        """Probe a bucket. Failures other than not-found are raised."""
        pass

    @abstractmethod
    def create_bucket(self, bucket_name: str):
        """Create a bucket."""
        pass

    @abstractmethod
    def delete_bucket(self, bucket_name: str):
        """Delete an (empty) bucket."""
        pass

    @abstractmethod
    def list_objects(self, bucket_name: str) -> List[dict]:
        """Return a single page of objects as {'key', 'size', 'last_modified', 'storage_class'}."""
        pass

    @abstractmethod
    def get_object(self, bucket_name: str, key: str):
        """Return a readable byte stream with the object content."""
        pass

    @abstractmethod
    def put_object(self, bucket_name: str, key: str, body: bytes):
        """Store body under key."""
        pass

    @abstractmethod
    def delete_object(self, bucket_name: str, key: str):
        """Delete a single key."""
        pass

    @abstractmethod
    def delete_objects(self, bucket_name: str, keys: List[str]) -> dict:
        """Delete many keys in one call.

        Returns {'deleted': [key, ...], 'errors': [{'key', 'code', 'message'}, ...]}.
        """
        pass
