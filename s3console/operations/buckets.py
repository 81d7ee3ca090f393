import sys
from typing import List

from ..errors import (
    BUCKET_NOT_EMPTY,
    STORE_EXCEPTIONS,
    PreconditionError,
    store_error,
)
from ..providers.base import BucketProbe, ObjectStore
from ..session import BucketSession


class BucketOperations:
    """Bucket-level operations against the object store."""

    def __init__(self, store: ObjectStore, session: BucketSession):
        self.store = store
        self.session = session

    def list_buckets(self) -> List[dict]:
        try:
            return self.store.list_buckets()
        except STORE_EXCEPTIONS as e:
            raise store_error("Error listing buckets", e, operation='list_buckets') from e

    def bucket_exists(self, bucket_name: str) -> bool:
        """True if the bucket exists, False if the store reports it missing.

        Any other failure (access denied, network) is raised as-is: it means
        existence could not be determined, not that the bucket is absent.
        """
        return self.store.head_bucket(bucket_name) is BucketProbe.FOUND

    def create_bucket(self, bucket_name: str):
        try:
            self.store.create_bucket(bucket_name)
        except STORE_EXCEPTIONS as e:
            raise store_error(
                "Error creating bucket", e, operation='create_bucket', bucket=bucket_name
            ) from e

    def delete_bucket(self, bucket_name: str):
        """Delete an empty bucket, clearing the session if it was selected."""
        try:
            objects = self.store.list_objects(bucket_name)
        except STORE_EXCEPTIONS as e:
            raise store_error(
                "Error deleting bucket", e, operation='delete_bucket', bucket=bucket_name
            ) from e

        if objects:
            raise PreconditionError(BUCKET_NOT_EMPTY, {'bucket': bucket_name})

        try:
            self.store.delete_bucket(bucket_name)
        except STORE_EXCEPTIONS as e:
            raise store_error(
                "Error deleting bucket", e, operation='delete_bucket', bucket=bucket_name
            ) from e

        if self.session.current() == bucket_name:
            self.session.clear()
            print(f"[Session: cleared deleted bucket '{bucket_name}']", file=sys.stderr)
