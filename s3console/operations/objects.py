import os
import sys
import tempfile
from typing import List

from ..errors import (
    NO_BUCKET_SELECTED,
    STORE_EXCEPTIONS,
    LocalIOError,
    PreconditionError,
    StoreError,
    store_error,
)
from ..providers.base import ObjectStore
from ..session import BucketSession

DOWNLOAD_CHUNK_SIZE = 1024 * 1024


class ObjectOperations:
    """Object-level operations on the bucket selected in the session."""

    def __init__(self, store: ObjectStore, session: BucketSession):
        self.store = store
        self.session = session

    def _require_bucket(self) -> str:
        if not self.session.is_selected():
            raise PreconditionError(NO_BUCKET_SELECTED)
        return self.session.current()

    def list_objects(self) -> List[dict]:
        bucket = self._require_bucket()
        print(f"[Fetch: {bucket}]", file=sys.stderr)
        try:
            return self.store.list_objects(bucket)
        except STORE_EXCEPTIONS as e:
            raise store_error(
                "Error listing objects from bucket", e, operation='list_objects', bucket=bucket
            ) from e

    def download_object(self, key: str, destination_dir: str) -> str:
        """Download key into destination_dir, keeping the key's subdirectories.

        The body is streamed into a temporary file next to the target and
        renamed over it once complete, so a failed transfer never leaves a
        truncated file behind. Returns the absolute target path.
        """
        bucket = self._require_bucket()
        target_path = resolve_download_path(key, destination_dir)
        target_dir = os.path.dirname(target_path)

        try:
            os.makedirs(target_dir, exist_ok=True)
        except OSError as e:
            raise LocalIOError(
                f"Error downloading object: {e}", {'bucket': bucket, 'key': key, 'path': target_path}
            ) from e

        try:
            body = self.store.get_object(bucket, key)
        except STORE_EXCEPTIONS as e:
            raise store_error(
                "Error downloading object", e, operation='download_object', bucket=bucket, key=key
            ) from e

        temp_path = None
        try:
            fd, temp_path = tempfile.mkstemp(
                dir=target_dir, prefix='.' + os.path.basename(target_path) + '.', suffix='.part'
            )
            with os.fdopen(fd, 'wb') as f:
                for chunk in iter(lambda: body.read(DOWNLOAD_CHUNK_SIZE), b''):
                    f.write(chunk)
            os.replace(temp_path, target_path)
            temp_path = None
        except STORE_EXCEPTIONS as e:
            raise store_error(
                "Error downloading object", e, operation='download_object', bucket=bucket, key=key
            ) from e
        except OSError as e:
            raise LocalIOError(
                f"Error downloading object: {e}", {'bucket': bucket, 'key': key, 'path': target_path}
            ) from e
        finally:
            body.close()
            if temp_path is not None:
                _remove_quietly(temp_path)

        return target_path

    def delete_object(self, key: str):
        bucket = self._require_bucket()
        try:
            self.store.delete_object(bucket, key)
        except STORE_EXCEPTIONS as e:
            raise store_error(
                "Error deleting object", e, operation='delete_object', bucket=bucket, key=key
            ) from e

    def upload_object(self, local_path: str, key: str):
        bucket = self._require_bucket()
        try:
            with open(local_path, 'rb') as f:
                body = f.read()
        except OSError as e:
            raise LocalIOError(
                f"Error uploading object: {e}", {'bucket': bucket, 'key': key, 'path': local_path}
            ) from e

        try:
            self.store.put_object(bucket, key, body)
        except STORE_EXCEPTIONS as e:
            raise store_error(
                "Error uploading object", e, operation='upload_object', bucket=bucket, key=key
            ) from e

    def delete_all_objects(self) -> int:
        """Remove every listed object with one batch delete.

        Returns the number of keys the store confirms as deleted. Only the
        first listing page is covered.
        """
        bucket = self._require_bucket()
        try:
            objects = self.store.list_objects(bucket)
        except STORE_EXCEPTIONS as e:
            raise store_error(
                "Error clearing bucket", e, operation='delete_all_objects', bucket=bucket
            ) from e

        if not objects:
            return 0

        keys = [obj['key'] for obj in objects]
        try:
            result = self.store.delete_objects(bucket, keys)
        except STORE_EXCEPTIONS as e:
            raise store_error(
                "Error clearing bucket", e, operation='delete_all_objects', bucket=bucket
            ) from e

        deleted_count = len(result.get('deleted', []))
        errors = result.get('errors', [])
        if errors:
            first = errors[0]
            raise StoreError(
                f"Error clearing bucket: {len(errors)} object(s) could not be deleted "
                f"({first['key']}: {first['code']} {first['message']})",
                {
                    'operation': 'delete_all_objects',
                    'bucket': bucket,
                    'deleted': deleted_count,
                    'failed': [err['key'] for err in errors],
                },
            )
        return deleted_count


def resolve_download_path(key: str, destination_dir: str) -> str:
    """Map an object key to an absolute path under destination_dir."""
    relative = key.lstrip('/')
    if not relative or relative.endswith('/'):
        raise PreconditionError(f"Invalid object key for download: '{key}'", {'key': key})

    base = os.path.abspath(destination_dir)
    target = os.path.abspath(os.path.join(base, relative))
    if target == base or os.path.commonpath([base, target]) != base:
        raise PreconditionError(
            f"Object key '{key}' resolves outside '{destination_dir}'", {'key': key}
        )
    return target


def _remove_quietly(path: str):
    try:
        os.remove(path)
    except OSError as e:
        print(f"Could not remove partial download {path}: {e}", file=sys.stderr)
