import io
from datetime import datetime, timezone

import pytest
from botocore.exceptions import ClientError

from s3console.app import S3ConsoleApp
from s3console.config import DEFAULT_CONFIG
from s3console.providers.base import BucketProbe, ObjectStore
from s3console.session import BucketSession

CREATED_AT = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def client_error(code, status=400, operation='HeadBucket', message='failure'):
    return ClientError(
        {
            'Error': {'Code': code, 'Message': message},
            'ResponseMetadata': {'HTTPStatusCode': status},
        },
        operation,
    )


class FailingStream(io.BytesIO):
    """Body that yields some bytes and then fails mid-transfer."""

    def __init__(self, data, error):
        super().__init__(data)
        self.error = error
        self.reads = 0

    def read(self, size=-1):
        self.reads += 1
        if self.reads > 1:
            raise self.error
        return super().read(size)


class FakeStore(ObjectStore):
    """In-memory object store that records every call it receives."""

    def __init__(self, buckets=None):
        self.buckets = {name: dict(objects) for name, objects in (buckets or {}).items()}
        self.calls = []
        self.errors = {}
        self.batch_errors = []
        self.streams = {}

    def fail(self, method, error):
        self.errors[method] = error

    def _record(self, method, *args):
        self.calls.append((method,) + args)
        if method in self.errors:
            raise self.errors[method]

    def calls_to(self, method):
        return [c for c in self.calls if c[0] == method]

    def list_buckets(self):
        self._record('list_buckets')
        return [{'name': name, 'created_at': CREATED_AT} for name in self.buckets]

    def head_bucket(self, bucket_name):
        self._record('head_bucket', bucket_name)
        return BucketProbe.FOUND if bucket_name in self.buckets else BucketProbe.MISSING

    def create_bucket(self, bucket_name):
        self._record('create_bucket', bucket_name)
        self.buckets[bucket_name] = {}

    def delete_bucket(self, bucket_name):
        self._record('delete_bucket', bucket_name)
        del self.buckets[bucket_name]

    def list_objects(self, bucket_name):
        self._record('list_objects', bucket_name)
        return [
            {'key': key, 'size': len(data), 'last_modified': CREATED_AT, 'storage_class': 'STANDARD'}
            for key, data in self.buckets[bucket_name].items()
        ]

    def get_object(self, bucket_name, key):
        self._record('get_object', bucket_name, key)
        if key in self.streams:
            return self.streams[key]
        return io.BytesIO(self.buckets[bucket_name][key])

    def put_object(self, bucket_name, key, body):
        self._record('put_object', bucket_name, key, body)
        self.buckets[bucket_name][key] = body

    def delete_object(self, bucket_name, key):
        self._record('delete_object', bucket_name, key)
        self.buckets[bucket_name].pop(key, None)

    def delete_objects(self, bucket_name, keys):
        self._record('delete_objects', bucket_name, list(keys))
        failed = {err['key'] for err in self.batch_errors}
        deleted = []
        for key in keys:
            if key in failed:
                continue
            if self.buckets[bucket_name].pop(key, None) is not None:
                deleted.append(key)
        return {'deleted': deleted, 'errors': list(self.batch_errors)}


@pytest.fixture
def store():
    return FakeStore({
        'logs': {'a.txt': b'alpha', 'b.txt': b'bravo'},
        'empty': {},
    })


@pytest.fixture
def session():
    return BucketSession()


@pytest.fixture
def app(store, session, tmp_path):
    config = {
        'general': dict(DEFAULT_CONFIG['general'], download_dir=str(tmp_path / 'downloads')),
        's3': dict(DEFAULT_CONFIG['s3']),
    }
    return S3ConsoleApp(store, config, session)
