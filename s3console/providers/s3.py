import sys
from typing import List

from botocore.exceptions import ClientError

from .base import BucketProbe, ObjectStore

NOT_FOUND_CODES = ('404', 'NoSuchBucket', 'NotFound')


def error_code(error: ClientError) -> str:
    return error.response.get('Error', {}).get('Code', 'Unknown')


def is_not_found(error: ClientError) -> bool:
    if error_code(error) in NOT_FOUND_CODES:
        return True
    status = error.response.get('ResponseMetadata', {}).get('HTTPStatusCode')
    return status == 404


class S3Store(ObjectStore):
    """Object store backed by a boto3 S3 client."""

    def __init__(self, s3_client):
        self.s3_client = s3_client

    def list_buckets(self) -> List[dict]:
        response = self.s3_client.list_buckets()
        return [
            {'name': b['Name'], 'created_at': b.get('CreationDate')}
            for b in response.get('Buckets', [])
        ]

    def head_bucket(self, bucket_name: str) -> BucketProbe:
        try:
            self.s3_client.head_bucket(Bucket=bucket_name)
        except ClientError as e:
            if is_not_found(e):
                return BucketProbe.MISSING
            print(f"Error probing bucket '{bucket_name}': {error_code(e)}", file=sys.stderr)
            raise
        return BucketProbe.FOUND

    def create_bucket(self, bucket_name: str):
        kwargs = {'Bucket': bucket_name}
        region = self.s3_client.meta.region_name
        # us-east-1 rejects an explicit location constraint
        if region and region != 'us-east-1':
            kwargs['CreateBucketConfiguration'] = {'LocationConstraint': region}
        self.s3_client.create_bucket(**kwargs)

    def delete_bucket(self, bucket_name: str):
        self.s3_client.delete_bucket(Bucket=bucket_name)

    def list_objects(self, bucket_name: str) -> List[dict]:
        # Single page only; anything past MaxKeys is not returned.
        response = self.s3_client.list_objects_v2(Bucket=bucket_name)
        if response.get('IsTruncated'):
            print(
                f"[Listing of '{bucket_name}' truncated after {response.get('KeyCount', 0)} objects]",
                file=sys.stderr,
            )
        return [
            {
                'key': obj['Key'],
                'size': obj.get('Size', 0),
                'last_modified': obj.get('LastModified'),
                'storage_class': obj.get('StorageClass', 'STANDARD'),
            }
            for obj in response.get('Contents', [])
        ]

    def get_object(self, bucket_name: str, key: str):
        response = self.s3_client.get_object(Bucket=bucket_name, Key=key)
        return response['Body']

    def put_object(self, bucket_name: str, key: str, body: bytes):
        self.s3_client.put_object(Bucket=bucket_name, Key=key, Body=body)

    def delete_object(self, bucket_name: str, key: str):
        self.s3_client.delete_object(Bucket=bucket_name, Key=key)

    def delete_objects(self, bucket_name: str, keys: List[str]) -> dict:
        response = self.s3_client.delete_objects(
            Bucket=bucket_name,
            Delete={'Objects': [{'Key': key} for key in keys]},
        )
        return {
            'deleted': [d['Key'] for d in response.get('Deleted', [])],
            'errors': [
                {
                    'key': err.get('Key'),
                    'code': err.get('Code', 'Unknown'),
                    'message': err.get('Message', ''),
                }
                for err in response.get('Errors', [])
            ],
        }
