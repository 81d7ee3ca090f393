import argparse
import sys

import boto3
import botocore.client
from botocore.exceptions import BotoCoreError, ClientError

from .app import S3ConsoleApp
from .config import load_config
from .providers.s3 import S3Store, error_code


def resolve_s3_settings(args, config):
    """Merge command-line flags over the [s3] config section."""
    settings = dict(config.get("s3", {}))
    for name in ('region', 'endpoint_url', 'profile'):
        value = getattr(args, name, None)
        if value:
            settings[name] = value
    # Explicit keys win over a profile from the config file
    if getattr(args, 'access_key', None):
        settings['profile'] = None
    return settings


def create_s3_client(args, settings):
    client_kwargs = {}
    if settings.get('region'):
        client_kwargs['region_name'] = settings['region']
    if settings.get('endpoint_url'):
        # Most S3-compatible servers only support path-style addressing
        client_kwargs['endpoint_url'] = settings['endpoint_url']
        client_kwargs['config'] = botocore.client.Config(s3={'addressing_style': 'path'})

    if settings.get('profile'):
        session = boto3.Session(profile_name=settings['profile'])
        return session.client('s3', **client_kwargs)
    elif args.access_key and args.secret_key:
        return boto3.client(
            's3',
            aws_access_key_id=args.access_key,
            aws_secret_access_key=args.secret_key,
            **client_kwargs,
        )
    else:
        return boto3.client('s3', **client_kwargs)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='S3 Console - Interactive S3 bucket and file manager')
    parser.add_argument('--bucket', required=False, help='Bucket to select on startup')
    parser.add_argument('--config', dest='config_path', default=None, help='Path to config file (default: ~/.s3console/config.json)')
    parser.add_argument('--region', help='Region for the S3 client')
    parser.add_argument('--endpoint-url', dest='endpoint_url', help='Endpoint of an S3-compatible store (e.g. http://localhost:9000)')
    group = parser.add_argument_group('S3 Authentication methods')
    group.add_argument('--profile', help='AWS CLI profile name for S3')
    group.add_argument('--access-key', help='AWS access key for S3')
    group.add_argument('--secret-key', help='AWS secret key for S3')
    args = parser.parse_args(argv)

    if (args.access_key and not args.secret_key) or (args.secret_key and not args.access_key):
        parser.error('S3 --access-key and --secret-key must be provided together')
    if sum(1 for x in [args.profile, args.access_key] if x) > 1:
        parser.error('Only one S3 authentication method (--profile, --access-key) can be used.')
    return args


def select_initial_bucket(app, bucket_name):
    """Select bucket_name before the prompt starts. Returns False on failure."""
    try:
        if not app.buckets.bucket_exists(bucket_name):
            print(f"Error: S3 Bucket '{bucket_name}' not found.")
            return False
    except ClientError as e:
        code = error_code(e)
        if code in ['403', 'AccessDenied']:
            print(f"Error: Access denied to S3 bucket '{bucket_name}'. Check credentials/permissions.")
        else:
            print(f"Error accessing S3 bucket '{bucket_name}': {code}")
        return False
    except BotoCoreError as e:
        print(f"Error accessing S3 bucket '{bucket_name}': {e}")
        return False

    app.session.select(bucket_name)
    return True


def main(argv=None):
    args = parse_args(argv)
    config = load_config(args.config_path)
    settings = resolve_s3_settings(args, config)

    try:
        s3_client = create_s3_client(args, settings)
    except (BotoCoreError, ValueError) as e:
        print(f"Error creating S3 client: {e}", file=sys.stderr)
        return 1

    app = S3ConsoleApp(S3Store(s3_client), config)

    if args.bucket and not select_initial_bucket(app, args.bucket):
        return 1

    app.run()
    return 0


if __name__ == '__main__':
    sys.exit(main())
