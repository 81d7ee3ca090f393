import pytest

from s3console import cli
from s3console.config import DEFAULT_CONFIG

from conftest import client_error


def test_parse_args_defaults():
    args = cli.parse_args([])
    assert args.bucket is None
    assert args.profile is None
    assert args.endpoint_url is None


def test_access_key_requires_secret_key():
    with pytest.raises(SystemExit):
        cli.parse_args(['--access-key', 'AKIA'])


def test_profile_and_keys_are_exclusive():
    with pytest.raises(SystemExit):
        cli.parse_args(['--profile', 'dev', '--access-key', 'a', '--secret-key', 'b'])


def test_flags_override_config():
    args = cli.parse_args(['--region', 'eu-west-1', '--endpoint-url', 'http://localhost:9000'])
    config = {'s3': {'region': 'us-east-1', 'endpoint_url': None, 'profile': 'dev'}}
    settings = cli.resolve_s3_settings(args, config)
    assert settings == {'region': 'eu-west-1', 'endpoint_url': 'http://localhost:9000', 'profile': 'dev'}


def test_explicit_keys_override_config_profile():
    args = cli.parse_args(['--access-key', 'a', '--secret-key', 'b'])
    settings = cli.resolve_s3_settings(args, {'s3': {'profile': 'dev'}})
    assert settings['profile'] is None


def test_create_s3_client_for_compatible_endpoint():
    args = cli.parse_args(['--access-key', 'a', '--secret-key', 'b'])
    settings = {'region': 'us-east-1', 'endpoint_url': 'http://localhost:9000', 'profile': None}
    client = cli.create_s3_client(args, settings)
    assert client.meta.endpoint_url == 'http://localhost:9000'
    assert client.meta.region_name == 'us-east-1'
    assert client.meta.config.s3['addressing_style'] == 'path'


def test_select_initial_bucket(app, session):
    assert cli.select_initial_bucket(app, 'logs') is True
    assert session.current() == 'logs'


def test_select_initial_bucket_missing(app, session, capsys):
    assert cli.select_initial_bucket(app, 'ghost') is False
    assert "S3 Bucket 'ghost' not found" in capsys.readouterr().out
    assert not session.is_selected()


def test_select_initial_bucket_access_denied(app, store, capsys):
    store.fail('head_bucket', client_error('AccessDenied', 403))
    assert cli.select_initial_bucket(app, 'logs') is False
    assert 'Access denied' in capsys.readouterr().out


def test_main_runs_shell_with_selected_bucket(monkeypatch, store):
    ran = []
    monkeypatch.setattr(cli, 'load_config', lambda path: DEFAULT_CONFIG)
    monkeypatch.setattr(cli, 'create_s3_client', lambda args, settings: object())
    monkeypatch.setattr(cli, 'S3Store', lambda client: store)
    monkeypatch.setattr(cli.S3ConsoleApp, 'run', lambda self: ran.append(self.session.current()))

    assert cli.main(['--bucket', 'logs']) == 0
    assert ran == ['logs']


def test_main_stops_when_bucket_missing(monkeypatch, store):
    monkeypatch.setattr(cli, 'load_config', lambda path: DEFAULT_CONFIG)
    monkeypatch.setattr(cli, 'create_s3_client', lambda args, settings: object())
    monkeypatch.setattr(cli, 'S3Store', lambda client: store)
    monkeypatch.setattr(cli.S3ConsoleApp, 'run', lambda self: pytest.fail('shell should not start'))

    assert cli.main(['--bucket', 'ghost']) == 1
