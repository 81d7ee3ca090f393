from prompt_toolkit.document import Document

from s3console.completer import S3ConsoleCompleter


def complete(app, text):
    completer = S3ConsoleCompleter(app)
    return [c.text for c in completer.get_completions(Document(text), None)]


def test_completes_command_names(app):
    assert complete(app, 'list-') == ['list-buckets', 'list-files']


def test_completes_bucket_names(app):
    assert complete(app, 'use-bucket l') == ['logs']
    assert complete(app, 'delete-bucket ') == ['logs', 'empty']


def test_completes_object_keys_only_with_selection(app, session):
    assert complete(app, 'download-file ') == []
    session.select('logs')
    assert complete(app, 'delete-file b') == ['b.txt']


def test_completes_local_paths(app, tmp_path):
    (tmp_path / 'report.csv').write_text('x')
    (tmp_path / 'reports').mkdir()
    assert complete(app, f'upload-file {tmp_path}/rep') == [
        f'{tmp_path}/report.csv',
        f'{tmp_path}/reports/',
    ]


def test_store_failures_yield_no_completions(app, store):
    store.fail('list_buckets', RuntimeError('offline'))
    assert complete(app, 'use-bucket ') == []


def test_no_completion_past_first_argument(app):
    assert complete(app, 'use-bucket logs ') == []
