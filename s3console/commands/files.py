import os

from ..config import get_download_dir
from ..errors import S3ConsoleError
from ..formatting import format_objects_table


def do_list_files(app, *args):
    """List the objects in the selected bucket."""
    if args:
        print("Usage: list-files")
        return
    try:
        objects = app.objects.list_objects()
    except S3ConsoleError as e:
        print(e.message)
        return
    print(format_objects_table(objects, app.session.current()))


def do_download_file(app, *args):
    """Download an object, keeping its key's directory structure."""
    if len(args) < 1 or len(args) > 2:
        print("Usage: download-file <key> [<destination_dir>]")
        return
    key = args[0]
    destination_dir = args[1] if len(args) == 2 else get_download_dir(app.config)
    destination_dir = os.path.expanduser(destination_dir)

    try:
        app.log(f"[Download: {key} -> {destination_dir}]")
        path = app.objects.download_object(key, destination_dir)
        print(f"File downloaded successfully: {path}")
    except S3ConsoleError as e:
        print(e.message)


def do_delete_file(app, *args):
    if len(args) != 1:
        print("Usage: delete-file <key>")
        return
    key = args[0]
    try:
        app.objects.delete_object(key)
        print(f"File '{key}' deleted successfully from bucket '{app.session.current()}'")
    except S3ConsoleError as e:
        print(e.message)


def do_upload_file(app, *args):
    """Upload a local file; the key defaults to the file's name."""
    if len(args) < 1 or len(args) > 2:
        print("Usage: upload-file <local_path> [<key>]")
        return
    local_path = os.path.expanduser(args[0])
    key = args[1] if len(args) == 2 else os.path.basename(local_path)
    if not key:
        print(f"Error: Cannot derive an object key from '{args[0]}'.")
        return

    try:
        app.objects.upload_object(local_path, key)
        print(
            f"File '{args[0]}' uploaded successfully to bucket "
            f"'{app.session.current()}' with key '{key}'"
        )
    except S3ConsoleError as e:
        print(e.message)


def do_wipe_files(app, *args):
    """Delete every object in the selected bucket."""
    if args:
        print("Usage: wipe-files")
        return
    try:
        deleted_count = app.objects.delete_all_objects()
    except S3ConsoleError as e:
        print(e.message)
        if 'deleted' in e.details:
            print(f"{e.details['deleted']} file(s) were deleted before the failure.")
        return

    bucket = app.session.current()
    if deleted_count == 0:
        print(f"Bucket '{bucket}' is already empty.")
    else:
        print(f"{deleted_count} file(s) deleted from bucket '{bucket}'.")
