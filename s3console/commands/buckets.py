from ..errors import NO_BUCKET_SELECTED, STORE_EXCEPTIONS, S3ConsoleError
from ..formatting import format_buckets_table


def do_list_buckets(app, *args):
    """List every bucket visible to the configured credentials."""
    if args:
        print("Usage: list-buckets")
        return
    try:
        buckets = app.buckets.list_buckets()
    except S3ConsoleError as e:
        print(e.message)
        return
    print(format_buckets_table(buckets))


def do_create_bucket(app, *args):
    """Create a bucket unless it already exists."""
    if len(args) != 1:
        print("Usage: create-bucket <name>")
        return
    name = args[0]
    try:
        if app.buckets.bucket_exists(name):
            print(f"Bucket '{name}' already exists.")
            return
        app.buckets.create_bucket(name)
        print(f"Bucket '{name}' created successfully.")
    except S3ConsoleError as e:
        print(e.message)
    except STORE_EXCEPTIONS as e:
        print(f"Error creating bucket: {e}")


def do_delete_bucket(app, *args):
    """Delete an existing, empty bucket."""
    if len(args) != 1:
        print("Usage: delete-bucket <name>")
        return
    name = args[0]
    try:
        if not app.buckets.bucket_exists(name):
            print(f"Bucket '{name}' does not exist.")
            return
        app.buckets.delete_bucket(name)
        print(f"Bucket '{name}' deleted successfully.")
    except S3ConsoleError as e:
        print(e.message)
    except STORE_EXCEPTIONS as e:
        print(f"Error deleting bucket: {e}")


def do_use_bucket(app, *args):
    """Select the bucket that file commands operate on."""
    if len(args) != 1:
        print("Usage: use-bucket <name>")
        return
    name = args[0]
    try:
        if not app.buckets.bucket_exists(name):
            print(f"Bucket '{name}' does not exist. Use the 'create-bucket' command to create it.")
            return
    except STORE_EXCEPTIONS as e:
        print(f"Error selecting bucket: {e}")
        return
    app.session.select(name)
    app.log(f"[Session: selected '{name}']")
    print(f"Bucket '{name}' selected successfully.")


def do_current_bucket(app, *args):
    if not app.session.is_selected():
        print(NO_BUCKET_SELECTED)
        return
    print(f"Current bucket: {app.session.current()}")
