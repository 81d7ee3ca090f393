import os


COMMAND_HELP = {
    'list-buckets': """list-buckets
  List all available buckets with their creation date.""",

    'create-bucket': """create-bucket <name>
  Create a new bucket. Does nothing if the bucket already exists.""",

    'delete-bucket': """delete-bucket <name>
  Delete a bucket. The bucket must be empty (see wipe-files).
  Deleting the selected bucket clears the selection.""",

    'use-bucket': """use-bucket <name>
  Select the bucket that file commands operate on.""",

    'current-bucket': """current-bucket
  Show the currently selected bucket.""",

    'list-files': """list-files
  List files in the selected bucket (first page of results only).""",

    'download-file': """download-file <key> [destination_dir]
  Download a file from the selected bucket. Directories in the key are
  recreated under destination_dir (default: ./downloads).""",

    'delete-file': """delete-file <key>
  Delete a file from the selected bucket.""",

    'upload-file': """upload-file <local_path> [key]
  Upload a local file to the selected bucket.
  If key is omitted, the local file name is used.""",

    'wipe-files': """wipe-files
  Delete all files from the selected bucket in a single batch request.""",

    'help': """help [command]
  Show available commands or detailed help for a specific command.""",

    'clear': """clear
  Clear the terminal screen.""",

    'exit': """exit
  Exit the console.""",

    'quit': """quit
  Exit the console (alias for exit).""",
}


COMMAND_CATEGORIES = [
    ('Buckets', ['list-buckets', 'create-bucket', 'delete-bucket', 'use-bucket', 'current-bucket']),
    ('Files', ['list-files', 'download-file', 'delete-file', 'upload-file', 'wipe-files']),
    ('Shell', ['help', 'clear', 'exit', 'quit']),
]


def do_exit(app, *args):
    """Exit the shell."""
    print("Exiting...")
    return False


def do_clear(app, *args):
    """Clear the terminal screen."""
    os.system('cls' if os.name == 'nt' else 'clear')


def do_help(app, *args):
    """Show available commands or detailed help for a specific command."""
    if args:
        cmd_name = args[0].lower()
        if cmd_name in COMMAND_HELP:
            print()
            print(COMMAND_HELP[cmd_name])
            print()
        elif cmd_name in app.commands:
            print("  No detailed help available for '%s'." % cmd_name)
        else:
            print("  Unknown command: %s" % cmd_name)
        return

    print("\nS3 Console Commands:\n")
    for category, cmds in COMMAND_CATEGORIES:
        available = [c for c in cmds if c in app.commands]
        if available:
            print("  \033[1m%s\033[0m" % category)
            print("    " + '  '.join(available))
            print()
    print("Type 'help <command>' for detailed usage. Use TAB for completion.")
