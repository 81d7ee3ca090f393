import shlex
import sys
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from prompt_toolkit.shortcuts import CompleteStyle
from prompt_toolkit.patch_stdout import patch_stdout

from .completer import S3ConsoleCompleter
from .config import DEFAULT_CONFIG, get_history_file, is_verbose
from .operations.buckets import BucketOperations
from .operations.objects import ObjectOperations
from .providers.base import ObjectStore
from .session import BucketSession
from .commands.buckets import (
    do_list_buckets,
    do_create_bucket,
    do_delete_bucket,
    do_use_bucket,
    do_current_bucket,
)
from .commands.files import (
    do_list_files,
    do_download_file,
    do_delete_file,
    do_upload_file,
    do_wipe_files,
)
from .commands.shell import do_exit, do_clear, do_help


class S3ConsoleApp:
    def __init__(self, store: ObjectStore, config: Optional[dict] = None, session: Optional[BucketSession] = None):
        self.store = store
        self.config = config if config is not None else DEFAULT_CONFIG
        self.session = session if session is not None else BucketSession()
        self.buckets = BucketOperations(store, self.session)
        self.objects = ObjectOperations(store, self.session)
        self.prompt_session = None
        # Commands map to functions that take (app, *args)
        self.commands = {
            'list-buckets': lambda *args: do_list_buckets(self, *args),
            'create-bucket': lambda *args: do_create_bucket(self, *args),
            'delete-bucket': lambda *args: do_delete_bucket(self, *args),
            'use-bucket': lambda *args: do_use_bucket(self, *args),
            'current-bucket': lambda *args: do_current_bucket(self, *args),
            'list-files': lambda *args: do_list_files(self, *args),
            'download-file': lambda *args: do_download_file(self, *args),
            'delete-file': lambda *args: do_delete_file(self, *args),
            'upload-file': lambda *args: do_upload_file(self, *args),
            'wipe-files': lambda *args: do_wipe_files(self, *args),
            'help': lambda *args: do_help(self, *args),
            'clear': lambda *args: do_clear(self, *args),
            'exit': lambda *args: do_exit(self, *args),
            'quit': lambda *args: do_exit(self, *args),
        }

    def log(self, message):
        """Print a diagnostic line to stderr when verbose output is enabled."""
        if is_verbose(self.config):
            print(message, file=sys.stderr)

    def get_prompt(self):
        """Generate the prompt string from the selected bucket."""
        if self.session.is_selected():
            return f's3://{self.session.current()}> '
        return 's3console> '

    def _create_prompt_session(self):
        return PromptSession(
            history=FileHistory(get_history_file(self.config)),
            completer=S3ConsoleCompleter(self),
            complete_style=CompleteStyle.COLUMN,
        )

    def run(self):
        """Main loop to run the shell application."""
        if self.prompt_session is None:
            self.prompt_session = self._create_prompt_session()
        print("S3 Console. Type 'help' or 'exit'.")
        while True:
            try:
                with patch_stdout():
                    text = self.prompt_session.prompt(self.get_prompt())
                if not text.strip():
                    continue
                if not self.handle_command(text):
                    break
            except KeyboardInterrupt:
                continue
            except EOFError:
                print("\nExiting...")
                break

    def handle_command(self, text):
        """Parse and execute the entered command."""
        try:
            parts = shlex.split(text.strip())
            if not parts:
                return True

            command_name = parts[0].lower()
            args = parts[1:]

            if command_name in self.commands:
                should_continue = self.commands[command_name](*args)
                return should_continue if should_continue is not None else True
            else:
                print(f"Unknown command: {command_name}")
                return True
        except Exception as e:
            print(f"Error processing command: {e}")
            return True
