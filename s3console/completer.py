import os
import shlex

from prompt_toolkit.completion import Completer, Completion


class S3ConsoleCompleter(Completer):
    bucket_commands = {'use-bucket', 'delete-bucket'}
    object_commands = {'download-file', 'delete-file'}
    local_path_commands = {'upload-file'}

    def __init__(self, console_app):
        self.app = console_app

    def _get_bucket_suggestions(self):
        try:
            return [b['name'] for b in self.app.store.list_buckets()]
        except Exception:
            return []

    def _get_object_suggestions(self):
        if not self.app.session.is_selected():
            return []
        try:
            return [o['key'] for o in self.app.store.list_objects(self.app.session.current())]
        except Exception:
            return []

    def _get_local_suggestions(self, text):
        """Complete local filesystem paths."""
        try:
            path = os.path.expanduser(text)
            dir_path = os.path.dirname(path)
            partial = os.path.basename(path)

            if not dir_path:
                dir_path = '.'
            elif not os.path.isdir(dir_path):
                return []

            completions = []
            for name in os.listdir(dir_path):
                if name.startswith(partial):
                    full_item_path = os.path.join(dir_path, name)
                    completion_text = os.path.join(os.path.dirname(text), name)

                    if os.path.isdir(full_item_path):
                        completions.append(completion_text + '/')
                    else:
                        completions.append(completion_text)
            return sorted(completions)
        except Exception:
            return []

    def get_completions(self, document, complete_event):
        text_before_cursor = document.text_before_cursor
        word = document.get_word_before_cursor(WORD=True)

        try:
            parts = shlex.split(text_before_cursor)
        except ValueError:
            parts = text_before_cursor.split()
        num_parts = len(parts)

        completing_new_word = text_before_cursor.endswith(' ')

        # --- Case 1: Completing the command name ---
        if num_parts == 0 or (num_parts == 1 and not completing_new_word):
            for cmd in sorted(self.app.commands.keys()):
                if cmd.startswith(word):
                    yield Completion(cmd, start_position=-len(word))
            return

        # --- Case 2: Completing the first argument ---
        first_arg = (num_parts == 1 and completing_new_word) or (num_parts == 2 and not completing_new_word)
        if not first_arg:
            return

        command = parts[0].lower()
        partial = '' if completing_new_word else parts[1]
        start_pos = 0 if completing_new_word else -len(word)

        if command in self.bucket_commands:
            suggestions = self._get_bucket_suggestions()
        elif command in self.object_commands:
            suggestions = self._get_object_suggestions()
        elif command in self.local_path_commands:
            suggestions = self._get_local_suggestions(partial)
        else:
            return

        for s in suggestions:
            if s.startswith(partial):
                yield Completion(s, start_position=start_pos)
