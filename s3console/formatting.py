from datetime import datetime
from typing import List, Optional

TIMESTAMP_FORMAT = '%d/%m/%Y %H:%M:%S'


def human_readable_size(size_bytes):
    if size_bytes < 1024:
        return f"{size_bytes} B"
    size = float(size_bytes)
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size < 1024.0 or unit == 'TB':
            break
        size /= 1024.0
    return f"{size:.1f} {unit}"


def format_timestamp(value: Optional[datetime]) -> str:
    """Render a store timestamp in local time, or N/A when absent."""
    if value is None:
        return 'N/A'
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.strftime(TIMESTAMP_FORMAT)


def format_table(headers: List[str], rows: List[List[str]]) -> str:
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    def border(left, mid, right):
        return left + mid.join('─' * (w + 2) for w in widths) + right

    def line(cells):
        return '│' + '│'.join(f" {c:<{w}} " for c, w in zip(cells, widths)) + '│'

    lines = [border('┌', '┬', '┐'), line(headers), border('├', '┼', '┤')]
    lines.extend(line(row) for row in rows)
    lines.append(border('└', '┴', '┘'))
    return '\n'.join(lines)


def format_buckets_table(buckets: List[dict]) -> str:
    if not buckets:
        return "No buckets available."
    rows = [[b['name'], format_timestamp(b.get('created_at'))] for b in buckets]
    return "Available buckets:\n" + format_table(['Name', 'Creation Date'], rows)


def format_objects_table(objects: List[dict], bucket_name: str) -> str:
    if not objects:
        return f"Bucket '{bucket_name}' is empty."
    rows = [
        [
            obj['key'],
            human_readable_size(obj.get('size', 0)),
            format_timestamp(obj.get('last_modified')),
            obj.get('storage_class') or 'STANDARD',
        ]
        for obj in objects
    ]
    headers = ['Name', 'Size', 'Last Modified', 'Storage Class']
    return f"Files in bucket '{bucket_name}':\n" + format_table(headers, rows)
