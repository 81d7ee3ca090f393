from typing import Optional


class BucketSession:
    """Holds the single bucket that object commands implicitly target."""

    def __init__(self, bucket_name: Optional[str] = None):
        self._bucket_name = bucket_name or None

    def select(self, bucket_name: str):
        """Select a bucket. Existence is the caller's concern."""
        self._bucket_name = bucket_name or None

    def current(self) -> Optional[str]:
        return self._bucket_name

    def is_selected(self) -> bool:
        return bool(self._bucket_name)

    def clear(self):
        self._bucket_name = None

    def __repr__(self):
        return f"BucketSession(bucket_name={self._bucket_name!r})"
