from collections.abc import Iterator


class SessionLog:
    """Append-only, ordered list of formatted record lines for one session.

    The backing list is owned by the caller (usually a SessionStore), so
    appends are visible to every later lookup of the same session.
    """

    def __init__(self, entries: list[str] | None = None) -> None:
        self._entries = entries if entries is not None else []

    def append(self, entry: str) -> None:
        self._entries.append(entry)

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._entries))
