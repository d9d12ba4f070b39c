"""Watchdog handler that accumulates vault events between polls."""

import threading

from watchdog.events import FileSystemEvent, FileSystemEventHandler

from .FilesystemEvents import FilesystemEvents


class _EventHandler(FileSystemEventHandler):
    """Collects created, modified and moved files under a lock."""

    def __init__(self) -> None:
        super().__init__()
        self._modified: list[str] = []
        self._created: list[str] = []
        self._moved: list[tuple[str, str]] = []
        self._lock = threading.Lock()

    def on_modified(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            with self._lock:
                if str(event.src_path) not in self._modified:
                    self._modified.append(str(event.src_path))

    def on_created(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            with self._lock:
                if str(event.src_path) not in self._created:
                    self._created.append(str(event.src_path))

    def on_moved(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            with self._lock:
                self._moved.append((str(event.src_path), str(event.dest_path)))

    def get_and_clear_events(self) -> FilesystemEvents:
        with self._lock:
            events = FilesystemEvents(modified=self._modified, created=self._created, moved=self._moved)
            self._modified = []
            self._created = []
            self._moved = []
        return events
