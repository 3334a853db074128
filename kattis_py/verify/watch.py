"""Re-running verification when the solution or its samples change."""

import logging
import queue
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterable, Iterator, Set

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from ..errors import KattisError
from ..utils.terminal import print_error


logger = logging.getLogger(__name__)

DEBOUNCE_SECONDS = 1.0

# Put on the event queue when no more events will arrive.
CLOSED = object()

# Opening or closing a file without writing it (e.g. feeding a sample to
# the solution) must not trigger a new run.
TRIGGERING_EVENTS = frozenset({"created", "modified", "deleted", "moved"})


class _QueueingHandler(FileSystemEventHandler):
    """Forwards relevant watchdog events into a queue."""

    def __init__(self, events: queue.Queue, files: Set[Path], directory: Path):
        super().__init__()
        self.events = events
        self.files = files
        self.directory = directory

    def _is_watched(self, path: str) -> bool:
        path = Path(path).resolve()
        return path in self.files or self.directory in path.parents or path == self.directory

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.event_type not in TRIGGERING_EVENTS:
            return

        paths = [event.src_path, getattr(event, "dest_path", "") or ""]
        if any(path and self._is_watched(path) for path in paths):
            logger.debug("File system event: %s %s", event.event_type, event.src_path)
            self.events.put(event)


@contextmanager
def watch_paths(files: Iterable[Path], sample_dir: Path) -> Iterator[queue.Queue]:
    """
    Watch the submission files and (recursively) the sample directory.

    Yields the queue the events are published into. CLOSED is put on the
    queue when the context exits.
    """
    events: queue.Queue = queue.Queue()
    files = {Path(path).resolve() for path in files}
    sample_dir = Path(sample_dir).resolve()

    handler = _QueueingHandler(events, files, sample_dir)
    observer = Observer()
    # watchdog watches directories, so each file is watched through its parent
    for parent in sorted({path.parent for path in files} - {sample_dir}):
        observer.schedule(handler, str(parent), recursive=False)
    observer.schedule(handler, str(sample_dir), recursive=True)

    observer.start()
    try:
        yield events
    finally:
        observer.stop()
        observer.join()
        events.put(CLOSED)


class WatchScheduler:
    """
    Runs `cycle` once, then once more after every burst of events.

    Events closer together than `debounce` seconds count as one burst. The
    loop ends when CLOSED is received; errors from a cycle are reported and
    the scheduler keeps waiting.
    """

    def __init__(
        self,
        cycle: Callable[[], object],
        events: queue.Queue,
        debounce: float = DEBOUNCE_SECONDS,
    ):
        self.cycle = cycle
        self.events = events
        self.debounce = debounce
        self.runs = 0
        self._closed = False

    def _run_cycle(self) -> None:
        self.runs += 1
        try:
            self.cycle()
        except (KattisError, OSError) as e:
            print_error(e)

    def _wait_for_trigger(self) -> bool:
        """Block until a burst of events has settled. False once the queue is closed."""
        if self._closed:
            return False

        if self.events.get() is CLOSED:
            self._closed = True
            return False

        while True:
            try:
                event = self.events.get(timeout=self.debounce)
            except queue.Empty:
                return True

            if event is CLOSED:
                self._closed = True
                return True

    def run(self) -> None:
        self._run_cycle()
        while self._wait_for_trigger():
            self._run_cycle()
