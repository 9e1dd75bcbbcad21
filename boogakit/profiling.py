"""Collection of timed scopes in the Chrome trace event format."""

from __future__ import annotations

import os
import threading
import time
from contextlib import contextmanager
from typing import Iterator, Union

from boogakit.formatting import builder_print, log_verbose
from boogakit.strings import StringBuilder

DEFAULT_TRACE_PATH = "google_trace.json"

_EVENT_FORMAT = (
    '{"cat":"function","dur":%.3f,"name":"%s","ph":"X","pid":0,"tid":%zu,"ts":%.3f},'
)


class Profiler:
    """Thread-safe recorder of complete ("X") trace events."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._lock = threading.Lock()
        self._output = StringBuilder(1024 * 1000)

    def report_time(self, name: str, duration: float, start: float) -> None:
        """Record an event of ``duration`` seconds beginning at ``start`` seconds."""
        with self._lock:
            builder_print(
                self._output,
                _EVENT_FORMAT,
                duration * 1_000_000,
                name,
                threading.get_ident(),
                start * 1_000_000,
            )

    @contextmanager
    def scope(self, name: str) -> Iterator[None]:
        """Time the enclosed block and record it under ``name``."""
        if not self.enabled:
            yield
            return
        start = time.perf_counter()
        try:
            yield
        finally:
            self.report_time(name, time.perf_counter() - start, start)

    def dump(self, path: Union[str, os.PathLike] = DEFAULT_TRACE_PATH) -> None:
        """Write the recorded events to ``path`` as a JSON array."""
        with self._lock:
            body = self._output.getvalue()
        with open(path, "w", encoding="utf-8") as trace:
            trace.write("[")
            trace.write(body)
            trace.write("{}]")
        log_verbose("Wrote profiling result to %s", os.fspath(path))

    def getvalue(self) -> str:
        """The events recorded so far, each followed by a comma."""
        with self._lock:
            return self._output.getvalue()