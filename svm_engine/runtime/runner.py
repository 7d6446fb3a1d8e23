from __future__ import annotations

"""Background execution for the ``*_async`` operations.

Training, prediction and evaluation are synchronous numeric work. The async
variants only move that work off the caller's thread: each call is submitted
as one task and completes exactly one :class:`concurrent.futures.Future`.
An optional callback is attached with ``add_done_callback`` and therefore runs
exactly once, receiving the completed future (``future.result()`` or
``future.exception()``). Tasks cannot be cancelled once started.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from threading import Lock
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

DoneCallback = Callable[[Future], Any]


class BackgroundRunner:
    def __init__(self, max_workers: Optional[int] = None, *, name: str = "svm-engine") -> None:
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix=name)
        self._name = name

    def submit(
        self,
        fn: Callable[..., Any],
        *args: Any,
        callback: Optional[DoneCallback] = None,
        **kwargs: Any,
    ) -> Future:
        future = self._executor.submit(fn, *args, **kwargs)
        if callback is not None:
            future.add_done_callback(callback)
        return future

    def shutdown(self, wait: bool = True) -> None:
        logger.debug("shutting down runner %s", self._name)
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "BackgroundRunner":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.shutdown(wait=True)


_DEFAULT: Optional[BackgroundRunner] = None
_DEFAULT_LOCK = Lock()


def default_runner() -> BackgroundRunner:
    """Return the shared runner, creating it on first use."""
    global _DEFAULT
    with _DEFAULT_LOCK:
        if _DEFAULT is None:
            _DEFAULT = BackgroundRunner()
        return _DEFAULT


def shutdown_default_runner(wait: bool = True) -> None:
    global _DEFAULT
    with _DEFAULT_LOCK:
        runner, _DEFAULT = _DEFAULT, None
    if runner is not None:
        runner.shutdown(wait=wait)
