# docview/core/worker_pool.py - Shared background worker pool
"""
Shared thread pool for document loads

The pool is created on first use and shared by every load that does not
bring its own handle. It is never torn down automatically; call
``shutdown()`` (idempotent) for orderly cleanup, e.g. from
``QApplication.aboutToQuit``.
"""

import logging
import threading

from PySide6.QtCore import QThreadPool

from docview.core.config import DEFAULT_MAX_THREADS, THREAD_EXPIRY_MS

logger = logging.getLogger(__name__)


class WorkerPool:
    """
    Lazily initialised handle around a QThreadPool

    Besides running tasks, the handle keeps in-flight loaders alive until
    their result has been rendered, so a loader never depends on the view
    (or anything else on the GUI side) to hold a reference to it.
    """

    def __init__(self, max_threads=DEFAULT_MAX_THREADS, expiry_ms=THREAD_EXPIRY_MS):
        self.max_threads = max_threads
        self.expiry_ms = expiry_ms
        self._pool = None
        self._pending = set()
        self._retired = []
        self._lock = threading.Lock()

    @property
    def started(self):
        """True while a QThreadPool exists."""
        return self._pool is not None

    def get(self):
        """Return the QThreadPool, creating it on first use."""
        with self._lock:
            if self._pool is None:
                pool = QThreadPool()
                pool.setMaxThreadCount(self.max_threads)
                pool.setExpiryTimeout(self.expiry_ms)
                self._pool = pool
                logger.debug(f"Worker pool started (max threads: {self.max_threads})")
            return self._pool

    def start(self, runnable):
        """Run a QRunnable on the pool."""
        self.get().start(runnable)

    def track(self, loader):
        with self._lock:
            self._pending.add(loader)

    def release(self, loader):
        with self._lock:
            self._pending.discard(loader)

    def pending_count(self):
        """Number of loaders whose result has not been rendered yet."""
        with self._lock:
            return len(self._pending)

    def shutdown(self, wait=True):
        """
        Stop the pool

        Tasks already queued still run and deliver their results. Safe to
        call when the pool was never started or has already been shut down.
        A later ``get()`` starts a fresh pool.

        Args:
            wait: Block until queued and running tasks have finished. Without
                it the pool is retired and kept alive until its threads are
                idle, since destroying a QThreadPool waits for its tasks.
        """
        with self._lock:
            pool = self._pool
            self._pool = None
            # Drop retired pools that have nothing left to run
            self._retired = [p for p in self._retired if p.activeThreadCount() > 0]
            if pool is not None and not wait:
                self._retired.append(pool)
        if pool is None:
            return
        if wait:
            pool.waitForDone()
        logger.info(f"Worker pool shut down (wait={wait})")

    def retired_count(self):
        """Number of pools shut down without waiting that are kept alive."""
        with self._lock:
            return len(self._retired)


_default_pool = None
_default_lock = threading.Lock()


def default_pool():
    """Get the process-wide shared WorkerPool handle."""
    global _default_pool
    with _default_lock:
        if _default_pool is None:
            _default_pool = WorkerPool()
        return _default_pool
