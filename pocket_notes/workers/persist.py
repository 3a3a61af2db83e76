# pocket_notes/workers/persist.py

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal

from pocket_notes.logging_setup import get_logger

log = get_logger("workers.persist")


class PersistSignals(QObject):
    """
    failed(req_id, error_message)
    """
    failed = Signal(int, str)


class PersistWorker(QRunnable):
    """
    Runs one storage write off the GUI thread.

    The job gets an immutable snapshot, so nothing here touches
    controller state or widgets.
    """

    def __init__(self, *, req_id: int, job: Callable[[], None]):
        super().__init__()
        self.req_id = req_id
        self.job = job
        self.signals = PersistSignals()

    def run(self) -> None:
        try:
            self.job()
        except Exception as e:
            log.exception("Persist job crashed: req_id=%s", self.req_id)
            self.signals.failed.emit(self.req_id, str(e))


class ThreadPoolSubmitter(QObject):
    """
    Callable passed to NoteListController(submit=...).

    The pool is limited to one thread, so writes land in the order
    the mutations happened. Worker failures are re-emitted as ``failed``.
    """
    failed = Signal(int, str)

    def __init__(self, pool: QThreadPool | None = None):
        super().__init__()
        self._pool = pool or QThreadPool()
        self._pool.setMaxThreadCount(1)
        self._req_id = 0

    def make_worker(self, job: Callable[[], None]) -> PersistWorker:
        self._req_id += 1
        worker = PersistWorker(req_id=self._req_id, job=job)
        worker.signals.failed.connect(self.failed)
        return worker

    def __call__(self, job: Callable[[], None]) -> None:
        self._pool.start(self.make_worker(job))

    def wait_for_done(self, msecs: int = -1) -> bool:
        return self._pool.waitForDone(msecs)
