import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from pocket_notes.controller import NoteListController
from pocket_notes.core.codec import loads_notes
from pocket_notes.storage.store import MemoryStore
from pocket_notes.workers.persist import PersistWorker, ThreadPoolSubmitter


def boom():
    raise RuntimeError("nope")


def test_worker_runs_job_silently():
    done = []
    failed = []
    worker = PersistWorker(req_id=7, job=lambda: done.append("ran"))
    worker.signals.failed.connect(lambda req_id, msg: failed.append(req_id))
    worker.run()
    assert done == ["ran"]
    assert failed == []


def test_worker_reports_failure():
    failed = []
    worker = PersistWorker(req_id=3, job=boom)
    worker.signals.failed.connect(lambda req_id, msg: failed.append((req_id, msg)))
    worker.run()
    assert failed == [(3, "nope")]


def test_submitter_forwards_worker_failure():
    failed = []
    submitter = ThreadPoolSubmitter()
    submitter.failed.connect(lambda req_id, msg: failed.append((req_id, msg)))

    first = submitter.make_worker(lambda: None)
    second = submitter.make_worker(boom)
    first.run()
    second.run()

    assert failed == [(2, "nope")]


def test_submitter_keeps_write_order():
    store = MemoryStore()
    submitter = ThreadPoolSubmitter()
    ctl = NoteListController(store, submit=submitter)
    ctl.initialize()
    for i in range(20):
        ctl.add(f"note {i}")
    assert submitter.wait_for_done(5000)
    assert [n.text for n in loads_notes(store.get("notes"))] == [f"note {i}" for i in range(20)]
