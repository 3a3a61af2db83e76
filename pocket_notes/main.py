from __future__ import annotations

from PySide6.QtWidgets import QApplication

from pocket_notes.app_settings import open_settings
from pocket_notes.controller import NoteListController
from pocket_notes.logging_setup import install_global_exception_hooks, log, SESSION_ID
from pocket_notes.settings import APP_NAME, APP_ORG, DATA_DIR
from pocket_notes.storage.store import open_default_store
from pocket_notes.ui.main_window import NotesWindow
from pocket_notes.workers.persist import ThreadPoolSubmitter


def main() -> int:
    install_global_exception_hooks()
    app = QApplication([])
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(APP_ORG)

    submitter = ThreadPoolSubmitter()
    controller = NoteListController(open_default_store(DATA_DIR), submit=submitter)
    controller.initialize()

    win = NotesWindow(controller, settings=open_settings(), submitter=submitter)
    win.show()
    log.info("Application started, SID=%s", SESSION_ID)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
