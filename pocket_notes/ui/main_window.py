from __future__ import annotations

from PySide6.QtCore import Qt, QSettings
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout,
    QLabel, QLineEdit, QListWidget, QListWidgetItem, QMessageBox, QPushButton,
)

from pocket_notes.controller import NoteListController
from pocket_notes.core.models import Note
from pocket_notes.logging_setup import get_logger
from pocket_notes.ui.ui_state import UiStateStore
from pocket_notes.workers.persist import ThreadPoolSubmitter

log = get_logger("ui")

STYLE = """
QMainWindow { background: #f5f5f5; }
QLabel#title { font-size: 24px; font-weight: bold; }
QLineEdit { padding: 10px; border: 1px solid #ddd; border-radius: 5px; }
QPushButton#add { background: #28a745; color: #fff; font-size: 18px;
                  font-weight: bold; padding: 10px; border-radius: 5px; }
QWidget#note { background: #fff; border-radius: 5px; }
QLabel#noteText { font-size: 16px; }
QPushButton#delete { background: #ff4d4d; color: #fff; padding: 5px;
                     border-radius: 5px; }
"""


class NoteRow(QWidget):
    """Одна строка списка: текст заметки + кнопка Delete."""
    def __init__(self, note: Note, on_delete):
        super().__init__()
        self.setObjectName("note")
        self.note_id = note.id

        text = QLabel(note.text)
        text.setObjectName("noteText")
        text.setWordWrap(True)
        text.setTextInteractionFlags(Qt.TextSelectableByMouse)

        btn = QPushButton("Delete")
        btn.setObjectName("delete")
        btn.clicked.connect(lambda: on_delete(note.id))

        layout = QHBoxLayout(self)
        layout.setContentsMargins(15, 15, 15, 15)
        layout.addWidget(text, 1)
        layout.addWidget(btn, 0, Qt.AlignVCenter)


class NotesWindow(QMainWindow):
    def __init__(
        self,
        controller: NoteListController,
        *,
        settings: QSettings,
        submitter: ThreadPoolSubmitter | None = None,
    ):
        super().__init__()
        self.setWindowTitle("Note-Taking App")
        self.setStyleSheet(STYLE)

        self.controller = controller
        self._submitter = submitter
        if submitter is not None:
            submitter.failed.connect(self._on_persist_failed)
        self._ui_state = UiStateStore(owner=self, settings=settings)

        title = QLabel("Note-Taking App")
        title.setObjectName("title")
        title.setAlignment(Qt.AlignCenter)

        self.input = QLineEdit()
        self.input.setPlaceholderText("Type your note here...")

        self.add_button = QPushButton("Add Note")
        self.add_button.setObjectName("add")

        self.listw = QListWidget()
        self.listw.setSelectionMode(QListWidget.NoSelection)
        self.listw.setSpacing(5)

        root = QWidget()
        layout = QVBoxLayout(root)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.addWidget(title)
        layout.addSpacing(10)
        layout.addWidget(self.input)
        layout.addWidget(self.add_button)
        layout.addSpacing(10)
        layout.addWidget(self.listw, 1)
        self.setCentralWidget(root)

        self.add_button.clicked.connect(self.add_note)
        self.input.returnPressed.connect(self.add_note)

        self._unsubscribe = [
            controller.subscribe(self.render_notes),
            controller.on_warning(self._show_warning),
        ]

        self._ui_state.restore()
        self.render_notes(controller.notes)

    def add_note(self) -> None:
        note = self.controller.add(self.input.text())
        if note is not None:
            self.input.clear()

    def delete_note(self, note_id: str) -> None:
        self.controller.delete(note_id)

    def render_notes(self, notes: tuple[Note, ...]) -> None:
        self.listw.clear()
        for note in notes:
            row = NoteRow(note, self.delete_note)
            item = QListWidgetItem(self.listw)
            item.setData(Qt.UserRole, note.id)
            item.setSizeHint(row.sizeHint())
            self.listw.setItemWidget(item, row)
        if notes:
            self.listw.scrollToBottom()
        log.debug("List rendered: count=%d", len(notes))

    def _show_warning(self, title: str, message: str) -> None:
        QMessageBox.warning(self, title, message)

    def _on_persist_failed(self, req_id: int, message: str) -> None:
        # not shown to the user: memory stays authoritative until the next write
        log.warning("Background save failed: req_id=%s error=%s", req_id, message)

    def closeEvent(self, event):  # type: ignore[override]
        """
        Let the last queued write finish before the window goes away.
        """
        try:
            if self._submitter is not None:
                self._submitter.wait_for_done()
            self._ui_state.save()
        except Exception:
            log.exception("Failed to flush state on close")
        for unsubscribe in self._unsubscribe:
            unsubscribe()
        self._unsubscribe = []
        super().closeEvent(event)
