from __future__ import annotations

from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QWidget

from pocket_notes.app_settings import SettingsKeys
from pocket_notes.logging_setup import get_logger
from pocket_notes.settings import WINDOW_SIZE

log = get_logger("ui.state")


class UiStateStore:
    """
    Сохраняет/восстанавливает геометрию окна в QSettings.
    """
    def __init__(self, *, owner: QWidget, settings: QSettings):
        self._owner = owner
        self._settings = settings

    def restore(self) -> None:
        try:
            geo = self._settings.value(SettingsKeys.UI_GEOMETRY)
            if geo:
                self._owner.restoreGeometry(geo)
            else:
                self._owner.resize(*WINDOW_SIZE)
        except Exception:
            log.exception("Failed to restore UI state from QSettings")
            self._owner.resize(*WINDOW_SIZE)

    def save(self) -> None:
        try:
            self._settings.setValue(SettingsKeys.UI_GEOMETRY, self._owner.saveGeometry())
        except Exception:
            log.exception("Failed to save UI state to QSettings")
