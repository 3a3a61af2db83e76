from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtCore import QSettings

from pocket_notes.settings import APP_NAME, APP_ORG


@dataclass(frozen=True)
class SettingsKeys:
    UI_GEOMETRY: str = "ui/geometry"


def open_settings() -> QSettings:
    return QSettings(APP_ORG, APP_NAME)
