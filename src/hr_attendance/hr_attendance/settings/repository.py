from __future__ import annotations

from typing import Protocol

from .model import GeneralSettings


class SettingsRepository(Protocol):
    def get(self) -> GeneralSettings:
        """Current settings; defaults when nothing was saved yet."""

        raise NotImplementedError

    def save(self, settings: GeneralSettings) -> None:
        raise NotImplementedError
