from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QAudioOutput, QMediaPlayer

from pomodoro.core.assets import existing_file


logger = logging.getLogger(__name__)


class NotificationSound(QObject):
    """Looped notification cue; `stop()` also rewinds to the beginning."""

    def __init__(self, path: Path, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.player = QMediaPlayer(self)
        self.audio_output = QAudioOutput(self)
        self.player.setAudioOutput(self.audio_output)
        self.audio_output.setVolume(1.0)
        self.player.setLoops(QMediaPlayer.Loops.Infinite.value)
        self.player.errorOccurred.connect(self._on_error)

        self.available = existing_file(path) is not None
        if self.available:
            self.player.setSource(QUrl.fromLocalFile(str(path)))

    def play(self) -> None:
        if not self.available:
            return
        if self.player.playbackState() != QMediaPlayer.PlaybackState.PlayingState:
            self.player.play()

    def stop(self) -> None:
        self.player.stop()
        self.player.setPosition(0)

    def _on_error(self, _error, message: str) -> None:
        logger.warning("Notification sound failed: %s", message)
