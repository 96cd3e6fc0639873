# src/retro_chip8/ui/main_window.py
"""
メインウィンドウの実装。
フレームタイマーでホストループを駆動し、キーイベントを転送して表示を更新します。
"""
import logging
from typing import Dict, Optional

from PySide6.QtWidgets import QMainWindow, QApplication
from PySide6.QtCore import Qt, QTimer, Slot
from PySide6.QtGui import QKeyEvent, QCloseEvent

from retro_chip8.common.errors import Chip8Error
from retro_chip8.config.models import HostConfig
from retro_chip8.host.frame_loop import FrameLoop
from .display_view import DisplayView

logger = logging.getLogger(__name__)


# @intent:utility_function 設定のキー名を Qt のキーコードに変換した対応表を作ります。
def build_qt_key_names(config: HostConfig) -> Dict[int, str]:
    names: Dict[int, str] = {}
    for name in list(config.key_map) + [config.quit_key]:
        qt_key = getattr(Qt.Key, f"Key_{name}", None)
        if qt_key is None:
            logger.warning("Unknown key name '%s' in key map, ignored", name)
            continue
        names[int(qt_key.value)] = name
    return names


# @intent:responsibility アプリケーションのメインウィンドウを定義し、フレームループと表示を結び付けます。
class MainWindow(QMainWindow):
    """
    ホストループの表示面。QTimer の1ティックが1フレームに対応します。
    """
    def __init__(self, frame_loop: FrameLoop, config: Optional[HostConfig] = None, parent=None):
        super(MainWindow, self).__init__(parent)
        self._config = config if config is not None else HostConfig()
        self._frame_loop = frame_loop
        self._key_names = build_qt_key_names(self._config)
        self._exit_code = 0

        self.setWindowTitle(self._config.window_title)
        self.display_view = DisplayView(
            scale=self._config.scale,
            foreground=self._config.foreground,
            background=self._config.background,
        )
        self.setCentralWidget(self.display_view)
        self.setFixedSize(self.display_view.size())

        self._timer = QTimer(self)
        self._timer.timeout.connect(self._on_frame)

    @property
    def exit_code(self) -> int:
        return self._exit_code

    def start(self) -> None:
        logger.info("Emulation starting")
        self._timer.start(self._config.frame_interval_ms)

    # @intent:responsibility 1フレームを実行し、表示を更新します。ループが停止していればウィンドウを閉じます。
    @Slot()
    def _on_frame(self) -> None:
        try:
            self._frame_loop.run_frame()
        except Chip8Error:
            self._exit_code = 1
        if not self._frame_loop.running:
            self._timer.stop()
            self.close()
            return
        self.display_view.set_pixels(self._frame_loop.pixels())

    def _host_key(self, event: QKeyEvent) -> Optional[str]:
        return self._key_names.get(int(event.key()))

    def keyPressEvent(self, event: QKeyEvent):
        name = self._host_key(event)
        if name is None or event.isAutoRepeat():
            super().keyPressEvent(event)
            return
        self._frame_loop.key_down(name)

    def keyReleaseEvent(self, event: QKeyEvent):
        name = self._host_key(event)
        if name is None or event.isAutoRepeat():
            super().keyReleaseEvent(event)
            return
        self._frame_loop.key_up(name)

    def closeEvent(self, event: QCloseEvent):
        self._timer.stop()
        self._frame_loop.quit()
        app = QApplication.instance()
        if app is not None:
            app.exit(self._exit_code)
        super().closeEvent(event)
