"""
ディスプレイ表示ウィジェット。

CHIP-8 の表示グリッドを受け取り、背景を塗りつぶした後、
点灯ピクセルを scale x scale の矩形として描画します。
"""
from typing import List

from PySide6.QtWidgets import QWidget
from PySide6.QtCore import QRect
from PySide6.QtGui import QPainter, QColor

from retro_chip8.common.types import DISPLAY_WIDTH, DISPLAY_HEIGHT


# @intent:responsibility 1フレーム分のピクセルグリッドを拡大表示します。
class DisplayView(QWidget):
    def __init__(self, scale: int = 10, foreground: str = "#FFFFFF", background: str = "#000000",
                 width: int = DISPLAY_WIDTH, height: int = DISPLAY_HEIGHT, parent=None):
        super().__init__(parent)
        self._scale = scale
        self._grid_width = width
        self._grid_height = height
        self._foreground = QColor(foreground)
        self._background = QColor(background)
        self._pixels: List[List[int]] = [[0] * width for _ in range(height)]
        self.setFixedSize(width * scale, height * scale)

    def set_pixels(self, pixels: List[List[int]]) -> None:
        """
        表示内容を差し替え、再描画を要求します。
        """
        self._pixels = pixels
        self.update()

    def pixels(self) -> List[List[int]]:
        return self._pixels

    # @intent:responsibility 点灯しているセルの矩形（ウィジェット座標）を列挙します。
    def lit_rects(self) -> List[QRect]:
        s = self._scale
        rects = []
        for y, row in enumerate(self._pixels):
            for x, value in enumerate(row):
                if value:
                    rects.append(QRect(x * s, y * s, s, s))
        return rects

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.fillRect(self.rect(), self._background)
        for rect in self.lit_rects():
            painter.fillRect(rect, self._foreground)
        painter.end()
