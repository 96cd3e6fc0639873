# retro_chip8/transport/display.py
"""
Transport Layer (ディスプレイ)

1ビットピクセルの2次元グリッドを保持します。書き込みは XOR 合成です。
"""
from typing import Iterator, List

from retro_chip8.common.types import DISPLAY_WIDTH, DISPLAY_HEIGHT


# @intent:responsibility XOR 描画モデルのピクセルグリッドを管理します。
class Display:
    """
    width x height のモノクロ表示。各セルは 0 または 1。
    座標の折り返しは呼び出し側（描画命令）の責務です。
    """
    def __init__(self, width: int = DISPLAY_WIDTH, height: int = DISPLAY_HEIGHT):
        self._width = width
        self._height = height
        self._screen: List[List[int]] = [[0] * width for _ in range(height)]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    # @intent:responsibility ピクセルに値を XOR し、1→0 に変化したかどうかを返します。
    # @intent:post-condition 戻り値は衝突（消去）判定として DXYN が VF に集約します。
    def set_pixel(self, x: int, y: int, value: int) -> bool:
        row = self._screen[y]
        current = row[x]
        row[x] = current ^ (value & 1)
        return current == 1 and row[x] == 0

    def get_pixel(self, x: int, y: int) -> int:
        return self._screen[y][x]

    def clear(self) -> None:
        for row in self._screen:
            for x in range(self._width):
                row[x] = 0

    def rows(self) -> Iterator[List[int]]:
        """
        表示用に各行のコピーを上から順に返します。
        """
        for row in self._screen:
            yield list(row)
