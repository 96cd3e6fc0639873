# retro_chip8/host/frame_loop.py
"""
ホストループモジュール。

1フレームごとに「タイマー減算 → 固定数の命令実行」を行い、
物理キーイベントを CHIP-8 のキー押下/解放に変換します。
表示方法には依存しないため、UI層はこのクラスを駆動して結果を描画するだけです。
"""
import logging
from typing import Dict, List, Optional

from retro_chip8.arch.chip8.cpu import Chip8Cpu
from retro_chip8.common.errors import Chip8Error
from retro_chip8.config.models import DEFAULT_KEY_MAP, QUIT_KEY

logger = logging.getLogger(__name__)

# @intent:constant 1フレームあたりの命令実行数。設定では変更できません。
INSTRUCTIONS_PER_FRAME = 10


# @intent:responsibility インタプリタをフレーム単位で駆動し、入力の変換と終了判定を行います。
class FrameLoop:
    """
    CPU インスタンスと入力キー対応表のみを保持するホストループ。
    """
    def __init__(self, cpu: Chip8Cpu, key_map: Optional[Dict[str, int]] = None, quit_key: str = QUIT_KEY):
        self._cpu = cpu
        self._key_map = dict(key_map if key_map is not None else DEFAULT_KEY_MAP)
        self._quit_key = quit_key
        self._running = True
        self._frame_count = 0
        self._error: Optional[Chip8Error] = None

    @property
    def cpu(self) -> Chip8Cpu:
        return self._cpu

    @property
    def running(self) -> bool:
        return self._running

    @property
    def frame_count(self) -> int:
        return self._frame_count

    @property
    def error(self) -> Optional[Chip8Error]:
        return self._error

    # @intent:responsibility 1フレーム分の処理を行います。
    # @intent:flow タイマーはフレームにつき1回だけ減算し、その後 INSTRUCTIONS_PER_FRAME 回 step() を呼びます。
    # @intent:post-condition 致命的エラーではループを停止し、診断をログに残したうえで例外を再送出します。
    def run_frame(self) -> bool:
        """
        停止中なら何もせず False を返します。
        """
        if not self._running:
            return False

        self._cpu.decrement_timer()
        try:
            for _ in range(INSTRUCTIONS_PER_FRAME):
                self._cpu.step()
        except Chip8Error as e:
            self._running = False
            self._error = e
            logger.error("Emulation stopped (%s): %s", e.kind.value if e.kind else "ERROR", e)
            logger.error("Registers: %s", self._cpu.format_registers())
            address = (self._cpu.get_state().pc - 2) & 0xFFFF
            logger.error("Memory at %#06x: %s", address, self._cpu.bus.memory.dump(address, 4).hex(" "))
            raise

        self._frame_count += 1
        return True

    # @intent:responsibility 物理キーの押下を CHIP-8 キーに変換します。終了キーはループを停止させます。
    def key_down(self, host_key: str) -> None:
        if host_key == self._quit_key:
            self.quit()
            return
        key = self._key_map.get(host_key)
        if key is not None:
            self._cpu.press_key(key)

    def key_up(self, host_key: str) -> None:
        key = self._key_map.get(host_key)
        if key is not None:
            self._cpu.release_key(key)

    def quit(self) -> None:
        if self._running:
            logger.info("Emulation stopped after %d frames", self._frame_count)
        self._running = False

    def pixels(self) -> List[List[int]]:
        """
        表示用に height 行 x width 列のピクセルを返します。
        """
        return self._cpu.get_display_rows()
