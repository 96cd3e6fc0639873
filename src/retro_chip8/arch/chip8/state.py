# src/retro_chip8/arch/chip8/state.py
"""
CHIP-8 CPU固有の状態定義。
"""
from dataclasses import dataclass, field
from typing import List

from retro_chip8.core.state import CpuState
from retro_chip8.common.types import REGISTER_COUNT, FLAG_REGISTER


# @intent:responsibility CHIP-8 CPUの全てのレジスタ（V0-VF, I, PC）、コールスタック、タイマー、HALT状態を保持します。
@dataclass
class Chip8CpuState(CpuState):
    """
    CHIP-8 CPUのレジスタ状態を保持するデータクラス。
    """
    v: List[int] = field(default_factory=lambda: [0] * REGISTER_COUNT)  # V0-VF (8bit)
    i: int = 0x0000         # Index Register (16bit, 実質12bit)
    stack: List[int] = field(default_factory=list)  # 戻りアドレス（上限なし）
    delay_timer: int = 0x00
    sound_timer: int = 0x00
    halted: bool = False    # FX0A でキー入力待ちの間 True

    # @intent:accessor フラグレジスタ VF へのアクセスを提供します。
    @property
    def vf(self) -> int:
        return self.v[FLAG_REGISTER]

    @vf.setter
    def vf(self, value: int) -> None:
        self.v[FLAG_REGISTER] = value & 0xFF

    @property
    def sp(self) -> int:
        return len(self.stack)
