# src/retro_chip8/arch/chip8/cpu.py
"""
CHIP-8 CPUエミュレーションの中心モジュール。
"""
from typing import Dict, Iterable, List, Optional
import random

from retro_chip8.core.cpu import AbstractCpu
from retro_chip8.core.snapshot import Operation
from retro_chip8.common.types import RegisterInfo, INSTRUCTION_LENGTH
from retro_chip8.arch.chip8.state import Chip8CpuState
from retro_chip8.arch.chip8.instructions import decode_opcode, execute_instruction
from retro_chip8.transport.bus import Bus


# @intent:responsibility CHIP-8 CPUの具体的なエミュレーションロジック（フェッチ、デコード、実行）を提供します。
class Chip8Cpu(AbstractCpu):
    """
    CHIP-8 インタプリタのコア。
    メモリ・ディスプレイ・キーボードを束ねた Bus を排他的に所有し、step() 1回で1命令を実行します。
    """
    # @intent:responsibility Chip8Cpuを初期化します。バスが省略された場合は新しいデバイス一式を生成します。
    def __init__(self, bus: Optional[Bus] = None, rng: Optional[random.Random] = None):
        if bus is None:
            bus = Bus(rng=rng)
        elif rng is not None:
            bus.rng = rng
        super().__init__(bus)

    # @intent:responsibility CHIP-8の初期状態を生成します。
    def _create_initial_state(self) -> Chip8CpuState:
        return Chip8CpuState()

    # @intent:responsibility FX0A によるキー待ち中は、PCを2戻して同じ命令を再フェッチさせます。
    def _handle_halt(self) -> None:
        if self._state.halted:
            self._state.pc = (self._state.pc - INSTRUCTION_LENGTH) & 0xFFFF

    # @intent:responsibility PCの位置からビッグエンディアンの2バイト命令をフェッチします。
    def _fetch(self) -> int:
        return self._bus.read_word(self._state.pc)

    def _update_pc(self) -> None:
        self._state.pc = (self._state.pc + INSTRUCTION_LENGTH) & 0xFFFF

    def _decode(self, opcode: int, address: int) -> Operation:
        return decode_opcode(opcode, address)

    def _execute(self, operation: Operation) -> None:
        execute_instruction(operation, self._state, self._bus)

    # @intent:responsibility CPUをリセットします。メモリ（フォントとプログラム）は保持し、表示とキー状態はクリアします。
    def reset(self) -> None:
        super().reset()
        self._bus.display.clear()
        self._bus.keyboard.release_all()

    # --- ホストループ向けAPI ---

    def load_program(self, program: Iterable[int]) -> None:
        """
        プログラムのバイト列を 0x200 からメモリへ書き込みます。
        """
        self._bus.memory.load_program(program)

    def press_key(self, key: int) -> None:
        self._bus.keyboard.press(key)

    def release_key(self, key: int) -> None:
        self._bus.keyboard.release(key)

    # @intent:responsibility フレームごとに遅延タイマーを1減算します（0で停止）。
    # @intent:rationale サウンドタイマーは値を保持するだけで、減算しません。
    def decrement_timer(self) -> None:
        state = self._state
        if state.delay_timer > 0:
            state.delay_timer -= 1

    def get_display_pixel(self, x: int, y: int) -> int:
        return self._bus.display.get_pixel(x, y)

    def get_display_rows(self) -> List[List[int]]:
        return list(self._bus.display.rows())

    @property
    def bus(self) -> Bus:
        return self._bus

    @property
    def is_halted(self) -> bool:
        return self._state.halted

    # @intent:responsibility 診断表示用に、現在のレジスタ値を辞書形式で提供します。
    def get_register_map(self) -> Dict[str, int]:
        s = self._state
        registers = {f"V{idx:X}": value for idx, value in enumerate(s.v)}
        registers.update({
            "I": s.i, "PC": s.pc, "SP": s.sp, "DT": s.delay_timer, "ST": s.sound_timer
        })
        return registers

    def get_register_layout(self) -> List[RegisterInfo]:
        layout = [RegisterInfo(f"V{idx:X}", 8) for idx in range(len(self._state.v))]
        layout += [
            RegisterInfo("I", 16), RegisterInfo("PC", 16), RegisterInfo("SP", 8),
            RegisterInfo("DT", 8), RegisterInfo("ST", 8)
        ]
        return layout

    def format_registers(self) -> str:
        """
        レジスタを "V0=00 V1=00 ... PC=0200" 形式の1行にまとめます。
        """
        values = self.get_register_map()
        parts = []
        for info in self.get_register_layout():
            digits = info.width // 4
            parts.append(f"{info.name}={values[info.name]:0{digits}X}")
        return " ".join(parts)
