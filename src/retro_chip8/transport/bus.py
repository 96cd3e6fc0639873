# retro_chip8/transport/bus.py
"""
Transport Layer (共通バス)

CPU が所有するメモリ・ディスプレイ・キーボードをひとまとめにし、
各命令ハンドラへ渡す集約オブジェクトです。
"""
from typing import Optional
import random

from retro_chip8.transport.memory import Memory
from retro_chip8.transport.display import Display
from retro_chip8.transport.keyboard import Keyboard


# @intent:responsibility 周辺デバイスへの参照を保持し、メモリアクセスを委譲します。
# @intent:rationale 命令ハンドラは (state, bus, operation) の3引数で統一され、デバイスはバス経由で参照します。
class Bus:
    """
    CHIP-8 の周辺デバイス群。CPU が生存期間中は排他的に所有します。
    CXNN 用の乱数源もここに置きます。
    """
    def __init__(self, memory: Optional[Memory] = None, display: Optional[Display] = None,
                 keyboard: Optional[Keyboard] = None, rng: Optional[random.Random] = None):
        self.memory = memory if memory is not None else Memory()
        self.display = display if display is not None else Display()
        self.keyboard = keyboard if keyboard is not None else Keyboard()
        self.rng = rng if rng is not None else random.Random()

    def read(self, address: int) -> int:
        return self.memory.read(address)

    def write(self, address: int, data: int) -> None:
        self.memory.write(address, data)

    # @intent:utility_function ビッグエンディアンで16ビットワードを読み込みます。
    def read_word(self, address: int) -> int:
        return (self.memory.read(address) << 8) | self.memory.read(address + 1)

    def random_byte(self) -> int:
        return self.rng.randrange(0x100)
