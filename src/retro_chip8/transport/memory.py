# retro_chip8/transport/memory.py
"""
Transport Layer (メモリ)

CHIP-8 の 4KB フラットなアドレス空間を提供します。
初期化時に16進数字フォントを低位アドレスへ配置します。
"""
from typing import Iterable

from retro_chip8.common.errors import MemoryAccessError
from retro_chip8.common.types import MEMORY_SIZE, PROGRAM_START, FONTS


# @intent:responsibility 4KB のメモリとフォントデータ、プログラムロード機能を提供します。
class Memory:
    """
    4096バイトのメモリ。アドレス 0x000 からフォントグリフが格納されます。
    """
    # @intent:responsibility メモリをゼロ初期化し、フォントデータを書き込みます。
    def __init__(self, size: int = MEMORY_SIZE):
        if not isinstance(size, int) or size <= 0:
            raise ValueError("Memory size must be a positive integer.")
        self._memory = bytearray(size)
        self._size = size
        self._memory[0:len(FONTS)] = bytes(FONTS)

    # @intent:responsibility 指定されたアドレスから8bitのデータを読み出します。
    # @intent:pre-condition アドレスはメモリの有効範囲内である必要があります。
    def read(self, address: int) -> int:
        if not 0 <= address < self._size:
            raise MemoryAccessError(address, self._size)
        return self._memory[address]

    # @intent:responsibility 指定されたアドレスに8bitのデータを書き込みます。
    def write(self, address: int, data: int) -> None:
        if not 0 <= address < self._size:
            raise MemoryAccessError(address, self._size)
        self._memory[address] = data & 0xFF

    # @intent:responsibility プログラムを 0x200 から順に書き込みます。
    # @intent:rationale サイズの事前チェックは行いません。収まらないプログラムは最初の範囲外バイトで MemoryAccessError になります。
    def load_program(self, program: Iterable[int], start: int = PROGRAM_START) -> None:
        for offset, byte in enumerate(program):
            self.write(start + offset, byte)

    def get_size(self) -> int:
        return self._size

    def dump(self, start: int, length: int) -> bytes:
        """
        指定範囲の内容を返します（診断用）。範囲外は切り詰めます。
        """
        start = max(0, start)
        return bytes(self._memory[start:min(start + length, self._size)])
