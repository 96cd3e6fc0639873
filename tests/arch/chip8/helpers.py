from typing import Iterable

from retro_chip8.arch.chip8.cpu import Chip8Cpu


# テスト用: 16ビット命令列をビッグエンディアンのバイト列に変換します。
def assemble(words: Iterable[int]) -> bytes:
    data = bytearray()
    for word in words:
        data += bytes([(word >> 8) & 0xFF, word & 0xFF])
    return bytes(data)


def make_cpu(*words: int, **kwargs) -> Chip8Cpu:
    cpu = Chip8Cpu(**kwargs)
    cpu.load_program(assemble(words))
    return cpu
