"""
CHIP-8命令セット実装パッケージ。
"""
from retro_chip8.transport.bus import Bus
from retro_chip8.core.snapshot import Operation
from retro_chip8.common.errors import DecodeError
from retro_chip8.arch.chip8.state import Chip8CpuState
from .maps import FAMILY_MAP, MNEMONIC_MAP, EXECUTE_MAP

# @intent:responsibility 16ビット命令をデコードします。
# @intent:flow 上位4ビット（ファミリ）で引き、ファミリが下位ニブル/下位バイトで分岐する場合はさらにサブ表を引きます。
def decode_opcode(opcode: int, address: int = 0) -> Operation:
    """
    命令をデコードし、Operationオブジェクトを返します。
    どの表にも一致しない命令は DecodeError を送出します。
    """
    entry = FAMILY_MAP[(opcode >> 12) & 0xF]
    if isinstance(entry, tuple):
        selector_mask, sub_map = entry
        pattern = sub_map.get(opcode & selector_mask)
    else:
        pattern = entry
    if pattern is None:
        raise DecodeError(opcode, address)

    mnemonic, operand_formats = MNEMONIC_MAP[pattern]
    fields = {
        "x": (opcode >> 8) & 0xF,
        "y": (opcode >> 4) & 0xF,
        "n": opcode & 0xF,
        "nn": opcode & 0xFF,
        "nnn": opcode & 0xFFF,
    }
    operands = [fmt.format(**fields) for fmt in operand_formats]
    return Operation(opcode, pattern, mnemonic, operands, address)

# @intent:responsibility デコードされた命令を実行します。
def execute_instruction(operation: Operation, state: Chip8CpuState, bus: Bus) -> None:
    """
    デコードされた命令を実行し、CPUの状態を変更します。
    """
    executor = EXECUTE_MAP.get(operation.pattern)
    if executor is None:
        raise DecodeError(operation.opcode, operation.address)
    executor(state, bus, operation)
