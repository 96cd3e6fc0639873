"""
致命的エラーの分類を定義するモジュール。

コア（CPU・メモリ）はプロセスを終了させず、これらの例外を送出します。
どう扱うか（停止・診断表示）はホストループ側が決定します。
"""
from enum import Enum
from typing import Optional


# @intent:responsibility 致命的エラーの種類を定義します。
class FatalErrorKind(Enum):
    STARTUP = "STARTUP"                  # ROM・設定の読み込み失敗
    DECODE = "DECODE"                    # 対応するハンドラのない命令
    STACK_UNDERFLOW = "STACK_UNDERFLOW"  # 空のコールスタックからのRET
    MEMORY_BOUNDS = "MEMORY_BOUNDS"      # 4KB を超えるアドレスへのアクセス
    KEY_BOUNDS = "KEY_BOUNDS"            # 0x0-0xF 以外のキー番号（SKP/SKNP の Vx など）


# @intent:responsibility 全ての CHIP-8 エラーの基底クラスです。
class Chip8Error(Exception):
    kind: Optional[FatalErrorKind] = None


class RomLoadError(Chip8Error):
    kind = FatalErrorKind.STARTUP

    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not read ROM '{path}': {reason}")
        self.path = path


class ConfigError(Chip8Error):
    kind = FatalErrorKind.STARTUP


class DecodeError(Chip8Error):
    kind = FatalErrorKind.DECODE

    def __init__(self, opcode: int, address: Optional[int] = None):
        where = f" at {address:#06x}" if address is not None else ""
        super().__init__(f"Operation not found - 0x{opcode:04X}{where}")
        self.opcode = opcode
        self.address = address


class StackUnderflowError(Chip8Error):
    kind = FatalErrorKind.STACK_UNDERFLOW

    def __init__(self, address: Optional[int] = None):
        where = f" (RET at {address:#06x})" if address is not None else ""
        super().__init__(f"Stack was empty!{where}")
        self.address = address


# @intent:rationale IndexError も継承し、範囲外アクセスを IndexError として捕捉する既存の書き方とも互換にします。
class MemoryAccessError(Chip8Error, IndexError):
    kind = FatalErrorKind.MEMORY_BOUNDS

    def __init__(self, address: int, size: int):
        super().__init__(f"Address {address:#06x} out of bounds for memory of size {size:#06x}.")
        self.address = address
        self.size = size


class KeyIndexError(Chip8Error, IndexError):
    kind = FatalErrorKind.KEY_BOUNDS

    def __init__(self, key: int, count: int):
        super().__init__(f"Key {key} out of range 0x0-0x{count - 1:X}.")
        self.key = key
