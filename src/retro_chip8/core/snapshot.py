# retro_chip8/core/snapshot.py
"""
デコード済み命令のデータ構造

フェッチした16ビット命令を分解したフィールドと、実行ハンドラを引くためのパターンキーを保持します。
"""
from dataclasses import dataclass, field
from typing import List


# @intent:responsibility デコードされた命令の詳細を記録します。
@dataclass(frozen=True) # 不変データ構造
class Operation:
    """
    デコードされた命令。pattern はハンドラ表のキー（例: "8XY4"）です。
    """
    opcode: int # 生の16ビット命令
    pattern: str # 例: "8XY4"
    mnemonic: str # 例: "ADD"
    operands: List[str] = field(default_factory=list) # 例: ["V1", "V2"]
    address: int = 0 # フェッチしたアドレス
    length: int = 2 # 命令のバイト長

    @property
    def opcode_hex(self) -> str:
        return f"{self.opcode:04X}"

    # @intent:accessor 命令語の各フィールド（X, Y, N, NN, NNN）を取り出します。
    @property
    def x(self) -> int:
        return (self.opcode >> 8) & 0xF

    @property
    def y(self) -> int:
        return (self.opcode >> 4) & 0xF

    @property
    def n(self) -> int:
        return self.opcode & 0xF

    @property
    def nn(self) -> int:
        return self.opcode & 0xFF

    @property
    def nnn(self) -> int:
        return self.opcode & 0xFFF

    def __str__(self) -> str:
        text = self.mnemonic
        if self.operands:
            text += " " + ", ".join(self.operands)
        return text
