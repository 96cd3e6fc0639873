# retro_chip8/core/state.py
"""
Core Layer (CPU状態)

このモジュールは、CPUの基本的な状態（レジスタ群）を保持するデータ構造を定義します。
"""
from dataclasses import dataclass

from retro_chip8.common.types import PROGRAM_START


# @intent:responsibility CPUのレジスタ状態を保持します。アーキテクチャ固有のレジスタはこれを拡張します。
@dataclass
class CpuState:
    """
    CPUのレジスタ状態を保持するデータクラス。
    """
    pc: int = PROGRAM_START  # Program Counter
    # @intent:rationale CHIP-8 のプログラムは慣例的に 0x200 にロードされるため、PCの初期値もそこに合わせます。
