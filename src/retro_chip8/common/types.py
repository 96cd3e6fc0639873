"""
共通の型定義・定数を提供するモジュール。
プロジェクト全体で使用される CHIP-8 の寸法やフォントデータを定義します。
"""
from typing import NamedTuple, Tuple

# @intent:constant CHIP-8 のアドレス空間と表示の寸法。
MEMORY_SIZE = 0x1000          # 4KB
PROGRAM_START = 0x200         # プログラムのロード先
DISPLAY_WIDTH = 64
DISPLAY_HEIGHT = 32
KEY_COUNT = 16
REGISTER_COUNT = 16
FLAG_REGISTER = 0xF           # VF
INSTRUCTION_LENGTH = 2        # 命令は2バイト（ビッグエンディアン）

# @intent:constant 16進数字グリフ（4x5ピクセル、1グリフ5バイト）。メモリ0x000から配置されます。
FONT_GLYPH_SIZE = 5
FONTS: Tuple[int, ...] = (
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
)

# @intent:data_structure 単一のレジスタの表示定義。診断出力でレジスタ幅に応じた桁数を決めるために使用されます。
class RegisterInfo(NamedTuple):
    name: str
    width: int  # ビット幅 (8 or 16)
