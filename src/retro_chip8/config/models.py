from dataclasses import dataclass, field
from typing import Dict

# @intent:constant 物理キー名（Qt の Key_ 名）から CHIP-8 キーへの既定の対応表。
DEFAULT_KEY_MAP: Dict[str, int] = {
    "X": 0x0, "1": 0x1, "2": 0x2, "3": 0x3,
    "Q": 0x4, "W": 0x5, "E": 0x6, "A": 0x7,
    "S": 0x8, "D": 0x9, "Z": 0xA, "C": 0xB,
    "4": 0xC, "R": 0xD, "F": 0xE, "V": 0xF,
}

QUIT_KEY = "Escape"

@dataclass
class HostConfig:
    scale: int = 10                  # 1ピクセルあたりの拡大率
    frame_interval_ms: int = 16      # 約60Hz
    foreground: str = "#FFFFFF"
    background: str = "#000000"
    window_title: str = "Retro CHIP-8"
    key_map: Dict[str, int] = field(default_factory=lambda: dict(DEFAULT_KEY_MAP))
    quit_key: str = QUIT_KEY
