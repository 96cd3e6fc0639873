# retro_chip8/transport/keyboard.py
"""
Transport Layer (キーボード)

16キーの押下状態を保持します。履歴・リピート・チャタリング除去はありません。
"""
from typing import List, Optional

from retro_chip8.common.errors import KeyIndexError
from retro_chip8.common.types import KEY_COUNT


# @intent:responsibility 16キーの押下/解放状態と、消費型のキー取得を提供します。
class Keyboard:
    def __init__(self):
        self._keys: List[bool] = [False] * KEY_COUNT

    def press(self, key: int) -> None:
        self._keys[self._index(key)] = True

    def release(self, key: int) -> None:
        self._keys[self._index(key)] = False

    def is_pressed(self, key: int) -> bool:
        return self._keys[self._index(key)]

    # @intent:responsibility 押下中のキーを昇順に走査し、最初に見つかったものを解放して返します。
    # @intent:rationale 複数キー同時押下時は最小インデックスが優先されます。
    def take_any_pressed(self) -> Optional[int]:
        for key, pressed in enumerate(self._keys):
            if pressed:
                self._keys[key] = False
                return key
        return None

    def release_all(self) -> None:
        self._keys = [False] * KEY_COUNT

    # @intent:pre-condition キーは 0x0-0xF の範囲である必要があります。範囲外は KeyIndexError（致命的エラー）です。
    @staticmethod
    def _index(key: int) -> int:
        if not 0 <= key < KEY_COUNT:
            raise KeyIndexError(key, KEY_COUNT)
        return key
