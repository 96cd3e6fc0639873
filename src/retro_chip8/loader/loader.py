# retro_chip8/loader/loader.py
"""
プログラム(ROM)ローダーモジュール。
ヘッダやマジックバイトを持たない生のバイト列をファイルから読み込みます。
"""
import logging
from typing import Iterator

from retro_chip8.common.errors import RomLoadError

logger = logging.getLogger(__name__)


# @intent:responsibility ロード後に変更されないプログラムのバイト列を保持します。
class Rom:
    """
    不変のプログラムバイト列。
    """
    def __init__(self, data: bytes):
        self._data = bytes(data)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def get_size(self) -> int:
        return len(self._data)

    def byte_at(self, offset: int) -> int:
        return self._data[offset]


class RomLoader:
    """
    ファイルシステムから ROM を読み込むローダー。
    """
    # @intent:responsibility ファイル全体を読み込み Rom を返します。
    # @intent:post-condition ファイルが存在しない・読めない場合は RomLoadError（起動時の致命的エラー）を送出します。
    def load_rom(self, file_path: str) -> Rom:
        try:
            with open(file_path, 'rb') as f:
                data = f.read()
        except OSError as e:
            raise RomLoadError(str(file_path), e.strerror or str(e)) from e

        logger.info("Loading ROM %s (%d bytes)", file_path, len(data))
        return Rom(data)
