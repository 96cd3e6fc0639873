# src/retro_chip8/ui/app.py
"""
アプリケーションのエントリポイント。
ROM を読み込み、インタプリタとメインウィンドウを初期化して起動します。
"""
import argparse
import logging
import os
import sys
from typing import List, Optional

from PySide6.QtWidgets import QApplication

from retro_chip8.arch.chip8.cpu import Chip8Cpu
from retro_chip8.common.errors import Chip8Error
from retro_chip8.config.loader import ConfigLoader
from retro_chip8.config.models import HostConfig
from retro_chip8.host.frame_loop import FrameLoop
from retro_chip8.loader.loader import RomLoader
from .main_window import MainWindow

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "RETRO_CHIP8_CONFIG"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="retro-chip8", description="CHIP-8 interpreter")
    parser.add_argument("rom", help="Path to a CHIP-8 program")
    return parser


# @intent:responsibility 環境変数で指定された YAML があればそれを、なければ既定のホスト設定を返します。
def load_host_config() -> HostConfig:
    path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return HostConfig()
    logger.info("Loading host config %s", path)
    return ConfigLoader().load_from_file(path)


# @intent:responsibility ROMを読み込んでプログラムをロード済みのCPUを生成します。
# @intent:post-condition ROMが読めない・大きすぎる場合は Chip8Error を送出します（起動時の致命的エラー）。
def create_cpu(rom_path: str) -> Chip8Cpu:
    rom = RomLoader().load_rom(rom_path)
    cpu = Chip8Cpu()
    cpu.load_program(rom)
    return cpu


# @intent:responsibility アプリケーションを起動し、メインウィンドウを表示します。
def main(argv: Optional[List[str]] = None) -> int:
    """
    アプリケーションのメイン関数。終了コードを返します。
    """
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    args = build_parser().parse_args(argv)

    try:
        config = load_host_config()
        cpu = create_cpu(args.rom)
    except Chip8Error as e:
        logger.error("%s", e)
        return 1

    app = QApplication.instance() or QApplication(sys.argv[:1])
    main_win = MainWindow(FrameLoop(cpu, config.key_map, config.quit_key), config)
    main_win.show()
    main_win.start()
    app.exec()
    return main_win.exit_code

if __name__ == '__main__':
    sys.exit(main())
