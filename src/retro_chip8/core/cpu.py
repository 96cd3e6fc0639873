# retro_chip8/core/cpu.py
"""
Core Layer (抽象CPU)

このモジュールは、CPUの基本的な状態管理と命令サイクルの駆動に関する抽象化を提供します。
具体的な命令の振る舞いはInstruction Layerに移譲されます。
"""
from abc import ABC, abstractmethod
from typing import Dict, List

from retro_chip8.transport.bus import Bus
from retro_chip8.core.snapshot import Operation
from retro_chip8.core.state import CpuState
from retro_chip8.common.types import RegisterInfo


# @intent:responsibility 抽象CPUの基本機能とインターフェースを定義します。
class AbstractCpu(ABC):
    """
    CPUエミュレーションの基底となる抽象クラス。
    Busとのインターフェース、基本的な状態管理、命令サイクルの抽象化を提供します。
    """
    # @intent:responsibility CPUの状態とバスへの参照を初期化します。
    def __init__(self, bus: Bus):
        self._bus = bus
        self._state: CpuState = self._create_initial_state()
        self._instruction_count: int = 0
        # @intent:rationale Stateオブジェクトの直接操作を避けるため、protectedな命名規則を採用。
        #                  外部からのアクセスは`get_state()`メソッドを介して行う。

    # @intent:responsibility 初期状態のCpuStateオブジェクトを生成します。
    @abstractmethod
    def _create_initial_state(self) -> CpuState:
        """
        CPUの初期状態を生成して返します。
        """
        pass

    # @intent:responsibility CPUをリセットし、初期状態に戻します。
    def reset(self) -> None:
        self._state = self._create_initial_state()
        self._instruction_count = 0

    # @intent:responsibility 現在のCPUの状態を返します。
    def get_state(self) -> CpuState:
        return self._state

    @property
    def instruction_count(self) -> int:
        return self._instruction_count

    # @intent:responsibility メモリから次の命令をフェッチします。
    @abstractmethod
    def _fetch(self) -> int:
        """
        現在のPCから次の命令をフェッチし、その値を返します。
        """
        pass

    # @intent:responsibility フェッチした命令を解析し、Operationオブジェクトに変換します。
    @abstractmethod
    def _decode(self, opcode: int, address: int) -> Operation:
        pass

    # @intent:responsibility デコードされた命令を実行し、CPUの状態を更新します。
    @abstractmethod
    def _execute(self, operation: Operation) -> None:
        pass

    # @intent:responsibility CPUを1命令サイクル進め、実行した命令を返します。
    # @intent:rationale Template Methodパターンを採用し、共通の実行フロー（HALT処理→フェッチ→PC更新→デコード→実行）を定義します。
    #                  アーキテクチャ固有の振る舞い（HALT処理など）はフックメソッドで対応します。
    def step(self) -> Operation:
        """
        CPUを1命令サイクル進めます。
        致命的な状態（未定義命令、スタックアンダーフロー、範囲外アクセス）は Chip8Error 派生の例外として送出されます。
        """
        # 1. HALT判定 (Hook)
        self._handle_halt()

        # 2. フェッチ & PC更新
        initial_pc = self._state.pc
        opcode = self._fetch()
        self._update_pc()

        # 3. デコード
        operation = self._decode(opcode, initial_pc)

        # 4. 実行
        self._execute(operation)

        self._instruction_count += 1
        return operation

    # @intent:responsibility HALT状態の場合の処理を行います。
    def _handle_halt(self) -> None:
        """
        HALT状態の場合の処理。デフォルトは何もしない。
        """
        return None

    # @intent:responsibility フェッチ後にPCを命令長分進めます。
    @abstractmethod
    def _update_pc(self) -> None:
        pass

    @abstractmethod
    def get_register_map(self) -> Dict[str, int]:
        """
        現在のレジスタ値を辞書形式で返す。
        ホスト側がCPUの内部構造を知らなくても診断出力できるようにするために使用される。
        """
        pass

    @abstractmethod
    def get_register_layout(self) -> List[RegisterInfo]:
        """
        診断出力で各レジスタを何桁で表示すべきかの定義を返す。
        """
        pass
