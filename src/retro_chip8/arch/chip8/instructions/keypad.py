"""
キー入力命令の実装。
"""
from retro_chip8.core.snapshot import Operation
from retro_chip8.transport.bus import Bus
from retro_chip8.arch.chip8.state import Chip8CpuState
from .control import skip_if

# @intent:responsibility SKP Vx (EX9E) 命令を実行し、Vxのキーが押されていれば次の命令をスキップします。
def execute_skp(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    skip_if(state, bus.keyboard.is_pressed(state.v[op.x]))

# @intent:responsibility SKNP Vx (EXA1) 命令を実行し、Vxのキーが押されていなければ次の命令をスキップします。
def execute_sknp(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    skip_if(state, not bus.keyboard.is_pressed(state.v[op.x]))

# @intent:responsibility LD Vx, K (FX0A) 命令を実行し、キー入力を待ちます。
# @intent:flow HALTを設定してからキーボードを問い合わせ、キーが得られればHALTを解除してVxに格納します。
#              得られなければHALTのまま残り、次のstep()でPCが2戻されて本命令が再実行されます。
def execute_wait_key(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    state.halted = True
    key = bus.keyboard.take_any_pressed()
    if key is not None:
        state.halted = False
        state.v[op.x] = key
