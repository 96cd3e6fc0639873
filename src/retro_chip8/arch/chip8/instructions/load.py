"""
転送命令（Iレジスタ、タイマー、メモリとレジスタ間の転送）の実装。
"""
from retro_chip8.core.snapshot import Operation
from retro_chip8.transport.bus import Bus
from retro_chip8.common.types import FONT_GLYPH_SIZE
from retro_chip8.arch.chip8.state import Chip8CpuState

# --- I Register ---
# @intent:responsibility LD I, addr (ANNN) 命令を実行します。
def execute_ld_i(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    state.i = op.nnn

# @intent:responsibility ADD I, Vx (FX1E) 命令を実行します。16ビットで折り返し、VFは変更しません。
def execute_add_i_vx(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    state.i = (state.i + state.v[op.x]) & 0xFFFF

# @intent:responsibility LD F, Vx (FX29) 命令を実行し、Vxの数字グリフのアドレスをIに設定します。
def execute_ld_f_vx(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    state.i = state.v[op.x] * FONT_GLYPH_SIZE

# --- Timers ---
def execute_ld_vx_dt(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    state.v[op.x] = state.delay_timer

def execute_ld_dt_vx(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    state.delay_timer = state.v[op.x]

# @intent:rationale サウンドタイマーは値を保持するのみで、音声出力は行いません。
def execute_ld_st_vx(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    state.sound_timer = state.v[op.x]

# --- Memory ---
# @intent:responsibility LD B, Vx (FX33) 命令を実行し、Vxの10進3桁（百・十・一の位）を I, I+1, I+2 に格納します。
def execute_ld_bcd(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    value = state.v[op.x]
    bus.write(state.i, value // 100)
    bus.write(state.i + 1, (value // 10) % 10)
    bus.write(state.i + 2, value % 10)

# @intent:responsibility LD [I], Vx (FX55) 命令を実行し、V0..Vx をIから昇順に格納した後、I := I + X + 1 とします。
def execute_store_registers(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    for idx in range(op.x + 1):
        bus.write(state.i + idx, state.v[idx])
    state.i = (state.i + op.x + 1) & 0xFFFF

# @intent:responsibility LD Vx, [I] (FX65) 命令を実行し、Iから昇順に V0..Vx へ読み込んだ後、I := I + X + 1 とします。
def execute_fill_registers(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    for idx in range(op.x + 1):
        state.v[idx] = bus.read(state.i + idx)
    state.i = (state.i + op.x + 1) & 0xFFFF
