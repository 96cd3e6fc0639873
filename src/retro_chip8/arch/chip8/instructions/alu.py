"""
算術論理演算命令の実装。
"""
from retro_chip8.core.snapshot import Operation
from retro_chip8.transport.bus import Bus
from retro_chip8.arch.chip8.state import Chip8CpuState

# --- LD / ADD (Immediate) ---
# @intent:responsibility LD Vx, byte (6XNN) 命令を実行します。
def execute_ld_imm(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    state.v[op.x] = op.nn

# @intent:responsibility ADD Vx, byte (7XNN) 命令を実行します。キャリーはVFに反映しません。
def execute_add_imm(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    state.v[op.x] = (state.v[op.x] + op.nn) & 0xFF

# --- 8XY_ (Register to Register) ---
def execute_ld_reg(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    state.v[op.x] = state.v[op.y]

def execute_or(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    state.v[op.x] |= state.v[op.y]

def execute_and(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    state.v[op.x] &= state.v[op.y]

def execute_xor(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    state.v[op.x] ^= state.v[op.y]

# @intent:responsibility ADD Vx, Vy (8XY4) 命令を実行し、8ビットを超えた場合はVFに1を設定します。
# @intent:rationale 結果を書き込んだ後にVFを設定するため、X=F の場合はフラグが優先されます。
def execute_add_reg(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    res = state.v[op.x] + state.v[op.y]
    state.v[op.x] = res & 0xFF
    state.vf = 1 if res > 0xFF else 0

# @intent:responsibility SUB Vx, Vy (8XY5) 命令を実行し、ボローが発生しなかった場合はVFに1を設定します。
def execute_sub(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    v1 = state.v[op.x]
    v2 = state.v[op.y]
    state.v[op.x] = (v1 - v2) & 0xFF
    state.vf = 1 if v1 >= v2 else 0

# @intent:responsibility SUBN Vx, Vy (8XY7) 命令を実行します。Vx := Vy - Vx
def execute_subn(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    v1 = state.v[op.x]
    v2 = state.v[op.y]
    state.v[op.x] = (v2 - v1) & 0xFF
    state.vf = 1 if v2 >= v1 else 0

# @intent:responsibility SHR Vx, Vy (8XY6) 命令を実行します。Vyを右シフトしてVxに格納し、Vyは変更しません。
def execute_shr(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    val = state.v[op.y]
    state.v[op.x] = val >> 1
    state.vf = val & 0x1

# @intent:responsibility SHL Vx, Vy (8XYE) 命令を実行します。Vyを左シフトしてVxに格納し、Vyは変更しません。
def execute_shl(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    val = state.v[op.y]
    state.v[op.x] = (val << 1) & 0xFF
    state.vf = val >> 7

# --- RND ---
# @intent:responsibility RND Vx, byte (CXNN) 命令を実行し、乱数とNNの論理積をVxに格納します。
def execute_rnd(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    state.v[op.x] = bus.random_byte() & op.nn
