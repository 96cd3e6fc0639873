"""
制御命令（ジャンプ、サブルーチン、条件スキップ）の実装。
"""
from retro_chip8.core.snapshot import Operation
from retro_chip8.transport.bus import Bus
from retro_chip8.common.errors import StackUnderflowError
from retro_chip8.common.types import INSTRUCTION_LENGTH
from retro_chip8.arch.chip8.state import Chip8CpuState

# @intent:utility_function 条件が成立した場合に次の命令をスキップします。
def skip_if(state: Chip8CpuState, condition: bool) -> None:
    if condition:
        state.pc = (state.pc + INSTRUCTION_LENGTH) & 0xFFFF

# --- RET ---
# @intent:responsibility RET (00EE) 命令を実行し、スタックから戻りアドレスをポップしてPCに設定します。
# @intent:post-condition スタックが空の場合は StackUnderflowError を送出します。
def execute_ret(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    if not state.stack:
        raise StackUnderflowError(op.address)
    state.pc = state.stack.pop()

# --- JP ---
# @intent:responsibility JP addr (1NNN) 命令を実行します。
def execute_jp(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    state.pc = op.nnn

# @intent:responsibility JP V0, addr (BNNN) 命令を実行します。
def execute_jp_v0(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    state.pc = op.nnn + state.v[0x0]

# --- CALL ---
# @intent:responsibility CALL addr (2NNN) 命令を実行し、戻りアドレスをスタックにプッシュしてからジャンプします。
def execute_call(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    # state.pc is currently pointing to the NEXT instruction because it was updated in CPU.step
    state.stack.append(state.pc)
    state.pc = op.nnn

# --- SE / SNE ---
def execute_se_imm(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    skip_if(state, state.v[op.x] == op.nn)

def execute_sne_imm(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    skip_if(state, state.v[op.x] != op.nn)

# @intent:rationale 5XY0/9XY0 は下位ニブルを検査せず、ファミリ全体をレジスタ比較として扱います。
def execute_se_reg(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    skip_if(state, state.v[op.x] == state.v[op.y])

def execute_sne_reg(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    skip_if(state, state.v[op.x] != state.v[op.y])
