"""
表示命令（画面クリア、スプライト描画）の実装。
"""
from retro_chip8.core.snapshot import Operation
from retro_chip8.transport.bus import Bus
from retro_chip8.arch.chip8.state import Chip8CpuState

# @intent:responsibility CLS (00E0) 命令を実行します。
def execute_cls(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    bus.display.clear()

# @intent:responsibility DRW Vx, Vy, n (DXYN) 命令を実行し、Iから読んだNバイトのスプライトをXOR描画します。
# @intent:flow 各行の最上位ビットが左端。列は (Vx + 7 - bit) mod 幅、行は8ビットで折り返すYカウンタの mod 高さ。
# @intent:post-condition 描画中に1つでも 1→0 に変化したピクセルがあれば VF=1、なければ VF=0。
def execute_drw(state: Chip8CpuState, bus: Bus, op: Operation) -> None:
    display = bus.display
    x_pos = state.v[op.x]
    y_pos = state.v[op.y]

    any_flipped = False
    for row in range(op.n):
        sprite_data = bus.read(state.i + row)
        for bit in range(7, -1, -1):
            val = (sprite_data >> bit) & 0x1
            x_idx = (x_pos + 7 - bit) % display.width
            y_idx = y_pos % display.height
            any_flipped = display.set_pixel(x_idx, y_idx, val) or any_flipped

        y_pos = (y_pos + 1) & 0xFF

    state.vf = 1 if any_flipped else 0
