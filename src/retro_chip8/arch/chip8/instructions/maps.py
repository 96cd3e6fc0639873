"""
命令パターンと命令実装のマッピング定義。
"""
from . import control
from . import alu
from . import load
from . import graphics
from . import keypad

# @intent:constant ファミリ内のサブ命令を選択するためのマスク。
LOW_NIBBLE = 0x000F
LOW_BYTE = 0x00FF

# @intent:map 上位4ビット（ファミリ）からパターンキー、またはサブ表へのマッピングテーブル。
# サブ表を持つファミリは (選択マスク, {選択値: パターン}) のタプルです。
FAMILY_MAP = {
    0x0: (LOW_BYTE, {0xE0: "00E0", 0xEE: "00EE"}),
    0x1: "1NNN",
    0x2: "2NNN",
    0x3: "3XNN",
    0x4: "4XNN",
    0x5: "5XY0",
    0x6: "6XNN",
    0x7: "7XNN",
    0x8: (LOW_NIBBLE, {
        0x0: "8XY0", 0x1: "8XY1", 0x2: "8XY2", 0x3: "8XY3", 0x4: "8XY4",
        0x5: "8XY5", 0x6: "8XY6", 0x7: "8XY7", 0xE: "8XYE",
    }),
    0x9: "9XY0",
    0xA: "ANNN",
    0xB: "BNNN",
    0xC: "CXNN",
    0xD: "DXYN",
    0xE: (LOW_BYTE, {0x9E: "EX9E", 0xA1: "EXA1"}),
    0xF: (LOW_BYTE, {
        0x07: "FX07", 0x0A: "FX0A", 0x15: "FX15", 0x18: "FX18", 0x1E: "FX1E",
        0x29: "FX29", 0x33: "FX33", 0x55: "FX55", 0x65: "FX65",
    }),
}

# @intent:map パターンキーからニーモニックとオペランド書式へのマッピングテーブル。
MNEMONIC_MAP = {
    "00E0": ("CLS", []),
    "00EE": ("RET", []),
    "1NNN": ("JP", ["${nnn:03X}"]),
    "2NNN": ("CALL", ["${nnn:03X}"]),
    "3XNN": ("SE", ["V{x:X}", "#${nn:02X}"]),
    "4XNN": ("SNE", ["V{x:X}", "#${nn:02X}"]),
    "5XY0": ("SE", ["V{x:X}", "V{y:X}"]),
    "6XNN": ("LD", ["V{x:X}", "#${nn:02X}"]),
    "7XNN": ("ADD", ["V{x:X}", "#${nn:02X}"]),
    "8XY0": ("LD", ["V{x:X}", "V{y:X}"]),
    "8XY1": ("OR", ["V{x:X}", "V{y:X}"]),
    "8XY2": ("AND", ["V{x:X}", "V{y:X}"]),
    "8XY3": ("XOR", ["V{x:X}", "V{y:X}"]),
    "8XY4": ("ADD", ["V{x:X}", "V{y:X}"]),
    "8XY5": ("SUB", ["V{x:X}", "V{y:X}"]),
    "8XY6": ("SHR", ["V{x:X}", "V{y:X}"]),
    "8XY7": ("SUBN", ["V{x:X}", "V{y:X}"]),
    "8XYE": ("SHL", ["V{x:X}", "V{y:X}"]),
    "9XY0": ("SNE", ["V{x:X}", "V{y:X}"]),
    "ANNN": ("LD", ["I", "${nnn:03X}"]),
    "BNNN": ("JP", ["V0", "${nnn:03X}"]),
    "CXNN": ("RND", ["V{x:X}", "#${nn:02X}"]),
    "DXYN": ("DRW", ["V{x:X}", "V{y:X}", "{n}"]),
    "EX9E": ("SKP", ["V{x:X}"]),
    "EXA1": ("SKNP", ["V{x:X}"]),
    "FX07": ("LD", ["V{x:X}", "DT"]),
    "FX0A": ("LD", ["V{x:X}", "K"]),
    "FX15": ("LD", ["DT", "V{x:X}"]),
    "FX18": ("LD", ["ST", "V{x:X}"]),
    "FX1E": ("ADD", ["I", "V{x:X}"]),
    "FX29": ("LD", ["F", "V{x:X}"]),
    "FX33": ("LD", ["B", "V{x:X}"]),
    "FX55": ("LD", ["[I]", "V{x:X}"]),
    "FX65": ("LD", ["V{x:X}", "[I]"]),
}

# @intent:map パターンキーから実行関数へのマッピングテーブル。
EXECUTE_MAP = {
    # Display
    "00E0": graphics.execute_cls,
    "DXYN": graphics.execute_drw,

    # Control
    "00EE": control.execute_ret,
    "1NNN": control.execute_jp,
    "2NNN": control.execute_call,
    "3XNN": control.execute_se_imm,
    "4XNN": control.execute_sne_imm,
    "5XY0": control.execute_se_reg,
    "9XY0": control.execute_sne_reg,
    "BNNN": control.execute_jp_v0,

    # ALU
    "6XNN": alu.execute_ld_imm,
    "7XNN": alu.execute_add_imm,
    "8XY0": alu.execute_ld_reg,
    "8XY1": alu.execute_or,
    "8XY2": alu.execute_and,
    "8XY3": alu.execute_xor,
    "8XY4": alu.execute_add_reg,
    "8XY5": alu.execute_sub,
    "8XY6": alu.execute_shr,
    "8XY7": alu.execute_subn,
    "8XYE": alu.execute_shl,
    "CXNN": alu.execute_rnd,

    # Keypad
    "EX9E": keypad.execute_skp,
    "EXA1": keypad.execute_sknp,
    "FX0A": keypad.execute_wait_key,

    # Load/Store, Timers
    "ANNN": load.execute_ld_i,
    "FX07": load.execute_ld_vx_dt,
    "FX15": load.execute_ld_dt_vx,
    "FX18": load.execute_ld_st_vx,
    "FX1E": load.execute_add_i_vx,
    "FX29": load.execute_ld_f_vx,
    "FX33": load.execute_ld_bcd,
    "FX55": load.execute_store_registers,
    "FX65": load.execute_fill_registers,
}
