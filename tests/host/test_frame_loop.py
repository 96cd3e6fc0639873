# tests/host/test_frame_loop.py
"""
retro_chip8.host.frame_loopモジュールの単体テスト。
"""
import logging

import pytest
from unittest.mock import MagicMock

from retro_chip8.arch.chip8.cpu import Chip8Cpu
from retro_chip8.common.errors import StackUnderflowError, DecodeError, KeyIndexError
from retro_chip8.host.frame_loop import FrameLoop, INSTRUCTIONS_PER_FRAME

# @intent:test_suite フレーム単位の実行制御、キー変換、終了処理の検証。

def _cpu_with(*words):
    cpu = Chip8Cpu()
    data = bytearray()
    for word in words:
        data += bytes([word >> 8, word & 0xFF])
    cpu.load_program(bytes(data))
    return cpu


class TestFrameLoop:
    # @intent:test_case 1フレームでタイマーは1回、命令は固定数だけ実行されることを検証します。
    def test_frame_ratio(self):
        cpu = MagicMock(spec=Chip8Cpu)
        loop = FrameLoop(cpu)
        assert loop.run_frame() is True
        assert cpu.decrement_timer.call_count == 1
        assert cpu.step.call_count == INSTRUCTIONS_PER_FRAME == 10
        assert loop.frame_count == 1

    def test_frame_executes_program(self):
        # ADD V0, 1 ; JP $200
        cpu = _cpu_with(0x7001, 0x1200)
        loop = FrameLoop(cpu)
        loop.run_frame()
        assert cpu.get_state().v[0] == 5
        loop.run_frame()
        assert cpu.get_state().v[0] == 10

    def test_delay_timer_once_per_frame(self):
        # LD V0, 30 ; LD DT, V0 ; JP $204
        cpu = _cpu_with(0x601E, 0xF015, 0x1204)
        loop = FrameLoop(cpu)
        loop.run_frame()
        assert cpu.get_state().delay_timer == 30
        loop.run_frame()
        assert cpu.get_state().delay_timer == 29

    def test_key_translation(self):
        cpu = MagicMock(spec=Chip8Cpu)
        loop = FrameLoop(cpu)
        loop.key_down("X")
        cpu.press_key.assert_called_once_with(0x0)
        loop.key_down("V")
        cpu.press_key.assert_called_with(0xF)
        loop.key_up("4")
        cpu.release_key.assert_called_once_with(0xC)

    def test_unmapped_key_ignored(self):
        cpu = MagicMock(spec=Chip8Cpu)
        loop = FrameLoop(cpu)
        loop.key_down("P")
        loop.key_up("P")
        cpu.press_key.assert_not_called()
        cpu.release_key.assert_not_called()

    def test_custom_key_map(self):
        cpu = MagicMock(spec=Chip8Cpu)
        loop = FrameLoop(cpu, key_map={"Up": 0x2})
        loop.key_down("Up")
        cpu.press_key.assert_called_once_with(0x2)
        loop.key_down("X")
        assert cpu.press_key.call_count == 1

    # @intent:test_case 終了キーはインタプリタのキーに割り当てられず、ループを停止させることを検証します。
    def test_quit_key_stops_loop(self):
        cpu = MagicMock(spec=Chip8Cpu)
        loop = FrameLoop(cpu)
        loop.key_down("Escape")
        cpu.press_key.assert_not_called()
        assert loop.running is False
        assert loop.run_frame() is False
        cpu.step.assert_not_called()
        cpu.decrement_timer.assert_not_called()

    def test_key_delivered_before_batch_releases_wait(self):
        # LD V1, K ; JP $202
        cpu = _cpu_with(0xF10A, 0x1202)
        loop = FrameLoop(cpu)
        loop.run_frame()
        assert cpu.is_halted
        assert cpu.get_state().pc == 0x202
        loop.key_down("E")
        loop.run_frame()
        assert not cpu.is_halted
        assert cpu.get_state().v[1] == 0x6

    # @intent:test_case 致命的エラーでループが停止し、診断が記録されて例外が再送出されることを検証します。
    def test_fatal_error_stops_loop(self, caplog):
        cpu = _cpu_with(0x00EE)
        loop = FrameLoop(cpu)
        with caplog.at_level(logging.ERROR, logger="retro_chip8.host.frame_loop"):
            with pytest.raises(StackUnderflowError):
                loop.run_frame()
        assert loop.running is False
        assert isinstance(loop.error, StackUnderflowError)
        assert "STACK_UNDERFLOW" in caplog.text
        assert "PC=0202" in caplog.text
        assert "Memory at 0x0200: 00 ee 00 00" in caplog.text
        assert loop.run_frame() is False

    # @intent:test_case SKP の Vx がキー範囲外の場合も、他の致命的エラーと同様にループが停止することを検証します。
    def test_key_out_of_range_stops_loop(self, caplog):
        # LD V0, 0x20 ; SKP V0
        cpu = _cpu_with(0x6020, 0xE09E)
        loop = FrameLoop(cpu)
        with caplog.at_level(logging.ERROR, logger="retro_chip8.host.frame_loop"):
            with pytest.raises(KeyIndexError):
                loop.run_frame()
        assert loop.running is False
        assert isinstance(loop.error, KeyIndexError)
        assert "KEY_BOUNDS" in caplog.text
        assert loop.run_frame() is False

    def test_decode_error_stops_loop(self):
        cpu = _cpu_with(0x6001, 0xFFFF)
        loop = FrameLoop(cpu)
        with pytest.raises(DecodeError):
            loop.run_frame()
        assert loop.frame_count == 0
        assert cpu.get_state().v[0] == 1

    def test_pixels(self):
        # LD I, 0 ; DRW V0, V0, 5 ; JP $204
        cpu = _cpu_with(0xA000, 0xD005, 0x1204)
        loop = FrameLoop(cpu)
        loop.run_frame()
        pixels = loop.pixels()
        assert len(pixels) == 32
        assert len(pixels[0]) == 64
        assert pixels[0][:4] == [1, 1, 1, 1]
        assert pixels[1][:4] == [1, 0, 0, 1]
