import sys
import unittest

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt, QEvent
from PySide6.QtGui import QKeyEvent

from retro_chip8.arch.chip8.cpu import Chip8Cpu
from retro_chip8.config.models import HostConfig
from retro_chip8.host.frame_loop import FrameLoop
from retro_chip8.ui.main_window import MainWindow, build_qt_key_names


def _cpu_with(*words):
    cpu = Chip8Cpu()
    data = bytearray()
    for word in words:
        data += bytes([word >> 8, word & 0xFF])
    cpu.load_program(bytes(data))
    return cpu


class TestMainWindow(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        if not QApplication.instance():
            cls.app = QApplication(sys.argv)
        else:
            cls.app = QApplication.instance()

    def _key_event(self, event_type, key, auto_repeat=False):
        return QKeyEvent(event_type, key, Qt.NoModifier, "", auto_repeat)

    def test_key_name_table(self):
        names = build_qt_key_names(HostConfig())
        self.assertEqual(names[Qt.Key.Key_X.value], "X")
        self.assertEqual(names[Qt.Key.Key_1.value], "1")
        self.assertEqual(names[Qt.Key.Key_Escape.value], "Escape")

    def test_unknown_key_name_ignored(self):
        config = HostConfig(key_map={"NoSuchKey": 0x1, "X": 0x0})
        names = build_qt_key_names(config)
        self.assertNotIn("NoSuchKey", names.values())
        self.assertIn("X", names.values())

    def test_window_size(self):
        window = MainWindow(FrameLoop(_cpu_with(0x1200)), HostConfig(scale=5))
        self.assertEqual(window.width(), 320)
        self.assertEqual(window.height(), 160)
        self.assertEqual(window.windowTitle(), "Retro CHIP-8")

    def test_frame_updates_display(self):
        # LD I, 0 ; DRW V0, V0, 5 ; JP $204
        loop = FrameLoop(_cpu_with(0xA000, 0xD005, 0x1204))
        window = MainWindow(loop, HostConfig())
        window._on_frame()
        self.assertEqual(loop.frame_count, 1)
        self.assertEqual(window.display_view.pixels()[0][:4], [1, 1, 1, 1])

    def test_key_events_forwarded(self):
        cpu = _cpu_with(0x1200)
        window = MainWindow(FrameLoop(cpu), HostConfig())
        window.keyPressEvent(self._key_event(QEvent.KeyPress, Qt.Key_W))
        self.assertTrue(cpu.bus.keyboard.is_pressed(0x5))
        window.keyReleaseEvent(self._key_event(QEvent.KeyRelease, Qt.Key_W))
        self.assertFalse(cpu.bus.keyboard.is_pressed(0x5))

    def test_auto_repeat_ignored(self):
        cpu = _cpu_with(0x1200)
        window = MainWindow(FrameLoop(cpu), HostConfig())
        window.keyPressEvent(self._key_event(QEvent.KeyPress, Qt.Key_W, auto_repeat=True))
        self.assertFalse(cpu.bus.keyboard.is_pressed(0x5))

    def test_escape_stops_loop(self):
        loop = FrameLoop(_cpu_with(0x1200))
        window = MainWindow(loop, HostConfig())
        window.keyPressEvent(self._key_event(QEvent.KeyPress, Qt.Key_Escape))
        self.assertFalse(loop.running)
        window._on_frame()
        self.assertEqual(loop.frame_count, 0)
        self.assertEqual(window.exit_code, 0)

    def test_fatal_error_sets_exit_code(self):
        loop = FrameLoop(_cpu_with(0x00EE))
        window = MainWindow(loop, HostConfig())
        window._on_frame()
        self.assertFalse(loop.running)
        self.assertEqual(window.exit_code, 1)


if __name__ == '__main__':
    unittest.main()
