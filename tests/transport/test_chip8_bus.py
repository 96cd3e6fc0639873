import random

from retro_chip8.transport.bus import Bus
from retro_chip8.transport.memory import Memory


class TestBus:
    def test_default_devices(self):
        bus = Bus()
        assert bus.memory.get_size() == 0x1000
        assert bus.display.width == 64
        assert bus.keyboard.take_any_pressed() is None

    def test_read_write_delegates_to_memory(self):
        memory = Memory()
        bus = Bus(memory=memory)
        bus.write(0x300, 0x42)
        assert memory.read(0x300) == 0x42
        assert bus.read(0x300) == 0x42

    def test_read_word_big_endian(self):
        bus = Bus()
        bus.write(0x200, 0x12)
        bus.write(0x201, 0x34)
        assert bus.read_word(0x200) == 0x1234

    def test_random_byte_uses_rng(self):
        bus_a = Bus(rng=random.Random(7))
        bus_b = Bus(rng=random.Random(7))
        values = [bus_a.random_byte() for _ in range(20)]
        assert values == [bus_b.random_byte() for _ in range(20)]
        assert all(0 <= v <= 0xFF for v in values)
