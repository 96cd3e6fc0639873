import sys

from retro_chip8.ui.app import main

sys.exit(main())
