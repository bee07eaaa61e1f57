#!/usr/bin/env python3

"""
Keypad Emulator

Holds the pressed state of the 16 hex keys.  The state is written by whichever
Inputs plugin the host is using, and read by the CPU's key skip and key wait
instructions.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import NUM_KEYS


class KeypadError(Exception):
    pass


class Keypad:
    def __init__(self):
        self.clear()

    def set_key(self, key, pressed):
        if not 0 <= key < NUM_KEYS:
            raise KeypadError("Key 0x{:x} is outside the keypad".format(key))

        self.key_down[key] = bool(pressed)

    def is_key_down(self, key):
        # Programs can ask about any register value, but only the low 16 map to keys
        if key >= NUM_KEYS:
            return False

        return self.key_down[key]

    def get_first_pressed(self):
        # Lowest key number wins if several are held
        for key, pressed in enumerate(self.key_down):
            if pressed:
                return key

        return None

    def clear(self):
        self.key_down = [False] * NUM_KEYS
