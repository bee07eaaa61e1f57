#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from cc8.constants import DEFAULT_KEYMAP
from cc8.cpu import CPU
from cc8.inputs.i_null import Inputs, InputsError, parse_keymap
from cc8.renderers.r_null import Renderer


class TestInputs(unittest.TestCase):
    def test_inputs_default_keymap(self):
        keymap_dict = parse_keymap(DEFAULT_KEYMAP)
        self.assertEqual(16, len(keymap_dict))
        self.assertEqual(0x0, keymap_dict[120])  # 'x'
        self.assertEqual(0xF, keymap_dict[118])  # 'v'

    def test_inputs_lowercase(self):
        keymap_dict = parse_keymap(",".join(str(ord(char)) for char in "X123QWEASDZC4RFV"), force_lowercase=True)
        self.assertEqual(0x0, keymap_dict[ord("x")])
        self.assertEqual(0xD, keymap_dict[ord("r")])

    def test_inputs_bad_keymaps(self):
        self.assertRaises(InputsError, parse_keymap, "1,2,3")
        self.assertRaises(InputsError, parse_keymap, ",".join(["a"] * 16))
        self.assertRaises(InputsError, parse_keymap, ",".join(["1"] * 16))

    def test_inputs_null(self):
        cpu = CPU()
        inputs = Inputs(DEFAULT_KEYMAP, Renderer(), cpu.set_key)
        self.assertFalse(inputs.process_messages())
        self.assertIsNone(cpu.keypad.get_first_pressed())
        inputs.set_key(0x4, True)
        self.assertTrue(cpu.keypad.is_key_down(0x4))
        inputs.shutdown()
