#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from cc8.constants import APP_NAME, DEFAULT_KEYMAP
from cc8.cpu import CPU
from cc8.inputs.i_null import Inputs
from cc8.renderers.r_null import Renderer, RendererError
from cc8.scheduler import Scheduler


class RecordingRenderer(Renderer):
    def __init__(self):
        self.frames = []
        super().__init__()

    def draw_frame(self, pixels):
        super().draw_frame(pixels)
        self.frames.append(pixels)


class QuittingInputs(Inputs):
    def __init__(self, keymap, renderer, set_key, polls_before_quit):
        self.polls_left = polls_before_quit
        super().__init__(keymap, renderer, set_key)

    def process_messages(self):
        self.polls_left -= 1
        return self.polls_left < 0


class TestScheduler(unittest.TestCase):
    def setUp(self):
        self.cpu = CPU()
        # Endless run of LD V0, 0x01 instructions followed by a jump back to the start
        self.cpu.load_program(b"\x60\x01" * 8 + b"\x12\x00")
        self.renderer = RecordingRenderer()
        self.scheduler = Scheduler(self.cpu, self.renderer, Inputs(DEFAULT_KEYMAP, self.renderer, self.cpu.set_key))

    def test_scheduler_resolution(self):
        self.assertEqual((64, 32), (self.renderer.width, self.renderer.height))

    def test_scheduler_cycles(self):
        self.assertFalse(self.scheduler.step(0.0))
        self.assertEqual(0x202, self.cpu.pc)
        self.scheduler.step(0.0)  # Too soon for another instruction
        self.assertEqual(0x202, self.cpu.pc)
        self.scheduler.step(0.01)
        self.assertEqual(0x204, self.cpu.pc)

    def test_scheduler_timers(self):
        self.cpu.dt = 10
        self.cpu.st = 3
        self.scheduler.step(0.0)
        self.assertEqual((10, 3), (self.cpu.dt, self.cpu.st))
        # Missed timer ticks are caught up, however few instructions were run
        self.scheduler.step(0.105)
        self.assertEqual((4, 0), (self.cpu.dt, self.cpu.st))
        self.scheduler.step(0.12)
        self.assertEqual(3, self.cpu.dt)

    def test_scheduler_display(self):
        self.scheduler.step(0.0)
        self.assertEqual(1, len(self.renderer.frames))
        self.scheduler.step(0.001)  # Too soon for another frame
        self.assertEqual(1, len(self.renderer.frames))
        self.scheduler.step(0.02)
        self.assertEqual(2, len(self.renderer.frames))
        self.assertEqual(self.cpu.get_framebuffer(), self.renderer.frames[-1])

    def test_scheduler_perf_report(self):
        self.scheduler.step(0.0)
        self.assertEqual("{} - 0 FPS, 0 OPS".format(APP_NAME), self.renderer.title)
        self.scheduler.step(0.5)
        self.scheduler.step(1.0)
        self.assertEqual("{} - 2 FPS, 2 OPS".format(APP_NAME), self.renderer.title)

    def test_scheduler_quit(self):
        inputs = QuittingInputs(DEFAULT_KEYMAP, self.renderer, self.cpu.set_key, 2)
        scheduler = Scheduler(self.cpu, self.renderer, inputs)
        scheduler.run()
        self.assertEqual(0, inputs.polls_left + 1)

    def test_renderer_frame_size(self):
        self.assertRaises(RendererError, self.renderer.draw_frame, (False,) * 10)
