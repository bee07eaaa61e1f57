#!/usr/bin/env python3

"""
Host Scheduler

The CPU has no clock of its own, so this drives it.  Three independent rates
are kept against real time:
    * CPU cycles at CPU_FREQ (fixed, not user-configurable)
    * Delay/sound timer decrements at exactly 60Hz, however fast the CPU runs
    * Input polling and display refreshes at 60Hz

If the host lags, missed timer decrements are caught up on the next pass so the
timers still expire on time.  CPU cycles are not caught up.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from time import perf_counter
from .constants import APP_NAME, CPU_FREQ, DISPLAY_FREQ, TIMER_FREQ

CORE_INTERVAL = 1.0 / CPU_FREQ
TIMER_INTERVAL = 1.0 / TIMER_FREQ
DISPLAY_INTERVAL = 1.0 / DISPLAY_FREQ


class Scheduler:
    def __init__(self, cpu, renderer, inputs):
        self.cpu = cpu
        self.renderer = renderer
        self.inputs = inputs
        self.renderer.set_resolution(*cpu.framebuffer.get_vid_size())

        self.next_cycle_time = 0
        self.next_timer_time = None
        self.next_display_update_time = 0

        # Performance-related vars
        self.perf_counter_fps = 0
        self.perf_counter_ops = 0
        self.next_perf_report_time = 0

    def run(self):
        while not self.step(perf_counter()):
            pass

        # Show the final state, in case the renderer keeps it on screen after quitting
        self.refresh_framebuffer()

    def step(self, this_time):
        # Returns True if the host has asked to quit

        # Performance counters
        if this_time >= self.next_perf_report_time:
            self.next_perf_report_time = int(this_time) + 1.0
            # Reporting the performance should be done before a refresh, as refreshing will likely show the report
            self.report_perf(self.perf_counter_fps, self.perf_counter_ops)
            self.perf_counter_ops = 0
            self.perf_counter_fps = 0

        # Prevent unnecessary display rendering in excess of host frame rate
        if this_time >= self.next_display_update_time:
            if self.inputs.process_messages():  # Process inputs at 60Hz too, to avoid slowdown
                return True

            self.next_display_update_time = this_time + DISPLAY_INTERVAL
            self.refresh_framebuffer()
            self.perf_counter_fps += 1

        # Timers tick against real time, never against the number of instructions run
        if self.next_timer_time is None:
            self.next_timer_time = this_time + TIMER_INTERVAL

        while this_time >= self.next_timer_time:
            self.cpu.decrement_timers()
            self.next_timer_time += TIMER_INTERVAL

        if this_time >= self.next_cycle_time:
            self.cpu.cycle()
            self.next_cycle_time = this_time + CORE_INTERVAL
            self.perf_counter_ops += 1

        return False

    def refresh_framebuffer(self):
        self.renderer.draw_frame(self.cpu.get_framebuffer())
        self.renderer.refresh_display()

    def report_perf(self, fps=0, ops=0):
        self.renderer.set_title("{} - {} FPS, {} OPS".format(APP_NAME, fps, ops))
