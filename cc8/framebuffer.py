#!/usr/bin/env python3

"""
Framebuffer Emulator

Pixels are written here by the CPU, and read back by the host at 60Hz to be
drawn by a Renderer.  Keeping the framebuffer separate from the renderer means
the CPU never has to wait on PyGame/Curses calls, which can be very slow when
made tens of thousands of times a second.

Programs for this system cannot write directly into video RAM.  Instead,
sprites are drawn to the screen using an XOR method.  Any pixel that was set,
but was unset by an XOR, is reported as a collision.

Drawing past the right or bottom edge wraps around to the opposite side.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import VID_WIDTH, VID_HEIGHT


class FramebufferError(Exception):
    pass


class Framebuffer:
    def __init__(self, vid_width=VID_WIDTH, vid_height=VID_HEIGHT):
        if vid_width <= 0 or vid_height <= 0:
            raise FramebufferError("Framebuffer dimensions must be positive")

        self.vid_width = vid_width
        self.vid_height = vid_height
        self.vid_size = vid_width * vid_height
        self.clear()

    def clear(self):
        self.vram = bytearray(self.vid_size)

    def xor_pixel(self, x, y):
        # Returns flagging any collision
        x %= self.vid_width
        y %= self.vid_height
        vram_loc = x + y * self.vid_width
        collision = self.vram[vram_loc] != 0
        self.vram[vram_loc] ^= 1
        return collision

    def get_pixel(self, x, y):
        return self.vram[x + y * self.vid_width] != 0

    def get_pixels(self):
        # Row-major, read-only copy for renderers
        return tuple(pixel != 0 for pixel in self.vram)

    def get_vid_size(self):
        return self.vid_width, self.vid_height
