#!/usr/bin/env python3

"""
PyGame Renderer Plugin

Draws the framebuffer onto an SDL window surface via PyGame.  The surface is
allocated at the emulated screen size, and then the contents are stretched (in
the correct aspect ratio using 'Nearest Neighbour' translation) to fit the
window itself.  This means we don't have to draw the same pixel multiple times.

Set pixels are drawn in the foreground colour, and unset pixels in the
background colour.  Both can be overridden with a palette string.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .r_null import RendererError, Renderer as RendererBase
from ..constants import APP_NAME


def parse_palette(pygame_palette):
    # Background first, then foreground
    colour_map = [0x222222, 0xDDDDDD]

    if pygame_palette is None:
        return colour_map

    pygame_palette_split = pygame_palette.split(",")

    if len(pygame_palette_split) > len(colour_map):
        raise RendererError("Too many palette colours defined.")

    for pygame_colour_num, pygame_colour in enumerate(pygame_palette_split):
        if len(pygame_colour) != 6:
            raise RendererError("Palette colours must all be 6 hex digits long.")

        try:
            colour_map[pygame_colour_num] = int(pygame_colour, 16)
        except ValueError:
            raise RendererError("Invalid palette colour defined.") from None

    return colour_map


class Renderer(RendererBase):
    def __init__(self, scale=None, pygame_palette=None, **kwargs):
        if scale is None:
            scale = 512  # Default window width if not supplied, or set to default

        pygame.display.init()
        self.rgb_buffer = None
        self.scaled_size = (scale, scale // 2)
        self.display_surface = pygame.display.set_mode(self.scaled_size)

        # Split compound RGB values for faster byte-based lookup later
        self.rgb_map = [bytes((i >> 16, (i >> 8) & 0xFF, i & 0xFF)) for i in parse_palette(pygame_palette)]

        super().__init__(scale)
        self.set_title(APP_NAME)

    def set_resolution(self, width, height):
        self.rgb_buffer = bytearray(self.rgb_map[0] * (width * height))  # 24-bit, filled with the background
        super().set_resolution(width, height)

    def draw_frame(self, pixels):
        super().draw_frame(pixels)
        # Rebuild the RGB buffer in one go to minimise allocations and PyGame calls
        rgb_off, rgb_on = self.rgb_map
        self.rgb_buffer[:] = b"".join(rgb_on if pixel else rgb_off for pixel in pixels)

    def refresh_display(self):
        if not self.rgb_buffer:
            return

        # Blit the bytearray straight to the surface.  This is much faster than very frequent PixelArray updates
        render_surface = pygame.image.frombuffer(self.rgb_buffer, (self.width, self.height), "RGB")
        scaled_win = pygame.transform.scale(render_surface, self.scaled_size)
        self.display_surface.blit(scaled_win, (0, 0))
        pygame.display.flip()

    def set_title(self, title):
        pygame.display.set_caption(title)
        super().set_title(title)

    def shutdown(self):
        # PyGame currently segfaults if display.quit is called via __del__
        pygame.display.quit()
        super().shutdown()
