#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to start the emulator, replacing args with a dictionary
of options.  This can be done via the Terminal or GUI.

All options must be supplied.  Defaults can be specified with a 'None'.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import APP_INTRO, APP_COPYRIGHT
from .cpu import CPU
from .hostio import Loader
from .scheduler import Scheduler


class StartupError(Exception):
    pass


def select_plugins(opt_renderer):
    # Returns the Renderer and Inputs classes.  If no renderer is chosen, try PyGame first, then Curses.
    auto_select_renderer = opt_renderer is None

    # flake8: noqa: F401
    if auto_select_renderer or opt_renderer == "pygame":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import pygame
        except ImportError:
            if auto_select_renderer:
                opt_renderer = "curses"
            else:
                raise StartupError(
                    "PyGame does not appear to be installed."
                )
        else:
            from .inputs.i_pygame import Inputs
            from .renderers.r_pygame import Renderer
            return Renderer, Inputs

    if opt_renderer == "curses":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import curses
        except ImportError:
            if auto_select_renderer:
                raise StartupError(
                    "Neither PyGame nor Curses (or Windows-Curses) appear to be installed."
                )

            raise StartupError(
                "Curses (or Windows-Curses) does not appear to be installed."
            )
        else:
            from .inputs.i_curses import Inputs
            from .renderers.r_curses import Renderer
            return Renderer, Inputs

    if opt_renderer == "null":
        # pylint: disable=import-outside-toplevel
        from .inputs.i_null import Inputs
        from .renderers.r_null import Renderer
        return Renderer, Inputs

    raise StartupError("Unknown renderer '{}'.".format(opt_renderer))


def main(args):
    print("".join((APP_INTRO, APP_COPYRIGHT)))
    Renderer, Inputs = select_plugins(args["renderer"])  # pylint: disable=invalid-name

    # Power on the machine (font is loaded into RAM here), then copy the ROM in at the program start address
    cpu = CPU()
    cpu.load_program(Loader().load_binary(args["filename"]))

    # Set up a new rendering system, and link host inputs to it in case it provides inputs too
    renderer = Renderer(scale=args["scale"], pygame_palette=args["pygame_palette"])

    try:
        inputs = Inputs(args["keymap"], renderer, cpu.set_key)
    except Exception:
        renderer.shutdown()
        raise

    try:
        Scheduler(cpu, renderer, inputs).run()
    finally:
        # The CPU has quit (or faulted), so shut down the host systems.  __del__ cannot be relied upon when using PyPy
        inputs.shutdown()
        renderer.shutdown()
