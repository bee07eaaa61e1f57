#!/usr/bin/env python3

"""
Stack Emulator

The CHIP-8 call stack is not part of system RAM, because there is no specified
location for it, and the stack pointer is not exposed to the running program.
It is held here as 16 fixed return-address slots plus a stack pointer.

Pushing onto a full stack, or popping from an empty one, can only happen with a
broken program, so both are reported as a StackError.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import STACK_SIZE


class StackError(Exception):
    pass


class Stack:
    def __init__(self, size=STACK_SIZE):
        self.size = size
        self.clear()

    def push(self, item):
        if self.sp >= self.size:
            raise StackError("Stack overflow")

        self.slots[self.sp] = item
        self.sp += 1

    def pop(self):
        if self.sp <= 0:
            raise StackError("Stack underflow")

        self.sp -= 1
        return self.slots[self.sp]

    def clear(self):
        self.slots = [0] * self.size
        self.sp = 0

    def get_items(self):
        # For fault reports
        return self.slots[:self.sp]
