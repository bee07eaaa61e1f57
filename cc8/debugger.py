#!/usr/bin/env python3

"""
CPU State Dump

Formats the machine state for inclusion in fault reports:
    * All 16 of the [V] registers, starting with most significant (Vf) and
      reducing to least significant (V0)
    * I  - Index register
    * DT - Delay timer
    * ST - Sound timer
    * PC - Address of the faulting instruction
    * OP - OpCode number
    * SP - Stack pointer, followed by the stack contents
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


def dump_state(cpu):
    debug_str = (
        "V: 0x" + ("{:02x}" * 16) + " I: 0x{:04x} DT: 0x{:02x} ST: 0x{:02x} PC: 0x{:03x} OP: 0x{:04x}"
    ).format(
        *[cpu.v[reg_num] for reg_num in range(15, -1, -1)] +
        [cpu.i, cpu.dt, cpu.st, cpu.debug_pc, cpu.opcode]
    )

    stack_items = cpu.stack.get_items()
    stack_str = (" 0x{:03x}" * len(stack_items)).format(*stack_items)
    debug_str += "\nSP: {} Stack:{}".format(cpu.stack.sp, stack_str or " (Empty)")
    return debug_str
