#!/usr/bin/env python3
"""
Hack Assembler Demo
===================

This script assembles the sample programs in this directory and prints
each codeword beside the source line it came from.

Usage:
    pip install -e .
    python examples/assemble_demo.py
"""

from pathlib import Path

from hack_asm import Assembler


def main():
    here = Path(__file__).parent

    for source in sorted(here.glob("*.asm")):
        asm = Assembler()
        asm.assemble_file(source)

        print(asm.get_listing())
        print()

        output = asm.output_path()
        asm.write_hack(output)
        print(f"Wrote {len(asm.get_code())} instructions to {output}")
        print()


if __name__ == "__main__":
    main()
