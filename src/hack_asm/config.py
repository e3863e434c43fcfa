"""
Hack Assembler - Configuration
==============================

Assembler settings. Configuration can come from:
- Default values (defined here)
- Environment variables (AssemblerConfig.from_env)
- Keyword arguments to the Assembler constructor

The defaults reproduce the standard Hack toolchain: variables start at
RAM[16] and output files use the ``.hack`` suffix.
"""

from dataclasses import dataclass
import os

from hack_asm.cpu import VARIABLE_BASE


@dataclass
class AssemblerConfig:
    """
    Configuration for a Hack assembler.

    Attributes:
        variable_base: First data-memory address given to variables (default: 16)
        output_suffix: Suffix of the default output file (default: ".hack")
        encoding: Text encoding for source and output files (default: "utf-8")
    """

    variable_base: int = VARIABLE_BASE
    output_suffix: str = ".hack"
    encoding: str = "utf-8"

    @classmethod
    def from_env(cls) -> "AssemblerConfig":
        """
        Create AssemblerConfig from environment variables.

        Environment variables (all optional):
            HACKASM_VARIABLE_BASE: First variable address (integer)
            HACKASM_OUTPUT_SUFFIX: Output file suffix (e.g. ".bin")
            HACKASM_ENCODING: Source/output text encoding

        Returns:
            AssemblerConfig with values from environment variables
        """
        config = cls()

        if base := os.environ.get("HACKASM_VARIABLE_BASE"):
            try:
                value = int(base)
                if value >= 0:
                    config.variable_base = value
            except ValueError:
                pass  # Ignore invalid values

        if suffix := os.environ.get("HACKASM_OUTPUT_SUFFIX"):
            config.output_suffix = suffix if suffix.startswith(".") else f".{suffix}"

        if encoding := os.environ.get("HACKASM_ENCODING"):
            config.encoding = encoding

        return config
