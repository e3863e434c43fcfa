# =============================================================================
# test_config.py - Assembler Configuration Tests
# =============================================================================

from hack_asm.config import AssemblerConfig


class TestAssemblerConfig:
    """Defaults and environment overrides."""

    def test_defaults(self):
        config = AssemblerConfig()
        assert config.variable_base == 16
        assert config.output_suffix == ".hack"
        assert config.encoding == "utf-8"

    def test_from_env_without_variables(self, monkeypatch):
        for name in ("HACKASM_VARIABLE_BASE", "HACKASM_OUTPUT_SUFFIX", "HACKASM_ENCODING"):
            monkeypatch.delenv(name, raising=False)
        assert AssemblerConfig.from_env() == AssemblerConfig()

    def test_from_env_overrides(self, monkeypatch):
        monkeypatch.setenv("HACKASM_VARIABLE_BASE", "256")
        monkeypatch.setenv("HACKASM_OUTPUT_SUFFIX", "bin")
        monkeypatch.setenv("HACKASM_ENCODING", "latin-1")

        config = AssemblerConfig.from_env()
        assert config.variable_base == 256
        assert config.output_suffix == ".bin"
        assert config.encoding == "latin-1"

    def test_invalid_variable_base_is_ignored(self, monkeypatch):
        monkeypatch.setenv("HACKASM_VARIABLE_BASE", "sixteen")
        assert AssemblerConfig.from_env().variable_base == 16

        monkeypatch.setenv("HACKASM_VARIABLE_BASE", "-4")
        assert AssemblerConfig.from_env().variable_base == 16
