"""
Тесты команд интерактивного режима.
"""

import pytest

from pcm_explorer.cli import CommandRunner
from pcm_explorer.explorer import PcmExplorer, PcmExplorerConfig


@pytest.fixture
async def runner(memory_source):
    explorer = PcmExplorer(PcmExplorerConfig(), memory_source)
    await explorer.load_all()
    output = []
    return CommandRunner(explorer, output=output.append), output


class TestCommandRunner:
    """Тесты для CommandRunner."""

    @pytest.mark.asyncio
    async def test_filter_and_list(self, runner):
        command_runner, output = runner

        assert command_runner.execute("filter 190 260") is True
        assert output[-1] == "Search completed: 2 PCM(s) found."

        command_runner.execute("list")
        assert "PCM-002" in output[-1]
        assert "PCM-003" not in output[-1]

    @pytest.mark.asyncio
    async def test_select_and_details(self, runner):
        command_runner, output = runner

        command_runner.execute("select PCM-002")
        assert output[-1].startswith("PCM-002 — Dummy cryo-PCM B")

        command_runner.execute("select PCM-404")
        assert "PCM-404" in output[-1]

        command_runner.execute("details")
        assert output[-1].startswith("PCM-002")

    @pytest.mark.asyncio
    async def test_curve_and_property(self, runner):
        command_runner, output = runner

        command_runner.execute("curve")
        assert output[-1].startswith("PCM-001: Solid specific heat")

        command_runner.execute("property latent-heat")
        command_runner.execute("curve")
        assert output[-1].startswith("No 'latent-heat' data for PCM-001.")

        command_runner.execute("properties")
        assert output[-1] == "solid-specific-heat, thermal-conductivity"

    @pytest.mark.asyncio
    async def test_reset_and_status(self, runner):
        command_runner, output = runner

        command_runner.execute("filter 1000 2000")
        command_runner.execute("status")
        assert output[-1] == "Search completed: no matching PCMs."

        command_runner.execute("reset")
        assert output[-1] == "Filters reset: showing all PCMs."

    @pytest.mark.asyncio
    async def test_usage_and_unknown_commands(self, runner):
        command_runner, output = runner

        command_runner.execute("filter 200")
        assert output[-1].startswith("Использование")

        command_runner.execute("bogus")
        assert "bogus" in output[-1]

        assert command_runner.execute("") is True
        assert command_runner.execute("quit") is False
        assert command_runner.execute("exit") is False
