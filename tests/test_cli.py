"""Tests for the command-line interface."""

import importlib.util
import json
from pathlib import Path

import pytest

CLI_PATH = Path(__file__).resolve().parent.parent / "scripts" / "cli" / "emoji_url_cli.py"


@pytest.fixture
def cli_module():
    spec = importlib.util.spec_from_file_location("emoji_url_cli", CLI_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
async def cli(cli_module):
    cli = cli_module.EmojiURLCLI(db_url="memory://", domain="emoji.test", scheme="https")
    await cli.initialize()

    yield cli

    await cli.cleanup()


@pytest.mark.asyncio
class TestCLI:
    """CLI commands against the in-memory store."""

    async def test_shorten_prints_links(self, cli, capsys):
        assert await cli.shorten("https://example.com", "🐱") == 0

        output = json.loads(capsys.readouterr().out)
        assert output["raw"] == "🐱"
        assert output["emoji_url"] == "https://emoji.test/🐱"
        assert output["encoded_url"] == "https://emoji.test/%F0%9F%90%B1"

    async def test_resolve(self, cli, capsys):
        await cli.shorten("https://example.com", "🐱🐶")
        key = json.loads(capsys.readouterr().out)["key"]

        assert await cli.resolve(key) == 0

        output = json.loads(capsys.readouterr().out)
        assert output["target"] == "https://example.com"
        assert output["encoded_url"].isascii()

    async def test_list_last(self, cli, capsys):
        for i in range(3):
            await cli.shorten(f"https://example.com/{i}")
        capsys.readouterr()

        await cli.list_records(last=2)

        output = json.loads(capsys.readouterr().out)
        assert output["count"] == 2
        assert output["records"][0]["target"] == "https://example.com/2"


def test_encode(cli_module, capsys):
    assert cli_module.encode("🐱🐶") == 0

    output = json.loads(capsys.readouterr().out)
    assert output["already_canonical"] is False
    assert output["key"].isascii()
