import json

import pytest
from click.testing import CliRunner

from contractlist import cli as cli_module
from contractlist.cli import cli
from contractlist.errors import ContractListError


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def abi_file(tmp_path, router_abi):
    path = tmp_path / "Router.json"
    path.write_text(json.dumps({"contractName": "Router", "abi": router_abi}))
    return path


# --- generate ---------------------------------------------------------------

def test_generate_to_stdout(runner, abi_file):
    result = runner.invoke(cli, ["generate", "--abi", str(abi_file), "--chain-id", "1", "--name", "Uniswap Router"])
    assert result.exit_code == 0, result.output
    [factory] = json.loads(result.output)
    assert factory["chainId"] == 1
    assert factory["hookName"] == "UniswapRouter"
    assert len(factory["functions"]) == 2


def test_generate_flags(runner, abi_file):
    result = runner.invoke(cli, [
        "generate", "-a", str(abi_file), "-c", "10", "-n", "Router",
        "--hook-name", "RouterV2", "--include-view", "--include-pure",
    ])
    assert result.exit_code == 0, result.output
    [factory] = json.loads(result.output)
    assert factory["hookName"] == "RouterV2"
    assert len(factory["functions"]) == 4


def test_generate_to_file(runner, abi_file, tmp_path):
    output = tmp_path / "out" / "router.contractlist.json"
    output.parent.mkdir()
    result = runner.invoke(cli, ["generate", "-a", str(abi_file), "-c", "1", "-n", "Router", "-o", str(output)])
    assert result.exit_code == 0, result.output
    assert "Contract list written to:" in result.output
    document = json.loads(output.read_text())
    assert document[0]["name"] == "Router"
    assert output.read_text().startswith('[\n  {')


def test_generate_missing_required_option(runner, abi_file):
    result = runner.invoke(cli, ["generate", "-a", str(abi_file), "-n", "Router"])
    assert result.exit_code == 2


def test_generate_missing_abi_file(runner, tmp_path):
    result = runner.invoke(cli, ["generate", "-a", str(tmp_path / "nope.json"), "-c", "1", "-n", "Router"])
    assert result.exit_code == 2


def test_generate_invalid_json(runner, tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[{")
    result = runner.invoke(cli, ["generate", "-a", str(path), "-c", "1", "-n", "Router"])
    assert result.exit_code == 2
    assert "Invalid JSON" in result.output


def test_generate_abi_not_an_array(runner, tmp_path):
    path = tmp_path / "artifact.json"
    path.write_text(json.dumps({"bytecode": "0x"}))
    result = runner.invoke(cli, ["generate", "-a", str(path), "-c", "1", "-n", "Router"])
    assert result.exit_code == 2
    assert "ABI must be an array" in result.output


def test_generate_failure_exits_1(runner, abi_file, monkeypatch):
    def boom(options):
        raise ContractListError("boom")

    monkeypatch.setattr(cli_module, "generate_contract_list", boom)
    result = runner.invoke(cli, ["generate", "-a", str(abi_file), "-c", "1", "-n", "Router"])
    assert result.exit_code == 1


# --- validate ---------------------------------------------------------------

def test_validate_ok(runner, tmp_path):
    path = tmp_path / "list.json"
    path.write_text(json.dumps([{"name": "Vault", "chainId": 1, "functions": [{"deposit": "Deposit"}]}]))
    result = runner.invoke(cli, ["validate", "--file", str(path)])
    assert result.exit_code == 0
    assert "Validation OK" in result.output


def test_validate_generated_output(runner, abi_file, tmp_path):
    output = tmp_path / "router.json"
    runner.invoke(cli, ["generate", "-a", str(abi_file), "-c", "1", "-n", "Router", "-o", str(output)])
    result = runner.invoke(cli, ["validate", "-f", str(output)])
    assert result.exit_code == 0, result.output


def test_validate_failure(runner, tmp_path):
    path = tmp_path / "list.json"
    path.write_text(json.dumps([{"name": "Vault", "address": "0x12", "functions": []}]))
    result = runner.invoke(cli, ["validate", "-f", str(path)])
    assert result.exit_code == 1
    assert "Validation failed:" in result.output
    assert "$[0].address" in result.output


def test_validate_invalid_json(runner, tmp_path):
    path = tmp_path / "list.json"
    path.write_text("not json")
    result = runner.invoke(cli, ["validate", "-f", str(path)])
    assert result.exit_code == 2


def test_log_level_option(runner, abi_file):
    result = runner.invoke(cli, ["--log-level", "debug", "generate", "-a", str(abi_file), "-c", "1", "-n", "Router"])
    assert result.exit_code == 0
