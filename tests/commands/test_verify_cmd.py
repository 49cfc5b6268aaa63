"""Tests for the verify command."""

import json

from click.testing import CliRunner

from fedimintd_mobile.cli.cli import cli
from fedimintd_mobile.core.context import MintContext
from fedimintd_mobile.core.network import MAINNET_GENESIS_HASH, SIGNET_GENESIS_HASH
from fedimintd_mobile.integrations.chain_source.fake import FakeChainSource

MUTINYNET_URL = "https://mutinynet.com/api"


def _ctx() -> MintContext:
    return MintContext.for_test(
        chain_source=FakeChainSource(genesis_hashes={MUTINYNET_URL: SIGNET_GENESIS_HASH})
    )


def test_verify_success_prints_checkmark() -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli, ["verify", "--network", "signet", "--esplora-url", MUTINYNET_URL], obj=_ctx()
    )

    assert result.exit_code == 0, result.output
    assert f"{MUTINYNET_URL} serves signet" in result.output


def test_verify_accepts_mutinynet_alias_case_insensitively() -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli, ["verify", "--network", "MutinyNet", "--esplora-url", MUTINYNET_URL], obj=_ctx()
    )

    assert result.exit_code == 0, result.output


def test_verify_json_output() -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["verify", "--network", "signet", "--esplora-url", MUTINYNET_URL, "--json"],
        obj=_ctx(),
    )

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data == {
        "network": "signet",
        "backend_kind": "esplora",
        "backend_url": MUTINYNET_URL,
        "genesis_hash": SIGNET_GENESIS_HASH,
        "status": "verified",
    }


def test_verify_mismatch_exits_with_error() -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli, ["verify", "--network", "bitcoin", "--esplora-url", MUTINYNET_URL], obj=_ctx()
    )

    assert result.exit_code == 1
    assert "Error: " in result.output
    assert "Backend serves signet, but mainnet was selected" in result.output


def test_verify_mismatch_json_error() -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["verify", "--network", "bitcoin", "--esplora-url", MUTINYNET_URL, "--json"],
        obj=_ctx(),
    )

    assert result.exit_code == 1
    data = json.loads(result.stdout)
    assert data["error_type"] == "NetworkMismatchError"
    assert data["exit_code"] == 1


def test_verify_unreachable_backend() -> None:
    runner = CliRunner()
    ctx = MintContext.for_test(
        chain_source=FakeChainSource(
            default_genesis_hash=MAINNET_GENESIS_HASH, unreachable_urls={"https://down.example"}
        )
    )

    result = runner.invoke(
        cli, ["verify", "--network", "bitcoin", "--esplora-url", "https://down.example"], obj=ctx
    )

    assert result.exit_code == 1
    assert "Could not fetch genesis block from https://down.example" in result.output


def test_verify_rejects_both_backends() -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli,
        [
            "verify",
            "--network",
            "signet",
            "--esplora-url",
            MUTINYNET_URL,
            "--bitcoind-url",
            "http://127.0.0.1:38332",
            "--bitcoind-username",
            "user",
            "--bitcoind-password",
            "pass",
        ],
        obj=_ctx(),
    )

    assert result.exit_code == 1
    assert "not both" in result.output


def test_verify_unknown_network_is_usage_error() -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli, ["verify", "--network", "liquid", "--esplora-url", MUTINYNET_URL], obj=_ctx()
    )

    assert result.exit_code == 2
