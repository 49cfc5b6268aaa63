"""Tests for the launch command."""

from pathlib import Path

from click.testing import CliRunner

from fedimintd_mobile.cli.cli import cli
from fedimintd_mobile.core.context import MintContext
from fedimintd_mobile.core.network import REGTEST_GENESIS_HASH, SIGNET_GENESIS_HASH
from fedimintd_mobile.integrations.chain_source.fake import FakeChainSource
from fedimintd_mobile.integrations.node_runtime.fake import FakeNodeRuntime
from fedimintd_mobile.integrations.output_redirect.fake import FakeOutputRedirect

MUTINYNET_URL = "https://mutinynet.com/api"


def test_launch_runs_node_with_defaults(tmp_path: Path) -> None:
    # Arrange
    runtime = FakeNodeRuntime()
    redirect = FakeOutputRedirect()
    ctx = MintContext.for_test(
        chain_source=FakeChainSource(genesis_hashes={MUTINYNET_URL: SIGNET_GENESIS_HASH}),
        output_redirect=redirect,
        node_runtime=runtime,
    )
    runner = CliRunner()

    # Act
    result = runner.invoke(
        cli,
        ["launch", str(tmp_path), "--network", "signet", "--esplora-url", MUTINYNET_URL],
        obj=ctx,
    )

    # Assert
    assert result.exit_code == 0, result.output
    assert "Launching fedimintd on signet" in result.output
    assert "terminated" in result.output
    workdir = tmp_path.absolute() / "fedimintd"
    assert workdir.is_dir()
    assert redirect.redirected_paths == [workdir / "fedimintd.log"]
    settings = runtime.started_configs[0].settings
    assert settings["FM_BIND_API_IROH"] == "0.0.0.0:8174"
    assert settings["FM_BIND_UI"] == "0.0.0.0:8175"
    assert settings["FM_FORCE_IROH"] == "1"


def test_launch_with_overrides(tmp_path: Path) -> None:
    runtime = FakeNodeRuntime()
    ctx = MintContext.for_test(node_runtime=runtime)
    runner = CliRunner()

    result = runner.invoke(
        cli,
        [
            "launch",
            str(tmp_path),
            "--network",
            "regtest",
            "--bitcoind-url",
            "http://127.0.0.1:18443",
            "--bitcoind-username",
            "user",
            "--bitcoind-password",
            "pass",
            "--bind-p2p",
            "127.0.0.1:9000",
            "--bind-ui",
            "127.0.0.1:9001",
            "--no-iroh",
            "--skip-verify",
        ],
        obj=ctx,
    )

    assert result.exit_code == 0, result.output
    settings = runtime.started_configs[0].settings
    assert settings["FM_BITCOIN_NETWORK"] == "regtest"
    assert settings["FM_BITCOIN_RPC_KIND"] == "bitcoind"
    assert settings["FM_BIND_API_IROH"] == "127.0.0.1:9000"
    assert settings["FM_BIND_UI"] == "127.0.0.1:9001"
    assert "FM_FORCE_IROH" not in settings


def test_launch_stops_when_verification_fails(tmp_path: Path) -> None:
    runtime = FakeNodeRuntime()
    ctx = MintContext.for_test(
        chain_source=FakeChainSource(default_genesis_hash=REGTEST_GENESIS_HASH),
        node_runtime=runtime,
    )
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["launch", str(tmp_path), "--network", "signet", "--esplora-url", MUTINYNET_URL],
        obj=ctx,
    )

    assert result.exit_code == 1
    assert "Backend serves regtest, but signet was selected" in result.output
    assert runtime.started_configs == []


def test_launch_reports_log_setup_failure(tmp_path: Path) -> None:
    runtime = FakeNodeRuntime()
    ctx = MintContext.for_test(
        output_redirect=FakeOutputRedirect(error=PermissionError("read-only filesystem")),
        node_runtime=runtime,
    )
    runner = CliRunner()

    result = runner.invoke(
        cli,
        [
            "launch",
            str(tmp_path),
            "--network",
            "signet",
            "--esplora-url",
            MUTINYNET_URL,
            "--skip-verify",
        ],
        obj=ctx,
    )

    assert result.exit_code == 1
    assert "Could not open log file" in result.output
    assert runtime.started_configs == []


def test_launch_reports_node_failure(tmp_path: Path) -> None:
    ctx = MintContext.for_test(node_runtime=FakeNodeRuntime(error=RuntimeError("exited")))
    runner = CliRunner()

    result = runner.invoke(
        cli,
        [
            "launch",
            str(tmp_path),
            "--network",
            "signet",
            "--esplora-url",
            MUTINYNET_URL,
            "--skip-verify",
        ],
        obj=ctx,
    )

    assert result.exit_code == 1
    assert "fedimintd failed: exited" in result.output


def test_launch_rejects_empty_data_dir() -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["launch", "", "--network", "signet", "--esplora-url", MUTINYNET_URL],
        obj=MintContext.for_test(),
    )

    assert result.exit_code == 1
    assert "DATA_DIR must not be empty" in result.output
