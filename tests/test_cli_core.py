"""CLI core stories: traceback handling, main entry, bare invocation, info, version."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import lib_cli_exit_tools
import orjson
import pytest
from click.testing import CliRunner, Result

from saltbox_facts import __init__conf__
from saltbox_facts.adapters import cli as cli_mod
from saltbox_facts.adapters.memory import FakeHost
from saltbox_facts.composition import build_production


@pytest.mark.os_agnostic
def test_snapshot_traceback_state_returns_disabled_by_default(managed_traceback_state: None) -> None:
    """snapshot_traceback_state returns both flags disabled initially."""
    assert cli_mod.snapshot_traceback_state() == (False, False)


@pytest.mark.os_agnostic
def test_apply_traceback_preferences_enables_both_flags(managed_traceback_state: None) -> None:
    """apply_traceback_preferences(True) enables traceback and force_color."""
    cli_mod.apply_traceback_preferences(True)

    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


@pytest.mark.os_agnostic
def test_restore_traceback_state_resets_flags_to_previous(managed_traceback_state: None) -> None:
    """restore_traceback_state resets flags to their pre-apply values."""
    previous = cli_mod.snapshot_traceback_state()
    cli_mod.apply_traceback_preferences(True)

    cli_mod.restore_traceback_state(previous)

    assert cli_mod.snapshot_traceback_state() == (False, False)


@pytest.mark.os_agnostic
def test_traceback_flag_is_active_during_info_command(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
) -> None:
    """--traceback enables both flags while the command runs and restores them afterwards."""
    notes: list[tuple[bool, bool]] = []

    def record() -> None:
        notes.append(cli_mod.snapshot_traceback_state())

    monkeypatch.setattr(__init__conf__, "print_info", record)

    exit_code = cli_mod.main(["--traceback", "info"], services_factory=build_production)

    assert exit_code == 0
    assert notes == [(True, True)]
    assert cli_mod.snapshot_traceback_state() == (False, False)


@pytest.mark.os_agnostic
def test_restore_traceback_false_keeps_flags_enabled(managed_traceback_state: None) -> None:
    """restore_traceback=False leaves traceback flags enabled after the command."""
    cli_mod.main(["--traceback", "info"], restore_traceback=False, services_factory=build_production)

    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


@pytest.mark.os_agnostic
def test_unexpected_error_is_summarised_on_stderr(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    """Errors escaping a command leave through lib_cli_exit_tools with a non-zero code."""

    def explode() -> None:
        raise RuntimeError("metadata unavailable")

    monkeypatch.setattr(__init__conf__, "print_info", explode)

    exit_code = cli_mod.main(["info"], services_factory=build_production)

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exit_code != 0
    assert "metadata unavailable" in plain_err


@pytest.mark.os_agnostic
def test_traceback_flag_displays_full_exception_traceback(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    """--traceback prints the complete traceback on failure."""

    def explode() -> None:
        raise RuntimeError("metadata unavailable")

    monkeypatch.setattr(__init__conf__, "print_info", explode)

    exit_code = cli_mod.main(["--traceback", "info"], services_factory=build_production)

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exit_code != 0
    assert "Traceback (most recent call last)" in plain_err
    assert "RuntimeError: metadata unavailable" in plain_err


@pytest.mark.os_agnostic
def test_main_requires_a_services_factory() -> None:
    with pytest.raises(ValueError, match="services_factory is required"):
        cli_mod.main(["info"])


@pytest.mark.os_agnostic
def test_when_main_is_called_it_invokes_cli_with_services_factory(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """main() hands the services factory to the root group via ctx.obj."""
    result = cli_mod.main(["info"], services_factory=build_production)

    assert result == 0
    assert __init__conf__.name in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_bare_invocation_prints_facts_json(
    cli_runner: CliRunner,
    fake_host: FakeHost,
    host_cli_context: Callable[..., Callable[[], Any]],
) -> None:
    """Ansible runs the fact script without arguments and parses stdout as JSON."""
    result: Result = cli_runner.invoke(cli_mod.cli, [], obj=host_cli_context(fake_host))

    assert result.exit_code == 0
    document = orjson.loads(result.stdout)
    assert document["saltbox_facts_version"] == __init__conf__.version
    assert document["ip"]["public_ip"] == "203.0.113.10"
    assert document["timezone"] == {"timezone": "Europe/Copenhagen"}


@pytest.mark.os_agnostic
def test_bare_invocation_with_traceback_still_collects(
    cli_runner: CliRunner,
    fake_host: FakeHost,
    host_cli_context: Callable[..., Callable[[], Any]],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["--traceback"], obj=host_cli_context(fake_host))

    assert result.exit_code == 0
    assert "saltbox_facts_version" in result.stdout


@pytest.mark.os_agnostic
def test_help_lists_every_command(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    strip_ansi: Callable[[str], str],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["--help"], obj=production_factory)

    plain = strip_ansi(result.output)
    assert result.exit_code == 0
    for command in ("collect", "config", "info", "release-plan"):
        assert command in plain


@pytest.mark.os_agnostic
def test_version_option_prints_version(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["--version"], obj=production_factory)

    assert result.exit_code == 0
    assert result.output.strip() == f"saltbox-facts version {__init__conf__.version}"


@pytest.mark.os_agnostic
def test_info_command_displays_project_metadata(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """info command displays project name and version."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj=production_factory)

    assert result.exit_code == 0
    assert f"Info for {__init__conf__.name}:" in result.output
    assert __init__conf__.version in result.output


@pytest.mark.os_agnostic
def test_unknown_command_shows_no_such_command_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """Unknown command produces 'No such command' error."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["does-not-exist"], obj=production_factory)

    assert result.exit_code != 0
    assert "No such command" in result.output


@pytest.mark.os_agnostic
def test_malformed_set_override_is_a_usage_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["--set", "no_dot=1", "info"], obj=production_factory)

    assert result.exit_code == 2
    assert "must contain at least one dot" in result.output
