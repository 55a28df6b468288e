"""Shared pytest fixtures for CLI, collection and module-entry tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import contextlib
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from saltbox_facts.adapters.memory import FakeHost
    from saltbox_facts.composition import AppServices

_COVERAGE_BASENAME = ".coverage.saltbox_facts"

# Keeps console logging quiet while the CLI runs inside CliRunner.
QUIET_LOGGING: dict[str, Any] = {"lib_log_rich": {"environment": "test", "console_level": "WARNING"}}


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete leftover SQLite database and journal files from crashed runs."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Redirect the coverage database to a local temp directory.

    Runs before ``pytest-cov`` creates its ``Coverage()`` object so the
    ``COVERAGE_FILE`` value is picked up however pytest is invoked.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


def _merge(base: dict[str, Any], extra: dict[str, Any]) -> dict[str, Any]:
    merged = {key: dict(value) if isinstance(value, dict) else value for key, value in base.items()}
    for key, value in extra.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Click 8.2+ keeps ``result.stdout`` and ``result.stderr`` apart. Parse
    JSON from ``result.stdout`` so log lines on stderr never interfere.

    Example:
        def test_help(cli_runner: CliRunner) -> None:
            result = cli_runner.invoke(cli, ["--help"])
            assert result.exit_code == 0
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests.

    Use this when invoking CLI commands that never touch the network or the
    host databases (``info``, ``config``, ``release-plan``).
    """
    from saltbox_facts.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use this whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before each test.

    Only clears before, not after, so a monkeypatched loader without
    ``cache_clear`` cannot break teardown.
    """
    from saltbox_facts.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts.

    Example:
        def test_section(config_factory: Callable[[dict[str, Any]], Config]) -> None:
            config = config_factory({"saltbox_facts": {"timeout_seconds": 1}})
            assert config.get("saltbox_facts.timeout_seconds") == 1
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def fake_host() -> FakeHost:
    """Return a FakeHost with one group, one user and a known timezone."""
    from saltbox_facts.adapters.memory import FakeHost
    from saltbox_facts.domain.models import GroupEntry, UserEntry

    return FakeHost(
        groups={"docker": GroupEntry(gid="999", members=("seed",))},
        users={"seed": UserEntry(uid="1000", gid="1000", comment="Seed", home="/home/seed", shell="/bin/bash")},
        timezone="Europe/Copenhagen",
    )


@pytest.fixture
def host_cli_context(
    clear_config_cache: None,
) -> Callable[..., Callable[[], AppServices]]:
    """Create a services factory backed by a FakeHost and an injected Config.

    Fact sources come from *host*; configuration comes from *config_data*
    merged over quiet logging settings. The real ``init_logging`` stays
    wired so commands run with an initialised logging runtime.

    Example:
        def test_collect(cli_runner, fake_host, host_cli_context) -> None:
            factory = host_cli_context(fake_host)
            result = cli_runner.invoke(cli, ["collect"], obj=factory)
            assert result.exit_code == 0
    """
    from saltbox_facts.composition import AppServices, build_production, build_testing

    def _create(host: FakeHost, config_data: dict[str, Any] | None = None) -> Callable[[], AppServices]:
        config = Config(_merge(QUIET_LOGGING, config_data or {}), {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = replace(
            build_testing(host=host),
            get_config=_fake_get_config,
            init_logging=build_production().init_logging,
        )
        return lambda: test_services

    return _create


@pytest.fixture
def inject_config(
    clear_config_cache: None,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory that provides production services with an injected Config.

    Only the I/O boundary (``get_config``) is replaced; the Config object
    itself is real.
    """
    from saltbox_facts.composition import AppServices, build_production

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = replace(build_production(), get_config=_fake_get_config)
        return lambda: test_services

    return _inject


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records every profile it is asked for."""
    from saltbox_facts.composition import AppServices, build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        test_services = replace(build_production(), get_config=_capturing_get_config)
        return lambda: test_services

    return _inject
