"""Fact collection stories: IPv6 gating, report assembly, source failures."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest

from saltbox_facts.adapters.config.settings import FactsSettings
from saltbox_facts.adapters.memory import FakeHost
from saltbox_facts.application.collect import collect_facts
from saltbox_facts.composition import build_production, build_testing
from saltbox_facts.domain.enums import IpFamily
from saltbox_facts.domain.errors import FactSourceError
from saltbox_facts.domain.models import IpLookupResult, Ipv6Probe


@pytest.mark.os_agnostic
def test_without_global_ipv6_only_ipv4_is_looked_up(fake_host: FakeHost) -> None:
    settings = FactsSettings(ipv4_urls=("https://v4.example",), timeout_seconds=1.5)

    report = collect_facts(settings, build_testing(host=fake_host), version="1.0.0")

    assert fake_host.ip_lookups == [{"urls": ("https://v4.example",), "family": IpFamily.V4, "timeout": 1.5}]
    assert report.ip.ipv4.address == "203.0.113.10"
    assert report.ip.ipv6 == IpLookupResult.skipped()


@pytest.mark.os_agnostic
def test_with_global_ipv6_both_families_are_looked_up(fake_host: FakeHost) -> None:
    fake_host.ipv6_probe = Ipv6Probe(present=True)
    settings = FactsSettings(ipv6_urls=("https://v6.example",))

    report = collect_facts(settings, build_testing(host=fake_host), version="1.0.0")

    families = sorted(call["family"].value for call in fake_host.ip_lookups)
    assert families == ["ipv4", "ipv6"]
    assert report.ip.ipv6.address == "2001:db8::10"


@pytest.mark.os_agnostic
def test_skipped_ipv6_renders_as_failed_without_error(fake_host: FakeHost) -> None:
    report = collect_facts(FactsSettings(), build_testing(host=fake_host), version="1.0.0")

    ip = report.to_document()["ip"]
    assert ip["public_ipv6"] == ""
    assert ip["failed_ipv6"] is True
    assert ip["error_ipv6"] is None
    assert ip["ipv6_check_error"] is None


@pytest.mark.os_agnostic
def test_probe_error_is_carried_into_the_report(fake_host: FakeHost) -> None:
    fake_host.ipv6_probe = Ipv6Probe(present=False, error="Error checking IPv6: permission denied")

    report = collect_facts(FactsSettings(), build_testing(host=fake_host), version="1.0.0")

    assert report.ip.ipv6_check_error == "Error checking IPv6: permission denied"


@pytest.mark.os_agnostic
def test_failed_ipv4_lookup_keeps_the_rest_of_the_report(fake_host: FakeHost) -> None:
    fake_host.lookups[IpFamily.V4] = IpLookupResult(error="Timeout after 3s for https://v4.example")

    document = collect_facts(FactsSettings(), build_testing(host=fake_host), version="1.0.0").to_document()

    assert document["ip"]["public_ip"] == ""
    assert document["ip"]["failed_ipv4"] is True
    assert document["ip"]["error_ipv4"] == "Timeout after 3s for https://v4.example"
    assert "docker" in document["groups"]


@pytest.mark.os_agnostic
def test_report_carries_accounts_timezone_and_version(fake_host: FakeHost) -> None:
    document = collect_facts(FactsSettings(), build_testing(host=fake_host), version="9.9.9").to_document()

    assert document["saltbox_facts_version"] == "9.9.9"
    assert document["groups"] == {"docker": {"gid": "999", "group-list": ["seed"]}}
    assert document["users"]["seed"]["home"] == "/home/seed"
    assert document["timezone"] == {"timezone": "Europe/Copenhagen"}


@pytest.mark.os_agnostic
def test_unreadable_group_database_aborts_collection(fake_host: FakeHost) -> None:
    fake_host.missing_files = frozenset({Path("/etc/group")})

    with pytest.raises(FactSourceError) as exc_info:
        collect_facts(FactsSettings(), build_testing(host=fake_host), version="1.0.0")

    assert exc_info.value.path == Path("/etc/group")


@pytest.mark.os_agnostic
def test_collection_reads_from_configured_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    group_file = tmp_path / "group"
    group_file.write_text("wheel:x:10:root\n", encoding="utf-8")
    passwd_file = tmp_path / "passwd"
    passwd_file.write_text("root:x:0:0:root:/root:/bin/sh\n", encoding="utf-8")
    (tmp_path / "timezone").write_text("Europe/Oslo\n", encoding="utf-8")
    (tmp_path / "if_inet6").write_text("", encoding="utf-8")

    host = FakeHost()
    services = replace(build_production(), resolve_public_ip=host.resolve_public_ip)
    settings = FactsSettings(
        group_file=group_file,
        passwd_file=passwd_file,
        if_inet6_file=tmp_path / "if_inet6",
        timezone_file=tmp_path / "timezone",
        localtime_file=tmp_path / "localtime",
    )

    monkeypatch.delenv("TZ", raising=False)
    report = collect_facts(settings, services, version="1.0.0")

    assert report.groups["wheel"].members == ("root",)
    assert report.users["root"].shell == "/bin/sh"
    assert report.timezone == "Europe/Oslo"
    assert [call["family"] for call in host.ip_lookups] == [IpFamily.V4]
