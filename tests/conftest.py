"""Pytest configuration and shared test doubles for devapps_installer."""

import pytest

from devapps_installer.core.console import Console


@pytest.fixture(autouse=True)
def no_color(monkeypatch):
    """Keep console output free of ANSI codes so assertions stay readable."""
    monkeypatch.setenv("NO_COLOR", "1")


@pytest.fixture
def console():
    return Console(debug=False, dry_run=False)


class FakeWinget:
    """Stands in for WingetClient and counts every call."""

    def __init__(
        self,
        installed=(),
        updates=(),
        install_rc=0,
        upgrade_rc=0,
        available=True,
        sources_ok=True,
    ):
        self.installed = set(installed)
        self.updates = set(updates)
        self.install_rc = install_rc
        self.upgrade_rc = upgrade_rc
        self.available = list(available) if isinstance(available, (list, tuple)) else available
        self.sources_ok = sources_ok
        self.calls = []

    def count(self, name):
        return sum(1 for c in self.calls if c[0] == name)

    def is_available(self):
        self.calls.append(("is_available",))
        if isinstance(self.available, list):
            return self.available.pop(0)
        return self.available

    def update_sources(self):
        self.calls.append(("update_sources",))
        if isinstance(self.sources_ok, Exception):
            raise self.sources_ok
        return self.sources_ok

    def is_installed(self, package_id):
        self.calls.append(("is_installed", package_id))
        return package_id in self.installed

    def has_update(self, package_id):
        self.calls.append(("has_update", package_id))
        return package_id in self.updates

    def install(self, package_id):
        self.calls.append(("install", package_id))
        if isinstance(self.install_rc, Exception):
            raise self.install_rc
        return self.install_rc

    def upgrade(self, package_id):
        self.calls.append(("upgrade", package_id))
        if isinstance(self.upgrade_rc, Exception):
            raise self.upgrade_rc
        return self.upgrade_rc


class FakeProcess:
    """Replays canned (rc, output) pairs and records each command."""

    def __init__(self, capture=None, stream_rc=0):
        self.capture = capture or {}
        self.stream_rc = stream_rc
        self.commands = []

    def run_capture(self, cmd):
        self.commands.append(cmd)
        result = self.capture.get(cmd[1], (0, ""))
        if isinstance(result, Exception):
            raise result
        return result

    def run_stream(self, cmd):
        self.commands.append(cmd)
        return self.stream_rc


@pytest.fixture
def fake_winget_cls():
    return FakeWinget


@pytest.fixture
def fake_process_cls():
    return FakeProcess
