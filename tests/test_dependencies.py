"""Tests for the winget presence check and manual-install fallback."""

import pytest

from devapps_installer.core.prompts import AutoConfirmer
from devapps_installer.services.dependencies import DependencyService, WingetNotFoundError


def service(console, winget, opened=None, confirmer=None):
    opened = opened if opened is not None else []
    return DependencyService(
        console,
        winget,
        confirmer or AutoConfirmer(True),
        opener=opened.append,
        install_url="https://example.invalid/appinstaller",
        spinner=False,
    )


def test_present_winget_skips_fallback(console, fake_winget_cls):
    opened = []
    confirmer = AutoConfirmer(True)
    winget = fake_winget_cls(available=True)
    service(console, winget, opened, confirmer).ensure()
    assert opened == []
    assert confirmer.asked == []
    assert winget.count("is_available") == 1
    assert winget.count("update_sources") == 1


def test_fallback_opens_installer_and_rechecks(console, fake_winget_cls):
    opened = []
    confirmer = AutoConfirmer(True)
    winget = fake_winget_cls(available=[False, True])
    service(console, winget, opened, confirmer).ensure()
    assert opened == ["https://example.invalid/appinstaller"]
    assert len(confirmer.asked) == 1
    assert winget.count("is_available") == 2
    assert winget.count("update_sources") == 1


def test_still_missing_is_fatal(console, fake_winget_cls):
    winget = fake_winget_cls(available=[False, False])
    with pytest.raises(WingetNotFoundError):
        service(console, winget).ensure()
    assert winget.count("update_sources") == 0


def test_browser_failure_still_waits_for_user(console, fake_winget_cls, capsys):
    def broken_opener(url):
        raise OSError("no browser")

    confirmer = AutoConfirmer(True)
    winget = fake_winget_cls(available=[False, True])
    svc = DependencyService(console, winget, confirmer, opener=broken_opener, spinner=False)
    svc.ensure()
    assert "Open the link above manually" in capsys.readouterr().out
    assert len(confirmer.asked) == 1


@pytest.mark.parametrize("result", [False, RuntimeError("network down")])
def test_source_refresh_failure_is_only_a_warning(console, fake_winget_cls, capsys, result):
    winget = fake_winget_cls(available=True, sources_ok=result)
    service(console, winget).ensure()
    assert "⚠" in capsys.readouterr().out


def test_refresh_with_spinner(console, fake_winget_cls):
    winget = fake_winget_cls(available=True)
    DependencyService(console, winget, AutoConfirmer(True), opener=lambda url: None).ensure()
    assert winget.count("update_sources") == 1
