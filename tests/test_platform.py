"""Tests for Android detection and the storage permission check."""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from utils import platform as platform_module
from utils.platform import (
    android_api_level,
    has_write_storage_permission,
    is_android,
    uses_scoped_storage,
)


@pytest.fixture
def desktop(monkeypatch):
    if hasattr(sys, "getandroidapilevel"):
        pytest.skip("running on Android")
    monkeypatch.delenv("ANDROID_ARGUMENT", raising=False)


def test_android_build_flag_alone_is_desktop(desktop, monkeypatch):
    """main.py sets ANDROID_BUILD on every run, desktop included."""
    monkeypatch.setenv("ANDROID_BUILD", "1")

    assert is_android() is False
    assert android_api_level() is None
    assert uses_scoped_storage() is False
    assert has_write_storage_permission() is True


def test_android_argument_means_android(desktop, monkeypatch):
    monkeypatch.setenv("ANDROID_ARGUMENT", "/data/app")
    assert is_android() is True


def test_scoped_storage_needs_no_grant(monkeypatch):
    monkeypatch.setattr(platform_module, "is_android", lambda: True)
    monkeypatch.setattr(platform_module, "android_api_level", lambda: 30)
    assert uses_scoped_storage() is True
    assert has_write_storage_permission() is True


def test_legacy_android_without_permissions_module(monkeypatch):
    """API < 29 needs the runtime grant; no android module means no grant."""
    monkeypatch.setattr(platform_module, "is_android", lambda: True)
    monkeypatch.setattr(platform_module, "android_api_level", lambda: 28)
    monkeypatch.setitem(sys.modules, "android", None)
    monkeypatch.setitem(sys.modules, "android.permissions", None)
    assert has_write_storage_permission() is False
