"""Tests for library and executable filename helpers."""

from __future__ import annotations

from native_platform.naming import executable_filename, library_filename
from native_platform.platform.detect import RawHostInfo, resolve_platform


class TestLibraryFilename:
    """Tests for library_filename function."""

    def test_linux(self):
        info = resolve_platform(RawHostInfo(os_name="Linux", os_arch="amd64"))
        assert library_filename("questdb", info) == "libquestdb-linux-x86-64-amd64.so"

    def test_windows(self):
        info = resolve_platform(RawHostInfo(os_name="Windows 10", os_arch="amd64"))
        assert library_filename("questdb", info) == "questdb-win32-x86-64-amd64.dll"

    def test_mac(self):
        info = resolve_platform(RawHostInfo(os_name="Mac OS X", os_arch="aarch64"))
        assert library_filename("questdb", info) == "libquestdb-darwin-aarch64.dylib"

    def test_defaults_to_current_host(self, fake_host):
        fake_host("Linux", "x86_64")
        assert library_filename("questdb") == "libquestdb-linux-x86-64-x86_64.so"


class TestExecutableFilename:
    """Tests for executable_filename function."""

    def test_windows(self):
        info = resolve_platform(RawHostInfo(os_name="Windows 11", os_arch="x86"))
        assert executable_filename("tool", info) == "tool.exe"

    def test_unix(self):
        info = resolve_platform(RawHostInfo(os_name="Linux", os_arch="amd64"))
        assert executable_filename("tool", info) == "tool"

    def test_defaults_to_current_host(self, host_env):
        host_env("Windows 10", "amd64")
        assert executable_filename("tool") == "tool.exe"
