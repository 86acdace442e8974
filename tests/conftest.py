"""Shared fixtures for pyfetch tests."""

import subprocess

import pytest

from pyfetch.config import Config
from pyfetch.models import CpuDescriptor, GpuDevice, HostInfo, HostSnapshot, MemoryInfo
from pyfetch.packages import PackageCounter
from pyfetch.providers import Providers


class FakeRun:
    """Stand-in for subprocess.run that records commands."""

    def __init__(self, stdout: str | bytes = "", returncode: int = 0, error: Exception | None = None):
        self.stdout = stdout
        self.returncode = returncode
        self.error = error
        self.calls: list[list[str]] = []

    def __call__(self, args, capture_output=False, text=False, check=False):
        self.calls.append(list(args))
        if self.error is not None:
            raise self.error
        if check and self.returncode != 0:
            raise subprocess.CalledProcessError(self.returncode, args)
        stdout = self.stdout
        if text and isinstance(stdout, bytes):
            stdout = stdout.decode()
        elif not text and isinstance(stdout, str):
            stdout = stdout.encode()
        return subprocess.CompletedProcess(args, self.returncode, stdout=stdout, stderr="")


def make_snapshot(**overrides) -> HostSnapshot:
    """Build a fully populated snapshot, overriding any field."""
    values = dict(
        hostname="box",
        username="alice",
        os_platform="ubuntu",
        os_version="22.04",
        kernel_version="5.15.0",
        uptime_seconds=3661,
        shell_path="bash",
        cpu_model="TestCPU",
        logical_core_count=4,
        cpu_clock_ghz=2.5,
        gpu_name="TestGPU",
        memory_used_bytes=1024,
        memory_total_bytes=2048,
        package_count=2,
    )
    values.update(overrides)
    return HostSnapshot(**values)


def fake_which(*available: str):
    """Build a shutil.which stand-in that finds only ``available``."""

    def which(name: str) -> str | None:
        return f"/usr/bin/{name}" if name in available else None

    return which


@pytest.fixture
def config() -> Config:
    return Config(user="alice", shell="/bin/bash", log_file="")


@pytest.fixture
def providers() -> Providers:
    """Collaborators for a fixed, fully working host."""
    return Providers(
        hostname=lambda: "box",
        host_info=lambda: HostInfo("ubuntu", "22.04", "5.15.0", 3661),
        cpu_info=lambda: [CpuDescriptor("TestCPU", 2500.0)],
        cpu_count=lambda: 4,
        memory_info=lambda: MemoryInfo(1073741824, 2147483648),
        gpu_devices=lambda: [GpuDevice("Test Vendor", "0xAB [TestGPU]")],
    )


@pytest.fixture
def package_counter() -> PackageCounter:
    """Package counter for an Ubuntu host with two packages installed."""
    return PackageCounter(
        platform_id=lambda: "ubuntu",
        system=lambda: "Linux",
        which=fake_which("dpkg"),
        run=FakeRun("p1\np2\n"),
    )
