"""Host introspection collaborators used by the collector."""

import platform
import socket
import time
from collections.abc import Callable
from dataclasses import dataclass, field

import cpuinfo
import distro
import psutil

from pyfetch.gpu import list_gpus
from pyfetch.models import CpuDescriptor, GpuDevice, HostInfo, MemoryInfo


def hostname() -> str:
    """Get the network name of this host."""
    return socket.gethostname()


def host_info() -> HostInfo:
    """Get distribution identity, kernel release and uptime in one call."""
    return HostInfo(
        platform=distro.id(),
        platform_version=distro.version(),
        kernel_version=platform.release(),
        uptime_seconds=int(time.time() - psutil.boot_time()),
    )


def cpu_info() -> list[CpuDescriptor]:
    """
    Describe the installed CPU.

    py-cpuinfo reports one descriptor for the whole package. The advertised
    clock is preferred; psutil's maximum frequency fills in when missing.
    """
    info = cpuinfo.get_cpu_info()
    if not info:
        return []

    hz_advertised = info.get("hz_advertised")
    mhz = hz_advertised[0] / 1_000_000 if hz_advertised else 0.0
    if not mhz:
        freq = psutil.cpu_freq()
        mhz = (freq.max or freq.current) if freq else 0.0

    return [CpuDescriptor(model_name=info.get("brand_raw") or "", mhz=mhz)]


def cpu_count() -> int:
    """Count the logical CPUs this process may be scheduled on."""
    try:
        return len(psutil.Process().cpu_affinity())
    except (AttributeError, psutil.Error):
        # cpu_affinity() is not available on macOS
        return psutil.cpu_count(logical=True) or 1


def memory_info() -> MemoryInfo:
    """Get used and total virtual memory."""
    mem = psutil.virtual_memory()
    return MemoryInfo(used_bytes=mem.used, total_bytes=mem.total)


def gpu_devices() -> list[GpuDevice]:
    """List graphics devices, first one first."""
    return list_gpus()


@dataclass(slots=True)
class Providers:
    """Bundle of collaborators; replace any of them to simulate a host."""

    hostname: Callable[[], str] = field(default=hostname)
    host_info: Callable[[], HostInfo] = field(default=host_info)
    cpu_info: Callable[[], list[CpuDescriptor]] = field(default=cpu_info)
    cpu_count: Callable[[], int] = field(default=cpu_count)
    memory_info: Callable[[], MemoryInfo] = field(default=memory_info)
    gpu_devices: Callable[[], list[GpuDevice]] = field(default=gpu_devices)
