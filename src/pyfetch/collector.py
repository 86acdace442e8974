"""Host fact collection for pyfetch."""

import logging
import os
from collections.abc import Callable
from typing import TypeVar

from pyfetch.config import Config
from pyfetch.formatting import clean_gpu_name
from pyfetch.models import Fact, GpuDevice, HostInfo, HostSnapshot, MemoryInfo
from pyfetch.packages import PackageCounter
from pyfetch.providers import Providers

T = TypeVar("T")

NO_GPU = "None"
UNKNOWN_CPU = "Unknown"


class HostCollector:
    """
    Gathers a HostSnapshot from the host introspection collaborators.

    Each fact is fetched on its own: a collaborator that raises is replaced
    by that fact's fallback and never affects any other fact.
    """

    def __init__(
        self,
        config: Config,
        providers: Providers | None = None,
        package_counter: PackageCounter | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """
        Initialize the HostCollector.

        Args:
            config: Startup configuration (user and shell).
            providers: Host introspection collaborators. Defaults to the real host.
            package_counter: Package counter. Defaults to one sharing ``logger``.
            logger: Diagnostic sink for fallbacks and failures.
        """
        self._config = config
        self._providers = providers or Providers()
        self._logger = logger or logging.getLogger(__name__)
        self._package_counter = package_counter or PackageCounter(logger=self._logger)

    def _fetch(self, name: str, func: Callable[[], T], fallback: T) -> Fact[T]:
        """Call ``func`` and return its value, or ``fallback`` if it raises."""
        try:
            return Fact(func())
        except Exception as exc:
            reason = str(exc) or type(exc).__name__
            self._logger.debug("Falling back for %s: %s", name, reason)
            return Fact(fallback, reason)

    def collect(self) -> HostSnapshot:
        """Collect every host fact into a snapshot."""
        providers = self._providers
        fallbacks: dict[str, str] = {}

        def fetch(name: str, func: Callable[[], T], fallback: T) -> T:
            fact = self._fetch(name, func, fallback)
            if fact.is_fallback:
                fallbacks[name] = fact.reason
            return fact.value

        hostname = fetch("hostname", providers.hostname, "")
        host = fetch("host_info", providers.host_info, HostInfo("", "", "", 0))
        cpu_model, cpu_clock_ghz = fetch("cpu", self._cpu, (UNKNOWN_CPU, 0.0))
        # Core count never comes from the CPU descriptors
        cores = fetch("cpu_count", providers.cpu_count, os.cpu_count() or 1)
        gpu_name = fetch("gpu", self._gpu, NO_GPU)
        memory = fetch("memory", providers.memory_info, MemoryInfo(0, 0))
        package_count, package_error = self._packages()

        return HostSnapshot(
            hostname=hostname,
            username=self._config.user,
            os_platform=host.platform,
            os_version=host.platform_version,
            kernel_version=host.kernel_version,
            uptime_seconds=host.uptime_seconds,
            shell_path=os.path.basename(self._config.shell),
            cpu_model=cpu_model,
            logical_core_count=cores,
            cpu_clock_ghz=cpu_clock_ghz,
            gpu_name=gpu_name,
            memory_used_bytes=memory.used_bytes,
            memory_total_bytes=memory.total_bytes,
            package_count=package_count,
            package_error=package_error,
            fallbacks=fallbacks,
        )

    def _cpu(self) -> tuple[str, float]:
        """Get the CPU model name and clock (GHz) from the first descriptor."""
        descriptors = self._providers.cpu_info()
        if not descriptors:
            return UNKNOWN_CPU, 0.0
        first = descriptors[0]
        return first.model_name or UNKNOWN_CPU, (first.mhz or 0.0) / 1000

    def _gpu(self) -> str:
        """Get a display name for the first graphics device."""
        devices = self._providers.gpu_devices()
        if not devices:
            return NO_GPU
        return describe_gpu(devices[0])

    def _packages(self) -> tuple[int, str | None]:
        """Count packages, returning -1 and the error text on failure."""
        try:
            return self._package_counter.count(), None
        except Exception as exc:
            error = str(exc) or type(exc).__name__
            self._logger.warning("Unable to count packages: %s", error)
            return -1, error


def describe_gpu(device: GpuDevice) -> str:
    """Name a graphics device, cleaning up vendor model-number prefixes."""
    if device.product_name:
        return clean_gpu_name(device.product_name)
    if device.vendor_name:
        return f"Unknown GPU (Vendor: {device.vendor_name})"
    return NO_GPU
