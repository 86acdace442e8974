"""Data models for pyfetch."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class Fact(Generic[T]):
    """A collected value, or its fallback together with the failure reason."""

    value: T
    reason: str | None = None

    @property
    def is_fallback(self) -> bool:
        """Check if the value is a fallback."""
        return self.reason is not None


@dataclass(slots=True, frozen=True)
class HostInfo:
    """Combined OS facts returned by the host-info provider."""

    platform: str
    platform_version: str
    kernel_version: str
    uptime_seconds: int


@dataclass(slots=True, frozen=True)
class CpuDescriptor:
    """One installed CPU as reported by the CPU-info provider."""

    model_name: str
    mhz: float


@dataclass(slots=True, frozen=True)
class MemoryInfo:
    """Virtual memory usage in bytes."""

    used_bytes: int
    total_bytes: int


@dataclass(slots=True, frozen=True)
class GpuDevice:
    """A graphics device; either name may be unknown."""

    vendor_name: str | None = None
    product_name: str | None = None


@dataclass(slots=True, frozen=True)
class HostSnapshot:
    """Immutable snapshot of every host fact gathered in one run."""

    hostname: str
    username: str
    os_platform: str
    os_version: str
    kernel_version: str
    uptime_seconds: int
    shell_path: str
    cpu_model: str
    logical_core_count: int
    cpu_clock_ghz: float
    gpu_name: str
    memory_used_bytes: int
    memory_total_bytes: int
    package_count: int  # -1 when it could not be determined
    package_error: str | None = None
    # Field name -> reason, for every fact that fell back to its default
    fallbacks: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True, frozen=True)
class DisplayRow:
    """A single label/value line of the summary."""

    label: str
    value: str
