"""Graphics device enumeration via ``lspci``."""

import shlex
import shutil
import subprocess
from collections.abc import Callable

from pyfetch.models import GpuDevice

DISPLAY_CLASSES = (
    "VGA compatible controller",
    "3D controller",
    "Display controller",
)


def parse_lspci(output: str) -> list[GpuDevice]:
    """
    Parse ``lspci -mm`` output into graphics devices, in bus order.

    Each line looks like::

        01:00.0 "VGA compatible controller" "NVIDIA Corporation" "GA102 [GeForce RTX 3080]" -ra1 "..." "..."

    Only display-class devices are kept. Malformed lines are skipped.
    """
    devices: list[GpuDevice] = []
    for line in output.splitlines():
        try:
            fields = shlex.split(line)
        except ValueError:
            continue
        if len(fields) < 2 or fields[1] not in DISPLAY_CLASSES:
            continue
        vendor = fields[2] if len(fields) > 2 else ""
        product = fields[3] if len(fields) > 3 else ""
        devices.append(GpuDevice(vendor_name=vendor or None, product_name=product or None))
    return devices


def list_gpus(
    run: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    which: Callable[[str], str | None] = shutil.which,
) -> list[GpuDevice]:
    """
    List graphics devices on the PCI bus.

    Raises:
        FileNotFoundError: ``lspci`` is not installed.
        subprocess.CalledProcessError: ``lspci`` exited with an error.
    """
    lspci = which("lspci")
    if lspci is None:
        raise FileNotFoundError("lspci not found")
    result = run([lspci, "-mm"], capture_output=True, text=True, check=True)
    return parse_lspci(result.stdout)
