"""Formatting helpers for pyfetch."""

import re

BYTE_UNITS = "KMGTPE"

# Vendor model-number prefix followed by the marketing name in brackets,
# e.g. "GA102 [GeForce RTX 3080]" or "0x2206 [GeForce RTX 3080]".
_GPU_NAME_PATTERN = re.compile(r"(?:0x)?[A-Z0-9]+\s*\[(.+)\]")


def format_uptime(seconds: int) -> str:
    """Format an uptime in seconds as "Xd Yh Zm" (seconds are dropped)."""
    seconds = int(seconds)
    days = seconds // 86400
    hours = (seconds % 86400) // 3600
    minutes = (seconds % 3600) // 60
    return f"{days}d {hours}h {minutes}m"


def format_bytes(size: int) -> str:
    """Format a byte count using binary units (KiB, MiB, GiB, ...)."""
    if size < 1024:
        return f"{size} B"
    div, exp = 1024, 0
    n = size // 1024
    while n >= 1024 and exp < len(BYTE_UNITS) - 1:
        div *= 1024
        exp += 1
        n //= 1024
    return f"{size / div:.1f} {BYTE_UNITS[exp]}iB"


def clean_gpu_name(name: str) -> str:
    """
    Strip a model-number prefix from a GPU product name.

    "0300 [GeForce RTX 3080]" becomes "GeForce RTX 3080". Names that do not
    have the "<ID> [<name>]" shape are returned unchanged.
    """
    match = _GPU_NAME_PATTERN.fullmatch(name)
    if match:
        return match.group(1).strip()
    return name
