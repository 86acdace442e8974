"""Installed-package counting through the platform package manager."""

import logging
import platform
import shutil
import subprocess
from collections.abc import Callable
from dataclasses import dataclass

import distro

from pyfetch.errors import PackageCountError


@dataclass(slots=True, frozen=True)
class PackageTool:
    """A package manager command that lists one installed package per line."""

    executable: str
    args: tuple[str, ...]

    @property
    def command(self) -> list[str]:
        return [self.executable, *self.args]


DPKG = PackageTool("dpkg", ("--get-selections",))
PACMAN = PackageTool("pacman", ("-Q",))
RPM = PackageTool("rpm", ("-qa",))

# Distribution id (as reported by distro.id()) -> package tool
DISTRIBUTION_TOOLS: dict[str, PackageTool] = {
    "debian": DPKG,
    "ubuntu": DPKG,
    "arch": PACMAN,
    "fedora": RPM,
    "centos": RPM,
    "rhel": RPM,
}

# Tools probed on PATH, in order, for distributions missing from the table
PROBE_ORDER: tuple[PackageTool, ...] = (DPKG, PACMAN, RPM)


def count_lines(output: bytes) -> int:
    """
    Count newline-terminated entries in package tool output.

    This is the number of newline-separated segments minus one, so an empty
    output counts as zero and a missing final newline loses one entry. The
    output is never decoded, so any encoding counts the same.
    """
    return len(output.split(b"\n")) - 1


class PackageCounter:
    """
    Counts installed packages by running the distribution's package manager.

    Every collaborator can be replaced, which is how the tests simulate
    distributions without touching the host.
    """

    def __init__(
        self,
        platform_id: Callable[[], str] = distro.id,
        system: Callable[[], str] = platform.system,
        which: Callable[[str], str | None] = shutil.which,
        run: Callable[..., subprocess.CompletedProcess] = subprocess.run,
        logger: logging.Logger | None = None,
    ) -> None:
        self._platform_id = platform_id
        self._system = system
        self._which = which
        self._run = run
        self._logger = logger or logging.getLogger(__name__)

    def select_tool(self) -> PackageTool:
        """
        Pick the package tool for this host.

        Raises:
            PackageCountError: The OS or distribution is not supported, or
                the distribution id could not be read.
        """
        try:
            distribution = self._platform_id()
        except Exception as exc:
            raise PackageCountError(str(exc)) from exc

        if self._system() != "Linux":
            raise PackageCountError("unsupported OS for package counting")

        tool = DISTRIBUTION_TOOLS.get(distribution)
        if tool is not None:
            return tool

        for candidate in PROBE_ORDER:
            if self._which(candidate.executable) is not None:
                self._logger.debug(
                    "No package tool registered for %r, probed %s",
                    distribution,
                    candidate.executable,
                )
                return candidate

        raise PackageCountError("unsupported Linux distribution")

    def count(self) -> int:
        """
        Return the number of installed packages.

        Raises:
            PackageCountError: No tool could be selected, or the tool failed
                to start or exited with a nonzero status.
        """
        tool = self.select_tool()
        self._logger.debug("Counting packages with %s", " ".join(tool.command))
        try:
            result = self._run(tool.command, capture_output=True, check=True)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise PackageCountError(str(exc)) from exc
        return count_lines(result.stdout)
