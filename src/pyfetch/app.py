"""pyfetch - Terminal system information summary."""

from rich.console import Console
from rich.text import Text

from pyfetch.collector import HostCollector
from pyfetch.config import Config
from pyfetch.formatting import format_bytes, format_uptime
from pyfetch.logs import close_diagnostics, open_diagnostics
from pyfetch.models import DisplayRow, HostSnapshot

HEADER_USER_STYLE = "bold blue"
HEADER_HOST_STYLE = "blue"
LABEL_STYLE = "bright_magenta"
VALUE_STYLE = "blue"

SWATCH = "   "
SWATCH_COLORS = ("black", "red", "green", "yellow", "blue", "magenta", "cyan")


def build_rows(snapshot: HostSnapshot) -> list[DisplayRow]:
    """Build the label/value rows of the summary, in display order."""
    if snapshot.package_count >= 0:
        packages = str(snapshot.package_count)
    else:
        packages = f"Unable to determine ({snapshot.package_error})"

    return [
        DisplayRow("Hostname", snapshot.hostname),
        DisplayRow("OS", f"{snapshot.os_platform} {snapshot.os_version}"),
        DisplayRow("Kernel", snapshot.kernel_version),
        DisplayRow("Uptime", format_uptime(snapshot.uptime_seconds)),
        DisplayRow("Shell", snapshot.shell_path),
        DisplayRow(
            "CPU",
            f"{snapshot.cpu_model} ({snapshot.logical_core_count} cores"
            f" @ {snapshot.cpu_clock_ghz:.2f} GHz)",
        ),
        DisplayRow("GPU", snapshot.gpu_name),
        DisplayRow(
            "Memory",
            f"{format_bytes(snapshot.memory_used_bytes)}"
            f" / {format_bytes(snapshot.memory_total_bytes)}",
        ),
        DisplayRow("Packages", packages),
    ]


class Presenter:
    """Prints a snapshot as an aligned, colored summary."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(highlight=False, force_terminal=True)

    def render(self, snapshot: HostSnapshot) -> None:
        """Print the header, one line per row, then the color swatches."""
        self._print(self.header(snapshot))
        for line in self.lines(build_rows(snapshot)):
            self._print(line)
        self._print(self.swatches())

    def _print(self, text: Text) -> None:
        # soft_wrap: never wrap or crop to the terminal width
        self._console.print(text, soft_wrap=True)

    @staticmethod
    def header(snapshot: HostSnapshot) -> Text:
        """Get the "user@host" header line."""
        # Only the user name is bold; "@" carries no style
        return Text.assemble(
            (snapshot.username, HEADER_USER_STYLE),
            "@",
            (snapshot.hostname, HEADER_HOST_STYLE),
        )

    @staticmethod
    def lines(rows: list[DisplayRow]) -> list[Text]:
        """Get the row lines, values aligned to one column after the longest label."""
        width = max((len(row.label) for row in rows), default=0)
        return [
            Text.assemble(
                (row.label, LABEL_STYLE),
                " " * (width - len(row.label) + 1),
                (row.value, VALUE_STYLE),
            )
            for row in rows
        ]

    @staticmethod
    def swatches() -> Text:
        """Get one line of background-colored blocks, one per palette color."""
        return Text.assemble(*((SWATCH, f"on {color}") for color in SWATCH_COLORS))


def main() -> None:
    """Entry point for pyfetch."""
    config = Config.from_env()
    logger = open_diagnostics(config.log_file)
    try:
        snapshot = HostCollector(config, logger=logger).collect()
        Presenter().render(snapshot)
    finally:
        close_diagnostics(logger)


if __name__ == "__main__":
    main()
