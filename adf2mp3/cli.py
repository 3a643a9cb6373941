"""Command line front end: ``adf2mp3 <input_file> [output_file]``."""

import argparse
import os
import sys
import warnings

import colorama

from .errors import TranscodeError
from .naming import resolve_output_path
from .transcoder import transcode
from .version import __version__

PROG = "adf2mp3"


def _human_readable_size(num_bytes: int) -> str:
    units = ["B", "KiB", "MiB", "GiB"]
    value = float(num_bytes)
    for unit in units:
        if value < 1024.0 or unit == units[-1]:
            return f"{value:.2f} {unit}"
        value /= 1024.0
    return f"{value:.2f} TiB"


def _cli_plain_mode() -> bool:
    if os.getenv("ADF2MP3_CLI_PLAIN"):
        return True
    if os.getenv("NO_COLOR"):
        return True
    style = (os.getenv("ADF2MP3_CLI_STYLE") or "").strip().lower()
    if style in {"plain", "boring", "0", "false", "off"}:
        return True
    return False


class _CliTheme:
    def __init__(self, plain: bool):
        self.plain = plain
        self.reset = "" if plain else colorama.Style.RESET_ALL
        self.bold = "" if plain else colorama.Style.BRIGHT
        self.red = "" if plain else colorama.Fore.RED
        self.green = "" if plain else colorama.Fore.GREEN
        self.yellow = "" if plain else colorama.Fore.YELLOW
        self.cyan = "" if plain else colorama.Fore.CYAN

    def _wrap(self, msg: str, color: str, emoji: str | None = None) -> str:
        if self.plain:
            return msg
        prefix = f"{emoji} " if emoji else ""
        return f"{self.bold}{color}{prefix}{msg}{self.reset}"

    def ok(self, msg: str) -> str:
        return self._wrap(msg, self.green, "✅")

    def warn(self, msg: str) -> str:
        return self._wrap(msg, self.yellow, "⚠")

    def err(self, msg: str) -> str:
        return self._wrap(msg, self.red, "❌")

    def info(self, msg: str) -> str:
        return self._wrap(msg, self.cyan)


def help_text(prog: str = PROG) -> str:
    return "\n".join([
        "",
        "Usage:",
        f"$ {prog} <input_file> [output_file]",
        "  Runs the tool normally. If the output filename is not provided",
        "  the input filename is used but the extension is replaced with '.mp3'.",
        "",
        "Usage:",
        f"$ {prog} --help | -h",
        "  Prints this help text.",
        "",
    ])


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="GTA Vice City ADF to MP3 converter",
        add_help=False,
    )
    parser.add_argument("input", nargs="?", help="Input .adf file")
    parser.add_argument("output", nargs="?", help="Output file (default: input with a .mp3 extension)")
    parser.add_argument("-h", "--help", dest="show_help", action="store_true", help="Print the help text")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _run_reporting_warnings(theme: _CliTheme, fn, *args, **kwargs):
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", RuntimeWarning)
        try:
            return fn(*args, **kwargs)
        finally:
            for item in caught:
                msg = str(item.message).strip()
                if msg:
                    print(theme.warn(msg), file=sys.stderr)


def cli(argv=None) -> int:
    theme = _CliTheme(_cli_plain_mode())
    if not theme.plain:
        colorama.just_fix_windows_console()

    parser = _build_parser()
    args, extras = parser.parse_known_args(argv)

    # Help wins over everything else on the command line, extras included.
    if args.show_help:
        print(help_text(parser.prog))
        return 0
    if extras:
        parser.error(f"unrecognized arguments: {' '.join(extras)}")

    if args.input is None:
        print(theme.warn("Not enough arguments!"))
        print(help_text(parser.prog))
        return 0

    try:
        out_path = resolve_output_path(args.input, args.output)
        written = _run_reporting_warnings(theme, transcode, args.input, out_path)
    except TranscodeError as exc:
        print(theme.err(f"ERROR: {exc}"), file=sys.stderr)
        return 1

    print(theme.ok(f"Wrote {out_path} ({_human_readable_size(written)})"))
    return 0


def main(argv=None) -> int:
    try:
        return cli(argv)
    except KeyboardInterrupt:
        print("Exiting...")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
