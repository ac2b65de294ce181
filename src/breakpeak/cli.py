import logging
import sys
from typing import Iterable, TextIO

from breakpeak.entity import Rejection
from breakpeak.logging_config import configure_logging
from breakpeak.service import BreakAccumulatorService

logger = logging.getLogger(__name__)

PROGRAM_NAME = "breakpeak"
FILE_FLAG = "filename"
SENTINELS = ("quit", "exit")

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_USAGE = 2

INSTRUCTIONS = (
    "Instructions:\n"
    "   The program takes inputs in the form `hh:mmhh:mm`,\n"
    "   indicating a start time (first hh:mm) and end time (second hh:mm) for a bus driver's break.\n"
    "   The break time is specified inclusively, i.e. it includes the start minute and the end minute.\n"
    "   A break must start and end on the same day.\n"
    "   Each input must occupy its own line, both in interactive mode and when reading from a file.\n"
    "   Write `quit` or `exit` to end an interactive session and stop the program."
)


class UsageError(Exception):
    pass


def format_usage() -> str:
    forms = [
        (PROGRAM_NAME, "start an interactive session"),
        (f"{PROGRAM_NAME} {FILE_FLAG} [FILE]", "read input from file [FILE], then continue interactively"),
    ]
    prefixes = ["Usage:", "   or:"]
    width = max(len(form) for form, _ in forms) + 8
    return "\n".join(
        f"{prefixes[min(index, 1)]} {form.ljust(width)}{description}"
        for index, (form, description) in enumerate(forms)
    )


def resolve_filename(words: list[str]) -> str | None:
    """Return the file to preload, None for a plain interactive session."""
    if not words:
        return None
    if words[0] != FILE_FLAG:
        raise UsageError(f"Program does not recognize flag `{words[0]}`.")
    if len(words) < 2:
        raise UsageError("Too few arguments: filename missing!")
    if len(words) > 2:
        raise UsageError("Too many arguments: program takes only one filename!")
    return words[1]


def process_line(accumulator: BreakAccumulatorService, line: str, out: TextIO) -> None:
    result = accumulator.submit(line)
    if isinstance(result, Rejection):
        print(result.message, file=out)
    else:
        print(result.describe(), file=out)


def read_batch(filename: str) -> list[str]:
    with open(filename, encoding="utf-8-sig") as handle:
        return handle.read().splitlines()


def run_batch(accumulator: BreakAccumulatorService, lines: Iterable[str], out: TextIO) -> None:
    for line in lines:
        process_line(accumulator, line, out)


def run_interactive(accumulator: BreakAccumulatorService, source: TextIO, out: TextIO) -> None:
    for raw in source:
        line = raw.rstrip("\r\n")
        if line in SENTINELS:
            break
        process_line(accumulator, line, out)


def main(argv: list[str] | None = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    configure_logging()

    print(INSTRUCTIONS, file=stdout)

    words = sys.argv[1:] if argv is None else list(argv)
    try:
        filename = resolve_filename(words)
    except UsageError as e:
        print(e, file=stdout)
        print(format_usage(), file=stdout)
        return EXIT_USAGE

    accumulator = BreakAccumulatorService()

    if filename is not None:
        try:
            lines = read_batch(filename)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Batch preload from %s failed: %s", filename, e)
            print(f"Failed to read file `{filename}`!", file=stdout)
            print(e, file=stdout)
            return EXIT_IO_ERROR

        logger.info("Preloading %d lines from %s", len(lines), filename)
        run_batch(accumulator, lines, stdout)
        logger.info("Preload finished, %d intervals accepted", accumulator.accepted)

    run_interactive(accumulator, stdin, stdout)

    print("Goodbye!", file=stdout)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
