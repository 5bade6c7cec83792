import argparse
import logging
import re
import sys
from typing import Callable, Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.traceback import install

from subaruu.config import LOG_LEVELS, Config
from subaruu.errors import SubaruuError
from subaruu.interpreter import Interpreter, load_source
from subaruu.logging import configure

logger = logging.getLogger(__name__)

LINE_PATTERN = re.compile(r'^\s*(\d+)\s*(.*)$')


def options(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="subaruu",
        description="Run a line-numbered BASIC program, or edit one interactively.",
    )
    parser.add_argument("program", nargs="?", help="BASIC program to run")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS,
                        help="Trace logging level (default WARNING)")
    parser.add_argument("--log-file", help="Also write the trace log to this file")
    parser.add_argument("--word-bits", type=int, help="Width of the signed integer word (default 32)")
    return parser.parse_args(argv)


def run_file(path: str, config: Config, console: Console) -> int:
    try:
        source = load_source(path)
    except OSError as e:
        console.print(f"[red]Cannot read {escape(path)}:[/red] {escape(str(e))}")
        return 2

    try:
        Interpreter(source, config=config, filename=path).run()
    except SubaruuError:
        # Already reported on the diagnostic stream
        return 1
    except KeyboardInterrupt:
        console.print("\nInterrupted.")
        return 130
    return 0


def program_source(lines: Dict[int, str]) -> str:
    return "".join(f"{num} {lines[num]}\n" for num in sorted(lines))


def repl(config: Config, console: Console = None, read: Callable[[str], str] = input) -> int:
    console = console or Console()
    lines: Dict[int, str] = {}

    console.print(Panel.fit("SUBARUU Interpreter", style="bold blue"))
    console.print("Commands: RUN, LIST, NEW, HELP, QUIT")
    console.print("Ready.")

    while True:
        try:
            line = read("> ").strip()
            if not line:
                continue

            command = line.upper()
            match = LINE_PATTERN.match(line)

            if match:
                num, text = int(match.group(1)), match.group(2)
                if text:
                    lines[num] = text
                    logger.debug(f"Added line: {line}")
                else:
                    lines.pop(num, None)

            elif command in ("QUIT", "EXIT"):
                console.print("Goodbye!")
                return 0

            elif command == "HELP":
                table = Table(title="Available Commands")
                table.add_column("Command", style="cyan")
                table.add_column("Description", style="green")

                table.add_row("RUN", "Execute the program")
                table.add_row("LIST", "List all program lines")
                table.add_row("NEW", "Clear current program")
                table.add_row("QUIT", "Exit the interpreter")
                table.add_row("HELP", "Show this help")

                console.print(table)
                console.print("\nEnter numbered lines to add them; a bare line number deletes that line")

            elif command == "RUN":
                if not lines:
                    console.print("No program in memory.")
                    continue
                try:
                    Interpreter(program_source(lines), config=config).run()
                except SubaruuError:
                    pass
                console.print("Ready.")

            elif command == "LIST":
                if not lines:
                    console.print("No program in memory.")
                for num in sorted(lines):
                    console.print(f"[cyan]{num}[/cyan] {escape(lines[num])}")

            elif command == "NEW":
                lines.clear()
                console.print("Program cleared. Ready.")

            else:
                console.print("[yellow]Unknown command. Type HELP for available commands.[/yellow]")

        except KeyboardInterrupt:
            console.print("\nInterrupted. Type QUIT to exit.")
        except EOFError:
            console.print("\nGoodbye!")
            return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = options(argv)
    config = Config.from_env(word_bits=args.word_bits, log_level=args.log_level, log_file=args.log_file)
    configure(config)
    install()

    console = Console(stderr=True)
    if args.program:
        return run_file(args.program, config, console)
    return repl(config)


if __name__ == "__main__":
    sys.exit(main())
