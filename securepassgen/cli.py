"""CLI for SecurePassGen — generate one or more policy-compliant passwords."""

import argparse
import logging
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .config import load_config
from .exceptions import EntropySourceFailure, InvalidRequirements
from .generator import MAX_PASSWORD_LENGTH, MIN_PASSWORD_LENGTH, generate, requirements_for_length

logger = logging.getLogger("securepassgen")
# soft wrap keeps long passwords on one line
console = Console(soft_wrap=True)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ENTROPY = 2


def cmd_generate(args) -> int:
    try:
        req = requirements_for_length(
            args.length,
            min_uppercase=args.min_upper,
            min_lowercase=args.min_lower,
            min_numbers=args.min_numbers,
            min_symbols=args.min_symbols,
        )
    except InvalidRequirements as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        return EXIT_INVALID

    try:
        for i in range(args.copies):
            pw = generate(req)
            # symbols include "[" and "]", which rich would read as markup
            if args.copies == 1:
                console.print(f"[bold green]Generated Secure Password:[/bold green] {escape(pw)}")
            else:
                console.print(f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}")
    except EntropySourceFailure as e:
        logger.error("Entropy source failure: %s", e)
        console.print(f"[red]Cannot generate a password safely: {escape(str(e))}[/red]")
        return EXIT_ENTROPY
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    cfg = load_config()
    parser = argparse.ArgumentParser(
        prog="securepassgen",
        description="Generate cryptographically secure passwords",
    )
    parser.add_argument(
        "length",
        nargs="?",
        default=str(cfg["length"]),
        help=f"Password length ({MIN_PASSWORD_LENGTH}-{MAX_PASSWORD_LENGTH})",
    )
    parser.add_argument("--min-upper", type=int, default=None, help="Minimum uppercase letters")
    parser.add_argument("--min-lower", type=int, default=None, help="Minimum lowercase letters")
    parser.add_argument("--min-numbers", type=int, default=None, help="Minimum digits")
    parser.add_argument("--min-symbols", type=int, default=None, help="Minimum symbols")
    parser.add_argument("--copies", type=int, default=cfg["copies"] or 1, help="How many passwords to generate")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log generation details")
    parser.set_defaults(func=cmd_generate)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(show_path=False)],
        )
    if args.copies < 1:
        console.print("[red]--copies must be at least 1[/red]")
        return EXIT_INVALID
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
