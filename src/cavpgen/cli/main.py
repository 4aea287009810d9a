# Copyright 2026 CAVPGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the CAVPGen command-line interface."""

import argparse
import sys
from pathlib import Path

from cavpgen.config.settings import CONFIG_FILE_NAME, ConfigError, load_config
from cavpgen.generator.render import DEFAULT_PRF_EXPRESSIONS, GenerationError, generate
from cavpgen.parser.parser import ParseError, parse_file

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the CAVPGen CLI."""
    parser = argparse.ArgumentParser(
        prog="cavpgen",
        description="CAVPGen: generate test source from NIST CAVP KDF response files",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # generate subcommand
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate test source from the configured vector files",
        description=(
            "Copy the configured prologue to the output file and append code rendered "
            "from every configured vector file. The output is replaced atomically."
        ),
    )
    generate_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory containing the generation configuration (default: current directory)",
    )
    generate_parser.add_argument(
        "--config",
        default=None,
        help=f"Path to the configuration file (default: DIRECTORY/{CONFIG_FILE_NAME})",
    )

    # inspect subcommand
    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Parse a response file and summarize its suites",
        description="Parse a CAVP response file and print one line per suite.",
    )
    inspect_parser.add_argument("file", help="Path to the .rsp file")
    inspect_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the parsed document as JSON instead of a summary",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "inspect":
        return _cmd_inspect(args)
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_path = Path(args.config).resolve() if args.config else directory / CONFIG_FILE_NAME
    try:
        config = load_config(config_path)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    # Paths in the configuration are relative to the configuration file.
    base_dir = config_path.parent
    prologue_path = base_dir / config.prologue
    output_path = base_dir / config.output
    temp_path = output_path.with_name(f".{output_path.name}")
    prf_expressions = config.prf_expressions if config.prf_expressions is not None else DEFAULT_PRF_EXPRESSIONS

    print(f"Generating {output_path.name} from {len(config.jobs)} job(s)...")
    try:
        with prologue_path.open(encoding="utf-8") as prologue, temp_path.open("w", encoding="utf-8") as out:
            generate(out, prologue, config.jobs, base_dir, prf_expressions)
        temp_path.replace(output_path)
    except (GenerationError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        # Gone after a successful rename; left behind by any failure.
        temp_path.unlink(missing_ok=True)

    print(f"Generated {output_path}.")
    return 0


def _cmd_inspect(args: argparse.Namespace) -> int:
    """Handle the inspect subcommand."""
    path = Path(args.file)

    try:
        document = parse_file(path)
    except ParseError as exc:
        print(f"Error: {path}: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error: cannot read '{path}': {exc}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as exc:
        print(f"Error: {path} is not valid UTF-8: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(document.model_dump_json(indent=2))
        return 0

    if not document.suites:
        print("No suites found.")
        return 0

    for suite in document.suites:
        print(f"PRF={suite.prf} CTRLOCATION={suite.ctr_location} RLEN={suite.rlen}: {len(suite.cases)} case(s)")
    return 0
