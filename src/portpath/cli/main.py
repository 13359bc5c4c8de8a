# Copyright (c) 2024 Portpath Contributors
# MIT License

"""
Main CLI entrypoint for portpath.

Usage:
    portpath --version
    portpath normalize PATH [--unix | --windows] [--no-end-separator]
    portpath prefix PATH
    portpath concat BASE PATH [--unix | --windows]
    portpath check NAME [--profile P] [--charset C]
    portpath legalize NAME [--profile P] [--charset C] [--replacement R]
    portpath profile [NAME]
"""

from __future__ import annotations

import argparse
import json
import logging
import platform
import sys
from typing import Any, Optional

from portpath import __version__
from portpath.config import get_config, load_config, resolve_profile, set_config
from portpath.errors import ExitCode, InvalidPathError, PortpathError
from portpath.filesystem import PROFILES, FilesystemProfile, get_profile
from portpath.filesystem.legalizer import is_legal_file_name, to_legal_file_name
from portpath.paths import concat, get_prefix, normalize, normalize_no_end_separator, parse_prefix

logger = logging.getLogger("portpath")


def get_version_string() -> str:
    """Generate a detailed version string."""
    python_version = platform.python_version()
    os_info = f"{platform.system()} {platform.release()}"
    return (
        f"portpath {__version__}\n"
        f"  python: {python_version}\n"
        f"  platform: {os_info}\n"
        f"  pure-python: yes (no compiled extensions)"
    )


def _add_separator_options(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--unix",
        dest="unix_separator",
        action="store_const",
        const=True,
        help="Use / in the output",
    )
    group.add_argument(
        "--windows",
        dest="unix_separator",
        action="store_const",
        const=False,
        help="Use \\ in the output",
    )


def _add_name_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--profile",
        default=None,
        help="Filesystem profile (generic, linux, mac_osx, windows)",
    )
    parser.add_argument(
        "--charset",
        default=None,
        help="Charset for byte-counted name lengths (default: utf-8)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for portpath."""
    parser = argparse.ArgumentParser(
        prog="portpath",
        description="Normalize paths and check file names against filesystem rules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  portpath normalize "C:\\foo\\..\\bar" --windows
  portpath check "CON.txt" --profile windows
  portpath legalize "a<b>c" --profile windows
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=get_version_string(),
    )

    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v, -vv)",
    )

    parser.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="YAML configuration file",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output results as JSON",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    normalize_parser = subparsers.add_parser("normalize", help="Normalize a path")
    normalize_parser.add_argument("path", help="Path to normalize")
    _add_separator_options(normalize_parser)
    normalize_parser.add_argument(
        "--no-end-separator",
        action="store_true",
        help="Drop a trailing separator",
    )

    prefix_parser = subparsers.add_parser("prefix", help="Show the prefix of a path")
    prefix_parser.add_argument("path", help="Path to inspect")

    concat_parser = subparsers.add_parser("concat", help="Join two paths and normalize")
    concat_parser.add_argument("base", help="Base path")
    concat_parser.add_argument("path", help="Path to add")
    _add_separator_options(concat_parser)

    check_parser = subparsers.add_parser("check", help="Check whether a file name is legal")
    check_parser.add_argument("name", help="File name to check")
    _add_name_options(check_parser)

    legalize_parser = subparsers.add_parser("legalize", help="Make a file name legal")
    legalize_parser.add_argument("name", help="File name to legalize")
    _add_name_options(legalize_parser)
    legalize_parser.add_argument(
        "--replacement",
        default=None,
        help="Character substituted for illegal characters (default: _)",
    )

    profile_parser = subparsers.add_parser("profile", help="Show filesystem profiles")
    profile_parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Profile to show; all profiles are listed if omitted",
    )

    return parser


def setup_logging(verbosity: int) -> None:
    """Send log records to stderr at a level set by -v flags."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _emit(args: argparse.Namespace, text: str, payload: dict[str, Any]) -> None:
    if args.json_output:
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        print(text)


def _separator(args: argparse.Namespace) -> Optional[bool]:
    if args.unix_separator is not None:
        return args.unix_separator
    return get_config().unix_separator


def _profile(args: argparse.Namespace) -> FilesystemProfile:
    if args.profile:
        return get_profile(args.profile)
    return resolve_profile()


def cmd_normalize(args: argparse.Namespace) -> int:
    if args.no_end_separator:
        result = normalize_no_end_separator(args.path, _separator(args))
    else:
        result = normalize(args.path, _separator(args))
    if result is None:
        raise InvalidPathError(args.path, "the prefix is invalid or '..' ascends above it")
    _emit(args, result, {"path": args.path, "normalized": result})
    return ExitCode.SUCCESS


def cmd_prefix(args: argparse.Namespace) -> int:
    text = get_prefix(args.path)
    prefix = parse_prefix(args.path)
    if prefix is None or text is None:
        raise InvalidPathError(args.path, "the prefix is invalid")
    _emit(
        args,
        f"{text}\t{prefix.kind.value}\t{prefix.length}",
        {"path": args.path, "prefix": text, "kind": prefix.kind.value, "length": prefix.length},
    )
    return ExitCode.SUCCESS


def cmd_concat(args: argparse.Namespace) -> int:
    result = concat(args.base, args.path, _separator(args))
    if result is None:
        raise InvalidPathError(args.path, f"cannot be joined onto {args.base!r}")
    _emit(args, result, {"base": args.base, "path": args.path, "result": result})
    return ExitCode.SUCCESS


def cmd_check(args: argparse.Namespace) -> int:
    profile = _profile(args)
    legal = is_legal_file_name(args.name, profile, args.charset)
    _emit(
        args,
        "legal" if legal else "illegal",
        {"name": args.name, "profile": profile.name, "legal": legal},
    )
    return ExitCode.SUCCESS if legal else ExitCode.ILLEGAL_NAME


def cmd_legalize(args: argparse.Namespace) -> int:
    profile = _profile(args)
    result = to_legal_file_name(args.name, args.replacement, profile, args.charset)
    _emit(
        args,
        result,
        {
            "name": args.name,
            "profile": profile.name,
            "legal_name": result,
            "legal": is_legal_file_name(result, profile, args.charset),
        },
    )
    return ExitCode.SUCCESS


def cmd_profile(args: argparse.Namespace) -> int:
    if args.name:
        profile = get_profile(args.name)
        if args.json_output:
            print(json.dumps(profile.to_dict(), indent=2, ensure_ascii=False))
        else:
            for key, value in profile.to_dict().items():
                if isinstance(value, list):
                    value = " ".join(repr(v) if key == "illegal_characters" else v for v in value)
                print(f"{key}: {value}")
        return ExitCode.SUCCESS

    current = resolve_profile()
    if args.json_output:
        print(json.dumps({"current": current.name, "profiles": sorted(PROFILES)}, indent=2))
    else:
        for name in sorted(PROFILES):
            marker = "*" if name == current.name else " "
            print(f"{marker} {name}")
    return ExitCode.SUCCESS


COMMANDS = {
    "normalize": cmd_normalize,
    "prefix": cmd_prefix,
    "concat": cmd_concat,
    "check": cmd_check,
    "legalize": cmd_legalize,
    "profile": cmd_profile,
}


def main(args: list[str] | None = None) -> int:
    """Main entrypoint for portpath CLI."""
    parser = create_parser()
    parsed = parser.parse_args(args)

    # If no command provided, just show help
    if parsed.command is None:
        parser.print_help()
        return ExitCode.SUCCESS

    setup_logging(parsed.verbose)

    try:
        if parsed.config_file:
            set_config(load_config(parsed.config_file))
        return int(COMMANDS[parsed.command](parsed))
    except PortpathError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return int(e.exit_code)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return int(ExitCode.KEYBOARD_INTERRUPT)
    except Exception as e:
        print(f"ERROR: Unexpected error: {e}", file=sys.stderr)
        if parsed.verbose >= 2:
            logger.exception("Unhandled error")
        return int(ExitCode.GENERIC_ERROR)


if __name__ == "__main__":
    sys.exit(main())
