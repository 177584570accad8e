"""Command-line interface for html2jsx."""

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

from bs4.exceptions import ParserRejectedMarkup
from pydantic import ValidationError

from .component import COMPONENT_NAME_RE, component_name_from_path
from .converter import convert_file, render_output
from .io_utils import STDIN_MARKER, read_markup, warn, write_text
from .models import ConversionManifest, load_manifest


def _resolve_component_name(requested: Optional[str], source: str) -> Optional[str]:
    if requested is None:
        return None
    name = requested or component_name_from_path(Path(source))
    if not COMPONENT_NAME_RE.match(name):
        raise SystemExit(
            f"Invalid component name '{name}': expected an identifier starting with an uppercase letter."
        )
    return name


def _handle_convert(args: argparse.Namespace) -> None:
    try:
        markup = read_markup(args.input)
    except FileNotFoundError as exc:
        raise SystemExit(str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise SystemExit(f"Input HTML is not valid UTF-8: {args.input}: {exc}") from exc

    component = _resolve_component_name(args.component, args.input)
    output = render_output(markup, component=component)

    if args.out is None:
        sys.stdout.write(output)
        return

    out_path = Path(args.out)
    if out_path.exists() and not args.force:
        raise SystemExit(f"Output file already exists: {out_path}. Use --force to overwrite.")
    write_text(out_path, output)
    print(f"Wrote {out_path}")


def _load_manifest_or_exit(path: Path) -> ConversionManifest:
    if not path.exists():
        raise SystemExit(f"Manifest not found: {path}")
    try:
        return load_manifest(path)
    except ValidationError as exc:
        raise SystemExit(f"Invalid manifest {path}: {exc}") from exc


def _handle_batch(args: argparse.Namespace) -> None:
    manifest_path = Path(args.manifest)
    manifest = _load_manifest_or_exit(manifest_path)

    errors: list[str] = []
    converted = 0
    for index, job in enumerate(manifest.jobs, start=1):
        if not job.input.exists():
            errors.append(f"{manifest_path} job {index}: input not found: {job.input}")
            continue
        if job.output.exists() and not args.force:
            errors.append(
                f"{manifest_path} job {index}: output already exists: {job.output}. "
                "Use --force to overwrite."
            )
            continue
        try:
            convert_file(job.input, job.output, component=job.component)
        except (UnicodeDecodeError, ParserRejectedMarkup) as exc:
            errors.append(f"{manifest_path} job {index}: {exc}")
            continue
        converted += 1

    if errors:
        for message in errors:
            warn(message)
        raise SystemExit(1)

    print(f"Converted {converted} file(s) from {manifest_path.name}.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="html2jsx",
        description="Convert static HTML markup into JSX.",
    )
    subparsers = parser.add_subparsers(dest="command")

    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert one HTML document.",
        description="Convert an HTML file (or stdin) to JSX.",
    )
    convert_parser.add_argument(
        "input",
        help=f"HTML file to convert, or '{STDIN_MARKER}' to read from stdin.",
    )
    convert_parser.add_argument(
        "--out",
        type=Path,
        help="Write the JSX to this file instead of stdout.",
    )
    convert_parser.add_argument(
        "--component",
        nargs="?",
        const="",
        default=None,
        metavar="NAME",
        help="Wrap the JSX in a component module. The name defaults to one derived from the input file.",
    )
    convert_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite the output file if it exists.",
    )
    convert_parser.set_defaults(func=_handle_convert)

    batch_parser = subparsers.add_parser(
        "batch",
        help="Run the conversions listed in a manifest.",
        description="Convert every job listed in a YAML manifest.",
    )
    batch_parser.add_argument(
        "--manifest",
        required=True,
        help="Path to the YAML manifest listing conversion jobs.",
    )
    batch_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite output files that already exist.",
    )
    batch_parser.set_defaults(func=_handle_batch)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main(sys.argv[1:])
