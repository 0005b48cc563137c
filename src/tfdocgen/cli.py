"""Command line entry point.

Usage:
  tfdocgen > README.md
  tfdocgen --variables vars.tf --outputs outs.tf --output docs/README.md
  tfdocgen -v --sort --title network
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from .config.settings import Settings
from .errors import TfDocGenError
from .generate import generate
from .render.sinks import FileSink, Sink, StdoutSink

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="tfdocgen", description="Generate a README for a Terraform module.")
    ap.add_argument("-v", "--verbose", action="store_true", default=None, help="verbose mode")
    ap.add_argument("--variables", default=None, help="path to variables file (default: variables.tf)")
    ap.add_argument("--outputs", default=None, help="path to outputs file (default: outputs.tf)")
    ap.add_argument("--output", default=None, help="write the README here instead of stdout")
    ap.add_argument("--title", default=None, help="module name for the title (default: working directory name)")
    ap.add_argument("--parser", default=None, help="force a parser by name (hcl2, json)")
    ap.add_argument("--sort", action="store_true", default=None, help="sort rows by name")
    return ap


def settings_from_args(args: argparse.Namespace, base: Settings) -> Settings:
    overrides = {
        "variables_file": args.variables,
        "outputs_file": args.outputs,
        "output_file": args.output,
        "title": args.title,
        "parser": args.parser,
        "sort_by_name": args.sort,
        "verbose": args.verbose,
    }
    return replace(base, **{k: v for k, v in overrides.items() if v is not None})


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args, Settings.from_env())
    configure_logging(settings.verbose)

    sink: Sink = FileSink(settings.output_file) if settings.output_file else StdoutSink()
    ok = False
    try:
        generate(settings, sink)
        ok = True
    except TfDocGenError as e:
        logger.error("Error generating README: %s.", e)
        return 1
    finally:
        if not ok and isinstance(sink, FileSink):
            sink.discard()
        sink.close()
    return 0


def run() -> None:  # pragma: no cover
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":  # pragma: no cover
    run()
