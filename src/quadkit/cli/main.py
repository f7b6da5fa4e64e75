from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from xml.etree import ElementTree

from quadkit.core.convert import (
    boundary,
    from_blank_node_error,
    from_decode_error,
    from_io_error,
    from_iri_error,
    from_language_tag_error,
    from_xml_error,
)
from quadkit.core.errors import Error
from quadkit.core.model import (
    BlankNodeIdParseError,
    IriParseError,
    LanguageTagParseError,
    parse_blank_node_id,
    parse_iri,
    parse_language_tag,
)
from quadkit.core.report import ErrorReport

from .config import ReportSettings

logger = logging.getLogger(__name__)


def setup_logging(settings: ReportSettings, verbose: bool = False) -> None:
    """Configure logging for the command line."""
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _read_bytes(path: str) -> bytes:
    with boundary(OSError, from_io_error):
        return Path(path).read_bytes()


def _cmd_check_iri(args: argparse.Namespace) -> int:
    with boundary(IriParseError, from_iri_error):
        iri = parse_iri(args.text)
    print(iri)
    return 0


def _cmd_check_bnode(args: argparse.Namespace) -> int:
    with boundary(BlankNodeIdParseError, from_blank_node_error):
        label = parse_blank_node_id(args.text)
    print(f"_:{label}")
    return 0


def _cmd_check_lang(args: argparse.Namespace) -> int:
    with boundary(LanguageTagParseError, from_language_tag_error):
        tag = parse_language_tag(args.text)
    print(tag)
    return 0


def _cmd_decode(args: argparse.Namespace) -> int:
    data = _read_bytes(args.path)
    with boundary(UnicodeDecodeError, from_decode_error):
        text = data.decode("utf-8")
    logger.info("Decoded %s (%d bytes)", args.path, len(data))
    print(f"{len(text)} characters")
    return 0


def _cmd_check_xml(args: argparse.Namespace) -> int:
    data = _read_bytes(args.path)
    with boundary(ElementTree.ParseError, from_xml_error):
        root = ElementTree.fromstring(data)
    print(root.tag)
    return 0


def report_failure(error: BaseException, settings: ReportSettings) -> None:
    """
    Final failure handler: print a report of any failure to stderr.

    Args:
        error: The failure that ended the command.
        settings: Rendering options (format, max_causes, show_kind).
    """
    report = ErrorReport.from_exception(error, max_causes=settings.max_causes)
    if settings.format == "json":
        print(report.model_dump_json(), file=sys.stderr)
    else:
        print(report.render_text(show_kind=settings.show_kind), file=sys.stderr)


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="quadkit", description="Validate RDF terms and documents, reporting failures uniformly."
    )
    p.add_argument("--config", type=str, default=None, help="Path to a quadkit TOML file.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("check-iri", help="Validate an absolute IRI.")
    s.add_argument("text")
    s.set_defaults(func=_cmd_check_iri)

    s = sub.add_parser("check-bnode", help="Validate a blank node identifier (without '_:').")
    s.add_argument("text")
    s.set_defaults(func=_cmd_check_bnode)

    s = sub.add_parser("check-lang", help="Validate and normalize a language tag.")
    s.add_argument("text")
    s.set_defaults(func=_cmd_check_lang)

    s = sub.add_parser("decode", help="Check that a file is valid UTF-8.")
    s.add_argument("path")
    s.set_defaults(func=_cmd_decode)

    s = sub.add_parser("check-xml", help="Check that a file is well-formed XML.")
    s.add_argument("path")
    s.set_defaults(func=_cmd_check_xml)
    return p


def main(argv: list[str] | None = None) -> None:
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = build_argparser()
    if not argv:
        parser.print_help()
        return
    args = parser.parse_args(argv)
    settings = ReportSettings.load(args.config)
    setup_logging(settings, verbose=args.verbose)
    try:
        code = args.func(args)
    except Error as err:
        logger.debug("%s failed with a %s error", args.cmd, err.kind.value, exc_info=err)
        report_failure(err, settings)
        code = 1
    raise SystemExit(code)


if __name__ == "__main__":
    main()
