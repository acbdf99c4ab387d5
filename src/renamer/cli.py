from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Sequence

from casing.styles import RenamingType, convert
from casing.words import is_acronym, tokenize

from .config import load_settings
from .locks import rename_session_lock, rename_session_lock_enabled
from .logging_config import setup_logging
from .schema import SchemaError, schema_errors
from .service import RenameError, RenameResult, RenameService
from .tree import TreeError, dump_tree, load_tree_document, read_tree, write_tree

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_SCHEMA_VALIDATION_FAILED = 12
EXIT_RENAME_FAILED = 13


def _style(args: argparse.Namespace) -> RenamingType:
    if args.style:
        return RenamingType.parse(args.style)
    return args.settings.default_style


def cmd_styles(args: argparse.Namespace) -> int:
    for kind in RenamingType:
        print(f"{kind.slug}\t{kind.label}")
    return EXIT_OK


def cmd_convert(args: argparse.Namespace) -> int:
    kind = _style(args)
    texts: Sequence[str] = args.text
    if not texts:
        texts = [line.rstrip("\r\n") for line in sys.stdin]
    for text in texts:
        print(convert(text, kind))
    return EXIT_OK


def cmd_words(args: argparse.Namespace) -> int:
    words = [{"word": w, "acronym": is_acronym(w)} for w in tokenize(args.text)]
    print(json.dumps(words, ensure_ascii=False))
    return EXIT_OK


def cmd_validate(args: argparse.Namespace) -> int:
    doc = load_tree_document(Path(args.tree))
    errs = schema_errors(doc)
    if not errs:
        print("OK")
        return EXIT_OK
    for e in errs:
        print(f"{e['path'] or '/'}: {e['message']}")
    return EXIT_SCHEMA_VALIDATION_FAILED


def _rename_file(src: Path, dst: Path | None, kind: RenamingType) -> RenameResult:
    root = read_tree(src)
    result = RenameService(kind, root).call()
    if dst is None:
        sys.stdout.write(dump_tree(root))
    else:
        write_tree(dst, root)
    return result


def cmd_rename(args: argparse.Namespace) -> int:
    kind = _style(args)
    src = Path(args.tree)

    if args.in_place:
        if rename_session_lock_enabled(cli_no_session_lock=args.no_session_lock):
            with rename_session_lock(src):
                result = _rename_file(src, src, kind)
        else:
            result = _rename_file(src, src, kind)
    else:
        dst = Path(args.out) if args.out else None
        result = _rename_file(src, dst, kind)

    print(
        f"{kind.label}: {result.renamed} renamed, {result.changed} changed, {result.skipped} skipped",
        file=sys.stderr,
    )
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    styles = [k.slug for k in RenamingType]

    p = argparse.ArgumentParser(prog="renamer", description="Rename identifiers and entity trees by case style.")
    p.add_argument("--log-level", help="Logging level (overrides RENAMER_LOG_LEVEL).")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_sty = sub.add_parser("styles", help="List renaming types.")
    p_sty.set_defaults(fn=cmd_styles)

    p_conv = sub.add_parser("convert", help="Convert text; reads lines from stdin when no TEXT is given.")
    p_conv.add_argument("--style", choices=styles, help="Renaming type (default: RENAMER_DEFAULT_STYLE).")
    p_conv.add_argument("text", nargs="*")
    p_conv.set_defaults(fn=cmd_convert)

    p_w = sub.add_parser("words", help="Show how TEXT is split into words.")
    p_w.add_argument("text")
    p_w.set_defaults(fn=cmd_words)

    p_val = sub.add_parser("validate", help="Validate an entity tree document.")
    p_val.add_argument("tree")
    p_val.set_defaults(fn=cmd_validate)

    p_ren = sub.add_parser("rename", help="Rename every editable entity of a tree document.")
    p_ren.add_argument("tree")
    p_ren.add_argument("--style", choices=styles, help="Renaming type (default: RENAMER_DEFAULT_STYLE).")
    out = p_ren.add_mutually_exclusive_group()
    out.add_argument("--out", help="Write the renamed tree here instead of stdout.")
    out.add_argument("--in-place", action="store_true", help="Rewrite TREE.")
    p_ren.add_argument(
        "--no-session-lock",
        action="store_true",
        help="Do not lock TREE during --in-place rewrites.",
    )
    p_ren.set_defaults(fn=cmd_rename)

    return p


def run(argv: List[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE
    args.settings = settings
    setup_logging(log_level=args.log_level or settings.log_level, log_file=settings.log_file)

    try:
        return args.fn(args)
    except TreeError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except SchemaError as e:
        print(f"error: schema validation failed: {e}", file=sys.stderr)
        return EXIT_SCHEMA_VALIDATION_FAILED
    except RenameError as e:
        logger.debug("rename failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_RENAME_FAILED


def main() -> None:
    raise SystemExit(run())


if __name__ == "__main__":
    main()
