from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Tuple

from jsonschema import Draft202012Validator
from referencing import Registry, Resource

SCHEMA_DIR = Path(__file__).resolve().parent / "schemas"

ENTITY_SCHEMA_ID = "renamer:entity-v1"
TREE_SCHEMA_ID = "renamer:tree-v1"

# Reported in SchemaError messages; schema_errors() returns everything.
MAX_REPORTED_ERRORS = 5


class SchemaError(Exception):
    pass


def _load(name: str) -> Any:
    return json.loads((SCHEMA_DIR / name).read_text(encoding="utf-8"))


def _json_pointer(path_parts: Any) -> str:
    # jsonschema error.path / error.schema_path are deques of keys/indices.
    parts = list(path_parts)

    def esc(p: Any) -> str:
        s = str(p)
        return s.replace("~", "~0").replace("/", "~1")

    return "" if not parts else "/" + "/".join(esc(p) for p in parts)


def tree_validator() -> Draft202012Validator:
    entity = _load("entity-v1.schema.json")
    tree = _load("tree-v1.schema.json")

    reg = Registry().with_resources([
        (ENTITY_SCHEMA_ID, Resource.from_contents(entity)),
        (TREE_SCHEMA_ID, Resource.from_contents(tree)),
    ])
    return Draft202012Validator(tree, registry=reg)


def schema_errors(obj: Any) -> List[Dict[str, str]]:
    """All validation errors of a tree document, in a deterministic order."""

    out: List[Dict[str, str]] = []
    for err in tree_validator().iter_errors(obj):
        out.append(
            {
                "path": _json_pointer(err.absolute_path),
                "schema_path": _json_pointer(err.absolute_schema_path),
                "validator": str(err.validator),
                "message": str(err.message),
            }
        )

    def k(e: Dict[str, str]) -> Tuple[str, str, str, str]:
        return (e["path"], e["validator"], e["message"], e["schema_path"])

    return sorted(out, key=k)


def validate_tree_document(obj: Any) -> None:
    errs = schema_errors(obj)
    if errs:
        msg = "; ".join([f"{e['path'] or '/'}: {e['message']}" for e in errs[:MAX_REPORTED_ERRORS]])
        raise SchemaError(msg)
