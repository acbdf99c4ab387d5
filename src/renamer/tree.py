from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Protocol, Sequence

from .schema import validate_tree_document

TREE_VERSION = 1


class TreeError(Exception):
    pass


@dataclass
class Entity:
    name: str | None
    kind: str = "element"
    editable: bool = True
    children: List["Entity"] = field(default_factory=list)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Entity":
        return Entity(
            name=d.get("name"),
            kind=d.get("kind", "element"),
            editable=bool(d.get("editable", True)),
            children=[Entity.from_dict(c) for c in d.get("children", [])],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "kind": self.kind,
            "editable": self.editable,
            "children": [c.to_dict() for c in self.children],
        }


class EntityModel(Protocol):
    """What the rename service needs from a host's element tree."""

    def is_editable(self, node: Any) -> bool: ...

    def children(self, node: Any) -> Sequence[Any]: ...

    def get_name(self, node: Any) -> str | None: ...

    def set_name(self, node: Any, name: str) -> None: ...


class EntityTreeModel:
    def is_editable(self, node: Entity) -> bool:
        return node.editable

    def children(self, node: Entity) -> Sequence[Entity]:
        return node.children

    def get_name(self, node: Entity) -> str | None:
        return node.name

    def set_name(self, node: Entity, name: str) -> None:
        node.name = name


def iter_entities(root: Any, model: EntityModel) -> Iterator[Any]:
    # Pre-order: a parent is always yielded before its children.
    stack: List[Any] = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(list(model.children(node))))


def tree_document(root: Entity) -> Dict[str, Any]:
    return {"version": TREE_VERSION, "root": root.to_dict()}


def load_tree_document(path: Path) -> Any:
    """Parse a tree document without validating it."""
    p = Path(path)
    if not p.is_file():
        raise TreeError(f"no such file: {p}")
    try:
        return json.loads(p.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise TreeError(f"invalid JSON in {p}: {e}") from e


def read_tree(path: Path) -> Entity:
    doc = load_tree_document(path)
    validate_tree_document(doc)
    return Entity.from_dict(doc["root"])


def write_tree(path: Path, root: Entity) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    txt = dump_tree(root)
    # Replace-atomic temp -> rename to avoid partial writes.
    tmp = p.with_name(p.name + ".tmp")
    try:
        tmp.write_text(txt, encoding="utf-8")
        tmp.replace(p)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise
    return p


def dump_tree(root: Entity) -> str:
    return json.dumps(tree_document(root), indent=2, ensure_ascii=False) + "\n"
