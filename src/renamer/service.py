from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List

from casing.styles import RenamingType, convert

from .tree import EntityModel, EntityTreeModel, iter_entities

logger = logging.getLogger(__name__)


class RenameError(Exception):
    pass


@dataclass(frozen=True)
class NameChange:
    old: str
    new: str
    kind: str | None = None


@dataclass(frozen=True)
class RenameResult:
    ok: bool
    renamed: int
    changed: int
    skipped: int
    changes: List[NameChange] = field(default_factory=list)


class RenameService:
    """Rename a node and everything below it with one renaming type.

    Every editable node gets exactly one ``set_name`` call. Non-editable nodes
    are left alone, but their descendants are still visited.
    """

    def __init__(self, kind: RenamingType | str, root: Any, model: EntityModel | None = None) -> None:
        self.kind = RenamingType.parse(kind)
        self.root = root
        self.model: EntityModel = model if model is not None else EntityTreeModel()

    def call(self) -> RenameResult:
        renamed = 0
        skipped = 0
        changes: List[NameChange] = []

        nodes = iter_entities(self.root, self.model)
        while True:
            try:
                node = next(nodes)
            except StopIteration:
                break
            except Exception as e:
                raise RenameError(f"failed to walk tree: {e}") from e

            try:
                if not self.model.is_editable(node):
                    skipped += 1
                    continue
                old = self.model.get_name(node) or ""
                new = convert(old, self.kind)
                self.model.set_name(node, new)
            except Exception as e:
                raise RenameError(f"failed to rename {_describe(self.model, node)}: {e}") from e

            renamed += 1
            if new != old:
                changes.append(NameChange(old=old, new=new, kind=getattr(node, "kind", None)))
                logger.debug("%s: %r -> %r", self.kind.slug, old, new)

        logger.info(
            "%s: %d renamed, %d changed, %d skipped",
            self.kind.label,
            renamed,
            len(changes),
            skipped,
        )
        return RenameResult(
            ok=True,
            renamed=renamed,
            changed=len(changes),
            skipped=skipped,
            changes=changes,
        )


def _describe(model: EntityModel, node: Any) -> str:
    try:
        return repr(model.get_name(node))
    except Exception:
        return f"<{type(node).__name__}>"
