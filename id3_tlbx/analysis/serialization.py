"""JSON persistence of decision trees.

A decision is stored as ``{"column": ..., "cases": [...]}`` and each case as
``{"value": ..., "class": ..., "decide": ...}``. Leaf cases carry a non-empty
``class`` and ``"decide": null``; branch cases carry ``"class": ""`` and the nested
decision.
"""

import json
import logging
from pathlib import Path
from typing import Any

from id3_tlbx.exceptions import TreeDecodeError, TreeEncodeError

from .tree import Case, Decision, Leaf


logger = logging.getLogger(__name__)


def tree_to_dict(tree: Decision) -> dict[str, Any]:
    """Convert a decision tree to plain JSON-compatible objects.

    Raises:
        TreeEncodeError: If a leaf carries the empty class label, which the format reserves
            for branch cases.
    """
    return _decision_to_obj(tree, where="$")


def _decision_to_obj(tree: Decision, where: str) -> dict[str, Any]:
    cases = []
    for i, case in enumerate(tree.cases):
        if case.decision is not None:
            decide = _decision_to_obj(case.decision, f"{where}.cases[{i}].decide")
        elif not case.label:
            raise TreeEncodeError(
                f"{where}.cases[{i}]: leaf for {tree.column}={case.value!r} has an empty class label",
            )
        else:
            decide = None
        cases.append({"value": case.value, "class": case.label or "", "decide": decide})
    return {"column": tree.column, "cases": cases}


def tree_from_dict(obj: Any) -> Decision:
    """Rebuild a decision tree from :func:`tree_to_dict` output.

    Raises:
        TreeDecodeError: If ``obj`` does not describe a valid tree.
    """
    return _decision_from_obj(obj, where="$")


def _decision_from_obj(obj: Any, where: str) -> Decision:
    if not isinstance(obj, dict):
        raise TreeDecodeError(f"{where}: expected an object, got {type(obj).__name__}")
    column = _string_field(obj, "column", where)
    if not column:
        raise TreeDecodeError(f"{where}.column: must not be empty")
    cases = obj.get("cases")
    if not isinstance(cases, list):
        raise TreeDecodeError(f"{where}.cases: expected a list")
    if not cases:
        raise TreeDecodeError(f"{where}.cases: a decision needs at least one case")
    return Decision(column, tuple(_case_from_obj(case, f"{where}.cases[{i}]") for i, case in enumerate(cases)))


def _case_from_obj(obj: Any, where: str) -> Case:
    if not isinstance(obj, dict):
        raise TreeDecodeError(f"{where}: expected an object, got {type(obj).__name__}")
    value = _string_field(obj, "value", where)
    label = obj.get("class") or ""
    if not isinstance(label, str):
        raise TreeDecodeError(f"{where}.class: expected a string")
    decide = obj.get("decide")

    if label and decide is not None:
        raise TreeDecodeError(f"{where}: has both a class and a nested decision")
    if label:
        return Case(value, Leaf(label))
    if decide is None:
        raise TreeDecodeError(f"{where}: has neither a class nor a nested decision")
    return Case(value, _decision_from_obj(decide, f"{where}.decide"))


def _string_field(obj: dict[str, Any], key: str, where: str) -> str:
    if key not in obj:
        raise TreeDecodeError(f"{where}: missing field '{key}'")
    value = obj[key]
    if not isinstance(value, str):
        raise TreeDecodeError(f"{where}.{key}: expected a string, got {type(value).__name__}")
    return value


def to_json(tree: Decision, indent: bool = False) -> str:
    """Serialize a tree as JSON, pretty-printed with four spaces when ``indent``."""
    return json.dumps(tree_to_dict(tree), indent=4 if indent else None)


def from_json(text: str | bytes) -> Decision:
    """Deserialize a tree produced by :func:`to_json`.

    Raises:
        TreeDecodeError: If ``text`` is not valid JSON or not a valid tree.
    """
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as exc:
        raise TreeDecodeError(f"invalid JSON: {exc}") from exc
    return tree_from_dict(obj)


def save_tree(tree: Decision, path: str | Path, indent: bool = True) -> Path:
    """Write ``tree`` as JSON to ``path`` and return the path.

    Raises:
        TreeEncodeError: If the tree cannot be encoded; nothing is written then.
    """
    path = Path(path)
    path.write_text(to_json(tree, indent=indent) + "\n", encoding="utf-8")
    logger.info("Saved decision tree rooted at '%s' to %s", tree.column, path)
    return path


def load_tree(path: str | Path) -> Decision:
    """Read a tree written by :func:`save_tree`.

    Raises:
        TreeDecodeError: If the file content is not a valid tree.
    """
    path = Path(path)
    logger.info("Loading decision tree from %s", path)
    return from_json(path.read_text(encoding="utf-8"))


__all__ = ["from_json", "load_tree", "save_tree", "to_json", "tree_from_dict", "tree_to_dict"]
