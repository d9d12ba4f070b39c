"""Reference rewriting after a file moves."""

import json
import re
from collections.abc import Callable
from urllib.parse import quote, unquote

from ..VaultFile import VaultFile
from ._constants import MARKDOWN_TARGET_PATTERN, WIKI_TARGET_PATTERN
from ._is_external import _is_external


def _new_target(old_target: str, new_file: VaultFile) -> str:
    """Write the new location in the same form the old link used."""
    if "/" in old_target:
        return new_file.path
    if "." in old_target.rsplit("/", 1)[-1]:
        return new_file.name
    return new_file.basename


def _rewrite_references(
    document: VaultFile,
    text: str,
    points_at_old: Callable[[str], bool],
    new_file: VaultFile,
) -> str:
    """Return ``text`` with every link that ``points_at_old`` retargeted to ``new_file``.

    Captions, sizes, subpaths and syntax are kept as written; only the target changes.
    """
    if document.extension.lower() == "canvas":
        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            return text
        changed = False
        for node in data.get("nodes", []) if isinstance(data, dict) else []:
            if isinstance(node, dict) and node.get("type") == "file" and points_at_old(str(node.get("file", ""))):
                node["file"] = new_file.path
                changed = True
        return json.dumps(data, indent="\t", ensure_ascii=False) if changed else text

    def replace_wiki(match: re.Match[str]) -> str:
        target = match.group(2).strip()
        if not points_at_old(target):
            return match.group(0)
        return match.group(1) + _new_target(target, new_file)

    def replace_markdown(match: re.Match[str]) -> str:
        target = match.group(2)
        if _is_external(target) or not points_at_old(unquote(target)):
            return match.group(0)
        new_target = _new_target(unquote(target), new_file)
        if "%" in target or " " in new_target:
            new_target = quote(new_target, safe="/")
        return match.group(1) + new_target

    text = WIKI_TARGET_PATTERN.sub(replace_wiki, text)
    return MARKDOWN_TARGET_PATTERN.sub(replace_markdown, text)
