"""Tag prefixer.

Given an OpenAPI document and the combine-config entry that points at it,
prefix every operation tag with the API title so that tags coming from
different APIs stay apart once swagger-combine merges them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from core.domain.models import APIEntry, OpenAPIDoc

PREFIX_SEPARATOR = ": "
DEFAULT_TAG_NAME = "default"


@dataclass
class PrefixResult:
    """What the prefixer did to one API entry."""

    prefix: str
    renamed: dict[str, str] = field(default_factory=dict)
    added: list[str] = field(default_factory=list)


def build_prefix(title: str) -> str:
    return f"{title}{PREFIX_SEPARATOR}"


def collect_prefixed_tags(doc: OpenAPIDoc, prefix: str) -> dict[str, str]:
    """Map each distinct tag of `doc` to `prefix + tag`.

    Keys keep first-seen order; repeated tags collapse to one entry.
    """

    prefixed: dict[str, str] = {}
    for tag in doc.iter_operation_tags():
        prefixed[tag] = prefix + tag
    return prefixed


def merge_prefix_map(api: APIEntry, prefix_map: dict[str, str], *, prefix: str) -> list[str]:
    """Attach `prefix_map` to `api.tags` in place.

    With no tags at all, nothing is renamed and `prefix + "default"` is
    appended to the add-list instead. Returns the tags that were added.
    """

    edit = api.ensure_tag_edit()
    if not prefix_map:
        synthetic = prefix + DEFAULT_TAG_NAME
        if edit.add is None:
            edit.add = []
        edit.add.append(synthetic)
        return [synthetic]

    if edit.rename is None:
        edit.rename = {}
    edit.rename.update(prefix_map)
    return []


def prefix_api_tags(
    doc: OpenAPIDoc,
    api: APIEntry,
    *,
    on_tag: Callable[[str], None] | None = None,
) -> PrefixResult:
    """Run the whole prefixing step for one API.

    `on_tag` is called with each discovered tag name (before prefixing).
    """

    prefix = build_prefix(doc.info.title)
    prefix_map = collect_prefixed_tags(doc, prefix)
    if on_tag:
        for tag in prefix_map:
            on_tag(tag)

    added = merge_prefix_map(api, prefix_map, prefix=prefix)
    return PrefixResult(prefix=prefix, renamed=prefix_map, added=added)
