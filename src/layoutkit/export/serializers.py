"""Serializers: convert laid-out components to JSON-transferable formats."""

from __future__ import annotations

import json
from typing import Iterable

from ..core.component import Component


def snapshot(items: Iterable[Component]) -> list[dict]:
    """Bounds of each component, in order, as plain dicts.

    Hidden components are included with ``visible: False`` so a renderer
    can decide whether to draw their last known geometry.
    """
    records = []
    for index, item in enumerate(items):
        name = getattr(item, "name", None)
        records.append({
            "name": name if name is not None else str(index),
            **item.bounds().to_dict(),
            "visible": bool(item.is_visible()),
        })
    return records


def serialize_layout(container: Component, items: Iterable[Component] | None = None) -> str:
    """Serialize a container and its children's bounds as a JSON string.

    ``items`` defaults to the container's ``children`` when it has them.
    """
    if items is None:
        items = getattr(container, "children", ())
    return json.dumps({
        "container": container.bounds().to_dict(),
        "insets": container.insets().to_dict(),
        "children": snapshot(items),
    })
