"""
Serialization helpers for parsed LTSV records.

Rendering back to LTSV text, plus lossless JSON/YAML round-trip via an
intermediate plain-data representation:

    [[{"label": "host", "field": "127.0.0.1"}, ...], ...]

Positions (line/start/end) are not serialized; they describe where a pair
was read from, not the pair itself.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Sequence

import yaml

from ltsv.model import NEWLINE, TAB, Pair


def render_record(pairs: Iterable[Pair]) -> str:
    return TAB.join(str(p) for p in pairs)


def render(records: Sequence[Sequence[Pair]]) -> str:
    """Render records as LTSV text, one line each, newline-terminated."""
    if not records:
        return ""
    return NEWLINE.join(render_record(r) for r in records) + NEWLINE


def record_to_dict(pairs: Iterable[Pair]) -> Dict[str, str]:
    """Map label to field. A repeated label keeps its last value."""
    return {p.label: p.field for p in pairs}


def pair_to_dict(p: Pair) -> Dict[str, str]:
    return {"label": p.label, "field": p.field}


def pair_from_dict(d: Dict[str, Any]) -> Pair:
    return Pair(label=str(d["label"]), field=str(d.get("field", "")))


def records_to_list(records: Sequence[Sequence[Pair]]) -> List[List[Dict[str, str]]]:
    return [[pair_to_dict(p) for p in r] for r in records]


def records_from_list(data: Any) -> List[List[Pair]]:
    if data is None:
        return []
    return [[pair_from_dict(d) for d in r] for r in data]


def records_to_json(records: Sequence[Sequence[Pair]]) -> str:
    return json.dumps(records_to_list(records))


def records_from_json(s: str) -> List[List[Pair]]:
    return records_from_list(json.loads(s))


def records_to_yaml(records: Sequence[Sequence[Pair]]) -> str:
    return yaml.safe_dump(records_to_list(records))


def records_from_yaml(s: str) -> List[List[Pair]]:
    return records_from_list(yaml.safe_load(s))
