"""
Serialization helpers for LocaleRecord objects.

Provides JSON/YAML dumps via an intermediate dict representation.
Loading goes back through LocaleRecord, so a hand-edited dump that
breaks the record invariants is rejected with ValueError.
"""
from __future__ import annotations

import json
import warnings
from typing import Any, Dict

import yaml

from localeid.model import LocaleRecord


_FIELDS = ("is_root", "language", "territory", "codeset", "modifier", "script", "variants")


def record_to_dict(record: LocaleRecord) -> Dict[str, Any]:
    return {
        "is_root": record.is_root,
        "language": record.language,
        "territory": record.territory,
        "codeset": record.codeset,
        "modifier": record.modifier,
        "script": record.script,
        "variants": list(record.variants),
    }


def record_from_dict(d: Dict[str, Any]) -> LocaleRecord:
    unknown = sorted(set(d) - set(_FIELDS))
    if unknown:
        warnings.warn(f"Ignoring unknown locale record keys: {unknown}", UserWarning)
    return LocaleRecord(
        is_root=bool(d.get("is_root", False)),
        language=d.get("language"),
        territory=d.get("territory"),
        codeset=d.get("codeset"),
        modifier=d.get("modifier"),
        script=d.get("script"),
        variants=tuple(d.get("variants") or ()),
    )


def record_to_json(record: LocaleRecord) -> str:
    return json.dumps(record_to_dict(record), sort_keys=True)


def record_from_json(s: str) -> LocaleRecord:
    d = json.loads(s)
    return record_from_dict(d)


def record_to_yaml(record: LocaleRecord) -> str:
    return yaml.safe_dump(record_to_dict(record))


def record_from_yaml(s: str) -> LocaleRecord:
    d = yaml.safe_load(s)
    return record_from_dict(d)
