from __future__ import annotations

import math
from dataclasses import MISSING, fields, is_dataclass
from functools import lru_cache
from typing import Any, Callable, Dict, List, Mapping, Optional, Type, TypeVar, get_args, get_origin, get_type_hints

from skillrecon.report.schema import NormalizedReport

T = TypeVar("T")
Logger = Optional[Callable[[str], None]]


def json_key(attr: str) -> str:
    """snake_case attribute -> camelCase JSON key (``dig_comp_skills`` -> ``digCompSkills``)."""
    head, *rest = attr.split("_")
    return head + "".join(p[:1].upper() + p[1:] for p in rest)


@lru_cache(maxsize=None)
def _field_types(cls: type) -> Dict[str, Any]:
    return get_type_hints(cls)


def _field_default(f) -> Any:
    if f.default is not MISSING:
        return f.default
    return f.default_factory()


def _kind(tp: Any) -> str:
    if is_dataclass(tp):
        return "object"
    if get_origin(tp) in (list, List):
        return "list"
    if tp is str:
        return "string"
    return "number"


def _matches_scalar(tp: Any, value: Any) -> bool:
    if tp is str:
        return isinstance(value, str)
    # bool is an int subclass; JSON true/false is not a number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints past float range
        return False


def _emit(logger: Logger, path: str, expected: str, value: Any) -> None:
    if logger:
        logger(f"{path}: expected {expected}, got {type(value).__name__}")


def _coerce_list(item_tp: Any, value: List[Any], path: str, logger: Logger) -> List[Any]:
    out: List[Any] = []
    for idx, item in enumerate(value):
        item_path = f"{path}[{idx}]"
        if is_dataclass(item_tp):
            if isinstance(item, Mapping):
                out.append(_coerce_record(item_tp, item, item_path, logger))
                continue
        elif _matches_scalar(item_tp, item):
            out.append(item)
            continue
        # wrong-kind items are dropped rather than padded with empty records
        _emit(logger, item_path, _kind(item_tp), item)
    return out


def _coerce_record(cls: Type[T], value: Mapping[str, Any], path: str, logger: Logger) -> T:
    hints = _field_types(cls)
    kwargs: Dict[str, Any] = {}

    for f in fields(cls):
        key = json_key(f.name)
        field_path = f"{path}.{key}" if path else key
        tp = hints[f.name]

        if key not in value or value[key] is None:
            kwargs[f.name] = _field_default(f)
            continue

        raw = value[key]
        if is_dataclass(tp):
            if isinstance(raw, Mapping):
                kwargs[f.name] = _coerce_record(tp, raw, field_path, logger)
                continue
        elif get_origin(tp) in (list, List):
            if isinstance(raw, list):
                (item_tp,) = get_args(tp)
                kwargs[f.name] = _coerce_list(item_tp, raw, field_path, logger)
                continue
        elif _matches_scalar(tp, raw):
            kwargs[f.name] = raw
            continue

        _emit(logger, field_path, _kind(tp), raw)
        kwargs[f.name] = _field_default(f)

    return cls(**kwargs)


def to_json(obj: Any) -> Any:
    """Record tree -> plain JSON-ready dict/list/scalar tree (camelCase keys)."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return {json_key(f.name): to_json(getattr(obj, f.name)) for f in fields(obj)}
    if isinstance(obj, list):
        return [to_json(x) for x in obj]
    return obj


def normalize_report(raw: Any, *, logger: Logger = None) -> NormalizedReport:
    """
    Force an arbitrary document into the fixed report contract.

    Total and pure: any input (None, a scalar, a list, a partial or
    wrong-typed tree) yields a NormalizedReport with every section and leaf
    present. Wrong-kind nodes are replaced by their defaults, unknown keys
    are dropped. ``logger`` receives one line per substituted node.
    """
    if isinstance(raw, NormalizedReport):
        raw = to_json(raw)

    if not isinstance(raw, Mapping):
        _emit(logger, "<root>", "object", raw)
        return NormalizedReport()

    return _coerce_record(NormalizedReport, raw, "", logger)
