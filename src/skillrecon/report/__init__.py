from .normalize import json_key, normalize_report, to_json
from .schema import SECTION_KEYS, NormalizedReport

__all__ = [
    "SECTION_KEYS",
    "NormalizedReport",
    "json_key",
    "normalize_report",
    "to_json",
]
