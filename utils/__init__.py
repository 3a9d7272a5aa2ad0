"""Utils package."""

from utils.ids import generate_id, sequential_ids
from utils.json_parser import parse_json_safe, strip_code_fences

__all__ = [
    "generate_id",
    "sequential_ids",
    "parse_json_safe",
    "strip_code_fences",
]
