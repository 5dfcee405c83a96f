"""
Boundary codecs.

- json_codec: JSON results payloads in, JSON standings out, fail-soft
- score_text: the ``"3 - 2"`` text form of a single match result
"""

from .json_codec import (
    Err,
    Ok,
    DecodeResult,
    calculate_rankings,
    decode_results,
    decode_results_or_raise,
    encode_standings,
    greet,
)
from .score_text import format_score, parse_score

__all__ = [
    "Err",
    "Ok",
    "DecodeResult",
    "calculate_rankings",
    "decode_results",
    "decode_results_or_raise",
    "encode_standings",
    "greet",
    "format_score",
    "parse_score",
]
