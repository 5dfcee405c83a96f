"""
JSON boundary adapter.

Decodes results payloads of the form ``{"A": {"B": [3, 1]}}`` and encodes
standings as ``[["A", 3]]``. Decoding returns Ok/Err instead of raising;
``calculate_rankings`` collapses Err to an empty standings payload.
"""

import json
import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..exceptions import DecodeError, ValidationError
from ..interfaces import Ranker
from ..logging_config import get_logger
from ..models import MatchResult, ResultsTable, Standings
from ..rankers.points_ranker import PointsRanker

# Module-level logger
logger = get_logger("json_codec")

EMPTY_STANDINGS = "[]"


@dataclass(frozen=True)
class Ok:
    """Successfully decoded results table."""

    table: dict[str, dict[str, MatchResult]]


@dataclass(frozen=True)
class Err:
    """Decoding failure with a human-readable reason."""

    reason: str


DecodeResult = Ok | Err


def _decode_leaf(player_a: str, player_b: str, value: object) -> MatchResult:
    if not isinstance(value, list):
        raise DecodeError(f"result {player_a} -> {player_b} must be an array")
    try:
        return MatchResult.from_pair(typing.cast(list[int], value))
    except ValidationError as e:
        raise DecodeError(f"result {player_a} -> {player_b}: {e}") from e


def _decode_table(data: object) -> dict[str, dict[str, MatchResult]]:
    if not isinstance(data, dict):
        raise DecodeError("results must be a JSON object")

    table = dict[str, dict[str, MatchResult]]()
    for player_a, matches in typing.cast(dict[str, Any], data).items():
        if not isinstance(matches, dict):
            raise DecodeError(f"matches for {player_a} must be a JSON object")
        table[player_a] = {
            player_b: _decode_leaf(player_a, player_b, value)
            for player_b, value in typing.cast(dict[str, Any], matches).items()
        }
    return table


def decode_results(payload: str) -> DecodeResult:
    """Decode a JSON results payload without raising."""
    try:
        data = json.loads(payload)
        return Ok(_decode_table(data))
    except json.JSONDecodeError as e:
        return Err(f"invalid JSON: {e}")
    except DecodeError as e:
        return Err(e.reason)
    except ValueError as e:
        # integer literals past the interpreter's digit limit
        return Err(f"unreadable number: {e}")
    except RecursionError:
        return Err("invalid JSON: nesting too deep")


def decode_results_or_raise(payload: str) -> dict[str, dict[str, MatchResult]]:
    """Decode a JSON results payload, raising DecodeError on failure."""
    decoded = decode_results(payload)
    if isinstance(decoded, Err):
        raise DecodeError(decoded.reason)
    return decoded.table


def encode_results(results: ResultsTable) -> str:
    """Encode a results table back into its JSON payload form."""
    data = {
        player_a: {player_b: result.to_pair() for player_b, result in matches.items()}
        for player_a, matches in results.items()
    }
    return json.dumps(data, ensure_ascii=False)


def encode_standings(standings: Standings) -> str:
    """Encode standings as a JSON array of ``[participant, points]`` pairs."""
    return json.dumps([entry.to_pair() for entry in standings], ensure_ascii=False)


def calculate_rankings(payload: str, ranker: Ranker | None = None) -> str:
    """
    Compute standings for a JSON results payload.

    Returns ``"[]"`` when the payload cannot be decoded, so an empty result
    means either no matches or bad input.

    Args:
        payload: JSON text shaped as participant -> opponent -> [score_a, score_b]
        ranker: Ranker to use (defaults to PointsRanker with 3/1/0 scoring)

    Returns:
        JSON text of the standings
    """
    logger.debug(f"Calculating rankings for: {payload}")

    decoded = decode_results(payload)
    if isinstance(decoded, Err):
        logger.warning(f"Failed to parse results payload: {decoded.reason}")
        return EMPTY_STANDINGS

    ranker = ranker or PointsRanker()
    return encode_standings(ranker.compute_standings(decoded.table))


def greet(name: str, sink: Callable[[str], Any] | None = None) -> None:
    """Emit a diagnostic greeting through ``sink`` (defaults to the logger)."""
    message = f"Hello, {name}!"
    if sink is None:
        logger.info(message)
    else:
        sink(message)
