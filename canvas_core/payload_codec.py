"""
Export / import of the answer set.

Wire format (JSON):

    {
      "version": 1,
      "exportedAt": "<ISO-8601>",
      "currentStep": <int>,
      "answers": {"<field id>": "<text>", ...}
    }

Imported documents are untrusted: every field is validated on its own.
Bad answer entries are dropped one by one, a document without answers
is rejected as a whole.
"""

import json
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple, Union

from canvas_core.errors import InvalidFormat, SerializationFailure
from canvas_core.log_utils import tagged

_log = tagged("CODEC")

PAYLOAD_VERSION = 1
DEFAULT_EXPORT_FILENAME = "busup-canvas.json"


@dataclass
class ExportPayload:
    """Envelope written to the export file."""
    current_step: int = 0
    answers: Dict[str, str] = field(default_factory=dict)
    version: int = PAYLOAD_VERSION
    exported_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def to_dict(self) -> dict:
        return {
            'version': self.version,
            'exportedAt': self.exported_at,
            'currentStep': self.current_step,
            'answers': self.answers,
        }


def export_payload(
    step: int,
    answers: Dict[str, str],
    filename: str = DEFAULT_EXPORT_FILENAME,
    now: Optional[datetime] = None,
) -> Tuple[str, str]:
    """Returns (document text, download filename)."""
    payload = ExportPayload(current_step=step, answers=dict(answers))
    if now is not None:
        payload.exported_at = now.isoformat()
    try:
        text = json.dumps(payload.to_dict(), indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise SerializationFailure(f"cannot encode export document: {e}") from e
    return text, filename


def _decode(raw: Union[str, bytes]) -> str:
    if isinstance(raw, (bytes, bytearray)):
        try:
            return bytes(raw).decode('utf-8-sig')
        except UnicodeDecodeError as e:
            raise InvalidFormat("file is not UTF-8 text") from e
    return raw


def _import_step(value, page_count: int) -> int:
    # bool is an int subclass, JSON true/false is not a step
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if not math.isfinite(value):
        return 0
    return max(0, min(int(value), page_count))


def import_payload(raw: Union[str, bytes], page_count: int) -> Tuple[Dict[str, str], int]:
    """
    Parses and sanitizes an exported document.

    Returns (answers, step). Raises InvalidFormat when the text is not
    JSON, is not an object or carries no answers object.
    """
    text = _decode(raw)
    try:
        parsed = json.loads(text)
    except (ValueError, RecursionError) as e:
        # RecursionError: nesting deeper than the decoder can follow
        raise InvalidFormat(f"not a JSON document: {e}") from e

    if not isinstance(parsed, dict):
        raise InvalidFormat("document root is not an object")

    raw_answers = parsed.get('answers')
    if raw_answers is None:
        raise InvalidFormat("document has no answers")
    if not isinstance(raw_answers, dict):
        raise InvalidFormat("'answers' is not an object")

    answers = {key: value for key, value in raw_answers.items() if isinstance(value, str)}
    dropped = len(raw_answers) - len(answers)
    if dropped:
        _log(f"Dropped {dropped} non-text answer(s) from import")

    version = parsed.get('version')
    if isinstance(version, int) and not isinstance(version, bool) and version > PAYLOAD_VERSION:
        _log(f"Importing newer document version {version} (known: {PAYLOAD_VERSION})")

    return answers, _import_step(parsed.get('currentStep'), page_count)
