"""JSON file candidate source."""

import json
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import ValidationError

from ..base import BaseCandidateSource
from ...entities.candidate import Candidate
from ...errors import CandidateSourceError

# Record fields, in vector order
SKILL_FIELDS = ("devops", "fe", "be")


def record_to_candidate(record: dict[str, Any]) -> Candidate:
    """Convert one raw company record into a Candidate.

    Keys are matched case-insensitively. Missing skill fields count as 0.

    Args:
        record: Mapping with ``name``, optional ``id`` and the skill fields

    Raises:
        CandidateSourceError: If the record is not an object or holds
            non-numeric values
    """
    if not isinstance(record, dict):
        raise CandidateSourceError(
            "Candidate record must be a JSON object",
            details={"record": record},
        )

    fields = {str(k).lower(): v for k, v in record.items()}
    raw_id = fields.get("id")

    try:
        return Candidate(
            id=int(raw_id) if raw_id is not None else None,
            name=fields.get("name") or "",
            scores=[fields.get(name, 0) or 0 for name in SKILL_FIELDS],
        )
    except (ValidationError, TypeError, ValueError) as e:
        raise CandidateSourceError(
            "Invalid candidate record",
            details={"record": record},
            original_error=e,
        ) from e


class JsonFileCandidateSource(BaseCandidateSource):
    """Reads candidates from a JSON array of company records.

    The file is re-read on every call so edits take effect on the next
    request without a restart.

    Example file::

        [
          {"id": 1, "name": "Acme", "devops": 8, "fe": 13, "be": 14}
        ]
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def list_candidates(self) -> list[Candidate]:
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise CandidateSourceError(
                f"Failed to read candidates from {self.path}",
                details={"path": str(self.path)},
                original_error=e,
            ) from e

        if not isinstance(raw, list):
            raise CandidateSourceError(
                "Candidate file must contain a JSON array",
                details={"path": str(self.path)},
            )

        candidates = [record_to_candidate(record) for record in raw]
        logger.debug(f"Loaded {len(candidates)} candidates from {self.path}")
        return candidates
