"""Feedback response parser: turns the model's free text into a fixed record.

Rules:
  - A heading is a line starting with a capital letter, followed by
    letters/spaces, then a colon ("Market Demand:", "Ability to Pay:").
    Any such line opens a new section, expected or not.
  - Lines before the first heading are preamble and are skipped.
  - Section bodies are trimmed and lose any leading dash rule ("---").
  - "Key Competitors" is split on "Competitor #<n>:" markers into
    attribute dicts; every other section stays plain text.
  - The result always carries exactly EXPECTED_SECTIONS, in order.
    Missing text sections are "", a missing competitor list is [].
  - Parsing never raises.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Dict, List, NamedTuple, Union

from ..constants import EXPECTED_SECTIONS, KEY_COMPETITORS

logger = logging.getLogger(__name__)

CompetitorRecord = Dict[str, str]
FeedbackValue = Union[str, List[CompetitorRecord]]
StructuredFeedback = Dict[str, FeedbackValue]

_HEADING_RE = re.compile(r"^([A-Z][A-Za-z \t]*):(.*)$")
_LEADING_DASHES_RE = re.compile(r"^(?:-+\s*)+")
_COMPETITOR_MARKER_RE = re.compile(r"Competitor #\d+:")


class RawSection(NamedTuple):
    name: str
    body: str


class _ScanState(Enum):
    SEEKING_HEADING = "seeking_heading"
    ACCUMULATING_BODY = "accumulating_body"


def _clean_body(lines: List[str]) -> str:
    body = "\n".join(lines).strip()
    return _LEADING_DASHES_RE.sub("", body).strip()


def split_sections(text: str) -> List[RawSection]:
    """Split raw completion text into ordered (name, body) sections.

    Returns an empty list when no heading is found.
    """
    if not text:
        return []

    sections: List[RawSection] = []
    state = _ScanState.SEEKING_HEADING
    name = ""
    body_lines: List[str] = []

    for line in text.splitlines():
        match = _HEADING_RE.match(line)
        if match:
            if state is _ScanState.ACCUMULATING_BODY:
                sections.append(RawSection(name, _clean_body(body_lines)))
            name = match.group(1).strip()
            body_lines = [match.group(2)]
            state = _ScanState.ACCUMULATING_BODY
        elif state is _ScanState.ACCUMULATING_BODY:
            body_lines.append(line)

    if state is _ScanState.ACCUMULATING_BODY:
        sections.append(RawSection(name, _clean_body(body_lines)))

    return sections


def _parse_competitor_chunk(chunk: str) -> CompetitorRecord:
    record: CompetitorRecord = {}
    for line in chunk.splitlines():
        if ":" not in line:
            continue
        attribute, value = line.split(":", 1)
        record[attribute.strip()] = value.strip()
    return record


def extract_competitors(body: str) -> List[CompetitorRecord]:
    """Split a Key Competitors body into one attribute dict per competitor.

    Text ahead of the first "Competitor #n:" marker is an intro line and is
    skipped. Without any marker the whole body is treated as one competitor.
    Chunks that yield no "attribute: value" line are dropped.
    """
    if not body:
        return []

    chunks = _COMPETITOR_MARKER_RE.split(body)
    if len(chunks) > 1:
        chunks = chunks[1:]

    competitors: List[CompetitorRecord] = []
    for chunk in chunks:
        if not chunk.strip():
            continue
        record = _parse_competitor_chunk(chunk)
        if record:
            competitors.append(record)
    return competitors


def _empty_feedback() -> StructuredFeedback:
    return {
        key: ([] if key == KEY_COMPETITORS else "")
        for key in EXPECTED_SECTIONS
    }


def parse_response(text: str) -> StructuredFeedback:
    """Parse a completion into the fixed feedback schema."""
    parsed: StructuredFeedback = {}
    for section in split_sections(text):
        if section.name == KEY_COMPETITORS:
            parsed[section.name] = extract_competitors(section.body)
        else:
            parsed[section.name] = section.body

    unexpected = [name for name in parsed if name not in EXPECTED_SECTIONS]
    if unexpected:
        logger.debug("[PARSER] Ignoring unexpected headings: %s", unexpected)

    missing = [key for key in EXPECTED_SECTIONS if key not in parsed]
    if missing:
        logger.info("[PARSER] %d/%d sections missing: %s",
                    len(missing), len(EXPECTED_SECTIONS), missing)

    result = _empty_feedback()
    for key in EXPECTED_SECTIONS:
        if key in parsed:
            result[key] = parsed[key]
    return result
