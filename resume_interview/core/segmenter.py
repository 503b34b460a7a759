"""
Text Segmenter for resume_interview

Splits raw resume text into candidate project blocks. Two detectors run
independently and their outputs are concatenated in order:

- Heading-anchored: the span under a "Projects" heading, split into
  bullets / numbered items / paragraphs.
- Pattern-anchored: a short title-like line followed by a few body
  lines, or an explicit "Title:" / "Project:" label.

Nothing is validated or deduplicated here; that is the extractor's job.
"""

import logging
import re

from resume_interview.core.vocabulary import (
    BULLET_LINE,
    LABELLED_TITLE,
    NEXT_SECTION,
    PROJECT_HEADING,
)

logger = logging.getLogger(__name__)

MIN_BLOCK_LENGTH = 30
MIN_BULLET_LENGTH = 50

TITLE_MIN_LENGTH = 10
TITLE_MAX_LENGTH = 80
MAX_BODY_LINES = 5

_ITEM_BOUNDARY = re.compile(r"\n[ \t]*(?=(?:[•▪●◦‣\-*]|\d+[.)])[ \t]+)|\n[ \t]*\n")


def normalize_text(text: str) -> str:
    """Normalize line endings and collapse runs of blank lines."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = re.sub(r"\n[ \t]*\n(?:[ \t]*\n)+", "\n\n", text)
    return text.strip()


def segment(text: str) -> list[str]:
    """
    Split resume text into candidate blocks.

    Args:
        text: Raw resume text

    Returns:
        Candidate blocks longer than MIN_BLOCK_LENGTH, heading-anchored
        blocks first, then pattern-anchored ones
    """
    clean = normalize_text(text)
    if not clean:
        return []

    heading_blocks = _heading_anchored_blocks(clean)
    pattern_blocks = _pattern_anchored_blocks(clean)

    logger.debug(
        f"Segmenter found {len(heading_blocks)} heading-anchored and "
        f"{len(pattern_blocks)} pattern-anchored candidates"
    )

    return [b for b in heading_blocks + pattern_blocks if len(b) > MIN_BLOCK_LENGTH]


# =========================================================================
# HEADING-ANCHORED
# =========================================================================

def _project_section(text: str) -> str | None:
    """Return the text between a projects heading and the next section."""
    heading = PROJECT_HEADING.search(text)
    if not heading:
        return None

    body_start = heading.end()
    next_heading = NEXT_SECTION.search(text, body_start)
    body_end = next_heading.start() if next_heading else len(text)
    return text[body_start:body_end]


def _heading_anchored_blocks(text: str) -> list[str]:
    section = _project_section(text)
    if section is None:
        return []

    blocks = []
    for chunk in re.split(r"\n[ \t]*\n", "\n" + section.strip("\n")):
        chunk = chunk.strip("\n")
        if not chunk.strip():
            continue
        lines = chunk.split("\n")
        # "Title" line followed by bullets describes one project
        if not BULLET_LINE.match(lines[0]) and len(lines) > 1:
            blocks.extend(_titled_groups(lines))
            continue
        for item in _ITEM_BOUNDARY.split("\n" + chunk):
            item = item.strip()
            if item:
                blocks.append(item)

    return [b for b in blocks if len(b) > MIN_BULLET_LENGTH]


def _titled_groups(lines: list[str]) -> list[str]:
    """Split a chunk into title + bullets groups.

    A flush-left, capitalised line right after a bullet starts the next
    project; indented or lowercase lines continue the current bullet.
    """
    groups = [[lines[0]]]
    after_bullet = False
    for line in lines[1:]:
        is_bullet = bool(BULLET_LINE.match(line))
        if after_bullet and not is_bullet and line[:1].isupper():
            groups.append([line])
        else:
            groups[-1].append(line)
        after_bullet = is_bullet
    return ["\n".join(group).strip() for group in groups]


# =========================================================================
# PATTERN-ANCHORED
# =========================================================================

def _is_title_line(line: str) -> bool:
    stripped = line.strip()
    if PROJECT_HEADING.match(stripped) or NEXT_SECTION.match(stripped):
        return False
    return (
        TITLE_MIN_LENGTH < len(stripped) <= TITLE_MAX_LENGTH + 1
        and stripped[0].isupper()
        and "•" not in stripped
        and not BULLET_LINE.match(line)
    )


def _collect_body(lines: list[str], start: int) -> list[str]:
    """Collect up to MAX_BODY_LINES non-blank lines without bullet glyphs."""
    body = []
    index = start
    while index < len(lines) and len(body) < MAX_BODY_LINES:
        line = lines[index]
        if not line.strip() or "•" in line:
            break
        body.append(line.strip())
        index += 1
    return body


def _pattern_anchored_blocks(text: str) -> list[str]:
    lines = text.split("\n")
    blocks = []
    index = 0

    while index < len(lines):
        line = lines[index]
        labelled = LABELLED_TITLE.match(line)

        if labelled or _is_title_line(line):
            title = (labelled.group(1) if labelled else line).strip()
            body = _collect_body(lines, index + 1)
            description = " ".join(body).strip()
            if len(title) > 5 and len(description) > 20:
                blocks.append(title + "\n" + "\n".join(body))
                index += 1 + len(body)
                continue

        index += 1

    return blocks
