"""Index maintenance: ordered, deduplicated link-lines under a header.

The index is plain line-oriented markdown. It is parsed into IndexLine
records on load and serialized back on save; only the insertion point is
computed here, every other line is written back verbatim.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .errors import NotInitializedError
from .models.journal import IndexUpdateResult

logger = logging.getLogger(__name__)

LINK_PREFIX = "- ["
LINK_PATTERN = re.compile(r"^- \[(?P<date>[^\]]+)\]\((?P<path>[^)]+)\)\s*$")
LINE_PATTERN = re.compile(r"[^\n]*\n|[^\n]+\Z")


def format_link_line(date_str: str, rel_path: str) -> str:
    """Canonical link-line for an entry: - [DATE](PATH)."""
    return f"- [{date_str}]({rel_path})"


@dataclass
class IndexLine:
    """One line of the index file: its text and its original line ending."""

    text: str
    ending: str = "\n"

    @classmethod
    def parse(cls, raw: str) -> "IndexLine":
        for ending in ("\r\n", "\n"):
            if raw.endswith(ending):
                return cls(raw[: -len(ending)], ending)
        return cls(raw, "")

    @property
    def is_link(self) -> bool:
        return self.text.startswith(LINK_PREFIX)

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


@dataclass
class IndexDocument:
    """Index file content as an ordered sequence of lines.

    Only "\\n" and "\\r\\n" end a line; each line keeps its own ending so
    untouched lines are written back byte for byte.
    """

    lines: list[IndexLine] = field(default_factory=list)

    @classmethod
    def parse(cls, content: str) -> "IndexDocument":
        return cls(lines=[IndexLine.parse(raw) for raw in LINE_PATTERN.findall(content)])

    def serialize(self) -> str:
        return "".join(line.text + line.ending for line in self.lines)

    @property
    def newline(self) -> str:
        """Line ending used by the document (first line that has one)."""
        for line in self.lines:
            if line.ending:
                return line.ending
        return "\n"

    def contains(self, text: str) -> bool:
        return any(line.text == text for line in self.lines)

    def header_end(self) -> int:
        """Position right after the header block.

        The header ends at the first blank line following the first
        non-blank line; insertion goes after that blank line. Without such
        a blank line the position is the end of the document.
        """
        seen_content = False
        for i, line in enumerate(self.lines):
            if not line.is_blank:
                seen_content = True
            elif seen_content:
                return i + 1
        return len(self.lines)

    def insertion_point(self) -> int:
        """Position after the last link-line, or after the header if none."""
        for i in range(len(self.lines) - 1, -1, -1):
            if self.lines[i].is_link:
                return i + 1
        return self.header_end()

    def insert(self, position: int, text: str) -> None:
        newline = self.newline
        if position >= len(self.lines) and self.lines and not self.lines[-1].ending:
            self.lines[-1].ending = newline
        self.lines.insert(position, IndexLine(text, newline))

    def entries(self) -> list[tuple[str, str]]:
        """(date, path) pairs of well-formed link-lines in file order."""
        pairs = []
        for line in self.lines:
            match = LINK_PATTERN.match(line.text)
            if match:
                pairs.append((match.group("date"), match.group("path")))
        return pairs


def load_index(index_path: Path) -> IndexDocument:
    # newline="" keeps \r\n endings as they are on disk
    with open(index_path, "r", encoding="utf-8", newline="") as f:
        return IndexDocument.parse(f.read())


def add_entry(
    index_path: Path,
    date_str: str,
    rel_path: str,
    header: Optional[str] = None,
) -> IndexUpdateResult:
    """Insert the link-line for an entry into the index, at most once.

    Args:
        index_path: Path to index.md
        date_str: Entry date (YYYY-MM-DD)
        rel_path: Entry path relative to the index file
        header: Header text used when the index file does not exist yet

    Returns:
        IndexUpdateResult with the line and whether it was added

    Raises:
        NotInitializedError: If the index is missing and no header is given
    """
    if not index_path.exists():
        if header is None:
            raise NotInitializedError(f"Index not found and no header available: {index_path}")
        index_path.parent.mkdir(parents=True, exist_ok=True)
        index_path.write_text(header, encoding="utf-8")
        logger.info(f"Created missing index {index_path}")

    document = load_index(index_path)
    link = format_link_line(date_str, rel_path)

    if document.contains(link):
        logger.debug(f"Index already lists {date_str}")
        return IndexUpdateResult(line=link, added=False)

    position = document.insertion_point()
    document.insert(position, link)
    with open(index_path, "w", encoding="utf-8", newline="") as f:
        f.write(document.serialize())
    logger.debug(f"Inserted {link!r} at line {position} of {index_path}")

    return IndexUpdateResult(line=link, added=True, position=position)


def list_entries(index_path: Path) -> list[tuple[str, str]]:
    """Read the (date, path) pairs listed in the index.

    Returns an empty list when the index does not exist.
    """
    if not index_path.exists():
        return []
    return load_index(index_path).entries()
