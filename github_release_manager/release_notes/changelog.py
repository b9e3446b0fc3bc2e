"""Reads, edits and writes the changelog file.

The file is parsed into a preamble (anything before the first level-two
heading) followed by entries. Every line that starts with ``## `` opens a new
entry, and an entry runs until the next such line or the end of the file, so
the newest and oldest entries need no special casing. Entries whose heading is
``## v<version> ...`` can be looked up by version; lookups compare the whole
version token, never a prefix of it.
"""

import os
import shutil
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

import structlog

from github_release_manager.exceptions import ChangelogEntryNotFoundError
from github_release_manager.utils.constants import ENTRY_HEADING_PREFIX, VERSION_HEADING_PATTERN

logger = structlog.get_logger(__name__)

DEFAULT_FILE_MODE = 0o666


def _current_umask() -> int:
    """Return the process umask (it can only be read by setting it)."""
    umask = os.umask(0)
    os.umask(umask)
    return umask


@dataclass(frozen=True)
class ChangelogEntry:
    """One heading-delimited block of the changelog."""

    text: str

    @property
    def heading(self) -> str:
        """The entry's heading line, without its line ending."""
        return self.text.splitlines()[0]

    @property
    def body(self) -> str:
        """Everything after the heading line."""
        _, _, body = self.text.partition("\n")
        return body

    @property
    def version(self) -> str | None:
        """The version named by the heading, or None for non-release headings."""
        match = VERSION_HEADING_PATTERN.match(self.heading)
        if match is None:
            return None
        return match.group("version")


def parse_changelog(content: str) -> tuple[str, list[ChangelogEntry]]:
    """Split changelog text into its preamble and its entries, newest first."""
    preamble_lines: list[str] = []
    entries: list[list[str]] = []
    for line in content.splitlines(keepends=True):
        if line.startswith(ENTRY_HEADING_PREFIX):
            entries.append([line])
        elif entries:
            entries[-1].append(line)
        else:
            preamble_lines.append(line)
    return "".join(preamble_lines), [ChangelogEntry("".join(lines)) for lines in entries]


class ChangelogFile:
    """In-memory view of a changelog file that can be flushed back to disk."""

    def __init__(self, path: Path, content: str = "") -> None:
        """Initialize with the file path and its current content."""
        self.path = path
        self._original_content = content
        self._content = content

    @classmethod
    def load(cls, path: Path | str) -> "ChangelogFile":
        """Load a changelog from disk; a missing file is treated as empty."""
        path = Path(path)
        if path.exists():
            content = path.read_text(encoding="utf-8")
        else:
            logger.info("Changelog file does not exist yet, starting empty", path=str(path))
            content = ""
        return cls(path, content)

    @property
    def content(self) -> str:
        """The full (possibly modified) changelog text."""
        return self._content

    @property
    def modified(self) -> bool:
        """True if the content differs from what was loaded."""
        return self._content != self._original_content

    @property
    def entries(self) -> list[ChangelogEntry]:
        """All entries in file order, newest first."""
        _, entries = parse_changelog(self._content)
        return entries

    def find_entry(self, version: str) -> ChangelogEntry | None:
        """Return the first entry whose heading names exactly this version."""
        version = version.removeprefix("v")
        for entry in self.entries:
            if entry.version == version:
                return entry
        return None

    def exists(self, version: str) -> bool:
        """Return True if an entry for the version is present."""
        return self.find_entry(version) is not None

    def prepend(self, text: str) -> None:
        """Insert text before all existing content."""
        if text and not text.endswith("\n"):
            text += "\n"
        self._content = text + self._content
        logger.info("Prepended changelog entry", path=str(self.path), length=len(text))

    def remove(self, version: str) -> None:
        """Delete the entry for a version; an absent version leaves the text untouched."""
        version = version.removeprefix("v")
        preamble, entries = parse_changelog(self._content)
        for index, entry in enumerate(entries):
            if entry.version == version:
                break
        else:
            logger.warning("No changelog entry to remove", version=version)
            return

        del entries[index]
        self._content = preamble + "".join(entry.text for entry in entries)
        logger.info("Removed changelog entry", path=str(self.path), version=version)

    def extract_text(self, version: str, include_heading: bool = True) -> str:
        """Return the raw text of a version's entry, up to the next heading or end of file."""
        entry = self.find_entry(version)
        if entry is None:
            raise ChangelogEntryNotFoundError(version.removeprefix("v"))
        text = entry.text if include_heading else entry.body
        return text.strip("\n")

    def save(self) -> None:
        """Atomically write the content back to the file."""
        directory = self.path.parent
        directory.mkdir(parents=True, exist_ok=True)
        descriptor, temporary_path = tempfile.mkstemp(dir=directory, prefix=f".{self.path.name}.")
        try:
            with os.fdopen(descriptor, "w", encoding="utf-8") as handle:
                handle.write(self._content)
            # mkstemp creates files as 0600; keep the mode the changelog already had.
            if self.path.exists():
                shutil.copymode(self.path, temporary_path)
            else:
                os.chmod(temporary_path, DEFAULT_FILE_MODE & ~_current_umask())
            os.replace(temporary_path, self.path)
        except BaseException:
            os.unlink(temporary_path)
            raise
        self._original_content = self._content
        logger.debug("Saved changelog", path=str(self.path), length=len(self._content))


@contextmanager
def open_changelog(path: Path | str) -> Iterator[ChangelogFile]:
    """Load the changelog, yield it for editing, and save it if it changed.

    Nothing is written when the block raises.
    """
    changelog = ChangelogFile.load(path)
    yield changelog
    if changelog.modified:
        changelog.save()
