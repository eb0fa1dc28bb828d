# oui_database.py

import csv
import os
import shutil
import sys
import tempfile
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

import requests

from mactool.config import DEFAULT_OUI_URL


class DatabaseDownloadError(Exception):
    """Raised when the OUI database could not be downloaded."""


@dataclass(frozen=True)
class OuiEntry:
    assignment: str     # e.g. "00005E"
    organization: str
    address: str

    def contains(self, text: str) -> bool:
        """Case-insensitive substring match against all three fields."""
        text = text.lower()
        return (text in self.assignment.lower()
                or text in self.organization.lower()
                or text in self.address.lower())


@dataclass(frozen=True)
class FilterOptions:
    """Columns to search. When none is set, every column is searched."""
    assignment: bool = False
    organization: bool = False
    address: bool = False

    def any_selected(self) -> bool:
        return self.assignment or self.organization or self.address


class OuiDatabase:
    """
    In-memory copy of the IEEE OUI CSV table
    (Registry, Assignment, Organization Name, Organization Address).
    """

    def __init__(self, entries: Optional[Iterable[OuiEntry]] = None):
        self.entries: List[OuiEntry] = list(entries or [])

    def __len__(self):
        return len(self.entries)

    def __iter__(self) -> Iterator[OuiEntry]:
        return iter(self.entries)

    @classmethod
    def load(cls, stream, logger=None) -> "OuiDatabase":
        entries = []
        for line_number, row in enumerate(csv.reader(stream), start=1):
            if len(row) < 4:
                if logger:
                    logger.debug(f"Skipping OUI row {line_number}: expected 4 columns, got {len(row)}")
                continue
            if line_number == 1 and row[1].strip().lower() == "assignment":
                continue
            entries.append(OuiEntry(assignment=row[1], organization=row[2], address=row[3]))
        return cls(entries)

    @classmethod
    def load_file(cls, path, logger=None) -> "OuiDatabase":
        with open(path, 'r', encoding='utf-8', newline='') as f:
            return cls.load(f, logger)

    def find_by_assignment(self, assignment: str) -> Optional[OuiEntry]:
        # The assignment column is trusted to be uppercase hex already.
        for entry in self.entries:
            if entry.assignment == assignment:
                return entry
        return None

    def find_all_vendors(self, text: str, filters: Optional[FilterOptions] = None) -> "OuiDatabase":
        filters = filters or FilterOptions()
        if not filters.any_selected():
            return OuiDatabase(entry for entry in self.entries if entry.contains(text))

        text = text.lower()
        results = []
        for entry in self.entries:
            if ((filters.assignment and text in entry.assignment.lower())
                    or (filters.organization and text in entry.organization.lower())
                    or (filters.address and text in entry.address.lower())):
                results.append(entry)
        return OuiDatabase(results)

    def sort(self, descending=False) -> "OuiDatabase":
        self.entries.sort(key=lambda entry: entry.assignment, reverse=descending)
        return self


def default_database_path() -> str:
    """
    Location of the OUI CSV file:
      Windows: %LOCALAPPDATA%\\Mactool\\oui.csv
      Others:  ~/.local/share/mactool/oui.csv
    """
    home_dir = os.path.expanduser('~')
    if not home_dir or home_dir == '~':
        return 'oui.csv'

    if sys.platform.startswith('win'):
        data_dir = os.path.join(home_dir, 'AppData', 'Local', 'Mactool')
    else:
        data_dir = os.path.join(home_dir, '.local', 'share', 'mactool')
    return os.path.join(data_dir, 'oui.csv')


def download_database(url, destination, progress=None, chunk_size=8192):
    """
    Download the OUI CSV from url into destination. The body is streamed to a
    temporary file first so a failed download never leaves a partial database.
    """
    progress = sys.stderr if progress is None else progress
    tmp_path = None
    try:
        with requests.get(url, stream=True, timeout=30) as r:
            r.raise_for_status()
            total = int(r.headers.get('Content-Length') or 0)
            downloaded = 0

            with tempfile.NamedTemporaryFile('wb', suffix='.csv', delete=False) as tmp:
                tmp_path = tmp.name
                for chunk in r.iter_content(chunk_size=chunk_size):
                    if not chunk:
                        continue
                    tmp.write(chunk)
                    downloaded += len(chunk)
                    if total:
                        progress.write(f"\rDownload Progress: {downloaded / total * 100:.2f}%")
            if total:
                progress.write("\n")

        dest_dir = os.path.dirname(destination)
        if dest_dir:
            os.makedirs(dest_dir, exist_ok=True)
        shutil.copyfile(tmp_path, destination)
    except requests.RequestException as e:
        raise DatabaseDownloadError(f"failed to download database file from {url}: {e}") from e
    finally:
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)
    return destination


def _ask_to_download(csv_file) -> bool:
    print(f"The file '{csv_file}' could not be found.", file=sys.stderr)
    if not sys.stdin or not sys.stdin.isatty():
        return True
    print("Would you like to download it? (Y/n): ", end='', file=sys.stderr, flush=True)
    try:
        answer = input().strip()
    except EOFError:
        answer = ''
    return answer not in ('n', 'N')


def update_database(csv_file, url=DEFAULT_OUI_URL, logger=None, confirm=None) -> bool:
    """
    Make sure csv_file exists, downloading it once from url if it is missing.
    Returns False when the user declined the download.
    """
    if os.path.exists(csv_file):
        return True

    confirm = confirm or _ask_to_download
    if not confirm(csv_file):
        if logger:
            logger.info("File download cancelled.")
        return False

    if logger:
        logger.info(f"Downloading OUI database from {url}")
    download_database(url, csv_file)
    if logger:
        logger.info(f"OUI database saved to: {csv_file}")
    return True
