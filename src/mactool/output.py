# output.py

import csv
import io
import sys
from contextlib import contextmanager


@contextmanager
def open_output(filename=None, append=False):
    """
    Yield the output stream: stdout when no filename is given, otherwise the
    file opened for appending or truncation. stdout is never closed.
    """
    if not filename:
        yield sys.stdout
        return

    mode = 'a' if append else 'w'
    with open(filename, mode, encoding='utf-8') as out:
        yield out


def to_csv_row(values):
    """Render values as one CSV record (with trailing newline)."""
    if not values:
        return ''
    buffer = io.StringIO()
    csv.writer(buffer, lineterminator='\n').writerow(values)
    return buffer.getvalue()
