# mac_extractor.py

import re
from typing import List, Pattern, Tuple

HEX = '[0-9A-Fa-f]'

# Replaces consumed characters so offsets stay stable between passes.
CONSUMED = '\x00'


def _build_pattern(group_count: int, group_size: int) -> Pattern:
    """
    Compile a matcher for exactly group_count groups of group_size hex
    characters joined by one delimiter (':', '-' or '.') used throughout.
    """
    group = f'{HEX}{{{group_size}}}'
    return re.compile(
        rf'(?<!{HEX})'
        rf'({group}(?P<delim>[:.-])(?:{group}(?P=delim)){{{group_count - 2}}}{group})'
        rf'(?!{HEX})'
    )


class MACExtractor:
    """
    Finds MAC/EUI addresses in free-form text.

    Patterns are tried from the most character-consuming to the least. Spans
    matched by one pattern are masked out of the scan buffer before the next
    pattern runs, so an 8-group EUI-64 is never reported as a 6-group EUI-48
    plus leftovers.
    """

    MAC_SYSTEMS = (
        (20, 2),  # IPoIB  : 00:00:00:00:fe:80:00:00:00:00:00:00:02:00:5e:10:00:00:00:01
        (10, 4),  # IPoIB  : 0000.0000.fe80.0000.0000.0000.0200.5e10.0000.0001
        (8, 2),   # EUI-64 : 02:00:5e:10:00:00:00:01
        (4, 4),   # EUI-64 : 0200.5e10.0000.0001
        (6, 2),   # EUI-48 : 00:00:5e:00:53:01
        (3, 4),   # EUI-48 : 0000.5e00.5301
        (2, 6),   # EUI-48 : 00005e-005301
    )

    PATTERNS = tuple(_build_pattern(count, size) for count, size in MAC_SYSTEMS)

    @classmethod
    def find_spans(cls, text: str) -> List[Tuple[int, int, str]]:
        """
        Return (start, end, address) for every address found in text.

        Results are grouped by pattern, most specific first, and ordered
        left-to-right within a pattern.
        """
        spans = []
        if not text:
            return spans

        buffer = text
        for pattern in cls.PATTERNS:
            found = [(m.start(1), m.end(1)) for m in pattern.finditer(buffer)]
            if not found:
                continue

            pieces = []
            cursor = 0
            for start, end in found:
                spans.append((start, end, text[start:end]))
                pieces.append(buffer[cursor:start])
                pieces.append(CONSUMED * (end - start))
                cursor = end
            pieces.append(buffer[cursor:])
            buffer = ''.join(pieces)

        return spans

    @classmethod
    def find_all(cls, text: str) -> List[str]:
        return [address for _, _, address in cls.find_spans(text)]


def find_all_mac_addresses(text: str) -> List[str]:
    """Return the MAC addresses found in text (see MACExtractor.find_spans)."""
    return MACExtractor.find_all(text)


def find_mac_spans(text: str) -> List[Tuple[int, int, str]]:
    return MACExtractor.find_spans(text)
