# mac_formatter.py

import re
from dataclasses import dataclass
from enum import Enum

NON_HEX = re.compile(r'[^0-9A-Fa-f]')
NON_ALNUM = re.compile(r'[^0-9A-Za-z]')

DELIMITERS = (':', '-', '.')
VALID_GROUP_SIZES = (2, 4, 6)


class MacAddressError(ValueError):
    """Base class for MAC address validation failures."""


class InvalidMacAddressError(MacAddressError):
    def __init__(self, mac_address=''):
        super().__init__(f"invalid MAC address: {mac_address!r}")


class InvalidMacAddressLengthError(MacAddressError):
    def __init__(self, mac_address='', group_size=0):
        super().__init__(
            f"invalid MAC address length for {mac_address!r}; "
            f"must be divisible by group size {group_size}"
        )


class InvalidGroupSizeError(MacAddressError):
    def __init__(self, group_size=None):
        super().__init__(f"invalid group size {group_size!r}; must be 2, 4 or 6")


class InvalidCaseOptionError(MacAddressError):
    def __init__(self, option=None):
        super().__init__(f"invalid case option: {option!r}")


class InvalidDelimiterOptionError(MacAddressError):
    def __init__(self, option=None):
        super().__init__(f"invalid delimiter option: {option!r}")


class CaseOption(Enum):
    ORIGINAL = 'original'
    UPPER = 'upper'
    LOWER = 'lower'

    @classmethod
    def coerce(cls, value):
        if value is None:
            return cls.ORIGINAL
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise InvalidCaseOptionError(value) from None


class DelimiterOption(Enum):
    ORIGINAL = 'original'
    COLON = ':'
    HYPHEN = '-'
    DOT = '.'
    NONE = ''

    @classmethod
    def coerce(cls, value):
        if value is None:
            return cls.ORIGINAL
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.lower() == 'none':
            return cls.NONE
        try:
            return cls(value)
        except ValueError:
            raise InvalidDelimiterOptionError(value) from None


class GroupSizeOption(Enum):
    ORIGINAL = 'original'
    TWO = 2
    FOUR = 4
    SIX = 6

    @classmethod
    def coerce(cls, value):
        if value is None:
            return cls.ORIGINAL
        if isinstance(value, cls):
            return value
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            raise InvalidGroupSizeError(value) from None


@dataclass(frozen=True)
class MacFormat:
    """
    Target notation for a MAC address. Every dimension defaults to ORIGINAL,
    meaning the value is taken from the address being formatted. Plain values
    ('upper', ':', 4, ...) are accepted and converted to their enum members.
    """
    case: CaseOption = CaseOption.ORIGINAL
    delimiter: DelimiterOption = DelimiterOption.ORIGINAL
    group_size: GroupSizeOption = GroupSizeOption.ORIGINAL

    def __post_init__(self):
        object.__setattr__(self, 'case', CaseOption.coerce(self.case))
        object.__setattr__(self, 'delimiter', DelimiterOption.coerce(self.delimiter))
        object.__setattr__(self, 'group_size', GroupSizeOption.coerce(self.group_size))


def clean_mac_address(mac_address: str) -> str:
    """Remove every non-hexadecimal character."""
    return NON_HEX.sub('', mac_address)


def find_mac_delimiter(mac_address: str) -> str:
    """Return the first of ':', '-', '.' present in the address, or ''."""
    for delimiter in DELIMITERS:
        if delimiter in mac_address:
            return delimiter
    return ''


def get_group_size(mac_address: str) -> int:
    """
    Infer the number of characters per group from the delimiters present.
    An address without delimiters has no inferable group size.
    """
    stripped = NON_ALNUM.sub('', mac_address)
    delimiter_count = len(mac_address) - len(stripped)
    if delimiter_count == 0:
        raise InvalidMacAddressError(mac_address)

    group_size = len(stripped) // (delimiter_count + 1)
    if group_size not in VALID_GROUP_SIZES:
        raise InvalidMacAddressError(mac_address)
    return group_size


def format_with_delimiters(mac_address: str, delimiter: str, group_size: int) -> str:
    if group_size not in VALID_GROUP_SIZES:
        raise InvalidGroupSizeError(group_size)

    cleaned = clean_mac_address(mac_address)
    if len(cleaned) % group_size != 0:
        raise InvalidMacAddressLengthError(mac_address, group_size)

    groups = [cleaned[i:i + group_size] for i in range(0, len(cleaned), group_size)]
    return delimiter.join(groups)


def format_mac_address(mac_address: str, mac_format: MacFormat) -> str:
    """
    Rewrite a single MAC address according to mac_format.

    Example: format_mac_address('00:1A:2B:3C:4D:5E',
                                MacFormat(CaseOption.UPPER, ':', 4))
             returns '001A:2B3C:4D5E'
    """
    case = mac_format.case
    if case is CaseOption.UPPER:
        mac_address = mac_address.upper()
    elif case is CaseOption.LOWER:
        mac_address = mac_address.lower()
    elif case is not CaseOption.ORIGINAL:
        raise InvalidCaseOptionError(case)

    delimiter = mac_format.delimiter
    if delimiter is DelimiterOption.ORIGINAL:
        delimiter_str = find_mac_delimiter(mac_address)
    elif isinstance(delimiter, DelimiterOption):
        delimiter_str = delimiter.value
    else:
        raise InvalidDelimiterOptionError(delimiter)

    group_size = mac_format.group_size
    if group_size is GroupSizeOption.ORIGINAL:
        size = get_group_size(mac_address)
    elif isinstance(group_size, GroupSizeOption):
        size = group_size.value
    else:
        raise InvalidGroupSizeError(group_size)

    return format_with_delimiters(mac_address, delimiter_str, size)


def extract_oui_from_mac(mac_address: str) -> str:
    """
    Return the 6-character organizational prefix of a MAC address,
    uppercase and without delimiters, e.g. '00-00-5e-00-53-01' -> '00005E'.
    """
    cleaned = clean_mac_address(mac_address.upper())
    if len(cleaned) < 12:
        raise InvalidMacAddressError(mac_address)
    return cleaned[:6]
