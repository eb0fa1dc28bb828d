import pytest

from mactool.mac_extractor import MACExtractor, find_all_mac_addresses, find_mac_spans


@pytest.mark.parametrize("text, expected", [
    ("", []),
    ("00:00:5e:00:53:01", ["00:00:5e:00:53:01"]),
    ("00:00:5E:00:53:01", ["00:00:5E:00:53:01"]),
    ("02:00:5e:10:00:00:00:01", ["02:00:5e:10:00:00:00:01"]),
    ("00-00-5e-00-53-01", ["00-00-5e-00-53-01"]),
    ("02-00-5e-10-00-00-00-01", ["02-00-5e-10-00-00-00-01"]),
    ("0000.5e00.5301", ["0000.5e00.5301"]),
    ("0200.5e10.0000.0001", ["0200.5e10.0000.0001"]),
    ("0000-5e00-5301", ["0000-5e00-5301"]),
    ("0200-5e10-0000-0001", ["0200-5e10-0000-0001"]),
    ("00005E-005301", ["00005E-005301"]),
    ("MAC 1: 00:00:5E:00:53:01 and MAC 2: 0000.5E00.5301, done.",
     ["00:00:5E:00:53:01", "0000.5E00.5301"]),
    ("And a string without any addresses.", []),
])
def test_find_all_mac_addresses(text, expected):
    assert find_all_mac_addresses(text) == expected


def test_two_addresses_in_one_sentence():
    text = "First MAC address 00:00:5e:00:53:01 and second MAC address 00-00-5E-00-53-02."
    assert find_all_mac_addresses(text) == ["00:00:5e:00:53:01", "00-00-5E-00-53-02"]


def test_ipoib_addresses():
    colon = "00:00:00:00:fe:80:00:00:00:00:00:00:02:00:5e:10:00:00:00:01"
    dotted = "0000.0000.fe80.0000.0000.0000.0200.5e10.0000.0001"
    assert find_all_mac_addresses(f"ib0 {colon} ib1 {dotted}") == [colon, dotted]


def test_eui64_is_not_split_into_eui48():
    assert find_all_mac_addresses("0200.5e10.0000.0001") == ["0200.5e10.0000.0001"]
    assert find_all_mac_addresses("02:00:5e:10:00:00:00:01") == ["02:00:5e:10:00:00:00:01"]


def test_results_are_grouped_by_pattern():
    # The 3x4 address comes first in the text but a 6x2 match is more specific.
    text = "first 0000.5e00.5301 then 00:00:5e:00:53:01"
    assert find_all_mac_addresses(text) == ["00:00:5e:00:53:01", "0000.5e00.5301"]


def test_mixed_delimiters_are_rejected():
    assert find_all_mac_addresses("00:00-5e:00.53:01") == []


def test_plain_hex_run_is_not_an_address():
    assert find_all_mac_addresses("serial 001122334455 end") == []


def test_longer_hex_groups_are_not_truncated():
    assert find_all_mac_addresses("000:00:5e:00:53:011") == []


def test_extra_trailing_group_is_left_out():
    # Only hex neighbours block a match; a seventh group stays outside the address.
    assert find_all_mac_addresses("00:00:5e:00:53:01:02") == ["00:00:5e:00:53:01"]


def test_spans_point_into_source_and_never_overlap():
    text = ("a 02:00:5e:10:00:00:00:01 b 00:00:5e:00:53:01 "
            "c 0000.5e00.5301 d 00005e-005301")
    spans = find_mac_spans(text)
    assert [address for _, _, address in spans] == [
        "02:00:5e:10:00:00:00:01", "00:00:5e:00:53:01", "0000.5e00.5301", "00005e-005301",
    ]
    for start, end, address in spans:
        assert text[start:end] == address

    ordered = sorted(spans)
    for (_, prev_end, _), (next_start, _, _) in zip(ordered, ordered[1:]):
        assert prev_end <= next_start


def test_find_all_matches_spans():
    text = "eth0 00:00:5e:00:53:01 eth1 0000.5e00.5302"
    assert MACExtractor.find_all(text) == [address for _, _, address in find_mac_spans(text)]
