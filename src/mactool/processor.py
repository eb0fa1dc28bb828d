# processor.py

from mactool.config_reader import Config
from mactool.mac_extractor import find_all_mac_addresses, find_mac_spans
from mactool.mac_formatter import MacFormat, extract_oui_from_mac, format_mac_address
from mactool.mactool_logger import MactoolLogger
from mactool.oui_database import FilterOptions, OuiDatabase
from mactool.output import to_csv_row

SORT_NONE = None
SORT_ASC = 'asc'
SORT_DESC = 'desc'


def sort_addresses(addresses, sort_order):
    if sort_order == SORT_ASC:
        return sorted(addresses)
    if sort_order == SORT_DESC:
        return sorted(addresses, reverse=True)
    return list(addresses)


class MacProcessor:
    """
    Runs the extract, format, lookup and vendor search commands over input
    text and writes the results to an output stream.
    """

    def __init__(self, config: Config, logger: MactoolLogger):
        self.config = config
        self.logger = logger

    def extract(self, out, text, sort_order=SORT_NONE):
        addresses = sort_addresses(find_all_mac_addresses(text), sort_order)
        self.logger.debug(f"Extracted {len(addresses)} MAC address(es)")
        for address in addresses:
            print(address, file=out)
        return addresses

    def format(self, out, text, mac_format: MacFormat):
        """
        Print the input line by line with every MAC address rewritten in
        place. A formatting error aborts the run.
        """
        if not text:
            return 0

        formatted_count = 0
        for line in text.split("\n"):
            spans = sorted(find_mac_spans(line), reverse=True)
            for start, end, address in spans:
                line = line[:start] + format_mac_address(address, mac_format) + line[end:]
                formatted_count += 1
            print(line, file=out)

        self.logger.debug(f"Formatted {formatted_count} MAC address(es)")
        return formatted_count

    def lookup(self, out, text, database: OuiDatabase, sort_order=SORT_NONE, csv_output=False):
        """
        Print every MAC address found in text with the vendor that owns its
        OUI. Addresses without a vendor are printed bare unless
        suppress_unmatched is set.
        """
        addresses = sort_addresses(find_all_mac_addresses(text), sort_order)
        matched = 0
        for address in addresses:
            vendor = database.find_by_assignment(extract_oui_from_mac(address))
            if vendor is not None:
                matched += 1
                if csv_output:
                    out.write(to_csv_row([address, vendor.assignment, vendor.organization, vendor.address]))
                else:
                    print(f"{address} ({vendor.organization})", file=out)
            elif not self.config.suppress_unmatched:
                if csv_output:
                    out.write(to_csv_row([address]))
                else:
                    print(address, file=out)

        self.logger.debug(f"Matched {matched} of {len(addresses)} MAC address(es) to a vendor")
        return matched

    def lookup_vendor(self, out, query, database: OuiDatabase, filters: FilterOptions = None,
                      sort_order=SORT_NONE, csv_output=False):
        vendors = database.find_all_vendors(query, filters)
        if sort_order == SORT_ASC:
            vendors.sort()
        elif sort_order == SORT_DESC:
            vendors.sort(descending=True)

        for vendor in vendors:
            if csv_output:
                out.write(to_csv_row([vendor.assignment, vendor.organization, vendor.address]))
            else:
                out.write(f"{vendor.assignment} {vendor.organization}\n")

        self.logger.debug(f"Found {len(vendors)} vendor(s) matching {query!r}")
        return len(vendors)
