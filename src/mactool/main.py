#!/usr/bin/env python3
import argparse
import sys

from mactool import __version__
from mactool.config import DEFAULT_CONFIG_PATH
from mactool.config_reader import ConfigReader
from mactool.info import print_config_debug, print_config_info, print_database_info
from mactool.input_reader import acquire_input
from mactool.mac_formatter import MacAddressError, MacFormat
from mactool.mactool_logger import MactoolLogger
from mactool.oui_database import DatabaseDownloadError, FilterOptions, OuiDatabase, update_database
from mactool.output import open_output
from mactool.processor import SORT_ASC, SORT_DESC, SORT_NONE, MacProcessor

SCRIPT_VERSION = __version__

INTERACTIVE_HINT = """\
Interactive mode:
  mactool {command}

Use interactive mode when you intend to conveniently paste and
process output from a network device containing MAC addresses."""

EXTRACT_EXAMPLES = """\
examples:
  mactool extract 0000.5e00.5301 00:00:5e:00:53:01 0000-5e00-5301 00-00-5e-00-53-01
  mactool extract First address 0000.5E00.5301, second address 00:00:5e:00:53:01, etc.
  cat macs.txt | mactool extract
  ipconfig /all | mactool extract

""" + INTERACTIVE_HINT.format(command="extract")

FORMAT_EXAMPLES = """\
examples:
  mactool format 00:00:5e:00:53:01 --lower --delimiter . --group-size 4
  mactool format First address 0000.5E00.5301, second address 00:00:5e:00:53:01 -u -d - -g 2
  cat macs.txt | mactool format --lower --delimiter :
  ip addr | mactool format

""" + INTERACTIVE_HINT.format(command="format")

LOOKUP_EXAMPLES = """\
examples:
  mactool lookup 00:00:5e:00:53:01
  mactool lookup First address 0000.5E00.5301, second address 00:00:5e:00:53:01, etc.
  cat macs.txt | mactool lookup
  ip addr | mactool lookup
  mactool lookup vendor cisco

""" + INTERACTIVE_HINT.format(command="lookup")

VENDOR_EXAMPLES = """\
examples:
  mactool lookup vendor cisco
  mactool lookup vendor --assignment 00000C
  mactool lookup vendor --organization "Cisco Systems"
  mactool lookup vendor --address "San Jose"
"""


def add_sort_arguments(parser):
    group = parser.add_mutually_exclusive_group()
    group.add_argument("-s", "--sort-asc", action="store_true", help="sort output in ascending order")
    group.add_argument("-S", "--sort-desc", action="store_true", help="sort output in descending order")


def add_io_arguments(parser, input_file=True):
    if input_file:
        parser.add_argument("-i", "--input-file", help="read input from file")
    parser.add_argument("-o", "--output-file", help="write output to file")
    parser.add_argument("-a", "--append", action="store_true",
                        help="append when writing to file with --output-file")


def add_database_arguments(parser):
    parser.add_argument("-f", "--csv-file", help="path to the OUI CSV database file")
    parser.add_argument("--oui-url", help="URL the OUI CSV database is downloaded from")
    parser.add_argument("-u", "--suppress-unmatched", action="store_true", default=None,
                        help="suppress unmatched MAC addresses from output")
    parser.add_argument("--csv", action="store_true", help="print results as CSV")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="mactool",
        description="Extract, format and look up vendors of MAC addresses found in text."
    )
    parser.add_argument("--config", help=f"path to config file (default {DEFAULT_CONFIG_PATH})")
    parser.add_argument("--debug", action="store_true", default=None,
                        help="print configuration debug information")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", action="store_true", help="enable verbose logging")
    verbosity.add_argument("--quiet", action="store_true", help="only log errors")
    parser.add_argument("--version", action="version", version=f"mactool {SCRIPT_VERSION}")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    formatter = argparse.RawDescriptionHelpFormatter

    extract = subparsers.add_parser(
        "extract", help="extract MAC addresses from the input string",
        description="Extract MAC addresses from the input string. Input is taken from command "
                    "line arguments, an input file, standard input or interactive input.",
        epilog=EXTRACT_EXAMPLES, formatter_class=formatter)
    extract.add_argument("input", nargs="*", help="input text")
    add_sort_arguments(extract)
    add_io_arguments(extract)

    fmt = subparsers.add_parser(
        "format", help="change format of MAC addresses in the input string",
        description="Find MAC addresses in the input string, reformat them according to the "
                    "given flags and print the input with the addresses replaced.",
        epilog=FORMAT_EXAMPLES, formatter_class=formatter)
    fmt.add_argument("input", nargs="*", help="input text")
    case = fmt.add_mutually_exclusive_group()
    case.add_argument("-u", "--upper", action="store_true", help="convert MAC addresses to upper case")
    case.add_argument("-l", "--lower", action="store_true", help="convert MAC addresses to lower case")
    fmt.add_argument("-d", "--delimiter",
                     help="delimiter between hex groups: ':', '-', '.' or 'none' (default: keep)")
    fmt.add_argument("-g", "--group-size", type=int,
                     help="number of characters in each hex group: 2, 4 or 6 (default: keep)")
    add_io_arguments(fmt)

    lookup = subparsers.add_parser(
        "lookup", help="look up vendors of MAC addresses in the input string",
        description="Extract MAC addresses from the input string and look up their vendors "
                    "in the OUI database. Use 'mactool lookup vendor' to search vendors.",
        epilog=LOOKUP_EXAMPLES, formatter_class=formatter)
    lookup.add_argument("input", nargs="*", help="input text")
    add_database_arguments(lookup)
    add_sort_arguments(lookup)
    add_io_arguments(lookup)

    vendor = subparsers.add_parser(
        "lookup-vendor", prog="mactool lookup vendor",
        help="find all the OUIs belonging to a vendor (also: lookup vendor)",
        description="Find all the OUIs belonging to a vendor or organization. All columns are "
                    "searched unless a column flag is given. The search is case-insensitive "
                    "and matches partial strings.",
        epilog=VENDOR_EXAMPLES, formatter_class=formatter)
    vendor.add_argument("query", nargs="*", help="text to search for")
    vendor.add_argument("--assignment", action="store_true",
                        help='search in assignment column (e.g. "A1B2C3")')
    vendor.add_argument("--organization", action="store_true", help="search in organization column")
    vendor.add_argument("--address", action="store_true", help="search in address column")
    add_database_arguments(vendor)
    add_sort_arguments(vendor)
    add_io_arguments(vendor, input_file=False)
    vendor.set_defaults(print_help=vendor.print_help)

    subparsers.add_parser(
        "info", help="print configuration and database information",
        description="Display the configuration file, environment variables and details about "
                    "the OUI database file.")

    return parser


def normalize_argv(argv):
    # "lookup vendor ..." is routed to the lookup-vendor parser.
    argv = list(argv)
    i = 0
    while i < len(argv):
        token = argv[i]
        if token == "--config":
            i += 2
            continue
        if token.startswith("-"):
            i += 1
            continue
        if token == "lookup" and argv[i + 1:i + 2] == ["vendor"]:
            argv[i:i + 2] = ["lookup-vendor"]
        break
    return argv


def parse_args(argv=None):
    parser = build_parser()
    argv = sys.argv[1:] if argv is None else argv
    return parser, parser.parse_args(normalize_argv(argv))


def sort_order(args):
    if getattr(args, "sort_asc", False):
        return SORT_ASC
    if getattr(args, "sort_desc", False):
        return SORT_DESC
    return SORT_NONE


def load_database(config, logger):
    if not update_database(config.csv_file, config.oui_url, logger):
        return None
    database = OuiDatabase.load_file(config.csv_file, logger)
    logger.debug(f"Loaded {len(database)} OUI entries from {config.csv_file}")
    return database


def run_extract(args, config, processor, logger):
    text = acquire_input(args.input, args.input_file)
    with open_output(args.output_file, args.append) as out:
        processor.extract(out, text, sort_order(args))
    return 0


def run_format(args, config, processor, logger):
    case = "upper" if args.upper else "lower" if args.lower else None
    mac_format = MacFormat(case=case, delimiter=args.delimiter, group_size=args.group_size)

    text = acquire_input(args.input, args.input_file)
    with open_output(args.output_file, args.append) as out:
        processor.format(out, text, mac_format)
    return 0


def run_lookup(args, config, processor, logger):
    text = acquire_input(args.input, args.input_file)
    database = load_database(config, logger)
    if database is None:
        return 0
    with open_output(args.output_file, args.append) as out:
        processor.lookup(out, text, database, sort_order(args), args.csv)
    return 0


def run_lookup_vendor(args, config, processor, logger):
    query = " ".join(args.query)
    if not query:
        args.print_help()
        return 0

    database = load_database(config, logger)
    if database is None:
        return 0
    filters = FilterOptions(assignment=args.assignment, organization=args.organization,
                            address=args.address)
    with open_output(args.output_file, args.append) as out:
        processor.lookup_vendor(out, query, database, filters, sort_order(args), args.csv)
    return 0


def run_info(args, config, processor, logger):
    print(f"mactool {SCRIPT_VERSION}")
    print()
    print_config_info(sys.stdout, config)
    print()
    print_database_info(sys.stdout, config, logger)
    return 0


COMMANDS = {
    "extract": run_extract,
    "format": run_format,
    "lookup": run_lookup,
    "lookup-vendor": run_lookup_vendor,
    "info": run_info,
}


def main(argv=None):
    parser, args = parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    log_level = "verbose" if args.verbose else "quiet" if args.quiet else None

    # Command line flags take precedence over the environment and config file
    overrides = {
        "csv_file": getattr(args, "csv_file", None),
        "oui_url": getattr(args, "oui_url", None),
        "suppress_unmatched": getattr(args, "suppress_unmatched", None),
        "debug": args.debug,
        "log_level": log_level,
    }
    config = ConfigReader(DEFAULT_CONFIG_PATH).read_config(args.config, overrides=overrides)

    logger = MactoolLogger(log_level=config.log_level)
    if not config.config_found:
        logger.debug(f"Configuration file not found: {config.config_path}. Using default settings.")
    if config.debug:
        print_config_debug(sys.stderr, config)

    processor = MacProcessor(config, logger)
    command = COMMANDS[args.command]

    try:
        return command(args, config, processor, logger)
    except MacAddressError as e:
        logger.error(str(e))
    except DatabaseDownloadError as e:
        logger.error(str(e))
    except OSError as e:
        logger.error(str(e))
    except KeyboardInterrupt:
        return 130
    return 1


if __name__ == "__main__":
    sys.exit(main())
