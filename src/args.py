"""Argument parsing functionality for freecheck."""

import argparse


def _add_common(parser):
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default='WARNING')
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)


def build_parser():
    """Build the argument parser (exposed for tests)."""
    parser = argparse.ArgumentParser(
        prog="freecheck",
        description=(
            "freecheck - compare package versions and vote on project freedom"
        ),
        add_help=True,
    )
    sub = parser.add_subparsers(dest="COMMAND", required=True)

    compare = sub.add_parser("compare", help="Compare two version strings (prints <, = or >)")
    compare.add_argument("V1", help="First version")
    compare.add_argument("V2", help="Second version")
    _add_common(compare)

    sort = sub.add_parser("sort", help="Print versions from oldest to newest")
    sort.add_argument("VERSIONS", nargs="+", help="Versions to sort")
    sort.add_argument("-r", "--reverse",
                      dest="REVERSE",
                      help="Newest first",
                      action="store_true")
    _add_common(sort)

    filt = sub.add_parser("filter", help="Print versions satisfying a constraint, e.g. '<=1.2'")
    filt.add_argument("CONSTRAINT", help="Operator prefixed version (<, <=, >, >=, =, ==, !=)")
    filt.add_argument("VERSIONS", nargs="+", help="Candidate versions")
    _add_common(filt)

    check = sub.add_parser("check", help="Vote on the freedom of packages or projects in a JSON file")
    check.add_argument("INPUT",
                       help="JSON file with a package, a project, or a list of either ('-' for stdin)")
    check.add_argument("-c", "--config",
                       dest="CONFIG",
                       help="Path to configuration file (YAML)",
                       action="store",
                       type=str)
    check.add_argument("--threshold",
                       dest="THRESHOLD",
                       help="Share of free votes a project must exceed to be free (default: 0.5)",
                       action="store",
                       type=float)
    check.add_argument("--offline",
                       dest="OFFLINE",
                       help="Do not download Gentoo license groups; Gentoo abstains",
                       action="store_true")
    check.add_argument("--gentoo-license-groups-url",
                       dest="GENTOO_URL",
                       help="Override the Gentoo license_groups URL",
                       action="store",
                       type=str)
    _add_common(check)

    return parser


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    return build_parser().parse_args(argv)
