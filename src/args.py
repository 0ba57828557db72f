"""Argument parsing functionality for specresolve."""

import argparse
from constants import Constants
from specifier.cdn import valid_cdns


def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="specresolve",
        description=(
            "specresolve - Resolve npm:, jsr: and local specifiers to files or CDN URLs"
        ),
        add_help=True,
    )

    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument("-s", "--specifier",
                             dest="SPECIFIERS",
                             help="Specifier to resolve, i.e: npm:@scope/pkg/tokens.json (repeatable)",
                             action="append", type=str)
    input_group.add_argument("-l", "--load_list",
                             dest="LIST_FROM_FILE",
                             help="Load list of specifiers from a file (one per line)",
                             action="store", type=str)
    input_group.add_argument("--from-config",
                             dest="FROM_CONFIG",
                             help="Resolve the files listed in .config/design-tokens.{yaml,yml,json}",
                             action="store_true")

    parser.add_argument("-r", "--root",
                        dest="ROOT",
                        help="Directory to start node_modules lookup from (default: current directory)",
                        action="store", type=str)
    parser.add_argument("--jsr",
                        dest="JSR_MODE",
                        help="How to handle jsr: specifiers (compat: node_modules/@jsr, stub: not implemented)",
                        action="store", type=str.lower,
                        choices=Constants.JSR_MODES)
    parser.add_argument("--cdn",
                        dest="CDN",
                        help="Also report CDN URLs from this provider",
                        action="store", type=str.lower,
                        choices=valid_cdns())

    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Path to output file (JSON or CSV)",
                        action="store",
                        type=str)
    parser.add_argument("-f", "--format",
                        dest="OUTPUT_FORMAT",
                        help="Output format (json or csv). If not specified, inferred from --output extension; defaults to json.",
                        action="store",
                        type=str.lower,
                        choices=['json', 'csv'])

    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default='INFO')
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("--error-on-failures",
                        dest="ERROR_ON_FAILURES",
                        help="Exit with a non-zero status code if any specifier fails to resolve.",
                        action="store_true")
    parser.add_argument("-q", "--quiet",
                        dest="QUIET",
                        help="Do not print results to the console.",
                        action="store_true")

    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to specresolve configuration file (YAML, YML, or JSON)",
                        action="store",
                        type=str)
    return parser


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    return build_parser().parse_args(argv)
