"""specresolve - resolve package specifiers to files or CDN URLs."""
import csv
import json
import logging
import sys

from args import parse_args
from cli_config import build_settings, find_tool_config, load_tool_config
from common.fs import OSFileSystem
from common.logging_utils import add_file_handler, configure_logging, extra_context, is_debug_enabled
from config_loader import ConfigError, expand_files, load_config, load_config_or_default
from constants import ExitCodes
from specifier.cdn import parse_cdn
from specifier.errors import InvalidRootError, UnknownCDNError
from specifier.resolvers import new_default_resolver
from specifier.service import ResolutionService

logger = logging.getLogger(__name__)


def load_specs_file(file_name):
    """Loads specifiers from a file, skipping blank lines and # comments.

    Args:
        file_name (str): File path containing the list of specifiers.

    Returns:
        list: List of specifiers
    """
    try:
        with open(file_name, encoding='utf-8') as file:
            lines = [line.strip() for line in file]
    except OSError as e:
        logger.error("Could not read %s: %s, aborting", file_name, e)
        sys.exit(ExitCodes.FILE_ERROR.value)
    return [line for line in lines if line and not line.startswith("#")]


def export_csv(results, path):
    """Exports resolution results to a CSV file.

    Args:
        results (list): List of ResolutionResult.
        path (str): File path to export the CSV.
    """
    rows = [["Specifier", "Kind", "Path", "CDN URL", "Error"]]

    def _nv(v):
        return "" if v is None else v

    for r in results:
        rows.append([r.specifier, r.kind, _nv(r.path), _nv(r.cdn_url), _nv(r.error)])
    try:
        with open(path, 'w', newline='', encoding='utf-8') as file:
            csv.writer(file).writerows(rows)
        logger.info("CSV file has been successfully exported at: %s", path)
    except (OSError, csv.Error) as e:
        logger.error("CSV file couldn't be written to disk: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)


def export_json(results, path):
    """Exports resolution results to a JSON file.

    Args:
        results (list): List of ResolutionResult.
        path (str): File path to export the JSON.
    """
    data = [
        {
            "specifier": r.specifier,
            "kind": r.kind,
            "path": r.path,
            "cdnUrl": r.cdn_url,
            "error": r.error,
        }
        for r in results
    ]
    try:
        with open(path, 'w', encoding='utf-8') as file:
            json.dump(data, file, ensure_ascii=False, indent=4)
        logger.info("JSON file has been successfully exported at: %s", path)
    except OSError as e:
        logger.error("JSON file couldn't be written to disk: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)


def _output_format(args):
    if getattr(args, "OUTPUT_FORMAT", None):
        return args.OUTPUT_FORMAT
    if args.OUTPUT.lower().endswith(".csv"):
        return "csv"
    return "json"


def build_speclist(args, fs, root):
    """Collect specifiers from the selected input."""
    if args.SPECIFIERS:
        return list(args.SPECIFIERS)
    if args.LIST_FROM_FILE:
        return load_specs_file(args.LIST_FROM_FILE)
    if args.FROM_CONFIG:
        try:
            cfg = load_config(fs, root)
        except ConfigError as e:
            logger.error("%s", e)
            sys.exit(ExitCodes.FILE_ERROR.value)
        if cfg is None:
            logger.error("No .config/design-tokens.{yaml,yml,json} found under %s", root)
            sys.exit(ExitCodes.FILE_ERROR.value)
        return expand_files(cfg, fs, root)
    return []


def print_results(results):
    """Print one line per result to stdout."""
    for r in results:
        target = r.path if r.ok else f"ERROR: {r.error}"
        line = f"{r.specifier} -> {target}"
        if r.cdn_url:
            line += f" ({r.cdn_url})"
        print(line)


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL)
    if getattr(args, "LOG_FILE", None):
        add_file_handler(args.LOG_FILE)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action="main")
        )

    fs = OSFileSystem()
    tool_config = load_tool_config(find_tool_config(getattr(args, "CONFIG", None)))
    settings = build_settings(args, tool_config)
    project_config = load_config_or_default(fs, settings.root)
    settings = build_settings(args, tool_config, project_config)

    cdn = None
    if settings.cdn:
        try:
            cdn = parse_cdn(settings.cdn)
        except UnknownCDNError as e:
            logger.error("%s", e)
            sys.exit(ExitCodes.USAGE_ERROR.value)

    try:
        resolver = new_default_resolver(fs, settings.root, settings.jsr_mode)
    except (InvalidRootError, ValueError) as e:
        logger.error("%s", e)
        sys.exit(ExitCodes.USAGE_ERROR.value)

    specs = build_speclist(args, fs, settings.root)
    if not specs:
        logger.warning("No specifiers found in the input.")
        sys.exit(ExitCodes.SUCCESS.value)

    results = ResolutionService(resolver, cdn).resolve_all(specs)

    if not args.QUIET:
        print_results(results)

    if getattr(args, "OUTPUT", None):
        if _output_format(args) == "csv":
            export_csv(results, args.OUTPUT)
        else:
            export_json(results, args.OUTPUT)

    if any(not r.ok for r in results):
        logger.warning("One or more specifiers could not be resolved.")
        if args.ERROR_ON_FAILURES:
            logger.error("Failures present, exiting with non-zero status code.")
            sys.exit(ExitCodes.EXIT_FAILURES.value)

    sys.exit(ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()
