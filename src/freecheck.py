"""freecheck - version comparison and project freedom voting.

    Returns:
        int: Exit code
"""
import json
import logging
import sys

from constants import ExitCodes, _load_yaml_config
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from args import parse_args
from cli_config import apply_config_overrides
from licensing import (
    FreeIdentifierCache,
    FreecheckError,
    FreedomChecker,
    Package,
    Project,
    RuleEvaluators,
    summarize_votes,
)
from licensing.identifiers import default_cache
from versioning import compare_versions, filter_versions, sort_versions
from versioning.models import Ordering

logger = logging.getLogger(__name__)

_SYMBOLS = {Ordering.LESS: "<", Ordering.EQUAL: "=", Ordering.GREATER: ">"}


def load_records(path):
    """Load the JSON input of the ``check`` command.

    Args:
        path (str): File path, or "-" for stdin.

    Returns:
        list: Decoded records (a single record is wrapped in a list).
    """
    try:
        if path == "-":
            data = json.load(sys.stdin)
        else:
            with open(path, encoding="utf-8") as file:
                data = json.load(file)
    except FileNotFoundError as e:
        logging.error("File not found: %s, aborting", e)
        sys.exit(ExitCodes.FILE_ERROR.value)
    except (IOError, json.JSONDecodeError) as e:
        logging.error("Could not read %s: %s, aborting", path, e)
        sys.exit(ExitCodes.FILE_ERROR.value)
    if isinstance(data, dict):
        return [data]
    if isinstance(data, list):
        return data
    logging.error("Input must be a JSON object or a list of objects, aborting")
    sys.exit(ExitCodes.FILE_ERROR.value)


def to_subject(record):
    """Turn a decoded record into a Package or Project.

    Records with a ``packages`` key are projects; everything else is a package.
    Non-mapping records are passed through untouched so the checker reports them.
    """
    if not isinstance(record, dict):
        return record
    if "packages" in record:
        return Project.from_record(record)
    return Package.from_record(record)


def run_check(args):
    """Run the ``check`` command and print one JSON line per input record."""
    cfg = _load_yaml_config(getattr(args, "CONFIG", None))
    threshold = apply_config_overrides(args, cfg)
    cache = FreeIdentifierCache.unavailable() if args.OFFLINE else default_cache()

    reports = []
    checker = FreedomChecker(
        evaluators=RuleEvaluators(cache),
        threshold=threshold,
        on_vote=reports.append,
    )
    for record in load_records(args.INPUT):
        subject = to_subject(record)
        reports.clear()
        verdict = checker.check_freedom(subject)
        if isinstance(subject, Project):
            result = {"project": subject.name, **summarize_votes(reports, verdict)}
        else:
            result = {
                "package": subject.display_name,
                "repo": subject.repo,
                "verdict": verdict.value,
            }
        print(json.dumps(result, sort_keys=True))


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL, args.LOG_FILE)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action=args.COMMAND)
        )

    try:
        if args.COMMAND == "compare":
            print(_SYMBOLS[compare_versions(args.V1, args.V2)])
        elif args.COMMAND == "sort":
            for version in sort_versions(args.VERSIONS, reverse=args.REVERSE):
                print(version)
        elif args.COMMAND == "filter":
            for version in filter_versions(args.VERSIONS, args.CONSTRAINT):
                print(version)
        elif args.COMMAND == "check":
            run_check(args)
    except (ValueError, FreecheckError) as exc:
        logging.error("%s", exc)
        sys.exit(ExitCodes.USAGE_ERROR.value)

    sys.exit(ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()
