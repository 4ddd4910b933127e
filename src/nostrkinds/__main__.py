"""CLI entry point for nostrkinds.

Browse the event kind catalog, validate candidate events, verify sample
signatures and export the machine-readable reference. Results go to stdout
(JSON or tab-separated rows); logs go to stderr.

Examples:
    ```bash
    python -m nostrkinds show 7
    python -m nostrkinds list --category addressable
    python -m nostrkinds search zap
    python -m nostrkinds search "direct message" --usage
    python -m nostrkinds validate draft.json
    python -m nostrkinds verify events.json --log-level DEBUG
    python -m nostrkinds guide 30023 --samples events.json
    python -m nostrkinds docs --output reference.json
    ```
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from nostrkinds.catalog import (
    Registry,
    build_reference_document,
    default_registry,
    implementation_guide,
    load_registry,
)
from nostrkinds.core.config import AppConfig
from nostrkinds.core.exceptions import (
    ConfigurationError,
    ContractViolationError,
    NostrKindsError,
    SampleError,
)
from nostrkinds.core.logger import Logger, StructuredFormatter
from nostrkinds.models.constants import EventCategory
from nostrkinds.utils import load_samples, verify_samples
from nostrkinds.validation import validate_event_structure


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
_HANDLER_NAME = "nostrkinds"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subparser per command."""
    parser = argparse.ArgumentParser(
        prog="nostrkinds",
        description="Nostr event kind catalog and validator",
    )

    parser.add_argument("--config", type=Path, help="YAML configuration file")
    parser.add_argument(
        "--catalog",
        type=Path,
        help="Catalog YAML to use instead of the packaged catalog",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        help="Log level (default: from config, else INFO)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON objects",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    show = commands.add_parser("show", help="Show the full spec of one kind")
    show.add_argument("kind", type=int)

    list_cmd = commands.add_parser("list", help="List catalogued kinds")
    list_cmd.add_argument("--category", choices=[c.value for c in EventCategory])

    search = commands.add_parser("search", help="Search kinds by text")
    search.add_argument("query")
    search.add_argument(
        "--usage",
        action="store_true",
        help="Search use cases and summaries instead of names and descriptions",
    )

    validate = commands.add_parser("validate", help="Validate events from a JSON file")
    validate.add_argument("file", type=Path, help="One event object or a list of events")

    verify = commands.add_parser("verify", help="Verify signatures of a sample events file")
    verify.add_argument("file", type=Path)

    guide = commands.add_parser("guide", help="Implementation guide for one kind")
    guide.add_argument("kind", type=int)
    guide.add_argument("--samples", type=Path, help="Sample events file to draw examples from")

    docs = commands.add_parser("docs", help="Export the machine-readable reference")
    docs.add_argument("--output", type=Path, help="Write to this file instead of stdout")

    return parser


def setup_logging(level: str, *, json_output: bool = False) -> None:
    """Configure the root logger.

    Installs a ``StructuredFormatter`` on a stderr handler so that output
    from both ``Logger`` and plain ``logging.getLogger()`` calls in the
    catalog and utils layers shares one format: ``level name message
    key=value ...`` lines, or one JSON object per line in JSON mode.
    Calling it again replaces the handler it installed before.
    """
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(StructuredFormatter(json_output=json_output))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level))


def load_config(args: argparse.Namespace) -> AppConfig:
    """Load the configuration file, then apply command-line overrides."""
    config = AppConfig.from_yaml(args.config) if args.config else AppConfig()

    overrides: dict[str, Any] = {}
    if args.log_level:
        overrides["level"] = args.log_level
    if args.json_logs:
        overrides["json_output"] = True
    if overrides:
        config = config.model_copy(
            update={"logging": config.logging.model_copy(update=overrides)}
        )
    if args.catalog:
        config = config.model_copy(update={"catalog_path": args.catalog})
    return config


def _emit(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _emit_rows(specs: list[Any]) -> None:
    for spec in specs:
        print(f"{spec.kind}\t{spec.name}\t{spec.category.value}")


def _read_events(path: Path) -> list[Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise SampleError(f"cannot read events {path}: {e}") from e
    except ValueError as e:
        raise SampleError(f"events {path} are not valid JSON: {e}") from e
    return data if isinstance(data, list) else [data]


def cmd_show(args: argparse.Namespace, registry: Registry, logger: Logger) -> int:
    spec = registry.lookup(args.kind)
    if spec is None:
        logger.warning("kind_not_found", kind=args.kind)
        return 1
    _emit(spec.to_dict())
    return 0


def cmd_list(args: argparse.Namespace, registry: Registry, logger: Logger) -> int:
    specs = registry.by_category(args.category) if args.category else list(registry)
    _emit_rows(specs)
    logger.debug("kinds_listed", count=len(specs), category=args.category)
    return 0


def cmd_search(args: argparse.Namespace, registry: Registry, logger: Logger) -> int:
    if args.usage:
        specs = registry.search_by_usage(args.query)
    else:
        specs = registry.search(args.query)
    _emit_rows(specs)
    logger.debug("search_completed", query=args.query, usage=args.usage, matches=len(specs))
    return 0


def cmd_validate(args: argparse.Namespace, registry: Registry, logger: Logger) -> int:
    results = []
    invalid = 0
    for index, event in enumerate(_read_events(args.file)):
        kind = event.get("kind") if isinstance(event, dict) else None
        try:
            report = validate_event_structure(event, registry).to_dict()
        except ContractViolationError as e:
            logger.warning("event_malformed", index=index, error=str(e))
            report = {"isValid": False, "errors": [str(e)], "warnings": []}
        if not report["isValid"]:
            invalid += 1
        results.append({"index": index, "kind": kind, **report})
    _emit(results)
    logger.info("events_validated", total=len(results), invalid=invalid)
    return 1 if invalid else 0


def cmd_verify(args: argparse.Namespace, registry: Registry, logger: Logger) -> int:
    summary = verify_samples(load_samples(args.file))
    _emit(summary.to_dict())
    logger.info(
        "signatures_verified",
        total=summary.total,
        valid=summary.valid,
        invalid=summary.invalid,
    )
    return 0 if summary.all_valid else 1


def cmd_guide(args: argparse.Namespace, registry: Registry, logger: Logger) -> int:
    samples = load_samples(args.samples) if args.samples else None
    guide = implementation_guide(args.kind, registry, samples)
    if guide["spec"] is None:
        logger.warning("kind_not_found", kind=args.kind)
    _emit(guide)
    return 0 if guide["spec"] is not None else 1


def cmd_docs(args: argparse.Namespace, registry: Registry, logger: Logger) -> int:
    document = build_reference_document(registry)
    text = json.dumps(document, indent=2, ensure_ascii=False)
    if args.output is None:
        print(text)
        return 0
    try:
        args.output.write_text(text + "\n", encoding="utf-8")
    except OSError as e:
        logger.error("docs_write_failed", path=str(args.output), error=str(e))
        return 1
    logger.info("docs_written", path=str(args.output), kinds=len(registry))
    return 0


COMMANDS = {
    "show": cmd_show,
    "list": cmd_list,
    "search": cmd_search,
    "validate": cmd_validate,
    "verify": cmd_verify,
    "guide": cmd_guide,
    "docs": cmd_docs,
}


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, load config and the catalog, and run one command.

    Returns:
        Exit code: 0 on success, 1 on failure or when any checked event
        is invalid.
    """
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args)
    except ConfigurationError as e:
        setup_logging(args.log_level or "INFO", json_output=args.json_logs)
        Logger("cli", json_output=args.json_logs).error("config_invalid", error=str(e))
        return 1

    setup_logging(config.logging.level, json_output=config.logging.json_output)
    logger = Logger(
        "cli",
        json_output=config.logging.json_output,
        max_value_length=config.logging.max_value_length,
    )

    try:
        if config.catalog_path is not None:
            registry = load_registry(config.catalog_path)
        else:
            registry = default_registry()
        return COMMANDS[args.command](args, registry, logger)
    except NostrKindsError as e:
        logger.error(f"{args.command}_failed", error=str(e))
        return 1


def cli() -> None:
    """Synchronous entry point for console_scripts."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
