"""
Command-line interface for actioninputs.

Works on an action-type catalog file and exposes the two operations an
action orchestrator uses: describing actions for a configuration UI and
coercing wire arguments before an action runs.
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from actioninputs.catalog.loader import load_catalog
from actioninputs.coercion.engine import coerce_one
from actioninputs.core.contracts import TypedValue
from actioninputs.core.events import build_default_bus, set_global_bus
from actioninputs.core.exceptions import ActionInputsException
from actioninputs.core.logger import configure_root_logger, get_logger, push_action_uid, reset_action_uid
from actioninputs.descriptors.actions import describe_actions
from actioninputs.models.action_type import ActionType
from actioninputs.types import literals

logger = get_logger(__name__)


def _select(action_types: List[ActionType], action_uid: Optional[str]) -> List[ActionType]:
    if action_uid is None:
        return action_types
    selected = [a for a in action_types if a.uid == action_uid]
    if not selected:
        raise ActionInputsException(f"Action not found in catalog: {action_uid}")
    return selected


def describe(catalog_path: str, action_uid: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    Describe the actions of a catalog as configuration-UI payloads.

    Example:
        >>> from actioninputs.cli import describe
        >>> payload = describe("catalog.json", action_uid="astro.getElevation")
        >>> payload[0]["inputConfigDescriptions"]
    """
    action_types = _select(load_catalog(catalog_path), action_uid)
    return [description.to_payload() for description in describe_actions(action_types)]


def coerce(catalog_path: str, action_uid: str, arguments: Dict[str, Any]) -> Dict[str, Any]:
    """
    Coerce wire arguments for one action and render them as canonical text.

    Returns:
        Mapping of input name to the canonical text of its coerced value.
        Values no coercion rule applied to keep their raw wire form; skipped
        inputs are absent.
    """
    action_type = _select(load_catalog(catalog_path), action_uid)[0]
    rendered: Dict[str, Any] = {}
    token = push_action_uid(action_type.uid)
    try:
        for item in action_type.inputs:
            result = coerce_one(item, arguments.get(item.name), action_uid=action_type.uid)
            if not isinstance(result, TypedValue):
                continue
            if result.passthrough:
                rendered[item.name] = result.value
            else:
                rendered[item.name] = literals.format_value(result.tag, result.value)
    finally:
        reset_action_uid(token)
    return rendered


def validate_catalog(catalog_path: str) -> bool:
    """
    Validate a catalog without touching any action.

    Returns:
        True if every action type parses and every action can be described

    Raises:
        Exception: If the catalog cannot be loaded
    """
    logger.info(f"Validating catalog: {catalog_path}")
    descriptions = describe_actions(load_catalog(catalog_path))
    unsupported = [d.action_uid for d in descriptions if not d.configurable]
    if unsupported:
        logger.error(f"Actions with inputs that cannot be described: {unsupported}")
        return False
    logger.info("Catalog is valid")
    return True


def _load_arguments(args: argparse.Namespace) -> Dict[str, Any]:
    if args.args_file:
        with open(args.args_file, "r", encoding="utf-8") as f:
            return json.load(f)
    if args.args:
        return json.loads(args.args)
    return {}


def cli(argv: Optional[List[str]] = None) -> None:
    """
    Command-line interface for actioninputs.

    Usage:
        actioninputs describe catalog.json [--action UID]
        actioninputs coerce catalog.json UID --args '{"speed": 3}'
        actioninputs validate catalog.json
    """
    parser = argparse.ArgumentParser(
        prog="actioninputs",
        description="Describe action inputs and coerce action arguments",
    )
    parser.add_argument("--log-level", default=None, help="Log level (DEBUG, INFO, WARNING, ERROR)")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    describe_parser = subparsers.add_parser("describe", help="Print configuration-UI descriptions")
    describe_parser.add_argument("catalog", help="Path to action catalog (JSON or YAML)")
    describe_parser.add_argument("--action", default=None, help="Only describe this action uid")

    coerce_parser = subparsers.add_parser("coerce", help="Coerce arguments for one action")
    coerce_parser.add_argument("catalog", help="Path to action catalog (JSON or YAML)")
    coerce_parser.add_argument("action", help="Action uid")
    coerce_group = coerce_parser.add_mutually_exclusive_group()
    coerce_group.add_argument("--args", default=None, help="Arguments as a JSON object")
    coerce_group.add_argument("--args-file", default=None, help="Path to a JSON file with the arguments")

    validate_parser = subparsers.add_parser("validate", help="Validate a catalog")
    validate_parser.add_argument("catalog", help="Path to action catalog (JSON or YAML)")

    args = parser.parse_args(argv)
    configure_root_logger(args.log_level)

    bus = build_default_bus()
    if bus is not None:
        bus.start()
        set_global_bus(bus)
    try:
        if args.command == "describe":
            try:
                print(json.dumps(describe(args.catalog, args.action), indent=2, ensure_ascii=False))
                sys.exit(0)
            except Exception as e:
                logger.error(f"Describe failed: {e}")
                sys.exit(1)

        elif args.command == "coerce":
            try:
                result = coerce(args.catalog, args.action, _load_arguments(args))
                print(json.dumps(result, indent=2, ensure_ascii=False))
                sys.exit(0)
            except Exception as e:
                logger.error(f"Coerce failed: {e}")
                sys.exit(1)

        elif args.command == "validate":
            try:
                sys.exit(0 if validate_catalog(args.catalog) else 1)
            except Exception as e:
                logger.error(f"Validation failed: {e}")
                sys.exit(1)

        else:
            parser.print_help()
            sys.exit(0)
    finally:
        if bus is not None:
            try:
                bus.shutdown()
            except Exception:
                pass
        set_global_bus(None)


if __name__ == "__main__":
    cli()
