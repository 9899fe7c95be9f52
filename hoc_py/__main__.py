#!/usr/bin/env python3
"""
hoc-py CLI

Usage:
    python -m hoc_py inspect module:Component          # Show the enhancer chain
    python -m hoc_py inspect module:Component --json   # Same, as JSON
"""

import argparse
import importlib
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from .base import describe, is_component
from .container import ContainerComponent, unwrap
from .statics import RESERVED_STATICS, own_statics


logger = logging.getLogger(__name__)


def load_target(target: str) -> Any:
    """Import ``module:attribute`` (dots allowed in the attribute path)."""
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"Target must look like 'module:Attribute', got {target!r}")
    value: Any = importlib.import_module(module_name)
    for part in attr_path.split("."):
        value = getattr(value, part)
    return value


def describe_chain(component: type) -> List[Dict[str, Any]]:
    """One entry per layer, outermost first."""
    layers = []
    for layer in unwrap(component):
        info = describe(layer)
        info["hoc_name"] = layer.hoc_name if issubclass(layer, ContainerComponent) else None
        info["statics"] = sorted(
            name for name in own_statics(layer) if name not in RESERVED_STATICS
        )
        layers.append(info)
    return layers


def cmd_inspect(args: argparse.Namespace) -> int:
    try:
        target = load_target(args.target)
    except (ImportError, AttributeError, ValueError) as e:
        print(f"Error: cannot load {args.target}: {e}", file=sys.stderr)
        return 1

    if not is_component(target):
        print(f"Error: {args.target} is not a component", file=sys.stderr)
        return 1

    layers = describe_chain(target)
    logger.debug("Inspecting %s: %d layer(s)", args.target, len(layers))
    if args.json:
        print(json.dumps(layers, indent=2))
        return 0

    print(f"\n{layers[0]['display_name']} ({len(layers) - 1} enhancer layer(s))\n")
    for depth, info in enumerate(layers):
        indent = "  " * depth
        print(f"{indent}{info['display_name']}")
        if info["props_contract"]:
            contract = ", ".join(f"{k}: {v}" for k, v in info["props_contract"].items())
            print(f"{indent}  props: {contract}")
        if info["statics"]:
            print(f"{indent}  statics: {', '.join(info['statics'])}")
    print()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        description="hoc-py component inspection",
        prog="hoc_py"
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 1.0.0"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    inspect_parser = subparsers.add_parser("inspect", help="Show the enhancer chain of a component")
    inspect_parser.add_argument("target", help="Component to inspect, as module:Attribute")
    inspect_parser.add_argument("--json", action="store_true", help="Print JSON instead of text")

    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    if args.command == "inspect":
        return cmd_inspect(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
