from __future__ import annotations

import argparse
import base64
import json
import sys
from pathlib import Path
from typing import Any, Dict, List
from xml.etree import ElementTree

from .addressing import context_for_directory, context_for_feature
from .config import ReaderConfig, load_config, load_config_file
from .content import DispatchResult, Feature, ScriptFunction
from .errors import SFRUserError
from .logs import setup_logging_once
from .reader import ScenarioFileReader
from .version import version_banner


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sfr",
        description="Scenario file reader (locator → typed content)",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {version_banner()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Common arguments for read/resolve
    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "locator",
            help="classpath:<path> | file:<path> | this:<path> | <path>, optionally with @tag",
        )
        sp.add_argument(
            "--feature",
            type=Path,
            help="feature file issuing the read (default: current directory is the local context)",
        )
        sp.add_argument(
            "--root",
            type=Path,
            help="first feature of the run (default: --feature)",
        )
        sp.add_argument(
            "--classpath",
            action="append",
            type=Path,
            metavar="DIR",
            help="classpath root directory (may be given several times)",
        )
        sp.add_argument(
            "--config",
            type=Path,
            help="path to sfr.yaml (default: $SFR_CONFIG or ./sfr.yaml)",
        )

    sp_read = sub.add_parser("read", help="read a locator and print a JSON result")
    add_common(sp_read)

    sp_resolve = sub.add_parser("resolve", help="print the absolute path a locator resolves to")
    add_common(sp_resolve)

    return p


def _config(ns: argparse.Namespace) -> ReaderConfig:
    config = load_config_file(ns.config) if ns.config else load_config()
    if ns.classpath:
        config.classpath_roots = [*ns.classpath, *config.classpath_roots]
    return config


def _reader(ns: argparse.Namespace) -> ScenarioFileReader:
    config = _config(ns)
    if ns.feature is not None:
        context = context_for_feature(ns.feature, ns.root)
    else:
        cwd = Path.cwd()
        root_dir = ns.root.absolute().parent if ns.root is not None else cwd
        context = context_for_directory(cwd, root_dir)
    return ScenarioFileReader(context, config.build_provider(), encoding=config.encoding)


def _feature_summary(feature: Feature) -> Dict[str, Any]:
    return {
        "name": feature.name,
        "tags": feature.tags,
        "call_tag": feature.call_tag,
        "scenarios": [
            {"name": s.name, "tags": s.tags, "line": s.line}
            for s in feature.selected_scenarios()
        ],
    }


def _jsonable(value: Any) -> Any:
    if isinstance(value, bytes):
        return base64.b64encode(value).decode("ascii")
    if isinstance(value, ElementTree.Element):
        return ElementTree.tostring(value, encoding="unicode")
    if isinstance(value, ScriptFunction):
        return value.source
    if isinstance(value, Feature):
        return _feature_summary(value)
    return str(value)


def _dump_result(result: DispatchResult) -> str:
    value = result.value
    if isinstance(value, (bytes, ElementTree.Element, ScriptFunction, Feature)):
        value = _jsonable(value)
    payload = {"kind": result.kind.value, "value": value}
    return json.dumps(payload, ensure_ascii=False, indent=2, default=_jsonable) + "\n"


def main(argv: List[str] | None = None) -> int:
    setup_logging_once()
    ns = _build_parser().parse_args(argv)

    try:
        reader = _reader(ns)

        if ns.cmd == "read":
            sys.stdout.write(_dump_result(reader.read(ns.locator)))
            return 0

        if ns.cmd == "resolve":
            parsed = reader.parser.parse(ns.locator)
            sys.stdout.write(reader.to_absolute_path(parsed.path) + "\n")
            return 0

    except SFRUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
