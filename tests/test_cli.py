import base64
import json
from pathlib import Path

import pytest

from sfr.cli import main
from sfr.paths import CFG_ENV


@pytest.fixture(autouse=True)
def _no_config(monkeypatch, run_tree: Path):
    monkeypatch.delenv(CFG_ENV, raising=False)
    monkeypatch.chdir(run_tree)


def _read(capsys, *args: str):
    rc = main(["read", *args])
    out = capsys.readouterr().out
    return rc, json.loads(out) if rc == 0 else out


def test_read_json(capsys, run_tree: Path):
    rc, data = _read(capsys, "data/sample.json", "--feature", "features/main.feature")

    assert rc == 0
    assert data == {"kind": "structured", "value": {"a": 1}}


def test_read_feature_with_tag(capsys):
    rc, data = _read(
        capsys,
        "this:child.feature@smoke",
        "--feature", "features/users/create.feature",
        "--root", "features/main.feature",
    )

    assert data["kind"] == "sub_document"
    assert data["value"]["call_tag"] == "@smoke"
    assert [s["name"] for s in data["value"]["scenarios"]] == ["quick check"]


def test_read_binary_base64(capsys):
    rc, data = _read(capsys, "this:logo.png", "--feature", "features/users/create.feature")

    assert data["kind"] == "raw_bytes"
    assert base64.b64decode(data["value"]).startswith(b"\x89PNG")


def test_read_classpath(capsys):
    rc, data = _read(capsys, "classpath:shared/greeting.txt", "--classpath", "resources")

    assert data == {"kind": "text", "value": "hello"}


def test_config_file_option(capsys, run_tree: Path):
    (run_tree / "custom.yaml").write_text("classpath: [resources]\n", encoding="utf-8")

    rc, data = _read(capsys, "classpath:shared/config.yaml", "--config", "custom.yaml")

    assert data["value"]["env"] == "dev"


def test_not_found_exit_code(capsys):
    rc = main(["read", "classpath:missing.txt"])
    err = capsys.readouterr().err

    assert rc == 2
    assert "could not find or read file: classpath:missing.txt" in err


def test_resolve(capsys, run_tree: Path):
    rc = main(["resolve", "this:../values.csv", "--feature", "features/users/create.feature"])

    assert rc == 0
    assert capsys.readouterr().out.strip() == str(run_tree / "features" / "values.csv")


def test_version(capsys):
    with pytest.raises(SystemExit) as ei:
        main(["--version"])

    assert ei.value.code == 0
    assert capsys.readouterr().out.startswith("sfr ")


def test_version_names_yaml_library(capsys):
    with pytest.raises(SystemExit):
        main(["--version"])

    assert "(ruamel.yaml " in capsys.readouterr().out
