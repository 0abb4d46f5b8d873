import textwrap
from pathlib import Path

import pytest

from sfr.config import ReaderConfig
from sfr.reader import ScenarioFileReader

from tests.infrastructure import write, write_bytes, write_feature


@pytest.fixture
def run_tree(tmp_path: Path) -> Path:
    """
    Minimal run layout.

    Structure:
        root/
        ├── features/
        │   ├── main.feature            (root feature of the run)
        │   ├── values.csv
        │   ├── data/
        │   │   ├── sample.json
        │   │   └── settings.yml
        │   └── users/
        │       ├── create.feature      (feature issuing the reads)
        │       ├── child.feature
        │       ├── user.json
        │       ├── helper.js
        │       ├── query.graphql
        │       └── logo.png
        └── resources/                  (classpath root)
            ├── shared/config.yaml
            └── shared/greeting.txt
    """
    root = tmp_path
    feats = root / "features"

    write_feature(feats / "main.feature", """
        Feature: main
          Scenario: start
            * call read('users/create.feature')
        """)
    write(feats / "values.csv", "name,age\nalice,30\nbob,41\n")
    write(feats / "data" / "sample.json", '{"a":1}')
    write(feats / "data" / "settings.yml", "retries: 3\nhosts: [a, b]\n")

    write_feature(feats / "users" / "create.feature", """
        Feature: create user
          Scenario: create
            * def user = read('this:user.json')
        """)
    write_feature(feats / "users" / "child.feature", """
        @users
        Feature: child

          Background:
            * url 'http://localhost'

          @smoke
          Scenario: quick check
            Given path 'users'
            When method get
            Then status 200

          @slow @nightly
          Scenario Outline: bulk <n>
            * print <n>

            Examples:
              | n |
              | 1 |
              | 2 |
        """)
    write(feats / "users" / "user.json", '{"name": "alice", "roles": ["admin"]}')
    write(feats / "users" / "helper.js", "function greet(name) { return 'hi ' + name }\n")
    write(feats / "users" / "query.graphql", "{ users { id } }\n")
    write_bytes(feats / "users" / "logo.png", b"\x89PNG\r\n\x1a\n\x00\x01")

    write(root / "resources" / "shared" / "config.yaml", textwrap.dedent("""
        env: dev
        timeouts:
          connect: 5
        """).lstrip())
    write(root / "resources" / "shared" / "greeting.txt", "hello")
    return root


@pytest.fixture
def reader(run_tree: Path) -> ScenarioFileReader:
    """Reader for features/users/create.feature, called from features/main.feature."""
    return ScenarioFileReader.for_feature(
        run_tree / "features" / "users" / "create.feature",
        root_feature=run_tree / "features" / "main.feature",
        config=ReaderConfig(classpath_roots=[run_tree / "resources"]),
    )
