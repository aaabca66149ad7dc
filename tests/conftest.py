import textwrap
from pathlib import Path

import pytest

from tests.infrastructure.cli_utils import jload, run_cli
from tests.infrastructure.file_utils import write


@pytest.fixture
def tmpproj(tmp_path: Path):
    """Small project: config with all rules, a component, a type file and an ignored directory."""
    root = tmp_path
    write(
        root / "prop-ordering.yaml",
        textwrap.dedent("""
        extends: all
        exclude:
          - "generated/"
        rules:
          sort-type-properties:
            severity: error
        """).strip() + "\n",
    )
    write(
        root / "src" / "Button.tsx",
        textwrap.dedent("""
        export function Button({ onClick, id, variant }) {
          return <button id={id} onClick={onClick} className={variant} />;
        }
        """).lstrip(),
    )
    write(
        root / "src" / "types.ts",
        textwrap.dedent("""
        interface ButtonProps {
          onClick: () => void;
          id: string;
          variant: string;
        }
        """).lstrip(),
    )
    write(root / "src" / "ok.ts", "interface Ok {\n  id: string;\n  label: string;\n}\n")
    write(root / "generated" / "api.ts", "interface Gen {\n  z: string;\n  a: string;\n}\n")
    return root


__all__ = ["run_cli", "jload"]
