"""
Shared test infrastructure.

Modules:
- file_utils: creating files and directories
- cli_utils: running the CLI in a subprocess
- rule_tester: valid/invalid source tables for rules
"""

from .file_utils import write
from .cli_utils import jload, run_cli
from .rule_tester import Invalid, RuleTester, lint, fix

__all__ = ["write", "jload", "run_cli", "Invalid", "RuleTester", "lint", "fix"]
