"""E++ block structure lint package."""

from epp_lint.classifier import classify_line, classify_lines, compile_rules
from epp_lint.diagnostics import DiagnosticCollection, update_diagnostics
from epp_lint.engine import build_context, run_plugins, lint_text, lint_file, validate_document
from epp_lint.registry import build_registry
from epp_lint.rules import load_rules, DEFAULT_RULES
from epp_lint.tracker import track_blocks

__all__ = [
	"classify_line",
	"classify_lines",
	"compile_rules",
	"DiagnosticCollection",
	"update_diagnostics",
	"build_context",
	"run_plugins",
	"lint_text",
	"lint_file",
	"validate_document",
	"build_registry",
	"load_rules",
	"DEFAULT_RULES",
	"track_blocks",
]
