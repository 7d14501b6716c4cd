#!/usr/bin/env python3

# Standard Library
import argparse
import json
import os
import sys

# Repo root on the path for local imports when run from a checkout
REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if REPO_ROOT not in sys.path:
	sys.path.insert(0, REPO_ROOT)

# Local modules
import epp_lint.core
import epp_lint.engine
import epp_lint.registry
import epp_lint.rules


#============================================


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse command-line arguments.

	Returns:
		argparse.Namespace: Parsed arguments.
	"""
	parser = argparse.ArgumentParser(
		description="Check block structure (if/end if, FUNCTION/END FUNCTION, ...) in E++ programs.",
	)
	parser.add_argument(
		"-i",
		"--input",
		dest="input_file",
		help="Path to a single .epp file to check.",
	)
	parser.add_argument(
		"-d",
		"--directory",
		dest="input_dir",
		default=".",
		help="Directory to scan for .epp files (default: current directory).",
	)
	parser.add_argument(
		"-e",
		"--extensions",
		dest="extensions",
		default=".epp",
		help="Comma-separated list of file extensions (default: .epp).",
	)
	parser.add_argument(
		"-r",
		"--rules",
		dest="rules_file",
		help="Optional JSON file replacing neutral, opener or closer rules.",
	)
	parser.add_argument(
		"--plugin",
		dest="plugin_paths",
		action="append",
		default=[],
		help="Path to a plugin module file (repeatable).",
	)
	parser.add_argument(
		"--enable",
		dest="enable_plugins",
		action="append",
		default=[],
		help="Comma-separated plugin ids to enable (e.g. block_kinds).",
	)
	parser.add_argument(
		"--disable",
		dest="disable_plugins",
		action="append",
		default=[],
		help="Comma-separated plugin ids to disable.",
	)
	parser.add_argument(
		"--only",
		dest="only_plugins",
		action="append",
		default=[],
		help="Comma-separated plugin ids to run exclusively.",
	)
	parser.add_argument(
		"--list-plugins",
		dest="list_plugins",
		action="store_true",
		help="List available plugins and exit.",
	)
	parser.add_argument(
		"--show-plugin",
		dest="show_plugin",
		action="store_true",
		help="Include plugin id in line output.",
	)
	parser.add_argument(
		"--json",
		dest="json_output",
		action="store_true",
		help="Emit issues and summaries as JSON.",
	)
	parser.add_argument(
		"--fail-on-warn",
		dest="fail_on_warn",
		action="store_true",
		help="Exit non-zero if warnings are found.",
	)
	parser.set_defaults(fail_on_warn=False, json_output=False, list_plugins=False)
	args = parser.parse_args(argv)
	return args


#============================================


def _log(msg: str) -> None:
	print(msg, file=sys.stderr, flush=True)


#============================================


def split_csv(values: list[str]) -> set[str]:
	"""
	Split comma-separated lists into a set of ids.
	"""
	items: set[str] = set()
	for value in values:
		for raw in value.split(","):
			item = raw.strip()
			if item:
				items.add(item)
	return items


#============================================


def normalize_extensions(extensions: str) -> list[str]:
	"""
	Normalize comma-separated extensions into lowercase dotted suffixes.
	"""
	normalized: list[str] = []
	for ext in extensions.split(","):
		ext = ext.strip().lower()
		if not ext:
			continue
		normalized.append(ext if ext.startswith(".") else f".{ext}")
	return normalized


#============================================


def find_files(input_dir: str, extensions: list[str]) -> list[str]:
	"""
	Find files under input_dir matching extensions.

	Args:
		input_dir: Root directory to scan.
		extensions: File extensions to include.

	Returns:
		list[str]: Sorted file paths.
	"""
	matches: list[str] = []
	for root, dirs, files in os.walk(input_dir):
		dirs.sort()
		for filename in sorted(files):
			if os.path.splitext(filename)[1].lower() in extensions:
				matches.append(os.path.join(root, filename))
	return sorted(matches)


#============================================


def list_plugins(registry: epp_lint.registry.Registry) -> None:
	for plugin in registry.list_plugins():
		default_flag = "default" if plugin.get("default_enabled") is True else "optional"
		print(f"{plugin.get('id')}: {plugin.get('name')} ({default_flag})")


#============================================


def main(argv: list[str] | None = None) -> int:
	"""
	Run the block structure checker.

	Returns:
		int: Process exit code.
	"""
	args = parse_args(argv)
	registry = epp_lint.registry.build_registry()
	try:
		rules = epp_lint.rules.load_rules(args.rules_file)
		for plugin_path in args.plugin_paths:
			registry.load_plugin_path(plugin_path)
		if args.list_plugins:
			list_plugins(registry)
			return 0
		plugins = registry.resolve_plugins(
			split_csv(args.only_plugins),
			split_csv(args.enable_plugins),
			split_csv(args.disable_plugins),
		)
	except (OSError, ValueError) as exc:
		_log(f"epp_lint: {exc}")
		return 2

	if args.input_file:
		files_to_check = [args.input_file]
	else:
		files_to_check = find_files(args.input_dir, normalize_extensions(args.extensions))

	issues: list[dict[str, object]] = []
	file_reports: list[dict[str, object]] = []
	for file_path in files_to_check:
		file_issues = epp_lint.engine.lint_file(file_path, rules, plugins)
		issues.extend(file_issues)
		file_reports.append({"file": file_path, "issues": file_issues})
		if not args.json_output:
			for issue in epp_lint.core.sort_issues(file_issues):
				print(epp_lint.core.format_issue(file_path, issue, args.show_plugin))

	error_count, warn_count = epp_lint.core.summarize_issues(issues)

	if args.json_output:
		summary = {
			"files_checked": len(files_to_check),
			"errors": error_count,
			"warnings": warn_count,
			"plugins": [str(plugin.get("id")) for plugin in plugins],
			"files": file_reports,
		}
		print(json.dumps(summary, indent=2))
	elif issues:
		print(f"Found {error_count} errors and {warn_count} warnings.")

	if error_count > 0:
		return 1
	if args.fail_on_warn and warn_count > 0:
		return 1
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
