# Standard Library

# Local modules
import epp_lint.classifier
import epp_lint.parser


LANGUAGE_ID = "epp"


#============================================


def build_context(
	text: str,
	file_path: str | None,
	rules: dict[str, list[dict[str, str]]],
) -> dict[str, object]:
	"""
	Build a shared context dict for plugins.

	Args:
		text: Full document contents.
		file_path: Optional file path.
		rules: Classification rule tables.

	Returns:
		dict[str, object]: Context dict.
	"""
	compiled = epp_lint.classifier.compile_rules(rules)
	source_lines = epp_lint.parser.split_source_lines(text)
	classified = epp_lint.classifier.classify_lines(source_lines, compiled)

	context = {
		"file_path": file_path,
		"text": text,
		"rules": rules,
		"compiled_rules": compiled,
		"source_lines": source_lines,
		"classified": classified,
	}
	return context


#============================================


def run_plugins(
	context: dict[str, object],
	plugins: list[dict[str, object]],
) -> list[dict[str, object]]:
	"""
	Run plugins and return aggregated issues in emission order.

	Args:
		context: Shared context dict.
		plugins: Plugin metadata list.

	Returns:
		list[dict[str, object]]: Issue list.
	"""
	issues: list[dict[str, object]] = []
	for plugin in plugins:
		plugin_id = str(plugin.get("id"))
		plugin_run = plugin.get("run")
		plugin_issues = plugin_run(context)
		for issue in plugin_issues:
			if issue.get("plugin") is None:
				issue["plugin"] = plugin_id
			issues.append(issue)
	return issues


#============================================


def lint_text(
	text: str,
	file_path: str | None,
	rules: dict[str, list[dict[str, str]]],
	plugins: list[dict[str, object]],
) -> list[dict[str, object]]:
	"""
	Lint a text blob with configured plugins.

	Each call is an independent pass: nothing is kept between calls.

	Args:
		text: Document contents.
		file_path: Optional file path.
		rules: Classification rule tables.
		plugins: Enabled plugins.

	Returns:
		list[dict[str, object]]: Issue list.
	"""
	context = build_context(text, file_path, rules)
	issues = run_plugins(context, plugins)
	return issues


#============================================


def lint_file(
	file_path: str,
	rules: dict[str, list[dict[str, str]]],
	plugins: list[dict[str, object]],
) -> list[dict[str, object]]:
	"""
	Lint a single file.

	Args:
		file_path: Path to file.
		rules: Classification rule tables.
		plugins: Enabled plugins.

	Returns:
		list[dict[str, object]]: Issue list.
	"""
	with open(file_path, "r", encoding="utf-8") as handle:
		text = handle.read()
	issues = lint_text(text, file_path, rules, plugins)
	return issues


#============================================


def validate_document(
	text: str,
	language_id: str,
	rules: dict[str, list[dict[str, str]]],
	plugins: list[dict[str, object]],
	file_path: str | None = None,
) -> list[dict[str, object]]:
	"""
	Validate a document only when its language tag marks it as E++.

	Args:
		text: Document contents.
		language_id: Language tag declared for the document.
		rules: Classification rule tables.
		plugins: Enabled plugins.
		file_path: Optional file path.

	Returns:
		list[dict[str, object]]: Issue list, empty for other languages.
	"""
	if language_id != LANGUAGE_ID:
		return []
	return lint_text(text, file_path, rules, plugins)
