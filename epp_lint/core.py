# Standard Library
import collections


SEVERITY_ERROR = "ERROR"
SEVERITY_WARNING = "WARNING"


#============================================


def make_issue(
	severity: str,
	message: str,
	line: int | None = None,
	line_text: str | None = None,
	plugin: str | None = None,
) -> dict[str, object]:
	"""
	Create an issue dict.

	Line numbers are 0-indexed. When the line text is given the issue
	spans the whole line, from column 0 to the line length.

	Args:
		severity: Severity label.
		message: Issue message.
		line: Optional 0-indexed line number.
		line_text: Optional raw text of the line, used for the column range.
		plugin: Optional plugin id.

	Returns:
		dict[str, object]: Issue dict.
	"""
	issue: dict[str, object] = {
		"severity": severity,
		"message": message,
	}
	if line is not None:
		issue["line"] = int(line)
		issue["start_col"] = 0
		issue["end_col"] = len(line_text) if line_text is not None else 0
	if plugin is not None:
		issue["plugin"] = plugin
	return issue


#============================================


def summarize_issues(issues: list[dict[str, object]]) -> tuple[int, int]:
	"""
	Count ERROR and WARNING issues.

	Issues with any other severity are counted in neither total.

	Args:
		issues: Issue list.

	Returns:
		tuple[int, int]: (errors, warnings)
	"""
	counts = collections.Counter(str(issue.get("severity")) for issue in issues)
	return counts[SEVERITY_ERROR], counts[SEVERITY_WARNING]


#============================================


def sort_issues(issues: list[dict[str, object]]) -> list[dict[str, object]]:
	"""
	Return issues sorted by line number then message, for display.

	Args:
		issues: Issue list.

	Returns:
		list[dict[str, object]]: Sorted issues.
	"""
	def issue_key(issue: dict[str, object]) -> tuple[int, str]:
		line = issue.get("line")
		if isinstance(line, int):
			return (line, str(issue.get("message", "")))
		return (10**9, str(issue.get("message", "")))

	return sorted(issues, key=issue_key)


#============================================


def format_issue(file_path: str, issue: dict[str, object], show_plugin: bool) -> str:
	"""
	Format an issue as "path:line:col: SEVERITY: message [plugin]".

	Line and column are shown 1-based, the way editors and compilers
	report positions; issues without a line print the path only.

	Args:
		file_path: Path to the file.
		issue: Issue dict.
		show_plugin: Whether to append the plugin id.

	Returns:
		str: Formatted issue line.
	"""
	location = file_path
	line = issue.get("line")
	if isinstance(line, int):
		column = issue.get("start_col", 0)
		column = column if isinstance(column, int) else 0
		location = f"{file_path}:{line + 1}:{column + 1}"
	severity = str(issue.get("severity", SEVERITY_WARNING))
	formatted = f"{location}: {severity}: {issue.get('message', '')}"
	plugin = issue.get("plugin")
	if show_plugin and plugin:
		formatted = f"{formatted} [{plugin}]"
	return formatted
