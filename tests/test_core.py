# Local modules
import epp_lint.core


#============================================


def test_summarize_issues_counts_each_severity() -> None:
	issues = [
		epp_lint.core.make_issue("ERROR", "a", line=0, line_text="end if."),
		epp_lint.core.make_issue("WARNING", "b", line=1, line_text="while x."),
		epp_lint.core.make_issue("WARNING", "c"),
		{"severity": "INFO", "message": "d"},
		{"message": "no severity"},
	]
	assert epp_lint.core.summarize_issues(issues) == (1, 2)
	assert epp_lint.core.summarize_issues([]) == (0, 0)


def test_format_issue_line_and_column_are_one_based() -> None:
	issue = epp_lint.core.make_issue("ERROR", "boom", line=4, line_text="  end if.", plugin="block_balance")
	assert epp_lint.core.format_issue("a.epp", issue, False) == "a.epp:5:1: ERROR: boom"
	assert epp_lint.core.format_issue("a.epp", issue, True) == "a.epp:5:1: ERROR: boom [block_balance]"


def test_format_issue_without_line() -> None:
	issue = {"severity": "WARNING", "message": "file level", "plugin": "custom"}
	assert epp_lint.core.format_issue("a.epp", issue, True) == "a.epp: WARNING: file level [custom]"


def test_make_issue_spans_line_text() -> None:
	issue = epp_lint.core.make_issue("WARNING", "m", line=2, line_text="repeat 3 times.")
	assert (issue["line"], issue["start_col"], issue["end_col"]) == (2, 0, len("repeat 3 times."))
	assert "plugin" not in issue
