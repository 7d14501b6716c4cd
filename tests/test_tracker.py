# Standard Library
import pytest

# Local modules
import epp_lint.classifier
import epp_lint.core
import epp_lint.parser
import epp_lint.tracker


#============================================


def _track(lines: list[str]) -> list[dict[str, object]]:
	source_lines = epp_lint.parser.split_source_lines("\n".join(lines))
	classified = epp_lint.classifier.classify_lines(source_lines)
	return epp_lint.tracker.track_blocks(classified)


def _summary(issues: list[dict[str, object]]) -> list[tuple[str, int]]:
	return [(str(issue["severity"]), int(issue["line"])) for issue in issues]


#============================================


ERROR = epp_lint.core.SEVERITY_ERROR
WARNING = epp_lint.core.SEVERITY_WARNING


@pytest.mark.parametrize(
	"label,lines,expected",
	[
		("balanced_if", ["if x then.", "say 1.", "end if."], []),
		("stray_closer", ["end if."], [(ERROR, 0)]),
		("unclosed_if", ["if x then.", "say 1."], [(WARNING, 0)]),
		("kind_agnostic_pop", ["define f.", "if x then.", "end define."], [(WARNING, 0)]),
		(
			"attempt_with_failure_handler",
			["attempt.", "say 1 divided by 0.", "if it fails.", "say \"error\".", "end attempt."],
			[],
		),
		(
			"extra_end_repeat",
			["repeat 5 times.", "say i.", "end repeat.", "end repeat."],
			[(ERROR, 3)],
		),
		(
			"pseudocode_loops",
			["FOR i = 1 TO 3", "  PRINT i", "NEXT", "REPEAT", "  x = x + 1", "UNTIL x > 5", "DO", "LOOP WHILE x < 9"],
			[],
		),
		(
			"if_else_chain",
			["IF a THEN", "PRINT 1", "ELSE IF b THEN", "PRINT 2", "ELSE", "PRINT 3", "ENDIF"],
			[],
		),
		(
			"switch_cases",
			["SWITCH x", "CASE 1:", "PRINT 1", "DEFAULT:", "PRINT 0", "END SWITCH"],
			[],
		),
		(
			"case_of_block",
			["CASE OF grade", "'A' : OUTPUT \"top\"", "OTHERWISE OUTPUT \"other\"", "ENDCASE"],
			[],
		),
		(
			"program_with_comments",
			["// demo", "start program.", "note: greeting", "", "say \"hi\".", "end program."],
			[],
		),
	],
)
def test_scenarios(label: str, lines: list[str], expected: list[tuple[str, int]]) -> None:
	assert _summary(_track(lines)) == expected, label


def test_no_openers_or_closers_yields_nothing() -> None:
	assert _track(["say 1.", "set x to 2.", "// comment", ""]) == []


def test_only_closers_yields_one_error_each() -> None:
	issues = _track(["end if.", "say 1.", "END WHILE", "NEXT"])
	assert _summary(issues) == [(ERROR, 0), (ERROR, 2), (ERROR, 3)]


def test_only_openers_yields_warnings_innermost_first() -> None:
	issues = _track(["define f.", "while x.", "if y then."])
	assert _summary(issues) == [(WARNING, 2), (WARNING, 1), (WARNING, 0)]


def test_stray_closer_does_not_cascade() -> None:
	issues = _track(["end if.", "if x then.", "say 1.", "end if."])
	assert _summary(issues) == [(ERROR, 0)]


def test_errors_precede_end_of_document_warnings() -> None:
	issues = _track(["end while.", "if x then.", "end if.", "end if.", "repeat 2 times."])
	assert _summary(issues) == [(ERROR, 0), (ERROR, 3), (WARNING, 4)]


def test_reordering_balanced_blocks_keeps_zero_issues() -> None:
	first = ["if x then.", "say 1.", "end if."]
	second = ["repeat 2 times.", "say 2.", "end repeat."]
	assert _track(first + second) == []
	assert _track(second + first) == []


def test_issue_spans_whole_line() -> None:
	issues = _track(["    end if.   "])
	assert issues[0]["start_col"] == 0
	assert issues[0]["end_col"] == len("    end if.   ")


def test_messages_name_the_line() -> None:
	issues = _track(["End If.", "repeat 3 times."])
	assert issues[0]["message"] == "Unexpected 'End If.': no matching block opener"
	assert issues[1]["message"] == (
		"Unclosed repeat-times block 'repeat 3 times.': missing closing statement"
	)


def test_crlf_line_numbers() -> None:
	source_lines = epp_lint.parser.split_source_lines("if x then.\r\nsay 1.\r\n")
	assert [line.text for line in source_lines] == ["if x then.", "say 1.", ""]
	classified = epp_lint.classifier.classify_lines(source_lines)
	issues = epp_lint.tracker.track_blocks(classified)
	assert _summary(issues) == [(WARNING, 0)]
	assert issues[0]["end_col"] == len("if x then.")


def test_event_stream() -> None:
	source_lines = epp_lint.parser.split_source_lines("end.\nwhile x.\nend while.\ndo")
	classified = epp_lint.classifier.classify_lines(source_lines)
	events = list(epp_lint.tracker.iter_block_events(classified))
	actions = [(event.action, event.source_line.number) for event in events]
	assert actions == [("stray", 0), ("push", 1), ("pop", 2), ("push", 3), ("unclosed", 3)]


#============================================


@pytest.mark.parametrize(
	"lines,expected_lines",
	[
		(["define f.", "if x then.", "end define."], [2]),
		(["while x.", "end if."], [1]),
		(["REPEAT", "UNTIL done"], []),
		(["repeat 3 times.", "end repeat."], []),
		(["for each x in y.", "next"], []),
		(["DO", "LOOP UNTIL x"], []),
		(["attempt.", "end"], []),
	],
)
def test_kind_mismatches(lines: list[str], expected_lines: list[int]) -> None:
	source_lines = epp_lint.parser.split_source_lines("\n".join(lines))
	classified = epp_lint.classifier.classify_lines(source_lines)
	issues = epp_lint.tracker.find_kind_mismatches(classified)
	assert [issue["line"] for issue in issues] == expected_lines
	assert all(issue["severity"] == WARNING for issue in issues)


def test_kind_mismatch_message() -> None:
	source_lines = epp_lint.parser.split_source_lines("while x.\nend if.")
	classified = epp_lint.classifier.classify_lines(source_lines)
	issues = epp_lint.tracker.find_kind_mismatches(classified)
	assert issues[0]["message"] == "'end if.' closes the while block opened at line 1"
