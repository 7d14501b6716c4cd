# Standard Library
import dataclasses
from typing import Iterator

# Local modules
import epp_lint.classifier
import epp_lint.core
import epp_lint.parser
import epp_lint.rules


EVENT_PUSH = "push"
EVENT_POP = "pop"
EVENT_STRAY = "stray"
EVENT_UNCLOSED = "unclosed"


@dataclasses.dataclass(frozen=True)
class OpenBlockFrame:
	kind: str
	line: int
	text: str


@dataclasses.dataclass(frozen=True)
class BlockEvent:
	action: str
	source_line: epp_lint.parser.SourceLine
	line_class: epp_lint.classifier.LineClass | None = None
	frame: OpenBlockFrame | None = None


ClassifiedLines = list[tuple[epp_lint.parser.SourceLine, epp_lint.classifier.LineClass]]


#============================================


def iter_block_events(classified: ClassifiedLines) -> Iterator[BlockEvent]:
	"""
	Walk classified lines with a block stack and yield nesting events.

	Any closer pops the innermost frame regardless of kind. A closer seen
	with an empty stack yields a "stray" event and leaves the stack empty.
	After the last line every remaining frame yields an "unclosed" event,
	innermost first.

	Args:
		classified: (SourceLine, LineClass) pairs in document order.

	Yields:
		BlockEvent: push, pop, stray and unclosed events.
	"""
	stack: list[OpenBlockFrame] = []
	for source_line, line_class in classified:
		if line_class.category == epp_lint.classifier.CATEGORY_OPENER:
			frame = OpenBlockFrame(
				kind=str(line_class.kind),
				line=source_line.number,
				text=source_line.text,
			)
			stack.append(frame)
			yield BlockEvent(EVENT_PUSH, source_line, line_class, frame)
			continue

		if line_class.category != epp_lint.classifier.CATEGORY_CLOSER:
			continue

		if not stack:
			yield BlockEvent(EVENT_STRAY, source_line, line_class)
			continue

		frame = stack.pop()
		yield BlockEvent(EVENT_POP, source_line, line_class, frame)

	while stack:
		frame = stack.pop()
		source_line = epp_lint.parser.SourceLine(number=frame.line, text=frame.text)
		yield BlockEvent(EVENT_UNCLOSED, source_line, frame=frame)


#============================================


def track_blocks(classified: ClassifiedLines) -> list[dict[str, object]]:
	"""
	Report stray closers as errors and unclosed openers as warnings.

	Args:
		classified: (SourceLine, LineClass) pairs in document order.

	Returns:
		list[dict[str, object]]: Errors in document order, then warnings
			innermost block first.
	"""
	issues: list[dict[str, object]] = []
	for event in iter_block_events(classified):
		if event.action == EVENT_STRAY:
			closer = event.source_line.text.strip()
			message = f"Unexpected '{closer}': no matching block opener"
			issue = epp_lint.core.make_issue(
				epp_lint.core.SEVERITY_ERROR,
				message,
				line=event.source_line.number,
				line_text=event.source_line.text,
			)
			issues.append(issue)
			continue

		if event.action == EVENT_UNCLOSED and event.frame is not None:
			label = epp_lint.rules.kind_label(event.frame.kind)
			opener = event.frame.text.strip()
			message = f"Unclosed {label} block '{opener}': missing closing statement"
			issue = epp_lint.core.make_issue(
				epp_lint.core.SEVERITY_WARNING,
				message,
				line=event.frame.line,
				line_text=event.frame.text,
			)
			issues.append(issue)

	return issues


#============================================


def find_kind_mismatches(classified: ClassifiedLines) -> list[dict[str, object]]:
	"""
	Report closers that pop a frame from a different block family.

	Args:
		classified: (SourceLine, LineClass) pairs in document order.

	Returns:
		list[dict[str, object]]: Warning issues at the closer lines.
	"""
	issues: list[dict[str, object]] = []
	for event in iter_block_events(classified):
		if event.action != EVENT_POP or event.frame is None or event.line_class is None:
			continue
		if epp_lint.rules.is_compatible(event.line_class.kind, event.frame.kind):
			continue
		closer = event.source_line.text.strip()
		label = epp_lint.rules.kind_label(event.frame.kind)
		message = (
			f"'{closer}' closes the {label} block opened at line {event.frame.line + 1}"
		)
		issue = epp_lint.core.make_issue(
			epp_lint.core.SEVERITY_WARNING,
			message,
			line=event.source_line.number,
			line_text=event.source_line.text,
		)
		issues.append(issue)
	return issues
