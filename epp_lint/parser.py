# Standard Library
import dataclasses
import re


LINE_SPLIT_RX = re.compile(r"\r?\n")

LINE_COMMENT_PREFIX = "//"
NARRATIVE_COMMENT_RX = re.compile(r"^note\b")
STATEMENT_TERMINATOR = "."


@dataclasses.dataclass(frozen=True)
class SourceLine:
	number: int
	text: str


#============================================


def split_source_lines(text: str) -> list[SourceLine]:
	"""
	Split a document into 0-indexed source lines.

	Args:
		text: Full document text.

	Returns:
		list[SourceLine]: Lines without their terminators.
	"""
	lines: list[SourceLine] = []
	for number, raw in enumerate(LINE_SPLIT_RX.split(text)):
		lines.append(SourceLine(number=number, text=raw))
	return lines


#============================================


def normalize_line(line: str) -> str:
	"""
	Trim and lowercase a line and drop one trailing statement terminator.

	Args:
		line: Raw line text.

	Returns:
		str: Normalized text used for pattern matching.
	"""
	normalized = line.strip().lower()
	if normalized.endswith(STATEMENT_TERMINATOR):
		normalized = normalized[:-1].rstrip()
	return normalized


#============================================


def is_comment_or_blank(normalized: str) -> bool:
	"""
	Return True for blank, line-comment and narrative-comment lines.
	"""
	if not normalized:
		return True
	if normalized.startswith(LINE_COMMENT_PREFIX):
		return True
	if NARRATIVE_COMMENT_RX.match(normalized):
		return True
	return False
