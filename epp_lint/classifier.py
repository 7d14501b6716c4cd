# Standard Library
import dataclasses
import re

# Local modules
import epp_lint.parser
import epp_lint.rules


CATEGORY_OPENER = "opener"
CATEGORY_CLOSER = "closer"
CATEGORY_NEUTRAL = "neutral"
CATEGORY_IGNORE = "ignore"


@dataclasses.dataclass(frozen=True)
class LineClass:
	category: str
	kind: str | None = None
	label: str | None = None


IGNORE = LineClass(CATEGORY_IGNORE)
NEUTRAL = LineClass(CATEGORY_NEUTRAL)


#============================================


def _compile_table(table: str, rules: list[dict[str, str]]) -> list[tuple[re.Pattern, str, str]]:
	"""
	Compile one ordered rule table.

	Args:
		table: Table name, used in error messages.
		rules: Rule dicts with "pattern", "kind" and optional "label".

	Returns:
		list[tuple[re.Pattern, str, str]]: (regex, kind, label) in table order.
	"""
	compiled: list[tuple[re.Pattern, str, str]] = []
	for index, rule in enumerate(rules):
		pattern = str(rule.get("pattern", ""))
		kind = str(rule.get("kind", epp_lint.rules.KIND_UNKNOWN))
		label = str(rule.get("label", pattern))
		if not pattern:
			raise ValueError(f"{table}[{index}] ({label}) has no pattern")
		try:
			regex = re.compile(pattern)
		except re.error as exc:
			raise ValueError(f"{table}[{index}] ({label}) has an invalid pattern: {exc}") from exc
		compiled.append((regex, kind, label))
	return compiled


#============================================


def compile_rules(rules: dict[str, list[dict[str, str]]]) -> dict[str, list[tuple[re.Pattern, str, str]]]:
	"""
	Compile every rule table once per pass.

	Args:
		rules: Rule tables as returned by epp_lint.rules.load_rules.

	Returns:
		dict[str, list[tuple[re.Pattern, str, str]]]: Compiled tables.
	"""
	compiled: dict[str, list[tuple[re.Pattern, str, str]]] = {}
	for table in epp_lint.rules.RULE_TABLES:
		table_rules = rules.get(table, epp_lint.rules.DEFAULT_RULES[table])
		compiled[table] = _compile_table(table, table_rules)
	return compiled


DEFAULT_COMPILED = compile_rules(epp_lint.rules.DEFAULT_RULES)


#============================================


def _first_match(
	normalized: str,
	table: list[tuple[re.Pattern, str, str]],
) -> tuple[str, str] | None:
	for regex, kind, label in table:
		if regex.search(normalized):
			return kind, label
	return None


#============================================


def classify_line(
	line: str,
	compiled: dict[str, list[tuple[re.Pattern, str, str]]] | None = None,
) -> LineClass:
	"""
	Classify a single line as opener, closer, neutral or ignore.

	Tables are consulted in order (neutral guards, openers, closers) and
	the first matching rule wins, so a later rule may be a superset of an
	earlier one.

	Args:
		line: Raw line text.
		compiled: Compiled rule tables; defaults to the built-in rules.

	Returns:
		LineClass: Classification of the line.
	"""
	if compiled is None:
		compiled = DEFAULT_COMPILED
	normalized = epp_lint.parser.normalize_line(line)
	if epp_lint.parser.is_comment_or_blank(normalized):
		return IGNORE

	if _first_match(normalized, compiled["neutral_rules"]) is not None:
		return NEUTRAL

	match = _first_match(normalized, compiled["opener_rules"])
	if match is not None:
		kind, label = match
		return LineClass(CATEGORY_OPENER, kind, label)

	match = _first_match(normalized, compiled["closer_rules"])
	if match is not None:
		kind, label = match
		return LineClass(CATEGORY_CLOSER, kind, label)

	return NEUTRAL


#============================================


def classify_lines(
	source_lines: list[epp_lint.parser.SourceLine],
	compiled: dict[str, list[tuple[re.Pattern, str, str]]] | None = None,
) -> list[tuple[epp_lint.parser.SourceLine, LineClass]]:
	"""
	Classify every line of a document in order.
	"""
	classified: list[tuple[epp_lint.parser.SourceLine, LineClass]] = []
	for source_line in source_lines:
		classified.append((source_line, classify_line(source_line.text, compiled)))
	return classified
