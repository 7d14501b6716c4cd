# Standard Library
import json


KIND_CONDITIONAL = "conditional"
KIND_WHILE_LOOP = "while_loop"
KIND_COUNTED_REPEAT = "counted_repeat"
KIND_REPEAT = "repeat"
KIND_DO_LOOP = "do_loop"
KIND_FOR_EACH = "for_each"
KIND_FOR_LOOP = "for_loop"
KIND_FUNCTION = "function"
KIND_TRY = "try_attempt"
KIND_SWITCH = "switch"
KIND_TEXT_BLOCK = "text_block"
KIND_PROGRAM = "program_block"
KIND_RECORD = "record"
KIND_UNKNOWN = "unknown"

# Human readable names used in messages.
KIND_LABELS: dict[str, str] = {
	KIND_CONDITIONAL: "if",
	KIND_WHILE_LOOP: "while",
	KIND_COUNTED_REPEAT: "repeat-times",
	KIND_REPEAT: "repeat",
	KIND_DO_LOOP: "do",
	KIND_FOR_EACH: "for-each",
	KIND_FOR_LOOP: "for",
	KIND_FUNCTION: "function",
	KIND_TRY: "attempt",
	KIND_SWITCH: "switch",
	KIND_TEXT_BLOCK: "text",
	KIND_PROGRAM: "program",
	KIND_RECORD: "record",
	KIND_UNKNOWN: "block",
}

# Closer kind -> opener kinds it properly closes.
CLOSER_COMPATIBILITY: dict[str, set[str]] = {
	KIND_CONDITIONAL: {KIND_CONDITIONAL},
	KIND_WHILE_LOOP: {KIND_WHILE_LOOP},
	KIND_REPEAT: {KIND_REPEAT, KIND_COUNTED_REPEAT},
	KIND_DO_LOOP: {KIND_DO_LOOP},
	KIND_FOR_LOOP: {KIND_FOR_LOOP, KIND_FOR_EACH},
	KIND_FUNCTION: {KIND_FUNCTION},
	KIND_TRY: {KIND_TRY},
	KIND_SWITCH: {KIND_SWITCH},
	KIND_TEXT_BLOCK: {KIND_TEXT_BLOCK},
	KIND_PROGRAM: {KIND_PROGRAM},
	KIND_RECORD: {KIND_RECORD},
}

FUNCTION_WORDS = r"(?:define|function|procedure|algorithm|routine|sub)"

# Guards run before opener/closer detection; they contain words ("if",
# "error", "case") that would otherwise match a block pattern.
DEFAULT_NEUTRAL_RULES: list[dict[str, str]] = [
	{
		"label": "attempt failure handler",
		"kind": "neutral",
		"pattern": r"\bif\s+it\s+fails\b",
	},
	{
		"label": "on error handler",
		"kind": "neutral",
		"pattern": r"\bon\s+error\b",
	},
	{
		"label": "branch continuation",
		"kind": "neutral",
		"pattern": r"^(?:otherwise|else\s*if|else|default|case(?!\s+of\b))\b",
	},
	{
		"label": "try continuation",
		"kind": "neutral",
		"pattern": r"^(?:catch|except|finally)\b",
	},
]

DEFAULT_OPENER_RULES: list[dict[str, str]] = [
	{
		"label": "if ... then",
		"kind": KIND_CONDITIONAL,
		"pattern": r"^if\b.*\bthen\b",
	},
	{
		"label": "bare if",
		"kind": KIND_CONDITIONAL,
		"pattern": r"^if\b(?!.*\bthen\b)",
	},
	{
		"label": "while",
		"kind": KIND_WHILE_LOOP,
		"pattern": r"^while\b",
	},
	{
		"label": "function definition",
		"kind": KIND_FUNCTION,
		"pattern": r"^" + FUNCTION_WORDS + r"\b",
	},
	{
		"label": "repeat N times",
		"kind": KIND_COUNTED_REPEAT,
		"pattern": r"^repeat\b.*\btimes\b",
	},
	{
		"label": "repeat",
		"kind": KIND_REPEAT,
		"pattern": r"^repeat\b",
	},
	{
		"label": "do",
		"kind": KIND_DO_LOOP,
		"pattern": r"^do\b",
	},
	{
		"label": "for each",
		"kind": KIND_FOR_EACH,
		"pattern": r"^for\s+(?:each|every)\b",
	},
	{
		"label": "numeric for",
		"kind": KIND_FOR_LOOP,
		"pattern": r"^for\s+\w+\s*(?:=|<-|←|from\b)",
	},
	{
		"label": "for",
		"kind": KIND_FOR_LOOP,
		"pattern": r"^for\b",
	},
	{
		"label": "try/attempt",
		"kind": KIND_TRY,
		"pattern": r"^(?:try|attempt)\b",
	},
	{
		"label": "switch",
		"kind": KIND_SWITCH,
		"pattern": r"^(?:switch|select\s+case|case\s+of|match)\b",
	},
	{
		"label": "text block",
		"kind": KIND_TEXT_BLOCK,
		"pattern": r"^text\s+block\b",
	},
	{
		"label": "program start",
		"kind": KIND_PROGRAM,
		"pattern": r"^(?:start|begin)\s+program\b",
	},
	{
		"label": "record",
		"kind": KIND_RECORD,
		"pattern": r"^record$",
	},
	{
		"label": "type definition",
		"kind": KIND_RECORD,
		"pattern": r"^type\s+\w+$",
	},
]

DEFAULT_CLOSER_RULES: list[dict[str, str]] = [
	{
		"label": "end if",
		"kind": KIND_CONDITIONAL,
		"pattern": r"^end\s*if\b",
	},
	{
		"label": "end while",
		"kind": KIND_WHILE_LOOP,
		"pattern": r"^(?:end\s*while|wend)\b",
	},
	{
		"label": "end function",
		"kind": KIND_FUNCTION,
		"pattern": r"^end\s*" + FUNCTION_WORDS + r"\b",
	},
	{
		"label": "end repeat",
		"kind": KIND_REPEAT,
		"pattern": r"^end\s*repeat\b",
	},
	{
		"label": "until",
		"kind": KIND_REPEAT,
		"pattern": r"^until\b",
	},
	{
		"label": "loop",
		"kind": KIND_DO_LOOP,
		"pattern": r"^loop\b",
	},
	{
		"label": "end do",
		"kind": KIND_DO_LOOP,
		"pattern": r"^end\s*do\b",
	},
	{
		"label": "end for",
		"kind": KIND_FOR_LOOP,
		"pattern": r"^(?:end\s*for|next)\b",
	},
	{
		"label": "end attempt",
		"kind": KIND_TRY,
		"pattern": r"^end\s*(?:try|attempt)\b",
	},
	{
		"label": "end switch",
		"kind": KIND_SWITCH,
		"pattern": r"^end\s*(?:switch|select|case|match)\b",
	},
	{
		"label": "end text",
		"kind": KIND_TEXT_BLOCK,
		"pattern": r"^end\s+text\b",
	},
	{
		"label": "end program",
		"kind": KIND_PROGRAM,
		"pattern": r"^end\s+program\b",
	},
	{
		"label": "end record",
		"kind": KIND_RECORD,
		"pattern": r"^end\s*(?:record|type)\b",
	},
	{
		"label": "end",
		"kind": KIND_UNKNOWN,
		"pattern": r"^end$",
	},
]

RULE_TABLES = ("neutral_rules", "opener_rules", "closer_rules")

DEFAULT_RULES: dict[str, list[dict[str, str]]] = {
	"neutral_rules": DEFAULT_NEUTRAL_RULES,
	"opener_rules": DEFAULT_OPENER_RULES,
	"closer_rules": DEFAULT_CLOSER_RULES,
}


#============================================


def kind_label(kind: str | None) -> str:
	"""
	Return the display name for a block kind.
	"""
	if kind is None:
		return KIND_LABELS[KIND_UNKNOWN]
	return KIND_LABELS.get(kind, kind.replace("_", " "))


#============================================


def is_compatible(closer_kind: str | None, opener_kind: str) -> bool:
	"""
	Check whether a closer kind belongs to the same family as an opener kind.

	Args:
		closer_kind: Kind carried by the closer line.
		opener_kind: Kind of the frame being closed.

	Returns:
		bool: True when the pair is compatible. Unknown closers match anything.
	"""
	if closer_kind is None or closer_kind == KIND_UNKNOWN:
		return True
	allowed = CLOSER_COMPATIBILITY.get(closer_kind)
	if allowed is None:
		return closer_kind == opener_kind
	return opener_kind in allowed


#============================================


def load_rules(rules_file: str | None) -> dict[str, list[dict[str, str]]]:
	"""
	Load classification rules from JSON or fall back to defaults.

	Each of "neutral_rules", "opener_rules" and "closer_rules" may be
	replaced; missing keys keep the default table.

	Args:
		rules_file: Optional path to a JSON rules file.

	Returns:
		dict[str, list[dict[str, str]]]: Rule tables keyed by table name.
	"""
	if rules_file is None:
		return dict(DEFAULT_RULES)
	with open(rules_file, "r", encoding="utf-8") as handle:
		data = json.load(handle)
	if not isinstance(data, dict):
		raise ValueError(f"Rules file must contain a JSON object: {rules_file}")
	rules: dict[str, list[dict[str, str]]] = {}
	for table in RULE_TABLES:
		rules[table] = data.get(table, DEFAULT_RULES[table])
	return rules
