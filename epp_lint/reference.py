# Standard Library


HOVER_DOCS: dict[str, str] = {
	"say": '**say** `[expression]`\n\nPrints the expression to the console. (Equivalent to `print`)\n\n*Example:* `say "Hello."`',
	"print": "**PRINT** `[expression]`\n\nPseudo code output instruction.",
	"declare": "**DECLARE** `[variable] = [value]`\n\nCreates a new variable.",
	"set": "**set** `[variable]` **to** `[value]`\n\nAssigns a new value to a variable.",
	"let": "**let** `[variable]` **be** `[value]`\n\nDeclares a variable.",
	"function": "**FUNCTION** `name(args)`\n... \n**END FUNCTION**\n\nDefines a pseudo code function.",
	"define": "**define** `name` **with** `args`.\n... \n**end define**.\n\nDefines a new E++ functional block.",
	"repeat": "**repeat** `[N]` **times**.\n... \n**end repeat**.\n\nLoops exactly N times.",
	"while": "**while** `[condition]`.\n... \n**end while**.\n\nLoops as long as condition is true.",
	"ask": '**ask** `"[prompt]"` **and store it in** `[variable]`.\n\nGets user input.',
	"create": '**create window titled** `"[Title]"`\n\nInitializes a graphical webview window.',
	"open": '**open url** `"[URL]"` **in window** `"[Title]"`\n\nLoads a webpage in a window.',
	"show": "**show windows**.\n\nStarts the graphical interface loop. Must be the last statement.",
	"fetch": '**fetch page** `"[URL]"` **into** `[variable]`.\n\nDownloads raw HTML of a web page.',
	"attempt": "**attempt**.\n...\n**if it fails**.\n...\n**end attempt**.\n\nTry-catch block for error handling.",
	"record": "**record**.\n...\n**end record**.\n\nCreates an object/record to store properties.",
}

# (label, snippet body, detail); bodies use ${n:placeholder} tab stops.
SNIPPETS: list[tuple[str, str, str]] = [
	("if block", "if ${1:condition} then.\n\t${2:say \"true\"}\nend if.", "E++ If Block"),
	("IF THEN ENDIF", "IF ${1:condition} THEN\n\t${2:PRINT \"true\"}\nENDIF", "Pseudo Code IF Block"),
	("define function", "define ${1:name} with ${2:args}.\n\t${3:give back null}\nend define.", "E++ Function"),
	("FUNCTION", "FUNCTION ${1:name}(${2:args})\n\t${3:RETURN null}\nEND FUNCTION", "Pseudo Code Function"),
	("repeat times", "repeat ${1:10} times.\n\t${2:say \"loop\"}\nend repeat.", "E++ Repeat Loop"),
	("FOR loop", "FOR ${1:i} = ${2:1} TO ${3:10}\n\t${4:PRINT i}\nNEXT", "Pseudo Code FOR Loop"),
	(
		"create window",
		"create window titled \"${1:My App}\" sized ${2:800} by ${3:600}.\nshow windows.",
		"E++ UI Window",
	),
]

KEYWORDS: list[str] = [
	"say",
	"ask",
	"let",
	"set",
	"declare",
	"print",
	"output",
	"input",
	"increment",
	"decrement",
	"swap",
	"start program.",
	"end program.",
]


#============================================


def hover_text(word: str) -> str | None:
	"""
	Return markdown documentation for a keyword, or None.
	"""
	return HOVER_DOCS.get(word.strip().lower())


#============================================


def completion_items(prefix: str = "") -> list[dict[str, str]]:
	"""
	List snippet and keyword completion items.

	Args:
		prefix: Optional label prefix, matched case-insensitively.

	Returns:
		list[dict[str, str]]: Snippets first, then keywords.
	"""
	wanted = prefix.lower()
	items: list[dict[str, str]] = []
	for label, body, detail in SNIPPETS:
		if not label.lower().startswith(wanted):
			continue
		items.append({"label": label, "kind": "snippet", "insert_text": body, "detail": detail})
	for keyword in KEYWORDS:
		if not keyword.startswith(wanted):
			continue
		items.append({"label": keyword, "kind": "keyword", "insert_text": keyword, "detail": ""})
	return items
