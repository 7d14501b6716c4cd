# Standard Library
import copy
import itertools
import threading

# Local modules
import epp_lint.engine


#============================================


class DiagnosticCollection:
	"""
	Per-document diagnostic sets, replaced wholesale on every publish.

	Publishing with a pass ticket from begin_pass() makes the newest pass
	win: a slower pass that started earlier cannot overwrite a result that
	was already published by a later one.
	"""

	def __init__(self, name: str) -> None:
		self.name = name
		self._lock = threading.Lock()
		self._tickets = itertools.count(1)
		self._entries: dict[str, list[dict[str, object]]] = {}
		# Newest ticket handed out / published per document.
		self._issued: dict[str, int] = {}
		self._applied: dict[str, int] = {}

	def begin_pass(self, uri: str) -> int:
		"""
		Hand out a ticket for a validation pass of one document.
		"""
		with self._lock:
			ticket = next(self._tickets)
			self._issued[uri] = ticket
			return ticket

	def set(
		self,
		uri: str,
		issues: list[dict[str, object]],
		ticket: int | None = None,
	) -> bool:
		"""
		Replace the diagnostic set for a document.

		Args:
			uri: Document identifier.
			issues: Complete diagnostic set for the document.
			ticket: Optional pass ticket from begin_pass().

		Returns:
			bool: False when the result was stale and discarded.
		"""
		with self._lock:
			if ticket is not None:
				if ticket <= self._applied.get(uri, 0):
					return False
				self._applied[uri] = ticket
			self._entries[uri] = copy.deepcopy(list(issues))
			return True

	def get(self, uri: str) -> list[dict[str, object]]:
		with self._lock:
			return copy.deepcopy(self._entries.get(uri, []))

	def delete(self, uri: str) -> None:
		"""
		Drop a document's diagnostics; passes already in flight for it are
		treated as stale.
		"""
		with self._lock:
			self._entries.pop(uri, None)
			self._retire(uri)

	def clear(self) -> None:
		with self._lock:
			self._entries.clear()
			for uri in list(self._issued):
				self._retire(uri)

	def _retire(self, uri: str) -> None:
		floor = max(self._issued.get(uri, 0), self._applied.get(uri, 0))
		if floor:
			self._applied[uri] = floor

	def uris(self) -> list[str]:
		with self._lock:
			return sorted(self._entries)


#============================================


def update_diagnostics(
	collection: DiagnosticCollection,
	uri: str,
	text: str,
	language_id: str,
	rules: dict[str, list[dict[str, str]]],
	plugins: list[dict[str, object]],
) -> list[dict[str, object]]:
	"""
	Run one full validation pass and publish its result for a document.

	Documents in other languages get an empty set.

	Args:
		collection: Target diagnostic collection.
		uri: Document identifier.
		text: Current document text.
		language_id: Declared language tag of the document.
		rules: Classification rule tables.
		plugins: Enabled plugins.

	Returns:
		list[dict[str, object]]: The diagnostics computed by this pass.
	"""
	ticket = collection.begin_pass(uri)
	issues = epp_lint.engine.validate_document(text, language_id, rules, plugins, file_path=uri)
	collection.set(uri, issues, ticket=ticket)
	return issues
