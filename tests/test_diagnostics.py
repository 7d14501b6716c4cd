# Standard Library
import threading

# Local modules
import epp_lint.diagnostics
import epp_lint.registry
import epp_lint.rules


#============================================


def _update(collection, uri: str, text: str, language_id: str = "epp") -> list[dict[str, object]]:
	rules = epp_lint.rules.load_rules(None)
	plugins = epp_lint.registry.build_registry().resolve_plugins(set(), set(), set())
	return epp_lint.diagnostics.update_diagnostics(collection, uri, text, language_id, rules, plugins)


#============================================


def test_update_replaces_instead_of_accumulating() -> None:
	collection = epp_lint.diagnostics.DiagnosticCollection("epp")
	_update(collection, "file:///a.epp", "end if.\nend if.\n")
	assert len(collection.get("file:///a.epp")) == 2
	_update(collection, "file:///a.epp", "end if.\nend if.\n")
	assert len(collection.get("file:///a.epp")) == 2
	_update(collection, "file:///a.epp", "if x then.\nend if.\n")
	assert collection.get("file:///a.epp") == []


def test_other_language_publishes_empty_set() -> None:
	collection = epp_lint.diagnostics.DiagnosticCollection("epp")
	issues = _update(collection, "file:///a.py", "end if.\n", language_id="python")
	assert issues == []
	assert collection.get("file:///a.py") == []
	assert collection.uris() == ["file:///a.py"]


def test_documents_are_independent() -> None:
	collection = epp_lint.diagnostics.DiagnosticCollection("epp")
	_update(collection, "file:///a.epp", "end if.\n")
	_update(collection, "file:///b.epp", "if x then.\n")
	assert [issue["severity"] for issue in collection.get("file:///a.epp")] == ["ERROR"]
	assert [issue["severity"] for issue in collection.get("file:///b.epp")] == ["WARNING"]


def test_stale_pass_is_discarded() -> None:
	collection = epp_lint.diagnostics.DiagnosticCollection("epp")
	uri = "file:///a.epp"
	slow_ticket = collection.begin_pass(uri)
	fast_ticket = collection.begin_pass(uri)
	newer = [{"severity": "WARNING", "message": "newer", "line": 0}]
	older = [{"severity": "ERROR", "message": "older", "line": 0}]
	assert collection.set(uri, newer, ticket=fast_ticket) is True
	assert collection.set(uri, older, ticket=slow_ticket) is False
	assert collection.get(uri) == newer


def test_pass_started_before_delete_stays_stale() -> None:
	collection = epp_lint.diagnostics.DiagnosticCollection("epp")
	uri = "file:///a.epp"
	stale_ticket = collection.begin_pass(uri)
	assert collection.set(uri, [], ticket=collection.begin_pass(uri)) is True
	collection.delete(uri)
	stale = [{"severity": "ERROR", "message": "stale", "line": 0}]
	assert collection.set(uri, stale, ticket=stale_ticket) is False
	assert collection.uris() == []


def test_pass_in_flight_during_delete_is_discarded() -> None:
	collection = epp_lint.diagnostics.DiagnosticCollection("epp")
	uri = "file:///a.epp"
	in_flight = collection.begin_pass(uri)
	collection.delete(uri)
	assert collection.set(uri, [{"severity": "ERROR", "message": "x"}], ticket=in_flight) is False
	assert collection.set(uri, [], ticket=collection.begin_pass(uri)) is True


def test_pass_in_flight_during_clear_is_discarded() -> None:
	collection = epp_lint.diagnostics.DiagnosticCollection("epp")
	first = collection.begin_pass("a")
	second = collection.begin_pass("b")
	collection.set("a", [], ticket=first)
	collection.clear()
	assert collection.set("a", [], ticket=first) is False
	assert collection.set("b", [], ticket=second) is False
	assert collection.uris() == []


def test_untracked_set_always_applies() -> None:
	collection = epp_lint.diagnostics.DiagnosticCollection("epp")
	collection.set("u", [{"severity": "ERROR", "message": "x"}])
	collection.set("u", [])
	assert collection.get("u") == []


def test_get_returns_a_copy() -> None:
	collection = epp_lint.diagnostics.DiagnosticCollection("epp")
	collection.set("u", [{"severity": "ERROR", "message": "x"}])
	collection.get("u")[0]["message"] = "changed"
	assert collection.get("u")[0]["message"] == "x"


def test_delete_and_clear() -> None:
	collection = epp_lint.diagnostics.DiagnosticCollection("epp")
	collection.set("a", [], ticket=collection.begin_pass("a"))
	collection.set("b", [])
	collection.delete("a")
	assert collection.uris() == ["b"]
	collection.set("a", [{"severity": "ERROR", "message": "x"}], ticket=collection.begin_pass("a"))
	assert len(collection.get("a")) == 1
	collection.clear()
	assert collection.uris() == []


def test_concurrent_passes_keep_latest_result() -> None:
	collection = epp_lint.diagnostics.DiagnosticCollection("epp")
	uri = "file:///a.epp"
	texts = ["end if.\n" * count for count in range(1, 9)]
	threads = [threading.Thread(target=_update, args=(collection, uri, text)) for text in texts]
	for thread in threads:
		thread.start()
	for thread in threads:
		thread.join()
	published = collection.get(uri)
	assert 1 <= len(published) <= 8
	assert all(issue["severity"] == "ERROR" for issue in published)
