# Local modules
import epp_lint.tracker


PLUGIN_ID = "block_kinds"
PLUGIN_NAME = "Closer keyword matches its opener"
DEFAULT_ENABLED = False


#============================================


def run(context: dict[str, object]) -> list[dict[str, object]]:
	"""
	Flag closers whose keyword family differs from the block they close.

	Args:
		context: Shared lint context.

	Returns:
		list[dict[str, object]]: Issue list.
	"""
	classified = context.get("classified", [])
	return epp_lint.tracker.find_kind_mismatches(classified)
