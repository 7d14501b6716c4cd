# Local modules
import epp_lint.tracker


PLUGIN_ID = "block_balance"
PLUGIN_NAME = "Block opener/closer balance"
DEFAULT_ENABLED = True


#============================================


def run(context: dict[str, object]) -> list[dict[str, object]]:
	"""
	Report stray block closers and blocks left open at end of document.

	Args:
		context: Shared lint context.

	Returns:
		list[dict[str, object]]: Issue list.
	"""
	classified = context.get("classified", [])
	return epp_lint.tracker.track_blocks(classified)
