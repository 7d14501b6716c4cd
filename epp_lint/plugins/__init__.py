"""Built-in plugin list."""

BUILTIN_PLUGINS = [
	"epp_lint.plugins.block_balance",
	"epp_lint.plugins.block_kinds",
]
