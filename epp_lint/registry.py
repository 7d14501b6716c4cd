# Standard Library
import importlib
import importlib.util
import os

# Local modules
import epp_lint.plugins


REQUIRED_PLUGIN_ATTRS = ("PLUGIN_ID", "PLUGIN_NAME", "run")


#============================================


def _plugin_from_module(module: object) -> dict[str, object]:
	"""
	Read plugin metadata from a module.

	Args:
		module: Imported plugin module.

	Returns:
		dict[str, object]: Plugin metadata dict.
	"""
	missing = [name for name in REQUIRED_PLUGIN_ATTRS if not hasattr(module, name)]
	if missing:
		module_name = getattr(module, "__name__", repr(module))
		raise ValueError(f"Plugin module {module_name} is missing: {', '.join(missing)}")
	plugin_run = getattr(module, "run")
	if not callable(plugin_run):
		raise ValueError(f"Plugin {getattr(module, 'PLUGIN_ID')} has a non-callable run")
	plugin = {
		"id": str(getattr(module, "PLUGIN_ID")),
		"name": str(getattr(module, "PLUGIN_NAME")),
		"run": plugin_run,
		"default_enabled": bool(getattr(module, "DEFAULT_ENABLED", True)),
	}
	return plugin


#============================================


class Registry:
	"""Ordered registry of lint plugins."""

	def __init__(self) -> None:
		self._plugins: dict[str, dict[str, object]] = {}
		self._order: list[str] = []

	def register(self, plugin: dict[str, object]) -> None:
		"""
		Register a plugin; ids must be unique.
		"""
		plugin_id = str(plugin.get("id"))
		if plugin_id in self._plugins:
			raise ValueError(f"Duplicate plugin id: {plugin_id}")
		self._plugins[plugin_id] = plugin
		self._order.append(plugin_id)

	def get(self, plugin_id: str) -> dict[str, object]:
		if plugin_id not in self._plugins:
			raise KeyError(plugin_id)
		return self._plugins[plugin_id]

	def list_plugins(self) -> list[dict[str, object]]:
		return [self._plugins[plugin_id] for plugin_id in self._order]

	def resolve_plugins(
		self,
		only_ids: set[str],
		enable_ids: set[str],
		disable_ids: set[str],
	) -> list[dict[str, object]]:
		"""
		Resolve the enabled plugins, in registration order.

		Args:
			only_ids: When set, run exactly these plugin ids.
			enable_ids: Opt-in plugin ids added to the defaults.
			disable_ids: Plugin ids to drop.

		Returns:
			list[dict[str, object]]: Enabled plugins.
		"""
		unknown = (only_ids | enable_ids | disable_ids) - set(self._order)
		if unknown:
			raise ValueError(f"Unknown plugin ids: {', '.join(sorted(unknown))}")

		if only_ids:
			enabled = set(only_ids)
		else:
			enabled = {
				plugin_id
				for plugin_id in self._order
				if self._plugins[plugin_id].get("default_enabled") is True
			}
			enabled.update(enable_ids)
		enabled.difference_update(disable_ids)
		return [self._plugins[plugin_id] for plugin_id in self._order if plugin_id in enabled]

	def load_plugin_path(self, path: str) -> dict[str, object]:
		"""
		Import a plugin module from a file path and register it.

		Args:
			path: Path to a plugin module.

		Returns:
			dict[str, object]: Registered plugin metadata.
		"""
		abs_path = os.path.abspath(path)
		module_name = f"epp_lint_plugin_{len(self._order)}"
		spec = importlib.util.spec_from_file_location(module_name, abs_path)
		if spec is None or spec.loader is None:
			raise ValueError(f"Unable to load plugin module: {path}")
		module = importlib.util.module_from_spec(spec)
		spec.loader.exec_module(module)
		plugin = _plugin_from_module(module)
		self.register(plugin)
		return plugin


#============================================


def build_registry() -> Registry:
	"""
	Build a registry holding the built-in plugins.

	Returns:
		Registry: Plugin registry.
	"""
	registry = Registry()
	for module_name in epp_lint.plugins.BUILTIN_PLUGINS:
		module = importlib.import_module(module_name)
		registry.register(_plugin_from_module(module))
	return registry
