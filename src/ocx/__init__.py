"""ocx: install registry items into opencode configuration roots.

Import from submodules:
- version: __version__
- operations: resolve_config_root, resolve_registry_tree, plan_installs, apply_install_plans
- sources: ManifestResolver and the individual manifest sources
"""

from ocx.version import __version__ as __version__
