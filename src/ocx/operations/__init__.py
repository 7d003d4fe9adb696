"""Resolve, plan, and install operations.

Data flows one way: specs -> resolved items -> plans -> filesystem + config.
"""

from ocx.operations.config_root import resolve_config_root as resolve_config_root
from ocx.operations.install import apply_install_plans as apply_install_plans
from ocx.operations.plan import plan_installs as plan_installs
from ocx.operations.resolve import resolve_registry_tree as resolve_registry_tree
