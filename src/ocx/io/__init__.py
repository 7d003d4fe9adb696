"""I/O for manifests and the config document.

Import from submodules:
- manifest: parse_registry_item, load_registry_item, load_registry_item_text
- jsonc: get_top_level_property_value_text, upsert_top_level_property, loads
- atomic: write_text_atomic
- managed_config: read_config_text, parse_managed_config, merge_install_plans, write_managed_config
"""
