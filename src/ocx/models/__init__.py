"""Data models for ocx.

Import from submodules:
- config_root: ConfigRoot, ConfigRootKind
- registry_item: RegistryItem, RegistryFile, PostinstallSpec, FetchedRegistryItem
- installed: InstalledItemRecord
- plan: InstallPlan, PlannedItem, FileWrite, ConfigEdit, PostinstallPlan, ApplyInstallResult
"""
