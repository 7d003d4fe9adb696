"""Shared constants for ocx."""

from typing import Literal

# Directory that marks a project config root
CONFIG_DIR_NAME = ".opencode"

CONFIG_FILE_NAME = "opencode.jsonc"

# Top-level property of the config document owned by ocx
MANAGED_CONFIG_KEY = "ocx"

DEFAULT_ENTRY = "index.ts"

ItemKind = Literal["tool", "agent", "command", "themes"]

ITEM_KINDS: tuple[ItemKind, ...] = ("tool", "agent", "command", "themes")

FileMode = Literal["0644", "0755"]

# Global config directories, relative to the home directory, in lookup order
GLOBAL_CONFIG_DIRS: tuple[tuple[str, ...], ...] = (
    (".config", "opencode"),
    (".opencode",),
)

STAGING_DIR_PREFIX = ".tmp-ocx-"

DEBUG_ENV_VAR = "OCX_DEBUG"
HTTP_TIMEOUT_ENV_VAR = "OCX_HTTP_TIMEOUT"
DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0
