"""I/O operations for luman-cli."""

from luman_cli.io.config import (
    create_default_config,
    get_registry_location,
    load_project_config,
    require_project_config,
    resolve_file_path,
    save_project_config,
)
from luman_cli.io.hashing import hash_content, hash_file, hash_files
from luman_cli.io.manifest import (
    get_manifest_path,
    initialize_manifest,
    manifest_exists,
    read_manifest,
    remove_component,
    update_customized_flag,
    upsert_component,
    write_manifest,
)

__all__ = [
    "create_default_config",
    "get_manifest_path",
    "get_registry_location",
    "hash_content",
    "hash_file",
    "hash_files",
    "initialize_manifest",
    "load_project_config",
    "manifest_exists",
    "read_manifest",
    "remove_component",
    "require_project_config",
    "resolve_file_path",
    "save_project_config",
    "update_customized_flag",
    "upsert_component",
    "write_manifest",
]
