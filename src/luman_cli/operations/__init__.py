"""Operations for luman-cli.

Import from submodules:
- bump: BumpResult, bump_registry_item
- diff: NO_CHANGES, generate_diff
- install: InstallResult, install_components, write_component_files
- remove: RemoveResult, remove_installed_component
- resolve: resolve, resolve_dependencies
- status: check_all_components_status, check_component_status
- update: UpdateResult, update_component
"""
