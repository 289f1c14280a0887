"""Data models for luman-cli.

Import from submodules:
- config: Aliases, ProjectConfig
- manifest: Manifest, ManifestEntry
- registry: ChangelogEntry, RegistryFile, RegistryItem
- semver: BumpType, bump_version, validate_bump_type
- status: ComponentStatus variants, FileStatus, StatusResult
"""
