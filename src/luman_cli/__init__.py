"""luman-cli: Component registry client and installation tracking.

Import from submodules:
- version: __version__
- io: hashing, manifest and project configuration I/O
- operations: resolve, install, status, diff, update, remove, bump
"""

from luman_cli.version import __version__ as __version__
