"""Line-level diff between installed files and a candidate registry version."""

import difflib
import logging
from pathlib import Path

from luman_cli.io.config import resolve_file_path
from luman_cli.models.config import ProjectConfig
from luman_cli.models.registry import RegistryItem

logger = logging.getLogger(__name__)

NO_CHANGES = "No changes detected"


def generate_diff(
    project_dir: Path,
    component_name: str,
    candidate: RegistryItem,
    config: ProjectConfig,
) -> str:
    """Generate a unified diff from installed files to the candidate's files.

    Files with no differing lines are left out. A file that does not exist
    locally, or cannot be read as text, is shown as a new file with every line
    added. Line endings are not treated as differences.

    Args:
        project_dir: Project directory
        component_name: Component name (used for logging)
        candidate: Registry item with file content populated
        config: Project configuration supplying the path aliases

    Returns:
        The diff text, or NO_CHANGES if no file differs
    """
    blocks: list[str] = []

    for file in candidate.files:
        target_path = resolve_file_path(config, file.path)
        local_path = project_dir / target_path
        new_lines = (file.content or "").splitlines()

        try:
            current_lines = local_path.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as e:
            # Absent or unreadable (directory, binary) local files diff as new
            logger.debug("Treating %s as a new file: %s", target_path, e)
            blocks.append(_format_new_file(target_path, new_lines))
            continue

        diff_lines = list(
            difflib.unified_diff(
                current_lines,
                new_lines,
                fromfile=target_path,
                tofile=f"{target_path} (new version)",
                lineterm="",
            )
        )
        if diff_lines:
            blocks.append("\n".join(diff_lines))

    logger.debug("Diff for %s: %d file(s) differ", component_name, len(blocks))

    if not blocks:
        return NO_CHANGES
    return "\n\n".join(blocks)


def _format_new_file(target_path: str, lines: list[str]) -> str:
    header = ["--- /dev/null", f"+++ {target_path} (new file)"]
    if lines:
        header.append(f"@@ -0,0 +1,{len(lines)} @@")
    return "\n".join(header + [f"+{line}" for line in lines])
