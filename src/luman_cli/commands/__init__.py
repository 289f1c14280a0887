"""CLI commands for luman-cli."""
