"""CLI command implementations for casetrack.

This adapter maps the replay command to the replay adapter and the
core result model. It handles CLI-specific formatting and error
reporting.
"""

import logging
from pathlib import Path
from typing import Any

from casetrack.adapters.replay.player import ScriptPlayer
from casetrack.adapters.replay.script import ScriptError, load_script
from casetrack.core.models import TestResult

logger = logging.getLogger(__name__)


class ReplayCommandHandler:
    """Handles the replay command.

    Replays an event script into a fresh TestCaseNode and renders the
    node's TestResult.
    """

    def __init__(self, player: ScriptPlayer):
        """Initialize the CLI command handler.

        Args:
            player: ScriptPlayer used to drive nodes from scripts.
        """
        self.player = player

    def replay(
        self, script_path: str | Path, format: str = "json", verbose: bool = False
    ) -> dict[str, Any]:
        """Replay a script via CLI.

        Args:
            script_path: Path of the JSON event script.
            format: Output format ('json', 'text'). Default 'json'.
            verbose: If True, log a summary of the result.

        Returns:
            Dictionary with the rendered result, or status/message on error.
        """
        if format not in {"json", "text"}:
            return {
                "status": "error",
                "operation": "replay",
                "message": f"Unsupported format: {format}",
            }

        try:
            script = load_script(script_path)
        except ScriptError as e:
            logger.error(f"Failed to load replay script: {e}")
            return {
                "status": "error",
                "operation": "replay",
                "script": str(script_path),
                "message": str(e),
            }

        node = self.player.play(script)
        result = node.build_result()

        if verbose:
            logger.info(
                f"Replayed {result.name}: {result.status.value}, "
                f"{result.num_failures}/{result.num_tests} failed",
            )

        return {
            "status": "success",
            "operation": "replay",
            "data": result.to_dict() if format == "json" else format_result_as_text(result),
        }


def format_result_as_text(result: TestResult, indent: int = 0) -> str:
    """Format a result tree as human-readable text.

    Args:
        result: Result to format.
        indent: Indentation level of result, used for child results.

    Returns:
        Formatted text string.
    """
    pad = "  " * indent
    lines = []

    lines.append(f"{pad}{result.class_name} :: {result.name}")
    lines.append(f"{pad}  Status: {result.status.value}")
    lines.append(f"{pad}  Tests: {result.num_tests}  Failures: {result.num_failures}")

    interval = result.run_time_interval
    if interval is not None:
        lines.append(
            f"{pad}  Started: {interval.start_date.isoformat()} "
            f"({interval.run_time_millis} ms)"
        )

    if result.properties:
        lines.append(f"{pad}  Properties:")
        for name, value in sorted(result.properties.items()):
            lines.append(f"{pad}    {name} = {value}")

    if result.failures:
        lines.append(f"{pad}  Failures:")
        for failure in result.failures:
            lines.append(f"{pad}    - {type(failure).__name__}: {failure}")

    for child in result.child_results:
        lines.append(format_result_as_text(child, indent + 1))

    return "\n".join(lines)
