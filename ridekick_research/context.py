# Ridekick Research
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Tool execution context.

The host passes a context object to every tool call. It tells the tool in which
mode it runs and which optional host capabilities are available.
"""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Literal

from ridekick_research.config import Settings


QueryFunction = Callable[[dict[str, Any]], Awaitable[list[Any]]]
ProposeFunction = Callable[[dict[str, Any]], Awaitable[dict[str, Any]]]
LoggerCallback = Callable[[str], None]


@dataclass
class ToolContext:
    """
    Context handed to tools, middleware and event handlers.

    Attributes:
        mode:
            `mcp` when embedded in the host's tool runtime, `cli` when run
            standalone from the command line.
        data_dir:
            Optional host data directory.
        db_path:
            Optional host database path.
        logger:
            Optional host logging callback.
        query:
            Host record query capability (only available in `mcp` mode).
        propose:
            Host capability to submit a document change for human approval.
        settings:
            Plugin settings.
    """

    mode: Literal["mcp", "cli"] = "mcp"
    data_dir: str | None = None
    db_path: str | None = None
    logger: LoggerCallback | None = None
    query: QueryFunction | None = None
    propose: ProposeFunction | None = None
    settings: Settings = field(default_factory=Settings)

    def log(self, message: str) -> None:
        """Forward a message to the host logger, if there is one."""

        if self.logger is not None:
            self.logger(message)
