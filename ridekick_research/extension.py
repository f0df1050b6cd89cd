# Ridekick Research
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Extension entrypoint for the host application.

The host loads `extension` from this module, registers the tool definitions and
routes tool calls and events through `Extension.call_tool()` and
`Extension.emit()`.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from ridekick_research.context import ToolContext
from ridekick_research.middleware import EventHandler, LoggingMiddleware, Middleware, default_event_handlers
from ridekick_research.tools import AIAnalysisTool, HypothesisTool, PainPointsTool, SpeakersTool
from ridekick_research.tools.base import Tool, ToolDefinition, ToolNotFoundError, definition_of


logger = logging.getLogger(__name__)

EXTENSION_NAME = "lore-ridekick-research"
EXTENSION_VERSION = "0.1.0"


@dataclass
class Extension:
    """
    Tools, middleware and event handlers of the plugin.

    Attributes:
        name:
            Extension name reported to the host.
        version:
            Extension version reported to the host.
        tools:
            Registered tools keyed by name.
        middleware:
            Middleware applied to every tool call, in order.
        events:
            Event handlers keyed by event name.
    """

    name: str = EXTENSION_NAME
    version: str = EXTENSION_VERSION
    tools: dict[str, Tool] = field(default_factory=dict)
    middleware: list[Middleware] = field(default_factory=list)
    events: dict[str, EventHandler] = field(default_factory=dict)

    def definitions(self) -> list[ToolDefinition]:
        """Return the host-facing definitions of all tools."""

        return [definition_of(t) for t in self.tools.values()]

    async def call_tool(
        self,
        name: str,
        args: Mapping[str, Any] | None,
        context: ToolContext,
    ) -> Any:
        """
        Run a tool through the middleware chain.

        Args:
            name:
                Tool name.
            args:
                Flat argument mapping (None is treated as empty).
            context:
                Tool execution context.

        Returns:
            The tool result after all `after_tool_call` hooks.

        Raises:
            ToolNotFoundError:
                If no tool with this name is registered.
            ToolInputError:
                If required arguments are missing.
            ConfigError:
                If the record source cannot be configured.
        """

        tool = self.tools.get(name)
        if tool is None:
            raise ToolNotFoundError(f"Unknown tool: {name}")

        call_args: Mapping[str, Any] = dict(args or {})
        for mw in self.middleware:
            call_args = await mw.before_tool_call(name, call_args, context)

        result = await tool.run(call_args, context)

        for mw in self.middleware:
            result = await mw.after_tool_call(name, call_args, result, context)

        return result

    def emit(self, event: str, payload: Mapping[str, Any], context: ToolContext) -> None:
        """Dispatch a host event. Events without a handler are ignored."""

        handler = self.events.get(event)
        if handler is None:
            logger.debug("No handler for event '%s'", event)
            return
        handler(payload, context)


def build_extension() -> Extension:
    """Construct the extension with its default tools, middleware and events."""

    tools: list[Tool] = [
        SpeakersTool(),
        HypothesisTool(),
        PainPointsTool(),
        AIAnalysisTool(),
    ]

    return Extension(
        tools={t.name: t for t in tools},
        middleware=[LoggingMiddleware()],
        events=default_event_handlers(),
    )


extension = build_extension()
