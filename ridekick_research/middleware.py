# Ridekick Research
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Tool middleware and event hooks.

Middleware runs around every tool call dispatched by the extension and may
replace the arguments (before the call) or the result (after the call). The
logging middleware shipped here never changes either.

Event handlers react to host events (searches, ingested documents).
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Protocol

from ridekick_research.context import ToolContext


logger = logging.getLogger(__name__)

TOOL_PREFIX = "ridekick_"


class Middleware(Protocol):
    """Interface for tool middleware."""

    name: str

    async def before_tool_call(
        self,
        tool_name: str,
        args: Mapping[str, Any],
        context: ToolContext,
    ) -> Mapping[str, Any]:
        """Return the (possibly replaced) arguments for the tool call."""

    async def after_tool_call(
        self,
        tool_name: str,
        args: Mapping[str, Any],
        result: Any,
        context: ToolContext,
    ) -> Any:
        """Return the (possibly replaced) tool result."""


EventHandler = Callable[[Mapping[str, Any], ToolContext], None]


def _emit(context: ToolContext, message: str) -> None:
    logger.info("%s", message)
    context.log(message)


def _to_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, default=str)


def result_summary(result: Any) -> str:
    """Describe a tool result by its keys, or by its type if it is not a mapping."""

    if isinstance(result, Mapping):
        return ", ".join(str(k) for k in result.keys())
    if result is None:
        return "None"
    return type(result).__name__


@dataclass(frozen=True)
class LoggingMiddleware:
    """Log calls and results of the extension's own tools."""

    name: str = "ridekick-logger"

    async def before_tool_call(
        self,
        tool_name: str,
        args: Mapping[str, Any],
        context: ToolContext,
    ) -> Mapping[str, Any]:
        if tool_name.startswith(TOOL_PREFIX):
            _emit(context, f"[ridekick] Calling {tool_name} with: {_to_json(dict(args))}")
        return args

    async def after_tool_call(
        self,
        tool_name: str,
        args: Mapping[str, Any],
        result: Any,
        context: ToolContext,
    ) -> Any:
        if tool_name.startswith(TOOL_PREFIX):
            _emit(context, f"[ridekick] {tool_name} returned: {result_summary(result)}")
        return result


def on_tool_call(payload: Mapping[str, Any], context: ToolContext) -> None:
    """Accept tool call events. They are already covered by the middleware."""

    _ = payload, context


def on_search(payload: Mapping[str, Any], context: ToolContext) -> None:
    _emit(context, f"[ridekick-events] Search performed: {_to_json(dict(payload))}")


def on_ingest(payload: Mapping[str, Any], context: ToolContext) -> None:
    _emit(context, f"[ridekick-events] Document ingested: {_to_json(dict(payload))}")


def default_event_handlers() -> dict[str, EventHandler]:
    return {
        "tool.call": on_tool_call,
        "search": on_search,
        "ingest": on_ingest,
    }
