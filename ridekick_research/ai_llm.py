# Ridekick Research
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

"""
Low-level LLM API wrapper.

This module encapsulates the direct OpenAI SDK calls used by the AI analysis
tool.

Environment variables:
    - `LLM_OPENAI_API_KEY`: API key for the OpenAI-compatible endpoint
    - `LLM_OPENAI_MODEL`: Model identifier (default: `gpt-4o-mini`)
    - `LLM_OPENAI_BASE_URL`: Optional explicit base URL
"""

import os

from typing import Any

from openai import APIStatusError, AsyncOpenAI, OpenAIError
from openai.types.chat import ChatCompletionMessageParam

DEFAULT_MODEL = "gpt-4o-mini"


class LLMError(RuntimeError):
    """
    Raised when the completion API call fails.

    Attributes:
        details:
            Additional error information (HTTP status and response body when
            the API answered with an error status).
    """

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message)
        self.details = details


def _require_env(name: str) -> str:
    """
    Get a required environment variable.

    Args:
        name:
            Environment variable name.

    Returns:
        The environment variable value.

    Raises:
        LLMError:
            If the variable is missing or empty.
    """

    value = os.environ.get(name)
    if not value:
        raise LLMError(f"Missing required environment variable: {name}")
    return value


def llm_model() -> str:
    """Return the configured model identifier."""

    return os.environ.get("LLM_OPENAI_MODEL") or DEFAULT_MODEL


def _openai_base_url() -> str | None:
    """
    Determine the base URL for the OpenAI-compatible endpoint.

    Returns:
        Base URL without trailing slash, or None to use the SDK default.
    """

    base_url = os.environ.get("LLM_OPENAI_BASE_URL")
    if base_url:
        return base_url.rstrip("/")
    return None


async def ai_conversation(messages: list[ChatCompletionMessageParam]) -> str:
    """
    Run a chat completion call.

    Args:
        messages:
            OpenAI chat message list.

    Returns:
        The response content.

    Raises:
        LLMError:
            If the API key is missing, the API call fails or no answer is returned.
    """

    client = AsyncOpenAI(
        api_key=_require_env("LLM_OPENAI_API_KEY"),
        base_url=_openai_base_url(),
    )

    try:
        response = await client.chat.completions.create(
            model=llm_model(),
            messages=messages,
        )
    except APIStatusError as error:
        raise LLMError(
            f"Completion API returned HTTP {error.status_code}",
            details={"status_code": error.status_code, "body": error.body},
        ) from error
    except OpenAIError as error:
        raise LLMError(f"Error calling the OpenAI API: {error}", details=str(error)) from error

    if not response.choices:
        raise LLMError("Completion API returned no choices", details={"model": response.model})

    return response.choices[0].message.content or ""
