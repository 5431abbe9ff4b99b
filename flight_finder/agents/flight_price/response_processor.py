#!/usr/bin/env python

# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

# -*- coding: utf-8 -*-

import uuid
from typing import Any, AsyncIterator, Dict, List, Optional

from claude_agent_sdk import query
from claude_agent_sdk.types import (
    AssistantMessage,
    Message,
    ResultMessage,
    TextBlock,
    ToolUseBlock,
)

from flight_finder.agents.flight_price.events import (
    AgentEvent,
    DoneEvent,
    ResultEvent,
    TextEvent,
    ToolEvent,
    UsageEvent,
)
from flight_finder.agents.flight_price.options import get_options
from shared.logger import setup_logger
from shared.telemetry.context import request_context

logger = setup_logger("flight_price_response_processor")


async def stream_agent(
    prompt: str, mode: Optional[str] = None, request_id: Optional[str] = None
) -> AsyncIterator[AgentEvent]:
    """
    Run one flight search agent session and stream simplified events

    Args:
        prompt: The user's request, passed to the agent verbatim
        mode: Deployment mode of the chrome-devtools MCP server ("container" or "local");
              resolved from CHROME_PATH when omitted
        request_id: Id attached to log lines of this run; generated when omitted

    Yields:
        AgentEvent: text, tool, usage and result events in message order,
        then exactly one DoneEvent once the underlying stream is exhausted.
        Errors from the SDK are re-raised unchanged and no DoneEvent follows.
    """
    request_id = request_id or uuid.uuid4().hex

    # The id is only set while this generator runs, never across a yield,
    # so it does not leak to the consumer or to other runs in the same task.
    with request_context(request_id):
        options = get_options(standalone=True, mode=mode)
        logger.info(f"Starting flight search run, model={options.model}, max_turns={options.max_turns}")
        messages = query(prompt=prompt, options=options).__aiter__()

    index = 0
    while True:
        with request_context(request_id):
            try:
                message = await messages.__anext__()
            except StopAsyncIteration:
                logger.info(f"Flight search run finished after {index} messages")
                break
            except Exception:
                logger.exception(f"Flight search run failed after {index} messages")
                raise

            index += 1
            logger.debug(f"claude message index: {index}, type: {type(message).__name__}")
            events = events_from_message(message)

        for event in events:
            yield event

    yield DoneEvent()


def events_from_message(message: Message) -> List[AgentEvent]:
    """
    Re-tag one SDK message into adapter events.

    Within a message the order is text, tool calls, usage, result.
    Messages other than assistant turns and results produce no events.
    """
    if isinstance(message, AssistantMessage):
        return _events_from_assistant_message(message)

    elif isinstance(message, ResultMessage):
        return _events_from_result_message(message)

    return []


def _events_from_assistant_message(message: AssistantMessage) -> List[AgentEvent]:
    events: List[AgentEvent] = []

    for block in message.content:
        if isinstance(block, TextBlock) and block.text:
            events.append(TextEvent(text=block.text))

    for block in message.content:
        if isinstance(block, ToolUseBlock):
            logger.info(f"ToolUseBlock: tool = {block.name}")
            events.append(ToolEvent(name=block.name))

    usage = message.usage
    if usage is not None:
        events.append(_usage_event(usage))

    return events


def _events_from_result_message(message: ResultMessage) -> List[AgentEvent]:
    logger.info(
        f"ResultMessage: subtype = {message.subtype}, is_error = {message.is_error}, "
        f"num_turns = {message.num_turns}"
    )
    if message.result:
        return [ResultEvent(text=message.result)]
    return []


def _usage_event(usage: Dict[str, Any]) -> UsageEvent:
    return UsageEvent(
        input=usage.get("input_tokens") or 0,
        output=usage.get("output_tokens") or 0,
    )
