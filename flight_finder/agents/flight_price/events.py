# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

"""
Events emitted by the flight price finder run adapter.

Event Types:
- TextEvent: non-empty assistant text
- ToolEvent: a tool call requested by the assistant (name only)
- UsageEvent: input/output token counts of one turn
- ResultEvent: final result text of the run
- DoneEvent: terminal marker, emitted once after the run completes
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Union


class EventType(str, Enum):
    """Event type enumeration."""

    TEXT = "text"
    TOOL = "tool"
    USAGE = "usage"
    RESULT = "result"
    DONE = "done"


@dataclass(frozen=True)
class TextEvent:
    text: str
    type: EventType = field(default=EventType.TEXT, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "text": self.text}


@dataclass(frozen=True)
class ToolEvent:
    name: str
    type: EventType = field(default=EventType.TOOL, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "name": self.name}


@dataclass(frozen=True)
class UsageEvent:
    """Token usage of one turn.

    Attributes:
        input: Input token count, 0 when not reported
        output: Output token count, 0 when not reported
    """

    input: int = 0
    output: int = 0
    type: EventType = field(default=EventType.USAGE, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "input": self.input, "output": self.output}


@dataclass(frozen=True)
class ResultEvent:
    text: str
    type: EventType = field(default=EventType.RESULT, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "text": self.text}


@dataclass(frozen=True)
class DoneEvent:
    type: EventType = field(default=EventType.DONE, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value}


AgentEvent = Union[TextEvent, ToolEvent, UsageEvent, ResultEvent, DoneEvent]
