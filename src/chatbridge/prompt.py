"""Request envelope: role-tagged messages and the prompt that orders them."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Annotated, Any, ClassVar, Dict, Tuple

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer, field_validator, model_validator

# Read-only view over a private copy; serializes back to a plain dict
FrozenDict = Annotated[
    Dict[str, Any],
    AfterValidator(lambda value: MappingProxyType(dict(value))),
    PlainSerializer(lambda value: dict(value)),
]


class MessageType(str, Enum):
    USER = "user"
    SYSTEM = "system"
    ASSISTANT = "assistant"
    FUNCTION = "function"

    @classmethod
    def parse(cls, value: Any) -> "MessageType":
        """Case-insensitive lookup, e.g. ``MessageType.parse("USER")``."""
        if isinstance(value, MessageType):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown message type: {value!r}") from None


class Message(BaseModel):
    """A single piece of conversational input.

    The role tag tells the downstream model how to interpret ``content``;
    ``properties`` carries free-form extras (e.g. a function ``name``).
    """

    model_config = ConfigDict(frozen=True)

    content: str
    properties: FrozenDict = Field(default_factory=dict, validate_default=True)
    message_type: MessageType

    @field_validator("message_type", mode="before")
    @classmethod
    def _parse_type(cls, value: Any) -> MessageType:
        return MessageType.parse(value)


class _FixedRoleMessage(Message):
    """Message whose role is set by its class; content may be positional."""

    role: ClassVar[MessageType]

    def __init__(self, content: str, **data: Any):
        data.setdefault("message_type", type(self).role)
        super().__init__(content=content, **data)

    @model_validator(mode="after")
    def _check_role(self) -> "_FixedRoleMessage":
        if self.message_type is not self.role:
            raise ValueError(f"{type(self).__name__} is always a {self.role.value} message")
        return self


class UserMessage(_FixedRoleMessage):
    role: ClassVar[MessageType] = MessageType.USER


class SystemMessage(_FixedRoleMessage):
    role: ClassVar[MessageType] = MessageType.SYSTEM


class AssistantMessage(_FixedRoleMessage):
    role: ClassVar[MessageType] = MessageType.ASSISTANT


class FunctionMessage(_FixedRoleMessage):
    role: ClassVar[MessageType] = MessageType.FUNCTION


class Prompt(BaseModel):
    """Ordered conversation sent to a model. Order is conversation order."""

    model_config = ConfigDict(frozen=True)

    messages: Tuple[Message, ...] = Field(min_length=1)

    @classmethod
    def from_text(cls, text: str) -> "Prompt":
        return cls(messages=[UserMessage(text)])

    @classmethod
    def of(cls, *messages: Message) -> "Prompt":
        return cls(messages=messages)

    @property
    def contents(self) -> str:
        """All message contents joined by newlines, for single-input backends."""
        return "\n".join(m.content for m in self.messages)
