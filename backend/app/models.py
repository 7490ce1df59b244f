from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class InteractionType(IntEnum):
    PING = 1
    APPLICATION_COMMAND = 2
    MESSAGE_COMPONENT = 3


class InteractionResponseType(IntEnum):
    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4


class InteractionContextType(IntEnum):
    GUILD = 0
    BOT_DM = 1
    PRIVATE_CHANNEL = 2


class DiscordUser(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str


class GuildMember(BaseModel):
    model_config = ConfigDict(extra="allow")

    user: DiscordUser


class InteractionMessage(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str


class Interaction(BaseModel):
    """Inbound interaction webhook body. Only the fields the game reads are typed."""

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    type: int
    token: str | None = None
    context: int | None = None
    data: dict[str, Any] = Field(default_factory=dict)
    member: GuildMember | None = None
    user: DiscordUser | None = None
    message: InteractionMessage | None = None


class HealthResponse(BaseModel):
    status: str
