"""
scaffold_service.api.routers.messages

Message endpoints backed by the message repository.

Responsibilities:
- List, fetch, create and delete messages.
- Leave "no database" and "not found" handling to the error boundary.
"""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field
from starlette.status import HTTP_201_CREATED

from scaffold_service.api.deps import resolve
from scaffold_service.db.repositories.message import MessageRepository

router = APIRouter(prefix="/v1/messages", tags=["messages"])

messages_dep = resolve("messageRepository")


class MessageCreateRequest(BaseModel):
    content: str = Field(min_length=1, max_length=10_000)


class MessageResponse(BaseModel):
    id: str
    content: str
    created_at: datetime
    updated_at: datetime


@router.get("", response_model=list[MessageResponse])
async def list_messages(
    skip: int = Query(default=0, ge=0),
    take: int = Query(default=50, ge=1, le=200),
    messages: MessageRepository = Depends(messages_dep),
) -> list[MessageResponse]:
    # Newest first; empty while the database is unavailable.
    rows = await messages.find_many(order_by={"created_at": "desc"}, skip=skip, take=take)
    return [MessageResponse.model_validate(row) for row in rows]


@router.get("/{message_id}", response_model=MessageResponse)
async def get_message(
    message_id: str,
    messages: MessageRepository = Depends(messages_dep),
) -> MessageResponse:
    row = await messages.find_unique_or_fail(where={"id": message_id})
    return MessageResponse.model_validate(row)


@router.post("", response_model=MessageResponse, status_code=HTTP_201_CREATED)
async def create_message(
    body: MessageCreateRequest,
    messages: MessageRepository = Depends(messages_dep),
) -> MessageResponse:
    row = await messages.create(data={"content": body.content})
    return MessageResponse.model_validate(row)


@router.delete("/{message_id}", response_model=MessageResponse)
async def delete_message(
    message_id: str,
    messages: MessageRepository = Depends(messages_dep),
) -> MessageResponse:
    row = await messages.delete(where={"id": message_id})
    return MessageResponse.model_validate(row)
