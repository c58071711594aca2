# backend/agrimarket/api/chat.py

from fastapi import APIRouter

from agrimarket.schemas import ChatMessage, ChatReply
from agrimarket.services.assistant_service import reply_to_message

router = APIRouter(tags=["chat"])


@router.post("/chat", response_model=ChatReply)
def api_chat(req: ChatMessage):
    return ChatReply(response=reply_to_message(req.message))
