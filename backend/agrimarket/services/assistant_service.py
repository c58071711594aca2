# backend/agrimarket/services/assistant_service.py

# Mock farm assistant: echoes the question back until a real model is wired in.


def reply_to_message(message: str) -> str:
    return (
        f'I received your message: "{message}". This is a mock response. '
        "In production, this will be replaced with actual AI responses."
    )
