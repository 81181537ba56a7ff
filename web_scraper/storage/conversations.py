# storage/conversations.py

# Chat history per conversation id. Each save overwrites the whole list.

import json
from typing import List, Optional

from config import CONVERSATION_KEY_PREFIX, CONVERSATION_TTL_SECONDS
from utils.logger import setup_logger

logger = setup_logger(__name__)


def conversation_key(chat_id: str) -> str:
    return f"{CONVERSATION_KEY_PREFIX}{chat_id}"


async def save_conversation(store, chat_id: str, messages: List[dict]) -> None:
    """Persist the full message list for ``chat_id`` with a 7-day expiry."""
    logger.info(f"Saving conversation {chat_id}")
    try:
        await store.set(
            conversation_key(chat_id),
            json.dumps(messages, ensure_ascii=False),
            expire_seconds=CONVERSATION_TTL_SECONDS,
        )
    except Exception as e:
        logger.error(f"Error saving conversation {chat_id}: {e}")
        raise
    logger.info(f"Conversation {chat_id} saved with {len(messages)} messages")


async def get_conversation(store, chat_id: str) -> Optional[List[dict]]:
    logger.info(f"Getting conversation {chat_id}")
    try:
        data = await store.get(conversation_key(chat_id))
        if not data:
            logger.info(f"No conversation found for {chat_id}")
            return None
        messages = json.loads(data) if isinstance(data, (str, bytes)) else data
    except Exception as e:
        logger.error(f"Error getting conversation {chat_id}: {e}")
        return None
    if not isinstance(messages, list):
        logger.warning(f"Conversation {chat_id} is not a message list, ignoring")
        return None
    logger.info(f"Conversation {chat_id} found with {len(messages)} messages")
    return messages
