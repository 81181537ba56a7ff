import os
from contextlib import asynccontextmanager
from typing import Literal, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

import main as core
from utils.logger import setup_logger
from web_scraper.scraper.playwright_utils import close_browser
from web_scraper.storage.cache_store import close_cache_store

logger = setup_logger("api")


class ChatMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    message: str
    messages: list[ChatMessage] = Field(default_factory=list)
    chat_id: Optional[str] = Field(default=None, alias="chatId")


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Shared resources live for the whole process
    await close_browser()
    await close_cache_store()


app = FastAPI(title="URL Chat API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.post("/api/chat")
async def chat(payload: ChatRequest):
    try:
        reply = await core.answer_message(
            payload.message,
            [m.model_dump() for m in payload.messages],
            chat_id=payload.chat_id,
        )
        return {"message": reply}
    except Exception as e:
        logger.error(f"Chat API error: {e}")
        return {"message": "Error", "error": str(e)}


@app.get("/api/chat")
async def chat_history(chatId: str):
    messages = await core.load_history(chatId)
    return {"messages": messages}


if __name__ == "__main__":
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    uvicorn.run("api:app", host=host, port=port, reload=False)
