import argparse
import asyncio
import json
from functools import partial

from llm.llm_model import build_user_prompt, complete
from utils.logger import setup_logger
from web_scraper.scraper.playwright_utils import close_browser
from web_scraper.scraper.url_utils import first_url, strip_url
from web_scraper.scraper_runner import scrape_url
from web_scraper.storage.cache_store import close_cache_store, get_cache_store
from web_scraper.storage.conversations import get_conversation, save_conversation

logger = setup_logger("main")


async def answer_message(message: str, messages: list | None = None, chat_id: str | None = None,
                         store=None, scraper=scrape_url, completer=complete) -> str:
    """
    Answer one chat turn. If the message contains a URL its page text is used
    as context; a failed scrape just leaves the context empty.
    """
    store = store if store is not None else get_cache_store()
    history = list(messages or [])
    logger.info(f"Message received ({len(history)} prior messages)")

    url = first_url(message)
    scraped_content = ""
    if url:
        logger.info(f"URL found: {url}")
        scraped = await scraper(url, cache=store)
        scraped_content = scraped.content or ""

    user_query = strip_url(message, url)
    llm_messages = history + [{"role": "user", "content": build_user_prompt(user_query, scraped_content)}]

    # The completion client is synchronous; keep it off the event loop
    loop = asyncio.get_running_loop()
    reply = await loop.run_in_executor(None, partial(completer, llm_messages))

    if chat_id:
        await save_conversation(store, chat_id, history + [{"role": "assistant", "content": reply}])
    return reply


async def load_history(chat_id: str, store=None):
    store = store if store is not None else get_cache_store()
    return await get_conversation(store, chat_id)


async def _ask(message: str, chat_id: str | None):
    history = []
    if chat_id:
        history = await load_history(chat_id) or []
    history.append({"role": "user", "content": message})
    return await answer_message(message, history, chat_id=chat_id)


async def _run(coro):
    try:
        return await coro
    finally:
        await close_browser()
        await close_cache_store()


def main():
    parser = argparse.ArgumentParser(description="URL-aware chat assistant CLI")
    sub = parser.add_subparsers(dest="command", required=True)

    # scrape subcommand
    scrape_p = sub.add_parser("scrape", help="Scrape a URL and print the extracted JSON")
    scrape_p.add_argument("url")
    # ask subcommand
    ask_p = sub.add_parser("ask", help="Ask a question, optionally including a URL")
    ask_p.add_argument("message")
    ask_p.add_argument("--chat-id", default=None, help="Persist the turn under this conversation id")
    # history subcommand
    hist_p = sub.add_parser("history", help="Print a stored conversation")
    hist_p.add_argument("chat_id")
    args = parser.parse_args()

    if args.command == "scrape":
        result = asyncio.run(_run(scrape_url(args.url)))
        print(result.to_json())

    elif args.command == "ask":
        reply = asyncio.run(_run(_ask(args.message, args.chat_id)))
        print(reply)

    elif args.command == "history":
        messages = asyncio.run(_run(load_history(args.chat_id)))
        print(json.dumps(messages, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
