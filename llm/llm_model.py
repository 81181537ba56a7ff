from openai import OpenAI

from config import GROQ_API_KEY, LLM_BASE_URL, LLM_MODEL

SYSTEM_PROMPT = (
    "You are an academic expert, you always cite your sources and base your "
    "responses only on the context that have been provided."
)

_client = None


def get_client():
    global _client
    if _client is None:
        _client = OpenAI(api_key=GROQ_API_KEY, base_url=LLM_BASE_URL)
    return _client


def build_user_prompt(query: str, context: str) -> str:
    """
    Wrap the user's question and any scraped page text into the prompt sent
    as the final user turn.
    """
    return f"""
    I want you to help answer this question: "{query}"

    If there is scraped content below, use it as context for your answer. If no content is provided, answer based on your general knowledge.

    Context from provided URL:
    <content>
      {context}
    </content>

    Guidelines:
    - Be concise and accurate
    - If the content doesn't help answer the question, say so
    - If you're unsure about something, acknowledge it
    - Cite specific parts of the content when relevant
    """


def complete(messages, client=None, model=LLM_MODEL):
    """
    Prepend the system instruction to ``messages`` (ordered role/content
    dicts) and return the model's text reply.
    """
    client = client or get_client()
    response = client.chat.completions.create(
        model=model,
        messages=[{"role": "system", "content": SYSTEM_PROMPT}, *messages],
        stream=False,
    )
    return response.choices[0].message.content or ""
