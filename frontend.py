# frontend.py
import os
import uuid

import gradio as gr

import main

SUGGESTED_QUERIES = [
    "Summarize this article",
    "How do I use tools with the Groq API?",
    "Tell me about the new Gemini model",
]
GREETING = {"role": "assistant", "content": "Hello! How can I help you today?"}


def new_chat():
    return [GREETING], str(uuid.uuid4()), ""


async def send(message, history, chat_id):
    if not message or not message.strip():
        return history, chat_id, ""

    # Chatbot entries can carry extra display keys; only role/content go to the model
    messages = [{"role": m["role"], "content": m["content"]} for m in history or []]
    messages.append({"role": "user", "content": message})
    try:
        reply = await main.answer_message(message, messages, chat_id=chat_id)
    except Exception as e:
        reply = f"⚠️ Failed to send message. Please try again. ({e})"
    messages.append({"role": "assistant", "content": reply})
    return messages, chat_id, ""  # clear input box after response


with gr.Blocks(title="URL Chat") as demo:
    gr.Markdown("## 🌐 Chat with any web page\nPaste a URL into your question to use the page as context.")

    chat_id = gr.State(lambda: str(uuid.uuid4()))
    chatbot = gr.Chatbot(value=[GREETING], type="messages", label="Chat", height=500)
    with gr.Row():
        chat_input = gr.Textbox(label="Message", placeholder="Ask something, optionally with a link...", scale=4)
        send_btn = gr.Button("Send", scale=1)
    new_btn = gr.Button("New Chat")
    gr.Examples(examples=SUGGESTED_QUERIES, inputs=chat_input)

    # Events
    send_btn.click(send, inputs=[chat_input, chatbot, chat_id], outputs=[chatbot, chat_id, chat_input])
    chat_input.submit(send, inputs=[chat_input, chatbot, chat_id], outputs=[chatbot, chat_id, chat_input])
    new_btn.click(new_chat, outputs=[chatbot, chat_id, chat_input])


if __name__ == "__main__":
    demo.launch(
        server_name=os.getenv("HOST", "0.0.0.0"),
        server_port=int(os.getenv("PORT", "7860")),
        share=False,
    )
