from types import SimpleNamespace

from llm.llm_model import SYSTEM_PROMPT, build_user_prompt, complete


class FakeCompletions:
    def __init__(self, text):
        self.text = text
        self.kwargs = None

    def create(self, **kwargs):
        self.kwargs = kwargs
        message = SimpleNamespace(content=self.text)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _client(text="answer"):
    completions = FakeCompletions(text)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions)), completions


def test_complete_prepends_system_instruction():
    client, completions = _client()
    messages = [{"role": "user", "content": "hi"}, {"role": "assistant", "content": "hello"}]

    assert complete(messages, client=client, model="test-model") == "answer"

    assert completions.kwargs["model"] == "test-model"
    assert completions.kwargs["messages"][0] == {"role": "system", "content": SYSTEM_PROMPT}
    assert completions.kwargs["messages"][1:] == messages
    assert completions.kwargs["stream"] is False


def test_complete_handles_empty_reply():
    client, _ = _client(text=None)
    assert complete([], client=client) == ""


def test_user_prompt_contains_question_and_context():
    prompt = build_user_prompt("What is new?", "Release notes 2.0")
    assert '"What is new?"' in prompt
    assert "<content>" in prompt
    assert "Release notes 2.0" in prompt
    assert "Be concise and accurate" in prompt
