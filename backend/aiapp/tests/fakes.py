from types import SimpleNamespace


class FakeCompletions:
    def __init__(self, content="", total_tokens=0, error=None):
        self.content = content
        self.total_tokens = total_tokens
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        return SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=self.content))],
            usage=SimpleNamespace(total_tokens=self.total_tokens) if self.total_tokens else None,
        )


def fake_openai(content="", total_tokens=0, error=None):
    completions = FakeCompletions(content, total_tokens, error)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))
