"""Unit tests for the LLM provider layer."""
from types import SimpleNamespace

import pytest

from termchat.llm import (
    AnthropicProvider,
    ChatMessage,
    DeepSeekProvider,
    GeminiProvider,
    LLMProvider,
    OpenAIProvider,
    create_llm_provider,
)
from termchat.llm.providers.anthropic import split_system
from termchat.llm.providers.anthropic import text_of as anthropic_text_of
from termchat.llm.providers.anthropic import usage_of as anthropic_usage_of
from termchat.llm.providers.gemini import text_of as gemini_text_of
from termchat.llm.providers.gemini import to_gemini_contents
from termchat.llm.providers.openai import (
    content_from_completion,
    to_openai_messages,
    usage_from_completion,
)


class TestLLMProvider:
    """Tests for LLMProvider interface."""

    def test_provider_is_abstract(self):
        """Test that LLMProvider cannot be instantiated directly."""
        with pytest.raises(TypeError):
            LLMProvider()  # type: ignore


class TestFactory:
    """Tests for create_llm_provider."""

    def test_openai_default_model(self):
        """Test the OpenAI provider defaults to gpt-3.5-turbo."""
        provider = create_llm_provider("openai", api_key="test-key")

        assert isinstance(provider, OpenAIProvider)
        assert provider.model == "gpt-3.5-turbo"

    def test_model_override(self):
        """Test the model can be chosen at creation."""
        provider = create_llm_provider("openai", api_key="test-key", model="gpt-4o-mini")

        assert provider.model == "gpt-4o-mini"

    @pytest.mark.parametrize(
        "name, provider_cls",
        [
            ("deepseek", DeepSeekProvider),
            ("anthropic", AnthropicProvider),
            ("claude", AnthropicProvider),
            ("gemini", GeminiProvider),
            ("OpenAI", OpenAIProvider),
        ],
    )
    def test_provider_names(self, name, provider_cls):
        """Test every supported name maps to its provider."""
        assert isinstance(create_llm_provider(name, api_key="test-key"), provider_cls)

    def test_unknown_provider(self):
        """Test unsupported names are rejected."""
        with pytest.raises(ValueError, match="Unsupported provider"):
            create_llm_provider("parrot", api_key="test-key")

    def test_missing_api_key(self):
        """Test providers require an API key."""
        with pytest.raises(TypeError):
            create_llm_provider("openai")


class TestOpenAIConversion:
    """Tests for Chat Completions request and response helpers."""

    def test_messages(self):
        """Test messages keep their role and content."""
        messages = [ChatMessage(role="user", content="hi"), ChatMessage(role="assistant", content="hey")]

        assert to_openai_messages(messages) == [
            {"role": "user", "content": "hi"},
            {"role": "assistant", "content": "hey"},
        ]

    def test_content_of_first_choice(self):
        """Test the first choice's text is used."""
        completion = SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content="answer"))]
        )

        assert content_from_completion(completion) == "answer"

    def test_missing_content(self):
        """Test no choices or null content give an empty reply."""
        assert content_from_completion(SimpleNamespace(choices=[])) == ""
        completion = SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=None))])
        assert content_from_completion(completion) == ""

    def test_usage(self):
        """Test token usage is copied when reported."""
        usage = SimpleNamespace(prompt_tokens=3, completion_tokens=4, total_tokens=7)

        assert usage_from_completion(SimpleNamespace(usage=usage)) == {
            "prompt_tokens": 3,
            "completion_tokens": 4,
            "total_tokens": 7,
        }
        assert usage_from_completion(SimpleNamespace(usage=None)) is None


class TestAnthropicConversion:
    """Tests for Messages API request and response helpers."""

    def test_system_text_is_separated(self):
        """Test system messages move to the system field."""
        system, turns = split_system([
            ChatMessage(role="system", content="be brief"),
            ChatMessage(role="user", content="hi"),
        ])

        assert system == "be brief"
        assert turns == [{"role": "user", "content": "hi"}]

    def test_no_system_text(self):
        """Test plain conversations have no system field."""
        system, _ = split_system([ChatMessage(role="user", content="hi")])

        assert system is None

    def test_only_text_blocks_count(self):
        """Test non-text content blocks are skipped."""
        reply = SimpleNamespace(content=[
            SimpleNamespace(type="thinking"),
            SimpleNamespace(text="Hello"),
            SimpleNamespace(text=" there"),
        ])

        assert anthropic_text_of(reply) == "Hello there"

    def test_usage_total(self):
        """Test total tokens add input and output."""
        reply = SimpleNamespace(usage=SimpleNamespace(input_tokens=4, output_tokens=6))

        assert anthropic_usage_of(reply)["total_tokens"] == 10


class TestGeminiConversion:
    """Tests for Gemini request and response helpers."""

    def test_assistant_role_is_model(self):
        """Test assistant messages are sent with the 'model' role."""
        system, contents = to_gemini_contents([
            ChatMessage(role="system", content="be brief"),
            ChatMessage(role="user", content="hi"),
            ChatMessage(role="assistant", content="hey"),
        ])

        assert system == "be brief"
        assert [c.role for c in contents] == ["user", "model"]
        assert contents[1].parts[0].text == "hey"

    def test_empty_candidates(self):
        """Test a reply without candidates has no text."""
        assert gemini_text_of(SimpleNamespace(candidates=[])) == ""
        assert gemini_text_of(SimpleNamespace(candidates=None)) == ""

    def test_candidate_text(self):
        """Test text parts of the first candidate are joined."""
        content = SimpleNamespace(parts=[SimpleNamespace(text="a"), SimpleNamespace(text="b")])
        response = SimpleNamespace(candidates=[SimpleNamespace(content=content)])

        assert gemini_text_of(response) == "ab"
