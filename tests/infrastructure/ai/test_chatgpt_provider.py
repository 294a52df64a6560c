"""Tests for ChatGPT provider implementation."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import pytest_asyncio

from misinfo_detector.infrastructure.ai.chatgpt_provider import ChatGPTConfig, ChatGPTProvider


def make_response(content):
    """Build an object shaped like an OpenAI chat completion."""
    response = MagicMock()
    response.choices = [MagicMock(message=MagicMock(content=content))]
    return response


@pytest_asyncio.fixture
async def provider():
    """Create a ChatGPT provider for testing."""
    provider = ChatGPTProvider(ChatGPTConfig(api_key="test-key", model="gpt-default", timeout=5.0))
    await provider.initialize()
    yield provider
    await provider.shutdown()


@pytest.mark.asyncio
async def test_complete(provider):
    """Test a single chat completion."""
    create = AsyncMock(return_value=make_response("CLAIM: Paris is the capital of France"))
    messages = [{"role": "user", "content": "Extract claims"}]

    with patch.object(provider._client.chat.completions, "create", create):
        content = await provider.complete(messages)

    assert content == "CLAIM: Paris is the capital of France"
    create.assert_awaited_once_with(model="gpt-default", messages=messages, temperature=0.1)


@pytest.mark.asyncio
async def test_complete_model_override(provider):
    """Test that a per-call model overrides the default."""
    create = AsyncMock(return_value=make_response("ok"))

    with patch.object(provider._client.chat.completions, "create", create):
        await provider.complete([{"role": "user", "content": "hi"}], model="gpt-other")

    assert create.await_args.kwargs["model"] == "gpt-other"


@pytest.mark.asyncio
async def test_complete_empty_content(provider):
    """Test that missing content becomes an empty string."""
    with patch.object(provider._client.chat.completions, "create", AsyncMock(return_value=make_response(None))):
        assert await provider.complete([{"role": "user", "content": "hi"}]) == ""


@pytest.mark.asyncio
async def test_client_timeout(provider):
    """Test that the configured timeout reaches the client."""
    assert provider._client.timeout == 5.0


@pytest.mark.asyncio
async def test_not_initialized():
    """Test that calling an uninitialized provider fails."""
    provider = ChatGPTProvider(ChatGPTConfig(api_key="test-key"))

    assert not provider.is_available
    with pytest.raises(RuntimeError):
        await provider.complete([{"role": "user", "content": "hi"}])


@pytest.mark.asyncio
async def test_shutdown(provider):
    """Test provider shutdown."""
    assert provider.is_available
    assert provider.provider_name == "ChatGPT"

    await provider.shutdown()
    assert not provider.is_available
