"""Provider factory functions for CLI.

Centralizes creation of the LLM provider and completion gateway from
environment variables. Hides configuration details from commands.
"""

import os

from rich.console import Console

from ..core.gateway import CompletionGateway, NullGateway
from ..gateway import DEFAULT_TIMEOUT, LLMGateway
from ..llm import LLMProvider, create_llm_provider

# Default console for output
_console = Console()

DEFAULT_PROVIDER = "openai"

# provider -> (api key variable, model variable, default model)
PROVIDER_ENV = {
    "openai": ("OPENAI_API_KEY", "OPENAI_CHAT_MODEL", "gpt-3.5-turbo"),
    "deepseek": ("DEEPSEEK_API_KEY", "DEEPSEEK_MODEL", "deepseek-chat"),
    "anthropic": ("ANTHROPIC_API_KEY", "ANTHROPIC_MODEL", "claude-sonnet-4-20250514"),
    "gemini": ("GEMINI_API_KEY", "GEMINI_MODEL", "gemini-2.5-flash"),
}


def provider_name() -> str:
    """Provider selected by LLM_PROVIDER ('claude' is an alias of 'anthropic')."""
    name = os.getenv("LLM_PROVIDER", DEFAULT_PROVIDER).lower()
    return "anthropic" if name == "claude" else name


def get_llm(console: Console | None = None) -> LLMProvider | None:
    """Create LLM provider from environment variables.

    Args:
        console: Optional Rich console for output

    Returns:
        LLM provider instance, or None if not configured

    Environment variables:
        LLM_PROVIDER: openai, deepseek, anthropic or gemini (default: openai)
        OPENAI_API_KEY / OPENAI_CHAT_MODEL (default: gpt-3.5-turbo)
        DEEPSEEK_API_KEY / DEEPSEEK_MODEL (default: deepseek-chat)
        ANTHROPIC_API_KEY / ANTHROPIC_MODEL (default: claude-sonnet-4-20250514)
        GEMINI_API_KEY / GEMINI_MODEL (default: gemini-2.5-flash)
    """
    con = console or _console
    name = provider_name()

    if name not in PROVIDER_ENV:
        con.print(f"[yellow]Warning: unknown LLM_PROVIDER '{name}', replies disabled[/yellow]")
        return None

    key_var, model_var, default_model = PROVIDER_ENV[name]
    api_key = os.getenv(key_var)
    if not api_key:
        con.print(f"[yellow]Warning: {key_var} not set, replies disabled[/yellow]")
        return None

    model = os.getenv(model_var, default_model)
    return create_llm_provider(name, api_key=api_key, model=model)


def get_timeout() -> float:
    """Gateway timeout in seconds from TERMCHAT_TIMEOUT (0 disables)."""
    raw = os.getenv("TERMCHAT_TIMEOUT")
    if raw is None:
        return DEFAULT_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        _console.print(f"[yellow]Warning: invalid TERMCHAT_TIMEOUT '{raw}', using {DEFAULT_TIMEOUT:g}s[/yellow]")
        return DEFAULT_TIMEOUT


def get_gateway(
    console: Console | None = None,
    timeout: float | None = None,
    offline: bool = False,
) -> tuple[CompletionGateway, str]:
    """Create the completion gateway and a label for the header.

    Falls back to NullGateway when offline or no provider is configured.
    """
    if offline:
        return NullGateway(), "offline"

    llm = get_llm(console)
    if llm is None:
        return NullGateway(), "offline"

    gateway = LLMGateway(llm, timeout=get_timeout() if timeout is None else timeout)
    return gateway, f"{provider_name()} | {llm.model}"
