"""Short AI explanations of the daily passage.

The generator walks an ordered list of ``(model, attempts)`` budgets: every
model gets its own retry budget with exponential backoff, and the next model
is only tried once the previous one is exhausted. An empty answer caused by a
recitation block is re-asked once, immediately, with a stricter "paraphrase,
do not quote" prompt. Whatever text comes back is sanitized; an empty string
is a valid result meaning "omit the explanation".
"""

from __future__ import annotations

import asyncio
import json
import random
import re
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Optional, Sequence

from openai import AsyncOpenAI

from daily_verse_bot.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_RETRIES = 3
DEFAULT_BASE_DELAY_MS = 500
DEFAULT_JITTER_MS = 200
MAX_VERBATIM_WORDS = 10

SleepFn = Callable[[float], Awaitable[None]]


class EmptyExplanationError(RuntimeError):
    """Raised internally when a model attempt produced no usable text."""


@dataclass(frozen=True, slots=True)
class ModelBudget:
    """A candidate model and the number of attempts it may consume."""

    model: str
    attempts: int = DEFAULT_MAX_RETRIES


DEFAULT_LEADING_PHRASES: tuple[str, ...] = (
    r"конечно",
    r"итак",
    r"давайте",
    r"здравствуйте",
    r"привет",
    r"добрый\s+(?:день|вечер|утро)",
    r"вкратце",
    r"кратко",
    r"разумеется",
    r"действительно",
    r"несомненно",
    r"важно\s+отметить\s*,?\s+что",
    r"sure",
    r"certainly",
    r"of\s+course",
    r"absolutely",
    r"okay",
    r"ok",
    r"hello",
    r"hi",
    r"great\s+question",
    r"in\s+short",
    r"in\s+summary",
)

DEFAULT_TRAILING_PHRASES: tuple[str, ...] = (
    r"надеюсь,?\s+это\s+помогло[.!]?",
    r"будем\s+помнить[.!]?",
    r"в\s+заключени[еи][,.\s].*",
    r"(?:i\s+)?hope\s+(?:this|that)\s+helps[.!]?",
    r"let\s+me\s+know\s+if\s+you\s+have\s+(?:any\s+)?(?:other\s+|more\s+)?questions[.!]?",
)


@dataclass(frozen=True)
class SanitizeRules:
    """Phrase patterns stripped from the edges of a generated explanation."""

    leading_phrases: Sequence[str] = DEFAULT_LEADING_PHRASES
    trailing_phrases: Sequence[str] = DEFAULT_TRAILING_PHRASES
    leading_pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)
    trailing_pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        leading = "|".join(f"(?:{p})" for p in self.leading_phrases) or r"(?!)"
        trailing = "|".join(f"(?:{p})" for p in self.trailing_phrases) or r"(?!)"
        object.__setattr__(
            self,
            "leading_pattern",
            re.compile(rf"^(?:(?:{leading})(?![\w])[,!.\s\-–—:]*)+", re.IGNORECASE),
        )
        object.__setattr__(
            self,
            "trailing_pattern",
            re.compile(rf"\s*(?:{trailing})\s*$", re.IGNORECASE | re.DOTALL),
        )


DEFAULT_SANITIZE_RULES = SanitizeRules()

_ENCLOSING_QUOTES = re.compile(r'^[“"«„]\s*(.*?)\s*[”"»“]$', re.DOTALL)
_WHITESPACE = re.compile(r"\s+")
_NOTHING_BUT_PUNCTUATION = re.compile(r"[\W_]*")


def _sanitize_once(text: str, rules: SanitizeRules) -> str:
    cleaned = text.strip()
    cleaned = rules.leading_pattern.sub("", cleaned)
    cleaned = rules.trailing_pattern.sub("", cleaned)
    cleaned = _ENCLOSING_QUOTES.sub(r"\1", cleaned)
    cleaned = _WHITESPACE.sub(" ", cleaned)
    return cleaned.strip()


def sanitize_explanation(text: str, rules: SanitizeRules = DEFAULT_SANITIZE_RULES) -> str:
    """Strip chatty openers/closers, enclosing quotes and excess whitespace.

    Each pass removes at most one quote layer; passes repeat until the text is
    stable so that ``sanitize(sanitize(x)) == sanitize(x)``. Text consisting
    only of punctuation and whitespace becomes ``""``.
    """
    if not text:
        return ""
    current = text
    while True:
        cleaned = _sanitize_once(current, rules)
        if cleaned == current:
            break
        current = cleaned
    if _NOTHING_BUT_PUNCTUATION.fullmatch(current):
        return ""
    return current


def calculate_backoff_delay(
    attempt: int,
    base_delay_ms: int = DEFAULT_BASE_DELAY_MS,
    jitter_ms: int = DEFAULT_JITTER_MS,
    rng: Optional[random.Random] = None,
) -> float:
    """Return the delay in seconds before retrying after ``attempt`` failed."""
    source = rng or random
    jitter = source.randrange(jitter_ms) if jitter_ms > 0 else 0
    return (base_delay_ms * (1 << (attempt - 1)) + jitter) / 1000


def build_system_instruction(language: str) -> str:
    """Return the fixed system role for explanation requests."""
    return " ".join(
        [
            f"You are a concise, respectful theology assistant who explains Bible verses in {language}.",
            "Write 2-4 sentences. Get straight to the point, without greetings or introductions.",
            "Do not use lists, emoji or Markdown. Do not add closing remarks like 'I hope this helps'.",
            "Write only in your own words; do not quote the input text or reproduce long fragments.",
            "Focus on the historical and cultural context (when relevant), the key idea and a practical takeaway.",
        ]
    )


def build_user_prompt(passage_text: str, reference: str, language: str) -> str:
    """Return the per-call paraphrase request."""
    return (
        f"Verse: {reference}\n"
        f"Verse text:\n{passage_text}\n\n"
        f"Task: briefly explain the meaning of the verse (2-4 sentences) in your own words in {language}.\n"
        "Do not quote the verse text; never reproduce more than "
        f"{MAX_VERBATIM_WORDS} consecutive words verbatim."
    )


def build_recitation_prompt(user_prompt: str) -> str:
    """Amend ``user_prompt`` after a recitation block."""
    return user_prompt + "\nPlease paraphrase entirely in your own words, without quotations or citations."


def extract_text(response: Any) -> str:
    """Return the first non-empty message content from a chat completion."""
    for choice in getattr(response, "choices", None) or []:
        message = getattr(choice, "message", None)
        content = getattr(message, "content", None)
        if isinstance(content, str) and content.strip():
            return content.strip()
    return ""


def _block_signals(response: Any) -> list[str]:
    """Collect finish/block reasons from the response and provider extras."""
    signals: list[str] = []
    for choice in getattr(response, "choices", None) or []:
        finish_reason = getattr(choice, "finish_reason", None)
        if finish_reason:
            signals.append(str(finish_reason))
    extras = getattr(response, "model_extra", None) or {}
    for key in ("prompt_feedback", "block_reason"):
        if extras.get(key) is not None:
            signals.append(json.dumps(extras[key], default=str))
    return signals


def was_recitation_blocked(response: Any) -> bool:
    """Return True when the provider withheld output as a recitation."""
    return any("RECITATION" in signal.upper() for signal in _block_signals(response))


def _log_diagnostics(response: Any, message: str) -> None:
    choices = getattr(response, "choices", None) or []
    first = choices[0] if choices else None
    refusal = getattr(getattr(first, "message", None), "refusal", None)
    logger.warning(
        "%s. finish_reason=%s refusal=%s signals=%s",
        message,
        getattr(first, "finish_reason", None),
        refusal,
        _block_signals(response),
    )


class ExplanationGenerator:
    """Drive a chat model through retries and fallbacks to explain a passage."""

    def __init__(  # pylint: disable=too-many-arguments
        self,
        client: Optional[AsyncOpenAI],
        budgets: Sequence[ModelBudget],
        *,
        language: str = "Russian",
        base_delay_ms: int = DEFAULT_BASE_DELAY_MS,
        jitter_ms: int = DEFAULT_JITTER_MS,
        rules: SanitizeRules = DEFAULT_SANITIZE_RULES,
        sleep: SleepFn = asyncio.sleep,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._client = client
        self._budgets = tuple(budgets)
        self._language = language
        self._base_delay_ms = base_delay_ms
        self._jitter_ms = jitter_ms
        self._rules = rules
        self._sleep = sleep
        self._rng = rng
        self._system_instruction = build_system_instruction(language)

    @classmethod
    def from_settings(cls, settings: Any) -> "ExplanationGenerator":
        """Build a generator from application settings.

        A missing ``OPENAI_API_KEY`` yields a disabled generator.
        """
        attempts = settings.AI_EXPLAIN_MAX_RETRIES
        if attempts <= 0:
            attempts = DEFAULT_MAX_RETRIES
        client: Optional[AsyncOpenAI] = None
        if settings.OPENAI_API_KEY:
            client = AsyncOpenAI(
                api_key=settings.OPENAI_API_KEY, base_url=settings.OPENAI_BASE_URL or None
            )
        else:
            logger.warning("OPENAI_API_KEY is not configured. AI explanations are disabled.")
        return cls(
            client,
            [
                ModelBudget(settings.EXPLAIN_PRIMARY_MODEL, attempts),
                ModelBudget(settings.EXPLAIN_FALLBACK_MODEL, attempts),
            ],
            language=settings.EXPLANATION_LANGUAGE,
            base_delay_ms=settings.AI_EXPLAIN_BASE_DELAY_MS,
            jitter_ms=settings.AI_EXPLAIN_JITTER_MS,
        )

    @property
    def enabled(self) -> bool:
        """True when a model client is configured."""
        return self._client is not None

    async def explain(self, passage_text: str, reference: str) -> str:
        """Return a sanitized explanation of the passage, or ``""``.

        Never raises: exhausted budgets and disabled generators both produce
        an empty string.
        """
        if self._client is None or not passage_text or not passage_text.strip():
            return ""

        user_prompt = build_user_prompt(passage_text, reference, self._language)
        for budget in self._budgets:
            text = await self._run_budget(budget, user_prompt)
            if text is not None:
                return sanitize_explanation(text, self._rules)

        logger.error(
            "AI explanation for %s failed on all models: %s",
            reference,
            [budget.model for budget in self._budgets],
        )
        return ""

    async def _run_budget(self, budget: ModelBudget, user_prompt: str) -> Optional[str]:
        """Return raw text from ``budget.model`` or ``None`` once exhausted."""
        for attempt in range(1, budget.attempts + 1):
            try:
                return await self._attempt(budget.model, user_prompt)
            except Exception as exc:  # pylint: disable=broad-exception-caught
                if attempt >= budget.attempts:
                    logger.warning(
                        "AI explanation failed on %s after %d attempts: %s",
                        budget.model,
                        budget.attempts,
                        exc,
                    )
                    break
                delay = calculate_backoff_delay(
                    attempt, self._base_delay_ms, self._jitter_ms, self._rng
                )
                logger.warning(
                    "AI explanation %s attempt %d failed: %s. Retrying in %.2fs...",
                    budget.model,
                    attempt,
                    exc,
                    delay,
                )
                await self._sleep(delay)
        return None

    async def _attempt(self, model: str, user_prompt: str) -> str:
        response = await self._complete(model, user_prompt)
        text = extract_text(response)
        if text:
            return text

        _log_diagnostics(response, f"{model} produced empty text")
        if was_recitation_blocked(response):
            retried = await self._complete(model, build_recitation_prompt(user_prompt))
            text = extract_text(retried)
            if text:
                return text
            _log_diagnostics(retried, f"{model} recitation retry also empty")

        raise EmptyExplanationError(f"{model} returned no candidates")

    async def _complete(self, model: str, user_prompt: str) -> Any:
        assert self._client is not None  # nosec B101 - checked by explain()
        return await self._client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": self._system_instruction},
                {"role": "user", "content": user_prompt},
            ],
            temperature=0.4,
        )


__all__ = [
    "DEFAULT_SANITIZE_RULES",
    "EmptyExplanationError",
    "ExplanationGenerator",
    "ModelBudget",
    "SanitizeRules",
    "build_recitation_prompt",
    "build_system_instruction",
    "build_user_prompt",
    "calculate_backoff_delay",
    "extract_text",
    "sanitize_explanation",
    "was_recitation_blocked",
]
