"""
AI Gateway
Single entry point for every Gemini call: cooldown check, API key check,
retry with backoff and quota handling.
"""
from typing import Callable, Optional, TypeVar

from flask import current_app

from wordbloom_app.core.error_handlers import QuotaExhaustedError
from wordbloom_app.core.signals import ai_quota_exhausted
from ..engines.gemini_client import GeminiClient
from ..logics.cooldown import QuotaCooldown
from ..logics.error_classifier import classify_error
from ..logics.retry import RetryPolicy, with_retry

T = TypeVar('T')

# Attempts include the first call
WORD_DETAILS_POLICY = RetryPolicy(max_attempts=3, base_delay=7.0)
EXAMPLE_POLICY = RetryPolicy(max_attempts=3, base_delay=7.0)
SUMMARY_POLICY = RetryPolicy(max_attempts=3, base_delay=5.0)
IMAGE_POLICY = RetryPolicy(max_attempts=2, base_delay=8.0)
CHAT_POLICY = RetryPolicy(max_attempts=1, base_delay=0.0)


class AIGateway:

    @staticmethod
    def cooldown() -> QuotaCooldown:
        return current_app.extensions['quota_cooldown']

    @staticmethod
    def is_configured() -> bool:
        return bool(current_app.config.get('GEMINI_API_KEY'))

    @staticmethod
    def get_client() -> Optional[GeminiClient]:
        """Shared client, created on first use. None without an API key."""
        if not AIGateway.is_configured():
            return None
        client = current_app.extensions.get('gemini_client')
        if client is None:
            client = GeminiClient(
                current_app.config['GEMINI_API_KEY'],
                text_model=current_app.config.get('GEMINI_TEXT_MODEL', 'gemini-2.5-flash'),
                image_model=current_app.config.get('GEMINI_IMAGE_MODEL', 'imagen-3.0-generate-002'),
            )
            current_app.extensions['gemini_client'] = client
        return client

    @staticmethod
    def effective_policy(policy: RetryPolicy) -> RetryPolicy:
        override = current_app.config.get('AI_RETRY_BASE_DELAY_SECONDS')
        if override is None:
            return policy
        return RetryPolicy(policy.max_attempts, float(override), policy.multiplier)

    @staticmethod
    def call(feature: str, fn: Callable[[GeminiClient], T], policy: RetryPolicy) -> Optional[T]:
        """
        Run ``fn(client)`` under ``policy``.

        Returns None when AI is unavailable or the call ultimately fails.
        A quota error arms the global cooldown and is not retried.
        """
        cooldown = AIGateway.cooldown()
        if cooldown.is_open():
            current_app.logger.warning(f"[AI] {feature}: skipped, quota cooldown active")
            return None

        client = AIGateway.get_client()
        if client is None:
            current_app.logger.warning(f"[AI] {feature}: skipped, no API key configured")
            return None

        def log_retry(attempt: int, error: BaseException, delay: float) -> None:
            current_app.logger.warning(
                f"[AI] {feature}: attempt {attempt}/{policy.max_attempts} failed ({error}), retrying in {delay:.0f}s"
            )

        try:
            return with_retry(
                lambda: fn(client),
                AIGateway.effective_policy(policy),
                classify_error,
                on_retry=log_retry,
            )
        except QuotaExhaustedError as e:
            if cooldown.trip():
                current_app.logger.warning(
                    f"[AI] {feature}: quota exhausted, AI calls paused until {cooldown.cooldown_until.isoformat()}"
                )
                ai_quota_exhausted.send(None, feature=feature, cooldown_until=cooldown.cooldown_until)
            else:
                current_app.logger.warning(f"[AI] {feature}: quota exhausted ({e.message})")
            return None
        except Exception as e:
            current_app.logger.error(f"[AI] {feature}: failed: {e}")
            return None
