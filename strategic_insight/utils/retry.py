"""
Retry Logic Utilities

Automatic retry with exponential backoff for calls to the text-generation
provider. Transient failures (rate limits, timeouts, dropped connections,
5xx responses) are retried; anything else fails immediately.
"""

from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log,
    after_log
)
import litellm
import logging

logger = logging.getLogger(__name__)

RETRYABLE_LLM_ERRORS = (
    litellm.RateLimitError,
    litellm.Timeout,
    litellm.APIConnectionError,
    litellm.ServiceUnavailableError,
    litellm.InternalServerError,
    litellm.APIError,
    ConnectionError,
    TimeoutError,
)


def retry_on_api_error(
    max_attempts: int = 3,
    multiplier: float = 1.0,
    exp_base: int = 2
):
    """
    Decorator for retrying on LLM provider errors

    Retries on:
    - Rate limit errors
    - Timeout errors
    - Connection and service-unavailable errors

    Args:
        max_attempts: Maximum attempts including the first call
        multiplier: Backoff multiplier (0 disables waiting)
        exp_base: Exponential backoff base

    Returns:
        Tenacity retry decorator (re-raises the last error when exhausted)
    """
    return retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(
            multiplier=multiplier,
            min=0,
            max=30,
            exp_base=exp_base
        ),
        retry=retry_if_exception_type(RETRYABLE_LLM_ERRORS),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        after=after_log(logger, logging.DEBUG),
        reraise=True
    )
