"""Guidance orchestration: level-aware prompts, hint tracking and provider degradation.

A tutoring session moves through::

    INITIALIZING -> AWAITING_SUBMISSION -> EVALUATING -> RESPONDED | DEGRADED

and after each evaluated turn returns to AWAITING_SUBMISSION for the next one.
Opening tips never fail: any provider error is replaced by the level's canned
tips. For guidance turns only quota exhaustion is absorbed; every other
provider error propagates so the client can offer a retry.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from codetutor.config.settings import Settings
from codetutor.errors import ProviderError, ProviderErrorKind
from codetutor.llm import prompts
from codetutor.llm.client import CompletionProvider, ModelParams
from codetutor.llm.context import build_guidance_messages

logger = logging.getLogger(__name__)

GUIDANCE_TEMPERATURE = 0.7
GUIDANCE_MAX_TOKENS = 500
TIPS_TEMPERATURE = 0.8
TIPS_MAX_TOKENS = 400


class Stage(str, Enum):
    INITIALIZING = "initializing"
    AWAITING_SUBMISSION = "awaiting_submission"
    EVALUATING = "evaluating"
    RESPONDED = "responded"
    DEGRADED = "degraded"


@dataclass
class TutoringSession:
    """One learner's attempt at one level. Lives only as long as the request."""

    level: str
    hint_count: int = 0
    stage: Stage = Stage.INITIALIZING

    def record_hint(self) -> int:
        self.hint_count += 1
        return self.hint_count


@dataclass
class GuidanceResult:
    text: str
    stage: Stage
    hint_count: int

    @property
    def degraded(self) -> bool:
        return self.stage is Stage.DEGRADED


class GuidanceOrchestrator:
    def __init__(self, provider: CompletionProvider, settings: Settings):
        self._provider = provider
        self._settings = settings

    def _params(self, temperature: float, max_tokens: int) -> ModelParams:
        return ModelParams(model=self._settings.DEFAULT_MODEL, temperature=temperature, max_tokens=max_tokens)

    async def initial_tips(self, session: TutoringSession) -> GuidanceResult:
        """Produce the opening message for a level; never raises."""
        session.stage = Stage.INITIALIZING
        messages = [
            {"role": "system", "content": prompts.TIPS_SYSTEM_PROMPT},
            {"role": "user", "content": prompts.get_tip_prompt(session.level)},
        ]
        try:
            text = await self._provider.complete(messages, self._params(TIPS_TEMPERATURE, TIPS_MAX_TOKENS))
            stage = Stage.RESPONDED
        except ProviderError as e:
            logger.warning("Tips for level %s fell back to canned text (%s): %s", session.level, e.kind.value, e.message)
            text = prompts.get_fallback_tips(session.level)
            stage = Stage.DEGRADED
        except Exception:
            logger.exception("Unexpected provider failure for tips on level %s; using canned text", session.level)
            text = prompts.get_fallback_tips(session.level)
            stage = Stage.DEGRADED

        session.stage = Stage.AWAITING_SUBMISSION
        return GuidanceResult(text=text, stage=stage, hint_count=session.hint_count)

    async def guide(
        self,
        session: TutoringSession,
        user_message: str,
        history: list[dict],
        is_hint: bool = False,
    ) -> GuidanceResult:
        """Evaluate one learner submission and return the tutor's reply verbatim.

        A hint request is counted before the provider is called, so the counter
        reflects what was asked for even when the call fails. A propagated
        ProviderError carries the session's hint count for the client.
        """
        session.stage = Stage.EVALUATING
        if is_hint:
            session.record_hint()

        messages = build_guidance_messages(
            prompts.build_system_prompt(session.level, is_hint),
            history,
            user_message,
            max_tokens=self._settings.GUIDANCE_MAX_CONTEXT_TOKENS,
        )
        try:
            text = await self._provider.complete(
                messages, self._params(GUIDANCE_TEMPERATURE, GUIDANCE_MAX_TOKENS)
            )
        except ProviderError as e:
            session.stage = Stage.AWAITING_SUBMISSION
            if not e.is_quota:
                logger.error("Guidance for level %s failed: %s", session.level, e.message)
                e.hint_count = session.hint_count
                raise
            logger.warning("Provider quota exhausted; serving fallback guidance for level %s", session.level)
            return GuidanceResult(
                text=prompts.QUOTA_FALLBACK_GUIDANCE, stage=Stage.DEGRADED, hint_count=session.hint_count
            )
        except Exception as e:
            session.stage = Stage.AWAITING_SUBMISSION
            logger.exception("Unexpected provider failure for guidance on level %s", session.level)
            error = ProviderError(ProviderErrorKind.OTHER, str(e) or None)
            error.hint_count = session.hint_count
            raise error from e

        session.stage = Stage.AWAITING_SUBMISSION
        return GuidanceResult(text=text, stage=Stage.RESPONDED, hint_count=session.hint_count)
