"""Credit-gated letter generation.

``LetterGenerator.generate`` runs the preconditions in a fixed order and
performs no side effect before all of them pass:

1. authenticated caller, else ``Unauthorized``
2. non-blank prompt, else ``InvalidInput``
3. configured completion client, else the stored ``ConfigurationError``
4. credits or a valid subscription, else ``PaymentRequired``

Then one credit is debited and committed, the completion API is called,
and the result is stored as a ``GeneratedLetter``. The debit is not refunded
when the completion call fails.
"""

import logging
from dataclasses import dataclass

from pydantic import ValidationError
from sqlalchemy.orm import Session

from ..auth.models import User
from ..credits.service import can_generate, debit_credit, has_valid_subscription
from ..integrations.anthropic_client import CompletionClient
from ..letters.models import GeneratedLetter
from ..letters.schemas import GenerateRequest
from .errors import ConfigurationError, InvalidInput, PaymentRequired, Unauthorized

logger = logging.getLogger(__name__)


@dataclass
class CallerContext:
    db: Session
    user: User | None = None


@dataclass
class GenerationResult:
    text: str
    letter: GeneratedLetter


class LetterGenerator:
    def __init__(self, client: CompletionClient | ConfigurationError) -> None:
        self._client = client

    @property
    def configured(self) -> bool:
        return not isinstance(self._client, ConfigurationError)

    def generate(self, raw_args: dict | GenerateRequest, caller: CallerContext) -> GenerationResult:
        user = caller.user
        if user is None or not user.is_active:
            raise Unauthorized()

        try:
            args = GenerateRequest.model_validate(raw_args)
        except ValidationError as exc:
            first = exc.errors()[0] if exc.errors() else {}
            # Validator messages come back prefixed with "Value error, "
            reason = first.get("ctx", {}).get("error") or first.get("msg")
            raise InvalidInput(str(reason) if reason else "Prompt is required") from exc

        if isinstance(self._client, ConfigurationError):
            raise self._client

        if not can_generate(user):
            logger.info("Generation refused: user=%s credits=%s subscription=%s",
                        user.id, user.credits, user.subscription_status)
            raise PaymentRequired()

        db = caller.db
        # Subscribers holding credits are debited too; see DESIGN.md
        debited = debit_credit(db, user)
        if not debited and not has_valid_subscription(user.subscription_status):
            # Lost the race for the last credit
            raise PaymentRequired()
        db.commit()

        # TODO: refund the debited credit when the completion call fails
        result = self._client.complete(args.prompt)

        letter = GeneratedLetter(
            user_id=user.id,
            content=result.text,
            model_used=result.model_id,
            tokens_input=result.tokens_input,
            tokens_output=result.tokens_output,
            cost_usd=result.cost_usd,
        )
        db.add(letter)
        db.flush()
        logger.info("Letter generated: id=%s user=%s len=%d debited=%s",
                    letter.id, user.id, len(result.text), debited)
        return GenerationResult(text=result.text, letter=letter)
