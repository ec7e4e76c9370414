"""
app/services/submission_service.py

Purpose: Contact form submission workflow

- Cleans and validates the submitted fields
- Normalizes the phone number for the SMS gateway
- Saves the submission inside a transaction
- Sends a best-effort thank-you SMS before committing
- Reports the saved id and the SMS outcome

The saved record is what matters: an SMS failure is logged and
never rolls back the row or changes the response status.
"""

from typing import Any, Mapping, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import InvalidInputError, NotificationError, PersistenceError
from app.core.logging import LogContext, get_logger
from app.db.message_store import MessageStore
from app.flow.states import SubmissionState, is_valid_transition
from app.schemas.contact import NotificationStatus, SmsResult, SubmissionResult
from app.services.smslenz_service import SmslenzClient
from utils.sms_utils import build_full_name, build_thanks_sms
from utils.validation_utils import normalize_phone, sanitize_submission

logger = get_logger(__name__)


class SubmissionWorkflow:
    """
    Runs one submission through
    VALIDATING -> PERSISTING -> NOTIFYING -> COMMITTED.
    """

    def __init__(self, store: MessageStore, sms_client: Optional[SmslenzClient] = None):
        self.store = store
        self.sms_client = sms_client

    def submit(self, raw: Mapping[str, Any]) -> SubmissionResult:
        """
        Handles one contact form submission.

        Args:
            raw: Untrusted form fields
                 (first_name, last_name, email, number, subject, message)

        Returns:
            SubmissionResult with the new row id and the SMS outcome

        Raises:
            InvalidInputError: a required field is empty or the email is malformed
            PersistenceError: the insert or the commit failed; nothing was saved
        """
        state = SubmissionState.VALIDATING

        with LogContext(state=state.value) as log_context:
            validation = sanitize_submission(raw)
            if not validation.is_valid:
                state = self._advance(state, SubmissionState.REJECTED_INPUT, log_context)
                logger.info(f"Submission rejected, invalid fields: {', '.join(validation.errors)}")
                raise InvalidInputError(details={"fields": validation.errors})

            fields = validation.values
            phone = normalize_phone(fields["number"]) or fields["number"]
            full_name = build_full_name(fields["first_name"], fields["last_name"])

            sms: Optional[SmsResult] = None
            notification_status = NotificationStatus.SKIPPED

            state = self._advance(state, SubmissionState.PERSISTING, log_context)
            try:
                with self.store.transaction() as session:
                    submission_id = self.store.insert(
                        session,
                        first_name=fields["first_name"],
                        last_name=fields["last_name"],
                        email=fields["email"],
                        phone=phone,
                        subject=fields["subject"],
                        message=fields["message"],
                    )
                    log_context.update(submission_id=submission_id)
                    logger.info("Submission inserted")

                    if self.sms_client is not None and self.sms_client.is_configured():
                        state = self._advance(state, SubmissionState.NOTIFYING, log_context)
                        sms, notification_status = self._send_thanks(phone, full_name)
                    else:
                        logger.warning("SMS credentials missing; skipping SMS send")
            except SQLAlchemyError as e:
                self._advance(state, SubmissionState.PERSIST_FAILED, log_context)
                logger.error(f"DB error (insert/commit): {e}", exc_info=True)
                raise PersistenceError() from e

            self._advance(state, SubmissionState.COMMITTED, log_context)
            logger.info(f"Submission committed (sms={notification_status.value})")

        return SubmissionResult(
            id=submission_id,
            sms=sms,
            notification_status=notification_status,
        )

    def _send_thanks(self, phone: str, full_name: str) -> Tuple[Optional[SmsResult], NotificationStatus]:
        """Sends the thank-you SMS. Never raises."""
        try:
            result = self.sms_client.send_sms(contact=phone, message=build_thanks_sms(full_name))
        except NotificationError as e:
            logger.error(f"SMS error: {e.message}")
            return None, NotificationStatus.FAILED
        except Exception as e:
            logger.error(f"Unexpected SMS error: {e}", exc_info=True)
            return None, NotificationStatus.FAILED

        return result, NotificationStatus.SENT

    @staticmethod
    def _advance(current: SubmissionState, target: SubmissionState, log_context: LogContext) -> SubmissionState:
        if not is_valid_transition(current, target):
            raise RuntimeError(f"Invalid submission transition {current.value} -> {target.value}")
        log_context.update(state=target.value)
        logger.debug(f"{current.value} -> {target.value}")
        return target
