"""SubmissionController implementation."""

from typing import MutableMapping, Protocol

from ..errors import NetworkError, SubmissionInProgressError
from ..logging_config import get_logger
from ..models import SubmissionState
from ..models.submission import IDLE, SUBMITTING, SUCCEEDED, failed
from ..net import INetworkClient

ACCESS_KEY_FIELD = "access_key"
DEFAULT_ERROR_MESSAGE = "Что-то пошло не так"
NETWORK_ERROR_MESSAGE = "Ошибка сети. Попробуйте снова."


class ISubmissionController(Protocol):
    """Drives one form through submission."""

    @property
    def state(self) -> SubmissionState:
        """Current state."""
        ...

    async def submit(self, payload: MutableMapping[str, str]) -> SubmissionState:
        """Send the form. Return the resulting state."""
        ...

    def reset(self) -> SubmissionState:
        """Return to Idle after a finished attempt."""
        ...


class SubmissionController:
    """Idle -> Submitting -> Succeeded | Failed state machine for a contact form.

    Each attempt gets a generation number; a result is applied only if it
    belongs to the current generation and the form is still submitting.
    """

    def __init__(
        self,
        network: INetworkClient,
        intake_url: str,
        access_key: str,
        timeout: float | None = None,
        session_id: str | None = None,
    ):
        self._network = network
        self._log = get_logger(__name__, session_id=session_id)
        self._intake_url = intake_url
        self._access_key = access_key
        self._timeout = timeout
        self._state: SubmissionState = IDLE
        self._generation = 0

    @property
    def state(self) -> SubmissionState:
        return self._state

    async def submit(self, payload: MutableMapping[str, str]) -> SubmissionState:
        """Post the form fields plus the service credential.

        On success the caller's payload is cleared, mirroring a form reset.
        """
        if self._state.is_submitting:
            self._log.warning("Submission rejected: previous attempt still running")
            raise SubmissionInProgressError("The form is already being submitted")

        self._generation += 1
        generation = self._generation
        self._state = SUBMITTING

        fields = {name: "" if value is None else str(value) for name, value in payload.items()}
        fields[ACCESS_KEY_FIELD] = self._access_key
        self._log.info("Submitting form with fields: %s", sorted(payload.keys()))

        try:
            outcome = await self._send(fields)
        except BaseException:
            # Cancelled mid-flight: never leave the form spinning
            if generation == self._generation and self._state.is_submitting:
                self._state = failed(NETWORK_ERROR_MESSAGE)
            raise

        if generation != self._generation or not self._state.is_submitting:
            self._log.info("Dropping result of superseded submission %s", generation)
            return self._state

        self._state = outcome
        if outcome.is_success:
            payload.clear()
            self._log.info("Form submitted successfully")
        else:
            self._log.warning("Form submission failed: %s", outcome.message)
        return self._state

    def reset(self) -> SubmissionState:
        if self._state.is_submitting:
            self._log.warning("Reset ignored while submission is running")
            return self._state

        self._state = IDLE
        return self._state

    async def _send(self, fields: dict[str, str]) -> SubmissionState:
        try:
            response = await self._network.request(
                "POST",
                self._intake_url,
                data=fields,
                timeout=self._timeout,
            )
        except NetworkError as e:
            self._log.error("Intake endpoint unreachable: %s", e)
            return failed(NETWORK_ERROR_MESSAGE)

        if response.data is None:
            # Body could not be read as JSON: same outcome as a broken connection
            self._log.error("Intake endpoint sent unreadable body (status %s)", response.status_code)
            return failed(NETWORK_ERROR_MESSAGE)

        if response.ok and response.data.get("success") is True:
            return SUCCEEDED

        message = response.data.get("message")
        if not isinstance(message, str) or not message.strip():
            message = DEFAULT_ERROR_MESSAGE
        return failed(message)
