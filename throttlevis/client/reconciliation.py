from typing import Any, Callable, Dict, Optional
import httpx
from pydantic import ValidationError
from .result import SyncFailure, SyncResult, SyncSuccess
from ..core.clock import Clock
from ..core.config import DEFAULT_BASE_URL
from ..core.errors import (
    IncompleteResponse,
    InvalidConfiguration,
    NetworkUnavailable,
    NotConfigured,
    RemoteRejected,
)
from ..core.logger import get_logger
from ..core.types import ActionReply, ConfigureReply
from ..limiter.model import RateLimiterModel, validate_request
from ..limiter.profile import AlgorithmProfile

logger = get_logger("ReconciliationClient")

class ReconciliationClient:
    """
    Bridge between the local model and the remote rate limiter.
    One attempt per call: no retries, timeouts are the transport's.

    Owns the session's current model. A successful configuration replaces
    it wholesale and bumps `generation`; an action response issued under an
    older generation is discarded instead of applied.
    """
    def __init__(self, base_url: str = DEFAULT_BASE_URL,
                 http_client: Optional[httpx.AsyncClient] = None,
                 timeout: float = 5.0,
                 clock: Callable[[], int] = Clock.now_epoch_us):
        self.base_url = base_url.rstrip("/")
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=timeout)
        self.clock = clock
        self.model: Optional[RateLimiterModel] = None
        self.generation = 0
        self._configure_seq = 0

    def endpoint(self, profile: AlgorithmProfile) -> str:
        return f"{self.base_url}{profile.endpoint_path}"

    async def configure(self, profile: AlgorithmProfile, capacity: float, rate: float) -> SyncResult:
        """
        POSTs the configuration. On 2xx the server's echoed capacity/rate
        are adopted and a fresh model replaces the old one.
        Raises InvalidConfiguration before any request is made.
        """
        validate_request(capacity, rate)

        self._configure_seq += 1
        seq = self._configure_seq
        url = self.endpoint(profile)

        try:
            response = await self._http.post(
                url,
                data={"capacity": _wire_number(capacity), profile.rate_parameter_name: _wire_number(rate)},
            )
        except httpx.HTTPError as e:
            logger.warning("network_unavailable", op="configure", url=url, error=repr(e))
            return SyncFailure(NetworkUnavailable(e))

        payload = _payload(response)
        try:
            reply = ConfigureReply.from_payload(payload, profile.rate_parameter_name)
        except ValidationError:
            reply = ConfigureReply(message=str(payload.get("message", "")))

        if not response.is_success:
            logger.warning("configure_rejected", status=response.status_code, message=reply.message)
            return SyncFailure(RemoteRejected(response.status_code, reply.message))

        if seq != self._configure_seq:
            logger.info("stale_response_discarded", op="configure", seq=seq, latest=self._configure_seq)
            return SyncSuccess(message=reply.message, status_code=response.status_code, stale=True)

        # The server's echo is authoritative; fall back to what was sent.
        new_capacity = reply.capacity if reply.capacity is not None else capacity
        new_rate = reply.rate if reply.rate is not None else rate
        if (new_capacity, new_rate) != (capacity, rate):
            logger.warning("configuration_echo_differs",
                           requested_capacity=capacity, requested_rate=rate,
                           capacity=new_capacity, rate=new_rate)

        try:
            model = RateLimiterModel.configured(profile, new_capacity, new_rate, self.clock())
        except InvalidConfiguration as e:
            logger.error("invalid_configuration_echo", capacity=new_capacity, rate=new_rate)
            return SyncFailure(e)

        self.model = model
        self.generation += 1
        logger.info("bucket_configured",
                    algorithm=profile.kind.value,
                    capacity=model.capacity,
                    rate=model.rate_per_second,
                    generation=self.generation)
        return SyncSuccess(message=reply.message, status_code=response.status_code, level=model.level)

    async def perform_action(self, profile: AlgorithmProfile) -> SyncResult:
        """
        Evolves the local prediction, GETs the endpoint and adopts the
        reported level (2xx or not). Failures leave the prediction in place.
        Raises NotConfigured if no configuration has succeeded yet.
        """
        model = self.model
        if model is None:
            raise NotConfigured()

        generation = self.generation
        model.evolve(self.clock())
        url = self.endpoint(profile)

        try:
            response = await self._http.get(url)
        except httpx.HTTPError as e:
            logger.warning("network_unavailable", op="action", url=url, error=repr(e))
            return SyncFailure(NetworkUnavailable(e))

        payload = _payload(response)
        try:
            reply = ActionReply.from_payload(payload, profile.current_field_name)
        except ValidationError:
            reply = ActionReply(message=str(payload.get("message", "")))

        warnings = ()
        if reply.level is None:
            logger.warning("incomplete_response", field=profile.current_field_name)
            warnings = (IncompleteResponse(profile.current_field_name),)

        stale = generation != self.generation
        if stale:
            logger.info("stale_response_discarded", op="action",
                        generation=generation, latest=self.generation)
        elif reply.level is not None:
            model.overwrite_level(reply.level, self.clock())

        if not response.is_success:
            logger.info("action_rejected", status=response.status_code, level=reply.level)
            return SyncFailure(RemoteRejected(response.status_code, reply.message, reply.level),
                               warnings=warnings, stale=stale)

        logger.info("action_completed", status=response.status_code, level=reply.level)
        return SyncSuccess(message=reply.message, status_code=response.status_code,
                           level=reply.level, warnings=warnings, stale=stale)

    async def aclose(self):
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "ReconciliationClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

def _wire_number(value: float) -> str:
    """
    Integral values go out without a trailing ".0" (the server parses integers).
    """
    if float(value).is_integer():
        return str(int(value))
    return str(value)

def _payload(response: httpx.Response) -> Dict[str, Any]:
    """
    JSON object body, or the raw text as the message.
    """
    try:
        payload = response.json()
    except ValueError:
        return {"message": response.text}
    if not isinstance(payload, dict):
        return {"message": response.text}
    return payload
