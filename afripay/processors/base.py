"""Shared checkout flow for every payment gateway.

A processor resolves credentials, shapes the caller's request into the
provider's wire payload, performs a single HTTP exchange and decodes the
provider's native response. Subclasses only supply the provider-specific
pieces (URLs, payload, headers and the optional token exchange).
"""

from abc import ABC, abstractmethod
from time import perf_counter
from typing import Any, ClassVar

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from afripay.common.config import AfripaySettings, load_settings
from afripay.common.credentials import resolve_credentials
from afripay.common.errors import AfriPayError, RequestFailedError
from afripay.common.logging import client_reference_ctx, logger, provider_ctx
from afripay.common.metrics import (
    checkout_failures_total,
    checkout_latency_seconds,
    checkout_requests_total,
)
from afripay.common.mode import Mode


class ProviderResponse(BaseModel):
    """Provider-native response body; unknown upstream fields are kept."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """Return the body as the provider sent it."""

        return self.model_dump(by_alias=True, exclude_unset=True)


class PaymentProcessor(ABC):
    """One payment gateway behind the uniform `initiate_checkout` contract."""

    provider: ClassVar[str]
    display_name: ClassVar[str]
    credential_fields: ClassVar[tuple[str, ...]]
    optional_fields: ClassVar[tuple[str, ...]] = ()
    sandbox_base_url: ClassVar[str]
    production_base_url: ClassVar[str]
    checkout_path: ClassVar[str]
    request_model: ClassVar[type[BaseModel]]
    response_model: ClassVar[type[ProviderResponse]]
    failure_message: ClassVar[str]
    reference_field: ClassVar[str | None] = None

    def __init__(
        self,
        settings: AfripaySettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self.transport = transport

    def base_url(self, mode: Mode) -> str:
        if mode is Mode.SANDBOX:
            return self.sandbox_base_url
        return self.production_base_url

    def validate_request(self, request: BaseModel) -> None:
        """Reject requests the provider would refuse, before any network call."""

    @abstractmethod
    def build_payload(self, request: BaseModel, mode: Mode) -> dict[str, Any]:
        """Shape the request into the provider's JSON body."""

    @abstractmethod
    def build_headers(self, credentials: dict[str, str], access_token: str | None) -> dict[str, str]:
        """Authentication headers for the checkout call."""

    async def authenticate(
        self,
        client: httpx.AsyncClient,
        base_url: str,
        credentials: dict[str, str],
    ) -> str | None:
        """Derive a per-call access token; most providers need none."""

        return None

    def classify_failure(self, response: httpx.Response, request: BaseModel) -> AfriPayError:
        return RequestFailedError(self.failure_message)

    async def initiate_checkout(self, request: BaseModel, mode: Mode | str = Mode.SANDBOX) -> ProviderResponse:
        """Create a checkout session and return the provider's response."""

        mode = Mode(mode)
        reference = getattr(request, self.reference_field, None) if self.reference_field else None
        provider_token = provider_ctx.set(self.provider)
        reference_token = client_reference_ctx.set(reference or "")
        checkout_requests_total.labels(provider=self.provider, mode=mode.value).inc()
        start = perf_counter()
        try:
            result = await self._checkout(request, mode, self.settings or load_settings())
            logger.info("checkout_created provider=%s mode=%s", self.provider, mode.value)
            return result
        except AfriPayError as exc:
            checkout_failures_total.labels(provider=self.provider, kind=exc.kind.value).inc()
            logger.warning(
                "checkout_failed provider=%s mode=%s kind=%s message=%s",
                self.provider,
                mode.value,
                exc.kind.value,
                exc.message,
            )
            raise
        finally:
            checkout_latency_seconds.labels(provider=self.provider).observe(max(0.0, perf_counter() - start))
            provider_ctx.reset(provider_token)
            client_reference_ctx.reset(reference_token)

    async def _checkout(self, request: BaseModel, mode: Mode, settings: AfripaySettings) -> ProviderResponse:
        credentials = resolve_credentials(settings, self.credential_fields)
        for field in self.optional_fields:
            if getattr(settings, field):
                credentials[field] = getattr(settings, field)
        self.validate_request(request)
        payload = self.build_payload(request, mode)
        base_url = self.base_url(mode)

        # No timeout: callers bound the await themselves.
        async with httpx.AsyncClient(transport=self.transport, timeout=None) as client:
            access_token = await self.authenticate(client, base_url, credentials)
            response = await self._send(
                client,
                f"{base_url}{self.checkout_path}",
                headers=self.build_headers(credentials, access_token),
                json=payload,
            )
        if not response.is_success:
            logger.warning(
                "upstream_rejected provider=%s status=%s reason=%s",
                self.provider,
                response.status_code,
                response.reason_phrase,
            )
            raise self.classify_failure(response, request)
        return self._map_response(response, self.response_model)

    async def _send(self, client: httpx.AsyncClient, url: str, **kwargs) -> httpx.Response:
        """Single POST attempt; transport errors become `request_failed`."""

        try:
            return await client.post(url, **kwargs)
        except httpx.HTTPError as exc:
            raise RequestFailedError(f"{self.display_name} request failed: {exc}") from exc

    def _map_response(self, response: httpx.Response, model: type[BaseModel]) -> Any:
        try:
            body = response.json()
        except ValueError as exc:
            raise RequestFailedError(f"Malformed {self.display_name} response: body is not JSON") from exc
        try:
            return model.model_validate(body)
        except ValidationError as exc:
            raise RequestFailedError(
                f"Malformed {self.display_name} response: {exc.error_count()} invalid field(s)"
            ) from exc
