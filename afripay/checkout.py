"""Public checkout operations, one coroutine per provider.

Each call builds a fresh processor: settings are read (or injected) per call
and nothing is shared between concurrent checkouts.
"""

import httpx

from afripay.common.config import AfripaySettings
from afripay.common.mode import Mode
from afripay.processors.base import PaymentProcessor
from afripay.processors.orange_money.processor import OrangeMoneyProcessor
from afripay.processors.orange_money.schemas import OrangeMoneyCheckoutRequest, OrangeMoneyQrCode
from afripay.processors.paydunya.processor import PaydunyaProcessor
from afripay.processors.paydunya.schemas import PaydunyaCheckoutRequest, PaydunyaInvoiceResponse
from afripay.processors.paytech.processor import PaytechProcessor
from afripay.processors.paytech.schemas import PaytechCheckoutRequest, PaytechPaymentRequest
from afripay.processors.wave.processor import WaveProcessor
from afripay.processors.wave.schemas import WaveCheckoutRequest, WaveCheckoutSession


PROCESSORS: dict[str, type[PaymentProcessor]] = {
    processor.provider: processor
    for processor in (WaveProcessor, OrangeMoneyProcessor, PaydunyaProcessor, PaytechProcessor)
}


def get_processor(
    provider: str,
    settings: AfripaySettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> PaymentProcessor:
    """Instantiate the processor registered under `provider`."""

    try:
        processor_cls = PROCESSORS[provider]
    except KeyError:
        raise ValueError(f"Unknown provider: {provider} (expected one of {sorted(PROCESSORS)})") from None
    return processor_cls(settings=settings, transport=transport)


async def pay_with_wave(
    request: WaveCheckoutRequest,
    mode: Mode | str = Mode.SANDBOX,
    settings: AfripaySettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> WaveCheckoutSession:
    """Create a Wave checkout session; redirect the payer to `wave_launch_url`."""

    return await WaveProcessor(settings, transport).initiate_checkout(request, mode)


async def pay_with_orange_money(
    request: OrangeMoneyCheckoutRequest,
    mode: Mode | str = Mode.SANDBOX,
    settings: AfripaySettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> OrangeMoneyQrCode:
    """Create an Orange Money payment intent (deeplink or Base64 QR code)."""

    return await OrangeMoneyProcessor(settings, transport).initiate_checkout(request, mode)


async def pay_with_paydunya(
    request: PaydunyaCheckoutRequest,
    mode: Mode | str = Mode.SANDBOX,
    settings: AfripaySettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> PaydunyaInvoiceResponse:
    """Create a PayDunya checkout invoice."""

    return await PaydunyaProcessor(settings, transport).initiate_checkout(request, mode)


async def pay_with_paytech(
    request: PaytechCheckoutRequest,
    mode: Mode | str = Mode.SANDBOX,
    settings: AfripaySettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> PaytechPaymentRequest:
    """Create a PayTech payment request; redirect the payer to `redirect_url`."""

    return await PaytechProcessor(settings, transport).initiate_checkout(request, mode)
