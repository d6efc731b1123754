"""Orange Money (Sonatel) QR code / deeplink payment shapes.

Orange Money speaks camelCase on the wire; models expose snake_case attributes
and serialize back with the provider's names.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from afripay.processors.base import ProviderResponse


class OrangeMoneyAmount(BaseModel):
    model_config = ConfigDict(frozen=True)

    unit: str = "XOF"
    value: int = Field(gt=0)


class OrangeMoneyCheckoutRequest(BaseModel):
    """Payment intent creation payload; `code` is the merchant code."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    amount: OrangeMoneyAmount
    callback_cancel_url: str
    callback_success_url: str
    code: int
    metadata: dict[str, str] | None = None
    name: str
    validity: int


class OrangeMoneyAccessToken(BaseModel):
    access_token: str
    token_type: str | None = None
    expires_in: int | None = None


class OrangeMoneyValidFor(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    start_date_time: str | None = None
    end_date_time: str | None = None


class OrangeMoneyQrCode(ProviderResponse):
    """Either a wallet deeplink or a Base64 PNG QR code, as issued by Orange Money.

    Orange Money has sent the deeplink as both `deepLink` and `deeplink`; each
    spelling keeps its own field so `to_wire()` returns the key that arrived.
    """

    model_config = ConfigDict(alias_generator=to_camel)

    camel_deep_link: str | None = Field(default=None, alias="deepLink")
    lower_deep_link: str | None = Field(default=None, alias="deeplink")
    deep_links: dict[str, str] | None = None
    qr_code: str | None = None
    validity: int | None = None
    metadata: dict[str, str] | None = None
    short_link: str | None = None
    qr_id: str | None = None
    valid_for: OrangeMoneyValidFor | None = None

    @property
    def deep_link(self) -> str | None:
        return self.camel_deep_link or self.lower_deep_link


class OrangeMoneyPartyRef(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    id_type: str


class OrangeMoneyWebhookAmount(BaseModel):
    unit: str
    value: str


class OrangeMoneyWebhookNotification(ProviderResponse):
    """Payment notification Orange Money posts to `X-Callback-Url` (declared only)."""

    model_config = ConfigDict(alias_generator=to_camel)

    amount: OrangeMoneyWebhookAmount
    partner: OrangeMoneyPartyRef
    customer: OrangeMoneyPartyRef
    reference: str
    type: str
    channel: str
    transaction_id: str
    payment_method: str
    detail: str | None = None
    created_at: str
    metadata: dict[str, str] | None = None
    status: Literal["SUCCESS", "FAILED"]
