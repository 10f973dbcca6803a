"""
YooKassa SDK Data Models

Resources keep unknown fields (``extra="allow"``) so that whatever the server
returns survives a decode/encode round trip. Server-assigned fields (``id``,
``status``, timestamps) are only ever filled from responses.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag


class Resource(BaseModel):
    """Base class for API resources"""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_json(self, **kwargs: Any) -> bytes:
        """Serialize for a request body, omitting unset fields."""
        return self.model_dump_json(by_alias=True, exclude_none=True, **kwargs).encode("utf-8")


class ErrorBody(BaseModel):
    """Error response body"""

    type: str = "error"
    id: str = ""
    code: str = ""
    description: str = ""
    parameter: Optional[str] = None
    retry_after: Optional[int] = None


class Amount(Resource):
    """Monetary amount; ``value`` is a decimal string on the wire"""

    value: Decimal = Field(..., description="Amount in major currency units")
    currency: str = Field(..., description="ISO-4217 currency code (e.g., RUB)")


class CancellationDetails(Resource):
    party: str
    reason: str


class Recipient(Resource):
    account_id: Optional[str] = None
    gateway_id: Optional[str] = None


class PaymentMethod(Resource):
    """Payment method used (or saved) for a payment"""

    type: str
    id: Optional[str] = None
    saved: Optional[bool] = None
    title: Optional[str] = None


# ===========================================================================
# Confirmation
# ===========================================================================


class RedirectConfirmation(Resource):
    """Payer confirms by following ``confirmation_url``"""

    type: Literal["redirect"] = "redirect"
    confirmation_url: Optional[str] = None
    return_url: Optional[str] = None
    enforce: Optional[bool] = None
    locale: Optional[str] = None


class OtherConfirmation(Resource):
    """Any non-redirect scenario (embedded, external, qr, mobile_application ...)"""

    type: str


def _confirmation_tag(value: Any) -> str:
    if isinstance(value, dict):
        kind = value.get("type")
    else:
        kind = getattr(value, "type", None)
    return "redirect" if kind == "redirect" else "other"


Confirmation = Annotated[
    Union[
        Annotated[RedirectConfirmation, Tag("redirect")],
        Annotated[OtherConfirmation, Tag("other")],
    ],
    Discriminator(_confirmation_tag),
]


# ===========================================================================
# Payments
# ===========================================================================


class Payment(Resource):
    """Payment, used both as the create request and the API response"""

    id: Optional[str] = None
    status: Optional[str] = None
    amount: Optional[Amount] = None
    income_amount: Optional[Amount] = None
    refunded_amount: Optional[Amount] = None
    description: Optional[str] = None
    recipient: Optional[Recipient] = None
    payment_method: Optional[PaymentMethod] = None
    payment_method_data: Optional[Dict[str, Any]] = None
    payment_method_id: Optional[str] = None
    confirmation: Optional[Confirmation] = None
    capture: Optional[bool] = None
    save_payment_method: Optional[bool] = None
    client_ip: Optional[str] = None
    merchant_customer_id: Optional[str] = None
    paid: Optional[bool] = None
    refundable: Optional[bool] = None
    test: Optional[bool] = None
    receipt: Optional[Dict[str, Any]] = None
    receipt_registration: Optional[str] = None
    airline: Optional[Dict[str, Any]] = None
    transfers: Optional[List[Dict[str, Any]]] = None
    deal: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None
    cancellation_details: Optional[CancellationDetails] = None
    captured_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None


class PaymentList(Resource):
    type: str = "list"
    items: List[Payment] = Field(default_factory=list)
    next_cursor: Optional[str] = None


# ===========================================================================
# Refunds
# ===========================================================================


class Refund(Resource):
    """Refund of a succeeded payment"""

    id: Optional[str] = None
    payment_id: Optional[str] = None
    status: Optional[str] = None
    amount: Optional[Amount] = None
    description: Optional[str] = None
    receipt: Optional[Dict[str, Any]] = None
    receipt_registration: Optional[str] = None
    sources: Optional[List[Dict[str, Any]]] = None
    deal: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None
    cancellation_details: Optional[CancellationDetails] = None
    created_at: Optional[datetime] = None


class RefundList(Resource):
    type: str = "list"
    items: List[Refund] = Field(default_factory=list)
    next_cursor: Optional[str] = None


# ===========================================================================
# Payouts
# ===========================================================================


class Payout(Resource):
    """Payout to a card, wallet or bank account"""

    id: Optional[str] = None
    status: Optional[str] = None
    amount: Optional[Amount] = None
    description: Optional[str] = None
    payout_destination: Optional[Dict[str, Any]] = None
    payout_destination_data: Optional[Dict[str, Any]] = None
    payout_token: Optional[str] = None
    payment_method_id: Optional[str] = None
    deal: Optional[Dict[str, Any]] = None
    self_employed: Optional[Dict[str, Any]] = None
    receipt_data: Optional[Dict[str, Any]] = None
    personal_data: Optional[List[Dict[str, Any]]] = None
    metadata: Optional[Dict[str, Any]] = None
    cancellation_details: Optional[CancellationDetails] = None
    test: Optional[bool] = None
    created_at: Optional[datetime] = None


class PayoutList(Resource):
    type: str = "list"
    items: List[Payout] = Field(default_factory=list)
    next_cursor: Optional[str] = None


# ===========================================================================
# List filters
# ===========================================================================


class ListFilter(BaseModel):
    """
    Sparse set of list query parameters.

    Fields may be set by name (``created_at_gte``) or by wire alias
    (``created_at.gte``).
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    created_at_gte: Optional[datetime] = Field(None, alias="created_at.gte")
    created_at_gt: Optional[datetime] = Field(None, alias="created_at.gt")
    created_at_lte: Optional[datetime] = Field(None, alias="created_at.lte")
    created_at_lt: Optional[datetime] = Field(None, alias="created_at.lt")
    status: Optional[str] = None
    limit: Optional[int] = Field(None, description="Page size (1-100)")
    cursor: Optional[str] = Field(None, description="Cursor from a previous page")

    def to_params(self) -> Dict[str, Any]:
        """Query parameters by wire name, empty and zero values dropped."""
        data = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        return {key: value for key, value in data.items() if value}


class PaymentListFilter(ListFilter):
    captured_at_gte: Optional[datetime] = Field(None, alias="captured_at.gte")
    captured_at_gt: Optional[datetime] = Field(None, alias="captured_at.gt")
    captured_at_lte: Optional[datetime] = Field(None, alias="captured_at.lte")
    captured_at_lt: Optional[datetime] = Field(None, alias="captured_at.lt")
    payment_method: Optional[str] = None


class RefundListFilter(ListFilter):
    payment_id: Optional[str] = None


class PayoutListFilter(ListFilter):
    payout_destination_type: Optional[str] = Field(None, alias="payout_destination.type")
