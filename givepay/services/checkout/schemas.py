"""Request/response schemas for the donation checkout endpoint."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


SUCCESS_MESSAGE = "Session created successfully"


class DonationRequest(BaseModel):
    """Donation payload accepted by `POST /donation/checkout`.

    Amount is in the smallest currency unit. Nothing is checked locally:
    absent fields go to Stripe as missing params and Stripe rejects them.
    """

    model_config = ConfigDict(frozen=True)

    amount: int | None = None
    donor_name: str | None = Field(default=None, alias="donorName")
    email: str | None = None
    currency: str | None = None


class CheckoutResponse(BaseModel):
    """Outcome of one checkout attempt, returned as the HTTP body."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: Literal["success", "error"]
    message: str
    session_id: str | None = Field(default=None, alias="sessionId")
    session_url: str | None = Field(default=None, alias="sessionUrl")

    @model_validator(mode="after")
    def _session_fields_match_status(self) -> "CheckoutResponse":
        if self.status == "success" and not (self.session_id and self.session_url):
            raise ValueError("success response requires sessionId and sessionUrl")
        if self.status == "error" and (self.session_id is not None or self.session_url is not None):
            raise ValueError("error response must not carry session fields")
        return self

    @classmethod
    def success(cls, session_id: str, session_url: str) -> "CheckoutResponse":
        return cls(
            status="success",
            message=SUCCESS_MESSAGE,
            session_id=session_id,
            session_url=session_url,
        )

    @classmethod
    def error(cls, message: str) -> "CheckoutResponse":
        return cls(status="error", message=message)
