from pydantic import BaseModel, Field
from typing import Any, Dict, Optional, Union

class IntentRequest(BaseModel):
    # passed through untouched, Stripe decides what is a valid amount
    amount: Optional[Union[bool, int, float, str]] = Field(default=None, description="Amount in the smallest currency unit, e.g. 1500 for 15.00")
    currency: Optional[str] = None  # falls back to settings.default_currency
    metadata: Optional[Dict[str, Any]] = None

class IntentResult(BaseModel):
    client_secret: str
    id: str

class RelayError(BaseModel):
    error: str
    details: Optional[str] = None
    stripe_status: Optional[int] = None
