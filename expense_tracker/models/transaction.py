"""Transaction model."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from expense_tracker.config import settings


class Transaction(BaseModel):
    """Represents a single expense entry.

    Instances are frozen, so two transactions with the same field values
    compare equal and hash alike.
    """

    model_config = ConfigDict(frozen=True)

    amount: Decimal = Field(gt=0, description="Expense amount")
    category: str = Field(min_length=1, description="Expense category (food, travel, bills, etc.)")
    timestamp: datetime = Field(
        default_factory=datetime.now, description="When the expense was recorded"
    )
    currency: str = Field(
        default_factory=lambda: settings.default_currency,
        description="Currency code (USD, EUR, GBP, etc.)",
    )

    @field_validator("category", mode="before")
    @classmethod
    def normalize_category(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    def to_display_dict(self) -> dict:
        """Return a dictionary suitable for display to users."""
        return {
            "amount": f"{self.currency} {self.amount:.2f}",
            "category": self.category,
            "timestamp": self.timestamp.strftime("%Y-%m-%d %H:%M"),
        }
