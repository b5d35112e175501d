"""Internal data schemas for parsed statement data.

These models represent the normalized output of the format parsers
before it is written to the budgeting CSV.
"""

from pydantic import BaseModel, ConfigDict, Field


class NormalizedRecord(BaseModel):
    """Represents a single transaction in the budgeting tool's format.

    Amounts are signed integer strings in yen: negative for spend,
    positive for income. PayPay deposits keep their comma grouping.
    """

    model_config = ConfigDict(frozen=True)

    date: str = Field(..., description="Transaction date (YYYY-MM-DD)")
    payee: str = Field(default="", description="Merchant or counterparty")
    memo: str = Field(default="", description="Free-form note")
    amount: str = Field(..., description="Signed amount")


class SkippedRow(BaseModel):
    """A row of a recognized statement that could not be normalized."""

    row_number: int = Field(..., description="1-based position in the source, header included")
    raw_data: list[str] = Field(default_factory=list, description="Original cells")
    reason: str = Field(..., description="Why the row was skipped")


class ParseResult(BaseModel):
    """Output of a parser that recognized its format.

    A parser that does not recognize the input returns None instead,
    so an empty ParseResult always means "matched, but nothing to import".
    """

    valid_records: list[NormalizedRecord] = Field(default_factory=list)
    skipped_rows: list[SkippedRow] = Field(default_factory=list)
