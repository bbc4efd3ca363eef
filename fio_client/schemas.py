from decimal import Decimal
from typing import Any, Generic, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

T = TypeVar("T")


class FioModel(BaseModel):
    """Frozen model whose JSON keys are matched case-insensitively."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def match_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        keys = {}
        for name, field in cls.model_fields.items():
            key = field.alias or name
            keys[key.lower()] = key
        return {
            keys.get(k.lower(), k) if isinstance(k, str) else k: v
            for k, v in data.items()
        }


class Column(FioModel, Generic[T]):
    id: int | None = None
    name: str | None = None
    value: T | None = None


class Transaction(FioModel):
    movement_id: Column[int] | None = Field(default=None, alias="column22")
    date: Column[str] | None = Field(default=None, alias="column0")
    amount: Column[Decimal] | None = Field(default=None, alias="column1")
    currency: Column[str] | None = Field(default=None, alias="column14")
    counter_account: Column[str] | None = Field(
        default=None, alias="column2"
    )
    counter_account_name: Column[str] | None = Field(
        default=None, alias="column10"
    )
    bank_code: Column[str] | None = Field(default=None, alias="column3")
    bank_name: Column[str] | None = Field(default=None, alias="column12")
    constant_symbol: Column[str] | None = Field(
        default=None, alias="column4"
    )
    variable_symbol: Column[str] | None = Field(
        default=None, alias="column5"
    )
    specific_symbol: Column[str] | None = Field(
        default=None, alias="column6"
    )
    user_identification: Column[str] | None = Field(
        default=None, alias="column7"
    )
    message_for_recipient: Column[str] | None = Field(
        default=None, alias="column16"
    )
    operation_type: Column[str] | None = Field(default=None, alias="column8")
    performed_by: Column[str] | None = Field(default=None, alias="column9")
    specification: Column[str] | None = Field(default=None, alias="column18")
    comment: Column[str] | None = Field(default=None, alias="column25")
    bic: Column[str] | None = Field(default=None, alias="column26")
    instruction_id: Column[int] | None = Field(
        default=None, alias="column17"
    )
    payer_reference: Column[str] | None = Field(
        default=None, alias="column27"
    )

    def value(self, field_name: str) -> Any:
        column = getattr(self, field_name)
        return column.value if column is not None else None


class TransactionList(FioModel):
    transactions: tuple[Transaction, ...] = Field(
        default=(), alias="transaction"
    )

    @field_validator("transactions", mode="before")
    def none_as_empty(cls, value):  # noqa
        return () if value is None else value


class Info(FioModel):
    account_id: str | None = Field(default=None, alias="accountId")
    bank_id: str | None = Field(default=None, alias="bankId")
    currency: str | None = None
    iban: str | None = None
    bic: str | None = None
    opening_balance: Decimal | None = Field(
        default=None, alias="openingBalance"
    )
    closing_balance: Decimal | None = Field(
        default=None, alias="closingBalance"
    )
    date_start: str | None = Field(default=None, alias="dateStart")
    date_end: str | None = Field(default=None, alias="dateEnd")
    year_list: Any = Field(default=None, alias="yearList")
    id_list: Any = Field(default=None, alias="idList")
    id_from: int | None = Field(default=None, alias="idFrom")
    id_to: int | None = Field(default=None, alias="idTo")
    id_last_download: Any = Field(default=None, alias="idLastDownload")


class AccountStatement(FioModel):
    info: Info | None = None
    transaction_list: TransactionList | None = Field(
        default=None, alias="transactionList"
    )

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        if self.transaction_list is None:
            return ()
        return self.transaction_list.transactions


class StatementRoot(FioModel):
    account_statement: AccountStatement | None = Field(
        default=None, alias="accountStatement"
    )
