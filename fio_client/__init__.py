from .api import FioApi, FioRequest
from .constants import DataFormat
from .errors import ErrorKind, FioError, OutOfRangeError
from .helpers.date_range import DateRange
from .result import Result
from .schemas import AccountStatement, Info, Transaction, TransactionList
from .service import FioApiService, create_service
from .token import AccessToken

__all__ = [
    "AccessToken",
    "AccountStatement",
    "DataFormat",
    "DateRange",
    "ErrorKind",
    "FioApi",
    "FioApiService",
    "FioError",
    "FioRequest",
    "Info",
    "OutOfRangeError",
    "Result",
    "Transaction",
    "TransactionList",
    "create_service",
]
