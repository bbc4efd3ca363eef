import argparse
import enum
import logging
import sys
from datetime import date
from pathlib import Path

import colorama
from colorama import Fore, Style
from pydantic import ValidationError

from .constants import DataFormat
from .helpers.date_range import DateRange
from .helpers.logging_utils import init_logging
from .result import Result
from .schemas import AccountStatement
from .service import FioApiService, create_service_from_settings
from .settings import Settings

logger = logging.getLogger(Path(__file__).parent.name)


class Commands(enum.StrEnum):
    LAST = enum.auto()
    RANGE = enum.auto()
    BY_ID = "by-id"
    LAST_STATEMENT = "last-statement"
    SET_LAST_DATE = "set-last-date"
    SET_LAST_ID = "set-last-id"


def _data_format(value: str) -> DataFormat:
    try:
        return DataFormat[value.upper()]
    except KeyError:
        choices = ", ".join(str(f) for f in DataFormat)
        raise argparse.ArgumentTypeError(
            f"unknown format {value!r}, choose from {choices}"
        ) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fio-client")
    parser.add_argument(
        "--env-file",
        type=str,
        default=None,
        help="Path to the environment variables file",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    format_args = argparse.ArgumentParser(add_help=False)
    format_args.add_argument(
        "--format",
        type=_data_format,
        default=DataFormat.JSON,
        help="Output format; json is parsed, others are printed as is",
    )

    subparsers.add_parser(
        str(Commands.LAST.value),
        parents=[format_args],
        help="Transactions since the last download",
    )

    range_parser = subparsers.add_parser(
        str(Commands.RANGE.value),
        parents=[format_args],
        help="Transactions in a date range",
    )
    range_parser.add_argument("--start", type=date.fromisoformat)
    range_parser.add_argument("--end", type=date.fromisoformat)
    range_parser.add_argument(
        "--previous-month",
        action="store_true",
        help="Use the whole previous month",
    )

    by_id_parser = subparsers.add_parser(
        str(Commands.BY_ID.value),
        parents=[format_args],
        help="Transactions of an official statement",
    )
    by_id_parser.add_argument("--statement-id", type=int, required=True)
    by_id_parser.add_argument("--year", type=int, required=True)

    last_statement_parser = subparsers.add_parser(
        str(Commands.LAST_STATEMENT.value),
        help="Id and year of the last official statement",
    )
    last_statement_parser.add_argument("--year", type=int, default=None)

    set_date_parser = subparsers.add_parser(
        str(Commands.SET_LAST_DATE.value),
        help="Move the download cursor to a date",
    )
    set_date_parser.add_argument("date", type=date.fromisoformat)

    set_id_parser = subparsers.add_parser(
        str(Commands.SET_LAST_ID.value),
        help="Move the download cursor to a movement id",
    )
    set_id_parser.add_argument("movement_id", type=int)
    return parser


def _print_statement(statement: AccountStatement) -> None:
    if info := statement.info:
        print(
            f"{Style.BRIGHT}{info.account_id}/{info.bank_id}{Style.RESET_ALL}"
            f" {info.currency} {info.date_start} - {info.date_end}"
        )
        print(f"Opening balance: {info.opening_balance}")
        print(f"Closing balance: {info.closing_balance}")
    for transaction in statement.transactions:
        amount = transaction.value("amount")
        color = Fore.RED if amount is not None and amount < 0 else Fore.GREEN
        print(
            f"{transaction.value('date')} {color}{amount}{Style.RESET_ALL}"
            f" {transaction.value('currency')}"
            f" {transaction.value('counter_account_name') or ''}"
        )


def _report(result: Result) -> int:
    if result.is_failure:
        print(f"{Fore.RED}{result.error.message}{Style.RESET_ALL}")
        return 1
    if isinstance(result.value, AccountStatement):
        _print_statement(result.value)
    else:
        print(result.value)
    return 0


def _date_range(args: argparse.Namespace) -> DateRange:
    if args.previous_month:
        return DateRange.previous_month()
    if args.start is None or args.end is None:
        raise ValueError("--start and --end are required")
    result = DateRange.create(args.start, args.end)
    if result.is_failure:
        raise ValueError(result.error.message)
    return result.unwrap()


def run_command(service: FioApiService, args: argparse.Namespace) -> int:
    match args.command:
        case Commands.LAST:
            if args.format is DataFormat.JSON:
                result = service.get_transactions_since_last_download()
            else:
                result = service.get_transactions_since_last_download_text(
                    args.format
                )
        case Commands.RANGE:
            date_range = _date_range(args)
            if args.format is DataFormat.JSON:
                result = service.get_transactions_in_date_range(date_range)
            else:
                result = service.get_transactions_in_date_range_text(
                    date_range, args.format
                )
        case Commands.BY_ID:
            if args.format is DataFormat.JSON:
                result = service.get_transactions_by_statement(
                    args.statement_id, args.year
                )
            else:
                result = service.get_transactions_by_statement_text(
                    args.statement_id, args.year, args.format
                )
        case Commands.LAST_STATEMENT:
            result = service.get_last_statement(args.year)
        case Commands.SET_LAST_DATE:
            result = service.set_cursor_to_last_date(args.date)
        case Commands.SET_LAST_ID:
            result = service.set_cursor_to_last_id(args.movement_id)
        case _:
            raise ValueError(f"Unknown command {args.command}")
    return _report(result)


def main(argv: list[str] | None = None) -> int:
    colorama.init()
    args = build_parser().parse_args(argv)
    try:
        settings = Settings(
            _env_file=args.env_file,  # noqa
        )
    except ValidationError as e:
        from_ = args.env_file if args.env_file else "system environment"
        error_text = f"Error occurred while loading settings from {from_}\n{e}"
        print(error_text, file=sys.stderr)
        return 1

    init_logging(
        settings.log.directory,
        settings.log.file_name,
        settings.log.config,
        settings.app_tz,
        settings.log.level,
    )
    logger.info("Command=%s Settings=%s", args.command, settings)
    try:
        service = create_service_from_settings(settings)
        return run_command(service, args)
    except ValueError as e:
        logger.error("Invalid arguments: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.warning("Program execution interrupted by the user.")
        return 0
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.exception(e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
