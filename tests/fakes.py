import json

import requests

TOKEN = "Ab1" * 21 + "z"  # 64 chars

STATEMENT = {
    "accountStatement": {
        "info": {
            "accountId": "2000000000",
            "bankId": "2010",
            "currency": "CZK",
            "iban": "CZ1020100000002000000000",
            "bic": "FIOBCZPPXXX",
            "openingBalance": 104.5,
            "closingBalance": 204.5,
            "dateStart": "2024-05-01+0200",
            "dateEnd": "2024-05-31+0200",
            "yearList": None,
            "idList": None,
            "idFrom": 26962199069,
            "idTo": 26962199069,
            "idLastDownload": None,
        },
        "transactionList": {
            "transaction": [
                {
                    "column22": {"value": 26962199069, "name": "ID pohybu", "id": 22},
                    "column0": {"value": "2024-05-15+0200", "name": "Datum", "id": 0},
                    "column1": {"value": 100.00, "name": "Objem", "id": 1},
                    "column14": {"value": "CZK", "name": "Měna", "id": 14},
                    "column2": {"value": "2900233333", "name": "Protiúčet", "id": 2},
                    "column10": {"value": "Pavel Novák", "name": "Název protiúčtu", "id": 10},
                    "column3": {"value": "2010", "name": "Kód banky", "id": 3},
                    "column12": {"value": "Fio banka, a.s.", "name": "Název banky", "id": 12},
                    "column4": None,
                    "column5": {"value": "1234", "name": "VS", "id": 5},
                    "column6": None,
                    "column7": {"value": "Pavel Novák", "name": "Uživatelská identifikace", "id": 7},
                    "column16": {"value": "faktura 1234", "name": "Zpráva pro příjemce", "id": 16},
                    "column8": {"value": "Příjem převodem uvnitř banky", "name": "Typ", "id": 8},
                    "column9": None,
                    "column18": None,
                    "column25": {"value": "Pavel Novák", "name": "Komentář", "id": 25},
                    "column26": None,
                    "column17": {"value": 30251685217, "name": "ID pokynu", "id": 17},
                    "column27": None,
                }
            ]
        },
    }
}


def statement_json(**info) -> bytes:
    data = json.loads(json.dumps(STATEMENT))
    data["accountStatement"]["info"].update(info)
    return json.dumps(data).encode("utf-8")


def make_response(status: int = 200, body: bytes | str = b"", url: str = ""):
    r = requests.Response()
    r.status_code = status
    r._content = body.encode("utf-8") if isinstance(body, str) else body
    r._content_consumed = True
    r.encoding = "utf-8"
    r.url = url
    return r


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class FakeSession(requests.Session):
    """Returns queued responses (or raises queued exceptions) for GET."""

    def __init__(self, responses=(), clock=None, duration: float = 0.0):
        super().__init__()
        self.responses = list(responses)
        self.clock = clock
        self.duration = duration
        self.calls: list[tuple[str, float | None]] = []

    def get(self, url, **kwargs):
        now = self.clock() if self.clock is not None else None
        self.calls.append((url, now))
        if self.clock is not None and isinstance(self.clock, FakeClock):
            self.clock.now += self.duration
        item = self.responses.pop(0)
        if isinstance(item, BaseException):
            raise item
        item.url = url
        return item
