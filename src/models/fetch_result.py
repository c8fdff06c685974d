# src/models/fetch_result.py

"""Outcome of a catalog fetch: records, or the reason there are none."""

from dataclasses import dataclass
from typing import Literal

from src.models.product import ProductRecord

FailureKind = Literal["http_status", "transport", "parse"]


@dataclass(frozen=True)
class FetchFailure:
    """Why the catalog could not be read."""

    kind: FailureKind
    reason: str


@dataclass(frozen=True)
class FetchOk:
    """Successful fetch; ``records`` may legitimately be empty."""

    records: tuple[ProductRecord, ...] = ()

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class FetchErr:
    """Failed fetch.  ``records`` is always empty."""

    failure: FetchFailure

    @property
    def ok(self) -> bool:
        return False

    @property
    def records(self) -> tuple[ProductRecord, ...]:
        return ()


FetchResult = FetchOk | FetchErr
