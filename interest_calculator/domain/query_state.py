"""Shareable URL state: the calculator form encoded as a query string."""

from __future__ import annotations

import re
from typing import Any, List, Mapping, Union
from urllib.parse import parse_qs, urlencode

from pydantic import ValidationError

from interest_calculator.schemas.calculation import CalculationRequest

AMOUNT_FIELDS = ("principal", "contribution", "targetAmount")

# repr() of a float, the form encode_query writes
_CANONICAL_FLOAT_RE = re.compile(r"^-?(\d+(\.\d*)?|\.\d+)(e[+-]?\d+)?$", re.IGNORECASE)


class QueryStateError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


def encode_query(request: CalculationRequest) -> str:
    """Serialize the form fields; unset optional fields are left out."""
    fields = request.model_dump(exclude_none=True)
    return urlencode({name: fields[name] for name in CalculationRequest.model_fields if name in fields})


def _canonical_amount(value: Any) -> Any:
    """Read "1234.5" as a plain float whatever the currency; anything else goes to the form parser."""
    if isinstance(value, str) and _CANONICAL_FLOAT_RE.match(value.strip()):
        return float(value)
    return value


def decode_query(query: Union[str, Mapping[str, str]]) -> CalculationRequest:
    """
    Rebuild a request from a query string (or an already parsed mapping).

    Keys that are not form fields are ignored so links survive tracking
    parameters. Repeated keys keep their last value.
    """
    if isinstance(query, str):
        parsed = {key: values[-1] for key, values in parse_qs(query.lstrip("?")).items()}
    else:
        parsed = dict(query)

    known = {key: value for key, value in parsed.items() if key in CalculationRequest.model_fields}
    for name in AMOUNT_FIELDS:
        if name in known:
            known[name] = _canonical_amount(known[name])
    try:
        return CalculationRequest.model_validate(known)
    except ValidationError as exc:
        raise QueryStateError(
            [f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()]
        ) from exc
