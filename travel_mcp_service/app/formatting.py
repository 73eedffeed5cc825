"""항공권 응답을 인도 표기법(INR, dd/mm/yyyy)으로 바꾸는 유틸리티예요."""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import datetime
from types import MappingProxyType
from typing import Any

INR_EXCHANGE_RATES: Mapping[str, float] = MappingProxyType(
    {
        "USD": 87.6427,
        "EUR": 95.35,
        "GBP": 111.45,
        "AED": 23.86,
        "SGD": 64.25,
        "AUD": 57.89,
        "CAD": 64.32,
    }
)


def convert_to_inr(amount: float | None, from_currency: str = "USD") -> int | None:
    """고정 환율표로 금액을 INR로 환산해요. 표에 없는 통화는 1:1로 취급해요."""
    if amount is None:
        return None
    rate = INR_EXCHANGE_RATES.get(from_currency.upper(), 1)
    return math.floor(amount * rate + 0.5)


def group_indian_digits(value: int) -> str:
    """``1234567`` 을 ``12,34,567`` 처럼 인도식 자리수로 묶어요."""
    sign = "-" if value < 0 else ""
    digits = str(abs(value))
    if len(digits) <= 3:
        return f"{sign}{digits}"

    head, tail = digits[:-3], digits[-3:]
    groups: list[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return f"{sign}{','.join(groups)},{tail}"


def format_indian_currency(amount: float | None, currency: str = "INR") -> str:
    if amount is None:
        return "N/A"
    if currency.upper() == "INR":
        amount_in_inr = math.floor(amount + 0.5)
    else:
        amount_in_inr = convert_to_inr(amount, currency) or 0
    return f"₹{group_indian_digits(amount_in_inr)}"


def format_indian_datetime(iso_string: str | None) -> dict[str, str] | str:
    if not iso_string:
        return "N/A"
    try:
        parsed = datetime.fromisoformat(iso_string.replace("Z", "+00:00"))
    except ValueError:
        return "N/A"
    return {
        "date": parsed.strftime("%d/%m/%Y"),
        "time": parsed.strftime("%I:%M %p").lower(),
    }


def format_duration(minutes: int | None) -> str:
    if not minutes:
        return "N/A"
    hours, remainder = divmod(int(minutes), 60)
    return f"{hours}h {remainder}m"


def format_stop_info(stop_count: int) -> str:
    if stop_count == 0:
        return "Non-stop"
    return f"{stop_count} {'stop' if stop_count == 1 else 'stops'}"


def _dig(value: Any, *keys: str) -> Any:
    current = value
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def _format_place(place: Any) -> dict[str, str]:
    return {
        "code": _dig(place, "code") or "N/A",
        "name": _dig(place, "name") or "N/A",
        "city": _dig(place, "city", "name") or "N/A",
        "country": _dig(place, "city", "country", "name") or "India",
    }


def format_flight_deal(deal: dict[str, Any]) -> dict[str, Any]:
    legs = deal.get("legs")
    first_leg = legs[0] if isinstance(legs, list) and legs and isinstance(legs[0], dict) else {}
    stop_count_value = first_leg.get("stopCount")
    stop_count = stop_count_value if isinstance(stop_count_value, int) else 0

    amount = _dig(deal, "price", "amount")
    currency = _dig(deal, "price", "currency") or "USD"
    return {
        "id": deal.get("id"),
        "origin": _format_place(deal.get("source")),
        "destination": _format_place(deal.get("destination")),
        "departure": format_indian_datetime(deal.get("departureTime")),
        "arrival": format_indian_datetime(deal.get("arrivalTime")),
        "duration": format_duration(deal.get("duration")),
        "price": {
            "amount": format_indian_currency(amount, currency),
            "originalAmount": amount,
            "originalCurrency": currency,
            "convertedAmount": convert_to_inr(amount, currency) or 0,
            "currency": "INR",
        },
        "airline": _dig(first_leg, "carrier", "name") or "N/A",
        "flightNumber": first_leg.get("flightNumber") or "N/A",
        "stops": stop_count,
        "stopInfo": format_stop_info(stop_count),
        "deepLink": deal.get("deeplink") or "#",
    }


def format_flight_deals(payload: Any) -> dict[str, Any]:
    """업스트림 항공권 딜 응답을 화면/에이전트용 형태로 정리해요."""
    status = payload.get("status") if isinstance(payload, dict) else None
    itineraries = _dig(payload, "data", "itineraries")
    deals = [format_flight_deal(deal) for deal in itineraries if isinstance(deal, dict)] if isinstance(itineraries, list) else []
    return {
        "status": status,
        "totalResults": _dig(payload, "data", "totalResultCount") or 0,
        "deals": deals,
    }
