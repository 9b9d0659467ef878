"""Trading API operations built on the authenticated transport"""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Union

from btce.core.constants import Direction, SortOrder
from btce.exchange.exceptions import InvalidParameter, RemoteError
from btce.exchange.transport import AuthenticatedTransport


logger = logging.getLogger("btce.exchange")


def _coerce_enum(enum_cls, value, label: str):
    """Accept an enum member, its wire value, or its name (case-insensitive)"""
    if isinstance(value, enum_cls):
        return value

    if isinstance(value, str):
        for member in enum_cls:
            if value.lower() in (member.value.lower(), member.name.lower()):
                return member

    allowed = [member.value for member in enum_cls]
    raise InvalidParameter(f"{label} must be one of {allowed}. Found: {value!r}")


@dataclass
class HistoryQuery:
    """
    Pagination and time bounds for history calls.

    Unset (None) fields are left out of the request.
    """
    offset: Optional[int] = 0
    count: Optional[int] = 1000
    from_id: Optional[int] = 0
    end_id: Optional[int] = None
    order: Optional[Union[SortOrder, str]] = SortOrder.DESCENDING
    since: Optional[int] = 0
    end: Optional[int] = None
    pair: Optional[str] = None

    def to_params(self) -> Dict[str, Any]:
        """Wire parameters, skipping unset fields"""
        fields = asdict(self)
        if fields["order"] is not None:
            fields["order"] = _coerce_enum(SortOrder, fields["order"], "order").value

        wire_names = {"offset": "from"}
        return {
            wire_names.get(name, name): value
            for name, value in fields.items()
            if value is not None
        }


class TradingOperations:
    """Method-specific parameter shaping over AuthenticatedTransport"""

    def __init__(self, transport: AuthenticatedTransport):
        self.transport = transport

    def query(self, method: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Call any trading API method"""
        return self.transport.dispatch(method, params)

    def make_order(
        self,
        amount: float,
        pair: str,
        direction: Union[Direction, str],
        price: float,
    ) -> Dict[str, Any]:
        """
        Place a limit order.

        Args:
            amount: Order amount in base currency
            pair: Trading pair (e.g. "btc_usd")
            direction: "buy" or "sell"
            price: Limit price

        Raises:
            InvalidParameter: direction is not buy/sell (no request is made)
        """
        side = _coerce_enum(Direction, direction, "direction")

        result = self.query("Trade", {
            "pair": pair,
            "type": side.value,
            "rate": price,
            "amount": amount,
        })
        logger.info(f"Order placed: {side.value} {amount} {pair} @ {price}")
        return result

    def cancel_order(self, order_id: int) -> Dict[str, Any]:
        """Cancel an active order"""
        result = self.query("CancelOrder", {"order_id": order_id})
        logger.info(f"Order cancelled: {order_id}")
        return result

    def get_info(self) -> Dict[str, Any]:
        """Fetch account info (balances, rights, open order count)"""
        return self.query("getInfo")

    def get_info_data(self) -> Dict[str, Any]:
        """Fetch account info and return only the payload"""
        info = self.get_info()
        if info.get("success") != 1:
            raise RemoteError(str(info.get("error", "getInfo did not succeed")), info)
        return info["return"]

    def trans_history(
        self,
        offset: Optional[int] = 0,
        count: Optional[int] = 1000,
        from_id: Optional[int] = 0,
        end_id: Optional[int] = None,
        order: Optional[Union[SortOrder, str]] = SortOrder.DESCENDING,
        since: Optional[int] = 0,
        end: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Fetch account transaction history"""
        query = HistoryQuery(
            offset=offset,
            count=count,
            from_id=from_id,
            end_id=end_id,
            order=order,
            since=since,
            end=end,
        )
        return self.query("TransHistory", query.to_params())

    def trade_history(
        self,
        offset: Optional[int] = 0,
        count: Optional[int] = 1000,
        from_id: Optional[int] = 0,
        end_id: Optional[int] = None,
        order: Optional[Union[SortOrder, str]] = SortOrder.DESCENDING,
        since: Optional[int] = 0,
        end: Optional[int] = None,
        pair: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Fetch executed trade history, optionally for one pair"""
        query = HistoryQuery(
            offset=offset,
            count=count,
            from_id=from_id,
            end_id=end_id,
            order=order,
            since=since,
            end=end,
            pair=pair,
        )
        return self.query("TradeHistory", query.to_params())

    def active_orders(self, pair: Optional[str] = None) -> Dict[str, Any]:
        """List active orders, optionally for one pair"""
        return self.query("ActiveOrders", {"pair": pair})

    def check_past_order(self, order_id: int) -> Dict[str, Any]:
        """
        Look up a completed (non-active) order by id.

        Raises:
            RemoteError: server reports the lookup failed
        """
        data = self.query("OrderList", {
            "from_id": order_id,
            "to_id": order_id,
            "active": 0,
        })
        if data.get("success") == 0:
            raise RemoteError(str(data.get("error")), data)
        return data
