"""Ticket seller change-making simulation.

A ticket costs 25. Customers queue with a single 25, 50, or 100 bill and are
served strictly in order. The seller starts with an empty till and may only
give change from bills already taken.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

TICKET_PRICE = 25


@dataclass
class Till:
    """Bills on hand that can be used as change (100s are never given back)."""

    b25: int = 0
    b50: int = 0

    def accept(self, bill: int) -> bool:
        """Take *bill* for one ticket and hand out change if possible.

        Returns False (and leaves the till unchanged) when change cannot be made.
        """
        match bill:
            case 100:
                if self.b50 >= 1 and self.b25 >= 1:
                    self.b50 -= 1
                    self.b25 -= 1
                    return True
                if self.b25 >= 3:
                    self.b25 -= 3
                    return True
                return False
            case 50:
                if self.b25 >= 1:
                    self.b25 -= 1
                    self.b50 += 1
                    return True
                return False
            case _:
                self.b25 += 1
                return True


def sell_tickets(queue: Iterable[int]) -> bool:
    """Return True if every customer in *queue* can be sold a ticket.

    Examples:
        >>> sell_tickets([25, 25, 50])
        True
        >>> sell_tickets([25, 100])
        False
    """
    till = Till()
    return all(till.accept(bill) for bill in queue)
