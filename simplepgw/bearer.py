"""Bearers: the user-plane tunnels that belong to a PDN connection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from simplepgw.pdn_connection import PdnConnection


@dataclass(eq=False)
class Bearer:
    """A bearer identified by its PGW data-plane TEID.

    ``sgw_dp_teid`` is the TEID the SGW expects on downlink packets.
    """

    dp_teid: int
    pdn_connection: PdnConnection = field(repr=False)
    sgw_dp_teid: int = 0