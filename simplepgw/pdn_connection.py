"""PDN connections: a UE session towards one APN."""

from __future__ import annotations

from dataclasses import dataclass, field
from ipaddress import IPv4Address

from simplepgw.bearer import Bearer


@dataclass(eq=False)
class PdnConnection:
    """State of one PDN connection and the bearers it owns."""

    cp_teid: int
    apn_gw: IPv4Address
    ue_ip_addr: IPv4Address
    sgw_cp_teid: int = 0
    sgw_address: IPv4Address = field(default_factory=lambda: IPv4Address(0))
    default_bearer: Bearer | None = field(default=None, repr=False)
    bearers: dict[int, Bearer] = field(default_factory=dict, repr=False)

    def add_bearer(self, bearer: Bearer) -> None:
        """Attach a bearer, keyed by its data-plane TEID."""
        self.bearers[bearer.dp_teid] = bearer

    def remove_bearer(self, dp_teid: int) -> None:
        """Detach the bearer with the given TEID; unknown TEIDs are ignored."""
        self.bearers.pop(dp_teid, None)