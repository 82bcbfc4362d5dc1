"""Control plane: APNs, PDN connections and bearers."""

from __future__ import annotations

import itertools
import logging
from ipaddress import IPv4Address

from simplepgw.bearer import Bearer
from simplepgw.pdn_connection import PdnConnection

_log = logging.getLogger(__name__)

# Address and TEID pools are shared by every control plane in the process.
_ue_ip_pool = itertools.count(0xC0A80101)
_dp_teid_pool = itertools.count(1)


class ApnNotFoundError(LookupError):
    """Raised when a PDN connection is requested for an unknown APN."""


class ControlPlane:
    """Keeps the session state that the data plane looks up."""

    def __init__(self) -> None:
        self._pdns: dict[int, PdnConnection] = {}
        self._pdns_by_ue_ip_addr: dict[IPv4Address, PdnConnection] = {}
        self._bearers: dict[int, Bearer] = {}
        self._apns: dict[str, IPv4Address] = {}

    def find_pdn_by_cp_teid(self, cp_teid: int) -> PdnConnection | None:
        return self._pdns.get(cp_teid)

    def find_pdn_by_ip_address(self, ip: IPv4Address | str) -> PdnConnection | None:
        return self._pdns_by_ue_ip_addr.get(IPv4Address(ip))

    def find_bearer_by_dp_teid(self, dp_teid: int) -> Bearer | None:
        return self._bearers.get(dp_teid)

    def create_pdn_connection(
        self, apn: str, sgw_addr: IPv4Address | str, sgw_cp_teid: int
    ) -> PdnConnection:
        """Open a PDN connection with a fresh UE address and a default bearer."""
        try:
            apn_gw = self._apns[apn]
        except KeyError:
            _log.error("ERROR: APN '%s' not found", apn)
            raise ApnNotFoundError(f"APN not found: {apn}") from None

        ue_ip = IPv4Address(next(_ue_ip_pool))
        sgw_addr = IPv4Address(sgw_addr)

        pdn = PdnConnection(cp_teid=sgw_cp_teid, apn_gw=apn_gw, ue_ip_addr=ue_ip)
        pdn.sgw_address = sgw_addr
        pdn.sgw_cp_teid = sgw_cp_teid
        pdn.default_bearer = self.create_bearer(pdn, sgw_cp_teid)

        self._pdns[sgw_cp_teid] = pdn
        self._pdns_by_ue_ip_addr[ue_ip] = pdn

        _log.info(
            "Created new PDN connection:\n"
            "  APN: %s\n  UE IP: %s\n  SGW address: %s\n  Control TEID: %d",
            apn, ue_ip, sgw_addr, sgw_cp_teid,
        )
        return pdn

    def delete_pdn_connection(self, cp_teid: int) -> None:
        """Remove a PDN connection and every bearer it owns."""
        pdn = self._pdns.get(cp_teid)
        if pdn is None:
            _log.warning("WARNING: PDN connection with TEID %d not found for deletion", cp_teid)
            return

        self._pdns_by_ue_ip_addr.pop(pdn.ue_ip_addr, None)
        _log.info(
            "Deleting PDN connection:\n  UE IP: %s\n  Bearers count: %d",
            pdn.ue_ip_addr, len(pdn.bearers),
        )
        for teid in list(pdn.bearers):
            self.delete_bearer(teid)
        del self._pdns[cp_teid]
        _log.info("PDN connection deleted successfully")

    def create_bearer(self, pdn: PdnConnection, sgw_teid: int) -> Bearer:
        """Allocate a new bearer on ``pdn`` towards the SGW TEID ``sgw_teid``."""
        bearer = Bearer(dp_teid=next(_dp_teid_pool), pdn_connection=pdn, sgw_dp_teid=sgw_teid)
        self._bearers[bearer.dp_teid] = bearer
        pdn.add_bearer(bearer)

        _log.info(
            "Created new bearer:\n  PGW TEID: %d\n  SGW TEID: %d\n  UE IP: %s",
            bearer.dp_teid, sgw_teid, pdn.ue_ip_addr,
        )
        return bearer

    def delete_bearer(self, dp_teid: int) -> None:
        bearer = self._bearers.pop(dp_teid, None)
        if bearer is None:
            _log.warning("WARNING: Bearer with TEID %d not found for deletion", dp_teid)
            return
        bearer.pdn_connection.remove_bearer(dp_teid)
        _log.info("Deleted bearer with TEID: %d", dp_teid)

    def add_apn(self, apn_name: str, apn_gateway: IPv4Address | str) -> None:
        gateway = IPv4Address(apn_gateway)
        self._apns[apn_name] = gateway
        _log.info("Added new APN: %s with gateway: %s", apn_name, gateway)