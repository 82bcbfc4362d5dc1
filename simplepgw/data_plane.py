"""Data plane: routes user packets using control-plane state."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from ipaddress import IPv4Address

from simplepgw.control_plane import ControlPlane

_log = logging.getLogger(__name__)


class DataPlane(ABC):
    """Forwards uplink packets to APNs and downlink packets to SGWs.

    Subclasses supply the actual transmission.
    """

    def __init__(self, control_plane: ControlPlane) -> None:
        self.control_plane = control_plane

    def handle_uplink(self, dp_teid: int, packet: bytes) -> None:
        bearer = self.control_plane.find_bearer_by_dp_teid(dp_teid)
        if bearer is None:
            _log.error("ERROR: Bearer not found for UPLINK TEID: %d", dp_teid)
            return
        pdn = bearer.pdn_connection
        _log.info(
            "Handling UPLINK traffic:\n  TEID: %d\n  UE IP: %s\n"
            "  Packet size: %d bytes\n  Forwarding to APN: %s",
            dp_teid, pdn.ue_ip_addr, len(packet), pdn.apn_gw,
        )
        self.forward_packet_to_apn(pdn.apn_gw, packet)

    def handle_downlink(self, ue_ip: IPv4Address | str, packet: bytes) -> None:
        ue_ip = IPv4Address(ue_ip)
        pdn = self.control_plane.find_pdn_by_ip_address(ue_ip)
        if pdn is None:
            _log.error("ERROR: PDN connection not found for UE IP: %s", ue_ip)
            return
        bearer = pdn.default_bearer
        if bearer is None:
            _log.error("ERROR: Default bearer not found for UE IP: %s", ue_ip)
            return
        _log.info(
            "Handling DOWNLINK traffic:\n  UE IP: %s\n  Packet size: %d bytes\n"
            "  Forwarding to SGW: %s\n  Using bearer TEID: %d",
            ue_ip, len(packet), pdn.sgw_address, bearer.sgw_dp_teid,
        )
        self.forward_packet_to_sgw(pdn.sgw_address, bearer.sgw_dp_teid, packet)

    @abstractmethod
    def forward_packet_to_sgw(
        self, sgw_addr: IPv4Address, sgw_dp_teid: int, packet: bytes
    ) -> None:
        """Send a downlink packet to the SGW tunnel endpoint."""

    @abstractmethod
    def forward_packet_to_apn(self, apn_gateway: IPv4Address, packet: bytes) -> None:
        """Send an uplink packet to the APN gateway."""