import logging
from ipaddress import IPv4Address

import pytest

from simplepgw.control_plane import ApnNotFoundError, ControlPlane

APN = "test.apn"
APN_GW = IPv4Address("127.0.0.1")
SGW_ADDR = IPv4Address("127.1.0.1")


@pytest.fixture
def cp():
    plane = ControlPlane()
    plane.add_apn(APN, APN_GW)
    return plane


def test_unknown_apn_raises(cp):
    with pytest.raises(ApnNotFoundError):
        cp.create_pdn_connection("missing", SGW_ADDR, 1)
    assert cp.find_pdn_by_cp_teid(1) is None


def test_created_pdn_is_findable(cp):
    pdn = cp.create_pdn_connection(APN, SGW_ADDR, 10)
    assert cp.find_pdn_by_cp_teid(10) is pdn
    assert cp.find_pdn_by_ip_address(pdn.ue_ip_addr) is pdn
    assert cp.find_pdn_by_ip_address(str(pdn.ue_ip_addr)) is pdn
    assert pdn.apn_gw == APN_GW
    assert pdn.sgw_address == SGW_ADDR
    assert pdn.sgw_cp_teid == 10
    assert pdn.cp_teid == 10


def test_default_bearer_is_created(cp):
    pdn = cp.create_pdn_connection(APN, SGW_ADDR, 10)
    bearer = pdn.default_bearer
    assert cp.find_bearer_by_dp_teid(bearer.dp_teid) is bearer
    assert bearer.sgw_dp_teid == 10
    assert bearer.pdn_connection is pdn
    assert list(pdn.bearers.values()) == [bearer]


def test_ue_addresses_are_consecutive(cp):
    first = cp.create_pdn_connection(APN, SGW_ADDR, 1)
    second = cp.create_pdn_connection(APN, SGW_ADDR, 2)
    assert second.ue_ip_addr == first.ue_ip_addr + 1
    assert first.ue_ip_addr >= IPv4Address(0xC0A80101)


def test_create_bearer_allocates_new_teid(cp):
    pdn = cp.create_pdn_connection(APN, SGW_ADDR, 1)
    extra = cp.create_bearer(pdn, 54321)
    assert extra.dp_teid == pdn.default_bearer.dp_teid + 1
    assert extra.sgw_dp_teid == 54321
    assert pdn.bearers[extra.dp_teid] is extra


def test_delete_pdn_removes_everything(cp):
    pdn = cp.create_pdn_connection(APN, SGW_ADDR, 12345)
    extra = cp.create_bearer(pdn, 54321)
    teids = [pdn.default_bearer.dp_teid, extra.dp_teid]
    cp.delete_pdn_connection(12345)
    assert cp.find_pdn_by_cp_teid(12345) is None
    assert cp.find_pdn_by_ip_address(pdn.ue_ip_addr) is None
    assert all(cp.find_bearer_by_dp_teid(t) is None for t in teids)
    assert pdn.bearers == {}


def test_delete_unknown_pdn_warns(cp, caplog):
    caplog.set_level(logging.INFO, logger="simplepgw")
    cp.delete_pdn_connection(999)
    assert any("not found for deletion" in r.getMessage() for r in caplog.records)


def test_delete_bearer_detaches_from_pdn(cp):
    pdn = cp.create_pdn_connection(APN, SGW_ADDR, 1)
    extra = cp.create_bearer(pdn, 2)
    cp.delete_bearer(extra.dp_teid)
    assert cp.find_bearer_by_dp_teid(extra.dp_teid) is None
    assert extra.dp_teid not in pdn.bearers
    assert pdn.default_bearer.dp_teid in pdn.bearers


def test_delete_unknown_bearer_warns(cp, caplog):
    caplog.set_level(logging.INFO, logger="simplepgw")
    cp.delete_bearer(0xFFFFFFFF)
    assert any("Bearer with TEID" in r.getMessage() for r in caplog.records)


def test_add_apn_accepts_string_address(caplog):
    caplog.set_level(logging.INFO, logger="simplepgw")
    plane = ControlPlane()
    plane.add_apn("internet", "10.10.10.1")
    pdn = plane.create_pdn_connection("internet", "192.168.1.100", 5)
    assert pdn.apn_gw == IPv4Address("10.10.10.1")
    assert any(
        "Added new APN: internet with gateway: 10.10.10.1" in r.getMessage()
        for r in caplog.records
    )