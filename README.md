# simplepgw

A small model of a mobile packet gateway. It keeps track of these things:

- access point names (APNs)
- PDN connections
- the bearers of each PDN connection

It also decides where user-plane packets go, either towards the serving gateway (SGW) or towards an APN gateway.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
simplepgw
```

The command takes no options apart from `--help`. It runs a short demonstration session:

1. It registers two APNs:
   - `internet`, with gateway `10.10.10.1`
   - `ims`, with gateway `10.20.30.40`
2. It opens a PDN connection on `internet` for the SGW at `192.168.1.100`, with control TEID `12345`.
3. It adds a second bearer to that connection, with SGW TEID `54321`.
4. It deletes the connection again, together with its bearers.

Each step is reported on standard output. The command exits with status 0.

## Library use

### Records

`simplepgw.bearer.Bearer` is a dataclass with these fields:

- `dp_teid`: the gateway's data-plane TEID.
- `pdn_connection`: the owning `PdnConnection`.
- `sgw_dp_teid`: the TEID the SGW expects on downlink packets.

`simplepgw.pdn_connection.PdnConnection` is a dataclass with these fields:

- `cp_teid`
- `apn_gw`
- `ue_ip_addr`
- `sgw_cp_teid`
- `sgw_address`
- `default_bearer`
- `bearers`: a dict from data-plane TEID to `Bearer`.

It has two methods:

- `add_bearer(bearer)` attaches a bearer.
- `remove_bearer(dp_teid)` detaches one. An unknown TEID is ignored.

### Control plane

`simplepgw.control_plane.ControlPlane` holds the gateway's state.

- `add_apn(apn_name, apn_gateway)` registers an APN.
- `create_pdn_connection(apn, sgw_addr, sgw_cp_teid)` opens a PDN connection keyed by `sgw_cp_teid`.
  - It gives the UE the next address from a pool that starts at `192.168.1.1`.
  - It creates a default bearer whose SGW TEID is `sgw_cp_teid`.
  - For an unknown APN it raises `ApnNotFoundError`, a subclass of `LookupError`.
- `create_bearer(pdn, sgw_teid)` adds another bearer. Data-plane TEIDs are numbered from 1 upward.
- `delete_bearer(dp_teid)` removes a bearer.
- `delete_pdn_connection(cp_teid)` removes a connection and all of its bearers.
- Deleting something unknown only logs a warning.
- These lookups return `None` when nothing matches:
  - `find_pdn_by_cp_teid(cp_teid)`
  - `find_pdn_by_ip_address(ip)`
  - `find_bearer_by_dp_teid(dp_teid)`

Addresses may be given as `ipaddress.IPv4Address` objects or as strings.

The UE address pool and the TEID counter are shared by every `ControlPlane` in the process. Values are never reused.

```python
from ipaddress import IPv4Address
from simplepgw.control_plane import ControlPlane

cp = ControlPlane()
cp.add_apn("internet", IPv4Address("10.10.10.1"))
pdn = cp.create_pdn_connection("internet", "192.168.1.100", 12345)
extra = cp.create_bearer(pdn, 54321)
cp.delete_pdn_connection(12345)
```

### Data plane

`simplepgw.data_plane.DataPlane` is an abstract class that routes packets. It is built from a `ControlPlane`. A subclass must supply two forwarding hooks:

- `forward_packet_to_sgw(sgw_addr, sgw_dp_teid, packet)`
- `forward_packet_to_apn(apn_gateway, packet)`

There are two entry points:

- `handle_uplink(dp_teid, packet)` looks up the bearer by its TEID. It forwards the packet to the APN gateway of the bearer's PDN connection.
- `handle_downlink(ue_ip, packet)` looks up the PDN connection by UE address. It forwards the packet to that connection's SGW address, using the default bearer's SGW TEID.

Packets for an unknown TEID or an unknown UE address are logged as errors and dropped.

```python
from simplepgw.data_plane import DataPlane

class RecordingDataPlane(DataPlane):
    def __init__(self, control_plane):
        super().__init__(control_plane)
        self.to_sgw = []
        self.to_apn = []

    def forward_packet_to_sgw(self, sgw_addr, sgw_dp_teid, packet):
        self.to_sgw.append((sgw_addr, sgw_dp_teid, packet))

    def forward_packet_to_apn(self, apn_gateway, packet):
        self.to_apn.append((apn_gateway, packet))
```

### Logging

All reports go through the standard `logging` module, under the `simplepgw` logger hierarchy. The library does not set up any handlers. The command line attaches one that writes to standard output.

## What it does not do

The package keeps session state and decides where packets go, nothing more:

- It does not send or receive packets on the network. The two forwarding hooks are left to the user.
- It does not speak GTP or any signalling protocol.
- It does not keep any state beyond the running process.