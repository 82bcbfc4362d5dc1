"""Command that runs a short demonstration session."""

from __future__ import annotations

import argparse
import logging
import sys

from simplepgw.control_plane import ControlPlane


def _run() -> None:
    cp = ControlPlane()
    cp.add_apn("internet", "10.10.10.1")
    cp.add_apn("ims", "10.20.30.40")
    print()

    pdn = cp.create_pdn_connection("internet", "192.168.1.100", 12345)
    print()

    cp.create_bearer(pdn, 54321)
    print()

    cp.delete_pdn_connection(pdn.cp_teid)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="simplepgw", description="Run a demonstration PGW session."
    )
    parser.parse_args(argv)

    logger = logging.getLogger("simplepgw")
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    previous_level = logger.level
    logger.setLevel(logging.INFO)
    logger.addHandler(handler)
    try:
        _run()
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous_level)
    return 0


if __name__ == "__main__":
    sys.exit(main())