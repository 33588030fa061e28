from __future__ import annotations

import sys

from oui.config import load_config, load_settings, resolve_table_path
from oui.errors import OuiError, UsageError
from oui.log import get_logger, setup_logging
from oui.lookup import lookup
from oui.normalize import normalize

logger = get_logger("cli")

PROG = "oui"
NO_MATCH = "No match."


def parse_args(argv: list[str]) -> str:
    """Return the single MAC address argument.

    Arguments are taken verbatim: a MAC written with a leading separator,
    such as ``-aa-bb-cc-dd-ee``, is an address and not an option.
    """
    if len(argv) != 1:
        raise UsageError(f"expected exactly one argument, got {len(argv)} (usage: {PROG} <mac-address>)")
    return argv[0]


def run(mac: str) -> str:
    settings = load_settings(load_config())
    setup_logging(settings.log_level)
    table = resolve_table_path(settings)
    oui = normalize(mac)
    logger.debug("resolved %s to OUI %s", mac, oui)
    vendor = lookup(table, oui)
    return vendor if vendor is not None else NO_MATCH


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    if argv is None:
        argv = sys.argv[1:]
    try:
        mac = parse_args(argv)
        print(run(mac))
    except OuiError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return exc.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())
