"""Identify the program running in the focused pane."""
import logging
from typing import Optional

logger = logging.getLogger(__name__)

NO_COMMAND = "N/A"
TERMINAL_PREFIX = "terminal"


def decode_client_list(stdout: bytes) -> str:
    """Decode raw list-clients output; undecodable output reads as empty."""
    try:
        return stdout.decode("utf-8")
    except UnicodeDecodeError:
        logger.warning("Client list output is not valid UTF-8, treating occupant as unknown")
        return ""


def occupant_from_client_list(output: str) -> Optional[str]:
    """
    Extract the focused pane's program from `zellij action list-clients` output.

    Args:
        output: Raw command output, a header line followed by one row per client

    Returns:
        Program name of the first client's pane, or None when the pane is not a
        terminal, runs no command, or the output cannot be parsed

    Example:
        >>> occupant_from_client_list("CLIENT_ID ZELLIJ_PANE_ID RUNNING_COMMAND\\n"
        ...                           "1 terminal_2 /usr/bin/nvim")
        'nvim'
    """
    clients = output.split("\n")[1:]
    if not clients:
        return None

    columns = clients[0].split()
    if len(columns) < 3:
        logger.debug(f"Client row too short: {clients[0]!r}")
        return None

    pane, command = columns[1], columns[2]
    if not pane.startswith(TERMINAL_PREFIX) or command == NO_COMMAND:
        return None

    return command.split("/")[-1] or None
