"""Health-check payload for the SSY projection service."""

SERVICE_NAME = "ssy-projection"


def get_ping_message() -> str:
    return "pong"
