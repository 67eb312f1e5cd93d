"""Acknowledges a click on the "confirm" button."""
import logging

log = logging.getLogger(__name__)

config = {"label": "Confirm", "style": "success"}


async def default(interaction):
    user = interaction.get("member", {}).get("user", {}).get("username", "unknown")
    log.info(f"Confirmation received from {user}")
