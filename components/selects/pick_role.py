"""Logs the roles chosen in the "pick_role" select menu."""
import logging

log = logging.getLogger(__name__)


def default(interaction):
    values = interaction.get("data", {}).get("values", [])
    log.info(f"Roles picked: {', '.join(values) or 'none'}")
