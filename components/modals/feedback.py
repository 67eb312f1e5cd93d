"""Collects the text fields submitted through the "feedback" modal."""
import logging

log = logging.getLogger(__name__)


async def default(interaction):
    fields = {}
    for row in interaction.get("data", {}).get("components", []):
        for field in row.get("components", []):
            fields[field.get("custom_id")] = field.get("value")
    log.info(f"Feedback submitted: {fields}")
