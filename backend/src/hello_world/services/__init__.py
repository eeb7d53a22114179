"""Service integrations (AWS clients, secrets, partner API)."""
