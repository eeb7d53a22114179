"""Deploy-time configuration helpers."""
