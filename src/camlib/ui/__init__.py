"""User interfaces for CamLib."""
