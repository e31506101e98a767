"""Configuration, credential and path policy for CamLib."""
