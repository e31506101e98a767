"""CamLib: compress PNG and JPEG images in place through a remote service."""

__version__ = "1.0.0"
