"""n8n AI Bridge: a thin HTTP gateway in front of the n8n REST API."""

__version__ = "1.0.0"
