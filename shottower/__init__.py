"""Validated models, API responses, routing helpers and render callbacks for a media rendering service."""

__version__ = "0.1.0"