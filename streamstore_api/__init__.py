"""
Top‑level package for the StreamStore API.

The HTTP application lives in ``streamstore_api.app`` and the
client‑side pieces (API wrapper, cart, storefront state and admin
panel) live in ``streamstore_api.client``.
"""

__all__ = []
