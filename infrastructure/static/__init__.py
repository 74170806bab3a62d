"""Bundled static data assets."""
from .augment_loader import augment_icon_url, load_augment_catalog, write_augment_snapshot

__all__ = [
    'augment_icon_url',
    'load_augment_catalog',
    'write_augment_snapshot',
]
