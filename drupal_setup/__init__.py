"""drupal-setup — scaffold a local Drupal 11 site on DDEV (macOS)."""

__version__ = "0.1.0"
