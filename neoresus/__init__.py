"""NeoResus: neonatal resuscitation decision support."""

__version__ = "1.0.0"
