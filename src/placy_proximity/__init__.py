"""Travel-time estimation and live availability for Placy neighborhood stories."""

__version__ = "0.1.0"
