"""Interactive installer that signs in a ProctiNet user and sets up the Suricata IDS."""

__version__ = "0.1.0"
__all__ = ["__version__"]