"""wold — HTTP to Wake-on-LAN relay."""

__version__ = "0.1.0"
