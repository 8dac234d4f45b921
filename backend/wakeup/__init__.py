"""wakeup: send Wake-on-LAN magic packets to named hosts."""

__version__ = "0.3.0"
