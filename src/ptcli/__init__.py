"""ptcli - command-line client helpers for PeerTube-style video instances."""
# Created: 2026-10-12

__version__ = "0.1.0"
