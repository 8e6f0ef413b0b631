"""Parse athletic stat sheets and reconcile them against team rosters."""

__version__ = "0.1.0"
