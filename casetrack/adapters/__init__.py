"""External adapters for casetrack.

This package contains the integrations around the core tracking logic.

Adapter Organization:

- replay/: Recorded event scripts and the player that drives a node
- cli/: Command-line rendering of replayed results
"""
