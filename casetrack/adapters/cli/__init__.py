"""Command-line interface adapters.

Provides CLI commands for casetrack:
- replay: Replay an event script and print the resulting TestResult
"""
