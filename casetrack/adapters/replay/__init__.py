"""Replay adapter.

Reads recorded event scripts and drives a TestCaseNode through them,
standing in for a live test framework.
"""

from .player import ReplaySuite, ScriptPlayer, build_description
from .script import ReplayScript, ScriptError, load_script, parse_script

__all__ = [
    "ReplayScript",
    "ReplaySuite",
    "ScriptError",
    "ScriptPlayer",
    "build_description",
    "load_script",
    "parse_script",
]
