from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Root value that switches the run to stdin → stdout streaming.
STDIN_SENTINEL: str = '-'

# Glob used when -g/--glob is omitted.
MATCH_ALL_GLOB: str = '*'

HIDDEN_PREFIX: str = '.'

# Negative --level means "no depth limit".
UNBOUNDED_DEPTH: int = -1

TEXT_ENCODING: str = 'utf-8'
