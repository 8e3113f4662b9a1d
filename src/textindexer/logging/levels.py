"""
HUMAN logging level -- Readable indexing progress.

Custom level between INFO (20) and WARNING (30).
Does not indicate severity -- it marks the high-level progress events the
user wants to follow (file indexed, batch aborted) without technical noise.

Hierarchy:
    debug  (10) -> per-file reads, posting purges
    info   (20) -> System operations (config loaded, session started)
    human  (25) -> * What the indexer does: file indexed, batch result
    warn   (30) -> Non-fatal problems (unreadable file)
    error  (40) -> Errors
"""

import logging

import structlog

# Custom level: between INFO (20) and WARNING (30)
HUMAN = 25
logging.addLevelName(HUMAN, "HUMAN")


# Inject the .human() method into Python's Logger class so structlog can
# proxy BoundLogger.log(HUMAN, ...) to it
def _human_method(self, message, *args, **kwargs):
    if self.isEnabledFor(HUMAN):
        self._log(HUMAN, message, args, **kwargs)


logging.Logger.human = _human_method

# Register the level in structlog to avoid KeyError: 25
if hasattr(structlog, "stdlib"):
    try:
        structlog.stdlib.LEVEL_TO_NAME[HUMAN] = "human"
        structlog.stdlib.NAME_TO_LEVEL["human"] = HUMAN
    except (AttributeError, KeyError):
        pass
