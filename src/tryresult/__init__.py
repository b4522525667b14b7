"""tryresult: explicit Result values instead of raised exceptions.

Flat imports (preferred):
    from tryresult import Result, Ok, Err, ok, err
    from tryresult import try_fn, try_async, safe, safe_async

Submodule imports (for organization):
    from tryresult.types import Result, Ok, Err
    from tryresult.decorators import safe, safe_async
"""

# Types
from tryresult.types import Err, Ok, Result, err, ok

# Capture adapters
from tryresult.capture import as_error, try_async, try_fn

# Decorators
from tryresult.decorators import safe, safe_async

# Errors
from tryresult.errors import CapturedError, UnwrapError

# Configuration
from tryresult._config import ResultConfig, get_config, init
from tryresult._logging import add_log_hook, clear_log_hooks, configure_logging, get_logger, remove_log_hook

__all__ = [
    "CapturedError",
    "Err",
    "Ok",
    "Result",
    "ResultConfig",
    "UnwrapError",
    "add_log_hook",
    "as_error",
    "clear_log_hooks",
    "configure_logging",
    "err",
    "get_config",
    "get_logger",
    "init",
    "ok",
    "remove_log_hook",
    "safe",
    "safe_async",
    "try_async",
    "try_fn",
]
