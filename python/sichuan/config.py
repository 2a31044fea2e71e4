# config.py
import os


def _choice(name: str, default: str, allowed: tuple[str, ...]) -> str:
    """Read *name* from the environment, falling back to *default* if unknown."""
    value = os.getenv(name, default).strip()
    for option in allowed:
        if value.lower() == option.lower():
            return option
    return default


# ======= Search =======
# "position" (sorted by coordinates) or "scarcity" (rarest labels first)
CANDIDATE_ORDER = _choice("SICHUAN_CANDIDATE_ORDER", "position", ("position", "scarcity"))

# ======= Terminal front end =======
STEP_DELAY = float(os.getenv("SICHUAN_STEP_DELAY", "0.4"))   # seconds per animated step
LOG_LEVEL = _choice(
    "SICHUAN_LOG_LEVEL", "WARNING", ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
)
