import json
import logging
import os

logger = logging.getLogger(__name__)

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "tablepager")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "tablepager.log")

# default settings
PAGE_ACTION_DEFAULT = "native"
PAGE_SIZE_DEFAULT = 250
PAGE_COUNT_DEFAULT = None

PAGE_ACTIONS = {"none", "native", "custom"}


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)


def _positive_int(value):
    # bool is an int subclass
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def load_config():
    cfg = {
        "PAGE_ACTION": PAGE_ACTION_DEFAULT,
        "PAGE_SIZE": PAGE_SIZE_DEFAULT,
        "PAGE_COUNT": PAGE_COUNT_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", CONFIG_JSON, exc)
        return cfg

    pagination = data.get("pagination") if isinstance(data, dict) else None
    if not isinstance(pagination, dict):
        return cfg

    action = pagination.get("page_action")
    if isinstance(action, str) and action.lower() in PAGE_ACTIONS:
        cfg["PAGE_ACTION"] = action.lower()
    elif action is not None:
        logger.warning("Ignoring invalid page_action %r", action)

    size = pagination.get("page_size")
    if _positive_int(size):
        cfg["PAGE_SIZE"] = size
    elif size is not None:
        logger.warning("Ignoring invalid page_size %r", size)

    count = pagination.get("page_count")
    if _positive_int(count):
        cfg["PAGE_COUNT"] = count
    elif count is not None:
        logger.warning("Ignoring invalid page_count %r", count)

    return cfg
