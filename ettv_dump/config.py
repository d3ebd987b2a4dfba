import os
import dotenv


dotenv.load_dotenv()


# Defaults
VERBOSE = False
LOG_PATH = ""
LOG_LEVEL = "INFO"
LOG_ROTATION = "1 week"
LOG_RETENTION = "1 month"

BASE_URL = "https://www.ettv.tv/"
DUMP_PATH_TEMPLATE = "dumps/ettv_{name}.txt.gz"
STRICT = False
LEGACY_MAGNET = False
TIMEOUT = ""  # empty means no timeout

# Public tracker list used by --trackers-url
TRACKERS_LIST_URL = "https://raw.githubusercontent.com/ngosang/trackerslist/refs/heads/master/trackers_best.txt"


def _timeout(value):
    if value is None or str(value).strip() == "":
        return None
    return float(value)


class Config:
    VERBOSE = os.getenv("VERBOSE", str(VERBOSE)).lower() == "true"

    LOG_PATH = os.getenv("LOG_PATH", LOG_PATH)
    LOG_LEVEL = os.getenv("LOG_LEVEL", LOG_LEVEL)
    LOG_ROTATION = os.getenv("LOG_ROTATION", LOG_ROTATION)
    LOG_RETENTION = os.getenv("LOG_RETENTION", LOG_RETENTION)

    # Dump host
    BASE_URL = os.getenv("ETTV_BASE_URL", BASE_URL)
    DUMP_PATH_TEMPLATE = DUMP_PATH_TEMPLATE
    STRICT = os.getenv("ETTV_STRICT", str(STRICT)).lower() == "true"
    LEGACY_MAGNET = os.getenv("ETTV_LEGACY_MAGNET", str(LEGACY_MAGNET)).lower() == "true"
    TIMEOUT = _timeout(os.getenv("ETTV_TIMEOUT", TIMEOUT))

    TRACKERS_LIST_URL = os.getenv("TRACKERS_LIST_URL", TRACKERS_LIST_URL)
