from cobj_core.config import AppConfig, load_app_config
from cobj_core.hubspot import (
    CustomObjectClient,
    CustomObjectRecord,
    HubSpotClient,
    RecordProperties,
    RemoteError,
)

__version__ = "0.1.0"

__all__ = [
    "AppConfig",
    "CustomObjectClient",
    "CustomObjectRecord",
    "HubSpotClient",
    "RecordProperties",
    "RemoteError",
    "__version__",
    "load_app_config",
]
