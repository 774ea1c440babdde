"""Endpoints por recurso.

Cada clase recibe la función `fetch` del despachador y solo traduce
argumentos a peticiones y respuestas a modelos del dominio.
"""

from make_sdk.adapters.endpoints.blueprints import Blueprints
from make_sdk.adapters.endpoints.connections import Connections
from make_sdk.adapters.endpoints.data_store_records import DataStoreRecords
from make_sdk.adapters.endpoints.data_stores import DataStores
from make_sdk.adapters.endpoints.enums import Enums
from make_sdk.adapters.endpoints.executions import Executions
from make_sdk.adapters.endpoints.folders import Folders
from make_sdk.adapters.endpoints.hooks import Hooks
from make_sdk.adapters.endpoints.incomplete_executions import IncompleteExecutions
from make_sdk.adapters.endpoints.keys import Keys
from make_sdk.adapters.endpoints.organizations import Organizations
from make_sdk.adapters.endpoints.scenarios import Scenarios
from make_sdk.adapters.endpoints.teams import Teams
from make_sdk.adapters.endpoints.users import Users

__all__ = [
    "Blueprints",
    "Connections",
    "DataStoreRecords",
    "DataStores",
    "Enums",
    "Executions",
    "Folders",
    "Hooks",
    "IncompleteExecutions",
    "Keys",
    "Organizations",
    "Scenarios",
    "Teams",
    "Users",
]
