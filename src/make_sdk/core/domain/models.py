"""Modelos del dominio (Pydantic v2).

Describen los recursos que devuelve la API de Make y los cuerpos que
aceptan los endpoints de escritura.

Reglas:
- Los campos de respuesta son opcionales: con `cols` la API devuelve solo
  un subconjunto de columnas y el modelo tiene que validar igual.
- Los campos desconocidos se conservan (`extra="allow"`).
- En Python se usa snake_case; en el cable, camelCase (alias).
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

JSONValue = Any


class MakeModel(BaseModel):
    """Base de los recursos devueltos por la API."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class MakeBody(BaseModel):
    """Base de los cuerpos de petición (POST/PATCH/PUT)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class Pagination(MakeBody):
    """Opciones de paginación (`pg[...]` en la query)."""

    sort_by: str | None = None
    sort_dir: Literal["asc", "desc"] | None = None
    offset: int | None = Field(default=None, ge=0)
    limit: int | None = Field(default=None, ge=1)

    def as_query(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


# --- Users -------------------------------------------------------------------


class User(MakeModel):
    id: int | None = None
    name: str | None = None
    email: str | None = None
    language: str | None = None
    timezone_id: int | None = None
    locale_id: int | None = None
    country_id: int | None = None
    features: dict[str, bool] | None = None
    avatar: str | None = None
    timezone: str | None = None
    locale: str | None = None


# --- Scenarios & blueprints --------------------------------------------------


class Scheduling(MakeModel):
    """Programación de un escenario (`immediately`, `indefinitely`, `daily`, ...)."""

    type: str | None = None
    interval: int | None = Field(
        default=None,
        description="Intervalo en segundos cuando `type` es 'indefinitely' (mínimo 60).",
    )
    date: str | None = None
    days: list[int] | None = None
    months: list[int] | None = None
    time: str | None = None
    between: list[str] | None = None
    restrict: list[dict[str, Any]] | None = None


class Scenario(MakeModel):
    """Escenario de Make: una automatización compuesta por módulos."""

    id: int | None = None
    name: str | None = None
    description: str | None = None
    team_id: int | None = None
    folder_id: int | None = None
    used_packages: list[str] | None = None
    scheduling: Scheduling | None = None
    is_active: bool | None = None
    isinvalid: bool | None = Field(
        default=None,
        description="El escenario se detuvo por un error.",
    )
    is_paused: bool | None = None
    last_edit: str | None = None
    created: str | None = None
    created_by_user: dict[str, Any] | None = None
    updated_by_user: dict[str, Any] | None = None
    dlq_count: int | None = Field(
        default=None,
        description="Número de ejecuciones incompletas pendientes.",
    )
    operations: int | None = None
    transfer: int | None = None
    custom_properties: dict[str, Any] | None = None


class ScenarioInterface(MakeModel):
    input: list[dict[str, Any]] = Field(default_factory=list)
    output: list[dict[str, Any]] = Field(default_factory=list)


class RunScenarioResponse(MakeModel):
    execution_id: str | None = None
    status: int | None = None
    outputs: JSONValue = None


class Blueprint(MakeModel):
    name: str | None = None
    flow: list[dict[str, Any]] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)


class BlueprintVersion(MakeModel):
    version: int | None = None
    created: str | None = None
    scenario_id: int | None = None
    draft: bool | None = None


class CreateScenarioBody(MakeBody):
    """Cuerpo para crear un escenario.

    `blueprint` y `scheduling` aceptan tanto un objeto como su JSON en texto.
    """

    team_id: int
    folder_id: int | None = None
    scheduling: dict[str, Any] | str | None = None
    blueprint: dict[str, Any] | str
    basedon: str | None = None


class UpdateScenarioBody(MakeBody):
    name: str | None = None
    description: str | None = None
    folder_id: int | None = None
    scheduling: dict[str, Any] | str | None = None
    blueprint: dict[str, Any] | str | None = None


# --- Data stores -------------------------------------------------------------


class DataStore(MakeModel):
    """Base de datos simple para compartir información entre escenarios."""

    id: int | None = None
    name: str | None = None
    records: int | None = None
    size: str | None = None
    max_size: str | None = None
    team_id: int | None = None
    datastructure_id: int | None = None


class DataStoreRecord(MakeModel):
    key: str | None = None
    data: dict[str, Any] = Field(default_factory=dict)


class CreateDataStoreBody(MakeBody):
    name: str = Field(..., min_length=1)
    team_id: int
    datastructure_id: int | None = None
    max_size_mb: int = Field(..., gt=0, alias="maxSizeMB")


class UpdateDataStoreBody(MakeBody):
    name: str = Field(..., min_length=1)


# --- Hooks -------------------------------------------------------------------


class Hook(MakeModel):
    """Webhook o mailhook."""

    id: int | None = None
    name: str | None = None
    team_id: int | None = None
    udid: str | None = None
    type: str | None = None
    package_name: str | None = None
    theme: str | None = None
    editable: bool | None = None
    queue_count: int | None = None
    queue_limit: int | None = None
    enabled: bool | None = None
    gone: bool | None = None
    type_name: str | None = None
    data: dict[str, Any] | None = None
    scenario_id: int | None = None
    url: str | None = None


class HookPing(MakeModel):
    address: str | None = None
    attached: bool | None = None
    learning: bool | None = None
    gone: bool | None = None


class CreateHookBody(MakeBody):
    name: str = Field(..., min_length=1)
    team_id: int
    type_name: str
    data: dict[str, Any] | None = None


# --- Connections -------------------------------------------------------------


class Connection(MakeModel):
    id: int | None = None
    name: str | None = None
    account_name: str | None = None
    account_label: str | None = None
    package_name: str | None = None
    expire: str | None = None
    metadata: dict[str, Any] | None = None
    team_id: int | None = None
    theme: str | None = None
    upgradeable: bool | None = None
    scopes_cnt: int | None = None
    scoped: bool | None = None
    account_type: str | None = None
    editable: bool | None = None
    uid: int | None = None
    connected_system_id: str | None = None
    scopes: list[dict[str, Any]] | None = None


class CreateConnectionBody(MakeBody):
    """Cuerpo para crear una conexión.

    `name` es el nombre visible; `account_name` identifica el tipo de cuenta
    de la app (p.ej. 'slack').
    """

    name: str = Field(..., min_length=1)
    account_name: str = Field(..., min_length=1)
    team_id: int
    data: dict[str, Any] | None = None


# --- Teams & folders ---------------------------------------------------------


class Team(MakeModel):
    id: int | None = None
    name: str | None = None
    organization_id: int | None = None
    active_scenarios: int | None = None
    active_apps: int | None = None
    operations: int | None = None
    transfer: int | None = None
    operations_limit: int | None = None
    transfer_limit: str | None = None
    consumed_operations: int | None = None
    consumed_transfer: int | None = None
    is_paused: bool | None = None


class CreateTeamBody(MakeBody):
    name: str = Field(..., min_length=1)
    organization_id: int
    operations_limit: int | None = None
    transfer_limit: int | None = None


class Folder(MakeModel):
    id: int | None = None
    name: str | None = None
    scenarios_total: int | None = None


class CreateFolderBody(MakeBody):
    name: str = Field(..., min_length=1)
    team_id: int


# --- Executions --------------------------------------------------------------


class Execution(MakeModel):
    """Registro (log) de una ejecución de escenario."""

    id: str | None = None
    imt_id: str | None = None
    status: int | None = Field(
        default=None,
        description="0 en curso, 1 éxito, 2 aviso, 3 error.",
    )
    duration: int | None = None
    operations: int | None = None
    transfer: int | None = None
    organization_id: int | None = None
    team_id: int | None = None
    type: str | None = None
    author_id: int | None = None
    instant: bool | None = None


class ExecutionDetail(MakeModel):
    status: str | None = None
    outputs: dict[str, Any] | None = None
    error: dict[str, Any] | None = None


class IncompleteExecution(MakeModel):
    """Ejecución incompleta (DLQ) pendiente de resolver o reintentar."""

    id: str | None = None
    scenario_id: int | None = None
    scenario_name: str | None = None
    company_id: int | None = None
    company_name: str | None = None
    reason: str | None = None
    resolved: bool | None = None
    deleted: bool | None = None
    index: int | None = None
    created: str | None = None
    execution_id: str | None = None
    retry: bool | None = None
    attempts: int | None = None
    size: int | None = None


class IncompleteExecutionUpdate(MakeModel):
    failer: int | None = Field(default=None, description="Índice del módulo que falló.")
    blueprint: Blueprint | None = None


class UpdateIncompleteExecutionBody(MakeBody):
    """`blueprint` acepta un objeto o su JSON en texto; viaja siempre como texto."""

    blueprint: dict[str, Any] | str | None = None
    failer: int | None = None


class RetryIncompleteExecutionsBody(MakeBody):
    ids: list[str] | None = None
    all: bool | None = None
    except_ids: list[str] | None = None


# --- Organizations -----------------------------------------------------------


class Organization(MakeModel):
    id: int | None = None
    name: str | None = None
    timezone_id: int | None = None
    zone: str | None = None
    country_id: int | None = None
    license: dict[str, Any] | None = None
    service_name: str | None = None
    teams: list[dict[str, Any]] | None = None
    is_paused: bool | None = None
    product_name: str | None = None
    external_id: str | None = None
    active_apps: int | None = None
    active_scenarios: int | None = None


class CreateOrganizationBody(MakeBody):
    name: str = Field(..., min_length=1)
    region_id: int
    timezone_id: int
    country_id: int


class UpdateOrganizationBody(MakeBody):
    name: str | None = None
    timezone_id: int | None = None
    country_id: int | None = None


# --- Keys ----------------------------------------------------------------------


class Key(MakeModel):
    id: int | None = None
    name: str | None = None
    type_name: str | None = None
    team_id: int | None = None
    package_name: str | None = None
    theme: str | None = None


class KeyType(MakeModel):
    name: str | None = None
    label: str | None = None
    type: str | None = None
    parameters: list[dict[str, Any]] = Field(default_factory=list)
    author: str | None = None
    version: str | None = None
    theme: str | None = None
    icon: str | None = None


class CreateKeyBody(MakeBody):
    name: str = Field(..., min_length=1)
    team_id: int
    type_name: str
    parameters: dict[str, Any] = Field(default_factory=dict)


class UpdateKeyBody(MakeBody):
    name: str | None = None
    parameters: dict[str, Any] | None = None


# --- Enums -------------------------------------------------------------------


class Country(MakeModel):
    id: int | None = None
    name: str | None = None
    code: str | None = None
    code2: str | None = None


class Region(MakeModel):
    id: int | None = None
    name: str | None = None


class Timezone(MakeModel):
    id: int | None = None
    name: str | None = None
    code: str | None = None
    offset: str | None = None
