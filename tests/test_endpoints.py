from __future__ import annotations

import json

import pytest

from make_sdk import Make, MakeError
from make_sdk.adapters.endpoints.scenarios import normalize_payload
from make_sdk.core.domain.models import (
    CreateConnectionBody,
    CreateDataStoreBody,
    CreateFolderBody,
    CreateHookBody,
    CreateKeyBody,
    CreateOrganizationBody,
    CreateScenarioBody,
    CreateTeamBody,
    Pagination,
    RetryIncompleteExecutionsBody,
    UpdateDataStoreBody,
    UpdateIncompleteExecutionBody,
    UpdateOrganizationBody,
    UpdateScenarioBody,
)

from .conftest import MockApi

DATA_STORE = {
    "id": 7,
    "name": "Customers",
    "records": 2,
    "size": "1 KB",
    "maxSize": "1 MB",
    "teamId": 1,
    "datastructureId": None,
}


# --- Data stores -------------------------------------------------------------


async def test_list_data_stores_encodes_cols_and_pagination(make: Make, api: MockApi) -> None:
    api.add(
        "/data-stores?teamId=1&cols%5B%5D=id&cols%5B%5D=name&pg%5BsortBy%5D=name&pg%5Blimit%5D=10",
        {"dataStores": [{"id": 7, "name": "Customers"}], "pg": {}},
    )

    stores = await make.data_stores.list(1, cols=["id", "name"], pg=Pagination(sort_by="name", limit=10))

    assert [(s.id, s.name) for s in stores] == [(7, "Customers")]
    assert stores[0].records is None


async def test_create_data_store(make: Make, api: MockApi) -> None:
    api.add("POST /data-stores", {"dataStore": DATA_STORE})

    store = await make.data_stores.create(CreateDataStoreBody(name="Customers", team_id=1, max_size_mb=1))

    assert store.max_size == "1 MB"
    assert api.last_json() == {"name": "Customers", "teamId": 1, "maxSizeMB": 1}


async def test_update_and_delete_data_store(make: Make, api: MockApi) -> None:
    api.add("PATCH /data-stores/7", {"dataStore": {**DATA_STORE, "name": "Clients"}})
    api.add("DELETE /data-stores/7?confirmed=true", {"dataStores": [7]})

    store = await make.data_stores.update(7, UpdateDataStoreBody(name="Clients"))
    await make.data_stores.delete(7)

    assert store.name == "Clients"
    assert api.requests[-1].method == "DELETE"


async def test_missing_data_store_raises_not_found(make: Make, api: MockApi) -> None:
    api.add("/data-stores/404", {"message": "Data store not found"}, 404)

    with pytest.raises(MakeError) as exc_info:
        await make.data_stores.get(404)
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Data store not found"


async def test_record_operations(make: Make, api: MockApi) -> None:
    api.add("/data-stores/7/data?pg%5Blimit%5D=5", {"records": [{"key": "a", "data": {"x": 1}}], "pg": {}})
    api.add("POST /data-stores/7/data", {"key": "generated", "data": {"x": 2}})
    api.add("PUT /data-stores/7/data/a", {"key": "a", "data": {"x": 3}})

    records = await make.data_stores.records.list(7, pg={"limit": 5})
    created = await make.data_stores.records.create(7, {"x": 2})
    assert api.last_json() == {"data": {"x": 2}}

    await make.data_stores.records.create(7, {"x": 2}, key="custom")
    assert api.last_json() == {"key": "custom", "data": {"x": 2}}

    replaced = await make.data_stores.records.replace(7, "a", {"x": 3})

    assert records[0].data == {"x": 1}
    assert created.key == "generated"
    assert replaced.data == {"x": 3}


async def test_record_deletion_bodies(make: Make, api: MockApi) -> None:
    api.add("DELETE /data-stores/7/data?confirmed=true", {"keys": []})

    await make.data_stores.records.delete(7, ["a", "b"])
    assert api.last_json() == {"keys": ["a", "b"]}

    await make.data_stores.records.delete_all(7)
    assert api.last_json() == {"all": True}

    await make.data_stores.records.delete_all(7, except_keys=["keep"])
    assert api.last_json() == {"all": True, "exceptKeys": ["keep"]}


# --- Scenarios ---------------------------------------------------------------


def test_normalize_payload_lifts_scheduling_and_interface() -> None:
    blueprint = {
        "name": "Demo",
        "flow": [],
        "scheduling": {"type": "indefinitely", "interval": 900},
        "interface": {"input": [{"name": "a", "type": "text"}]},
    }
    payload = normalize_payload(CreateScenarioBody(team_id=1, blueprint=json.dumps(blueprint)))

    assert payload["teamId"] == 1
    assert json.loads(payload["scheduling"]) == {"type": "indefinitely", "interval": 900}
    assert json.loads(payload["blueprint"]) == {"name": "Demo", "flow": []}
    assert payload["metadata"] == {"input_spec": [{"name": "a", "type": "text"}], "output_spec": []}


def test_normalize_payload_reads_io_block() -> None:
    blueprint = {"flow": [], "io": {"input_spec": [], "output_spec": [{"name": "out"}]}}
    payload = normalize_payload(UpdateScenarioBody(name="Renamed", blueprint=blueprint))

    assert payload["name"] == "Renamed"
    assert "scheduling" not in payload
    assert json.loads(payload["blueprint"]) == {"flow": []}
    assert payload["metadata"]["output_spec"] == [{"name": "out"}]


async def test_create_scenario(make: Make, api: MockApi) -> None:
    api.add("POST /scenarios?confirmed=true", {"scenario": {"id": 10, "teamId": 1, "isActive": False}})

    scenario = await make.scenarios.create(
        {"teamId": 1, "scheduling": {"type": "on-demand"}, "blueprint": {"name": "Demo", "flow": []}},
        confirmed=True,
    )

    assert scenario.id == 10
    body = api.last_json()
    assert body["teamId"] == 1
    assert json.loads(body["scheduling"]) == {"type": "on-demand"}
    assert json.loads(body["blueprint"]) == {"name": "Demo", "flow": []}


async def test_list_scenarios_in_organization(make: Make, api: MockApi) -> None:
    api.add(
        "/scenarios?organizationId=3&pg%5Boffset%5D=20",
        {"scenarios": [{"id": 1, "scheduling": {"type": "immediately"}}], "pg": {}},
    )

    scenarios = await make.scenarios.list_in_organization(3, pg=Pagination(offset=20))

    assert scenarios[0].scheduling is not None
    assert scenarios[0].scheduling.type == "immediately"


async def test_activate_and_deactivate(make: Make, api: MockApi) -> None:
    api.add("POST /scenarios/10/start", {"scenario": {"id": 10, "isActive": True}})
    api.add("POST /scenarios/10/stop", {"scenario": {"id": 10, "isActive": False}})

    assert await make.scenarios.activate(10) is True
    assert await make.scenarios.deactivate(10) is True


async def test_run_scenario(make: Make, api: MockApi) -> None:
    api.add("POST /scenarios/10/run", {"executionId": "abc", "status": 1, "outputs": {"ok": True}})

    result = await make.scenarios.run(10, {"name": "x"})

    assert result.execution_id == "abc"
    assert result.outputs == {"ok": True}
    assert api.last_json() == {"data": {"name": "x"}, "responsive": True}


async def test_get_interface_defaults_missing_lists(make: Make, api: MockApi) -> None:
    api.add("/scenarios/10/interface", {"interface": {"input": [{"name": "a"}]}})

    interface = await make.scenarios.get_interface(10)

    assert interface.input == [{"name": "a"}]
    assert interface.output == []


async def test_blueprint_get_and_versions(make: Make, api: MockApi) -> None:
    api.add("/scenarios/10/blueprint", {"code": "OK", "response": {"blueprint": {"name": "Demo", "flow": []}}})
    api.add("/scenarios/10/blueprints", {"scenariosBlueprints": [{"version": 2, "scenarioId": 10, "draft": False}]})

    blueprint = await make.blueprints.get(10)
    versions = await make.blueprints.versions(10)

    assert blueprint.name == "Demo"
    assert versions[0].scenario_id == 10


# --- Hooks & connections -----------------------------------------------------


async def test_create_hook_flattens_data(make: Make, api: MockApi) -> None:
    api.add("POST /hooks", {"hook": {"id": 3, "name": "Inbox", "typeName": "gateway-webhook"}})

    hook = await make.hooks.create(
        CreateHookBody(name="Inbox", team_id=1, type_name="gateway-webhook", data={"headers": False})
    )

    assert hook.type_name == "gateway-webhook"
    assert api.last_json() == {"headers": False, "name": "Inbox", "teamId": 1, "typeName": "gateway-webhook"}


async def test_list_hooks_skips_unset_filters(make: Make, api: MockApi) -> None:
    api.add("/hooks?teamId=1&assigned=false", {"hooks": []})
    assert await make.hooks.list(1, assigned=False) == []


async def test_hook_lifecycle(make: Make, api: MockApi) -> None:
    api.add("POST /hooks/3/set-data", {"changed": True})
    api.add("/hooks/3/ping", {"address": "https://hook.make.local/x", "attached": True, "learning": False, "gone": False})
    api.add("POST /hooks/3/learn-start", {})
    api.add("DELETE /hooks/3?confirmed=true", {"hook": 3})

    assert await make.hooks.update(3, {"headers": True}) is True
    ping = await make.hooks.ping(3)
    await make.hooks.learn_start(3)
    await make.hooks.delete(3)

    assert ping.attached is True


async def test_create_connection(make: Make, api: MockApi) -> None:
    api.add("POST /connections?teamId=1", {"connection": {"id": 9, "accountName": "slack"}})

    connection = await make.connections.create(
        CreateConnectionBody(name="My Slack", account_name="slack", team_id=1, data={"apiKey": "x", "teamId": 5})
    )

    assert connection.account_name == "slack"
    assert api.last_json() == {"apiKey": "x", "accountName": "My Slack", "accountType": "slack"}


async def test_connection_checks(make: Make, api: MockApi) -> None:
    api.add("/connections?teamId=1&type%5B%5D=slack", {"connections": [{"id": 9}]})
    api.add("POST /connections/9/test", {"verified": True})
    api.add("POST /connections/9/scoped", {"connection": {"scoped": True}})
    api.add("/connections/9/editable-data-schema", {"editableParameters": ["apiKey"]})

    assert [c.id for c in await make.connections.list(1, type=["slack"])] == [9]
    assert await make.connections.verify(9) is True
    assert await make.connections.scoped(9, ["chat:write"]) is True
    assert api.last_json() == {"scope": ["chat:write"]}
    assert await make.connections.list_editable_parameters(9) == ["apiKey"]


# --- Teams, folders, executions, keys, enums ---------------------------------


async def test_teams(make: Make, api: MockApi) -> None:
    api.add("/teams?organizationId=3&cols%5B%5D=id", {"teams": [{"id": 1}], "pg": {}})
    api.add("POST /teams", {"team": {"id": 2, "name": "Ops", "organizationId": 3}})

    teams = await make.teams.list(3, cols=["id"])
    team = await make.teams.create(CreateTeamBody(name="Ops", organization_id=3))

    assert teams[0].id == 1
    assert team.organization_id == 3
    assert api.last_json() == {"name": "Ops", "organizationId": 3}


async def test_folders(make: Make, api: MockApi) -> None:
    api.add("POST /scenarios-folders", {"scenarioFolder": {"id": 4, "name": "Sales"}})
    api.add("PATCH /scenarios-folders/4", {"scenarioFolder": {"id": 4, "name": "Marketing"}})

    await make.folders.create(CreateFolderBody(name="Sales", team_id=1))
    folder = await make.folders.update(4, name="Marketing")

    assert folder.name == "Marketing"
    assert api.last_json() == {"name": "Marketing"}


async def test_execution_detail(make: Make, api: MockApi) -> None:
    api.add("/scenarios/10/executions/abc", {"status": "SUCCESS", "outputs": {"x": 1}})
    api.add("/dlqs/q1/logs/abc", {"scenarioLogs": {"id": "abc", "imtId": "i1", "status": 3}})

    detail = await make.executions.get_detail(10, "abc")
    log = await make.executions.get_for_incomplete_execution("q1", "abc")

    assert detail.status == "SUCCESS"
    assert log.imt_id == "i1"


async def test_keys(make: Make, api: MockApi) -> None:
    api.add("POST /keys", {"key": {"id": 1, "name": "AES", "typeName": "aes-key"}})
    api.add("/keys/types", {"keysTypes": [{"name": "aes-key", "label": "AES", "parameters": []}]})

    key = await make.keys.create(CreateKeyBody(name="AES", team_id=1, type_name="aes-key", parameters={"key": "k"}))
    types = await make.keys.types()

    assert key.type_name == "aes-key"
    assert types[0].label == "AES"


async def test_enums(make: Make, api: MockApi) -> None:
    api.add("/enums/countries", {"countries": [{"id": 1, "name": "Czechia", "code": "CZE", "code2": "CZ"}]})
    api.add("/enums/imt-regions", {"imtRegions": [{"id": 1, "name": "EU"}]})

    countries = await make.enums.countries()
    regions = await make.enums.regions()

    assert countries[0].code2 == "CZ"
    assert regions[0].name == "EU"


# --- Organizations & incomplete executions -----------------------------------


async def test_organizations(make: Make, api: MockApi) -> None:
    api.add(
        "/organizations?cols%5B%5D=id&cols%5B%5D=zone",
        {"organizations": [{"id": 3, "zone": "eu1.make.com"}], "pg": {}},
    )
    api.add("/organizations/3?wait=true", {"organization": {"id": 3, "name": "Acme", "timezoneId": 113}})
    api.add("POST /organizations", {"organization": {"id": 4, "name": "New"}})
    api.add("PATCH /organizations/4", {"organization": {"id": 4, "name": "Renamed"}})
    api.add("DELETE /organizations/4?confirmed=true", {"organization": 4})

    organizations = await make.organizations.list(cols=["id", "zone"])
    organization = await make.organizations.get(3, wait=True)
    await make.organizations.create(CreateOrganizationBody(name="New", region_id=1, timezone_id=113, country_id=1))
    assert api.last_json() == {"name": "New", "regionId": 1, "timezoneId": 113, "countryId": 1}
    renamed = await make.organizations.update(4, UpdateOrganizationBody(name="Renamed"))
    assert api.last_json() == {"name": "Renamed"}
    await make.organizations.delete(4)

    assert organizations[0].zone == "eu1.make.com"
    assert organization.timezone_id == 113
    assert renamed.name == "Renamed"


async def test_list_and_get_incomplete_executions(make: Make, api: MockApi) -> None:
    api.add("/dlqs?scenarioId=10", {"dlqs": [{"id": "d1", "scenarioId": 10, "resolved": False, "attempts": 2}]})
    api.add("/dlqs/d1", {"dlq": {"id": "d1", "reason": "Timeout"}})
    api.add("/dlqs/d1/bundle", {"code": "OK", "response": {"1": {"x": 1}}})

    dlqs = await make.incomplete_executions.list(10)
    dlq = await make.incomplete_executions.get("d1")
    bundle = await make.incomplete_executions.bundle("d1")

    assert dlqs[0].scenario_id == 10
    assert dlqs[0].attempts == 2
    assert dlq.reason == "Timeout"
    assert bundle == {"1": {"x": 1}}


async def test_update_incomplete_execution_sends_blueprint_as_text(make: Make, api: MockApi) -> None:
    api.add("PATCH /dlqs/d1", {"dlq": {"failer": 2, "blueprint": {"name": "Demo", "flow": []}}})

    updated = await make.incomplete_executions.update(
        "d1", UpdateIncompleteExecutionBody(blueprint={"name": "Demo", "flow": []}, failer=2)
    )

    body = api.last_json()
    assert json.loads(body["blueprint"]) == {"name": "Demo", "flow": []}
    assert body["failer"] == 2
    assert updated.failer == 2
    assert updated.blueprint is not None
    assert updated.blueprint.name == "Demo"


async def test_retry_incomplete_executions(make: Make, api: MockApi) -> None:
    api.add("POST /dlqs/d1/retry", {"dlq": "d1"})
    api.add("POST /dlqs/retry?scenarioId=10", {"dlq": "ok"})

    await make.incomplete_executions.retry("d1")
    await make.incomplete_executions.retry_multiple(10, RetryIncompleteExecutionsBody(all=True, except_ids=["d2"]))

    assert api.last_json() == {"all": True, "exceptIds": ["d2"]}
