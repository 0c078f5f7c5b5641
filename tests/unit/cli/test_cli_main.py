"""Tests for the command line interface."""

import json
import logging
from types import SimpleNamespace
from unittest.mock import Mock

import pytest

from azurerm_plugin.cli.main import execute_command, load_document, main, parse_args
from azurerm_plugin.config import AppConfig
from azurerm_plugin.config.manager import CONFIG_FILE_ENV_VAR
from azurerm_plugin.domain.core.exceptions import InvalidResourceIdError, ValidationError
from azurerm_plugin.infrastructure.exceptions import UnsupportedResourceTypeError
from azurerm_plugin.providers.azure.registration import create_registry

GROUP_ID = "/subscriptions/00000000-0000-0000-0000-000000000000/resourceGroups/example-rg"
SECRET_ID = GROUP_ID + "/providers/Microsoft.ServiceFabricMesh/secrets/example-secret"
SECRET_VALUE_ID = SECRET_ID + "/values/v1"


def remote_group(location="westeurope"):
    return SimpleNamespace(id=GROUP_ID, name="example-rg", location=location, tags={}, managed_by=None)


@pytest.fixture(autouse=True)
def no_config_file_env(monkeypatch):
    monkeypatch.delenv(CONFIG_FILE_ENV_VAR, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.unit
class TestParseArgs:

    def test_resource_action(self):
        args = parse_args(["--format", "yaml", "resources", "read", "azurerm_resource_group", "--id", GROUP_ID])
        assert (args.kind, args.action, args.type_name, args.id, args.format) == (
            "resources", "read", "azurerm_resource_group", GROUP_ID, "yaml",
        )

    def test_data_source_action(self):
        args = parse_args(["data-sources", "read", "azurerm_servicebus_namespace_authorization_rule", "--file", "-"])
        assert args.file == "-"

    def test_create_requires_file(self):
        with pytest.raises(SystemExit):
            parse_args(["resources", "create", "azurerm_resource_group"])


@pytest.mark.unit
class TestLoadDocument:

    def test_yaml(self, tmp_path):
        path = tmp_path / "rg.yaml"
        path.write_text("name: example-rg\nlocation: westeurope\n")
        assert load_document(str(path)) == {"name": "example-rg", "location": "westeurope"}

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "rg.json"
        path.write_text("{not json")
        with pytest.raises(ValidationError, match="Cannot parse"):
            load_document(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(ValidationError, match="Cannot read"):
            load_document(str(tmp_path / "missing.json"))


@pytest.mark.unit
class TestExecuteCommand:

    def setup_method(self):
        self.registry = create_registry()
        self.app_config = AppConfig()
        self.client = Mock()
        self.client.subscription_id = "00000000-0000-0000-0000-000000000000"
        self.client_factory = Mock(return_value=self.client)
        self.groups = self.client.resources.resource_groups

    def run(self, *argv):
        return execute_command(parse_args(list(argv)), self.app_config, self.registry, self.client_factory)

    def write_config(self, tmp_path, **config):
        path = tmp_path / "rg.json"
        path.write_text(json.dumps(config))
        return str(path)

    def test_list(self):
        result = self.run("resources", "list")

        assert [r["type"] for r in result["registrations"]] == [
            "azurerm_resource_group", "azurerm_service_fabric_mesh_secret_value",
        ]
        self.client_factory.assert_not_called()

    def test_schema(self):
        result = self.run("data-sources", "schema", "azurerm_servicebus_namespace_authorization_rule")
        assert "primary_key" in result["schema"]["properties"]

    def test_unknown_type_does_not_build_client(self):
        with pytest.raises(UnsupportedResourceTypeError):
            self.run("resources", "delete", "azurerm_unknown", "--id", GROUP_ID)
        self.client_factory.assert_not_called()

    def test_create(self, tmp_path, not_found):
        self.groups.get.side_effect = [not_found(), remote_group()]
        path = self.write_config(tmp_path, name="example-rg", location="westeurope")

        result = self.run("resources", "create", "azurerm_resource_group", "--file", path)

        assert result["id"] == GROUP_ID
        assert result["location"] == "westeurope"

    def test_read_with_invalid_id(self):
        with pytest.raises(InvalidResourceIdError):
            self.run("resources", "read", "azurerm_resource_group", "--id", "example-rg")

    def test_read_gone_resource(self, not_found):
        self.groups.get.side_effect = not_found()

        result = self.run("resources", "read", "azurerm_resource_group", "--id", GROUP_ID)

        assert result["id"] == ""

    def test_update_in_place(self, tmp_path):
        self.groups.get.return_value = remote_group()
        path = self.write_config(tmp_path, name="example-rg", location="westeurope", tags={"env": "prod"})

        result = self.run("resources", "update", "azurerm_resource_group", "--id", GROUP_ID, "--file", path)

        assert result["id"] == GROUP_ID
        self.groups.update.assert_called_once()

    def test_update_requiring_replacement(self, tmp_path):
        self.groups.get.return_value = remote_group(location="northeurope")
        path = self.write_config(tmp_path, name="example-rg", location="westeurope")

        with pytest.raises(ValidationError, match="requires replacing"):
            self.run("resources", "update", "azurerm_resource_group", "--id", GROUP_ID, "--file", path)

        self.groups.update.assert_not_called()

    def test_update_detects_value_change_from_stored_state(self, tmp_path):
        secrets = self.client.servicefabricmesh.secret
        values = self.client.servicefabricmesh.secret_value
        secrets.get.return_value = SimpleNamespace(id=SECRET_ID)
        values.get.return_value = SimpleNamespace(id=SECRET_VALUE_ID, location="westeurope", tags={})
        state = tmp_path / "state.json"
        state.write_text(json.dumps({"id": SECRET_VALUE_ID, "value": "s3cret"}))
        path = self.write_config(
            tmp_path, name="v1", service_fabric_mesh_secret_id=SECRET_ID, location="westeurope", value="NEW-VALUE",
        )

        with pytest.raises(ValidationError, match="value requires replacing"):
            self.run(
                "resources", "update", "azurerm_service_fabric_mesh_secret_value",
                "--id", SECRET_VALUE_ID, "--file", path, "--state", str(state),
            )

        values.create.assert_not_called()

    def test_update_with_unchanged_stored_value(self, tmp_path):
        secrets = self.client.servicefabricmesh.secret
        values = self.client.servicefabricmesh.secret_value
        secrets.get.return_value = SimpleNamespace(id=SECRET_ID)
        values.get.return_value = SimpleNamespace(id=SECRET_VALUE_ID, location="westeurope", tags={})
        state = tmp_path / "state.json"
        state.write_text(json.dumps({"id": SECRET_VALUE_ID, "value": "s3cret"}))
        path = self.write_config(
            tmp_path, name="v1", service_fabric_mesh_secret_id=SECRET_ID, location="westeurope", value="s3cret",
            tags={"env": "prod"},
        )

        result = self.run(
            "resources", "update", "azurerm_service_fabric_mesh_secret_value",
            "--id", SECRET_VALUE_ID, "--file", path, "--state", str(state),
        )

        assert result["id"] == SECRET_VALUE_ID
        values.create.assert_called_once()

    def test_delete(self):
        self.groups.begin_delete.return_value.done.return_value = True

        result = self.run("resources", "delete", "azurerm_resource_group", "--id", GROUP_ID)

        assert result == {"id": GROUP_ID, "deleted": True}

    def test_import(self):
        self.groups.get.return_value = remote_group()

        result = self.run("resources", "import", "azurerm_resource_group", "--id", GROUP_ID)

        assert result["name"] == "example-rg"


@pytest.mark.unit
class TestMain:

    def setup_method(self):
        self.client = Mock()
        self.client.subscription_id = "00000000-0000-0000-0000-000000000000"
        namespaces = self.client.servicebus.namespaces
        namespaces.get_authorization_rule.return_value = SimpleNamespace(rights=["Listen"])
        namespaces.list_keys.return_value = SimpleNamespace(
            primary_key="pk-secret",
            secondary_key="sk-secret",
            primary_connection_string="primary-connection",
            secondary_connection_string="secondary-connection",
            alias_primary_connection_string=None,
            alias_secondary_connection_string=None,
        )

    def rule_file(self, tmp_path):
        path = tmp_path / "rule.yaml"
        path.write_text(
            "name: example-rule\nnamespace_name: example-namespace\nresource_group_name: example-rg\n"
        )
        return str(path)

    def test_list(self, capsys):
        assert main(["resources", "list"]) == 0
        output = json.loads(capsys.readouterr().out)
        assert len(output["registrations"]) == 2

    def test_no_action(self, capsys):
        assert main(["resources"]) == 2

    def test_json_output_keeps_secrets(self, tmp_path, capsys):
        code = main(
            ["data-sources", "read", "azurerm_servicebus_namespace_authorization_rule", "--file", self.rule_file(tmp_path)],
            client_factory=lambda config: self.client,
        )

        assert code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["primary_key"] == "pk-secret"
        assert output["listen"] is True

    def test_table_output_masks_secrets(self, tmp_path, capsys):
        code = main(
            ["--format", "table", "data-sources", "read", "azurerm_servicebus_namespace_authorization_rule",
             "--file", self.rule_file(tmp_path)],
            client_factory=lambda config: self.client,
        )

        assert code == 0
        out = capsys.readouterr().out
        assert "pk-secret" not in out
        assert "(sensitive value)" in out

    def test_output_file(self, tmp_path):
        output = tmp_path / "out.json"
        assert main(["--output", str(output), "resources", "list"]) == 0
        assert "azurerm_resource_group" in output.read_text()

    def test_error_exit_code(self, tmp_path, capsys):
        code = main(
            ["data-sources", "read", "azurerm_unknown", "--file", self.rule_file(tmp_path)],
            client_factory=lambda config: self.client,
        )

        assert code == 1
        assert "Error:" in capsys.readouterr().err

    def test_missing_config_file(self, tmp_path, capsys):
        assert main(["--config", str(tmp_path / "missing.yaml"), "resources", "list"]) == 1
        assert "Configuration file not found" in capsys.readouterr().err
