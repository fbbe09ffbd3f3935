"""End-to-end tests driving the design-catalog command line."""
import json

import pytest
import yaml

from design_catalog.catalog.registration import CATALOG
from design_catalog.cli.main import EXIT_CONFIG_ERROR, EXIT_FAILURE, EXIT_OK, main
from design_catalog.domain.base.catalog import Category
from design_catalog.domain.core.exceptions import ValidationError

pytestmark = pytest.mark.e2e


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setenv("DESIGN_CATALOG_LOG_DESTINATION", "none")


@pytest.fixture(autouse=True)
def fresh_registry(example_registry):
    return example_registry


class TestCLIListing:
    """Test the list and show commands."""

    def test_list_table(self, capsys):
        assert main(["list"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "oop.encapsulation" in out
        assert "structural.proxy" in out

    def test_list_category_as_json(self, capsys):
        assert main(["--format", "json", "list", "--category", "structural"]) == EXIT_OK
        entries = json.loads(capsys.readouterr().out)
        assert len(entries) == 6
        assert all(entry["category"] == "structural" for entry in entries)

    def test_show_as_yaml(self, capsys):
        assert main(["--format", "yaml", "show", "structural.proxy"]) == EXIT_OK
        entry = yaml.safe_load(capsys.readouterr().out)
        assert entry["key"] == "structural.proxy"
        assert entry["title"] == "Proxy"

    def test_show_unknown_key(self, capsys):
        assert main(["show", "oop.missing"]) == EXIT_FAILURE
        assert "Error: Example 'oop.missing' is not registered" in capsys.readouterr().out

    def test_format_from_configuration(self, tmp_path, capsys):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("output:\n  format: list\n")

        assert main(["--config", str(config_file), "show", "oop.abstraction"]) == EXIT_OK
        assert capsys.readouterr().out.startswith("Key: oop.abstraction")


class TestCLIRun:
    """Test the run command."""

    def test_run_single_example(self, capsys):
        assert main(["run", "structural.decorator"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "[structural.decorator] Decorator" in out
        assert "My Special Coffee -> Cost: $7, Description: Simple Coffee, with Milk, with Sugar" in out

    def test_run_several_examples_in_order(self, capsys):
        assert main(["run", "oop.polymorphism", "solid.isp.bad"]) == EXIT_OK
        out = capsys.readouterr().out
        assert out.index("Drawing a circle") < out.index("Error: Scan functionality is not supported.")

    def test_run_without_keys(self, capsys):
        assert main(["run"]) == EXIT_FAILURE
        assert "Specify one or more example keys" in capsys.readouterr().out

    def test_run_unknown_key_runs_nothing(self, capsys):
        assert main(["run", "oop.polymorphism", "oop.missing"]) == EXIT_FAILURE
        out = capsys.readouterr().out
        assert "Drawing a circle" not in out
        assert "Error: Example 'oop.missing' is not registered" in out

    def test_failed_demonstration_sets_exit_code(self, fresh_registry, capsys):
        def broken(output=None):
            raise ValidationError("broken demonstration")

        fresh_registry.register("oop.broken", broken, category=Category.OOP)

        assert main(["run", "oop.broken"]) == EXIT_FAILURE
        assert "Error: broken demonstration" in capsys.readouterr().out

    def test_run_all_category_captured(self, tmp_path, capsys):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"catalog": {"separator_width": 0}}))

        code = main(["--config", str(config_file), "--format", "json",
                     "run", "--all", "--category", "oop", "--capture"])

        assert code == EXIT_OK
        result = json.loads(capsys.readouterr().out)
        assert result["executed"] == [entry[0] for entry in CATALOG if entry[2] is Category.OOP]
        assert result["failed"] == []
        assert "[oop.polymorphism] Polymorphism" in result["output"]

    def test_run_all_respects_enabled_categories(self, monkeypatch, capsys):
        monkeypatch.setenv("DESIGN_CATALOG_CATEGORIES", "structural")

        assert main(["--format", "json", "run", "--all", "--capture"]) == EXIT_OK
        result = json.loads(capsys.readouterr().out)
        assert [key.split(".")[0] for key in result["executed"]] == ["structural"] * 6


class TestCLIErrors:
    """Test argument and configuration errors."""

    def test_no_command(self, capsys):
        assert main([]) == EXIT_FAILURE
        assert "No command specified" in capsys.readouterr().out

    def test_missing_config_file(self, tmp_path, capsys):
        assert main(["--config", str(tmp_path / "missing.yaml"), "list"]) == EXIT_CONFIG_ERROR
        assert "Configuration error" in capsys.readouterr().err

    def test_invalid_config_value(self, tmp_path, capsys):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"catalog": {"categories": ["behavioral"]}}))

        assert main(["--config", str(config_file), "list"]) == EXIT_CONFIG_ERROR

    def test_undecodable_config_file(self, tmp_path, capsys):
        config_file = tmp_path / "config.json"
        config_file.write_bytes(b'{"logging": {"level": "\xff\xfe"}}')

        assert main(["--config", str(config_file), "list"]) == EXIT_CONFIG_ERROR
        assert "Cannot read configuration file" in capsys.readouterr().err

    def test_config_path_is_directory(self, tmp_path, capsys):
        assert main(["--config", str(tmp_path), "list"]) == EXIT_CONFIG_ERROR
        assert "Configuration error" in capsys.readouterr().err

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "1.0.0" in capsys.readouterr().out

    def test_unknown_category_rejected_by_parser(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["list", "--category", "behavioral"])
        assert exc_info.value.code == 2
