"""Tests for the CLI module."""

import json

import pytest
from click.testing import CliRunner

from recipe_scaler import __version__
from recipe_scaler.cli import cli


@pytest.fixture
def runner():
    """Create a CLI runner for testing."""
    return CliRunner()


@pytest.fixture
def recipe_file(tmp_path, pancake_recipe_dict):
    """A recipe JSON file on disk."""
    path = tmp_path / "pancakes.json"
    path.write_text(json.dumps(pancake_recipe_dict), encoding="utf-8")
    return path


# ============================================================================
# Main CLI Tests
# ============================================================================


class TestMainCli:
    """Tests for the main CLI group."""

    def test_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Scale recipe ingredients" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ============================================================================
# Scale Command Tests
# ============================================================================


class TestScaleCommand:
    """Tests for the scale command."""

    def test_scale_by_servings(self, runner, recipe_file):
        result = runner.invoke(cli, ["scale", str(recipe_file), "--servings", "8"])

        assert result.exit_code == 0
        assert "RECIPE: Pancakes" in result.output
        assert "Doubled (4 → 8 servings)" in result.output
        assert "3 cups flour  (was 1 1/2 cups)" in result.output
        assert "to taste salt  [not scaled]" in result.output
        assert "Prep time: 26 minutes" in result.output
        assert "Times adjusted to 130%" in result.output

    def test_scale_by_multiplier(self, runner, recipe_file):
        result = runner.invoke(cli, ["scale", str(recipe_file), "--scale", "0.5"])

        assert result.exit_code == 0
        assert "Halved (4 → 2 servings)" in result.output
        assert "1/4 cup butter (melted)" in result.output

    def test_large_scale_shows_tips(self, runner, recipe_file):
        result = runner.invoke(cli, ["scale", str(recipe_file), "-S", "12"])

        assert result.exit_code == 0
        assert "Scaling tips:" in result.output
        assert "Use larger cookware" in result.output

    def test_shopping_list(self, runner, recipe_file):
        result = runner.invoke(cli, ["scale", str(recipe_file), "-S", "8", "--shopping-list"])

        assert result.exit_code == 0
        assert "[Baking] 3 cups flour" in result.output
        assert "[Other] to taste salt" in result.output

    def test_json_output(self, runner, recipe_file):
        result = runner.invoke(
            cli, ["scale", str(recipe_file), "-S", "8", "--json", "--shopping-list"]
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["scaling_factor"] == 2.0
        assert data["cook_time"] == "39 minutes"
        assert data["ingredients"][3]["was_scaled"] is False
        assert data["shopping_list"][0]["notes"] == "For Pancakes (8 servings)"

    def test_reads_stdin(self, runner, pancake_recipe_dict):
        result = runner.invoke(
            cli, ["scale", "-", "-S", "2", "--json"], input=json.dumps(pancake_recipe_dict)
        )

        assert result.exit_code == 0
        assert json.loads(result.output)["ingredients"][0]["quantity"] == "3/4 cups"

    def test_invalid_servings(self, runner, recipe_file):
        result = runner.invoke(cli, ["scale", str(recipe_file), "--servings=-2"])

        assert result.exit_code == 1
        assert "Target servings must be a positive number" in result.output
        assert "RECIPE:" not in result.output

    def test_requires_servings_or_scale(self, runner, recipe_file):
        result = runner.invoke(cli, ["scale", str(recipe_file)])

        assert result.exit_code == 1
        assert "Provide --servings or --scale" in result.output

    def test_rejects_both_servings_and_scale(self, runner, recipe_file):
        result = runner.invoke(cli, ["scale", str(recipe_file), "-S", "8", "-s", "2"])

        assert result.exit_code == 1
        assert "not both" in result.output

    def test_invalid_json(self, runner, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        result = runner.invoke(cli, ["scale", str(path), "-S", "2"])

        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_json_must_be_object(self, runner, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[]", encoding="utf-8")

        result = runner.invoke(cli, ["scale", str(path), "-S", "2"])

        assert result.exit_code == 1
        assert "JSON object" in result.output


# ============================================================================
# Bulk Command Tests
# ============================================================================


class TestBulkCommand:
    """Tests for the bulk command."""

    @pytest.fixture
    def recipes_file(self, tmp_path, pancake_recipe_dict):
        soup = {
            "title": "Soup",
            "servings": 2,
            "ingredients": [{"name": "leeks", "quantity": "1"}],
        }
        path = tmp_path / "week.json"
        path.write_text(json.dumps([pancake_recipe_dict, soup]), encoding="utf-8")
        return path

    def test_bulk_text(self, runner, recipes_file):
        result = runner.invoke(cli, ["bulk", str(recipes_file), "--servings", "4"])

        assert result.exit_code == 0
        assert "RECIPE: Pancakes" in result.output
        assert "RECIPE: Soup" in result.output
        assert "Scaled 2 recipe(s) to 4 servings each" in result.output
        assert "Total servings: 8" in result.output

    def test_bulk_json(self, runner, recipes_file):
        result = runner.invoke(cli, ["bulk", str(recipes_file), "-S", "4", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [r["scaling_factor"] for r in data] == [1.0, 2.0]
        assert data[1]["ingredients"][0]["quantity"] == "2"

    def test_bulk_invalid_servings(self, runner, recipes_file):
        result = runner.invoke(cli, ["bulk", str(recipes_file), "--servings=0"])

        assert result.exit_code == 1
        assert "RECIPE:" not in result.output

    def test_bulk_requires_list(self, runner, recipe_file):
        result = runner.invoke(cli, ["bulk", str(recipe_file), "-S", "4"])

        assert result.exit_code == 1
        assert "JSON list" in result.output


# ============================================================================
# Utility Command Tests
# ============================================================================


class TestTimeCommand:
    """Tests for the time command."""

    def test_doubled(self, runner):
        result = runner.invoke(cli, ["time", "30 minutes", "--factor", "2"])

        assert result.exit_code == 0
        assert result.output.strip() == "39 minutes"

    def test_unparseable(self, runner):
        result = runner.invoke(cli, ["time", "overnight", "-f", "2"])

        assert result.exit_code == 0
        assert result.output.strip() == "overnight"

    def test_zero_factor(self, runner):
        result = runner.invoke(cli, ["time", "30 minutes", "--factor", "0"])

        assert result.exit_code == 1
        assert "must be positive" in result.output


class TestFractionCommand:
    """Tests for the fraction command."""

    def test_with_unit(self, runner):
        result = runner.invoke(cli, ["fraction", "1.5", "cups"])

        assert result.exit_code == 0
        assert result.output.strip() == "1 1/2 cups"

    def test_without_unit(self, runner):
        result = runner.invoke(cli, ["fraction", "0.75"])

        assert result.exit_code == 0
        assert result.output.strip() == "3/4"

    @pytest.mark.parametrize("amount", ["nan", "inf"])
    def test_non_finite_amount(self, runner, amount):
        result = runner.invoke(cli, ["fraction", amount, "cups"])

        assert result.exit_code == 1
        assert "finite number" in result.output
