import msgspec
import pytest
from click.testing import CliRunner

from idworker.cli import idworker
from idworker.env import Env
from idworker.snowflake import DEFAULT_EPOCH, Snowflake
from idworker.snowflake import snowflake_generator as snowflake_generator_module


@pytest.fixture
def runner(monkeypatch, tmp_path) -> CliRunner:
    monkeypatch.chdir(tmp_path)
    for envar_name in Env.types_map():
        monkeypatch.delenv(envar_name, raising=False)

    return CliRunner()


class TestGenerateCommand:
    def test_generates_single_id(self, runner: CliRunner):
        result = runner.invoke(idworker, ["generate"])

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 1
        assert int(lines[0]) > 0

    def test_generates_increasing_ids_for_node(self, runner: CliRunner):
        result = runner.invoke(
            idworker,
            ["generate", "--count", "5", "--worker-id", "2", "--datacenter-id", "3"],
        )

        assert result.exit_code == 0

        ids = [int(line) for line in result.output.strip().splitlines()]
        assert len(ids) == 5
        assert ids == sorted(set(ids))

        for snowflake_id in ids:
            snowflake = Snowflake.parse(snowflake_id)
            assert snowflake.worker_id == 2
            assert snowflake.datacenter_id == 3

    def test_reads_env_file(self, runner: CliRunner, tmp_path):
        env_file = tmp_path / "node.env"
        env_file.write_text("IDWORKER_WORKER_ID=17\n")

        result = runner.invoke(idworker, ["generate", "--env-file", str(env_file)])

        assert result.exit_code == 0
        assert Snowflake.parse(int(result.output.strip())).worker_id == 17

    def test_json_output(self, runner: CliRunner):
        result = runner.invoke(
            idworker,
            ["generate", "--count", "2", "--worker-id", "1", "--json"],
        )

        assert result.exit_code == 0

        records = msgspec.json.decode(result.output)
        assert len(records) == 2
        assert records[0]["worker_id"] == 1
        assert records[1]["id"] > records[0]["id"]

    def test_out_of_range_worker_id_is_usage_error(self, runner: CliRunner):
        result = runner.invoke(idworker, ["generate", "--worker-id=32"])

        assert result.exit_code == 2
        assert "worker_id must be 0-31" in result.output

    def test_invalid_env_value_is_usage_error(self, runner: CliRunner, monkeypatch):
        monkeypatch.setenv("IDWORKER_DATACENTER_ID", "many")

        result = runner.invoke(idworker, ["generate"])

        assert result.exit_code == 2

    def test_clock_regression_exits_with_error(self, runner: CliRunner, monkeypatch):
        start = DEFAULT_EPOCH + 1_000
        readings = iter([start, start, start - 5])

        monkeypatch.setattr(
            snowflake_generator_module,
            "system_clock",
            lambda: next(readings, start - 5),
        )

        result = runner.invoke(idworker, ["generate", "--count", "2"])

        assert result.exit_code == 1
        assert "Clock moved backwards. Refusing to generate id for 5 milliseconds" in result.output


class TestDecodeCommand:
    def test_decodes_fields(self, runner: CliRunner):
        value = (1 << 22) | (1 << 17) | (1 << 12)

        result = runner.invoke(idworker, ["decode", str(value)])

        assert result.exit_code == 0

        record = msgspec.json.decode(result.output)
        assert record["timestamp"] == 1
        assert record["datacenter_id"] == 1
        assert record["worker_id"] == 1
        assert record["sequence"] == 0
        assert record["unix_ms"] == 1399943202864

    def test_custom_epoch(self, runner: CliRunner):
        result = runner.invoke(idworker, ["decode", str(5 << 22), "--epoch", "1000"])

        assert result.exit_code == 0
        assert msgspec.json.decode(result.output)["unix_ms"] == 1005

    def test_rejects_negative_id(self, runner: CliRunner):
        result = runner.invoke(idworker, ["decode", "--", "-1"])

        assert result.exit_code == 2
