import datetime

import pytest

from idworker.snowflake import DEFAULT_EPOCH, Snowflake


class TestSnowflakeParse:
    def test_parse_splits_fields(self):
        value = (123456 << 22) | (17 << 17) | (9 << 12) | 4095

        snowflake = Snowflake.parse(value)

        assert snowflake.timestamp == 123456
        assert snowflake.datacenter_id == 17
        assert snowflake.worker_id == 9
        assert snowflake.sequence == 4095
        assert snowflake.epoch == DEFAULT_EPOCH
        assert snowflake.to_int() == value

    def test_parse_rejects_negative_values(self):
        with pytest.raises(ValueError):
            Snowflake.parse(-1)

    def test_parse_rejects_values_wider_than_63_bits(self):
        with pytest.raises(ValueError):
            Snowflake.parse(1 << 63)

    def test_node_id_combines_datacenter_and_worker(self):
        snowflake = Snowflake(timestamp=0, datacenter_id=2, worker_id=3, sequence=0)
        assert snowflake.node_id == 67


class TestSnowflakeTime:
    def test_unix_ms_adds_epoch(self):
        snowflake = Snowflake(
            timestamp=1,
            datacenter_id=1,
            worker_id=1,
            sequence=0,
            epoch=1399943202863,
        )

        assert snowflake.unix_ms == 1399943202864

    def test_datetime_is_utc(self):
        snowflake = Snowflake(
            timestamp=0,
            datacenter_id=0,
            worker_id=0,
            sequence=0,
            epoch=0,
        )

        assert snowflake.datetime == datetime.datetime(
            1970, 1, 1, tzinfo=datetime.timezone.utc
        )

    def test_to_dict(self):
        snowflake = Snowflake(timestamp=1, datacenter_id=1, worker_id=1, sequence=7)
        record = snowflake.to_dict()

        assert record["id"] == snowflake.to_int()
        assert record["node_id"] == 33
        assert record["sequence"] == 7
        assert record["unix_ms"] == DEFAULT_EPOCH + 1
        assert record["datetime"].startswith("2014-05-13T")

    def test_ordering_follows_timestamp_then_sequence(self):
        earlier = Snowflake(timestamp=5, datacenter_id=0, worker_id=0, sequence=4095)
        later = Snowflake(timestamp=6, datacenter_id=0, worker_id=0, sequence=0)

        assert earlier < later
        assert earlier.to_int() < later.to_int()
