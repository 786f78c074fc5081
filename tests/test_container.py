from __future__ import annotations

import json
import logging

from src.plantation_checkroll.plantation_checkroll.container import build_container
from src.plantation_checkroll.plantation_checkroll.core.logging_config import PACKAGE_LOGGER, JSONFormatter
from src.plantation_checkroll.plantation_checkroll.main import create_toolkit


def test_build_container_wires_a_working_toolkit(master_data):
    container = build_container(master_data=master_data, seed=1)

    records = container.synthesizer.generate_realistic_batch(25, "2026-02-13T00:15:00.000Z")
    assert container.validator.validate_batch(records).all_valid
    assert container.summary_service.build_summary(records).total_records == 25


def test_seeded_containers_are_reproducible(master_data):
    a = build_container(master_data=master_data, seed=5).synthesizer.generate_batch(10, {"collectedDate": "x"})
    b = build_container(master_data=master_data, seed=5).synthesizer.generate_batch(10, {"collectedDate": "x"})
    assert a == b


def test_create_toolkit_uses_testing_settings(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.delenv("CHECKROLL_ENV", raising=False)

    container = create_toolkit()

    assert container.tables.estate_id == 4224
    assert container.tables.job_type_ids == (3, 5, 6, 7, 8)
    assert isinstance(logging.getLogger(PACKAGE_LOGGER).handlers[0].formatter, logging.Formatter)


def test_json_formatter_carries_record_context():
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "failed", None, None)
    record.job_type_id = 3
    record.day_type = 1
    line = JSONFormatter().format(record)
    assert '"job_type_id": 3' in line
    assert '"level": "WARNING"' in line


def test_json_formatter_is_one_parseable_line():
    record = logging.LogRecord("x", logging.INFO, __file__, 7, "batch of %d", (3,), None)
    record.record_count = 3
    entry = json.loads(JSONFormatter().format(record))
    assert entry["message"] == "batch of 3"
    assert entry["record_count"] == 3
    assert entry["where"].endswith(":7")
    assert "amount" not in entry
