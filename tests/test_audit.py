"""
Tests for the audit log sink.
"""

import json
import pytest

from tom_ai_agent.core.models import AuditRecord
from tom_ai_agent.services.audit import AuditLogService


@pytest.mark.asyncio
async def test_records_are_appended_as_json_lines(tmp_path):
    log_file = tmp_path / "audit" / "tom_audit.jsonl"
    audit = AuditLogService(log_file)

    await audit.record(AuditRecord(
        user_id="anonymous",
        action="chat_query",
        resource="tom_chat",
        details={"query": "What's on today?", "cases_found": 2, "query_type": "today"},
    ))
    await audit.record(AuditRecord(user_id="nurse-7", action="chat_query", resource="tom_chat"))

    with open(log_file, "r", encoding="utf-8") as f:
        entries = [json.loads(line) for line in f if line.strip()]

    assert [e["user_id"] for e in entries] == ["anonymous", "nurse-7"]
    assert entries[0]["details"]["cases_found"] == 2
    assert all(e["gdpr_compliant"] and e["data_encrypted"] for e in entries)
    assert entries[0]["id"] != entries[1]["id"]
