from __future__ import annotations

import json
from pathlib import Path

from ziwei_report.domain.vocabulary import PalaceCategory
from ziwei_report.infra.content_repo import JSONContentRepository


def test_json_content_repo_missing_file(tmp_path: Path) -> None:
    repo = JSONContentRepository(str(tmp_path / "absent.json"))
    # missing file behaves like empty content
    assert repo.get_palace_guidance(PalaceCategory.CAREER) is None
    assert repo.get_monthly_plan("collaborator") is None


def test_json_content_repo_reads_once(tmp_path: Path) -> None:
    path = tmp_path / "content.json"
    path.write_text(json.dumps({"guidance": {"career": {"keyActions": ["a"]}}}), encoding="utf-8")
    repo = JSONContentRepository(str(path))
    assert repo.get_palace_guidance(PalaceCategory.CAREER) == {"keyActions": ["a"]}
    assert repo.get_palace_guidance("career") == {"keyActions": ["a"]}
    # later edits are not picked up by the same instance
    path.write_text(json.dumps({"guidance": {}}), encoding="utf-8")
    assert repo.get_palace_guidance(PalaceCategory.CAREER) == {"keyActions": ["a"]}


def test_json_content_repo_ignores_malformed_sections(tmp_path: Path) -> None:
    path = tmp_path / "content.json"
    path.write_text(json.dumps({"guidance": ["not", "a", "mapping"]}), encoding="utf-8")
    repo = JSONContentRepository(str(path))
    assert repo.get_palace_guidance(PalaceCategory.CAREER) is None
