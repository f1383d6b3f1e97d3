"""Tests for the export and formats CLI commands."""

import json
import subprocess
import sys
from pathlib import Path

import pytest

from design_export.__main__ import main

REPO_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture
def design_file(tmp_path, components, design_tokens):
    """Write a design document to disk."""
    path = tmp_path / "landing.json"
    path.write_text(
        json.dumps({"components": components, "designTokens": design_tokens}),
        encoding="utf-8",
    )
    return path


# =============================================================================
# export
# =============================================================================


@pytest.mark.unit
def test_export_to_output_dir(design_file, tmp_path, capsys):
    out_dir = tmp_path / "out"
    code = main(
        ["export", str(design_file), "-f", "figma", "-n", "My Site", "-o", str(out_dir)]
    )

    assert code == 0
    result = json.loads(capsys.readouterr().out)
    assert result["format"] == "figma"
    assert result["fileName"] == "My Site-figma.json"
    assert result["fileKey"].startswith("exports/My Site/figma-")
    stored = out_dir / result["fileKey"]
    assert json.loads(stored.read_text(encoding="utf-8"))["name"] == "My Site"


@pytest.mark.unit
def test_export_project_key_and_memory_backend(design_file, capsys):
    code = main(
        ["export", str(design_file), "--format", "html", "--project-key", "42", "-b", "memory"]
    )

    assert code == 0
    result = json.loads(capsys.readouterr().out)
    assert result["fileKey"].startswith("exports/42/html-")
    assert result["url"] == f"memory://{result['fileKey']}"
    # Name falls back to the design file stem
    assert result["fileName"] == "landing.html"


@pytest.mark.unit
def test_export_dry_run_prints_payload(design_file, capsys):
    code = main(["export", str(design_file), "-f", "webflow", "-n", "Site", "--dry-run"])

    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["name"] == "Site"
    assert payload["pages"][0]["slug"] == "index"


@pytest.mark.unit
def test_export_configured_backend(design_file, tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("EXPORT_STORAGE_BACKEND", "local")
    monkeypatch.setenv("EXPORT_STORAGE_DIR", str(tmp_path / "store"))

    assert main(["export", str(design_file), "-f", "framer", "-n", "Site"]) == 0
    result = json.loads(capsys.readouterr().out)
    assert (tmp_path / "store" / result["fileKey"]).exists()


@pytest.mark.unit
def test_export_missing_file(tmp_path):
    assert main(["export", str(tmp_path / "missing.json"), "-f", "html"]) == 1


@pytest.mark.unit
def test_export_invalid_component(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"components": [{"title": "no id"}]}), encoding="utf-8")
    assert main(["export", str(path), "-f", "html", "-b", "memory"]) == 1


@pytest.mark.unit
@pytest.mark.parametrize(
    "document",
    ['{"components": 5}', '"hero"', '{"components": [{"id": "c1", "type": "hero", "width": NaN}]}'],
)
def test_export_malformed_design_exits_cleanly(tmp_path, document):
    path = tmp_path / "bad.json"
    path.write_text(document, encoding="utf-8")
    assert main(["export", str(path), "-f", "html", "--dry-run"]) == 1
    assert main(["export", str(path), "-f", "figma", "-b", "memory"]) == 1


@pytest.mark.unit
def test_export_http_without_url(design_file, monkeypatch):
    monkeypatch.delenv("EXPORT_STORAGE_URL", raising=False)
    assert main(["export", str(design_file), "-f", "html", "-b", "http"]) == 1


@pytest.mark.unit
def test_export_rejects_unknown_format(design_file):
    with pytest.raises(SystemExit) as exc_info:
        main(["export", str(design_file), "-f", "sketch"])
    assert exc_info.value.code == 2


# =============================================================================
# formats / help
# =============================================================================


@pytest.mark.unit
def test_formats_lists_every_format(capsys):
    assert main(["formats"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split()[0] for line in lines] == ["framer", "figma", "webflow", "html"]
    assert "text/html" in lines[-1]


@pytest.mark.unit
def test_no_command_shows_help(capsys):
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().out


@pytest.mark.unit
def test_unknown_command(capsys):
    assert main(["publish"]) == 1
    assert "Commands:" in capsys.readouterr().out


@pytest.mark.integration
def test_module_entry_point():
    """python -m design_export should run as a module."""
    result = subprocess.run(
        [sys.executable, "-m", "design_export", "formats"],
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
        timeout=30,
    )
    assert result.returncode == 0
    assert "figma" in result.stdout


@pytest.mark.unit
def test_config_shows_resolved_values(monkeypatch, capsys):
    monkeypatch.setenv("EXPORT_STORAGE_BACKEND", "memory")
    monkeypatch.setenv("EXPORT_STORAGE_TOKEN", "secret")

    assert main(["config", "--category", "storage"]) == 0
    out = capsys.readouterr().out
    assert "EXPORT_STORAGE_BACKEND" in out
    assert "memory" in out
    assert "secret" not in out
    assert "EXPORT_LOG_LEVEL" not in out
