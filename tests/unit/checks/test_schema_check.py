from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

import preflight.checks.schema as schema_module
from preflight.core.exceptions import ExitCode, SchemaFileMissing, SchemaGenerationFailed


class _Recorder:
    def __init__(self, returncode: int = 0, error: Exception | None = None) -> None:
        self.returncode = returncode
        self.error = error
        self.calls = []

    def __call__(self, args, **kwargs):
        self.calls.append((args, kwargs))
        if self.error is not None:
            raise self.error
        return subprocess.CompletedProcess(args, self.returncode)


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "schema.prisma"
    path.write_text("datasource db {}\n", encoding="utf-8")
    return path


def test_resolve_schema_path_uses_default_when_unset(make_config):
    assert schema_module.resolve_schema_path(make_config()) == Path("./prisma/schema.prisma")


def test_resolve_schema_path_honors_override(make_config, schema_file):
    assert schema_module.resolve_schema_path(make_config(PRISMA_SCHEMA_PATH=str(schema_file))) == schema_file


def test_missing_schema_file_skips_generation(monkeypatch, make_config, tmp_path):
    recorder = _Recorder()
    monkeypatch.setattr(schema_module.subprocess, "run", recorder)
    missing = tmp_path / "nope" / "schema.prisma"

    with pytest.raises(SchemaFileMissing) as excinfo:
        schema_module.check_schema(make_config(PRISMA_SCHEMA_PATH=str(missing)))

    assert excinfo.value.exit_code == ExitCode.SCHEMA_FILE_MISSING
    assert str(missing) in excinfo.value.message
    assert recorder.calls == []


def test_directory_is_not_a_schema_file(monkeypatch, make_config, tmp_path):
    monkeypatch.setattr(schema_module.subprocess, "run", _Recorder())

    with pytest.raises(SchemaFileMissing):
        schema_module.check_schema(make_config(PRISMA_SCHEMA_PATH=str(tmp_path)))


def test_generation_runs_default_command_with_output_discarded(monkeypatch, make_config, schema_file):
    recorder = _Recorder()
    monkeypatch.setattr(schema_module.subprocess, "run", recorder)

    detail = schema_module.check_schema(make_config(PRISMA_SCHEMA_PATH=str(schema_file)))

    assert detail == "Prisma schema is valid and client generated."
    assert len(recorder.calls) == 1
    args, kwargs = recorder.calls[0]
    assert args == ["npx", "prisma", "generate"]
    assert kwargs["stdin"] is subprocess.DEVNULL
    assert kwargs["stdout"] is subprocess.DEVNULL
    assert kwargs["stderr"] is subprocess.DEVNULL


def test_nonzero_exit_fails_generation(monkeypatch, make_config, schema_file):
    monkeypatch.setattr(schema_module.subprocess, "run", _Recorder(returncode=1))

    with pytest.raises(SchemaGenerationFailed) as excinfo:
        schema_module.check_schema(make_config(PRISMA_SCHEMA_PATH=str(schema_file)))

    assert excinfo.value.exit_code == ExitCode.SCHEMA_GENERATION_FAILED
    assert "`npx prisma generate`" in excinfo.value.suggestion


def test_command_that_cannot_start_fails_generation(monkeypatch, make_config, schema_file):
    monkeypatch.setattr(schema_module.subprocess, "run", _Recorder(error=FileNotFoundError("npx")))
    config = make_config(PRISMA_SCHEMA_PATH=str(schema_file), PRISMA_GENERATE_COMMAND="pnpm prisma generate")

    with pytest.raises(SchemaGenerationFailed) as excinfo:
        schema_module.check_schema(config)

    assert "`pnpm prisma generate`" in excinfo.value.suggestion
