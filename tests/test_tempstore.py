from __future__ import annotations

from pathlib import Path

import pytest

from pdfsuite import ResourceError, TempArtifact, TempResourceStore


def test_created_artifacts_have_unique_names(tmp_path: Path) -> None:
    store = TempResourceStore(tmp_path / "root")

    first = store.create("input.pdf")
    second = store.create("input.pdf")

    assert first.path != second.path
    assert first.name.endswith("-input.pdf")
    assert first.path.parent == tmp_path / "root"
    assert not first.exists()


def test_create_strips_directory_components(tmp_path: Path) -> None:
    store = TempResourceStore(tmp_path)

    artifact = store.create("../../escape.pdf")

    assert artifact.path.parent == tmp_path
    assert artifact.name.endswith("-escape.pdf")


def test_write_read_delete(tmp_path: Path) -> None:
    store = TempResourceStore(tmp_path)
    artifact = store.write(store.create("data.bin"), b"payload")

    assert store.read(artifact) == b"payload"

    store.delete(artifact)
    store.delete(artifact)
    assert not artifact.exists()


def test_read_missing_artifact_raises_resource_error(tmp_path: Path) -> None:
    store = TempResourceStore(tmp_path)

    with pytest.raises(ResourceError):
        store.read(TempArtifact(tmp_path / "missing.pdf"))


def test_write_failure_raises_resource_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_bytes(b"")
    store = TempResourceStore(tmp_path)

    with pytest.raises(ResourceError):
        store.write(TempArtifact(blocker / "child.pdf"), b"data")


def test_unusable_root_raises_resource_error(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_bytes(b"")
    store = TempResourceStore(blocker / "root")

    with pytest.raises(ResourceError):
        store.create("input.pdf")


def test_scope_removes_everything_on_success(tmp_path: Path) -> None:
    store = TempResourceStore(tmp_path / "root")

    with store.scope() as scope:
        staged = scope.stage("input.pdf", b"data")
        output = scope.create("result.pdf", subdir="out")
        output.path.write_bytes(b"result")
        scope.directory("profile")
        assert staged.path.read_bytes() == b"data"
        assert len(scope.artifacts) == 2

    assert list((tmp_path / "root").iterdir()) == []


def test_scope_removes_everything_on_failure(tmp_path: Path) -> None:
    store = TempResourceStore(tmp_path / "root")

    with pytest.raises(RuntimeError):
        with store.scope() as scope:
            scope.stage("input.pdf", b"data")
            raise RuntimeError("tool crashed")

    assert list((tmp_path / "root").iterdir()) == []


def test_concurrent_scopes_do_not_share_paths(tmp_path: Path) -> None:
    store = TempResourceStore(tmp_path)

    with store.scope() as first, store.scope() as second:
        assert first.path != second.path
        assert first.create("input.pdf").path != second.create("input.pdf").path
